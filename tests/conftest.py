"""Test configuration and fixtures."""

import logfire
import pytest

# Logfire must be configured before the app is created; keep tests quiet
logfire.configure(
    service_name="bulletin-backend-tests",
    environment="test",
    send_to_logfire=False,
    console=False,
)


@pytest.fixture(autouse=True)
def upload_directory(tmp_path, monkeypatch):
    """Point the upload directory at a per-test temporary directory."""
    directory = tmp_path / "uploads"
    monkeypatch.setenv("UPLOAD__DIRECTORY", str(directory))
    return directory
