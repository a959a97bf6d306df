"""End-to-end tests for database selection and health endpoints."""

import pytest
from fastapi.testclient import TestClient

from bulletin.interface.api.app import create_app
from bulletin.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client(monkeypatch):
    """Create test client with test container and MariaDB as the default."""
    monkeypatch.setenv("DATABASE__TYPE", "mariadb")
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


class TestDatabaseEndpoints:
    """End-to-end tests for database API endpoints."""

    def test_default_database_type(self, client):
        response = client.get("/api/database/type")

        assert response.status_code == 200
        assert response.json() == {"database_type": "MARIADB"}

    def test_header_selects_database_for_one_request(self, client):
        selected = client.get(
            "/api/database/type", headers={"X-Database-Type": "oracle"}
        )
        following = client.get("/api/database/type")

        assert selected.json()["database_type"] == "ORACLE"
        assert following.json()["database_type"] == "MARIADB"

    def test_invalid_header_falls_back_to_default(self, client):
        response = client.get(
            "/api/database/type", headers={"X-Database-Type": "postgres"}
        )

        assert response.status_code == 200
        assert response.json()["database_type"] == "MARIADB"

    def test_switch_changes_default_for_later_requests(self, client):
        # Act
        response = client.post(
            "/api/database/switch", params={"database_type": "Oracle"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "database_type": "ORACLE",
            "message": "Successfully switched to ORACLE",
        }
        current = client.get("/api/database/type").json()
        assert current["database_type"] == "ORACLE"

    def test_switch_to_unknown_database_returns_400(self, client):
        response = client.post(
            "/api/database/switch", params={"database_type": "sqlite"}
        )

        assert response.status_code == 400
        assert client.get("/api/database/type").json()["database_type"] == "MARIADB"


class TestHealthEndpoint:
    """End-to-end tests for the health check."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["default_database"] == "MARIADB"
