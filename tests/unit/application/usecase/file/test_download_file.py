"""Unit tests for file use cases."""

import pytest

from bulletin.application.usecase.file import (
    DownloadFileRequest,
    DownloadFileResponse,
    DownloadFileUseCase,
)
from bulletin.domain.service import FileService
from bulletin.domain.value import BoardId, UploadedFile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDownloadFileUseCase:
    """Tests for DownloadFileUseCase."""

    @pytest.mark.asyncio
    async def test_download_defaults_content_type(self, unit_env):
        # Arrange
        file_service = await unit_env.get(FileService)
        use_case = await unit_env.get(DownloadFileUseCase)
        [saved] = await file_service.store_files(
            BoardId(1), [UploadedFile(original_filename="blob", data=b"\x00\x01")]
        )

        # Act
        response = await use_case.execute(DownloadFileRequest(file_id=saved.id))

        # Assert
        assert response.filename == "blob"
        assert response.content_type == "application/octet-stream"
        assert response.content == b"\x00\x01"

    def test_content_disposition_percent_encodes_filename(self):
        response = DownloadFileResponse(
            filename="보고서 1.pdf", content_type="application/pdf", content=b""
        )

        assert response.content_disposition == (
            "attachment; filename*=UTF-8''%EB%B3%B4%EA%B3%A0%EC%84%9C%201.pdf"
        )
