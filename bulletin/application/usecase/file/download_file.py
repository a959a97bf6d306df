"""Download and delete file use cases."""

from urllib.parse import quote

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.domain.service import FileService
from bulletin.domain.value import FileId

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class DownloadFileRequest(BaseModel):
    """Download file request."""

    file_id: int


class DownloadFileResponse(BaseModel):
    """File bytes with the headers needed to serve them."""

    filename: str
    content_type: str
    content: bytes

    @property
    def content_disposition(self) -> str:
        """Attachment disposition carrying the UTF-8 original filename."""
        return f"attachment; filename*=UTF-8''{quote(self.filename, safe='')}"


class DownloadFileUseCase(BaseUseCase):
    """Use case for downloading an attachment."""

    def __init__(self, file_service: FileService) -> None:
        self.file_service = file_service

    async def execute(self, request: DownloadFileRequest) -> DownloadFileResponse:
        """Execute download flow.

        Raises:
            NotFoundError: If the attachment row or its bytes are missing
        """
        attachment, data = await self.file_service.read_file(FileId(request.file_id))
        return DownloadFileResponse(
            filename=attachment.original_filename,
            content_type=attachment.file_type or DEFAULT_CONTENT_TYPE,
            content=data,
        )


class DeleteFileRequest(BaseModel):
    """Delete file request."""

    file_id: int


class DeleteFileUseCase(BaseUseCase):
    """Use case for deleting an attachment."""

    def __init__(self, file_service: FileService) -> None:
        self.file_service = file_service

    async def execute(self, request: DeleteFileRequest) -> None:
        await self.file_service.delete_file(FileId(request.file_id))
