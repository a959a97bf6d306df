"""List files use case."""

from datetime import datetime

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.domain.model import FileAttachment
from bulletin.domain.service import FileService
from bulletin.domain.value import BoardId


class FileItem(BaseModel):
    """Attachment item in response."""

    file_id: int
    board_id: int
    original_filename: str
    stored_filename: str
    file_size: int
    file_type: str | None
    created_at: datetime


def to_file_item(attachment: FileAttachment) -> FileItem:
    return FileItem(
        file_id=attachment.id,
        board_id=attachment.board_id,
        original_filename=attachment.original_filename,
        stored_filename=attachment.stored_filename,
        file_size=attachment.file_size,
        file_type=attachment.file_type,
        created_at=attachment.created_at,
    )


class ListFilesRequest(BaseModel):
    """List files request."""

    board_id: int


class ListFilesResponse(BaseModel):
    """List files response."""

    board_id: int
    files: list[FileItem]


class ListFilesUseCase(BaseUseCase):
    """Use case for listing the attachments of a board."""

    def __init__(self, file_service: FileService) -> None:
        self.file_service = file_service

    async def execute(self, request: ListFilesRequest) -> ListFilesResponse:
        attachments = await self.file_service.list_files(BoardId(request.board_id))
        return ListFilesResponse(
            board_id=request.board_id,
            files=[to_file_item(a) for a in attachments],
        )
