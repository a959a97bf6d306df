"""File attachment entity."""

from datetime import datetime

from pydantic import Field

from bulletin.domain.model.common import DomainModel
from bulletin.domain.value import BoardId, FileId


class FileAttachment(DomainModel):
    """Metadata for a file uploaded to a board.

    The bytes live in the file store under `stored_filename`; the original
    client filename is only kept for downloads.
    """

    id: FileId | None = None
    board_id: BoardId
    original_filename: str
    stored_filename: str
    file_size: int = Field(ge=0)
    file_type: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
