"""Board entity."""

from datetime import datetime

from pydantic import Field

from bulletin.domain.model.comment import Comment
from bulletin.domain.model.common import DomainModel
from bulletin.domain.model.file_attachment import FileAttachment
from bulletin.domain.value import BoardId


class Board(DomainModel):
    """Board (question) entity.

    Root aggregate owning top-level comments and file attachments.
    """

    id: BoardId | None = None
    title: str = Field(min_length=1, max_length=255)
    content: str
    writer: str = Field(min_length=1, max_length=100)
    view_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    modified_at: datetime = Field(default_factory=datetime.now)

    # Transient
    files: list[FileAttachment] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
