"""Domain value objects for the bulletin board."""

from bulletin.domain.value.identifiers import (
    BoardId,
    CardId,
    CommentId,
    FileId,
    LayoutId,
    MenuId,
    ReplyId,
)
from bulletin.domain.value.types import (
    CardPosition,
    DatabaseSelection,
    DatabaseType,
    UploadedFile,
)

__all__ = [
    # Identifiers
    "BoardId",
    "CommentId",
    "ReplyId",
    "FileId",
    "LayoutId",
    "CardId",
    "MenuId",
    # Types
    "CardPosition",
    "DatabaseSelection",
    "DatabaseType",
    "UploadedFile",
]
