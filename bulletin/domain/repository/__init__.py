"""Repository interfaces for the bulletin board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from bulletin.domain.repository.board import BoardRepository
from bulletin.domain.repository.comment import CommentRepository
from bulletin.domain.repository.file_attachment import FileAttachmentRepository
from bulletin.domain.repository.reply import ReplyRepository
from bulletin.domain.repository.screen_layout import (
    CardRepository,
    CentralMenuRepository,
    ScreenLayoutRepository,
)

__all__ = [
    "BoardRepository",
    "CommentRepository",
    "ReplyRepository",
    "FileAttachmentRepository",
    "ScreenLayoutRepository",
    "CardRepository",
    "CentralMenuRepository",
]
