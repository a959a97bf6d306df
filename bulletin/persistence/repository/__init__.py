"""SQL repository implementations (MariaDB and Oracle)."""

from bulletin.persistence.repository.board import SqlBoardRepository
from bulletin.persistence.repository.comment import SqlCommentRepository
from bulletin.persistence.repository.file_attachment import (
    SqlFileAttachmentRepository,
)
from bulletin.persistence.repository.reply import SqlReplyRepository
from bulletin.persistence.repository.screen_layout import (
    SqlCardRepository,
    SqlCentralMenuRepository,
    SqlScreenLayoutRepository,
)

__all__ = [
    "SqlBoardRepository",
    "SqlCommentRepository",
    "SqlReplyRepository",
    "SqlFileAttachmentRepository",
    "SqlScreenLayoutRepository",
    "SqlCardRepository",
    "SqlCentralMenuRepository",
]
