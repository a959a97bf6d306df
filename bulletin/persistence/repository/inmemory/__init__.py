"""In-memory repository implementations for testing."""

from .board import InMemoryBoardRepository
from .comment import InMemoryCommentRepository
from .file_attachment import InMemoryFileAttachmentRepository
from .reply import InMemoryReplyRepository
from .screen_layout import (
    InMemoryCardRepository,
    InMemoryCentralMenuRepository,
    InMemoryScreenLayoutRepository,
)

__all__ = [
    "InMemoryBoardRepository",
    "InMemoryCardRepository",
    "InMemoryCentralMenuRepository",
    "InMemoryCommentRepository",
    "InMemoryFileAttachmentRepository",
    "InMemoryReplyRepository",
    "InMemoryScreenLayoutRepository",
]
