"""Domain services."""

from .base import Service
from .board_service import BoardPage, BoardService
from .comment_service import CommentService
from .database_service import DatabaseSelector, DatabaseService
from .file_service import FileService, FileStore
from .reply_service import ReplyService
from .screen_layout_service import ScreenLayoutService

__all__ = [
    "BoardPage",
    "BoardService",
    "CommentService",
    "DatabaseSelector",
    "DatabaseService",
    "FileService",
    "FileStore",
    "ReplyService",
    "ScreenLayoutService",
    "Service",
]
