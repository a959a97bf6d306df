"""Domain model entities for the bulletin board."""

from bulletin.domain.model.board import Board
from bulletin.domain.model.comment import Comment
from bulletin.domain.model.file_attachment import FileAttachment
from bulletin.domain.model.reply import Reply
from bulletin.domain.model.screen_layout import Card, CentralMenu, ScreenLayout

__all__ = [
    "Board",
    "Comment",
    "Reply",
    "FileAttachment",
    "ScreenLayout",
    "Card",
    "CentralMenu",
]
