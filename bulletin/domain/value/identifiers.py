"""Strongly typed identifiers for bulletin board entities.

All identifiers are store-assigned integer surrogate keys. NewType keeps
them from being mixed up at type-check time.
"""

from typing import NewType

BoardId = NewType("BoardId", int)
CommentId = NewType("CommentId", int)
ReplyId = NewType("ReplyId", int)
FileId = NewType("FileId", int)
LayoutId = NewType("LayoutId", int)
CardId = NewType("CardId", int)
MenuId = NewType("MenuId", int)
