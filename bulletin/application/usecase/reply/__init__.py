"""Reply use cases."""

from .get_replies import (
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    GetReplyRequest,
    GetReplyUseCase,
    ReplyItem,
)
from .manage_reply import (
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    ReplyMessageResponse,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)

__all__ = [
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
    "GetReplyRequest",
    "GetReplyUseCase",
    "ReplyItem",
    "ReplyMessageResponse",
    "UpdateReplyRequest",
    "UpdateReplyUseCase",
]
