"""Get replies use case."""

from datetime import datetime

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.domain.model import Reply
from bulletin.domain.service import ReplyService
from bulletin.domain.value import CommentId, ReplyId


class ReplyItem(BaseModel):
    """Reply item in response."""

    reply_id: int
    comment_id: int
    content: str
    writer: str
    created_at: datetime
    modified_at: datetime


def to_reply_item(reply: Reply) -> ReplyItem:
    return ReplyItem(
        reply_id=reply.id,
        comment_id=reply.comment_id,
        content=reply.content,
        writer=reply.writer,
        created_at=reply.created_at,
        modified_at=reply.modified_at,
    )


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: int


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    comment_id: int
    replies: list[ReplyItem]


class GetRepliesUseCase(BaseUseCase):
    """Use case for listing the replies of a comment."""

    def __init__(self, reply_service: ReplyService) -> None:
        self.reply_service = reply_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        replies = await self.reply_service.get_replies(CommentId(request.comment_id))
        return GetRepliesResponse(
            comment_id=request.comment_id,
            replies=[to_reply_item(reply) for reply in replies],
        )


class GetReplyRequest(BaseModel):
    """Get reply request."""

    reply_id: int


class GetReplyUseCase(BaseUseCase):
    """Use case for reading one reply."""

    def __init__(self, reply_service: ReplyService) -> None:
        self.reply_service = reply_service

    async def execute(self, request: GetReplyRequest) -> ReplyItem:
        """Execute get reply flow.

        Raises:
            NotFoundError: If the reply does not exist
        """
        reply = await self.reply_service.get_reply(ReplyId(request.reply_id))
        return to_reply_item(reply)
