"""Create, update and delete reply use cases."""

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.domain.service import ReplyService
from bulletin.domain.value import CommentId, ReplyId


class ReplyMessageResponse(BaseModel):
    """Reply mutation response."""

    reply_id: int
    message: str


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    comment_id: int
    content: str
    writer: str


class CreateReplyUseCase(BaseUseCase):
    """Use case for attaching a reply to a comment."""

    def __init__(self, reply_service: ReplyService) -> None:
        self.reply_service = reply_service

    async def execute(self, request: CreateReplyRequest) -> ReplyMessageResponse:
        """Execute create reply flow.

        Raises:
            NotFoundError: If the comment does not exist
            ValidationError: If the content is too long
        """
        reply_id = await self.reply_service.create_reply(
            comment_id=CommentId(request.comment_id),
            content=request.content,
            writer=request.writer,
        )
        return ReplyMessageResponse(
            reply_id=reply_id, message="Reply created successfully"
        )


class UpdateReplyRequest(BaseModel):
    """Update reply request."""

    reply_id: int
    content: str
    writer: str


class UpdateReplyUseCase(BaseUseCase):
    """Use case for replacing a reply's content."""

    def __init__(self, reply_service: ReplyService) -> None:
        self.reply_service = reply_service

    async def execute(self, request: UpdateReplyRequest) -> ReplyMessageResponse:
        reply = await self.reply_service.update_reply(
            reply_id=ReplyId(request.reply_id),
            content=request.content,
            writer=request.writer,
        )
        return ReplyMessageResponse(
            reply_id=reply.id, message="Reply updated successfully"
        )


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    reply_id: int


class DeleteReplyUseCase(BaseUseCase):
    """Use case for deleting a reply."""

    def __init__(self, reply_service: ReplyService) -> None:
        self.reply_service = reply_service

    async def execute(self, request: DeleteReplyRequest) -> ReplyMessageResponse:
        await self.reply_service.delete_reply(ReplyId(request.reply_id))
        return ReplyMessageResponse(
            reply_id=request.reply_id, message="Reply deleted successfully"
        )
