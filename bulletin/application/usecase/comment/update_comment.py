"""Update and delete comment use cases."""

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.domain.service import CommentService
from bulletin.domain.value import CommentId


class CommentMessageResponse(BaseModel):
    """Comment mutation response."""

    comment_id: int
    message: str


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    content: str
    writer: str


class UpdateCommentUseCase(BaseUseCase):
    """Use case for replacing a comment's content and writer."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentMessageResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            ValidationError: If the content is too long
        """
        comment = await self.comment_service.update_comment(
            comment_id=CommentId(request.comment_id),
            content=request.content,
            writer=request.writer,
        )
        return CommentMessageResponse(
            comment_id=comment.id, message="Comment updated successfully"
        )


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment with its whole sub-tree."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> CommentMessageResponse:
        """Execute delete comment flow.

        Descendant comments and every reply below the comment go with it.

        Raises:
            NotFoundError: If the comment does not exist
        """
        await self.comment_service.delete_comment(CommentId(request.comment_id))
        return CommentMessageResponse(
            comment_id=request.comment_id, message="Comment deleted successfully"
        )
