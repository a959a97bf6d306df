"""Create comment use case."""

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.domain.error import ValidationError
from bulletin.domain.model import Comment
from bulletin.domain.service import CommentService
from bulletin.domain.value import BoardId, CommentId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    board_id: int | None = None  # Required for top-level comments
    parent_comment_id: int | None = None  # Set for nested comments
    content: str
    writer: str


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: int
    message: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a top-level or nested comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        With a parent_comment_id the comment is nested under that parent
        (and must stay on the parent's board if board_id is given). Without
        one it becomes a top-level comment of board_id.

        Raises:
            ValidationError: If neither board nor parent is given, or the
                parent is on another board
            NotFoundError: If the board or parent comment does not exist
        """
        if request.parent_comment_id is not None:
            if request.board_id is None:
                comment_id = await self.comment_service.create_nested_comment(
                    parent_comment_id=CommentId(request.parent_comment_id),
                    content=request.content,
                    writer=request.writer,
                )
            else:
                comment_id = await self.comment_service.create_nested(
                    Comment(
                        board_id=BoardId(request.board_id),
                        parent_comment_id=CommentId(request.parent_comment_id),
                        content=request.content,
                        writer=request.writer,
                    )
                )
        elif request.board_id is not None:
            comment_id = await self.comment_service.create_top_level_comment(
                board_id=BoardId(request.board_id),
                content=request.content,
                writer=request.writer,
            )
        else:
            raise ValidationError("Board ID is required for top-level comments")

        return CreateCommentResponse(
            comment_id=comment_id, message="Comment created successfully"
        )
