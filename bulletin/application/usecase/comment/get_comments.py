"""Get comments use cases.

Comments are returned as nested trees: each item carries its replies and
its children, recursively.
"""

from datetime import datetime

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.application.usecase.reply import ReplyItem
from bulletin.application.usecase.reply.get_replies import to_reply_item
from bulletin.domain.model import Comment
from bulletin.domain.service import CommentService
from bulletin.domain.value import BoardId, CommentId


class CommentItem(BaseModel):
    """Comment item in response, with its sub-tree."""

    comment_id: int
    board_id: int
    parent_comment_id: int | None
    content: str
    writer: str
    created_at: datetime
    modified_at: datetime
    replies: list[ReplyItem]
    children: list["CommentItem"]


def to_comment_item(comment: Comment) -> CommentItem:
    """Convert a comment and its loaded sub-tree to a response item."""
    return CommentItem(
        comment_id=comment.id,
        board_id=comment.board_id,
        parent_comment_id=comment.parent_comment_id,
        content=comment.content,
        writer=comment.writer,
        created_at=comment.created_at,
        modified_at=comment.modified_at,
        replies=[to_reply_item(reply) for reply in comment.replies],
        children=[to_comment_item(child) for child in comment.children],
    )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    board_id: int


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    board_id: int
    comments: list[CommentItem]


class GetCommentsUseCase(BaseUseCase):
    """Use case for loading the comment tree of a board."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Returns:
            Top-level comments in creation order with nested sub-trees
        """
        tree = await self.comment_service.get_comment_tree(BoardId(request.board_id))
        return GetCommentsResponse(
            board_id=request.board_id,
            comments=[to_comment_item(comment) for comment in tree],
        )


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: int


class GetCommentUseCase(BaseUseCase):
    """Use case for loading one comment with its sub-tree."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.get_comment(
            CommentId(request.comment_id)
        )
        return to_comment_item(comment)


class GetChildCommentsResponse(BaseModel):
    """Get child comments response."""

    parent_comment_id: int
    children: list[CommentItem]


class GetChildCommentsUseCase(BaseUseCase):
    """Use case for loading the direct children of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetChildCommentsResponse:
        children = await self.comment_service.get_children(
            CommentId(request.comment_id)
        )
        return GetChildCommentsResponse(
            parent_comment_id=request.comment_id,
            children=[to_comment_item(child) for child in children],
        )
