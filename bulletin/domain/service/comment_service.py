"""Comment domain service.

Owns the parent/child comment hierarchy: assembling nested trees for reads
and tearing sub-trees down bottom-up for deletes.
"""

from datetime import datetime

import logfire

from bulletin.config import LimitSettings
from bulletin.domain.error import NotFoundError, ValidationError
from bulletin.domain.model.comment import Comment
from bulletin.domain.repository import (
    BoardRepository,
    CommentRepository,
    ReplyRepository,
)
from bulletin.domain.value import BoardId, CommentId

from .base import Service, ensure_content_length


class CommentService(Service):
    """Domain service for comment trees."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        board_repository: BoardRepository,
        limits: LimitSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            reply_repository: Reply repository
            board_repository: Board repository (existence checks)
            limits: Content limits
        """
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.board_repository = board_repository
        self.limits = limits

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def load_tree(self, board_id: BoardId) -> list[Comment]:
        """Load the full comment tree of a board.

        Args:
            board_id: Board ID

        Returns:
            Top-level comments in ascending id order, each with replies and
            children populated recursively. Empty if the board has none.
        """
        with logfire.span("comment_service.load_tree", board_id=board_id):
            top_level = await self.comment_repository.find_top_level_by_board(
                board_id
            )
            tree = [await self._assemble(comment) for comment in top_level]
            logfire.info(
                "Comment tree loaded", board_id=board_id, top_level=len(tree)
            )
            return tree

    async def load_single(self, comment_id: CommentId) -> Comment:
        """Load one comment with its replies and full descendant sub-tree.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.load_single", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)
            return await self._assemble(comment)

    async def get_children(self, parent_comment_id: CommentId) -> list[Comment]:
        """Load the direct children of a comment, each with its sub-tree.

        Raises:
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.get_children", parent_comment_id=parent_comment_id
        ):
            if not await self.comment_repository.find_by_id(parent_comment_id):
                raise NotFoundError("Comment", parent_comment_id)
            children = await self.comment_repository.find_by_parent(
                parent_comment_id
            )
            return [await self._assemble(child) for child in children]

    async def get_comment_tree(self, board_id: BoardId) -> list[Comment]:
        return await self.load_tree(board_id)

    async def get_comment(self, comment_id: CommentId) -> Comment:
        return await self.load_single(comment_id)

    async def _assemble(self, comment: Comment) -> Comment:
        """Attach replies and recursively attach children to a comment."""
        replies = await self.reply_repository.find_by_comment(comment.id)
        children = [
            await self._assemble(child)
            for child in await self.comment_repository.find_by_parent(comment.id)
        ]
        return comment.model_copy(update={"replies": replies, "children": children})

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    async def create_top_level(self, comment: Comment) -> CommentId:
        """Persist a top-level comment.

        Any parent reference on the input is discarded.

        Raises:
            NotFoundError: If the board does not exist
            ValidationError: If the content is too long
        """
        with logfire.span("comment_service.create_top_level", board_id=comment.board_id):
            ensure_content_length(comment.content, self.limits.max_content_length)

            if not await self.board_repository.find_by_id(comment.board_id):
                logfire.warn("Board not found for comment", board_id=comment.board_id)
                raise NotFoundError("Board", comment.board_id)

            if comment.parent_comment_id is not None:
                logfire.info(
                    "Ignoring parent on top-level comment",
                    parent_comment_id=comment.parent_comment_id,
                )
            return await self._insert(
                comment.model_copy(update={"parent_comment_id": None})
            )

    async def create_nested(self, comment: Comment) -> CommentId:
        """Persist a comment under an existing parent comment.

        The parent is looked up before anything is written.

        Raises:
            ValidationError: If no parent is set, the content is too long, or
                the parent belongs to another board
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_nested",
            board_id=comment.board_id,
            parent_comment_id=comment.parent_comment_id,
        ):
            ensure_content_length(comment.content, self.limits.max_content_length)
            parent = await self._require_parent(comment.parent_comment_id)
            if parent.board_id != comment.board_id:
                logfire.warn(
                    "Parent comment belongs to another board",
                    parent_comment_id=parent.id,
                    parent_board_id=parent.board_id,
                    target_board_id=comment.board_id,
                )
                raise ValidationError("Parent comment does not belong to this board")
            return await self._insert(comment)

    async def create_top_level_comment(
        self, board_id: BoardId, content: str, writer: str
    ) -> CommentId:
        """Create a top-level comment on a board."""
        return await self.create_top_level(
            Comment(board_id=board_id, content=content, writer=writer)
        )

    async def create_nested_comment(
        self, parent_comment_id: CommentId | None, content: str, writer: str
    ) -> CommentId:
        """Create a comment under a parent; the board is taken from the parent.

        Raises:
            ValidationError: If parent_comment_id is None or content too long
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_nested_comment",
            parent_comment_id=parent_comment_id,
        ):
            ensure_content_length(content, self.limits.max_content_length)
            parent = await self._require_parent(parent_comment_id)
            return await self._insert(
                Comment(
                    board_id=parent.board_id,
                    parent_comment_id=parent.id,
                    content=content,
                    writer=writer,
                )
            )

    async def _require_parent(self, parent_comment_id: CommentId | None) -> Comment:
        if parent_comment_id is None:
            raise ValidationError("Parent comment ID is required for nested comments")
        parent = await self.comment_repository.find_by_id(parent_comment_id)
        if not parent:
            logfire.warn("Parent comment not found", parent_comment_id=parent_comment_id)
            raise NotFoundError("Parent comment", parent_comment_id)
        return parent

    async def _insert(self, comment: Comment) -> CommentId:
        now = datetime.now()
        saved = await self.comment_repository.insert(
            comment.model_copy(
                update={"id": None, "created_at": now, "modified_at": now}
            )
        )
        logfire.info(
            "Comment created",
            comment_id=saved.id,
            board_id=saved.board_id,
            parent_comment_id=saved.parent_comment_id,
        )
        return saved.id

    # ------------------------------------------------------------------
    # Update / delete
    # ------------------------------------------------------------------

    async def update_comment(
        self, comment_id: CommentId, content: str, writer: str
    ) -> Comment:
        """Replace the content and writer of a comment.

        Raises:
            NotFoundError: If the comment does not exist
            ValidationError: If the content is too long
        """
        with logfire.span("comment_service.update_comment", comment_id=comment_id):
            existing = await self.comment_repository.find_by_id(comment_id)
            if not existing:
                logfire.warn("Comment not found for update", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)
            ensure_content_length(content, self.limits.max_content_length)

            updated = existing.model_copy(
                update={
                    "content": content,
                    "writer": writer,
                    "modified_at": datetime.now(),
                }
            )
            await self.comment_repository.update(updated)
            logfire.info("Comment updated", comment_id=comment_id)
            return updated

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment together with its whole sub-tree.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            if not await self.comment_repository.find_by_id(comment_id):
                logfire.warn("Comment not found for delete", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)
            await self.delete_subtree(comment_id)

    async def delete_subtree(self, comment_id: CommentId) -> None:
        """Delete a comment, its descendants and all of their replies.

        Descendants go depth-first; every comment loses its replies before
        the comment row itself is removed. Does not check that comment_id
        exists.
        """
        with logfire.span("comment_service.delete_subtree", comment_id=comment_id):
            deleted = await self._delete_descendants(comment_id)
            await self.reply_repository.delete_by_comment(comment_id)
            await self.comment_repository.delete_by_id(comment_id)
            logfire.info(
                "Comment sub-tree deleted",
                comment_id=comment_id,
                descendants=deleted,
            )

    async def delete_board_comments(self, board_id: BoardId) -> int:
        """Delete the sub-tree of every top-level comment of a board.

        Returns:
            Number of top-level comments deleted
        """
        top_level = await self.comment_repository.find_top_level_by_board(board_id)
        for comment in top_level:
            await self.delete_subtree(comment.id)
        return len(top_level)

    async def _delete_descendants(self, parent_comment_id: CommentId) -> int:
        deleted = 0
        for child in await self.comment_repository.find_by_parent(parent_comment_id):
            deleted += await self._delete_descendants(child.id)
            await self.reply_repository.delete_by_comment(child.id)
            await self.comment_repository.delete_by_id(child.id)
            deleted += 1
        return deleted
