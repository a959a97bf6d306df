"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from bulletin.domain.model.comment import Comment
from bulletin.domain.value import BoardId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations. Finders return
    rows only; children and replies are never populated here.
    """

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert (its id is ignored)

        Returns:
            The stored comment with its assigned id
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_board(self, board_id: BoardId) -> List[Comment]:
        """Find every comment of a board, at any depth, in ascending id order."""
        pass

    @abstractmethod
    async def find_top_level_by_board(self, board_id: BoardId) -> List[Comment]:
        """Find the comments of a board that have no parent, ascending by id."""
        pass

    @abstractmethod
    async def find_by_parent(self, parent_comment_id: CommentId) -> List[Comment]:
        """Find direct children of a comment, ascending by id."""
        pass

    @abstractmethod
    async def update(self, comment: Comment) -> None:
        """Replace the stored row of an existing comment."""
        pass

    @abstractmethod
    async def delete_by_id(self, comment_id: CommentId) -> None:
        """Delete a single comment row.

        Deleting an id that does not exist is a no-op.
        """
        pass
