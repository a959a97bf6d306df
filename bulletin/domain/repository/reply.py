"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from bulletin.domain.model.reply import Reply
from bulletin.domain.value import CommentId, ReplyId


class ReplyRepository(ABC):
    """Repository for Reply entity."""

    @abstractmethod
    async def insert(self, reply: Reply) -> Reply:
        """Insert a reply and return it with its assigned id."""
        pass

    @abstractmethod
    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[Reply]:
        """Find the replies of a comment, ascending by id."""
        pass

    @abstractmethod
    async def update(self, reply: Reply) -> None:
        """Replace the stored row of an existing reply."""
        pass

    @abstractmethod
    async def delete_by_id(self, reply_id: ReplyId) -> None:
        """Delete a reply. No-op if it does not exist."""
        pass

    @abstractmethod
    async def delete_by_comment(self, comment_id: CommentId) -> None:
        """Delete every reply of a comment."""
        pass
