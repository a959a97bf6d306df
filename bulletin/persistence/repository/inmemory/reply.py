"""In-memory reply repository for testing."""

from itertools import count
from typing import Optional

from bulletin.domain.model.reply import Reply
from bulletin.domain.repository.reply import ReplyRepository
from bulletin.domain.value import CommentId, ReplyId


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self) -> None:
        self._replies: dict[ReplyId, Reply] = {}
        self._ids = count(1)

    async def insert(self, reply: Reply) -> Reply:
        saved = reply.model_copy(update={"id": ReplyId(next(self._ids))})
        self._replies[saved.id] = saved
        return saved

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        return self._replies.get(reply_id)

    async def find_by_comment(self, comment_id: CommentId) -> list[Reply]:
        return sorted(
            (r for r in self._replies.values() if r.comment_id == comment_id),
            key=lambda r: r.id,
        )

    async def update(self, reply: Reply) -> None:
        if reply.id in self._replies:
            self._replies[reply.id] = reply

    async def delete_by_id(self, reply_id: ReplyId) -> None:
        self._replies.pop(reply_id, None)

    async def delete_by_comment(self, comment_id: CommentId) -> None:
        for reply_id in [r.id for r in self._replies.values() if r.comment_id == comment_id]:
            del self._replies[reply_id]
