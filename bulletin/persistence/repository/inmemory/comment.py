"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional

from bulletin.domain.model.comment import Comment
from bulletin.domain.repository.comment import CommentRepository
from bulletin.domain.value import BoardId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    def _sorted(self, comments) -> list[Comment]:
        return sorted(comments, key=lambda c: c.id)

    async def insert(self, comment: Comment) -> Comment:
        """Insert a comment, dropping any transient collections."""
        saved = comment.model_copy(
            update={"id": CommentId(next(self._ids)), "replies": [], "children": []}
        )
        self._comments[saved.id] = saved
        return saved

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_board(self, board_id: BoardId) -> list[Comment]:
        return self._sorted(c for c in self._comments.values() if c.board_id == board_id)

    async def find_top_level_by_board(self, board_id: BoardId) -> list[Comment]:
        return self._sorted(
            c
            for c in self._comments.values()
            if c.board_id == board_id and c.parent_comment_id is None
        )

    async def find_by_parent(self, parent_comment_id: CommentId) -> list[Comment]:
        return self._sorted(
            c
            for c in self._comments.values()
            if c.parent_comment_id == parent_comment_id
        )

    async def update(self, comment: Comment) -> None:
        existing = self._comments.get(comment.id)
        if existing:
            self._comments[comment.id] = existing.model_copy(
                update={
                    "content": comment.content,
                    "writer": comment.writer,
                    "modified_at": comment.modified_at,
                }
            )

    async def delete_by_id(self, comment_id: CommentId) -> None:
        self._comments.pop(comment_id, None)
