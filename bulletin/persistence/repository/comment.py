"""SQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bulletin.domain.model import Comment
from bulletin.domain.repository import CommentRepository
from bulletin.domain.value import BoardId, CommentId
from bulletin.persistence.mappers import comment_to_dict, row_to_comment
from bulletin.persistence.tables import comments_table


class SqlCommentRepository(CommentRepository):
    """SQL implementation of CommentRepository.

    Only stored columns are read and written; replies and children are
    assembled by the comment service.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_where(self, *criteria) -> List[Comment]:
        stmt = (
            select(comments_table)
            .where(*criteria)
            .order_by(comments_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def insert(self, comment: Comment) -> Comment:
        """Insert a comment and return it with its assigned id."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return comment.model_copy(
            update={"id": CommentId(result.inserted_primary_key[0])}
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.comment_id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_board(self, board_id: BoardId) -> List[Comment]:
        """Find every comment of a board regardless of depth."""
        return await self._find_where(comments_table.c.board_id == board_id)

    async def find_top_level_by_board(self, board_id: BoardId) -> List[Comment]:
        """Find the top-level comments of a board."""
        return await self._find_where(
            comments_table.c.board_id == board_id,
            comments_table.c.parent_comment_id.is_(None),
        )

    async def find_by_parent(self, parent_comment_id: CommentId) -> List[Comment]:
        """Find direct children of a comment."""
        return await self._find_where(
            comments_table.c.parent_comment_id == parent_comment_id
        )

    async def update(self, comment: Comment) -> None:
        """Replace content and writer of an existing comment."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.comment_id == comment.id)
            .values(
                content=comment.content,
                writer=comment.writer,
                modified_at=comment.modified_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_id(self, comment_id: CommentId) -> None:
        """Delete a comment row (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.comment_id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
