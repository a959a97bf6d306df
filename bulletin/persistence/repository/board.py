"""SQL implementation of Board repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bulletin.domain.model import Board
from bulletin.domain.repository import BoardRepository
from bulletin.domain.value import BoardId
from bulletin.persistence.mappers import board_to_dict, row_to_board
from bulletin.persistence.tables import boards_table


class SqlBoardRepository(BoardRepository):
    """SQL implementation of BoardRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, board: Board) -> Board:
        """Insert a board and return it with its assigned id."""
        stmt = boards_table.insert().values(**board_to_dict(board))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return board.model_copy(update={"id": BoardId(result.inserted_primary_key[0])})

    async def find_by_id(self, board_id: BoardId) -> Optional[Board]:
        """Find a board by ID."""
        stmt = select(boards_table).where(boards_table.c.board_id == board_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_board(row._asdict()) if row else None

    async def find_page(self, offset: int, limit: int) -> List[Board]:
        """Find a page of boards, newest first."""
        stmt = (
            select(boards_table)
            .order_by(desc(boards_table.c.board_id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_board(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all boards."""
        stmt = select(func.count()).select_from(boards_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update(self, board: Board) -> None:
        """Replace title, content and writer of an existing board."""
        stmt = (
            boards_table.update()
            .where(boards_table.c.board_id == board.id)
            .values(
                title=board.title,
                content=board.content,
                writer=board.writer,
                modified_at=board.modified_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_view_count(self, board_id: BoardId) -> None:
        """Atomically increment the view count by 1."""
        stmt = (
            boards_table.update()
            .where(boards_table.c.board_id == board_id)
            .values(view_count=boards_table.c.view_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_id(self, board_id: BoardId) -> None:
        """Delete a board row."""
        stmt = boards_table.delete().where(boards_table.c.board_id == board_id)
        await self.session.execute(stmt)
        await self.session.flush()
