"""In-memory board repository for testing."""

from itertools import count
from typing import Optional

from bulletin.domain.model.board import Board
from bulletin.domain.repository.board import BoardRepository
from bulletin.domain.value import BoardId


class InMemoryBoardRepository(BoardRepository):
    """In-memory implementation of BoardRepository for testing."""

    def __init__(self) -> None:
        self._boards: dict[BoardId, Board] = {}
        self._ids = count(1)

    async def insert(self, board: Board) -> Board:
        saved = board.model_copy(update={"id": BoardId(next(self._ids))})
        self._boards[saved.id] = saved
        return saved

    async def find_by_id(self, board_id: BoardId) -> Optional[Board]:
        return self._boards.get(board_id)

    async def find_page(self, offset: int, limit: int) -> list[Board]:
        newest_first = sorted(self._boards.values(), key=lambda b: b.id, reverse=True)
        return newest_first[offset : offset + limit]

    async def count(self) -> int:
        return len(self._boards)

    async def update(self, board: Board) -> None:
        existing = self._boards.get(board.id)
        if existing:
            self._boards[board.id] = existing.model_copy(
                update={
                    "title": board.title,
                    "content": board.content,
                    "writer": board.writer,
                    "modified_at": board.modified_at,
                }
            )

    async def increment_view_count(self, board_id: BoardId) -> None:
        existing = self._boards.get(board_id)
        if existing:
            self._boards[board_id] = existing.model_copy(
                update={"view_count": existing.view_count + 1}
            )

    async def delete_by_id(self, board_id: BoardId) -> None:
        self._boards.pop(board_id, None)
