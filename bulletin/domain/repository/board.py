"""Board repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from bulletin.domain.model.board import Board
from bulletin.domain.value import BoardId


class BoardRepository(ABC):
    """Repository for Board entity."""

    @abstractmethod
    async def insert(self, board: Board) -> Board:
        """Insert a board and return it with its assigned id."""
        pass

    @abstractmethod
    async def find_by_id(self, board_id: BoardId) -> Optional[Board]:
        """Find a board by ID."""
        pass

    @abstractmethod
    async def find_page(self, offset: int, limit: int) -> List[Board]:
        """Find a page of boards, newest first.

        Args:
            offset: Number of boards to skip
            limit: Maximum number of boards to return
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all boards."""
        pass

    @abstractmethod
    async def update(self, board: Board) -> None:
        """Replace title, content and writer of an existing board."""
        pass

    @abstractmethod
    async def increment_view_count(self, board_id: BoardId) -> None:
        """Atomically increment the view count by 1."""
        pass

    @abstractmethod
    async def delete_by_id(self, board_id: BoardId) -> None:
        """Delete a board row. No-op if it does not exist."""
        pass
