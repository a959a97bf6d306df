"""Screen layout repository interfaces.

Layouts, cards and central menus are stored in separate tables and get one
repository each.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from bulletin.domain.model.screen_layout import Card, CentralMenu, ScreenLayout
from bulletin.domain.value import LayoutId


class ScreenLayoutRepository(ABC):
    """Repository for ScreenLayout rows."""

    @abstractmethod
    async def insert(self, layout: ScreenLayout) -> ScreenLayout:
        """Insert a layout and return it with its assigned id."""
        pass

    @abstractmethod
    async def find_by_id(self, layout_id: LayoutId) -> Optional[ScreenLayout]:
        """Find a layout by ID (cards and menu not populated)."""
        pass

    @abstractmethod
    async def find_all(self) -> List[ScreenLayout]:
        """Find all layouts, ascending by id."""
        pass

    @abstractmethod
    async def update(self, layout: ScreenLayout) -> None:
        """Replace the stored row of an existing layout."""
        pass

    @abstractmethod
    async def delete_by_id(self, layout_id: LayoutId) -> None:
        """Delete a layout row. No-op if it does not exist."""
        pass


class CardRepository(ABC):
    """Repository for Card rows."""

    @abstractmethod
    async def insert(self, card: Card) -> Card:
        """Insert a card and return it with its assigned id."""
        pass

    @abstractmethod
    async def find_by_layout(self, layout_id: LayoutId) -> List[Card]:
        """Find the cards of a layout, ascending by id."""
        pass

    @abstractmethod
    async def delete_by_layout(self, layout_id: LayoutId) -> None:
        """Delete every card of a layout."""
        pass


class CentralMenuRepository(ABC):
    """Repository for CentralMenu rows."""

    @abstractmethod
    async def insert(self, menu: CentralMenu) -> CentralMenu:
        """Insert a central menu and return it with its assigned id."""
        pass

    @abstractmethod
    async def find_by_layout(self, layout_id: LayoutId) -> Optional[CentralMenu]:
        """Find the central menu of a layout."""
        pass

    @abstractmethod
    async def delete_by_layout(self, layout_id: LayoutId) -> None:
        """Delete the central menu of a layout."""
        pass
