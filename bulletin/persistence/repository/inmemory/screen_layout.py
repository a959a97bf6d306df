"""In-memory screen layout repositories for testing."""

from itertools import count
from typing import Optional

from bulletin.domain.model.screen_layout import Card, CentralMenu, ScreenLayout
from bulletin.domain.repository.screen_layout import (
    CardRepository,
    CentralMenuRepository,
    ScreenLayoutRepository,
)
from bulletin.domain.value import CardId, LayoutId, MenuId


class InMemoryScreenLayoutRepository(ScreenLayoutRepository):
    """In-memory implementation of ScreenLayoutRepository for testing."""

    def __init__(self) -> None:
        self._layouts: dict[LayoutId, ScreenLayout] = {}
        self._ids = count(1)

    async def insert(self, layout: ScreenLayout) -> ScreenLayout:
        saved = layout.model_copy(
            update={"id": LayoutId(next(self._ids)), "cards": [], "central_menu": None}
        )
        self._layouts[saved.id] = saved
        return saved

    async def find_by_id(self, layout_id: LayoutId) -> Optional[ScreenLayout]:
        return self._layouts.get(layout_id)

    async def find_all(self) -> list[ScreenLayout]:
        return sorted(self._layouts.values(), key=lambda layout: layout.id)

    async def update(self, layout: ScreenLayout) -> None:
        if layout.id in self._layouts:
            self._layouts[layout.id] = layout.model_copy(
                update={"cards": [], "central_menu": None}
            )

    async def delete_by_id(self, layout_id: LayoutId) -> None:
        self._layouts.pop(layout_id, None)


class InMemoryCardRepository(CardRepository):
    """In-memory implementation of CardRepository for testing."""

    def __init__(self) -> None:
        self._cards: dict[CardId, Card] = {}
        self._ids = count(1)

    async def insert(self, card: Card) -> Card:
        saved = card.model_copy(update={"id": CardId(next(self._ids))})
        self._cards[saved.id] = saved
        return saved

    async def find_by_layout(self, layout_id: LayoutId) -> list[Card]:
        return sorted(
            (c for c in self._cards.values() if c.layout_id == layout_id),
            key=lambda c: c.id,
        )

    async def delete_by_layout(self, layout_id: LayoutId) -> None:
        for card_id in [c.id for c in self._cards.values() if c.layout_id == layout_id]:
            del self._cards[card_id]


class InMemoryCentralMenuRepository(CentralMenuRepository):
    """In-memory implementation of CentralMenuRepository for testing."""

    def __init__(self) -> None:
        self._menus: dict[LayoutId, CentralMenu] = {}
        self._ids = count(1)

    async def insert(self, menu: CentralMenu) -> CentralMenu:
        saved = menu.model_copy(update={"id": MenuId(next(self._ids))})
        self._menus[saved.layout_id] = saved
        return saved

    async def find_by_layout(self, layout_id: LayoutId) -> Optional[CentralMenu]:
        return self._menus.get(layout_id)

    async def delete_by_layout(self, layout_id: LayoutId) -> None:
        self._menus.pop(layout_id, None)
