"""Screen layout domain service."""

from datetime import datetime

import logfire

from bulletin.domain.error import NotFoundError
from bulletin.domain.model.screen_layout import Card, CentralMenu, ScreenLayout
from bulletin.domain.repository import (
    CardRepository,
    CentralMenuRepository,
    ScreenLayoutRepository,
)
from bulletin.domain.value import LayoutId

from .base import Service


class ScreenLayoutService(Service):
    """Domain service for screen layouts and their cards and menu."""

    def __init__(
        self,
        screen_layout_repository: ScreenLayoutRepository,
        card_repository: CardRepository,
        central_menu_repository: CentralMenuRepository,
    ) -> None:
        self.screen_layout_repository = screen_layout_repository
        self.card_repository = card_repository
        self.central_menu_repository = central_menu_repository

    async def create_layout(
        self,
        name: str,
        cards: list[Card],
        central_menu: CentralMenu | None = None,
    ) -> ScreenLayout:
        """Create a layout with its cards and optional central menu.

        Returns:
            The stored layout with cards and menu attached
        """
        with logfire.span("screen_layout_service.create_layout", cards=len(cards)):
            now = datetime.now()
            layout = await self.screen_layout_repository.insert(
                ScreenLayout(name=name, created_at=now, modified_at=now)
            )
            saved_cards = await self._insert_cards(layout.id, cards)
            saved_menu = await self._insert_menu(layout.id, central_menu)

            logfire.info("Screen layout created", layout_id=layout.id)
            return layout.model_copy(
                update={"cards": saved_cards, "central_menu": saved_menu}
            )

    async def get_layout(self, layout_id: LayoutId) -> ScreenLayout:
        """Get a layout with its cards and menu.

        Raises:
            NotFoundError: If the layout does not exist
        """
        layout = await self._require_layout(layout_id)
        return await self._attach(layout)

    async def list_layouts(self) -> list[ScreenLayout]:
        """List all layouts with their cards and menus."""
        with logfire.span("screen_layout_service.list_layouts"):
            layouts = await self.screen_layout_repository.find_all()
            return [await self._attach(layout) for layout in layouts]

    async def update_layout(
        self,
        layout_id: LayoutId,
        name: str,
        cards: list[Card] | None = None,
        central_menu: CentralMenu | None = None,
    ) -> ScreenLayout:
        """Rename a layout and optionally replace its cards and menu.

        Cards given (even an empty list) replace all existing cards. A menu
        given replaces the existing menu. None leaves either untouched.

        Raises:
            NotFoundError: If the layout does not exist
        """
        with logfire.span("screen_layout_service.update_layout", layout_id=layout_id):
            existing = await self._require_layout(layout_id)
            updated = existing.model_copy(
                update={"name": name, "modified_at": datetime.now()}
            )
            await self.screen_layout_repository.update(updated)

            if cards is not None:
                await self.card_repository.delete_by_layout(layout_id)
                await self._insert_cards(layout_id, cards)
            if central_menu is not None:
                await self.central_menu_repository.delete_by_layout(layout_id)
                await self._insert_menu(layout_id, central_menu)

            logfire.info(
                "Screen layout updated",
                layout_id=layout_id,
                replaced_cards=cards is not None,
                replaced_menu=central_menu is not None,
            )
            return await self._attach(updated)

    async def delete_layout(self, layout_id: LayoutId) -> None:
        """Delete a layout: cards, then the menu, then the layout row.

        Raises:
            NotFoundError: If the layout does not exist
        """
        with logfire.span("screen_layout_service.delete_layout", layout_id=layout_id):
            await self._require_layout(layout_id)
            await self.card_repository.delete_by_layout(layout_id)
            await self.central_menu_repository.delete_by_layout(layout_id)
            await self.screen_layout_repository.delete_by_id(layout_id)
            logfire.info("Screen layout deleted", layout_id=layout_id)

    async def _require_layout(self, layout_id: LayoutId) -> ScreenLayout:
        layout = await self.screen_layout_repository.find_by_id(layout_id)
        if not layout:
            logfire.warn("Screen layout not found", layout_id=layout_id)
            raise NotFoundError("Screen layout", layout_id)
        return layout

    async def _attach(self, layout: ScreenLayout) -> ScreenLayout:
        cards = await self.card_repository.find_by_layout(layout.id)
        menu = await self.central_menu_repository.find_by_layout(layout.id)
        return layout.model_copy(update={"cards": cards, "central_menu": menu})

    async def _insert_cards(self, layout_id: LayoutId, cards: list[Card]) -> list[Card]:
        now = datetime.now()
        return [
            await self.card_repository.insert(
                card.model_copy(
                    update={
                        "id": None,
                        "layout_id": layout_id,
                        "created_at": now,
                        "modified_at": now,
                    }
                )
            )
            for card in cards
        ]

    async def _insert_menu(
        self, layout_id: LayoutId, menu: CentralMenu | None
    ) -> CentralMenu | None:
        if menu is None:
            return None
        now = datetime.now()
        return await self.central_menu_repository.insert(
            menu.model_copy(
                update={
                    "id": None,
                    "layout_id": layout_id,
                    "created_at": now,
                    "modified_at": now,
                }
            )
        )
