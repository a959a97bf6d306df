"""SQL implementations of the screen layout repositories."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bulletin.domain.model import Card, CentralMenu, ScreenLayout
from bulletin.domain.repository import (
    CardRepository,
    CentralMenuRepository,
    ScreenLayoutRepository,
)
from bulletin.domain.value import CardId, LayoutId, MenuId
from bulletin.persistence.mappers import (
    card_to_dict,
    central_menu_to_dict,
    row_to_card,
    row_to_central_menu,
    row_to_screen_layout,
    screen_layout_to_dict,
)
from bulletin.persistence.tables import (
    cards_table,
    central_menus_table,
    screen_layouts_table,
)


class SqlScreenLayoutRepository(ScreenLayoutRepository):
    """SQL implementation of ScreenLayoutRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, layout: ScreenLayout) -> ScreenLayout:
        stmt = screen_layouts_table.insert().values(**screen_layout_to_dict(layout))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return layout.model_copy(
            update={"id": LayoutId(result.inserted_primary_key[0])}
        )

    async def find_by_id(self, layout_id: LayoutId) -> Optional[ScreenLayout]:
        stmt = select(screen_layouts_table).where(
            screen_layouts_table.c.layout_id == layout_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_screen_layout(row._asdict()) if row else None

    async def find_all(self) -> List[ScreenLayout]:
        stmt = select(screen_layouts_table).order_by(screen_layouts_table.c.layout_id)
        result = await self.session.execute(stmt)
        return [row_to_screen_layout(row._asdict()) for row in result.fetchall()]

    async def update(self, layout: ScreenLayout) -> None:
        stmt = (
            screen_layouts_table.update()
            .where(screen_layouts_table.c.layout_id == layout.id)
            .values(name=layout.name, modified_at=layout.modified_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_id(self, layout_id: LayoutId) -> None:
        stmt = screen_layouts_table.delete().where(
            screen_layouts_table.c.layout_id == layout_id
        )
        await self.session.execute(stmt)
        await self.session.flush()


class SqlCardRepository(CardRepository):
    """SQL implementation of CardRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, card: Card) -> Card:
        stmt = cards_table.insert().values(**card_to_dict(card))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return card.model_copy(update={"id": CardId(result.inserted_primary_key[0])})

    async def find_by_layout(self, layout_id: LayoutId) -> List[Card]:
        stmt = (
            select(cards_table)
            .where(cards_table.c.layout_id == layout_id)
            .order_by(cards_table.c.card_id)
        )
        result = await self.session.execute(stmt)
        return [row_to_card(row._asdict()) for row in result.fetchall()]

    async def delete_by_layout(self, layout_id: LayoutId) -> None:
        stmt = cards_table.delete().where(cards_table.c.layout_id == layout_id)
        await self.session.execute(stmt)
        await self.session.flush()


class SqlCentralMenuRepository(CentralMenuRepository):
    """SQL implementation of CentralMenuRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, menu: CentralMenu) -> CentralMenu:
        stmt = central_menus_table.insert().values(**central_menu_to_dict(menu))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return menu.model_copy(update={"id": MenuId(result.inserted_primary_key[0])})

    async def find_by_layout(self, layout_id: LayoutId) -> Optional[CentralMenu]:
        stmt = select(central_menus_table).where(
            central_menus_table.c.layout_id == layout_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_central_menu(row._asdict()) if row else None

    async def delete_by_layout(self, layout_id: LayoutId) -> None:
        stmt = central_menus_table.delete().where(
            central_menus_table.c.layout_id == layout_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
