"""Get and list screen layout use cases."""

from datetime import datetime

from pydantic import BaseModel

from bulletin.application.usecase.base import BaseUseCase
from bulletin.domain.model import ScreenLayout
from bulletin.domain.service import ScreenLayoutService
from bulletin.domain.value import CardPosition, LayoutId


class CardItem(BaseModel):
    """Card item in response."""

    card_id: int
    position: CardPosition
    title: str | None
    horizontal_collapse: bool
    vertical_collapse: bool
    title_only: bool
    expanded: bool


class CentralMenuItem(BaseModel):
    """Central menu item in response."""

    menu_id: int
    priority: bool
    expanded: bool


class ScreenLayoutItem(BaseModel):
    """Screen layout with its cards and central menu."""

    layout_id: int
    name: str
    created_at: datetime
    modified_at: datetime
    cards: list[CardItem]
    central_menu: CentralMenuItem | None


def to_layout_item(layout: ScreenLayout) -> ScreenLayoutItem:
    menu = layout.central_menu
    return ScreenLayoutItem(
        layout_id=layout.id,
        name=layout.name,
        created_at=layout.created_at,
        modified_at=layout.modified_at,
        cards=[
            CardItem(
                card_id=card.id,
                position=card.position,
                title=card.title,
                horizontal_collapse=card.horizontal_collapse,
                vertical_collapse=card.vertical_collapse,
                title_only=card.title_only,
                expanded=card.expanded,
            )
            for card in layout.cards
        ],
        central_menu=(
            CentralMenuItem(
                menu_id=menu.id, priority=menu.priority, expanded=menu.expanded
            )
            if menu
            else None
        ),
    )


class GetLayoutRequest(BaseModel):
    """Get screen layout request."""

    layout_id: int


class GetLayoutUseCase(BaseUseCase):
    """Use case for reading one screen layout."""

    def __init__(self, screen_layout_service: ScreenLayoutService) -> None:
        self.screen_layout_service = screen_layout_service

    async def execute(self, request: GetLayoutRequest) -> ScreenLayoutItem:
        """Execute get layout flow.

        Raises:
            NotFoundError: If the layout does not exist
        """
        layout = await self.screen_layout_service.get_layout(
            LayoutId(request.layout_id)
        )
        return to_layout_item(layout)


class ListLayoutsResponse(BaseModel):
    """List screen layouts response."""

    layouts: list[ScreenLayoutItem]


class ListLayoutsUseCase(BaseUseCase):
    """Use case for listing all screen layouts."""

    def __init__(self, screen_layout_service: ScreenLayoutService) -> None:
        self.screen_layout_service = screen_layout_service

    async def execute(self, request: None = None) -> ListLayoutsResponse:
        layouts = await self.screen_layout_service.list_layouts()
        return ListLayoutsResponse(layouts=[to_layout_item(layout) for layout in layouts])
