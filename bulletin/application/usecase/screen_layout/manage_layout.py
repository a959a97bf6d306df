"""Create, update and delete screen layout use cases."""

from pydantic import BaseModel, Field

from bulletin.application.usecase.base import BaseUseCase
from bulletin.domain.model import Card, CentralMenu
from bulletin.domain.service import ScreenLayoutService
from bulletin.domain.value import CardPosition, LayoutId


class CardInput(BaseModel):
    """Card as sent by the client."""

    position: CardPosition
    title: str | None = None
    horizontal_collapse: bool = False
    vertical_collapse: bool = False
    title_only: bool = False
    expanded: bool = False

    def to_card(self) -> Card:
        return Card(**self.model_dump())


class CentralMenuInput(BaseModel):
    """Central menu as sent by the client."""

    priority: bool = False
    expanded: bool = False

    def to_menu(self) -> CentralMenu:
        return CentralMenu(**self.model_dump())


class LayoutMessageResponse(BaseModel):
    """Screen layout mutation response."""

    layout_id: int
    message: str


class CreateLayoutRequest(BaseModel):
    """Create screen layout request."""

    name: str = Field(min_length=1, max_length=100)
    cards: list[CardInput] = []
    central_menu: CentralMenuInput | None = None


class CreateLayoutUseCase(BaseUseCase):
    """Use case for creating a screen layout."""

    def __init__(self, screen_layout_service: ScreenLayoutService) -> None:
        self.screen_layout_service = screen_layout_service

    async def execute(self, request: CreateLayoutRequest) -> LayoutMessageResponse:
        layout = await self.screen_layout_service.create_layout(
            name=request.name,
            cards=[card.to_card() for card in request.cards],
            central_menu=(
                request.central_menu.to_menu() if request.central_menu else None
            ),
        )
        return LayoutMessageResponse(
            layout_id=layout.id, message="Screen layout created successfully"
        )


class UpdateLayoutRequest(BaseModel):
    """Update screen layout request.

    Omitted cards or menu are left as they are.
    """

    layout_id: int
    name: str = Field(min_length=1, max_length=100)
    cards: list[CardInput] | None = None
    central_menu: CentralMenuInput | None = None


class UpdateLayoutUseCase(BaseUseCase):
    """Use case for updating a screen layout."""

    def __init__(self, screen_layout_service: ScreenLayoutService) -> None:
        self.screen_layout_service = screen_layout_service

    async def execute(self, request: UpdateLayoutRequest) -> LayoutMessageResponse:
        """Execute update layout flow.

        Raises:
            NotFoundError: If the layout does not exist
        """
        await self.screen_layout_service.update_layout(
            layout_id=LayoutId(request.layout_id),
            name=request.name,
            cards=(
                [card.to_card() for card in request.cards]
                if request.cards is not None
                else None
            ),
            central_menu=(
                request.central_menu.to_menu() if request.central_menu else None
            ),
        )
        return LayoutMessageResponse(
            layout_id=request.layout_id, message="Screen layout updated successfully"
        )


class DeleteLayoutRequest(BaseModel):
    """Delete screen layout request."""

    layout_id: int


class DeleteLayoutUseCase(BaseUseCase):
    """Use case for deleting a screen layout with its cards and menu."""

    def __init__(self, screen_layout_service: ScreenLayoutService) -> None:
        self.screen_layout_service = screen_layout_service

    async def execute(self, request: DeleteLayoutRequest) -> LayoutMessageResponse:
        await self.screen_layout_service.delete_layout(LayoutId(request.layout_id))
        return LayoutMessageResponse(
            layout_id=request.layout_id, message="Screen layout deleted successfully"
        )
