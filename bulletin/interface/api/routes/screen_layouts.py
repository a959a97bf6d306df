"""Screen layout routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from bulletin.application.usecase.screen_layout import (
    CardInput,
    CentralMenuInput,
    CreateLayoutRequest,
    CreateLayoutUseCase,
    DeleteLayoutRequest,
    DeleteLayoutUseCase,
    GetLayoutRequest,
    GetLayoutUseCase,
    LayoutMessageResponse,
    ListLayoutsResponse,
    ListLayoutsUseCase,
    ScreenLayoutItem,
    UpdateLayoutRequest,
    UpdateLayoutUseCase,
)
from bulletin.domain.error import NotFoundError

router = APIRouter(
    prefix="/api/screen-layouts", tags=["screen-layouts"], route_class=DishkaRoute
)


class UpdateLayoutAPIRequest(BaseModel):
    """API request for updating a screen layout."""

    name: str = Field(min_length=1, max_length=100)
    cards: list[CardInput] | None = None
    central_menu: CentralMenuInput | None = None


@router.post(
    "", response_model=LayoutMessageResponse, status_code=status.HTTP_201_CREATED
)
async def create_layout(
    request: CreateLayoutRequest,
    create_layout_use_case: FromDishka[CreateLayoutUseCase],
) -> LayoutMessageResponse:
    """Create a screen layout with its cards and optional central menu."""
    return await create_layout_use_case.execute(request)


@router.get("", response_model=ListLayoutsResponse)
async def list_layouts(
    list_layouts_use_case: FromDishka[ListLayoutsUseCase],
) -> ListLayoutsResponse:
    """List all screen layouts."""
    return await list_layouts_use_case.execute()


@router.get("/{layout_id}", response_model=ScreenLayoutItem)
async def get_layout(
    layout_id: int,
    get_layout_use_case: FromDishka[GetLayoutUseCase],
) -> ScreenLayoutItem:
    """Get a screen layout."""
    try:
        return await get_layout_use_case.execute(GetLayoutRequest(layout_id=layout_id))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.put("/{layout_id}", response_model=LayoutMessageResponse)
async def update_layout(
    layout_id: int,
    request: UpdateLayoutAPIRequest,
    update_layout_use_case: FromDishka[UpdateLayoutUseCase],
) -> LayoutMessageResponse:
    """Rename a layout; cards and menu are replaced only when sent."""
    try:
        return await update_layout_use_case.execute(
            UpdateLayoutRequest(layout_id=layout_id, **request.model_dump())
        )
    except NotFoundError as e:
        logfire.warn("Screen layout update failed - not found", layout_id=layout_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete("/{layout_id}", response_model=LayoutMessageResponse)
async def delete_layout(
    layout_id: int,
    delete_layout_use_case: FromDishka[DeleteLayoutUseCase],
) -> LayoutMessageResponse:
    """Delete a screen layout with its cards and central menu."""
    try:
        return await delete_layout_use_case.execute(
            DeleteLayoutRequest(layout_id=layout_id)
        )
    except NotFoundError as e:
        logfire.warn("Screen layout delete failed - not found", layout_id=layout_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
