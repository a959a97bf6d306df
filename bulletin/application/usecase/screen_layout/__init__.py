"""Screen layout use cases."""

from .get_layout import (
    CardItem,
    CentralMenuItem,
    GetLayoutRequest,
    GetLayoutUseCase,
    ListLayoutsResponse,
    ListLayoutsUseCase,
    ScreenLayoutItem,
)
from .manage_layout import (
    CardInput,
    CentralMenuInput,
    CreateLayoutRequest,
    CreateLayoutUseCase,
    DeleteLayoutRequest,
    DeleteLayoutUseCase,
    LayoutMessageResponse,
    UpdateLayoutRequest,
    UpdateLayoutUseCase,
)

__all__ = [
    "CardInput",
    "CardItem",
    "CentralMenuInput",
    "CentralMenuItem",
    "CreateLayoutRequest",
    "CreateLayoutUseCase",
    "DeleteLayoutRequest",
    "DeleteLayoutUseCase",
    "GetLayoutRequest",
    "GetLayoutUseCase",
    "LayoutMessageResponse",
    "ListLayoutsResponse",
    "ListLayoutsUseCase",
    "ScreenLayoutItem",
    "UpdateLayoutRequest",
    "UpdateLayoutUseCase",
]
