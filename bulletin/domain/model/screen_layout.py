"""Screen layout entities.

A screen layout is a named arrangement of up to four cards around a central
menu. Cards and the menu belong to exactly one layout.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from bulletin.domain.model.common import DomainModel
from bulletin.domain.value import CardId, CardPosition, LayoutId, MenuId


class Card(DomainModel):
    """Card placed in one slot of a screen layout."""

    id: CardId | None = None
    layout_id: LayoutId | None = None  # Set when attached to a layout
    position: CardPosition
    title: str | None = None
    horizontal_collapse: bool = False
    vertical_collapse: bool = False
    title_only: bool = False
    expanded: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    modified_at: datetime = Field(default_factory=datetime.now)


class CentralMenu(DomainModel):
    """Central menu shown at the bottom of the screen."""

    id: MenuId | None = None
    layout_id: LayoutId | None = None
    priority: bool = False
    expanded: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    modified_at: datetime = Field(default_factory=datetime.now)


class ScreenLayout(DomainModel):
    """Screen layout aggregate."""

    id: LayoutId | None = None
    name: str = Field(min_length=1, max_length=100)
    created_at: datetime = Field(default_factory=datetime.now)
    modified_at: datetime = Field(default_factory=datetime.now)

    # Transient
    cards: list[Card] = Field(default_factory=list)
    central_menu: Optional[CentralMenu] = None
