"""Analytics event variants.

Each event type fixes its canonical name and parameter set; there are no ad hoc
event shapes.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar
from typing import Dict
from typing import Optional


class ItemType(str, Enum):
    POST = "post"
    FRIEND = "friend"


class PageName(str, Enum):
    FEED = "feed"
    FRIENDS = "friends"
    PROFILE = "profile"


class AnalyticsEvent(ABC):
    """Base class for all analytics events."""

    name: ClassVar[str]

    @property
    @abstractmethod
    def parameters(self) -> Optional[Dict[str, str]]:
        pass


@dataclass(frozen=True)
class AppLaunched(AnalyticsEvent):
    name: ClassVar[str] = "app_launched"

    @property
    def parameters(self) -> Optional[Dict[str, str]]:
        return None


@dataclass(frozen=True)
class TabSelected(AnalyticsEvent):
    name: ClassVar[str] = "tab_selected"

    title: str

    @property
    def parameters(self) -> Optional[Dict[str, str]]:
        return {"title": self.title}


@dataclass(frozen=True)
class ItemSelected(AnalyticsEvent):
    name: ClassVar[str] = "item_selected"

    id: int
    item_type: ItemType
    page_name: PageName

    @property
    def parameters(self) -> Optional[Dict[str, str]]:
        return {
            "id": str(self.id),
            "type": ItemType(self.item_type).value,
            "page_name": PageName(self.page_name).value,
        }
