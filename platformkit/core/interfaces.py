"""Interface contracts shared by the shell, the feature modules and the BFF layer.

Feature modules depend only on these abstract types, never on concrete
implementations.  That keeps every module testable with a double and lets the
shell compose modules it knows nothing about.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any
from typing import Generic
from typing import List
from typing import Type
from typing import TypeVar

from platformkit.analytics.events import AnalyticsEvent
from platformkit.schemas.base import FeatureDataModel
from platformkit.schemas.comment import Comment
from platformkit.schemas.post import Post
from platformkit.schemas.user import User

T = TypeVar("T", bound=FeatureDataModel)
B = TypeVar("B")


# ---------------------------------------------------------------------------
# BFF access
# ---------------------------------------------------------------------------


class ResourceClient(ABC):
    """Generic CRUD operations against the backend-for-frontend.

    ``location`` is either a path relative to the configured base address or a
    fully-qualified URL.
    """

    @abstractmethod
    async def fetch_single(self, location: Any, schema: Type[T]) -> T:
        """Fetch one record and decode it as *schema*."""
        pass

    @abstractmethod
    async def fetch_list(self, location: Any, schema: Type[T]) -> List[T]:
        """Fetch a list of records, preserving wire order."""
        pass

    @abstractmethod
    async def update(self, location: Any, schema: Type[T], record: T) -> T:
        """Replace a record and return the server's resulting copy."""
        pass

    @abstractmethod
    async def delete(self, location: Any, schema: Type[T], record_id: int) -> None:
        """Delete the record identified by *record_id* under *location*."""
        pass


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------


class Analytics(ABC):
    """Sink for analytics events. Must tolerate concurrent ``track`` calls."""

    @abstractmethod
    def track(self, event: AnalyticsEvent) -> None:
        pass


# ---------------------------------------------------------------------------
# Feature capabilities
# ---------------------------------------------------------------------------


class FeatureAPI(ABC):
    """Base for all feature network APIs."""

    @property
    @abstractmethod
    def networking(self) -> ResourceClient:
        pass


class FeedFeatureAPI(FeatureAPI):
    """Feed capability used by the Feed module."""

    @abstractmethod
    async def fetch_feeds(self) -> List[Post]:
        pass

    @abstractmethod
    async def update_post(self, post: Post) -> Post:
        pass

    @abstractmethod
    async def delete_post(self, post: Post) -> None:
        pass

    @abstractmethod
    async def fetch_comments(self, post: Post) -> List[Comment]:
        pass


class FriendsFeatureAPI(FeatureAPI):
    """Friends capability used by the Friends module."""

    @abstractmethod
    async def fetch_friends(self) -> List[User]:
        pass


class ProfileFeatureAPI(FeatureAPI):
    """Profile capability used by the Profile module."""

    @abstractmethod
    async def fetch_profile(self) -> User:
        pass


# ---------------------------------------------------------------------------
# Feature modules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FeatureDescriptor:
    """Identity and display metadata of a feature module.

    ``id`` is the shell's lookup key and never changes for a module's lifetime.
    Icons are asset references resolved by the host.
    """

    id: str
    title: str
    tab_icon: str
    selected_tab_icon: str


class MicroFeature(ABC):
    """Public face of a feature module as seen by the shell."""

    @property
    @abstractmethod
    def descriptor(self) -> FeatureDescriptor:
        pass

    @property
    def id(self) -> str:
        return self.descriptor.id

    @property
    def title(self) -> str:
        return self.descriptor.title

    @property
    def tab_icon(self) -> str:
        return self.descriptor.tab_icon

    @property
    def selected_tab_icon(self) -> str:
        return self.descriptor.selected_tab_icon

    @abstractmethod
    def make_root_view(self) -> Any:
        """Return the module's root view. Opaque to the shell."""
        pass


class FeatureFactory(ABC, Generic[B]):
    """Builds a feature module from its dependency bundle.

    ``make_feature`` only wires references; it must not touch the network or
    emit events.
    """

    feature_id: str
    bundle_type: Type[B]

    @abstractmethod
    def make_feature(self, bundle: B) -> MicroFeature:
        pass
