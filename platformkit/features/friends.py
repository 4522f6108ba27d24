"""Friends feature module."""

from __future__ import annotations

from typing import List

from platformkit.analytics.events import ItemSelected
from platformkit.analytics.events import ItemType
from platformkit.analytics.events import PageName
from platformkit.core.dependencies import FriendsDependencies
from platformkit.core.interfaces import FeatureDescriptor
from platformkit.core.interfaces import FeatureFactory
from platformkit.core.interfaces import FriendsFeatureAPI
from platformkit.core.interfaces import MicroFeature
from platformkit.core.interfaces import ResourceClient
from platformkit.schemas.user import User


class BffFriendsAPI(FriendsFeatureAPI):
    def __init__(self, networking: ResourceClient, path: str = "users"):
        self._networking = networking
        self._path = path.strip("/")

    @property
    def networking(self) -> ResourceClient:
        return self._networking

    async def fetch_friends(self) -> List[User]:
        return await self._networking.fetch_list(self._path, User)


class FriendsView:
    def __init__(self, dependencies: FriendsDependencies):
        self._api = dependencies.friends_api
        self._analytics = dependencies.analytics
        self.friends: List[User] = []

    async def load(self) -> List[User]:
        self.friends = await self._api.fetch_friends()
        return self.friends

    def select(self, friend: User) -> None:
        self._analytics.track(ItemSelected(id=friend.id, item_type=ItemType.FRIEND, page_name=PageName.FRIENDS))


class FriendsFeature(MicroFeature):
    DESCRIPTOR = FeatureDescriptor(
        id="friends", title="Friends", tab_icon="person.2", selected_tab_icon="person.2.fill"
    )

    def __init__(self, dependencies: FriendsDependencies):
        self._dependencies = dependencies

    @property
    def descriptor(self) -> FeatureDescriptor:
        return self.DESCRIPTOR

    def make_root_view(self) -> FriendsView:
        return FriendsView(self._dependencies)


class FriendsFeatureFactory(FeatureFactory[FriendsDependencies]):
    feature_id = FriendsFeature.DESCRIPTOR.id
    bundle_type = FriendsDependencies

    def make_feature(self, bundle: FriendsDependencies) -> MicroFeature:
        return FriendsFeature(bundle)
