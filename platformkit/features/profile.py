"""Profile feature module.

Shows the signed-in user and the number of posts they wrote.  The count is not
fetched here; it arrives from the Feed module over the broadcast channel.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Optional

from platformkit.core.dependencies import ProfileDependencies
from platformkit.core.interfaces import FeatureDescriptor
from platformkit.core.interfaces import FeatureFactory
from platformkit.core.interfaces import MicroFeature
from platformkit.core.interfaces import ProfileFeatureAPI
from platformkit.core.interfaces import ResourceClient
from platformkit.events.broadcast import AppBroadcast
from platformkit.events.broadcast import BroadcastChannel
from platformkit.schemas.user import User

logger = logging.getLogger(__name__)


class BffProfileAPI(ProfileFeatureAPI):
    def __init__(self, networking: ResourceClient, user_id: int, path: str = "users"):
        self._networking = networking
        self._user_id = user_id
        self._path = path.strip("/")

    @property
    def networking(self) -> ResourceClient:
        return self._networking

    async def fetch_profile(self) -> User:
        return await self._networking.fetch_single(f"{self._path}/{self._user_id}", User)


class ProfileView:
    """Profile tab state. Call :meth:`close` when the view goes away."""

    def __init__(self, dependencies: ProfileDependencies, broadcast: BroadcastChannel):
        self._api = dependencies.profile_api
        self.user: Optional[User] = None
        self.post_count: Optional[int] = None
        self._subscription = broadcast.subscribe(AppBroadcast.SELF_POSTS_COUNT, self._on_post_count)

    def _on_post_count(self, payload: Any) -> None:
        if not isinstance(payload, int):
            logger.warning("Ignoring non-integer post count %r", payload)
            return
        self.post_count = payload

    async def load(self) -> User:
        self.user = await self._api.fetch_profile()
        return self.user

    def close(self) -> None:
        self._subscription.cancel()


class ProfileFeature(MicroFeature):
    DESCRIPTOR = FeatureDescriptor(
        id="profile",
        title="Profile",
        tab_icon="person.crop.circle",
        selected_tab_icon="person.crop.circle.fill",
    )

    def __init__(self, dependencies: ProfileDependencies, broadcast: BroadcastChannel):
        self._dependencies = dependencies
        self._broadcast = broadcast

    @property
    def descriptor(self) -> FeatureDescriptor:
        return self.DESCRIPTOR

    def make_root_view(self) -> ProfileView:
        return ProfileView(self._dependencies, self._broadcast)


class ProfileFeatureFactory(FeatureFactory[ProfileDependencies]):
    feature_id = ProfileFeature.DESCRIPTOR.id
    bundle_type = ProfileDependencies

    def __init__(self, broadcast: BroadcastChannel):
        self._broadcast = broadcast

    def make_feature(self, bundle: ProfileDependencies) -> MicroFeature:
        return ProfileFeature(bundle, self._broadcast)
