"""Feed feature module: the post timeline."""

from __future__ import annotations

import logging
from typing import List

from platformkit.analytics.events import ItemSelected
from platformkit.analytics.events import ItemType
from platformkit.analytics.events import PageName
from platformkit.core.dependencies import FeedDependencies
from platformkit.core.interfaces import FeatureDescriptor
from platformkit.core.interfaces import FeatureFactory
from platformkit.core.interfaces import FeedFeatureAPI
from platformkit.core.interfaces import MicroFeature
from platformkit.core.interfaces import ResourceClient
from platformkit.events.broadcast import AppBroadcast
from platformkit.events.broadcast import BroadcastChannel
from platformkit.schemas.comment import Comment
from platformkit.schemas.post import Post

logger = logging.getLogger(__name__)


class BffFeedAPI(FeedFeatureAPI):
    """Feed capability backed by the ``posts`` BFF resource."""

    def __init__(self, networking: ResourceClient, path: str = "posts"):
        self._networking = networking
        self._path = path.strip("/")

    @property
    def networking(self) -> ResourceClient:
        return self._networking

    async def fetch_feeds(self) -> List[Post]:
        return await self._networking.fetch_list(self._path, Post)

    async def update_post(self, post: Post) -> Post:
        return await self._networking.update(f"{self._path}/{post.id}", Post, post)

    async def delete_post(self, post: Post) -> None:
        await self._networking.delete(self._path, Post, post.id)

    async def fetch_comments(self, post: Post) -> List[Comment]:
        return await self._networking.fetch_list(f"{self._path}/{post.id}/comments", Comment)


class FeedView:
    """State and actions behind the Feed tab.

    After every load or delete the number of posts written by the signed-in
    user is published on :attr:`AppBroadcast.SELF_POSTS_COUNT`.
    """

    def __init__(self, dependencies: FeedDependencies, broadcast: BroadcastChannel, self_user_id: int):
        self._api = dependencies.feed_api
        self._analytics = dependencies.analytics
        self._broadcast = broadcast
        self._self_user_id = self_user_id
        self.posts: List[Post] = []

    @property
    def self_posts_count(self) -> int:
        return sum(1 for post in self.posts if post.user_id == self._self_user_id)

    def _announce_count(self) -> None:
        self._broadcast.publish(AppBroadcast.SELF_POSTS_COUNT, self.self_posts_count)

    async def load(self) -> List[Post]:
        self.posts = await self._api.fetch_feeds()
        logger.debug("Feed loaded %d posts", len(self.posts))
        self._announce_count()
        return self.posts

    def select(self, post: Post) -> None:
        self._analytics.track(ItemSelected(id=post.id, item_type=ItemType.POST, page_name=PageName.FEED))

    async def update(self, post: Post) -> Post:
        updated = await self._api.update_post(post)
        self.posts = [updated if existing.id == updated.id else existing for existing in self.posts]
        self._announce_count()
        return updated

    async def delete(self, post: Post) -> None:
        # Local state only changes once the server confirmed the delete
        await self._api.delete_post(post)
        self.posts = [existing for existing in self.posts if existing.id != post.id]
        self._announce_count()

    async def comments(self, post: Post) -> List[Comment]:
        return await self._api.fetch_comments(post)


class FeedFeature(MicroFeature):
    DESCRIPTOR = FeatureDescriptor(id="feed", title="Feed", tab_icon="house", selected_tab_icon="house.fill")

    def __init__(self, dependencies: FeedDependencies, broadcast: BroadcastChannel, self_user_id: int):
        self._dependencies = dependencies
        self._broadcast = broadcast
        self._self_user_id = self_user_id

    @property
    def descriptor(self) -> FeatureDescriptor:
        return self.DESCRIPTOR

    def make_root_view(self) -> FeedView:
        return FeedView(self._dependencies, self._broadcast, self._self_user_id)


class FeedFeatureFactory(FeatureFactory[FeedDependencies]):
    feature_id = FeedFeature.DESCRIPTOR.id
    bundle_type = FeedDependencies

    def __init__(self, broadcast: BroadcastChannel, self_user_id: int = 1):
        self._broadcast = broadcast
        self._self_user_id = self_user_id

    def make_feature(self, bundle: FeedDependencies) -> MicroFeature:
        return FeedFeature(bundle, self._broadcast, self._self_user_id)
