"""Configuration classes for different application environments.

These classes decide which concrete collaborators the shell wires into the
feature modules for production, testing and development.
"""

from __future__ import annotations

import os
from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

import httpx

from platformkit.analytics.sink import LoggingAnalytics
from platformkit.config import DEFAULT_BFF_BASE_URL
from platformkit.config import Settings
from platformkit.config import get_settings
from platformkit.core.dependencies import FeedDependencies
from platformkit.core.dependencies import FriendsDependencies
from platformkit.core.dependencies import ProfileDependencies
from platformkit.core.interfaces import Analytics
from platformkit.core.interfaces import ResourceClient
from platformkit.core.test_implementations import InMemoryAnalytics
from platformkit.core.test_implementations import InMemoryResourceClient
from platformkit.events.broadcast import BroadcastChannel
from platformkit.features.feed import BffFeedAPI
from platformkit.features.feed import FeedFeatureFactory
from platformkit.features.friends import BffFriendsAPI
from platformkit.features.friends import FriendsFeatureFactory
from platformkit.features.profile import BffProfileAPI
from platformkit.features.profile import ProfileFeatureFactory
from platformkit.features.registry import FeatureRegistry
from platformkit.networking.client import HttpResourceClient


@dataclass
class AppConfig(ABC):
    """Abstract base configuration for the application."""

    @property
    @abstractmethod
    def self_user_id(self) -> int:
        """Identifier of the signed-in user."""
        pass

    @abstractmethod
    def create_resource_client(self) -> ResourceClient:
        """Create the BFF resource client."""
        pass

    @abstractmethod
    def create_analytics(self) -> Analytics:
        """Create the analytics sink."""
        pass

    def create_broadcast_channel(self) -> BroadcastChannel:
        """Create the process-wide broadcast channel."""
        return BroadcastChannel()

    def create_registry(self, broadcast: BroadcastChannel) -> FeatureRegistry:
        """Create the feature registry in tab order."""
        return FeatureRegistry.build(
            [
                FeedFeatureFactory(broadcast, self_user_id=self.self_user_id),
                FriendsFeatureFactory(),
                ProfileFeatureFactory(broadcast),
            ]
        )

    def create_dependencies(self, networking: ResourceClient, analytics: Analytics) -> Dict[str, Any]:
        """Create one dependency bundle per feature id."""
        return {
            "feed": FeedDependencies(feed_api=BffFeedAPI(networking), analytics=analytics),
            "friends": FriendsDependencies(friends_api=BffFriendsAPI(networking), analytics=analytics),
            "profile": ProfileDependencies(
                profile_api=BffProfileAPI(networking, user_id=self.self_user_id), analytics=analytics
            ),
        }


@dataclass
class ProductionConfig(AppConfig):
    """Production configuration talking to the real BFF."""

    bff_base_url: str
    user_id: int = 1

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> ProductionConfig:
        """Create configuration from the process settings."""
        settings = settings or get_settings()
        return cls(bff_base_url=settings.bff_base_url, user_id=settings.self_user_id)

    @property
    def self_user_id(self) -> int:
        return self.user_id

    def create_resource_client(self) -> ResourceClient:
        return HttpResourceClient(self.bff_base_url)

    def create_analytics(self) -> Analytics:
        return LoggingAnalytics()


@dataclass
class TestConfig(AppConfig):
    """Test configuration using isolated, controlled infrastructure.

    With a ``transport`` the real HTTP client runs against it (usually an
    ``httpx.MockTransport``); otherwise records are served from memory.
    """

    __test__ = False  # not a pytest test class

    records: Optional[Dict[str, List[Dict[str, Any]]]] = None
    transport: Optional[httpx.AsyncBaseTransport] = None
    base_url: str = "https://bff.test"
    user_id: int = 1

    @property
    def self_user_id(self) -> int:
        return self.user_id

    def create_resource_client(self) -> ResourceClient:
        if self.transport is not None:
            return HttpResourceClient(self.base_url, transport=self.transport)
        return InMemoryResourceClient(self.records)

    def create_analytics(self) -> Analytics:
        return InMemoryAnalytics()


@dataclass
class DevelopmentConfig(AppConfig):
    """Development configuration mixing real and mock services."""

    bff_base_url: str = DEFAULT_BFF_BASE_URL
    use_live_bff: bool = True
    records: Optional[Dict[str, List[Dict[str, Any]]]] = None
    user_id: int = 1

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> DevelopmentConfig:
        settings = settings or get_settings()
        return cls(bff_base_url=settings.bff_base_url, user_id=settings.self_user_id)

    @property
    def self_user_id(self) -> int:
        return self.user_id

    def create_resource_client(self) -> ResourceClient:
        if self.use_live_bff:
            return HttpResourceClient(self.bff_base_url)
        return InMemoryResourceClient(self.records)

    def create_analytics(self) -> Analytics:
        return LoggingAnalytics()


def load_config() -> AppConfig:
    """Load configuration based on environment."""
    environment = os.getenv("ENVIRONMENT", "production")

    if environment == "test":
        return TestConfig()
    elif environment == "development":
        return DevelopmentConfig.from_settings()
    else:
        return ProductionConfig.from_settings()
