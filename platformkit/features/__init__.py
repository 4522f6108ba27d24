"""Feature modules composed by the shell."""

from platformkit.features.feed import FeedFeatureFactory
from platformkit.features.friends import FriendsFeatureFactory
from platformkit.features.profile import ProfileFeatureFactory
from platformkit.features.registry import FeatureRegistry
from platformkit.features.registry import MissingDependencies

__all__ = [
    "FeedFeatureFactory",
    "FriendsFeatureFactory",
    "ProfileFeatureFactory",
    "FeatureRegistry",
    "MissingDependencies",
]
