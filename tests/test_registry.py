import pytest

from platformkit.core.dependencies import FeedDependencies
from platformkit.core.dependencies import FriendsDependencies
from platformkit.core.dependencies import ProfileDependencies
from platformkit.core.test_implementations import InMemoryResourceClient
from platformkit.features.feed import BffFeedAPI
from platformkit.features.feed import FeedFeatureFactory
from platformkit.features.friends import BffFriendsAPI
from platformkit.features.friends import FriendsFeatureFactory
from platformkit.features.profile import BffProfileAPI
from platformkit.features.profile import ProfileFeatureFactory
from platformkit.features.registry import FeatureRegistry
from platformkit.features.registry import MissingDependencies


@pytest.fixture
def registry(broadcast):
    return FeatureRegistry.build(
        [FeedFeatureFactory(broadcast), FriendsFeatureFactory(), ProfileFeatureFactory(broadcast)]
    )


@pytest.fixture
def bundles(analytics):
    client = InMemoryResourceClient()
    return {
        "feed": FeedDependencies(BffFeedAPI(client), analytics),
        "friends": FriendsDependencies(BffFriendsAPI(client), analytics),
        "profile": ProfileDependencies(BffProfileAPI(client, user_id=1), analytics),
    }


def test_declared_order(registry):
    assert registry.list_ids() == ["feed", "friends", "profile"]
    assert [factory.feature_id for factory in registry] == ["feed", "friends", "profile"]
    assert len(registry) == 3


def test_get(registry):
    assert isinstance(registry.get("friends"), FriendsFeatureFactory)
    assert registry.get("settings") is None


def test_duplicate_ids_rejected(broadcast):
    with pytest.raises(ValueError, match="Duplicate feature id 'feed'"):
        FeatureRegistry.build([FeedFeatureFactory(broadcast), FeedFeatureFactory(broadcast)])


def test_registry_is_immutable(registry):
    with pytest.raises(Exception):
        registry._order = ()
    with pytest.raises(TypeError):
        registry._factories["extra"] = FriendsFeatureFactory()


def test_make_features_in_order(registry, bundles):
    features = registry.make_features(bundles)

    assert [feature.id for feature in features] == ["feed", "friends", "profile"]


def test_missing_bundle(registry, bundles):
    del bundles["friends"]

    with pytest.raises(MissingDependencies) as exc_info:
        registry.make_features(bundles)

    assert exc_info.value.feature_id == "friends"


def test_wrong_bundle_type(registry, bundles):
    bundles["profile"] = bundles["friends"]

    with pytest.raises(TypeError, match="expects ProfileDependencies"):
        registry.make_features(bundles)


def test_bundles_are_frozen(bundles):
    with pytest.raises(Exception):
        bundles["feed"].analytics = None
