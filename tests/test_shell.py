"""End-to-end composition tests: config -> shell -> features -> BFF."""

import pytest
from bff_stub import make_post
from bff_stub import make_user

from platformkit.analytics.events import AppLaunched
from platformkit.analytics.events import TabSelected
from platformkit.core.config import TestConfig
from platformkit.core.test_implementations import InMemoryResourceClient
from platformkit.events.broadcast import AppBroadcast
from platformkit.networking.client import HttpResourceClient
from platformkit.shell import AppShell

RECORDS = {
    "posts": [make_post(1, user_id=1), make_post(2, user_id=2), make_post(3, user_id=1)],
    "users": [make_user(1), make_user(2)],
}


@pytest.fixture
def shell():
    return AppShell(TestConfig(records=RECORDS))


def test_launch_builds_features_in_order(shell):
    features = shell.launch()

    assert [feature.id for feature in features] == ["feed", "friends", "profile"]
    assert shell.analytics.get_events() == [AppLaunched()]
    assert isinstance(shell.networking, InMemoryResourceClient)
    # Nothing was fetched while composing
    assert shell.networking.calls == []


def test_select_tab_tracks_title_and_caches_view(shell):
    shell.launch()

    first = shell.select_tab("friends")
    second = shell.select_tab("friends")

    assert first is second
    assert shell.selected == "friends"
    assert shell.analytics.get_events()[1:] == [TabSelected(title="Friends"), TabSelected(title="Friends")]


def test_unknown_feature(shell):
    shell.launch()

    with pytest.raises(KeyError):
        shell.select_tab("settings")


@pytest.mark.asyncio
async def test_profile_receives_feed_post_count(shell):
    shell.launch()
    profile = shell.select_tab("profile")
    feed = shell.select_tab("feed")

    await feed.load()
    user = await profile.load()

    assert user.id == 1
    assert profile.post_count == 2

    await feed.delete(feed.posts[0])
    assert profile.post_count == 1
    assert [record["id"] for record in shell.networking.records("posts")] == [2, 3]

    profile.close()
    assert shell.broadcast.subscriber_count(AppBroadcast.SELF_POSTS_COUNT) == 0


@pytest.mark.asyncio
async def test_shell_over_http_transport(bff):
    bff.add("GET", "/posts", json=[make_post(5, user_id=4)])
    shell = AppShell(TestConfig(transport=bff.transport, base_url="https://bff.test", user_id=4))
    shell.launch()
    profile = shell.select_tab("profile")

    posts = await shell.select_tab("feed").load()

    assert isinstance(shell.networking, HttpResourceClient)
    assert [post.id for post in posts] == [5]
    assert profile.post_count == 1
    assert str(bff.requests[0].url) == "https://bff.test/posts"
