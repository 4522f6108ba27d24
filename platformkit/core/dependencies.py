"""Dependency bundles injected into feature factories.

The shell creates these once at composition time.  Modules borrow the
references for their lifetime and never build their own collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass

from platformkit.core.interfaces import Analytics
from platformkit.core.interfaces import FeedFeatureAPI
from platformkit.core.interfaces import FriendsFeatureAPI
from platformkit.core.interfaces import ProfileFeatureAPI


@dataclass(frozen=True)
class FeedDependencies:
    feed_api: FeedFeatureAPI
    analytics: Analytics


@dataclass(frozen=True)
class FriendsDependencies:
    friends_api: FriendsFeatureAPI
    analytics: Analytics


@dataclass(frozen=True)
class ProfileDependencies:
    profile_api: ProfileFeatureAPI
    analytics: Analytics
