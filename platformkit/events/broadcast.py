"""In-process broadcast channel for loosely-coupled cross-module signals.

Unlike a notification-center singleton, a :class:`BroadcastChannel` is created
by the shell at composition time and handed to whatever needs to publish or
subscribe.  It lives for the rest of the process.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Any
from typing import Callable
from typing import Dict
from typing import List
from typing import Tuple

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class AppBroadcast:
    """App-wide broadcast channel names."""

    # Count of posts authored by the logged-in user.
    SELF_POSTS_COUNT = "selfPostsCount"


class Subscription:
    """Handle returned by :meth:`BroadcastChannel.subscribe`."""

    def __init__(self, channel: "BroadcastChannel", name: str, token: int):
        self._channel = channel
        self.name = name
        self._token = token
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Stop receiving messages. Calling it again is a no-op."""
        if self._active:
            self._active = False
            self._channel._remove(self.name, self._token)


class BroadcastChannel:
    """Named publish/subscribe with synchronous, in-order delivery.

    Messages are not stored: a handler subscribed after a publish never sees
    it.  The subscriber map is guarded by a lock and ``publish`` works on a
    snapshot, so a subscription made mid-publish only takes part in later
    publishes.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._subscribers: Dict[str, List[Tuple[int, Handler]]] = {}
        self._tokens = itertools.count(1)

    def subscribe(self, name: str, handler: Handler) -> Subscription:
        """Register *handler* for messages published on *name*.

        Args:
            name: Channel name, e.g. :attr:`AppBroadcast.SELF_POSTS_COUNT`
            handler: Callable invoked with the payload of every later publish
        """
        with self._lock:
            token = next(self._tokens)
            # Copy-on-write so snapshots held by in-flight publishes stay intact
            self._subscribers[name] = self._subscribers.get(name, []) + [(token, handler)]
        logger.debug(f"Added subscriber for channel {name}")
        return Subscription(self, name, token)

    def _remove(self, name: str, token: int) -> None:
        with self._lock:
            remaining = [entry for entry in self._subscribers.get(name, []) if entry[0] != token]
            if remaining:
                self._subscribers[name] = remaining
            else:
                # Clean up empty subscriber lists
                self._subscribers.pop(name, None)
        logger.debug(f"Removed subscriber for channel {name}")

    def publish(self, name: str, payload: Any) -> int:
        """Deliver *payload* to every current subscriber of *name*.

        Returns:
            Number of handlers the payload was delivered to.
        """
        with self._lock:
            handlers = self._subscribers.get(name, [])

        if not handlers:
            return 0

        logger.debug(f"Publishing on {name} with payload: {payload!r}")

        delivered = 0
        for _, handler in handlers:
            try:
                handler(payload)
                delivered += 1
            except Exception as e:
                logger.error(f"Error in broadcast handler for {name}: {str(e)}")
        return delivered

    def subscriber_count(self, name: str) -> int:
        with self._lock:
            return len(self._subscribers.get(name, []))
