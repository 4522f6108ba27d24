from platformkit.events.broadcast import AppBroadcast
from platformkit.events.broadcast import BroadcastChannel
from platformkit.events.broadcast import Subscription

__all__ = ["AppBroadcast", "BroadcastChannel", "Subscription"]
