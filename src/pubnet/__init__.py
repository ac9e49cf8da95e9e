"""Typed in-process publish/subscribe.

`Publisher` fans a payload out to its subscribers, `Store` retains the last
value it published, and `Network` / `Client` multiplex many of them by key.
"""

from __future__ import annotations

from .client import Client
from .errors import PublishError, SubscriberFault
from .network import Network
from .publisher import Publisher
from .settings import ErrorPolicy, PubSubSettings, get_settings
from .store import Store
from .subscription import UNSET, Follower, Subscription, Unsubscribe, is_unset
from .typed_map import TypedMap
from .utils.logger import setup_logger

__all__ = [
    "Client",
    "ErrorPolicy",
    "Follower",
    "Network",
    "PubSubSettings",
    "PublishError",
    "Publisher",
    "Store",
    "SubscriberFault",
    "Subscription",
    "TypedMap",
    "UNSET",
    "Unsubscribe",
    "get_settings",
    "is_unset",
    "setup_logger",
]
