from __future__ import annotations

import logging
import threading
from typing import Any, Generic, List, Optional

from .errors import SubscriberFault
from .publisher import Publisher
from .settings import PubSubSettings, get_settings
from .store import Store
from .subscription import K, V, UNSET, Follower, Subscription, Unsubscribe
from .typed_map import TypedMap

logger = logging.getLogger(__name__)


class Client(Generic[K, V]):
    """Associative map of keys to stores: a `Network` that remembers values.

    Example::

        client: Client[str, int] = Client()
        client.set("likes", 10)
        client.get("likes")                      # 10
        client.subscribe("likes", print)
        client.set("likes", 11)                  # prints 11
        client.get("dislikes")                   # UNSET
    """

    def __init__(self, settings: Optional[PubSubSettings] = None):
        self.settings = settings or get_settings()
        self._stores: TypedMap[K, Store[V]] = TypedMap()
        self._followers: Publisher = Publisher(self.settings)
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"<Client keys={len(self._stores)} followers={len(self._followers)}>"

    def get(self, key: K) -> Any:
        """Current value of ``key``, or `UNSET` if it was never set."""
        store = self._stores.get(key)
        return store.get() if store is not None else UNSET

    def has(self, key: K) -> bool:
        store = self._stores.get(key)
        return store is not None and store.is_set

    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, notify its subscribers, then every follower."""
        faults: List[SubscriberFault] = []
        with self._lock:
            store = self._stores.get(key)
            if store is None:
                self._stores.set(key, Store(value, self.settings))
                logger.debug("Created store for key=%r", key)
        if store is not None:
            faults.extend(store.put(value, key=key))
        faults.extend(self._followers.notify(key, value, key=key))
        self._followers.raise_for_faults(faults)

    def subscribe(self, key: K, cb: Subscription[V]) -> Unsubscribe:
        """Subscribe to changes of ``key``; the current value is not replayed."""
        with self._lock:
            store = self._stores.get(key)
            if store is None:
                store = Store(settings=self.settings)
                self._stores.set(key, store)
                logger.debug("Created empty store for key=%r", key)
        return store.subscribe(cb)

    def follow(self, cb: Follower[K, V]) -> Unsubscribe:
        """Add a follower, called with ``(key, value)`` on every `set`."""
        return self._followers.subscribe(cb)

    def clear(self, key: K) -> None:
        """Remove every subscriber of ``key``; its value is kept."""
        store = self._stores.get(key)
        if store is not None:
            store.clear()
            logger.debug("Cleared subscribers for key=%r", key)

    def full_clear(self) -> None:
        """Forget every key (values included) and every follower."""
        with self._lock:
            self._stores.clear()
        self._followers.clear()
        logger.debug("Cleared every store and follower")

    def keys(self):
        return self._stores.keys()
