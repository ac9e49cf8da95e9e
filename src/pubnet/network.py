from __future__ import annotations

import logging
import threading
from typing import Generic, List, Optional

from .errors import SubscriberFault
from .publisher import Publisher
from .settings import PubSubSettings, get_settings
from .subscription import K, V, Follower, Subscription, Unsubscribe
from .typed_map import TypedMap

logger = logging.getLogger(__name__)


class Network(Generic[K, V]):
    """Associative map of keys to publishers, plus followers of every key.

    None of its publishers holds any state; see `Client` for that.

    Example::

        network: Network[str, object] = Network()

        unsub = network.subscribe("latest_reader", lambda person: ...)
        unfollow = network.follow(lambda key, data: print(key, data))

        # calls the "latest_reader" subscribers, then the follower
        network.publish("latest_reader", {"name": "Evyatar", "age": 19})

        unsub()
        unfollow()

        network.clear("readers")   # subscribers of one key
        network.full_clear()       # every key and every follower

    Keys are matched by equality only; use a tuple for compound keys.
    """

    def __init__(self, settings: Optional[PubSubSettings] = None):
        self.settings = settings or get_settings()
        self._publishers: TypedMap[K, Publisher[V]] = TypedMap()
        self._followers: Publisher = Publisher(self.settings)
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"<Network keys={len(self._publishers)} followers={len(self._followers)}>"

    def _publisher_for(self, key: K) -> Publisher[V]:
        with self._lock:
            publisher = self._publishers.get(key)
            if publisher is None:
                publisher = Publisher(self.settings)
                self._publishers.set(key, publisher)
                logger.debug("Created publisher for key=%r", key)
            return publisher

    def subscribe(self, key: K, cb: Subscription[V]) -> Unsubscribe:
        """Add a subscriber to ``key``; returns its `unsubscribe` function."""
        return self._publisher_for(key).subscribe(cb)

    def publish(self, key: K, payload: V) -> None:
        """Notify the subscribers of ``key``, then every follower.

        Publishing to a key nobody subscribed to does not create it; the
        followers are still notified.
        """
        faults: List[SubscriberFault] = []
        publisher = self._publishers.get(key)
        if publisher is not None:
            faults.extend(publisher.notify(payload, key=key))
        faults.extend(self._followers.notify(key, payload, key=key))
        self._followers.raise_for_faults(faults)

    def follow(self, cb: Follower[K, V]) -> Unsubscribe:
        """Add a follower, called with ``(key, payload)`` on every publish."""
        return self._followers.subscribe(cb)

    def clear(self, key: K) -> None:
        """Remove every subscriber of ``key``; other keys and followers are kept."""
        publisher = self._publishers.get(key)
        if publisher is not None:
            publisher.clear()
            logger.debug("Cleared subscribers for key=%r", key)

    def full_clear(self) -> None:
        """Remove all subscribers **and followers**, for every key."""
        with self._lock:
            self._publishers.clear()
        self._followers.clear()
        logger.debug("Cleared every key and follower")

    def keys(self):
        return self._publishers.keys()

    def subscriber_count(self, key: K) -> int:
        publisher = self._publishers.get(key)
        return len(publisher) if publisher is not None else 0
