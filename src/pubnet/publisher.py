from __future__ import annotations

import itertools
import logging
import threading
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple

from .errors import PublishError, SubscriberFault
from .settings import PubSubSettings, get_settings
from .subscription import T, UNSET, Subscription, Unsubscribe, describe_callback

logger = logging.getLogger(__name__)


class Publisher(Generic[T]):
    """Synchronous fan-out of one payload to every registered subscriber.

    Subscribers are kept in an ordered table keyed by a synthetic id, so the
    same callable subscribed twice is two separate registrations.

    A publish iterates over a snapshot of the table taken when it starts:
    subscribing or unsubscribing from inside a callback only affects later
    publishes.
    """

    def __init__(self, settings: Optional[PubSubSettings] = None):
        self.settings = settings or get_settings()
        self._subscribers: Dict[int, Callable[..., Any]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._subscribers)

    def __repr__(self) -> str:
        return f"<Publisher subscribers={len(self)}>"

    def subscribe(self, cb: Subscription[T]) -> Unsubscribe:
        with self._lock:
            sid = next(self._ids)
            self._subscribers[sid] = cb

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers.pop(sid, None)

        return unsubscribe

    def publish(self, payload: T) -> None:
        self.raise_for_faults(self.notify(payload))

    def clear(self) -> None:
        with self._lock:
            self._subscribers.clear()

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------
    def snapshot(self) -> List[Tuple[int, Callable[..., Any]]]:
        with self._lock:
            return list(self._subscribers.items())

    def notify(self, *args: Any, key: Any = UNSET) -> List[SubscriberFault]:
        """Call every subscriber with ``*args`` and return the faults they raised.

        Under the ``propagate`` policy the first exception escapes and the
        remaining subscribers are skipped.
        """
        policy = self.settings.error_policy
        faults: List[SubscriberFault] = []
        for sid, cb in self.snapshot():
            if policy == "propagate":
                cb(*args)
                continue
            try:
                cb(*args)
            except Exception as exc:
                fault = SubscriberFault(
                    subscription_id=sid, callback=describe_callback(cb), error=exc, key=key
                )
                if policy == "log":
                    logger.exception("Subscriber failed: %s", fault.describe())
                else:
                    logger.warning("Subscriber failed (collected): %s", fault.describe())
                faults.append(fault)
        return faults

    def raise_for_faults(self, faults: List[SubscriberFault]) -> None:
        if faults and self.settings.error_policy == "collect":
            raise PublishError(faults)
