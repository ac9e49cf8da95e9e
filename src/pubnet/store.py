"""A single retained value that notifies subscribers whenever it changes."""

from __future__ import annotations

from typing import Any, Generic, List, Optional

from .errors import SubscriberFault
from .publisher import Publisher
from .settings import PubSubSettings
from .subscription import T, UNSET, Subscription, Unsubscribe


class Store(Generic[T]):
    """Keeps the last value passed to `set` and publishes every new value.

    Example::

        store = Store({"name": ""})
        unsub = store.subscribe(lambda person: print(person["name"]))
        store.set({"name": "Evyatar"})   # prints "Evyatar"
        store.get()                      # {"name": "Evyatar"}
        unsub()

    Subscribing does not replay the current value; `get()` returns `UNSET`
    until a value is set.
    """

    def __init__(self, initial: Any = UNSET, settings: Optional[PubSubSettings] = None):
        self._publisher: Publisher[T] = Publisher(settings)
        self._value: Any = initial

    @property
    def settings(self) -> PubSubSettings:
        return self._publisher.settings

    @property
    def is_set(self) -> bool:
        return self._value is not UNSET

    def __len__(self) -> int:
        return len(self._publisher)

    def __repr__(self) -> str:
        return f"<Store value={self._value!r} subscribers={len(self)}>"

    def get(self) -> Any:
        return self._value

    def set(self, value: T) -> None:
        self._publisher.raise_for_faults(self.put(value))

    def put(self, value: T, key: Any = UNSET) -> List[SubscriberFault]:
        """Store ``value`` and notify subscribers, returning faults instead of raising."""
        self._value = value
        return self._publisher.notify(value, key=key)

    def subscribe(self, cb: Subscription[T]) -> Unsubscribe:
        return self._publisher.subscribe(cb)

    def clear(self) -> None:
        """Drop every subscriber; the retained value is kept."""
        self._publisher.clear()
