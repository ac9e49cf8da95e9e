"""Typing glue shared by publishers, stores and the keyed registries.

Payloads are always a single value per publish. Multi-value events should be
modelled as one structured payload (a tuple, dataclass or pydantic model).
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

# A subscriber receives exactly one payload.
Subscription = Callable[[T], Any]

# A follower receives the key a payload was published under, then the payload.
Follower = Callable[[K, V], Any]

# Returned by every `subscribe`/`follow`; calling it more than once is a no-op.
Unsubscribe = Callable[[], None]


class _Unset:
    """Sentinel for "no value has been set yet"."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: dict) -> "_Unset":
        return self

    def __reduce__(self):
        return (_Unset, ())


UNSET: Any = _Unset()


def is_unset(value: Any) -> bool:
    return value is UNSET


def describe_callback(cb: Callable[..., Any]) -> str:
    """Best-effort human readable name for a callback (used in logs and faults)."""
    name = getattr(cb, "__qualname__", None) or getattr(cb, "__name__", None)
    if name is None:
        return repr(cb)
    module = getattr(cb, "__module__", None)
    return f"{module}.{name}" if module else name
