from __future__ import annotations

from typing import Callable, Dict, Generic, Iterator, Mapping, Optional, Tuple, TypeVar, Union, overload

from .subscription import K, V

D = TypeVar("D")


class TypedMap(Generic[K, V]):
    """Insertion-ordered key -> value table used by the registries.

    `keys()`, `values()` and `entries()` iterate over a snapshot taken when
    they are called, so mutating the map while consuming one is safe.
    """

    def __init__(self, initial: Optional[Mapping[K, V]] = None):
        self._map: Dict[K, V] = dict(initial or {})

    @overload
    def get(self, key: K) -> Optional[V]: ...

    @overload
    def get(self, key: K, default: D) -> Union[V, D]: ...

    def get(self, key, default=None):
        return self._map.get(key, default)

    def set(self, key: K, value: V) -> "TypedMap[K, V]":
        self._map[key] = value
        return self

    def has(self, key: K) -> bool:
        return key in self._map

    def delete(self, key: K) -> bool:
        """Remove ``key``; returns whether it was present."""
        return self._map.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        self._map.clear()

    def keys(self) -> Iterator[K]:
        return iter(list(self._map.keys()))

    def values(self) -> Iterator[V]:
        return iter(list(self._map.values()))

    def entries(self) -> Iterator[Tuple[K, V]]:
        return iter(list(self._map.items()))

    def for_each(self, visit: Callable[[V, K], object]) -> None:
        """Call ``visit(value, key)`` once per entry, in insertion order."""
        for key, value in list(self._map.items()):
            visit(value, key)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __repr__(self) -> str:
        return f"TypedMap({self._map!r})"


_MISSING = object()
