"""A least-recently-used cache of fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """Key-value cache that evicts the least recently used entry when full.

    Both reading and writing a key make it the most recently used.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        # Most recently used entries sit at the front.
        self._entries: OrderedDict[K, V] = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, items={self.items()!r})"

    def get(self, key: K) -> V | None:
        """Return the value for ``key`` and mark it as recently used.

        Returns ``None`` when the key is not cached.
        """
        try:
            value = self._entries[key]
        except KeyError:
            return None
        self._entries.move_to_end(key, last=False)
        return value

    def put(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, evicting the least recently used entry if full."""
        if key in self._entries:
            self._entries[key] = value
        else:
            if len(self._entries) >= self._capacity:
                self._entries.popitem(last=True)
            self._entries[key] = value
        self._entries.move_to_end(key, last=False)

    def items(self) -> list[tuple[K, V]]:
        """Entries from most recently to least recently used."""
        return list(self._entries.items())