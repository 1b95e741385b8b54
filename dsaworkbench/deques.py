"""A double-ended queue with explicit front and back access."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Deque(Generic[T]):
    """Double-ended queue; reading or removing from an empty one raises ``IndexError``."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"

    def push_front(self, value: T) -> None:
        """Add a value at the front."""
        self._items.appendleft(value)

    def push_back(self, value: T) -> None:
        """Add a value at the back."""
        self._items.append(value)

    def pop_front(self) -> T:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.popleft()

    def pop_back(self) -> T:
        """Remove and return the back value."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.pop()

    def front(self) -> T:
        """The front value."""
        if not self._items:
            raise IndexError("front of an empty deque")
        return self._items[0]

    def back(self) -> T:
        """The back value."""
        if not self._items:
            raise IndexError("back of an empty deque")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()