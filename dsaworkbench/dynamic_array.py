"""A growable array that tracks its own capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """Array with a size and a separately managed capacity.

    Capacity doubles when appending or inserting into a full array.
    """

    def __init__(self, size: int = 0, fill: Any = None) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._fill = fill
        self._slots: list[Any] = [fill] * size
        self._size = size

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots[: self._size])

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        self._slots[index] = value

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r}, capacity={self.capacity})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is out of range for size {self._size}")

    def _grow_for(self, extra: int) -> None:
        needed = self._size + extra
        if needed > self.capacity:
            new_capacity = max(1, self.capacity)
            while new_capacity < needed:
                new_capacity *= 2
            self.reserve(new_capacity)

    def reserve(self, capacity: int) -> None:
        """Grow the capacity to at least ``capacity``; never shrinks."""
        if capacity > self.capacity:
            self._slots.extend([None] * (capacity - self.capacity))

    def append(self, value: T) -> None:
        """Add a value at the end."""
        self._grow_for(1)
        self._slots[self._size] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the last value."""
        if not self._size:
            raise IndexError("pop from an empty array")
        self._size -= 1
        value = self._slots[self._size]
        self._slots[self._size] = None
        return value

    def insert(self, index: int, value: T, count: int = 1) -> None:
        """Insert ``count`` copies of ``value`` before position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} is out of range for size {self._size}")
        if count < 0:
            raise ValueError("count must not be negative")
        self._grow_for(count)
        end = self._size
        self._slots[index + count : end + count] = self._slots[index:end]
        self._slots[index : index + count] = [value] * count
        self._size += count

    def erase(self, index: int) -> T:
        """Remove and return the value at ``index``, shifting later values left."""
        self._check_index(index)
        value = self._slots.pop(index)
        self._slots.append(None)
        self._size -= 1
        return value

    def resize(self, size: int) -> None:
        """Set size and capacity to ``size``, padding with the fill value."""
        if size < 0:
            raise ValueError("size must not be negative")
        kept = self._slots[: min(self._size, size)]
        self._slots = kept + [self._fill] * (size - len(kept))
        self._size = size

    def clear(self) -> None:
        """Remove every value and release the capacity."""
        self._slots = []
        self._size = 0

    def front(self) -> T:
        """The first value."""
        if not self._size:
            raise IndexError("front of an empty array")
        return self._slots[0]

    def back(self) -> T:
        """The last value."""
        if not self._size:
            raise IndexError("back of an empty array")
        return self._slots[self._size - 1]

    def at(self, index: int) -> T:
        """The value at ``index``; raises ``IndexError`` when out of range."""
        self._check_index(index)
        return self._slots[index]