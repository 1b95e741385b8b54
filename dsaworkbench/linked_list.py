"""A doubly linked list with positional insert and erase."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: _Node[T] | None = None
        self.next: _Node[T] | None = None


class LinkedList(Generic[T]):
    """Doubly linked list holding a head, a tail and its length.

    Reading or removing from an empty list raises ``IndexError``.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __contains__(self, value: object) -> bool:
        return self.find(value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_back(self, value: T) -> None:
        """Add a value after the tail."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def push_front(self, value: T) -> None:
        """Add a value before the head."""
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def _node_at(self, pos: int) -> _Node[T]:
        node = self._head
        for _ in range(pos):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, pos: int, value: T) -> None:
        """Insert ``value`` so that it ends up at position ``pos``.

        ``pos`` may range from 0 to the length; outside that ``IndexError`` is raised.
        """
        if not 0 <= pos <= self._size:
            raise IndexError(f"position {pos} is out of range for size {self._size}")
        if pos == 0:
            self.push_front(value)
        elif pos == self._size:
            self.push_back(value)
        else:
            before = self._node_at(pos - 1)
            after = before.next
            assert after is not None
            node = _Node(value)
            node.prev, node.next = before, after
            before.next = node
            after.prev = node
            self._size += 1

    def _unlink(self, node: _Node[T]) -> T:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def erase_value(self, value: T) -> bool:
        """Remove the first node equal to ``value``; return whether one was found."""
        node = self._head
        while node is not None:
            if node.value == value:
                self._unlink(node)
                return True
            node = node.next
        return False

    def erase_at(self, pos: int) -> T:
        """Remove and return the value at position ``pos``."""
        if not 0 <= pos < self._size:
            raise IndexError(f"position {pos} is out of range for size {self._size}")
        return self._unlink(self._node_at(pos))

    def pop_back(self) -> T:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._tail)

    def pop_front(self) -> T:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head)

    def front(self) -> T:
        """The first value."""
        if self._head is None:
            raise IndexError("front of an empty list")
        return self._head.value

    def back(self) -> T:
        """The last value."""
        if self._tail is None:
            raise IndexError("back of an empty list")
        return self._tail.value

    def clear(self) -> None:
        """Remove every value."""
        while self._tail is not None:
            self.pop_back()

    def find(self, value: object) -> bool:
        """True when some node holds a value equal to ``value``."""
        return any(item == value for item in self)