"""A singly linked list with positional insert, erase and splice after a node."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

BEFORE_BEGIN = -1
"""Position that stands before the first element, as used by the ``*_after`` methods."""


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node[T] | None = None) -> None:
        self.value = value
        self.next = next_node


class ForwardList(Generic[T]):
    """Singly linked list addressed by position.

    The ``*_after`` methods take the position of the element after which they
    act; ``BEFORE_BEGIN`` (-1) addresses the spot before the first element.
    Reading or removing from an empty list raises ``IndexError``.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] = _Node(None)
        self._size = 0
        self.assign(values)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head.next is not None

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ForwardList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"ForwardList({list(self)!r})"

    def _node_at(self, index: int) -> _Node[T]:
        if not BEFORE_BEGIN <= index < self._size:
            raise IndexError(f"position {index} is out of range for size {self._size}")
        node = self._head
        for _ in range(index + 1):
            assert node.next is not None
            node = node.next
        return node

    @staticmethod
    def _link_after(node: _Node[T], values: Iterable[T]) -> tuple[_Node[T], int]:
        added = 0
        for value in values:
            node.next = _Node(value, node.next)
            node = node.next
            added += 1
        return node, added

    def assign(self, values: Iterable[T]) -> None:
        """Replace the contents with ``values``."""
        items = list(values)
        self._head.next = None
        self._size = 0
        _, added = self._link_after(self._head, items)
        self._size = added

    def front(self) -> T:
        """The first value."""
        if self._head.next is None:
            raise IndexError("front of an empty list")
        return self._head.next.value

    def clear(self) -> None:
        """Remove every value."""
        self._head.next = None
        self._size = 0

    def push_front(self, value: T) -> None:
        """Add a value before the first element."""
        self._head.next = _Node(value, self._head.next)
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first value."""
        first = self._head.next
        if first is None:
            raise IndexError("pop from an empty list")
        self._head.next = first.next
        self._size -= 1
        return first.value

    def insert_after(self, index: int, *args: T) -> int:
        """Insert the given values, in order, after position ``index``.

        Returns the position of the last inserted value, or ``index`` when
        nothing was given.
        """
        node = self._node_at(index)
        _, added = self._link_after(node, args)
        self._size += added
        return index + added

    def erase_after(self, index: int) -> T:
        """Remove and return the value following position ``index``."""
        before = self._node_at(index)
        target = before.next
        if target is None:
            raise IndexError(f"no element after position {index}")
        before.next = target.next
        self._size -= 1
        return target.value

    def resize(self, count: int, value: T | None = None) -> None:
        """Keep the first ``count`` values, padding with ``value`` if shorter."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count < self._size:
            last = self._node_at(count - 1)
            last.next = None
            self._size = count
        elif count > self._size:
            last = self._node_at(self._size - 1)
            _, added = self._link_after(last, [value] * (count - self._size))  # type: ignore[list-item]
            self._size += added

    def swap(self, other: ForwardList[T]) -> None:
        """Exchange contents with ``other``."""
        self._head.next, other._head.next = other._head.next, self._head.next
        self._size, other._size = other._size, self._size

    def merge(
        self, other: ForwardList[T], key: Callable[[T], Any] | None = None
    ) -> None:
        """Merge sorted ``other`` into this sorted list, leaving ``other`` empty.

        Equal values keep this list's elements ahead of ``other``'s.
        """
        if other is self:
            return

        def comes_first(candidate: T, current: T) -> bool:
            if key is None:
                return candidate < current  # type: ignore[operator]
            return key(candidate) < key(current)

        tail = self._head
        mine, theirs = self._head.next, other._head.next
        while mine is not None and theirs is not None:
            if comes_first(theirs.value, mine.value):
                tail.next = theirs
                theirs = theirs.next
            else:
                tail.next = mine
                mine = mine.next
            tail = tail.next
        tail.next = mine if mine is not None else theirs
        self._size += other._size
        other.clear()

    def splice_after(self, index: int, other: ForwardList[T]) -> None:
        """Move every element of ``other`` after position ``index``."""
        if other is self:
            raise ValueError("cannot splice a list into itself")
        before = self._node_at(index)
        first = other._head.next
        if first is None:
            return
        last = first
        while last.next is not None:
            last = last.next
        last.next = before.next
        before.next = first
        self._size += other._size
        other.clear()

    def remove(self, value: T) -> int:
        """Remove every value equal to ``value``; return how many were removed."""
        return self.remove_if(lambda item: item == value)

    def remove_if(self, predicate: Callable[[T], bool]) -> int:
        """Remove every value for which ``predicate`` holds; return how many."""
        removed = 0
        prev = self._head
        while prev.next is not None:
            if predicate(prev.next.value):
                prev.next = prev.next.next
                removed += 1
            else:
                prev = prev.next
        self._size -= removed
        return removed

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        prev: _Node[T] | None = None
        node = self._head.next
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self._head.next = prev

    def unique(self, predicate: Callable[[T, T], bool] | None = None) -> int:
        """Drop each element equal to the one before it; return how many were dropped.

        ``predicate`` decides equality and defaults to ``==``.
        """
        same = predicate if predicate is not None else operator.eq
        removed = 0
        node = self._head.next
        while node is not None and node.next is not None:
            if same(node.value, node.next.value):
                node.next = node.next.next
                removed += 1
            else:
                node = node.next
        self._size -= removed
        return removed

    def sort(self, key: Callable[[T], Any] | None = None) -> None:
        """Sort the elements in place, stably."""
        ordered = sorted(self, key=key)  # type: ignore[arg-type]
        node = self._head.next
        for value in ordered:
            assert node is not None
            node.value = value
            node = node.next