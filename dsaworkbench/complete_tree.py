"""A complete binary tree filled level by level, left to right."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class CompleteBinaryTree(Generic[T]):
    """Binary tree where each new key takes the first free spot in level order.

    The tree is kept in a list in level order: the children of position ``i``
    are at ``2 * i + 1`` and ``2 * i + 2``.
    """

    def __init__(self, keys: Iterable[T] = ()) -> None:
        self._keys: list[T] = list(keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)

    def __repr__(self) -> str:
        return f"CompleteBinaryTree({self._keys!r})"

    def push(self, key: T) -> None:
        """Add a key at the first free position in level order."""
        self._keys.append(key)

    def pop(self) -> T:
        """Remove and return the root key; the last node's key becomes the root."""
        if not self._keys:
            raise IndexError("pop from an empty tree")
        last = self._keys.pop()
        if not self._keys:
            return last
        root = self._keys[0]
        self._keys[0] = last
        return root

    def first(self) -> T:
        """The root key."""
        if not self._keys:
            raise IndexError("first of an empty tree")
        return self._keys[0]

    def clear(self) -> None:
        """Remove every node."""
        self._keys.clear()

    def level_order(self) -> list[list[T]]:
        """Keys grouped by level, top level first."""
        levels: list[list[T]] = []
        start, width = 0, 1
        while start < len(self._keys):
            levels.append(self._keys[start : start + width])
            start += width
            width *= 2
        return levels

    def pre_order(self) -> list[T]:
        """Keys with each node before its subtrees."""
        result: list[T] = []
        stack = [0]
        while stack:
            index = stack.pop()
            if index < len(self._keys):
                result.append(self._keys[index])
                stack.extend((2 * index + 2, 2 * index + 1))
        return result

    def in_order(self) -> list[T]:
        """Keys with each node between its left and right subtrees."""
        result: list[T] = []

        def visit(index: int) -> None:
            if index < len(self._keys):
                visit(2 * index + 1)
                result.append(self._keys[index])
                visit(2 * index + 2)

        visit(0)
        return result

    def post_order(self) -> list[T]:
        """Keys with each node after its subtrees."""
        result: list[T] = []

        def visit(index: int) -> None:
            if index < len(self._keys):
                visit(2 * index + 1)
                visit(2 * index + 2)
                result.append(self._keys[index])

        visit(0)
        return result