"""A red-black tree: a self-balancing binary search tree."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Color(enum.Enum):
    """Colour of a red-black tree node."""

    RED = "R"
    BLACK = "B"


@dataclass(eq=False)
class RBNode(Generic[T]):
    """A node holding a key, its colour and links to parent and children."""

    key: T
    color: Color = Color.RED
    left: RBNode[T] | None = field(default=None, repr=False)
    right: RBNode[T] | None = field(default=None, repr=False)
    parent: RBNode[T] | None = field(default=None, repr=False)

    @property
    def is_red(self) -> bool:
        return self.color is Color.RED

    @property
    def is_black(self) -> bool:
        return self.color is Color.BLACK


def _is_red(node: RBNode[Any] | None) -> bool:
    return node is not None and node.is_red


def _is_black(node: RBNode[Any] | None) -> bool:
    """Missing children count as black leaves."""
    return node is None or node.is_black


class RedBlackTree(Generic[T]):
    """Ordered set of keys kept balanced by red-black colouring.

    Inserting a key already present leaves the tree unchanged; removing a key
    that is absent raises ``KeyError``.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: RBNode[T] | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    @property
    def root(self) -> RBNode[T] | None:
        return self._root

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: object) -> bool:
        return self.search(value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self.inorder())

    def __repr__(self) -> str:
        return f"RedBlackTree({self.inorder()!r})"

    # Rotations

    def _replace_in_parent(self, old: RBNode[T], new: RBNode[T] | None) -> None:
        parent = old.parent
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def _rotate_left(self, node: RBNode[T]) -> None:
        pivot = node.right
        if pivot is None:
            raise RuntimeError("cannot rotate left without a right child")
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._replace_in_parent(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: RBNode[T]) -> None:
        pivot = node.left
        if pivot is None:
            raise RuntimeError("cannot rotate right without a left child")
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._replace_in_parent(node, pivot)
        pivot.right = node
        node.parent = pivot

    @staticmethod
    def _sibling(node: RBNode[T]) -> RBNode[T] | None:
        parent = node.parent
        if parent is None:
            return None
        return parent.right if parent.left is node else parent.left

    # Insertion

    def insert(self, value: T) -> None:
        """Add ``value``; a key already present is left as it is."""
        parent: RBNode[T] | None = None
        current = self._root
        while current is not None:
            parent = current
            if value < current.key:  # type: ignore[operator]
                current = current.left
            elif current.key < value:  # type: ignore[operator]
                current = current.right
            else:
                return
        node = RBNode(value, parent=parent)
        if parent is None:
            self._root = node
        elif value < parent.key:  # type: ignore[operator]
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._repair_after_insert(node)

    def _repair_after_insert(self, node: RBNode[T]) -> None:
        while True:
            parent = node.parent
            if parent is None:
                node.color = Color.BLACK
                return
            if parent.is_black:
                return
            grand = parent.parent
            assert grand is not None  # a red parent is never the root
            uncle = grand.right if grand.left is parent else grand.left
            if _is_red(uncle):
                assert uncle is not None
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grand.color = Color.RED
                node = grand
                continue

            # Bring the node to the outside of the grandparent's subtree.
            if node is parent.right and parent is grand.left:
                self._rotate_left(parent)
                node = parent
            elif node is parent.left and parent is grand.right:
                self._rotate_right(parent)
                node = parent

            parent = node.parent
            assert parent is not None
            grand = parent.parent
            assert grand is not None
            if node is parent.left:
                self._rotate_right(grand)
            else:
                self._rotate_left(grand)
            parent.color = Color.BLACK
            grand.color = Color.RED
            return

    # Search

    def _find(self, value: T) -> RBNode[T] | None:
        node = self._root
        while node is not None:
            if value < node.key:  # type: ignore[operator]
                node = node.left
            elif node.key < value:  # type: ignore[operator]
                node = node.right
            else:
                return node
        return None

    def search(self, value: T) -> bool:
        """True when ``value`` is in the tree."""
        return self._find(value) is not None

    # Removal

    def remove(self, value: T) -> None:
        """Remove ``value``; raises ``KeyError`` when it is not present."""
        node = self._find(value)
        if node is None:
            raise KeyError(value)

        if node.left is not None and node.right is not None:
            predecessor = node.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            node.key = predecessor.key
            node = predecessor

        child = node.left if node.left is not None else node.right
        if node.is_black:
            if _is_red(child):
                assert child is not None
                child.color = Color.BLACK
            else:
                self._fix_double_black(node)
        self._replace_in_parent(node, child)
        node.parent = node.left = node.right = None
        self._size -= 1

    def _fix_double_black(self, node: RBNode[T]) -> None:
        while True:
            parent = node.parent
            if parent is None:
                return

            sibling = self._sibling(node)
            if _is_red(sibling):
                assert sibling is not None
                parent.color = Color.RED
                sibling.color = Color.BLACK
                if parent.left is node:
                    self._rotate_left(parent)
                else:
                    self._rotate_right(parent)

            sibling = self._sibling(node)
            if sibling is None:
                return
            nephews_black = _is_black(sibling.left) and _is_black(sibling.right)
            if parent.is_black and sibling.is_black and nephews_black:
                sibling.color = Color.RED
                node = parent
                continue
            if parent.is_red and sibling.is_black and nephews_black:
                sibling.color = Color.RED
                parent.color = Color.BLACK
                return

            if sibling.is_black:
                if (
                    parent.left is node
                    and _is_red(sibling.left)
                    and _is_black(sibling.right)
                ):
                    assert sibling.left is not None
                    sibling.color = Color.RED
                    sibling.left.color = Color.BLACK
                    self._rotate_right(sibling)
                elif (
                    parent.right is node
                    and _is_black(sibling.left)
                    and _is_red(sibling.right)
                ):
                    assert sibling.right is not None
                    sibling.color = Color.RED
                    sibling.right.color = Color.BLACK
                    self._rotate_left(sibling)

            sibling = self._sibling(node)
            assert sibling is not None
            sibling.color = parent.color
            parent.color = Color.BLACK
            if parent.left is node:
                if sibling.right is not None:
                    sibling.right.color = Color.BLACK
                self._rotate_left(parent)
            else:
                if sibling.left is not None:
                    sibling.left.color = Color.BLACK
                self._rotate_right(parent)
            return

    # Traversals

    def inorder(self) -> list[T]:
        """Keys in ascending order."""
        result: list[T] = []
        stack: list[RBNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result

    def preorder(self) -> list[T]:
        """Keys with each node before its subtrees."""
        result: list[T] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[T]:
        """Keys with each node after its subtrees."""
        result: list[T] = []

        def visit(node: RBNode[T] | None) -> None:
            if node is not None:
                visit(node.left)
                visit(node.right)
                result.append(node.key)

        visit(self._root)
        return result

    def levelorder(self) -> list[list[tuple[T, Color]]]:
        """Keys with their colours, grouped by level from the root down."""
        levels: list[list[tuple[T, Color]]] = []
        current = [self._root] if self._root is not None else []
        while current:
            levels.append([(node.key, node.color) for node in current])
            current = [
                child
                for node in current
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels