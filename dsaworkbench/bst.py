"""Binary search tree nodes with parent links, subtree sizes and random selection."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(eq=False)
class TreeNode:
    """A binary tree node that knows its parent and the size of its subtree."""

    val: int
    parent: TreeNode | None = field(default=None, repr=False)
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)
    size: int = 1

    def insert_in_order(self, data: int) -> TreeNode:
        """Insert ``data`` below this node in search-tree order.

        Smaller values go left, equal or larger values go right. Every node on
        the way down has its subtree size increased. Returns the new node.
        """
        node = self
        while True:
            node.size += 1
            if data < node.val:
                if node.left is None:
                    node.left = TreeNode(data, parent=node)
                    return node.left
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(data, parent=node)
                    return node.right
                node = node.right

    def get_ith_node(self, index: int) -> TreeNode:
        """Return the node at position ``index`` of this subtree's in-order walk.

        Raises ``IndexError`` when the position is outside the subtree.
        """
        if index < 0:
            raise IndexError(f"index {index} is out of range")
        node: TreeNode | None = self
        while node is not None:
            left_size = node.left.size if node.left is not None else 0
            if index < left_size:
                node = node.left
            elif index == left_size:
                return node
            else:
                index -= left_size + 1
                node = node.right
        raise IndexError("index is out of range")


def build_minimal_bst(values: Sequence[int]) -> TreeNode | None:
    """Build a tree of minimal height from sorted ``values``, with parent links."""

    def build(start: int, end: int, parent: TreeNode | None) -> TreeNode | None:
        if start > end:
            return None
        mid = (start + end) // 2
        node = TreeNode(values[mid], parent=parent)
        node.left = build(start, mid - 1, node)
        node.right = build(mid + 1, end, node)
        return node

    return build(0, len(values) - 1, None)


def build_binary_tree(
    values: Sequence[int | None],
) -> tuple[TreeNode | None, dict[int, TreeNode]]:
    """Build a tree from a level-order list in which ``None`` marks a missing child.

    Returns the root and a mapping from each value to its node. Raises
    ``ValueError`` when the list names children of a node that does not exist.
    """
    if not values:
        return None, {}
    if values[0] is None:
        raise ValueError("the root value must not be None")

    root = TreeNode(values[0])
    nodes = {root.val: root}
    pending: deque[TreeNode] = deque([root])
    rest = iter(values[1:])

    for left_value in rest:
        if not pending:
            raise ValueError("level-order list names children of a missing node")
        node = pending.popleft()
        if left_value is not None:
            node.left = TreeNode(left_value, parent=node)
            pending.append(node.left)
            nodes[left_value] = node.left
        right_value = next(rest, None)
        if right_value is not None:
            node.right = TreeNode(right_value, parent=node)
            pending.append(node.right)
            nodes[right_value] = node.right
    return root, nodes


def _walk_inorder(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def inorder(root: TreeNode | None) -> list[int]:
    """Values of the tree in in-order."""
    return [node.val for node in _walk_inorder(root)]


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values of the tree grouped by level, top level first."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def inorder_successor(node: TreeNode | None) -> TreeNode | None:
    """Next node in in-order after ``node``, found through parent links."""
    if node is None:
        return None
    if node.right is not None:
        child = node.right
        while child.left is not None:
            child = child.left
        return child
    current, parent = node, node.parent
    while parent is not None and parent.left is not current:
        current, parent = parent, parent.parent
    return parent


def find_node(root: TreeNode | None, value: int) -> TreeNode | None:
    """Node holding ``value`` in a search tree, or ``None``."""
    node = root
    while node is not None and node.val != value:
        node = node.right if node.val < value else node.left
    return node


class RandomBST:
    """A search tree that can return a uniformly chosen node."""

    def __init__(self) -> None:
        self._root: TreeNode | None = None

    @property
    def root(self) -> TreeNode | None:
        return self._root

    def insert(self, data: int) -> None:
        """Insert a value in search-tree order."""
        if self._root is None:
            self._root = TreeNode(data)
        else:
            self._root.insert_in_order(data)

    def size(self) -> int:
        """Number of values in the tree."""
        return self._root.size if self._root is not None else 0

    def __len__(self) -> int:
        return self.size()

    def get_random(self, rng: random.Random | None = None) -> TreeNode | None:
        """Return a node chosen with equal probability, or ``None`` when empty."""
        if self._root is None:
            return None
        chooser = rng if rng is not None else random
        return self._root.get_ith_node(chooser.randrange(self.size()))

    def inorder(self) -> list[int]:
        """Values in in-order."""
        return inorder(self._root)

    def level_order(self) -> list[list[int]]:
        """Values grouped by level."""
        return level_order(self._root)