"""Assorted interview problems: substrings, subarrays, parentheses, grids and trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import combinations

MOD = 10**9 + 7

_MOVES = ((-1, 0), (0, -1), (1, 0), (0, 1))  # up, left, down, right


def substring_calculator(text: str) -> int:
    """Count the substrings gathered from single characters, adjacent pairs
    and repeated prefix/suffix splits of ``text``.

    Every character but the last and every adjacent pair are taken first;
    then the text and each newly found piece of length three or more are
    split into their prefix and suffix one shorter. The text itself is not
    counted.
    """
    if len(text) < 2:
        return 0
    found: set[str] = set()
    for i in range(len(text) - 1):
        found.add(text[i])
        found.add(text[i : i + 2])

    pending = [text]
    while pending:
        piece = pending.pop()
        if len(piece) < 3:
            continue
        for part in (piece[:-1], piece[1:]):
            if part not in found:
                found.add(part)
                pending.append(part)
    return len(found)


def _best_run(values: Sequence[int]) -> int:
    """Largest contiguous sum, never below zero."""
    best = running = 0
    for value in values:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def max_subset_sum(values: Sequence[int]) -> int:
    """Largest sum found after reversing the interior of ``values`` and
    scanning two overlapping halves for their best contiguous run.

    Returns 0 for fewer than three values or when none is positive.
    """
    arr = list(values)
    if len(arr) < 3 or not any(value > 0 for value in arr):
        return 0
    interior = len(arr) - 2
    arr[1:-1] = arr[-2:0:-1]
    mid = interior // 2 + 1 if interior >= 2 else 0
    return max(_best_run(arr[: mid + 1]), _best_run(arr[mid:]))


def count_odd_product_subarrays(values: Iterable[int]) -> int:
    """Number of contiguous subarrays whose product is odd."""
    total = run = 0
    for value in values:
        if value % 2:
            run += 1
        else:
            total += run * (run + 1) // 2
            run = 0
    return total + run * (run + 1) // 2


def valid_parentheses(pairs: int) -> list[str]:
    """Every balanced string of ``pairs`` parenthesis pairs, opening first."""
    if pairs < 0:
        raise ValueError("pairs must not be negative")

    def build(opens: int, closes: int, prefix: str):
        if opens == 0 and closes == 0:
            yield prefix
        if opens > 0:
            yield from build(opens - 1, closes, prefix + "(")
        if closes > 0 and opens < closes:
            yield from build(opens, closes - 1, prefix + ")")

    return list(build(pairs, pairs, ""))


def _next_step(grid: list[list[int]], row: int, col: int) -> tuple[int, int] | None:
    here = grid[row][col]
    rows, cols = len(grid), len(grid[0])
    for d_row, d_col in _MOVES:
        r, c = row + d_row, col + d_col
        if 0 <= r < rows and 0 <= c < cols and grid[r][c] > 1 and grid[r][c] > here:
            return r, c
    return None


def cut_off_tree(forest: Sequence[Sequence[int]]) -> int:
    """Greedy walk from the top-left cell towards ever taller trees.

    At each cell the walk moves to the first neighbour (up, left, down,
    right) holding a tree taller than the current cell, marking the cell it
    leaves as cut. When no such neighbour exists it stops and returns the
    number of moves minus one. Returns -1 when the start cell is blocked.
    The input grid is not modified.
    """
    if not forest or not forest[0]:
        raise ValueError("forest must have at least one cell")
    grid = [list(row) for row in forest]
    if grid[0][0] == 0:
        return -1
    row = col = 0
    moves = 0
    while (step := _next_step(grid, row, col)) is not None:
        grid[row][col] = 1
        row, col = step
        moves += 1
    return moves - 1


class Tree:
    """Rooted tree built from (parent, child) edges; the first parent is the root."""

    def __init__(self, edges: Iterable[Sequence[int]]) -> None:
        edge_list = [tuple(edge) for edge in edges]
        self._root: int | None = edge_list[0][0] if edge_list else None
        self._parent: dict[int, int | None] = {}
        self._children: dict[int, set[int]] = {}
        self._distances: dict[frozenset[int], int] = {}
        for parent, child in edge_list:
            for node in (parent, child):
                self._parent.setdefault(node, None)
                self._children.setdefault(node, set())
            self._parent[child] = parent
            self._children[parent].add(child)

    @property
    def root(self) -> int | None:
        return self._root

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, node: object) -> bool:
        return node in self._parent

    def _neighbours(self, node: int) -> Iterable[int]:
        parent = self._parent[node]
        if parent is not None:
            yield parent
        yield from self._children[node]

    def dist(self, u: int, v: int) -> int:
        """Number of edges between ``u`` and ``v``; 0 when either is unknown.

        Raises ``ValueError`` when both are known but not connected.
        """
        key = frozenset((u, v))
        if key in self._distances:
            return self._distances[key]
        if u not in self._parent or v not in self._parent:
            self._distances[key] = 0
            return 0

        seen = {u}
        queue = deque([(u, 0)])
        while queue:
            node, depth = queue.popleft()
            if node == v:
                self._distances[key] = depth
                return depth
            for neighbour in self._neighbours(node):
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append((neighbour, depth + 1))
        raise ValueError(f"no path between {u} and {v}")

    def level_order(self) -> list[tuple[int, list[int]]]:
        """Each node reached from the root, in breadth-first order, with its sorted children."""
        if self._root is None:
            return []
        result: list[tuple[int, list[int]]] = []
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            children = sorted(self._children[node])
            result.append((node, children))
            queue.extend(children)
        return result


def answer_queries(
    edges: Iterable[Sequence[int]], queries: Iterable[Sequence[int]]
) -> list[int]:
    """For each query set, the sum of ``u * v * dist(u, v)`` over its pairs, modulo ``MOD``."""
    tree = Tree(edges)
    return [
        sum(u * v * tree.dist(u, v) for u, v in combinations(query, 2)) % MOD
        for query in queries
    ]