"""Quadratic in-place sorting algorithms."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def insertion_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by insertion."""
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key


def selection_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by repeatedly selecting the smallest remaining value."""
    size = len(values)
    for i in range(size):
        smallest = min(range(i, size), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place, stopping early once a pass makes no swap."""
    size = len(values)
    for done in range(size - 1):
        swapped = False
        for j in range(size - done - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break


def bubble_sort_recursive(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place, one bubbling pass per recursion level.

    Recursion depth equals the length, so very long inputs hit the recursion limit.
    """

    def sort_prefix(size: int) -> None:
        if size <= 1:
            return
        for i in range(size - 1):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
        sort_prefix(size - 1)

    sort_prefix(len(values))