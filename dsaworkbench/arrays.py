"""Array puzzles: peaks and valleys, sparse search and magic index."""

from __future__ import annotations

from collections.abc import Sequence


def peaks_and_valleys_sorted(values: Sequence[int]) -> list[int]:
    """Return the values arranged peak, valley, peak, ... by sorting first.

    After sorting ascending, each adjacent pair is swapped, so every element
    at an even position is at least as large as its neighbours.
    """
    result = sorted(values)
    for i in range(1, len(result), 2):
        result[i - 1], result[i] = result[i], result[i - 1]
    return result


def _index_of_largest(values: list[int], centre: int) -> int:
    """Index of the largest of positions centre-1, centre, centre+1.

    Positions outside the list count as smaller than any value; on ties the
    leftmost position wins.
    """
    candidates = [
        index for index in (centre - 1, centre, centre + 1) if 0 <= index < len(values)
    ]
    return max(candidates, key=lambda index: (values[index], -index))


def peaks_and_valleys(values: Sequence[int]) -> list[int]:
    """Return the values arranged valley, peak, valley, ... without sorting.

    Every element at an odd position ends up at least as large as its
    neighbours.
    """
    result = list(values)
    for i in range(1, len(result), 2):
        biggest = _index_of_largest(result, i)
        if biggest != i:
            result[i], result[biggest] = result[biggest], result[i]
    return result


def sparse_search(strings: Sequence[str], target: str) -> int | None:
    """Find ``target`` in a sorted list interspersed with empty strings.

    Returns the index of the match, or ``None`` when it is absent.
    """
    left, right = 0, len(strings) - 1
    while left <= right:
        mid = (left + right) // 2
        if strings[mid] == target:
            return mid

        if not strings[mid]:
            lower, upper = mid - 1, mid + 1
            while True:
                if lower < left and upper > right:
                    return None
                if upper <= right and strings[upper]:
                    mid = upper
                    break
                if lower >= left and strings[lower]:
                    mid = lower
                    break
                lower -= 1
                upper += 1

        if strings[mid] == target:
            return mid
        if strings[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return None


def magic_index(values: Sequence[int]) -> int | None:
    """Return an index ``i`` with ``values[i] == i`` in a sorted list, or ``None``.

    Duplicates are allowed in the input.
    """

    def search(start: int, end: int) -> int | None:
        if end < start:
            return None
        mid = (start + end) // 2
        mid_value = values[mid]
        if mid == mid_value:
            return mid
        found = search(start, min(mid - 1, mid_value))
        if found is not None:
            return found
        return search(max(mid + 1, mid_value), end)

    return search(0, len(values) - 1)