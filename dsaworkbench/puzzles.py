"""String, grid and list puzzles."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

SERIES_MODULUS = 1_000_000_007
_DIGITS = frozenset("0123456789")


def _divides(text: str, piece: str) -> bool:
    """True when ``text`` is ``piece`` repeated a whole number of times."""
    count, remainder = divmod(len(text), len(piece))
    return remainder == 0 and piece * count == text


def gcd_of_strings(first: str, second: str) -> str:
    """Longest string that divides both inputs, or ``""`` if there is none."""
    smaller, bigger = sorted((first, second), key=len)
    for length in range(len(smaller), 0, -1):
        prefix = smaller[:length]
        if _divides(smaller, prefix) and _divides(bigger, prefix):
            return prefix
    return ""


def multiply_strings(first: str, second: str) -> str:
    """Product of two non-negative decimal numbers given as strings.

    Raises ``ValueError`` when either string is empty or holds a non-digit.
    """
    for number in (first, second):
        if not number or not set(number) <= _DIGITS:
            raise ValueError(f"{number!r} is not a non-negative decimal number")

    digits = [0] * (len(first) + len(second))
    for i, a in enumerate(reversed(first)):
        for j, b in enumerate(reversed(second)):
            digits[i + j] += int(a) * int(b)

    carry = 0
    for position, value in enumerate(digits):
        carry, digits[position] = divmod(value + carry, 10)

    text = "".join(str(d) for d in reversed(digits)).lstrip("0")
    return text or "0"


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """True when ``word`` can be traced through adjacent cells of ``board``.

    Cells connect horizontally and vertically, and no cell is used twice.
    """
    if not board:
        return False
    if not word:
        return True

    rows, cols = len(board), len(board[0])
    used: set[tuple[int, int]] = set()

    def trace(row: int, col: int, position: int) -> bool:
        if board[row][col] != word[position]:
            return False
        if position == len(word) - 1:
            return True
        used.add((row, col))
        for next_row, next_col in (
            (row + 1, col),
            (row - 1, col),
            (row, col + 1),
            (row, col - 1),
        ):
            if (
                0 <= next_row < rows
                and 0 <= next_col < cols
                and (next_row, next_col) not in used
                and trace(next_row, next_col, position + 1)
            ):
                used.discard((row, col))
                return True
        used.discard((row, col))
        return False

    return any(trace(r, c, 0) for r in range(rows) for c in range(cols))


def merge_sorted(lists: Iterable[Iterable[T]]) -> list[T]:
    """Merge already sorted sequences into one sorted list."""
    return list(heapq.merge(*lists))


def sum_of_series(n: int) -> int:
    """Sum of ``k**2 - (k-1)**2`` for k from 1 to n, modulo 1_000_000_007."""
    reduced = n % SERIES_MODULUS
    return reduced * reduced % SERIES_MODULUS