"""Counting and arithmetic puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cache
from itertools import accumulate

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Person:
    """A person's birth and death years, both inclusive."""

    birth: int
    death: int


def year_with_most_living(
    people: Sequence[Person], min_year: int, max_year: int
) -> int:
    """Year with the most people alive, by walking sorted births and deaths.

    Returns ``min_year`` when nobody is given.
    """
    del max_year  # the sweep does not need the upper bound
    births = sorted(person.birth for person in people)
    deaths = sorted(person.death for person in people)

    alive = 0
    most_alive = 0
    best_year = min_year
    death_index = 0
    for birth in births:
        while birth > deaths[death_index]:
            alive -= 1
            death_index += 1
        alive += 1
        if alive > most_alive:
            most_alive = alive
            best_year = birth
    return best_year


def year_with_most_living_by_deltas(
    people: Iterable[Person], min_year: int, max_year: int
) -> int:
    """Year with the most people alive, using per-year population changes.

    Raises ``ValueError`` when a birth or death lies outside the year range.
    """
    deltas = [0] * (max_year - min_year + 2)
    for person in people:
        for year in (person.birth, person.death):
            if not min_year <= year <= max_year:
                raise ValueError(
                    f"year {year} is outside the range {min_year}..{max_year}"
                )
        deltas[person.birth - min_year] += 1
        deltas[person.death - min_year + 1] -= 1

    best_offset = 0
    most_alive = 0
    for offset, alive in enumerate(accumulate(deltas)):
        if alive > most_alive:
            most_alive = alive
            best_offset = offset
    return min_year + best_offset


def _flip(bit: int) -> int:
    return 1 ^ bit


def _sign(num: int) -> int:
    """1 when the 32-bit value is non-negative, 0 when negative."""
    return _flip((num >> 31) & 1)


def number_max(a: int, b: int) -> int:
    """Larger of two 32-bit integers, chosen without comparing them.

    The choice is made from sign bits and stays correct where ``a - b``
    would overflow 32 bits. Raises ``ValueError`` for values outside that range.
    """
    for value in (a, b):
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise ValueError(f"{value} does not fit in a 32-bit signed integer")

    sign_a = _sign(a)
    sign_b = _sign(b)
    sign_diff = _sign(a - b)

    use_sign_of_a = sign_a ^ sign_b
    use_sign_of_diff = _flip(sign_a ^ sign_b)

    k = use_sign_of_a * sign_a + use_sign_of_diff * sign_diff
    q = _flip(k)
    return a * k + b * q


def count_ways(n: int) -> int:
    """Ways to climb ``n`` steps taking 1, 2 or 3 at a time (plain recursion)."""
    if n < 0:
        return 0
    if n == 0:
        return 1
    return count_ways(n - 1) + count_ways(n - 2) + count_ways(n - 3)


def count_ways_memo(n: int) -> int:
    """Same count as :func:`count_ways`, built up from remembered results."""
    if n < 0:
        return 0
    ways = [1]
    for step in range(1, n + 1):
        ways.append(sum(ways[max(0, step - 3) : step]))
    return ways[n]


_DENOMINATIONS = (25, 10, 5, 1)


def make_change(n: int) -> int:
    """Ways to make ``n`` cents from quarters, dimes, nickels and pennies."""
    if n < 0:
        raise ValueError("amount must not be negative")

    @cache
    def ways(amount: int, index: int) -> int:
        if index >= len(_DENOMINATIONS) - 1:
            return 1
        denomination = _DENOMINATIONS[index]
        return sum(
            ways(amount - count * denomination, index + 1)
            for count in range(amount // denomination + 1)
        )

    return ways(n, 0)