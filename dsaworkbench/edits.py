"""Check whether two strings are at most one edit apart."""

from __future__ import annotations


def one_away(first: str, second: str) -> bool:
    """Return True when the strings differ by at most one insert, remove or replace."""
    if abs(len(first) - len(second)) > 1:
        return False

    if len(first) == len(second):
        return sum(a != b for a, b in zip(first, second)) <= 1

    shorter, longer = (first, second) if len(first) < len(second) else (second, first)
    edits = 0
    i = j = 0
    while i < len(shorter):
        if shorter[i] != longer[j]:
            i += 1
            edits += 1
            if edits > 1:
                return False
        i += 1
        j += 1
    return True