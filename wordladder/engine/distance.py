"""Hamming distance between words."""

from __future__ import annotations

from ..core.constants import LENGTH_MISMATCH


def hamming_distance(first: str, second: str) -> int:
    """Return the number of positions where ``first`` and ``second`` differ.

    Comparison is case-insensitive. Words of different lengths have no
    Hamming distance and yield :data:`LENGTH_MISMATCH` instead.
    """

    if len(first) != len(second):
        return LENGTH_MISMATCH
    return sum(1 for a, b in zip(first.lower(), second.lower()) if a != b)


__all__ = ["hamming_distance", "LENGTH_MISMATCH"]
