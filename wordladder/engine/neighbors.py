"""Neighbor enumeration over a lexicon."""

from __future__ import annotations

from typing import List, Set

from ..core.constants import NeighborStrategy
from ..data.lexicon import Lexicon
from ..data.normalization import clean_word
from .distance import hamming_distance


def find_neighbors(word: str, lexicon: Lexicon) -> List[str]:
    """Return lexicon words at Hamming distance 1 from ``word``, in lexicon order.

    Uses the lexicon's wildcard buckets: two same-length words differ in
    exactly one position iff they agree once that position is dropped.
    ``word`` does not have to be a lexicon member.
    """

    word = clean_word(word)
    found: Set[str] = set()
    for pos in range(len(word)):
        for candidate in lexicon.bucket(pos, word[:pos] + word[pos + 1:]):
            if candidate != word:
                found.add(candidate)
    return sorted(found)


def scan_neighbors(word: str, lexicon: Lexicon) -> List[str]:
    """Naive neighbor scan over every lexicon word of the same length."""

    word = clean_word(word)
    return [
        candidate
        for candidate in lexicon.iter_length(len(word))
        if hamming_distance(word, candidate) == 1
    ]


def neighbor_function(strategy: NeighborStrategy = NeighborStrategy.INDEX):
    if strategy == NeighborStrategy.SCAN:
        return scan_neighbors
    return find_neighbors


__all__ = ["find_neighbors", "scan_neighbors", "neighbor_function"]
