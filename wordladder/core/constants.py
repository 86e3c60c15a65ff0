"""Shared constants and enumerations for the word ladder solver."""

from __future__ import annotations

from enum import Enum


class SearchMode(str, Enum):
    """Ladder search strategies."""

    DFS = "dfs"
    BFS = "bfs"


class NeighborStrategy(str, Enum):
    """How neighbors are enumerated from the lexicon."""

    INDEX = "index"
    SCAN = "scan"


# Hamming distance of two words with different lengths.
LENGTH_MISMATCH = -1

# Upper bound on DFS loop iterations for a single search call.
DEFAULT_MAX_STEPS = 200_000

WORDLIST_URL_ENV = "WORDLADDER_WORDLIST_URL"
