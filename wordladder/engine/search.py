"""Depth-first and breadth-first ladder searches.

Both searches walk the implicit graph whose nodes are lexicon words and whose
edges join words one letter apart. Visited sets, stacks and predecessor maps
live inside a single call and are never shared.

The depth-first search steers with a greedy rule: from the current tip it only
advances to an unvisited neighbor that is no farther (in Hamming distance)
from the target than the tip itself. That keeps ladders short in practice but
means the default search can miss a target that is reachable only through a
detour. ``SearchConfig.exhaustive_dfs`` disables the rule.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Set

from ..core.constants import DEFAULT_MAX_STEPS, SearchMode
from ..core.models import LadderResult
from ..data.lexicon import Lexicon
from ..data.normalization import clean_word
from ..utils.logger import get_logger
from .distance import hamming_distance
from .neighbors import find_neighbors

LOGGER = get_logger(__name__)

NeighborFn = Callable[[str, Lexicon], List[str]]


@dataclass
class SearchConfig:
    """Tunables shared by both searches."""

    max_steps: int = DEFAULT_MAX_STEPS
    exhaustive_dfs: bool = False


def _searchable(start: str, end: str, lexicon: Lexicon) -> bool:
    if len(start) != len(end):
        LOGGER.debug("Length mismatch between '%s' and '%s'", start, end)
        return False
    if start == end:
        LOGGER.debug("Start and end are both '%s'; nothing to search", start)
        return False
    if not lexicon.contains(start) or not lexicon.contains(end):
        LOGGER.debug("'%s' or '%s' is not a lexicon word", start, end)
        return False
    return True


def _next_step(
    tip: str,
    end: str,
    candidates: Sequence[str],
    visited: Set[str],
    exhaustive: bool,
) -> Optional[str]:
    tip_distance = hamming_distance(tip, end)
    for candidate in candidates:
        if candidate in visited:
            continue
        if exhaustive or hamming_distance(candidate, end) <= tip_distance:
            return candidate
    return None


def depth_first_ladder(
    start: str,
    end: str,
    lexicon: Lexicon,
    config: Optional[SearchConfig] = None,
    neighbors: NeighborFn = find_neighbors,
) -> LadderResult:
    """Find some ladder from ``start`` to ``end`` by backtracking depth-first search."""

    config = config or SearchConfig()
    start, end = clean_word(start), clean_word(end)
    result = LadderResult(start=start, end=end, mode=SearchMode.DFS)
    if not _searchable(start, end, lexicon):
        return result

    path: List[str] = [start]
    visited: Set[str] = {start}
    expansions: Dict[str, List[str]] = {}
    steps = 0

    while path:
        if steps >= config.max_steps:
            LOGGER.warning(
                "DFS %s -> %s stopped after %d steps (path depth %d)",
                start, end, steps, len(path),
            )
            result.budget_exhausted = True
            break
        steps += 1

        tip = path[-1]
        candidates = expansions.get(tip)
        if candidates is None:
            candidates = neighbors(tip, lexicon)
            expansions[tip] = candidates

        if end in candidates:
            path.append(end)
            result.words = path
            break

        step = _next_step(tip, end, candidates, visited, config.exhaustive_dfs)
        if step is None:
            path.pop()
            continue
        path.append(step)
        visited.add(step)

    result.expanded = len(expansions)
    LOGGER.debug(
        "DFS %s -> %s: %s after %d steps, %d expansions",
        start, end, "found" if result.found else "no ladder", steps, result.expanded,
    )
    return result


def breadth_first_ladder(
    start: str,
    end: str,
    lexicon: Lexicon,
    neighbors: NeighborFn = find_neighbors,
) -> LadderResult:
    """Find a minimum-length ladder from ``start`` to ``end`` by level-order search."""

    start, end = clean_word(start), clean_word(end)
    result = LadderResult(start=start, end=end, mode=SearchMode.BFS)
    if not _searchable(start, end, lexicon):
        return result

    frontier = deque([start])
    visited: Set[str] = {start}
    predecessors: Dict[str, str] = {}

    while frontier:
        word = frontier.popleft()
        result.expanded += 1
        for neighbor in neighbors(word, lexicon):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            predecessors[neighbor] = word
            if neighbor == end:
                result.words = _reconstruct(predecessors, start, end)
                LOGGER.debug(
                    "BFS %s -> %s: %d hops, %d expansions",
                    start, end, result.hops, result.expanded,
                )
                return result
            frontier.append(neighbor)

    LOGGER.debug("BFS %s -> %s: frontier exhausted after %d expansions", start, end, result.expanded)
    return result


def _reconstruct(predecessors: Dict[str, str], start: str, end: str) -> List[str]:
    path = [end]
    while path[-1] != start:
        path.append(predecessors[path[-1]])
    path.reverse()
    return path


def find_ladder(
    start: str,
    end: str,
    lexicon: Lexicon,
    config: Optional[SearchConfig] = None,
) -> List[str]:
    """Return some ladder from ``start`` to ``end``, or an empty list."""
    return depth_first_ladder(start, end, lexicon, config).words


def find_min_ladder(start: str, end: str, lexicon: Lexicon) -> List[str]:
    """Return a minimum-length ladder from ``start`` to ``end``, or an empty list."""
    return breadth_first_ladder(start, end, lexicon).words


__all__ = [
    "SearchConfig",
    "depth_first_ladder",
    "breadth_first_ladder",
    "find_ladder",
    "find_min_ladder",
]
