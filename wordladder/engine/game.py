"""Public query surface over a single lexicon."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import NeighborStrategy, SearchMode
from ..core.models import LadderResult
from ..data.lexicon import Lexicon, LexiconConfig, load_lexicon
from ..utils.logger import get_logger
from .distance import hamming_distance
from .neighbors import neighbor_function
from .search import SearchConfig, breadth_first_ladder, depth_first_ladder
from .validator import LadderValidator, ValidationResult, is_valid_ladder


LOGGER = get_logger(__name__)


@dataclass
class GameConfig:
    neighbor_strategy: NeighborStrategy = NeighborStrategy.INDEX
    search: SearchConfig = field(default_factory=SearchConfig)


class WordLadderGame:
    """Answers ladder queries against an injected, read-only lexicon.

    Instances hold no per-search state, so one game (or one lexicon shared by
    several games) can serve concurrent requests.
    """

    def __init__(self, lexicon: Lexicon, config: Optional[GameConfig] = None) -> None:
        self.lexicon = lexicon
        self.config = config or GameConfig()
        self._neighbors = neighbor_function(self.config.neighbor_strategy)
        self.validator = LadderValidator(lexicon)

    @classmethod
    def from_config(
        cls,
        lexicon_config: LexiconConfig,
        config: Optional[GameConfig] = None,
    ) -> "WordLadderGame":
        return cls(load_lexicon(lexicon_config), config)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def word_count(self) -> int:
        return self.lexicon.size()

    def is_word(self, text: str) -> bool:
        return self.lexicon.contains(text)

    def get_hamming_distance(self, first: str, second: str) -> int:
        return hamming_distance(first, second)

    def get_neighbors(self, word: str) -> List[str]:
        return self._neighbors(word, self.lexicon)

    def get_ladder(self, start: str, end: str) -> List[str]:
        """Depth-first ladder; not necessarily the shortest."""
        return self.solve(start, end, SearchMode.DFS).words

    def get_min_ladder(self, start: str, end: str) -> List[str]:
        """Breadth-first ladder with the fewest possible steps."""
        return self.solve(start, end, SearchMode.BFS).words

    def is_word_ladder(self, sequence: Sequence[str]) -> bool:
        return is_valid_ladder(sequence)

    def validate(self, sequence: Sequence[str]) -> ValidationResult:
        """Check ladder steps and lexicon membership, collecting the reason on failure."""
        return self.validator.validate(sequence, require_membership=True)

    def solve(self, start: str, end: str, mode: SearchMode = SearchMode.BFS) -> LadderResult:
        mode = SearchMode(mode)
        if mode == SearchMode.DFS:
            result = depth_first_ladder(
                start, end, self.lexicon, self.config.search, neighbors=self._neighbors
            )
        else:
            result = breadth_first_ladder(start, end, self.lexicon, neighbors=self._neighbors)

        if result.found:
            LOGGER.info(
                "%s ladder %s -> %s: %d hops", mode.value.upper(), result.start, result.end, result.hops
            )
        else:
            LOGGER.info("%s: no ladder from %s to %s", mode.value.upper(), result.start, result.end)
        return result
