"""Word ladder solver.

This package exposes the public API surface via:

- ``wordladder.data.lexicon.Lexicon``: loads and indexes the word list.
- ``wordladder.engine.game.WordLadderGame``: distance, neighbor, ladder and
  validation queries over one lexicon.
- ``wordladder.engine.search`` helpers: depth-first and breadth-first searches.
"""

from .core.constants import SearchMode
from .core.models import LadderResult
from .data.lexicon import Lexicon, LexiconConfig, load_lexicon
from .engine.game import GameConfig, WordLadderGame
from .engine.search import SearchConfig, find_ladder, find_min_ladder

__all__ = [
    "GameConfig",
    "LadderResult",
    "Lexicon",
    "LexiconConfig",
    "SearchConfig",
    "SearchMode",
    "WordLadderGame",
    "find_ladder",
    "find_min_ladder",
    "load_lexicon",
]

__version__ = "0.1.0"
