"""Data models shared by the search engine and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .constants import SearchMode


@dataclass
class LadderResult:
    """Outcome of a single ladder search."""

    start: str
    end: str
    mode: SearchMode
    words: List[str] = field(default_factory=list)
    expanded: int = 0
    budget_exhausted: bool = False

    @property
    def found(self) -> bool:
        return bool(self.words)

    @property
    def hops(self) -> int:
        return max(0, len(self.words) - 1)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "mode": self.mode.value,
            "found": self.found,
            "hops": self.hops,
            "ladder": list(self.words),
            "expanded": self.expanded,
            "budget_exhausted": self.budget_exhausted,
        }
