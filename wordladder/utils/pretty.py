"""Pretty-print helpers for ladders."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:
    from ..core.models import LadderResult
    from ..data.lexicon import Lexicon


def changed_position(previous: str, current: str) -> Optional[int]:
    """Index of the single differing character, or None."""
    if len(previous) != len(current):
        return None
    diffs = [i for i, (a, b) in enumerate(zip(previous, current)) if a != b]
    return diffs[0] if len(diffs) == 1 else None


def format_ladder(words: Sequence[str]) -> str:
    """Render one word per line with the changed letter upper-cased."""

    if not words:
        return "(no ladder)"
    lines: List[str] = [f"{0:>3}  {words[0]}"]
    for step in range(1, len(words)):
        word = words[step]
        pos = changed_position(words[step - 1], word)
        if pos is not None:
            word = word[:pos] + word[pos].upper() + word[pos + 1:]
        lines.append(f"{step:>3}  {word}")
    return "\n".join(lines)


def print_ladder_stats(
    result: LadderResult,
    lexicon: Optional[Lexicon] = None,
    *,
    stream=None,
) -> None:
    """Print the ladder plus search stats."""

    stream = stream or sys.stdout
    print(format_ladder(result.words), file=stream)

    print(file=stream)
    print("--- Search ---", file=stream)
    print(f"  Mode:          {result.mode.value.upper()}", file=stream)
    print(f"  Endpoints:     {result.start} -> {result.end}", file=stream)
    if result.found:
        print(f"  Hops:          {result.hops}", file=stream)
    else:
        print("  Result:        no ladder found", file=stream)
    print(f"  Expanded:      {result.expanded} words", file=stream)
    if result.budget_exhausted:
        print("  Step budget exhausted before the search finished", file=stream)

    if lexicon is not None:
        same_length = len(lexicon.iter_length(len(result.start)))
        print(file=stream)
        print("--- Lexicon ---", file=stream)
        print(f"  Words:         {lexicon.size()}", file=stream)
        print(f"  Same length:   {same_length}", file=stream)
