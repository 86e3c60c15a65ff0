"""Deterministic rule validation for word ladders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.exceptions import LadderValidationError
from ..data.lexicon import Lexicon
from ..utils.logger import get_logger
from .distance import hamming_distance


LOGGER = get_logger(__name__)


def is_valid_ladder(sequence: Sequence[str]) -> bool:
    """Return True if every adjacent pair in ``sequence`` is one letter apart.

    Sequences shorter than two words are never ladders. Lexicon membership is
    not checked here.
    """

    if len(sequence) < 2:
        return False
    return all(
        hamming_distance(previous, current) == 1
        for previous, current in zip(sequence, sequence[1:])
    )


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class LadderValidator:
    """Runs ladder checks, optionally including lexicon membership."""

    def __init__(self, lexicon: Optional[Lexicon] = None) -> None:
        self.lexicon = lexicon

    def validate(self, sequence: Sequence[str], require_membership: bool = True) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_length(sequence)
            self._check_steps(sequence)
            if require_membership:
                self._check_membership(sequence)
        except LadderValidationError as exc:
            messages.append(str(exc))
            LOGGER.debug("Ladder validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_length(self, sequence: Sequence[str]) -> None:
        if len(sequence) < 2:
            raise LadderValidationError(
                f"A ladder needs at least 2 words, got {len(sequence)}"
            )

    def _check_steps(self, sequence: Sequence[str]) -> None:
        for index in range(1, len(sequence)):
            previous, current = sequence[index - 1], sequence[index]
            distance = hamming_distance(previous, current)
            if distance != 1:
                reason = "length mismatch" if distance < 0 else f"distance {distance}"
                raise LadderValidationError(
                    f"Step {index} '{previous}' -> '{current}' is not a single-letter change ({reason})"
                )

    def _check_membership(self, sequence: Sequence[str]) -> None:
        if self.lexicon is None:
            raise LadderValidationError("Membership check requested without a lexicon")
        for word in sequence:
            if not self.lexicon.contains(word):
                raise LadderValidationError(f"'{word}' is not in the lexicon")
