"""Custom exception hierarchy for the word ladder solver."""


class LadderError(Exception):
    """Base exception for solver failures."""


class LexiconLoadError(LadderError):
    """Raised when the word list cannot be read."""


class LadderValidationError(LadderError):
    """Raised when a word sequence breaks the ladder rules."""
