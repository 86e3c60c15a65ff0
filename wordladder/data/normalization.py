"""Shared helpers for word normalization."""

from __future__ import annotations

from typing import Optional


def clean_word(text: str) -> str:
    """Return the lowercase form of ``text`` with surrounding whitespace removed."""

    if not text:
        return ""
    return text.strip().lower()


def first_token(line: str) -> Optional[str]:
    """Return the first whitespace-delimited token of ``line`` as a word.

    Word lists often carry extra columns (frequencies, definitions) after the
    word itself; everything past the first token is ignored.
    """

    tokens = line.split(None, 1)
    if not tokens:
        return None
    return clean_word(tokens[0])


__all__ = ["clean_word", "first_token"]
