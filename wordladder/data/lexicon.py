"""Lexicon loading and indexed lookups."""

from __future__ import annotations

import os
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from ..core.constants import WORDLIST_URL_ENV
from ..core.exceptions import LexiconLoadError
from ..utils.logger import get_logger
from .normalization import clean_word, first_token

LOGGER = get_logger(__name__)


@dataclass
class LexiconConfig:
    """Configuration for lexicon loading and filtering."""

    path: Path | str | None = None
    url: Optional[str] = None
    encoding: str = "utf-8"
    min_length: int = 1
    max_length: Optional[int] = None
    timeout_seconds: float = 30.0

    def accepts(self, word: str) -> bool:
        if len(word) < self.min_length:
            return False
        if self.max_length is not None and len(word) > self.max_length:
            return False
        return True

    def resolve_url(self) -> Optional[str]:
        return self.url or os.environ.get(WORDLIST_URL_ENV) or None


class Lexicon:
    """Sorted, duplicate-free and read-only set of lowercase words.

    All indexes are built in the constructor so a lexicon can be shared by
    concurrent searches without locking.
    """

    def __init__(self, words: Iterable[str]) -> None:
        members = {clean_word(word) for word in words}
        members.discard("")
        self._words: Tuple[str, ...] = tuple(sorted(members))
        self._members: FrozenSet[str] = frozenset(self._words)

        by_length: Dict[int, List[str]] = defaultdict(list)
        # Wildcard index: (position, word without that character) -> words
        buckets: Dict[Tuple[int, str], List[str]] = defaultdict(list)
        for word in self._words:
            by_length[len(word)].append(word)
            for pos in range(len(word)):
                buckets[(pos, word[:pos] + word[pos + 1:])].append(word)

        self._by_length: Dict[int, Tuple[str, ...]] = {
            length: tuple(items) for length, items in by_length.items()
        }
        self._buckets: Dict[Tuple[int, str], Tuple[str, ...]] = {
            key: tuple(items) for key, items in buckets.items()
        }

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_lines(cls, lines: Iterable[str], config: Optional[LexiconConfig] = None) -> "Lexicon":
        """Build a lexicon from the first token of every non-blank line."""

        config = config or LexiconConfig()
        words: List[str] = []
        for line in lines:
            word = first_token(line)
            if word and config.accepts(word):
                words.append(word)
        return cls(words)

    @classmethod
    def from_stream(
        cls,
        stream: IO,
        config: Optional[LexiconConfig] = None,
        close: bool = True,
    ) -> "Lexicon":
        """Consume a text or binary stream, then release it."""

        config = config or LexiconConfig()
        try:
            lines = [
                line.decode(config.encoding) if isinstance(line, bytes) else line
                for line in stream
            ]
        except (OSError, UnicodeDecodeError) as exc:
            raise LexiconLoadError(f"Error reading word list stream: {exc}") from exc
        finally:
            if close:
                stream.close()
        return cls.from_lines(lines, config)

    @classmethod
    def from_path(cls, path: Path | str, config: Optional[LexiconConfig] = None) -> "Lexicon":
        config = config or LexiconConfig(path=path)
        source = Path(path)
        if not source.exists():
            raise LexiconLoadError(f"Missing word list: {source}")
        try:
            handle = source.open("rb")
        except OSError as exc:
            raise LexiconLoadError(f"Cannot open word list {source}: {exc}") from exc
        lexicon = cls.from_stream(handle, config)
        LOGGER.info("Loaded %d words from %s", len(lexicon), source)
        return lexicon

    @classmethod
    def from_url(cls, url: str, config: Optional[LexiconConfig] = None) -> "Lexicon":
        from ..io.wordlist_client import WordListClient

        config = config or LexiconConfig(url=url)
        client = WordListClient(timeout_seconds=config.timeout_seconds, encoding=config.encoding)
        lexicon = cls.from_lines(client.fetch_lines(url), config)
        LOGGER.info("Loaded %d words from %s", len(lexicon), url)
        return lexicon

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def contains(self, word: str) -> bool:
        return clean_word(word) in self._members

    def size(self) -> int:
        return len(self._words)

    def iterate(self) -> Tuple[str, ...]:
        return self._words

    def iter_length(self, length: int) -> Tuple[str, ...]:
        return self._by_length.get(length, ())

    def lengths(self) -> List[int]:
        return sorted(self._by_length)

    def bucket(self, position: int, masked: str) -> Tuple[str, ...]:
        """Return words that equal ``masked`` once the character at ``position`` is dropped."""
        return self._buckets.get((position, masked), ())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Lexicon(size={len(self._words)})"


def load_lexicon(config: LexiconConfig) -> Lexicon:
    """Load a lexicon from the configured path, or from the configured URL."""

    if config.path:
        return Lexicon.from_path(config.path, config)
    url = config.resolve_url()
    if url:
        return Lexicon.from_url(url, config)
    raise LexiconLoadError(
        f"No word list configured: pass a path, a URL or set {WORDLIST_URL_ENV}"
    )
