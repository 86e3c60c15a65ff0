"""Lightweight HTTP client for remote word lists."""

from __future__ import annotations

from typing import List

import requests

from ..core.exceptions import LexiconLoadError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class WordListClient:
    """Downloads plain-text word lists, one word per line."""

    def __init__(self, timeout_seconds: float = 30.0, encoding: str = "utf-8") -> None:
        self.timeout_seconds = timeout_seconds
        self.encoding = encoding

    def fetch_text(self, url: str) -> str:
        """Return the body of ``url`` decoded as text."""
        LOGGER.debug("Fetching word list from %s", url)
        try:
            response = requests.get(url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            LOGGER.error("Word list download failed: %s", exc)
            raise LexiconLoadError(f"Word list request failed: {exc}") from exc

        try:
            return response.content.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise LexiconLoadError(f"Word list at {url} is not valid {self.encoding}") from exc

    def fetch_lines(self, url: str) -> List[str]:
        return self.fetch_text(url).splitlines()
