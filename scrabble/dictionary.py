"""The word list used to check words formed on the board."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

log = logging.getLogger(__name__)


def _normalise(word: str) -> str:
    word = word.upper()
    if word.endswith("\r"):
        word = word[:-1]
    return word


class Dictionary:
    """A set of accepted words, stored in upper case."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words = frozenset(
            normalised for normalised in map(_normalise, words) if normalised
        )

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Dictionary:
        """Load one word per line from a text file."""
        with open(path, encoding="utf-8", newline="") as handle:
            dictionary = cls(line.rstrip("\n") for line in handle)
        log.info("Dictionary loaded. Total words: %d", len(dictionary))
        return dictionary

    def is_valid(self, word: str) -> bool:
        """True when the word, exactly as given, is in the list."""
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid(word)

    def __len__(self) -> int:
        return len(self._words)