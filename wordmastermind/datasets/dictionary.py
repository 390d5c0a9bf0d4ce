"""
Dictionary of valid words.

The dictionary is the authoritative source for two questions the game asks:
  - is this a word?            -> is_word()
  - give me a secret word      -> get_random_word(min_length, max_length)

Words are stored lowercase in a frozenset and grouped by length into sorted
tuples. Random selection draws a single index over the buckets that fit the
requested range, so every eligible word is equally likely and the draw never
loops. Once loaded the object is read-only and can be shared between games.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, List, Tuple

import numpy as np

from wordmastermind.errors import DictionaryExhaustedError, DictionaryFormatError
from .validator import clean_entries, read_entries

if TYPE_CHECKING:
    from wordmastermind.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY_PATH = Path(__file__).parent / "data" / "scrabble-dictionary.json"

EXHAUSTED_MESSAGE = "Dictionary doesn't seem to have any words of the requested parameters"


@dataclass(frozen=True)
class Dictionary:
    """
    Immutable set of valid words (lowercase), indexed by length.

    Build with `Dictionary.load(path)` or `Dictionary.from_words(words)`.
    """

    words: frozenset[str]
    _by_length: Dict[int, Tuple[str, ...]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Direct construction gets the same normalization as load/from_words
        valid, _ = clean_entries(self.words)
        object.__setattr__(self, "words", frozenset(valid))

        buckets: Dict[int, List[str]] = {}
        for w in self.words:
            buckets.setdefault(len(w), []).append(w)
        # sorted so a seeded generator always yields the same word
        object.__setattr__(
            self, "_by_length", {n: tuple(sorted(ws)) for n, ws in sorted(buckets.items())})

    # -----------------------------
    # Construction
    # -----------------------------

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Dictionary":
        """Build from in-memory words, normalized the same way as a file."""
        valid, invalid = clean_entries(words)
        if invalid:
            logger.warning("Dropped %s invalid word(s) while building dictionary", invalid)
        return cls(words=frozenset(valid))

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Dictionary":
        """
        Load a word list from `path` (or the built-in list when None).

        Raises:
          FileNotFoundError     : the file does not exist
          DictionaryFormatError : malformed content or no usable words
        """
        path = Path(path) if path is not None else DEFAULT_DICTIONARY_PATH
        if not path.exists():
            raise FileNotFoundError(f"Word list file not found: {path}")

        entries = read_entries(path)
        bad_types = sum(1 for e in entries if not isinstance(e, str))
        if bad_types:
            raise DictionaryFormatError(
                f"Word list contains {bad_types} non-string entr{'y' if bad_types == 1 else 'ies'}: {path}")

        valid, invalid = clean_entries(entries)
        if not valid:
            raise DictionaryFormatError(f"Word list contains no valid words: {path}")
        if invalid:
            logger.warning("Skipped %s non-alphabetic entries in %s", invalid, path)

        d = cls(words=frozenset(valid))
        logger.info("Loaded %s words from %s", len(d), path)
        return d

    # -----------------------------
    # Queries
    # -----------------------------

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return self.is_word(word)

    def is_word(self, word: object) -> bool:
        """
        True if `word` (any case, surrounding whitespace ignored) is in the list.
        Empty strings and non-strings are never words.
        """
        if not isinstance(word, str):
            return False
        w = word.strip().lower()
        return bool(w) and w in self.words

    def lengths(self) -> List[int]:
        """Word lengths present in the dictionary, ascending."""
        return list(self._by_length.keys())

    def count(self, length: int) -> int:
        """Number of words of exactly `length` letters."""
        return len(self._by_length.get(length, ()))

    def get_random_word(self, min_length: int, max_length: int, *,
                        rng: np.random.Generator | None = None) -> str:
        """
        Pick a word uniformly among those with min_length <= len <= max_length.

        Args:
          min_length, max_length : inclusive length bounds
          rng                    : numpy Generator (seed it for reproducible picks)

        Raises:
          DictionaryExhaustedError if no word fits the range.
        """
        buckets = [ws for n, ws in self._by_length.items() if min_length <= n <= max_length]
        total = sum(len(ws) for ws in buckets)
        if total == 0:
            raise DictionaryExhaustedError(EXHAUSTED_MESSAGE)

        rng = rng if rng is not None else np.random.default_rng()
        i = int(rng.integers(total))

        # Walk the buckets to the bucket holding flat index i
        for ws in buckets:
            if i < len(ws):
                return ws[i]
            i -= len(ws)
        raise AssertionError("index outside eligible buckets")  # unreachable


@lru_cache(maxsize=8)
def _load_cached(path: Path | None) -> Dictionary:
    return Dictionary.load(path)


def default_dictionary(settings: "Settings | None" = None) -> Dictionary:
    """
    The dictionary games use when none is passed: the configured word list
    (Settings.dictionary_path) or the built-in one. Loaded once per path.
    """
    path = settings.dictionary_path if settings is not None else None
    return _load_cached(Path(path).resolve() if path is not None else None)
