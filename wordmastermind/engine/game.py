"""
One game of word mastermind.

Lifecycle:
  - construction fixes the secret word (given, or drawn from the dictionary)
  - attempt(guess) records one guess and returns its per-letter feedback
  - the game ends SOLVED on an exact match, or EXHAUSTED when the attempt
    budget runs out

A game is single-owner state: calls to attempt() on the same instance must
be serialized by the caller. The dictionary it uses is read-only and may be
shared between games.
"""

from __future__ import annotations

import enum
import logging
from typing import FrozenSet, List, Set, Tuple

import numpy as np

from wordmastermind.datasets.dictionary import Dictionary, default_dictionary
from wordmastermind.errors import (
    AlreadySolvedError,
    ConfigurationError,
    HardModeViolationError,
    MaxAttemptsReachedError,
    SecretWordAccessError,
)
from wordmastermind.settings import Settings
from .feedback import Attempt, evaluate, normalize, to_pattern
from .rules import check_guess_length, check_hard_mode, locked_positions, max_attempts_for_length

logger = logging.getLogger(__name__)


class GameStatus(str, enum.Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class WordMasterMind:
    """
    Guess-evaluation and attempt-tracking engine for a single secret word.

    Args:
      min_length, max_length : inclusive bounds for the secret word length
      hard_mode              : letters found in the correct position must be
                               kept in later guesses; grants one extra attempt
      dictionary             : word source; defaults to default_dictionary(settings)
      secret_word            : fixed secret; drawn at random when omitted
      settings               : engine settings (debug gate); Settings.load() when omitted
      rng                    : numpy Generator used for the random draw

    Raises:
      ConfigurationError       : secret outside the length bounds, or not a word
      DictionaryExhaustedError : no dictionary word fits the bounds (random draw)
    """

    def __init__(
            self,
            min_length: int,
            max_length: int,
            hard_mode: bool = False,
            dictionary: Dictionary | None = None,
            secret_word: str | None = None,
            *,
            settings: Settings | None = None,
            rng: np.random.Generator | None = None,
    ) -> None:
        self._settings = settings if settings is not None else Settings.load()
        dictionary = dictionary if dictionary is not None else default_dictionary(self._settings)

        if secret_word is None:
            secret_word = dictionary.get_random_word(min_length, max_length, rng=rng)
        secret = normalize(secret_word)

        if len(secret) > max_length or len(secret) < min_length:
            raise ConfigurationError("Secret word must be between min_length and max_length")
        if not dictionary.is_word(secret):
            raise ConfigurationError("Secret word must be a valid word in the dictionary")

        self._secret = secret
        self.hard_mode = bool(hard_mode)
        self.max_attempts = max_attempts_for_length(len(secret), self.hard_mode)

        self._attempts: List[Attempt] = []
        self._locked: Set[int] = set()
        self._solved = False

        logger.debug("New game: length=%s hard_mode=%s max_attempts=%s",
                     len(secret), self.hard_mode, self.max_attempts)

    # -----------------------------
    # Queries
    # -----------------------------

    @staticmethod
    def get_max_attempts_for_length(length: int, hard_mode: bool = False) -> int:
        """Attempt budget for a word length, before any game is constructed."""
        return max_attempts_for_length(length, hard_mode)

    @property
    def secret_word(self) -> str:
        """The secret word; only readable when settings.debug is on."""
        if not self._settings.debug:
            raise SecretWordAccessError("Secret word is only available in debug mode")
        return self._secret

    @property
    def word_length(self) -> int:
        return len(self._secret)

    @property
    def current_attempt(self) -> int:
        """Number of attempts recorded so far."""
        return len(self._attempts)

    @property
    def attempts(self) -> Tuple[Attempt, ...]:
        """Recorded attempts, oldest first."""
        return tuple(self._attempts)

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def remaining_attempts(self) -> int:
        return 0 if self._solved else self.max_attempts - self.current_attempt

    @property
    def locked_positions(self) -> FrozenSet[int]:
        """Indices confirmed in place by earlier attempts (only ever grows)."""
        return frozenset(self._locked)

    @property
    def status(self) -> GameStatus:
        if self._solved:
            return GameStatus.SOLVED
        if self.current_attempt >= self.max_attempts:
            return GameStatus.EXHAUSTED
        return GameStatus.IN_PROGRESS

    # -----------------------------
    # Play
    # -----------------------------

    def attempt(self, guess: str) -> Attempt:
        """
        Record one guess and return its per-letter feedback.

        Checks, in order (a failed check records nothing):
          1) game already solved           -> AlreadySolvedError
          2) attempt budget used up        -> MaxAttemptsReachedError
          3) guess length != secret length -> LengthMismatchError
          4) hard mode, locked letter moved -> HardModeViolationError
        """
        if self._solved:
            raise AlreadySolvedError("You have already solved this word!")

        if self.current_attempt >= self.max_attempts:
            raise MaxAttemptsReachedError("You have reached the maximum number of attempts")

        # Length is checked on the guess as given; only case is normalized
        check_guess_length(guess, self._secret)
        g = normalize(guess)

        # Locks come from earlier attempts only, so the first guess is free
        if self.hard_mode and self._attempts:
            try:
                check_hard_mode(g, self._secret, self._locked)
            except HardModeViolationError:
                logger.debug("Hard mode rejected attempt %s", self.current_attempt + 1)
                raise

        result = evaluate(g, self._secret)
        self._locked |= locked_positions(result)
        self._attempts.append(result)

        if g == self._secret:
            self._solved = True

        logger.debug("Attempt %s/%s: %s%s", self.current_attempt, self.max_attempts,
                     to_pattern(result), " (solved)" if self._solved else "")
        return result
