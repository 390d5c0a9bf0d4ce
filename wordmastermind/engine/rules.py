"""
Game rules that do not depend on game state.

  - attempt budget for a word length
  - guess shape check
  - hard mode: positions locked by earlier attempts must keep their letter
"""

from typing import AbstractSet, Set

from wordmastermind.errors import HardModeViolationError, LengthMismatchError
from .feedback import Attempt


def max_attempts_for_length(length: int, hard_mode: bool = False) -> int:
    """
    Attempts allowed for a secret word of `length` letters.

    One more than the word length, plus one extra in hard mode.
    """
    return length + 1 + (1 if hard_mode else 0)


def check_guess_length(guess: str, secret: str) -> None:
    """Raise LengthMismatchError unless the guess is as long as the secret."""
    if len(guess) != len(secret):
        raise LengthMismatchError("Word length does not match secret word length")


def locked_positions(attempt: Attempt) -> Set[int]:
    """Indices where the attempt found the letter present AND correctly placed."""
    return {i for i, r in enumerate(attempt) if r.letter_present and r.position_correct}


def check_hard_mode(guess: str, secret: str, locked: AbstractSet[int]) -> None:
    """
    Raise HardModeViolationError if any locked index of `guess` no longer
    holds the secret word's letter.

    Args:
      guess  : normalized (lowercase) guess, same length as secret
      secret : normalized secret word
      locked : indices locked by previous attempts
    """
    for i in locked:
        if guess[i] != secret[i]:
            raise HardModeViolationError(
                "You cannot change a letter that is in the correct position")
