"""
Per-letter feedback for a single (guess, secret) pair.

Each guessed letter gets two independent flags:
  - letter_present   : the letter occurs ANYWHERE in the secret word
  - position_correct : the letter equals the secret word's letter at this index

Presence is plain containment. Unlike classic Wordle there is no duplicate
bookkeeping: guessing "llama" against "lemon" reports both l's as present
although the secret holds only one.

Rendered as a pattern string (see to_pattern):
  - 'G'  : present and in the correct position
  - 'Y'  : present elsewhere in the word
  - '-'  : not in the word
"""

from dataclasses import dataclass
from typing import Literal, Tuple

# Each pattern character is one of 'G', 'Y', '-'
PatternChar = Literal["G", "Y", "-"]


@dataclass(frozen=True)
class LetterResult:
    """Feedback for one guessed letter."""
    letter: str
    letter_present: bool
    position_correct: bool


# One recorded guess: a result per position, same length as the secret
Attempt = Tuple[LetterResult, ...]


def normalize(word: str) -> str:
    """
    Lowercase `word` one character at a time, keeping its length.

    Characters whose lowercase form is longer than one code point
    (e.g. 'İ') are kept as given, so index i still lines up with the input.
    """
    out = []
    for ch in word:
        low = ch.lower()
        out.append(low if len(low) == 1 else ch)
    return "".join(out)


def evaluate(guess: str, secret: str) -> Attempt:
    """
    Compute per-letter feedback for `guess` against `secret`.

    Preconditions:
      - len(guess) == len(secret) (the game checks this before calling)

    Examples:
      to_pattern(evaluate("paper", "apple")) -> "YYGY-"
      to_pattern(evaluate("lemon", "level")) -> "GG---"
    """
    # Case-insensitive; canonical form is lowercase
    guess = normalize(guess)
    secret = normalize(secret)
    assert len(guess) == len(secret), "Guess and secret must be the same length"

    return tuple(
        LetterResult(letter=g, letter_present=g in secret, position_correct=g == s)
        for g, s in zip(guess, secret)
    )


def to_pattern(attempt: Attempt) -> str:
    """Render an attempt as a 'G'/'Y'/'-' string."""
    out = []
    for r in attempt:
        if r.position_correct:
            out.append("G")
        elif r.letter_present:
            out.append("Y")
        else:
            out.append("-")
    return "".join(out)
