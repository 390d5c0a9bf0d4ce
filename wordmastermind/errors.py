from __future__ import annotations


class WordMasterMindError(Exception):
    """Base class for all engine and dictionary errors."""


# -------------------------
# Construction / configuration
# -------------------------

class ConfigurationError(WordMasterMindError, ValueError):
    """Game could not be constructed from the given arguments."""


# -------------------------
# Dictionary
# -------------------------

class DictionaryError(WordMasterMindError):
    """Base class for word-list problems."""


class DictionaryFormatError(DictionaryError, ValueError):
    """Word list source is malformed or holds no usable words."""


class DictionaryExhaustedError(DictionaryError):
    """No word satisfies the requested length range."""


# -------------------------
# Game usage
# -------------------------

class UsageError(WordMasterMindError):
    """Attempt rejected by the game rules; nothing was recorded."""


class AlreadySolvedError(UsageError):
    """The secret word has already been guessed."""


class MaxAttemptsReachedError(UsageError):
    """Every allowed attempt has been used."""


class LengthMismatchError(UsageError, ValueError):
    """Guess length differs from the secret word length."""


class HardModeViolationError(UsageError):
    """Hard mode: a letter locked in place by a prior attempt was changed."""


# -------------------------
# Access
# -------------------------

class SecretWordAccessError(WordMasterMindError, PermissionError):
    """The secret word was read outside debug mode."""
