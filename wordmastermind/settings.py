from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """
    Engine settings loaded from environment variables.

    Passed to each game at construction; the secret word is only readable
    when `debug` is set.
    """

    log_level: str = "INFO"
    debug: bool = False

    # None means the built-in word list shipped with the package
    dictionary_path: Path | None = None

    @classmethod
    def load(cls) -> "Settings":
        """
        Load settings from environment variables, plus a .env file found
        from the working directory upwards (local development).
        """
        load_dotenv(find_dotenv(usecwd=True))

        log_level = os.getenv("WORDMASTERMIND_LOG_LEVEL", "INFO")
        debug = _env_flag("WORDMASTERMIND_DEBUG")

        dictionary_raw = os.getenv("WORDMASTERMIND_DICTIONARY")
        dictionary_path = Path(dictionary_raw) if dictionary_raw else None

        return cls(
            log_level=log_level,
            debug=debug,
            dictionary_path=dictionary_path,
        )
