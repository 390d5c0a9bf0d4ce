import logging
import os
from pathlib import Path

import pytest

from wordmastermind.logging_setup import setup_logging
from wordmastermind.settings import Settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # no stray .env from the working directory
    monkeypatch.chdir(tmp_path)
    for name in ("WORDMASTERMIND_LOG_LEVEL",
                 "WORDMASTERMIND_DEBUG", "WORDMASTERMIND_DICTIONARY"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env):
    s = Settings.load()
    assert s.log_level == "INFO"
    assert s.debug is False
    assert s.dictionary_path is None


@pytest.mark.parametrize("raw,expected", [
    ("1", True), ("true", True), ("YES", True), ("on", True),
    ("0", False), ("false", False), ("", False),
])
def test_settings_debug_flag(clean_env, raw, expected):
    clean_env.setenv("WORDMASTERMIND_DEBUG", raw)
    assert Settings.load().debug is expected


def test_settings_from_env(clean_env):
    clean_env.setenv("WORDMASTERMIND_LOG_LEVEL", "debug")
    clean_env.setenv("WORDMASTERMIND_DICTIONARY", "words/custom.json")
    s = Settings.load()
    assert s.log_level == "debug"
    assert s.dictionary_path == Path("words/custom.json")


def test_settings_read_dotenv(clean_env, tmp_path):
    (tmp_path / ".env").write_text("WORDMASTERMIND_DEBUG=1\n", encoding="utf-8")
    try:
        assert Settings.load().debug is True
    finally:
        # load_dotenv writes straight into os.environ
        os.environ.pop("WORDMASTERMIND_DEBUG", None)


def test_setup_logging_adds_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        setup_logging(Settings(log_level="warning"))
        setup_logging(Settings(log_level="warning"))
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert root.level == logging.WARNING
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_keeps_existing_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    marker = logging.NullHandler()
    root.handlers = [marker]
    try:
        setup_logging(Settings(log_level="nonsense"))
        assert root.handlers == [marker]
        assert root.level == logging.INFO
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
