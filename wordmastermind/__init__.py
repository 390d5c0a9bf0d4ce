from .datasets import Dictionary, default_dictionary
from .engine import Attempt, GameStatus, LetterResult, WordMasterMind, evaluate
from .settings import Settings

__all__ = [
    "Dictionary", "default_dictionary",
    "Attempt", "GameStatus", "LetterResult", "WordMasterMind", "evaluate",
    "Settings",
]
