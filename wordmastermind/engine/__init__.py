from .feedback import LetterResult, Attempt, evaluate, normalize, to_pattern
from .rules import max_attempts_for_length, check_hard_mode, locked_positions
from .game import GameStatus, WordMasterMind

__all__ = [
    "LetterResult", "Attempt", "evaluate", "normalize", "to_pattern",
    "max_attempts_for_length", "check_hard_mode", "locked_positions",
    "GameStatus", "WordMasterMind",
]
