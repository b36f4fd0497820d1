"""Battle_Reversi_AI package exports."""

from .Board import Board, BoardCounts, BOARD_SIZE, BLACK, WHITE, EMPTY
from .Reversigame import Reversigame, decide_winner, play

# Subpackages for move rules, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "BoardCounts",
    "BOARD_SIZE",
    "BLACK",
    "WHITE",
    "EMPTY",
    "Reversigame",
    "decide_winner",
    "play",
    "ai",
    "engine",
    "utils",
]
