"""Battle_Jump61_AI package exports."""

from .Board import (
    Board,
    Cell,
    ConstantBoard,
    GameError,
    IllegalMoveError,
    OutOfRangeError,
    RED,
    BLUE,
    NEUTRAL,
    opposite,
    side_name,
)
from .Jump61game import Jump61game
from .Player import Player, HumanPlayer
from .AIPlayer import AIPlayer

# Subpackages for the referee, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "Cell",
    "ConstantBoard",
    "GameError",
    "IllegalMoveError",
    "OutOfRangeError",
    "RED",
    "BLUE",
    "NEUTRAL",
    "opposite",
    "side_name",
    "Jump61game",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "ai",
    "engine",
    "utils",
]
