"""Engine package exposing rules, board and game state modules."""

from . import rules  # re-export for convenience
from .board import Board, Pit
from .player import Player
from .state import GameEngine, GameStatus, MoveOutcome

__all__ = [
    "rules",
    "Board",
    "Pit",
    "Player",
    "GameEngine",
    "GameStatus",
    "MoveOutcome",
]
