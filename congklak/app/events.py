"""Évènements publiés par la couche application (`congklak.app`)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from congklak.engine.board import Board
from congklak.engine.player import Player
from congklak.engine.state import MoveOutcome


@dataclass(frozen=True)
class GameStartedEvent:
    """Émis lorsqu'une nouvelle partie est initialisée."""

    board: Board
    current_player: Player


@dataclass(frozen=True)
class MoveAppliedEvent:
    """Émis après qu'un coup légal a été joué."""

    index: int
    outcome: MoveOutcome


@dataclass(frozen=True)
class InvalidSelectionEvent:
    """Émis quand un trou non jouable est sélectionné."""

    index: int
    current_player: Player
    reason: str


@dataclass(frozen=True)
class GameEndedEvent:
    """Émis après le ramassage final, `winner` vaut None en cas d'égalité."""

    board: Board
    winner: Optional[Player]
    scores: tuple[int, int]
