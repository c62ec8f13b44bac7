"""Utilitaires partagés par les tests du moteur et de la simulation.

Politique déterministe simple et construction de positions arbitraires.
"""

from __future__ import annotations

from typing import Mapping

from congklak.engine.board import Board
from congklak.engine.player import Player
from congklak.engine.state import GameEngine
from congklak.sim.policies import AgentPolicy
from congklak.sim.runner import legal_moves


class FirstLegalPolicy(AgentPolicy):
    """Politique déterministe retournant le premier trou jouable."""

    def __init__(self) -> None:
        super().__init__(name="FirstLegal")

    def select_action(self, engine: GameEngine) -> int:
        legal = legal_moves(engine)
        if not legal:
            raise ValueError("Aucun trou jouable pour FirstLegalPolicy")
        return legal[0]


def engine_with(
    overrides: Mapping[int, int] | None = None,
    *,
    player: Player = Player.FIRST,
) -> GameEngine:
    """Moteur en cours de partie: plateau initial modifié par `overrides`."""

    counts = list(Board.standard().seed_counts())
    for index, count in (overrides or {}).items():
        counts[index] = count
    engine = GameEngine()
    engine.load(Board.from_counts(counts), player)
    return engine


def engine_from_counts(counts, *, player: Player = Player.FIRST) -> GameEngine:
    engine = GameEngine()
    engine.load(Board.from_counts(counts), player)
    return engine
