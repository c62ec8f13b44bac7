"""Boucle headless pour le moteur Congklak.

Ce module expose un environnement minimaliste pour piloter le moteur via une
API `reset()` / `step()` et fournir un masque des 16 trous jouables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from congklak.engine.player import Player
from congklak.engine.rules import TOTAL_PITS
from congklak.engine.state import GameEngine, MoveOutcome


def legal_moves(engine: GameEngine) -> List[int]:
    """Indices jouables par le joueur courant, dans l'ordre du plateau."""

    return [index for index in range(TOTAL_PITS) if engine.can_select(index)]


@dataclass(frozen=True)
class StepResult:
    """Résultat d'un appel à HeadlessEnv.step()."""

    outcome: MoveOutcome
    reward: Tuple[float, ...]
    done: bool
    info: Dict[str, Any]


class HeadlessEnv:
    """Environnement headless léger pour le moteur Congklak."""

    def __init__(self) -> None:
        self._engine: GameEngine | None = None

    @property
    def engine(self) -> GameEngine:
        """Retourne le moteur courant (reset doit avoir été appelé)."""

        if self._engine is None:
            raise RuntimeError("reset() doit être appelé avant d'accéder au moteur")
        return self._engine

    def reset(self, *, engine: GameEngine | None = None) -> GameEngine:
        """Réinitialise l'environnement et renvoie le moteur prêt à jouer."""

        if engine is None:
            engine = GameEngine()
            engine.start_new_game()
        self._engine = engine
        return engine

    def legal_actions(self) -> List[int]:
        return legal_moves(self.engine)

    def legal_actions_mask(self) -> List[bool]:
        """Masque booléen aligné sur les 16 index du plateau."""

        engine = self.engine
        return [engine.can_select(index) for index in range(TOTAL_PITS)]

    def step(self, index: int) -> StepResult:
        """Joue le trou `index` et finalise la partie si elle est terminée."""

        engine = self.engine
        outcome = engine.perform_move(index)
        if outcome is None:
            raise ValueError(f"Coup illégal: trou {index}")

        done = engine.is_game_over()
        info: Dict[str, Any] = {"last_action": index}
        reward = tuple(0.0 for _ in Player)

        if done:
            winner = engine.determine_winner()
            info["winner"] = winner
            info["scores"] = tuple(engine.store_count(player) for player in Player)
            if winner is not None:
                reward = tuple(1.0 if player is winner else -1.0 for player in Player)

        return StepResult(outcome=outcome, reward=reward, done=done, info=info)
