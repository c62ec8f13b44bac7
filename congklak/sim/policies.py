"""Politiques de base pour piloter la simulation headless."""

from __future__ import annotations

import random
from typing import Optional

from congklak.engine.state import GameEngine
from congklak.sim.runner import legal_moves


class AgentPolicy:
    """Interface minimale utilisée par la simulation headless."""

    def __init__(self, *, name: str | None = None) -> None:
        self._name = name or self.__class__.__name__

    @property
    def name(self) -> str:
        return self._name

    def reset(self, seed: int | None = None) -> None:
        """Appelé au début de chaque épisode."""

    def select_action(self, engine: GameEngine) -> int:
        raise NotImplementedError


class RandomLegalPolicy(AgentPolicy):
    """Politique uniformément aléatoire sur les trous jouables."""

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(name="RandomLegal")
        self._random = rng or random.Random(seed)

    def reset(self, seed: int | None = None) -> None:
        if seed is not None:
            self._random.seed(seed)

    def select_action(self, engine: GameEngine) -> int:
        legal = legal_moves(engine)
        if not legal:
            raise ValueError("Aucun trou jouable pour RandomLegalPolicy")
        return self._random.choice(legal)


def random_policy_factory(worker_id: int) -> AgentPolicy:
    """Fabrique picklable utilisée par `ParallelRolloutRunner` en mode process."""

    return RandomLegalPolicy(seed=worker_id)


__all__ = ["AgentPolicy", "RandomLegalPolicy", "random_policy_factory"]
