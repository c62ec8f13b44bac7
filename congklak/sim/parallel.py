"""Parallélisation des rollouts headless.

Ce module fournit une API simple pour lancer plusieurs parties de Congklak en
parallèle, en s'appuyant sur `congklak.sim.runner.HeadlessEnv`:

- N workers indépendants (thread ou process), chacun avec son propre moteur
  et sa propre politique; aucun état mutable n'est partagé.
- Agrégation de métriques (épisodes, coups, victoires, écart de score).
- Reproductibilité via une seed de base, une seed distincte par épisode.
- Vérification de la conservation des graines à chaque coup.
"""

from __future__ import annotations

import logging
import pickle
import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Dict, Literal, Optional, Tuple

import numpy as np

from congklak.engine.player import Player
from congklak.engine.rules import TOTAL_SEEDS
from congklak.sim.policies import AgentPolicy
from congklak.sim.runner import HeadlessEnv

logger = logging.getLogger(__name__)

ExecutorKind = Literal["thread", "process"]


@dataclass(frozen=True)
class EpisodeSummary:
    """Résume un épisode simulé par un worker."""

    seed: int
    steps: int
    done: bool
    winner: Optional[Player]
    scores: Tuple[int, int]
    seeds_conserved: bool = True

    @property
    def margin(self) -> int:
        """Écart de score du point de vue de `Player.FIRST`."""

        return self.scores[0] - self.scores[1]


@dataclass(frozen=True)
class WorkerSummary:
    """Agrège les métriques d'un worker donné."""

    worker_id: int
    episode_summaries: Tuple[EpisodeSummary, ...]
    duration_seconds: float = field(default=0.0, compare=False)

    @property
    def episodes(self) -> int:
        return len(self.episode_summaries)

    @property
    def episode_seeds(self) -> Tuple[int, ...]:
        return tuple(summary.seed for summary in self.episode_summaries)

    @property
    def steps(self) -> int:
        return sum(summary.steps for summary in self.episode_summaries)


@dataclass(frozen=True)
class RolloutSummary:
    """Résumé global renvoyé par `ParallelRolloutRunner.run()`."""

    worker_summaries: Tuple[WorkerSummary, ...]
    duration_seconds: float = field(default=0.0, compare=False)

    @property
    def episode_summaries(self) -> Tuple[EpisodeSummary, ...]:
        return tuple(
            episode
            for worker in self.worker_summaries
            for episode in worker.episode_summaries
        )

    @property
    def total_workers(self) -> int:
        return len(self.worker_summaries)

    @property
    def total_episodes(self) -> int:
        return sum(worker.episodes for worker in self.worker_summaries)

    @property
    def total_steps(self) -> int:
        return sum(worker.steps for worker in self.worker_summaries)

    @property
    def completed_episodes(self) -> int:
        return sum(1 for episode in self.episode_summaries if episode.done)

    @property
    def all_seeds_conserved(self) -> bool:
        return all(episode.seeds_conserved for episode in self.episode_summaries)

    def win_counts(self) -> Dict[Optional[Player], int]:
        """Victoires par joueur sur les épisodes terminés (None: égalités)."""

        counts: Dict[Optional[Player], int] = {Player.FIRST: 0, Player.SECOND: 0, None: 0}
        for episode in self.episode_summaries:
            if episode.done:
                counts[episode.winner] += 1
        return counts

    def mean_margin(self) -> float:
        """Écart de score moyen (FIRST - SECOND) des épisodes terminés."""

        margins = np.array(
            [episode.margin for episode in self.episode_summaries if episode.done],
            dtype=np.int64,
        )
        if margins.size == 0:
            return 0.0
        return float(margins.mean())

    def mean_steps(self) -> float:
        steps = np.array(
            [episode.steps for episode in self.episode_summaries], dtype=np.int64
        )
        if steps.size == 0:
            return 0.0
        return float(steps.mean())


def _validate_positive(name: str, value: int) -> None:
    if value <= 0:
        raise ValueError(f"{name} doit être strictement positif (reçu: {value})")


def _distribute_episodes(
    total_episodes: int, num_workers: int, base_seed: int
) -> Tuple[Tuple[int, Tuple[int, ...]], ...]:
    """Répartit les seeds d'épisodes entre les workers."""

    base = total_episodes // num_workers
    remainder = total_episodes % num_workers
    current_seed = base_seed
    assignments = []

    for worker_id in range(num_workers):
        count = base + (1 if worker_id < remainder else 0)
        seeds = tuple(range(current_seed, current_seed + count)) if count else tuple()
        current_seed += count
        assignments.append((worker_id, seeds))

    return tuple(assignments)


def _run_worker(
    worker_id: int,
    episode_seeds: Tuple[int, ...],
    max_steps_per_episode: int,
    policy_factory: Callable[[int], AgentPolicy],
) -> WorkerSummary:
    """Exécute la boucle de simulation pour un worker donné."""

    start = time.perf_counter()
    if not episode_seeds:
        return WorkerSummary(worker_id=worker_id, episode_summaries=tuple(), duration_seconds=0.0)

    policy = policy_factory(worker_id)
    env = HeadlessEnv()
    episodes: list[EpisodeSummary] = []

    for seed in episode_seeds:
        engine = env.reset()
        policy.reset(seed)
        steps = 0
        done = False
        winner: Optional[Player] = None
        conserved = True

        while steps < max_steps_per_episode:
            index = policy.select_action(engine)
            result = env.step(index)
            steps += 1
            if int(np.sum(result.outcome.board.seed_counts())) != TOTAL_SEEDS:
                conserved = False

            if result.done:
                done = True
                winner = result.info["winner"]
                break

        scores = (engine.store_count(Player.FIRST), engine.store_count(Player.SECOND))
        episodes.append(
            EpisodeSummary(
                seed=seed,
                steps=steps,
                done=done,
                winner=winner,
                scores=scores,
                seeds_conserved=conserved,
            )
        )
        logger.debug(
            "Worker %s, seed %s: %s coups, terminé=%s, scores=%s",
            worker_id,
            seed,
            steps,
            done,
            scores,
        )

    duration = time.perf_counter() - start
    return WorkerSummary(
        worker_id=worker_id,
        episode_summaries=tuple(episodes),
        duration_seconds=duration,
    )


class ParallelRolloutRunner:
    """Orchestre l'exécution de plusieurs parties de Congklak en parallèle."""

    def __init__(
        self,
        *,
        policy_factory: Callable[[int], AgentPolicy],
        total_episodes: int,
        num_workers: int,
        max_steps_per_episode: int,
        base_seed: int = 0,
        executor_kind: ExecutorKind = "process",
    ) -> None:
        _validate_positive("num_workers", num_workers)
        _validate_positive("total_episodes", total_episodes)
        _validate_positive("max_steps_per_episode", max_steps_per_episode)

        if executor_kind not in ("thread", "process"):
            raise ValueError("executor_kind doit valoir 'thread' ou 'process'")

        if executor_kind == "process":
            try:
                pickle.dumps(policy_factory)
            except (pickle.PicklingError, AttributeError, TypeError) as exc:
                raise TypeError(
                    "policy_factory doit être picklable pour executor_kind='process'"
                ) from exc

        self._policy_factory = policy_factory
        self._total_episodes = total_episodes
        self._num_workers = num_workers
        self._max_steps_per_episode = max_steps_per_episode
        self._base_seed = base_seed
        self._executor_kind = executor_kind

    def _compute_assignments(self) -> Tuple[Tuple[int, Tuple[int, ...]], ...]:
        return _distribute_episodes(self._total_episodes, self._num_workers, self._base_seed)

    def run(self) -> RolloutSummary:
        """Exécute les rollouts et renvoie un résumé agrégé."""

        assignments = self._compute_assignments()
        start = time.perf_counter()
        logger.debug(
            "Lancement de %s épisodes sur %s workers (%s)",
            self._total_episodes,
            self._num_workers,
            self._executor_kind,
        )

        # Cas trivial: un seul worker → exécution synchrone.
        if self._num_workers == 1:
            worker_id, seeds = assignments[0]
            summary = _run_worker(worker_id, seeds, self._max_steps_per_episode, self._policy_factory)
            duration = time.perf_counter() - start
            return RolloutSummary(worker_summaries=(summary,), duration_seconds=duration)

        executor_cls = ThreadPoolExecutor if self._executor_kind == "thread" else ProcessPoolExecutor
        with executor_cls(max_workers=self._num_workers) as executor:
            futures = [
                executor.submit(
                    _run_worker,
                    worker_id,
                    seeds,
                    self._max_steps_per_episode,
                    self._policy_factory,
                )
                for worker_id, seeds in assignments
            ]
            worker_summaries = [future.result() for future in futures]

        duration = time.perf_counter() - start
        return RolloutSummary(worker_summaries=tuple(worker_summaries), duration_seconds=duration)


__all__ = [
    "EpisodeSummary",
    "WorkerSummary",
    "RolloutSummary",
    "ParallelRolloutRunner",
]
