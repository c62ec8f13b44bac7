"""Point d'entrée en ligne de commande pour les simulations rapides.

Utilisé pour mesurer la performance et valider les règles (conservation des
graines, terminaison des parties) sur un grand nombre de parties aléatoires.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from congklak.engine.player import Player
from congklak.sim.parallel import ParallelRolloutRunner, RolloutSummary
from congklak.sim.policies import random_policy_factory


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulations Congklak headless")
    parser.add_argument("--episodes", type=int, default=1000, help="Nombre de parties")
    parser.add_argument("--workers", type=int, default=4, help="Nombre de workers")
    parser.add_argument("--seed", type=int, default=0, help="Seed de base")
    parser.add_argument("--max-steps", type=int, default=1000, help="Coups max par partie")
    parser.add_argument(
        "--executor",
        choices=("thread", "process"),
        default="process",
        help="Type de workers",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Logs détaillés")
    return parser.parse_args(argv)


def _print_summary(summary: RolloutSummary) -> None:
    wins = summary.win_counts()
    episodes = summary.total_episodes

    print("\nRésultats:")
    print(f"  Parties: {episodes} ({summary.completed_episodes} terminées)")
    print(f"  {Player.FIRST.display_name}: {wins[Player.FIRST]} victoires")
    print(f"  {Player.SECOND.display_name}: {wins[Player.SECOND]} victoires")
    print(f"  Égalités: {wins[None]}")
    print(f"  Écart moyen (P1 - P2): {summary.mean_margin():.2f}")
    print(f"  Coups moyens par partie: {summary.mean_steps():.1f}")
    print(f"  Conservation des graines: {'OK' if summary.all_seeds_conserved else 'ÉCHEC'}")
    print(f"  Temps total: {summary.duration_seconds:.2f}s")
    if summary.duration_seconds > 0:
        print(f"  Parties par seconde: {episodes / summary.duration_seconds:.2f}")


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    runner = ParallelRolloutRunner(
        policy_factory=random_policy_factory,
        total_episodes=args.episodes,
        num_workers=args.workers,
        max_steps_per_episode=args.max_steps,
        base_seed=args.seed,
        executor_kind=args.executor,
    )
    summary = runner.run()
    _print_summary(summary)
    return 0 if summary.all_seeds_conserved else 1


if __name__ == "__main__":
    raise SystemExit(main())
