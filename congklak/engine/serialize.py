"""Outils de sérialisation pour GameEngine.

- Snapshot JSON-friendly (listes/dicts primitifs)
- Restauration complète d'un GameEngine, statut compris
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from congklak.engine.board import Board
from congklak.engine.player import Player
from congklak.engine.rules import TOTAL_PITS, TOTAL_SEEDS
from congklak.engine.state import GameEngine, GameStatus

SCHEMA_VERSION = "0.1.0"
BOARD_SCHEMA = "congklak.16"


def engine_to_snapshot(engine: GameEngine) -> Dict[str, Any]:
    """Convertit un GameEngine en snapshot JSON-friendly."""

    board = engine.board
    return {
        "schema_version": SCHEMA_VERSION,
        "board": {
            "schema": BOARD_SCHEMA,
            "seed_counts": list(board.seed_counts()),
        },
        "status": engine.status.value,
        "current_player": engine.current_player.value,
        "stores": {player.name: board.store_count(player) for player in Player},
    }


def snapshot_to_engine(snapshot: Mapping[str, Any]) -> GameEngine:
    """Reconstruit un GameEngine à partir d'un snapshot."""

    version = snapshot.get("schema_version")
    if version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported schema_version: {version!r}")

    board_info = snapshot.get("board", {})
    schema = board_info.get("schema")
    if schema != BOARD_SCHEMA:
        raise ValueError(f"Unsupported board schema: {schema!r}")

    raw_counts = board_info.get("seed_counts", [])
    if len(raw_counts) != TOTAL_PITS:
        raise ValueError(
            f"Snapshot invalide: {TOTAL_PITS} trous attendus (reçu: {len(raw_counts)})"
        )
    for count in raw_counts:
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError(f"Snapshot invalide: compte de graines non entier {count!r}")
    counts = list(raw_counts)
    if sum(counts) != TOTAL_SEEDS:
        raise ValueError(
            f"Snapshot invalide: {TOTAL_SEEDS} graines attendues (reçu: {sum(counts)})"
        )
    board = Board.from_counts(counts)

    stores = snapshot.get("stores")
    if stores is not None:
        for player in Player:
            if stores.get(player.name) != board.store_count(player):
                raise ValueError(
                    f"Snapshot invalide: grenier {player.name} incohérent avec seed_counts"
                )

    raw_status = snapshot.get("status")
    raw_player = snapshot.get("current_player")
    if raw_status is None or raw_player is None:
        raise ValueError("Snapshot invalide: 'status' et 'current_player' sont requis")
    status = GameStatus(raw_status)
    current_player = Player(raw_player)

    engine = GameEngine()
    if status is GameStatus.NOT_STARTED:
        if board != Board.standard():
            raise ValueError("Snapshot invalide: partie non commencée mais plateau modifié")
        return engine

    engine.load(board, current_player)
    if status is GameStatus.ENDED:
        if not engine.is_game_over():
            raise ValueError("Snapshot invalide: partie terminée mais plateau en cours")
        engine.determine_winner()
    return engine


__all__ = ["SCHEMA_VERSION", "engine_to_snapshot", "snapshot_to_engine"]
