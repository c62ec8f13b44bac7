"""Règles et constantes de la variante Congklak à 7 trous.

Ce module expose le contrat minimal attendu par le plateau et les tests:
- géométrie du plateau (`TOTAL_PITS`, `PITS_PER_PLAYER`)
- nombre de graines initial (`INITIAL_SEEDS_PER_PIT`, `TOTAL_SEEDS`)
- positions des greniers et plages de trous par joueur
"""

from typing import Dict

from congklak.engine.player import Player

# Plateau: 2 greniers + 2 x 7 petits trous
TOTAL_PITS: int = 16
PITS_PER_PLAYER: int = 7
INITIAL_SEEDS_PER_PIT: int = 7

# Conservation: aucune graine n'est créée ni détruite pendant une partie
TOTAL_SEEDS: int = 2 * PITS_PER_PLAYER * INITIAL_SEEDS_PER_PIT

STORE_INDICES: Dict[Player, int] = {
    Player.FIRST: 0,
    Player.SECOND: TOTAL_PITS - 1,
}

# Plages (début inclus, fin exclue), grenier exclu
PIT_RANGES: Dict[Player, range] = {
    Player.FIRST: range(1, 1 + PITS_PER_PLAYER),
    Player.SECOND: range(1 + PITS_PER_PLAYER, 1 + 2 * PITS_PER_PLAYER),
}

__all__ = [
    "TOTAL_PITS",
    "PITS_PER_PLAYER",
    "INITIAL_SEEDS_PER_PIT",
    "TOTAL_SEEDS",
    "STORE_INDICES",
    "PIT_RANGES",
]
