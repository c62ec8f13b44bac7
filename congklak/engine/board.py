"""Plateau de Congklak (16 trous).

Disposition fixe pour toute la durée du programme:
- index 0: grenier de `Player.FIRST`
- index 1-7: petits trous de `Player.FIRST`
- index 8-14: petits trous de `Player.SECOND`
- index 15: grenier de `Player.SECOND`

Seul `seed_count` évolue; propriétaire et type de trou sont immuables.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from congklak.engine.player import Player
from congklak.engine.rules import (
    INITIAL_SEEDS_PER_PIT,
    PIT_RANGES,
    STORE_INDICES,
    TOTAL_PITS,
)


class Pit:
    """Un trou du plateau (petit trou ou grenier)."""

    __slots__ = ("_owner", "_is_store", "_seed_count")

    def __init__(self, owner: Player, is_store: bool, seed_count: int = 0) -> None:
        self._owner = owner
        self._is_store = is_store
        self._seed_count = 0
        self.seed_count = seed_count

    @property
    def owner(self) -> Player:
        return self._owner

    @property
    def is_store(self) -> bool:
        return self._is_store

    @property
    def seed_count(self) -> int:
        return self._seed_count

    @seed_count.setter
    def seed_count(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"seed_count doit être positif ou nul (reçu: {value})")
        self._seed_count = value

    @property
    def is_empty(self) -> bool:
        return self._seed_count == 0

    def can_be_selected_by(self, player: Player) -> bool:
        """Vrai si `player` peut semer depuis ce trou."""

        return not self._is_store and not self.is_empty and self._owner is player

    def copy(self) -> "Pit":
        return Pit(self._owner, self._is_store, self._seed_count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pit):
            return NotImplemented
        return (
            self._owner is other._owner
            and self._is_store == other._is_store
            and self._seed_count == other._seed_count
        )

    def __repr__(self) -> str:
        kind = "Store" if self._is_store else "Pit"
        return f"{kind}[{self._owner.display_name}]: {self._seed_count} seeds"


def _layout() -> Tuple[Tuple[Player, bool], ...]:
    """Propriétaire et type attendus pour chaque index."""

    layout: List[Tuple[Player, bool]] = []
    for index in range(TOTAL_PITS):
        for player in Player:
            if index == STORE_INDICES[player]:
                layout.append((player, True))
                break
            if index in PIT_RANGES[player]:
                layout.append((player, False))
                break
    return tuple(layout)


_LAYOUT: Tuple[Tuple[Player, bool], ...] = _layout()


class Board:
    """Représentation mutable du plateau standard à 16 trous."""

    def __init__(self, pits: Iterable[Pit]) -> None:
        pit_list = list(pits)
        if len(pit_list) != TOTAL_PITS:
            raise ValueError(
                f"Un plateau doit contenir {TOTAL_PITS} trous (reçu: {len(pit_list)})"
            )
        for index, pit in enumerate(pit_list):
            self._check_layout(index, pit)
        self._pits: List[Pit] = pit_list

    # -- Construction du plateau --
    @classmethod
    def standard(cls) -> "Board":
        """Plateau initial: greniers vides, 7 graines par petit trou."""

        return cls(
            Pit(owner, is_store, 0 if is_store else INITIAL_SEEDS_PER_PIT)
            for owner, is_store in _LAYOUT
        )

    @classmethod
    def from_counts(cls, counts: Sequence[int]) -> "Board":
        """Construit un plateau de disposition standard avec les comptes donnés."""

        if len(counts) != TOTAL_PITS:
            raise ValueError(
                f"Un plateau doit contenir {TOTAL_PITS} trous (reçu: {len(counts)})"
            )
        return cls(
            Pit(owner, is_store, int(count))
            for (owner, is_store), count in zip(_LAYOUT, counts)
        )

    def copy(self) -> "Board":
        return Board(pit.copy() for pit in self._pits)

    # -- Accès indexé (0-15 uniquement) --
    @staticmethod
    def _check_index(index: int) -> None:
        if not 0 <= index < TOTAL_PITS:
            raise IndexError(f"Index de trou hors plateau: {index}")

    @staticmethod
    def _check_layout(index: int, pit: Pit) -> None:
        owner, is_store = _LAYOUT[index]
        if pit.owner is not owner or pit.is_store != is_store:
            raise ValueError(
                f"Trou incompatible avec la disposition à l'index {index}: {pit!r}"
            )

    def __getitem__(self, index: int) -> Pit:
        self._check_index(index)
        return self._pits[index]

    def __setitem__(self, index: int, pit: Pit) -> None:
        self._check_index(index)
        self._check_layout(index, pit)
        self._pits[index] = pit

    def __len__(self) -> int:
        return len(self._pits)

    def __iter__(self) -> Iterator[Pit]:
        return iter(self._pits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pits == other._pits

    @property
    def pits(self) -> Tuple[Pit, ...]:
        return tuple(self._pits)

    def seed_counts(self) -> Tuple[int, ...]:
        return tuple(pit.seed_count for pit in self._pits)

    def total_seeds(self) -> int:
        return sum(pit.seed_count for pit in self._pits)

    # -- Géométrie --
    def store_index(self, player: Player) -> int:
        return STORE_INDICES[player]

    def owned_range(self, player: Player) -> range:
        """Indices des petits trous de `player` (grenier exclu)."""

        return PIT_RANGES[player]

    def opposite_index(self, index: int) -> Optional[int]:
        """Trou en vis-à-vis d'un petit trou, None pour un grenier."""

        if not 1 <= index <= TOTAL_PITS - 2:
            return None
        return TOTAL_PITS - 1 - index

    def is_side_empty(self, player: Player) -> bool:
        return all(self._pits[index].is_empty for index in PIT_RANGES[player])

    def store_count(self, player: Player) -> int:
        return self._pits[STORE_INDICES[player]].seed_count

    def describe(self) -> str:
        """Vue texte sur deux lignes (SECOND en haut, trous inversés)."""

        second = " ".join(
            f"[{self._pits[index].seed_count}]"
            for index in reversed(PIT_RANGES[Player.SECOND])
        )
        first = " ".join(
            f"[{self._pits[index].seed_count}]" for index in PIT_RANGES[Player.FIRST]
        )
        return (
            f"{Player.SECOND.display_name}: {second} "
            f"Store: [{self.store_count(Player.SECOND)}]\n"
            f"{Player.FIRST.display_name}: Store: [{self.store_count(Player.FIRST)}] "
            f"{first}"
        )

    def __repr__(self) -> str:
        return f"Board({list(self.seed_counts())})"


__all__ = ["Pit", "Board"]
