"""Identité des deux joueurs."""

from __future__ import annotations

from enum import Enum


class Player(Enum):
    """Les deux joueurs d'une partie, `FIRST` commence toujours."""

    FIRST = 0
    SECOND = 1

    @property
    def opponent(self) -> "Player":
        return Player.SECOND if self is Player.FIRST else Player.FIRST

    @property
    def display_name(self) -> str:
        return f"Player {self.value + 1}"


__all__ = ["Player"]
