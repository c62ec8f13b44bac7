"""État de partie et résolution des coups.

`GameEngine` possède l'unique plateau de la partie et le joueur courant.
Toutes les décisions de règle (semis, capture, tour bonus, fin de partie)
sont prises ici; `Board` et `Pit` ne portent que des requêtes/mutations
de leur propre état.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from congklak.engine.board import Board
from congklak.engine.player import Player
from congklak.engine.rules import TOTAL_PITS


class GameStatus(Enum):
    """Cycle de vie d'une partie."""

    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    ENDED = "ENDED"


@dataclass(frozen=True)
class MoveOutcome:
    """Résultat d'un coup légal.

    Args:
        board: copie indépendante du plateau après le coup
        touched_indices: trous visités dans l'ordre (trou source en premier,
            puis trou opposé et grenier en cas de capture)
        extra_turn: True si la dernière graine tombe dans le grenier du joueur
        capture_occurred: True si une capture a eu lieu
        last_index: index où la dernière graine a été semée
        captured_seeds: graines capturées (0 sans capture)
        player: joueur ayant joué le coup
        next_player: joueur dont c'est le tour après le coup
    """

    board: Board
    touched_indices: Tuple[int, ...]
    extra_turn: bool
    capture_occurred: bool
    last_index: int
    captured_seeds: int
    player: Player
    next_player: Player


class GameEngine:
    """Machine à états synchrone d'une partie de Congklak."""

    def __init__(self) -> None:
        self._board: Board = Board.standard()
        self._current_player: Player = Player.FIRST
        self._status: GameStatus = GameStatus.NOT_STARTED
        self._winner: Optional[Player] = None

    # -- Accès en lecture --
    @property
    def board(self) -> Board:
        """Copie du plateau courant."""

        return self._board.copy()

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def status(self) -> GameStatus:
        return self._status

    def store_count(self, player: Player) -> int:
        return self._board.store_count(player)

    # -- Cycle de vie --
    def start_new_game(self) -> None:
        """Remet le plateau initial et donne la main à `Player.FIRST`."""

        self._board = Board.standard()
        self._current_player = Player.FIRST
        self._status = GameStatus.IN_PROGRESS
        self._winner = None

    def load(self, board: Board, current_player: Player = Player.FIRST) -> None:
        """Installe une position arbitraire et passe la partie en cours.

        Utilisé pour restaurer un snapshot ou préparer un scénario de test.
        """

        self._board = board.copy()
        self._current_player = current_player
        self._status = GameStatus.IN_PROGRESS
        self._winner = None

    # -- Coups --
    def can_select(self, index: int) -> bool:
        if self._status is not GameStatus.IN_PROGRESS:
            return False
        if not 0 <= index < TOTAL_PITS:
            return False
        return self._board[index].can_be_selected_by(self._current_player)

    def perform_move(self, index: int) -> Optional[MoveOutcome]:
        """Sème depuis `index` et résout capture / tour bonus.

        Returns:
            MoveOutcome si le coup est légal, None sinon (aucune mutation).
        """

        if not self.can_select(index):
            return None

        board = self._board
        player = self._current_player
        skipped_store = board.store_index(player.opponent)
        own_store = board.store_index(player)

        seeds = board[index].seed_count
        board[index].seed_count = 0
        touched: List[int] = [index]

        current = index
        while seeds > 0:
            current = (current + 1) % TOTAL_PITS
            # Jamais de graine dans le grenier adverse, sans consommer de graine.
            if current == skipped_store:
                continue
            board[current].seed_count += 1
            touched.append(current)
            seeds -= 1

        last_index = current
        extra_turn = False
        capture_occurred = False
        captured_seeds = 0

        if last_index == own_store:
            extra_turn = True
        elif self._should_capture(last_index):
            opposite = board.opposite_index(last_index)
            assert opposite is not None
            captured_seeds = board[last_index].seed_count + board[opposite].seed_count
            board[last_index].seed_count = 0
            board[opposite].seed_count = 0
            board[own_store].seed_count += captured_seeds
            touched.extend((opposite, own_store))
            capture_occurred = True

        if not extra_turn:
            self._current_player = player.opponent

        return MoveOutcome(
            board=board.copy(),
            touched_indices=tuple(touched),
            extra_turn=extra_turn,
            capture_occurred=capture_occurred,
            last_index=last_index,
            captured_seeds=captured_seeds,
            player=player,
            next_player=self._current_player,
        )

    def _should_capture(self, index: int) -> bool:
        pit = self._board[index]
        if pit.owner is not self._current_player or pit.is_store:
            return False
        # Une graine exactement: le trou était vide avant la dernière graine
        # (un semis ne fait jamais deux tours du plateau).
        if pit.seed_count != 1:
            return False
        opposite = self._board.opposite_index(index)
        return opposite is not None and self._board[opposite].seed_count > 0

    # -- Fin de partie --
    def is_game_over(self) -> bool:
        return any(self._board.is_side_empty(player) for player in Player)

    def determine_winner(self) -> Optional[Player]:
        """Ramasse les graines restantes puis compare les greniers.

        Returns:
            Le joueur ayant strictement plus de graines, None en cas d'égalité.

        Raises:
            RuntimeError: si la partie n'est pas terminée.
        """

        if self._status is GameStatus.ENDED:
            return self._winner
        if self._status is not GameStatus.IN_PROGRESS or not self.is_game_over():
            raise RuntimeError("determine_winner() appelé avant la fin de la partie")

        self._collect_remaining_seeds()

        first = self._board.store_count(Player.FIRST)
        second = self._board.store_count(Player.SECOND)
        if first > second:
            winner: Optional[Player] = Player.FIRST
        elif second > first:
            winner = Player.SECOND
        else:
            winner = None

        self._status = GameStatus.ENDED
        self._winner = winner
        return winner

    def _collect_remaining_seeds(self) -> None:
        for player in Player:
            store = self._board[self._board.store_index(player)]
            for index in self._board.owned_range(player):
                pit = self._board[index]
                if pit.seed_count > 0:
                    store.seed_count += pit.seed_count
                    pit.seed_count = 0

    def __repr__(self) -> str:
        return (
            f"GameEngine(current_player={self._current_player.display_name}, "
            f"status={self._status.value})\n{self._board.describe()}"
        )


__all__ = ["GameStatus", "MoveOutcome", "GameEngine"]
