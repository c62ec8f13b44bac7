"""Service d'orchestration pour une partie de Congklak.

Le service enveloppe `GameEngine`, maintient le statut et le message affichés
par l'interface, et publie les évènements nécessaires à la GUI/sim. La fin de
partie est détectée après chaque coup et finalisée immédiatement.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from congklak.app.event_bus import EventBus
from congklak.app.events import (
    GameEndedEvent,
    GameStartedEvent,
    InvalidSelectionEvent,
    MoveAppliedEvent,
)
from congklak.engine.board import Board
from congklak.engine.player import Player
from congklak.engine.rules import TOTAL_PITS
from congklak.engine.state import GameEngine, GameStatus, MoveOutcome

logger = logging.getLogger(__name__)

READY_MESSAGE = "Ready to play Congklak!"
NOT_IN_PROGRESS_MESSAGE = "Please start a new game"
INVALID_SELECTION_MESSAGE = "Invalid selection. Choose a pit with seeds that you own."


@dataclass(frozen=True)
class ServiceStatus:
    """Statut affiché: `winner` n'a de sens que pour `GameStatus.ENDED`."""

    kind: GameStatus
    winner: Optional[Player] = None

    @property
    def display_message(self) -> str:
        if self.kind is GameStatus.NOT_STARTED:
            return "Tap 'Start Game' to begin"
        if self.kind is GameStatus.IN_PROGRESS:
            return "Game in progress"
        if self.winner is not None:
            return f"{self.winner.display_name} wins!"
        return "It's a tie!"


class GameService:
    """Wrappe `GameEngine` et publie les évènements de la partie."""

    def __init__(
        self,
        *,
        engine: GameEngine | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self._engine = engine or GameEngine()
        self._event_bus = event_bus or EventBus()
        self._status = ServiceStatus(GameStatus.NOT_STARTED)
        self._status_message = READY_MESSAGE
        self._last_outcome: MoveOutcome | None = None

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def engine(self) -> GameEngine:
        return self._engine

    @property
    def board(self) -> Board:
        return self._engine.board

    @property
    def current_player(self) -> Player:
        return self._engine.current_player

    @property
    def status(self) -> ServiceStatus:
        return self._status

    @property
    def status_message(self) -> str:
        return self._status_message

    @property
    def last_outcome(self) -> MoveOutcome | None:
        return self._last_outcome

    @property
    def is_game_in_progress(self) -> bool:
        return self._status.kind is GameStatus.IN_PROGRESS

    @property
    def is_game_ended(self) -> bool:
        return self._status.kind is GameStatus.ENDED

    # -- Cycle de vie --
    def start_new_game(self) -> Board:
        """Initialise une nouvelle partie et publie l'évènement associé."""

        self._engine.start_new_game()
        self._status = ServiceStatus(GameStatus.IN_PROGRESS)
        self._status_message = f"{self.current_player.display_name}'s turn"
        self._last_outcome = None
        logger.info("Nouvelle partie, %s commence", self.current_player.display_name)

        board = self._engine.board
        self._event_bus.publish(
            GameStartedEvent(board=board, current_player=self.current_player)
        )
        return board

    def reset_game(self) -> Board:
        return self.start_new_game()

    # -- Coups --
    def select_pit(self, index: int) -> MoveOutcome | None:
        """Joue le trou `index` si possible, sinon met à jour le message."""

        if not self.is_game_in_progress:
            self._status_message = NOT_IN_PROGRESS_MESSAGE
            logger.debug("Sélection du trou %s ignorée: aucune partie en cours", index)
            return None

        player = self.current_player
        if not self._engine.can_select(index):
            reason = self._rejection_reason(index)
            self._status_message = INVALID_SELECTION_MESSAGE
            logger.debug(
                "Sélection invalide du trou %s par %s (%s)",
                index,
                player.display_name,
                reason,
            )
            self._event_bus.publish(
                InvalidSelectionEvent(index=index, current_player=player, reason=reason)
            )
            return None

        outcome = self._engine.perform_move(index)
        if outcome is None:
            # can_select() vient de réussir: le moteur ne peut pas refuser ici.
            raise RuntimeError(f"Coup refusé par le moteur pour le trou {index}")

        self._last_outcome = outcome
        self._status_message = self._move_message(outcome)
        logger.debug(
            "%s sème depuis %s: dernière graine en %s, bonus=%s, capture=%s (%s)",
            player.display_name,
            index,
            outcome.last_index,
            outcome.extra_turn,
            outcome.capture_occurred,
            outcome.captured_seeds,
        )
        self._event_bus.publish(MoveAppliedEvent(index=index, outcome=outcome))

        if self._engine.is_game_over():
            self._finish_game()

        return outcome

    def _rejection_reason(self, index: int) -> str:
        if not 0 <= index < TOTAL_PITS:
            return "out_of_range"
        pit = self._engine.board[index]
        if pit.is_store:
            return "store"
        if pit.owner is not self.current_player:
            return "not_owner"
        return "empty"

    def _move_message(self, outcome: MoveOutcome) -> str:
        messages: List[str] = []
        if outcome.capture_occurred:
            messages.append(f"Captured {outcome.captured_seeds} seeds!")
        name = outcome.next_player.display_name
        if outcome.extra_turn:
            messages.append(f"{name} gets an extra turn!")
        else:
            messages.append(f"{name}'s turn")
        return " ".join(messages)

    def _finish_game(self) -> None:
        winner = self._engine.determine_winner()
        self._status = ServiceStatus(GameStatus.ENDED, winner)

        first = self.score(Player.FIRST)
        second = self.score(Player.SECOND)
        if winner is not None:
            self._status_message = (
                "Game Over!\n"
                f"{winner.display_name} wins!\n"
                f"Score: Player 1: {first} - Player 2: {second}"
            )
        else:
            self._status_message = "Game Over! It's a tie!"
        logger.info(
            "Fin de partie: %s (%s - %s)",
            winner.display_name if winner is not None else "égalité",
            first,
            second,
        )

        self._event_bus.publish(
            GameEndedEvent(board=self._engine.board, winner=winner, scores=(first, second))
        )

    # -- Requêtes pour l'affichage --
    def can_select_pit(self, index: int) -> bool:
        return self.is_game_in_progress and self._engine.can_select(index)

    def should_highlight_pit(self, index: int) -> bool:
        """Vrai pour les petits trous non vides du joueur courant."""

        return self.can_select_pit(index)

    def pit_display_text(self, index: int) -> str:
        return str(self._engine.board[index].seed_count)

    def score(self, player: Player) -> int:
        return self._engine.store_count(player)

    @property
    def first_player_pit_indices(self) -> List[int]:
        return list(self._engine.board.owned_range(Player.FIRST))

    @property
    def second_player_pit_indices(self) -> List[int]:
        # Inversé pour la disposition à l'écran.
        return list(reversed(self._engine.board.owned_range(Player.SECOND)))

    @property
    def first_player_store_index(self) -> int:
        return self._engine.board.store_index(Player.FIRST)

    @property
    def second_player_store_index(self) -> int:
        return self._engine.board.store_index(Player.SECOND)


__all__ = ["GameService", "ServiceStatus"]
