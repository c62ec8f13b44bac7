"""Services d'application pour orchestrer le moteur Congklak."""

from .event_bus import EventBus
from .events import (
    GameEndedEvent,
    GameStartedEvent,
    InvalidSelectionEvent,
    MoveAppliedEvent,
)
from .game_service import GameService, ServiceStatus

__all__ = [
    "EventBus",
    "GameService",
    "ServiceStatus",
    "GameStartedEvent",
    "MoveAppliedEvent",
    "InvalidSelectionEvent",
    "GameEndedEvent",
]
