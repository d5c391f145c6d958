"""Round engine and state management."""

from core.game.events import EventEmitter, EventType, GameEvent
from core.game.keys import Key
from core.game.presenter import NullPresenter, Participant, Presenter, TableLayout
from core.game.state import GameState, Status, Winner
from core.game.engine import BlackjackGame, determine_winner

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "Key",
    "NullPresenter",
    "Participant",
    "Presenter",
    "TableLayout",
    "GameState",
    "Status",
    "Winner",
    "BlackjackGame",
    "determine_winner",
]
