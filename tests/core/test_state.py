"""Tests for game states, status and events."""

import pytest
from transitions import MachineError

from core.game.engine import BlackjackGame
from core.game.events import EventEmitter, EventType
from core.game.state import GameState, Status, Winner


class TestStatus:
    """Tests for the Status variant."""

    def test_in_progress_status_has_no_winner(self):
        status = Status(GameState.AWAITING_PLAYER_DECISION)
        assert status.winner is None
        assert not status.is_over

    def test_game_over_carries_winner(self):
        status = Status(GameState.GAME_OVER, Winner.TIE)
        assert status.is_over
        assert str(status) == "Game Over(Tie)"

    def test_game_over_requires_winner(self):
        with pytest.raises(ValueError):
            Status(GameState.GAME_OVER)

    def test_winner_only_when_over(self):
        with pytest.raises(ValueError):
            Status(GameState.UNINITIALIZED, Winner.PLAYER)

    def test_state_str(self):
        assert str(GameState.PLAYER_STOPPED_TAKING_CARDS) == "Player Stopped Taking Cards"


class TestTransitions:
    """Tests for the engine's transition table."""

    def test_restart_only_from_game_over(self):
        game = BlackjackGame()
        with pytest.raises(MachineError):
            game.reset_round()

    def test_no_backward_transition_to_player_decision(self):
        game = BlackjackGame()
        game.deal_natural()
        assert game.state == GameState.PLAYER_STOPPED_TAKING_CARDS
        with pytest.raises(MachineError):
            game.deal_complete()

    def test_abort_from_game_over_is_rejected(self):
        game = BlackjackGame()
        game.abort_round()
        assert game.state == GameState.GAME_OVER
        with pytest.raises(MachineError):
            game.abort_round()


class TestEventEmitter:
    """Tests for the event emitter."""

    def test_typed_and_catch_all_handlers(self):
        emitter = EventEmitter()
        typed, everything = [], []
        emitter.subscribe(typed.append, EventType.CARD_DEALT)
        emitter.subscribe(everything.append)

        emitter.emit(EventType.ROUND_STARTED)
        emitter.emit(EventType.CARD_DEALT, card="ace_of_spades")

        assert [e.event_type for e in typed] == [EventType.CARD_DEALT]
        assert typed[0].data == {"card": "ace_of_spades"}
        assert len(everything) == 2

    def test_history(self):
        emitter = EventEmitter()
        emitter.emit(EventType.ROUND_STARTED)
        emitter.emit(EventType.ROUND_ENDED, winner="player")

        assert [e.event_type for e in emitter.history] == [
            EventType.ROUND_STARTED,
            EventType.ROUND_ENDED,
        ]
        emitter.clear_history()
        assert emitter.history == []
