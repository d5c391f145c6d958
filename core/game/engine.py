"""Blackjack round engine with state machine."""

from random import Random
from typing import Callable, Iterable, Sequence

from transitions import Machine

from config import GameConfig
from core.cards import Card, build_deck
from core.dealing import CardAllocator, DeckExhaustedError
from core.game import messages
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.keys import Key
from core.game.presenter import NullPresenter, Participant, Presenter, TableLayout
from core.game.state import GameState, Status, Winner
from core.hand import Hand, is_bust
from core.logging_utils import get_logger

logger = get_logger(__name__)


def determine_winner(player_score: int, dealer_score: int, target: int = 21) -> Winner:
    """
    Decide a finished round from the two final scores.

    A player over the target has already lost. Otherwise a dealer bust or a
    lower dealer score wins for the player, a higher one for the casino, and
    equal scores tie.
    """
    if is_bust(player_score, target):
        return Winner.CASINO
    if is_bust(dealer_score, target):
        return Winner.PLAYER
    if dealer_score > player_score:
        return Winner.CASINO
    if dealer_score < player_score:
        return Winner.PLAYER
    return Winner.TIE


class BlackjackGame:
    """
    Single-table blackjack round driven one tick per frame.

    Each ``tick`` runs the handler for the current state with the keys
    pressed since the previous tick, then asks the presenter to draw both
    hands. The engine owns the deck, the dealt-set and both hands.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal_complete", "source": "uninitialized", "dest": "awaiting_player_decision"},
        {"trigger": "deal_natural", "source": "uninitialized", "dest": "player_stopped_taking_cards"},
        {"trigger": "player_reaches_target", "source": "awaiting_player_decision", "dest": "player_stopped_taking_cards"},
        {"trigger": "player_stands", "source": "awaiting_player_decision", "dest": "player_stopped_taking_cards"},
        {"trigger": "player_busts", "source": "awaiting_player_decision", "dest": "game_over"},
        {"trigger": "dealer_done", "source": "player_stopped_taking_cards", "dest": "game_over"},
        {
            "trigger": "abort_round",
            "source": ["uninitialized", "awaiting_player_decision", "player_stopped_taking_cards"],
            "dest": "game_over",
        },
        {"trigger": "reset_round", "source": "game_over", "dest": "uninitialized"},
    ]

    def __init__(
        self,
        rules: GameConfig | None = None,
        deck: Sequence[Card] | None = None,
        allocator: CardAllocator | None = None,
        presenter: Presenter | None = None,
        layout: TableLayout | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            rules: Score thresholds (uses defaults if not provided)
            deck: Card sequence addressed by position (standard 52 by default)
            allocator: Draw strategy (random without replacement by default)
            presenter: Where hands and messages are drawn
            layout: Table geometry passed to the presenter
            rng: Random number generator for reproducible games
        """
        self.rules = rules or GameConfig()
        self._deck: tuple[Card, ...] = tuple(deck) if deck is not None else build_deck()
        self.allocator = allocator or CardAllocator(
            rng=rng, max_attempts=self.rules.max_draw_attempts
        )
        self.presenter: Presenter = presenter or NullPresenter()
        self.layout = layout or TableLayout()

        self._dealt: set[int] = set()
        self._player_hand = Hand()
        self._dealer_hand = Hand()
        self._winner: Winner | None = None
        self._round_aborted = False
        self._messages: list[str] = []

        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="uninitialized",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_state_change",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def status(self) -> Status:
        """Current state, with the winner attached once the round is over."""
        if self.state == GameState.GAME_OVER:
            return Status(self.state, self._winner)
        return Status(self.state)

    @property
    def winner(self) -> Winner | None:
        return self._winner if self.state == GameState.GAME_OVER else None

    @property
    def deck(self) -> tuple[Card, ...]:
        return self._deck

    @property
    def dealt(self) -> frozenset[int]:
        """Positions drawn so far this round."""
        return frozenset(self._dealt)

    @property
    def player_hand(self) -> tuple[int, ...]:
        return tuple(self._player_hand)

    @property
    def dealer_hand(self) -> tuple[int, ...]:
        return tuple(self._dealer_hand)

    @property
    def player_cards(self) -> list[Card]:
        return self._player_hand.cards(self._deck)

    @property
    def dealer_cards(self) -> list[Card]:
        return self._dealer_hand.cards(self._deck)

    @property
    def player_score(self) -> int:
        return self._player_hand.score(self._deck)

    @property
    def dealer_score(self) -> int:
        return self._dealer_hand.score(self._deck)

    @property
    def round_aborted(self) -> bool:
        """True when the current round was cut short by an exhausted deck."""
        return self._round_aborted

    @property
    def last_messages(self) -> tuple[str, ...]:
        """Messages rendered during the most recent tick, in draw order."""
        return tuple(self._messages)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def tick(self, keys: Iterable[Key] = ()) -> Status:
        """
        Advance the round by one frame.

        Args:
            keys: Keys newly pressed since the previous tick

        Returns:
            The status after this tick
        """
        pressed = set(keys)
        self._messages = []

        handlers = {
            GameState.UNINITIALIZED: self._exec_uninitialized,
            GameState.AWAITING_PLAYER_DECISION: self._exec_awaiting_player_decision,
            GameState.PLAYER_STOPPED_TAKING_CARDS: self._exec_player_stopped_taking_cards,
            GameState.GAME_OVER: self._exec_game_over,
        }
        try:
            handlers[self.state](pressed)
        except DeckExhaustedError as exc:
            self._abort(exc)

        self._render_hands()
        return self.status

    # State handlers

    def _exec_uninitialized(self, pressed: set[Key]) -> None:
        """Deal one card to the dealer and two to the player."""
        self.events.emit(EventType.ROUND_STARTED)
        self._deal_to(self._dealer_hand)
        self._deal_to(self._player_hand)
        self._deal_to(self._player_hand)

        if self.player_score == self.rules.target_score:
            self.events.emit(EventType.PLAYER_NATURAL, hand_value=self.player_score)
            self.deal_natural()
        else:
            self.deal_complete()
            self._show_decision_prompts()

    def _exec_awaiting_player_decision(self, pressed: set[Key]) -> None:
        """Offer hit or stand; hit wins when both keys arrive in one tick."""
        self._show_decision_prompts()

        if Key.HIT in pressed:
            self._deal_to(self._player_hand)
            score = self.player_score
            self.events.emit(EventType.PLAYER_HIT, hand_value=score)

            if is_bust(score, self.rules.target_score):
                self.events.emit(EventType.PLAYER_BUSTS, hand_value=score)
                self._winner = Winner.CASINO
                self.player_busts()
                self._announce_result()
            elif score == self.rules.target_score:
                self.player_reaches_target()
        elif Key.STAND in pressed:
            self.events.emit(EventType.PLAYER_STAND, hand_value=self.player_score)
            self.player_stands()

    def _exec_player_stopped_taking_cards(self, pressed: set[Key]) -> None:
        """Dealer draws to 17, but keeps drawing while not ahead of the player."""
        player_score = self.player_score
        dealer_score = self.dealer_score

        while dealer_score < self.rules.dealer_stop_score and dealer_score <= player_score:
            self._deal_to(self._dealer_hand)
            dealer_score = self.dealer_score
            self.events.emit(EventType.DEALER_HITS, hand_value=dealer_score)

        if is_bust(dealer_score, self.rules.target_score):
            self.events.emit(EventType.DEALER_BUSTS, hand_value=dealer_score)
        else:
            self.events.emit(EventType.DEALER_STANDS, hand_value=dealer_score)

        self._winner = determine_winner(player_score, dealer_score, self.rules.target_score)
        self.dealer_done()
        self._announce_result()

    def _exec_game_over(self, pressed: set[Key]) -> None:
        """Show the result until the player restarts."""
        self._show(messages.WINNER_MESSAGES[self._winner], self.layout.upper_message)
        self._show(messages.RESTART_PROMPT, self.layout.lower_message)

        if Key.RESTART in pressed:
            self._dealt.clear()
            self._player_hand.clear()
            self._dealer_hand.clear()
            self._winner = None
            self._round_aborted = False
            self.events.clear_history()
            self.reset_round()
            self.events.emit(EventType.ROUND_RESET)

    # Helpers

    def _deal_to(self, hand: Hand) -> int:
        """Draw a card into a hand."""
        position = self.allocator.draw(self._deck, self._dealt)
        hand.add(position)
        participant = Participant.DEALER if hand is self._dealer_hand else Participant.PLAYER
        self.events.emit(
            EventType.CARD_DEALT,
            card=self._deck[position].asset_id,
            position=position,
            hand=participant.value,
            hand_value=hand.score(self._deck),
        )
        return position

    def _abort(self, exc: DeckExhaustedError) -> None:
        """Force the round to resolve with the cards already dealt."""
        logger.error("Round aborted in state %s: %s", self.state, exc)
        self._round_aborted = True
        self.events.emit(
            EventType.DECK_EXHAUSTED,
            deck_size=exc.deck_size,
            dealt=exc.dealt_count,
        )
        self._winner = determine_winner(
            self.player_score, self.dealer_score, self.rules.target_score
        )
        self.abort_round()
        self._announce_result()

    def _announce_result(self) -> None:
        logger.info(
            "Round over: %s (player %d, dealer %d)",
            self._winner.name,
            self.player_score,
            self.dealer_score,
        )
        self.events.emit(
            EventType.ROUND_ENDED,
            winner=self._winner.name.lower(),
            player_value=self.player_score,
            dealer_value=self.dealer_score,
            aborted=self._round_aborted,
        )

    def _show_decision_prompts(self) -> None:
        self._show(messages.HIT_PROMPT, self.layout.upper_message)
        self._show(messages.STAND_PROMPT, self.layout.lower_message)

    def _show(self, text: str, rect: messages.MessageRect) -> None:
        self._messages.append(text)
        self.presenter.render_message(text, rect)

    def _render_hands(self) -> None:
        self.presenter.render_hand(Participant.DEALER, self.dealer_cards, *self.layout.dealer_origin)
        self.presenter.render_hand(Participant.PLAYER, self.player_cards, *self.layout.player_origin)

    def _log_state_change(self) -> None:
        logger.debug("State -> %s", self.state)
