"""Pytest fixtures for blackjack table tests."""

from random import Random
from typing import Sequence

import pytest

from core.cards import Card, build_deck
from core.dealing import CardAllocator, DeckExhaustedError
from core.game import BlackjackGame, Key, Participant
from core.game.messages import MessageRect


class ScriptedAllocator(CardAllocator):
    """Deals a fixed sequence of deck positions, in order."""

    def __init__(self, positions: Sequence[int]):
        super().__init__()
        self._script = list(positions)

    def draw(self, deck, dealt):
        if len(dealt) >= len(deck) or not self._script:
            raise DeckExhaustedError(len(deck), len(dealt))
        position = self._script.pop(0)
        assert position not in dealt, f"script deals position {position} twice"
        dealt.add(position)
        return position


class RecordingPresenter:
    """Presenter that remembers what the engine asked it to draw."""

    def __init__(self):
        self.hands: dict[Participant, tuple[list[Card], int, int]] = {}
        self.messages: list[tuple[str, MessageRect]] = []
        self.pending_keys: set[Key] = set()

    def render_hand(self, participant, cards, origin_x, origin_y):
        self.hands[participant] = (list(cards), origin_x, origin_y)

    def render_message(self, text, rect):
        self.messages.append((text, rect))

    def poll_pressed_keys(self):
        keys, self.pending_keys = self.pending_keys, set()
        return keys


def position_of(deck: Sequence[Card], asset_id: str) -> int:
    """Deck position of the card with the given asset id."""
    return list(deck).index(Card.from_asset_id(asset_id))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck():
    """The standard 52-card deck."""
    return build_deck()


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def make_game(deck, presenter):
    """
    Build a game whose deal order is fixed.

    Cards are given as asset ids and dealt in order: dealer, player,
    player, then every later hit or dealer draw.
    """

    def _make(*asset_ids: str, cards: Sequence[Card] | None = None) -> BlackjackGame:
        table_deck = tuple(cards) if cards is not None else deck
        positions = [position_of(table_deck, asset_id) for asset_id in asset_ids]
        return BlackjackGame(
            deck=table_deck,
            allocator=ScriptedAllocator(positions),
            presenter=presenter,
        )

    return _make


@pytest.fixture
def game(rng, presenter):
    """A new game with a seeded random allocator."""
    return BlackjackGame(rng=rng, presenter=presenter)
