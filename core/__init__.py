"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Rank, Suit, build_deck
from core.dealing import CardAllocator, DeckExhaustedError
from core.hand import Hand, is_bust, score_hand

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "build_deck",
    "CardAllocator",
    "DeckExhaustedError",
    "Hand",
    "is_bust",
    "score_hand",
]
