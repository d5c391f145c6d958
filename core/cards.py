"""Rank, Suit, and Card classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """Card suits. Suits carry no score, only the display asset."""

    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def asset_name(self) -> str:
        """Lowercase suit name used in asset identifiers."""
        return self.value

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(Enum):
    """Card ranks, ordered from Two to Ace."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def score(self) -> int:
        """
        Return the point value of the rank.

        Face value for 2-10, 10 for face cards, and always 11 for an Ace.
        """
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def asset_name(self) -> str:
        """Lowercase rank name used in asset identifiers ("2".."10", "jack", ...)."""
        if self.value <= 10:
            return str(self.value)
        return self.name.lower()


_RANKS_BY_ASSET = {rank.asset_name: rank for rank in Rank}
_SUITS_BY_ASSET = {suit.asset_name: suit for suit in Suit}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def score(self) -> int:
        """Return the point value of the card."""
        return self.rank.score

    @property
    def asset_id(self) -> str:
        """Return the display asset identifier, e.g. 'ace_of_spades'."""
        return f"{self.rank.asset_name}_of_{self.suit.asset_name}"

    @classmethod
    def from_asset_id(cls, asset_id: str) -> "Card":
        """Create a card from an asset identifier like 'queen_of_hearts'."""
        rank_str, sep, suit_str = asset_id.strip().lower().partition("_of_")
        if not sep:
            raise ValueError(f"Invalid asset id: {asset_id}")
        if rank_str not in _RANKS_BY_ASSET:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUITS_BY_ASSET:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANKS_BY_ASSET[rank_str], _SUITS_BY_ASSET[suit_str])


def build_deck() -> tuple[Card, ...]:
    """
    Build the standard 52-card deck.

    The order is deterministic: rank-major, suit-minor, so the card at
    position ``i`` is ``(list(Rank)[i // 4], list(Suit)[i % 4])``. Hands and
    the dealt-set refer to cards by this position.
    """
    return tuple(Card(rank, suit) for rank in Rank for suit in Suit)
