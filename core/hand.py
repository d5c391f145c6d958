"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from core.cards import Card


def score_hand(deck: Sequence[Card], positions: Iterable[int]) -> int:
    """
    Sum the scores of the cards at ``positions``.

    There is no soft-Ace adjustment: an Ace always counts 11, and the total
    is never capped. Busting is checked by comparing against the target.
    """
    return sum(deck[position].score for position in positions)


def is_bust(score: int, target: int = 21) -> bool:
    """Check if a score strictly exceeds the target."""
    return score > target


@dataclass
class Hand:
    """Ordered deck positions held by the player or the dealer."""

    positions: list[int] = field(default_factory=list)

    def add(self, position: int) -> None:
        """Append a dealt position to the hand."""
        self.positions.append(position)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.positions.clear()

    def cards(self, deck: Sequence[Card]) -> list[Card]:
        """Resolve the held positions to cards."""
        return [deck[position] for position in self.positions]

    def score(self, deck: Sequence[Card]) -> int:
        return score_hand(deck, self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[int]:
        return iter(self.positions)

    def __repr__(self) -> str:
        return f"Hand({self.positions!r})"
