"""Random card allocation without replacement."""

from random import Random
from typing import Sequence

from core.cards import Card
from core.logging_utils import get_logger

logger = get_logger(__name__)


class DeckExhaustedError(RuntimeError):
    """Raised when every deck position has already been dealt this round."""

    def __init__(self, deck_size: int, dealt_count: int) -> None:
        self.deck_size = deck_size
        self.dealt_count = dealt_count
        super().__init__(
            f"Cannot draw: {dealt_count} of {deck_size} cards already dealt"
        )


class CardAllocator:
    """
    Draws deck positions uniformly at random, never repeating within a round.

    Drawing is rejection sampling over ``range(len(deck))``. The number of
    resamples is capped; once the cap is hit the draw picks uniformly among
    the positions still undealt, which has the same distribution.
    """

    def __init__(self, rng: Random | None = None, max_attempts: int = 64) -> None:
        """
        Initialize the allocator.

        Args:
            rng: Random number generator for reproducible deals
            max_attempts: Resampling cap before switching to the filtered pick
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._rng = rng or Random()
        self._max_attempts = max_attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def draw(self, deck: Sequence[Card], dealt: set[int]) -> int:
        """
        Draw one undealt position and record it in ``dealt``.

        Args:
            deck: The full deck, addressed by position
            dealt: Positions already drawn this round (mutated)

        Returns:
            The drawn position, ``0 <= position < len(deck)``

        Raises:
            DeckExhaustedError: If no undealt position remains
        """
        size = len(deck)
        if len(dealt) >= size:
            logger.error("Deck exhausted: %d of %d cards dealt", len(dealt), size)
            raise DeckExhaustedError(size, len(dealt))

        for _ in range(self._max_attempts):
            position = self._rng.randrange(size)
            if position not in dealt:
                break
        else:
            remaining = [p for p in range(size) if p not in dealt]
            logger.debug(
                "Resampling cap of %d reached, choosing among %d remaining cards",
                self._max_attempts,
                len(remaining),
            )
            position = self._rng.choice(remaining)

        dealt.add(position)
        return position
