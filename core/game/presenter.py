"""Interface the engine uses to draw the table and read input."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence

from core.cards import Card
from core.game.keys import Key
from core.game.messages import MessageRect, lower_slot, upper_slot


class Participant(Enum):
    """Who holds a hand."""

    PLAYER = "player"
    DEALER = "dealer"


@dataclass(frozen=True)
class TableLayout:
    """Where the engine asks the presenter to put hands and text."""

    width: int = 1200
    height: int = 1000
    dealer_origin: tuple[int, int] = (0, 0)
    player_origin: tuple[int, int] = (0, 500)
    message_height: int = 80

    @property
    def upper_message(self) -> MessageRect:
        return upper_slot(self.width, self.height, self.message_height)

    @property
    def lower_message(self) -> MessageRect:
        return lower_slot(self.width, self.height, self.message_height)


class Presenter(Protocol):
    """Presentation adapter. The engine never touches windows, fonts or images."""

    def render_hand(
        self,
        participant: Participant,
        cards: Sequence[Card],
        origin_x: int,
        origin_y: int,
    ) -> None:
        ...

    def render_message(self, text: str, rect: MessageRect) -> None:
        ...

    def poll_pressed_keys(self) -> set[Key]:
        """Keys newly pressed since the previous call."""
        ...


class NullPresenter:
    """Presenter that draws nothing and never reports keys."""

    def render_hand(
        self,
        participant: Participant,
        cards: Sequence[Card],
        origin_x: int,
        origin_y: int,
    ) -> None:
        pass

    def render_message(self, text: str, rect: MessageRect) -> None:
        pass

    def poll_pressed_keys(self) -> set[Key]:
        return set()
