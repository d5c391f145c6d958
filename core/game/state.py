"""Game state enumeration."""

from dataclasses import dataclass
from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: UNINITIALIZED → AWAITING_PLAYER_DECISION → PLAYER_STOPPED_TAKING_CARDS → GAME_OVER
    """

    # Nothing dealt yet
    UNINITIALIZED = auto()

    # Player chooses hit or stand
    AWAITING_PLAYER_DECISION = auto()

    # Dealer plays
    PLAYER_STOPPED_TAKING_CARDS = auto()

    # Winner decided, waiting for restart
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class Winner(Enum):
    """Outcome of a finished round."""

    PLAYER = auto()
    CASINO = auto()
    TIE = auto()


@dataclass(frozen=True)
class Status:
    """Current state plus the winner, which is set only in GAME_OVER."""

    state: GameState
    winner: Winner | None = None

    def __post_init__(self) -> None:
        if (self.state == GameState.GAME_OVER) != (self.winner is not None):
            raise ValueError("winner must be set exactly when the round is over")

    @property
    def is_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    def __str__(self) -> str:
        if self.winner is None:
            return str(self.state)
        return f"{self.state}({self.winner.name.title()})"

