"""Status text shown under the table, and where it goes."""

from typing import NamedTuple

from core.game.state import Winner

HIT_PROMPT = "Press F to take another card"
STAND_PROMPT = "Press E to stay with cards currently in hand"

PLAYER_WINS = "Player wins!"
CASINO_WINS = "Casino wins!"
TIE = "It's a tie!"
RESTART_PROMPT = "Press N to restart the game"

ALL_MESSAGES = (HIT_PROMPT, STAND_PROMPT, PLAYER_WINS, CASINO_WINS, TIE, RESTART_PROMPT)

WINNER_MESSAGES = {
    Winner.PLAYER: PLAYER_WINS,
    Winner.CASINO: CASINO_WINS,
    Winner.TIE: TIE,
}


class MessageRect(NamedTuple):
    """Screen rectangle for one line of status text."""

    x: int
    y: int
    width: int
    height: int


def upper_slot(width: int, height: int, line_height: int = 80) -> MessageRect:
    """The first of the two message lines at the bottom of the board."""
    return MessageRect(0, height - 2 * line_height, width, line_height)


def lower_slot(width: int, height: int, line_height: int = 80) -> MessageRect:
    """The bottom message line."""
    return MessageRect(0, height - line_height, width, line_height)
