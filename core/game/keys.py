"""Abstract input keys."""

from enum import Enum, auto


class Key(Enum):
    """Keys the host reports per tick. QUIT is consumed by the host loop."""

    HIT = auto()
    STAND = auto()
    RESTART = auto()
    QUIT = auto()
