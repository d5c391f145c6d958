"""Configuration constants for the PyGame table."""

from dataclasses import dataclass
from typing import Dict, Tuple

import pygame

from core.game.keys import Key


@dataclass(frozen=True)
class Colors:
    """Color palette for the blackjack UI."""

    # Felt
    FELT_GREEN: Tuple[int, int, int] = (25, 120, 50)

    # Card colors
    CARD_WHITE: Tuple[int, int, int] = (245, 243, 238)
    CARD_RED: Tuple[int, int, int] = (192, 57, 57)
    CARD_BLACK: Tuple[int, int, int] = (28, 28, 32)

    # Text
    TEXT_WHITE: Tuple[int, int, int] = (255, 255, 255)


@dataclass(frozen=True)
class Dimensions:
    """Dimension constants for layout and sizing."""

    # Cards
    CARD_WIDTH: int = 100
    CARD_HEIGHT: int = 150
    CARD_CORNER_RADIUS: int = 8

    # Text is rasterized once at this size and scaled into its slot
    FONT_SIZE: int = 128


# Raw keyboard keys to abstract table keys
KEY_BINDINGS: Dict[int, Key] = {
    pygame.K_f: Key.HIT,
    pygame.K_e: Key.STAND,
    pygame.K_n: Key.RESTART,
    pygame.K_ESCAPE: Key.QUIT,
}


# Global instances for easy import
COLORS = Colors()
DIMENSIONS = Dimensions()
