"""PyGame implementation of the engine's presenter interface."""

from typing import Dict, Optional, Sequence

import pygame

from core.cards import Card
from core.game.keys import Key
from core.game.messages import MessageRect
from core.game.presenter import Participant
from pygame_ui.config import COLORS, DIMENSIONS, KEY_BINDINGS
from pygame_ui.core.texture_cache import TextureCache


class PygamePresenter:
    """Draws hands and messages onto a pygame surface and reads the keyboard."""

    def __init__(
        self,
        screen: pygame.Surface,
        textures: TextureCache,
        key_bindings: Optional[Dict[int, Key]] = None,
    ):
        """Initialize the presenter.

        Args:
            screen: Surface to draw on (the display surface in the app)
            textures: Cache for card and text textures
            key_bindings: pygame key code to table key
        """
        self.screen = screen
        self.textures = textures
        self.key_bindings = key_bindings if key_bindings is not None else KEY_BINDINGS

    def begin_frame(self) -> None:
        """Clear the table to felt."""
        self.screen.fill(COLORS.FELT_GREEN)

    def end_frame(self) -> None:
        pygame.display.flip()

    def render_hand(
        self,
        participant: Participant,
        cards: Sequence[Card],
        origin_x: int,
        origin_y: int,
    ) -> None:
        """Lay the cards out left to right starting at the origin."""
        size = (DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT)
        for idx, card in enumerate(cards):
            texture = self.textures.card(card, size)
            self.screen.blit(texture, (origin_x + idx * DIMENSIONS.CARD_WIDTH, origin_y))

    def render_message(self, text: str, rect: MessageRect) -> None:
        """Stretch the message texture over its slot."""
        texture = self.textures.text(text, (rect.width, rect.height))
        self.screen.blit(texture, (rect.x, rect.y))

    def poll_pressed_keys(self) -> set[Key]:
        """Drain the event queue and report keys pressed since the last call."""
        pressed: set[Key] = set()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pressed.add(Key.QUIT)
            elif event.type == pygame.KEYDOWN and event.key in self.key_bindings:
                pressed.add(self.key_bindings[event.key])
        return pressed
