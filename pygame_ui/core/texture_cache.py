"""Adapter-local cache of card images and rendered message text."""

import os
from typing import Dict, Iterable, Optional, Tuple

import pygame

from core.cards import Card
from core.logging_utils import get_logger
from pygame_ui.components.card import render_card_face
from pygame_ui.config import COLORS, DIMENSIONS

logger = get_logger(__name__)


class TextureCache:
    """Loads each texture once and keeps it for the adapter's lifetime.

    Card textures are keyed by asset id and loaded from
    ``<cards_dir>/<asset_id>.png``. A missing image falls back to a drawn
    card face. Text textures are keyed by the string itself. Scaled copies
    are kept per key and size so a frame never rescales.
    """

    def __init__(
        self,
        cards_dir: str,
        font_path: Optional[str] = None,
        font_size: int = DIMENSIONS.FONT_SIZE,
        text_color: Tuple[int, int, int] = COLORS.TEXT_WHITE,
    ):
        """Initialize the cache.

        Args:
            cards_dir: Directory holding the card PNGs
            font_path: TTF used for messages; pygame's default font if missing
            font_size: Rasterization size for messages
            text_color: Message color
        """
        self._cards_dir = cards_dir
        self._font_path = font_path
        self._font_size = font_size
        self._text_color = text_color
        self._font: Optional[pygame.font.Font] = None
        self._cache: Dict[str, pygame.Surface] = {}
        self._scaled: Dict[Tuple[str, Tuple[int, int]], pygame.Surface] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def card(self, card: Card, size: Optional[Tuple[int, int]] = None) -> pygame.Surface:
        """Get the texture for a card, scaled to size if one is given."""
        key = card.asset_id
        if key not in self._cache:
            self._cache[key] = self._load_card(card)
        return self._fit(key, size)

    def text(self, text: str, size: Optional[Tuple[int, int]] = None) -> pygame.Surface:
        """Get the rendered texture for a message, stretched to size if one is given."""
        if text not in self._cache:
            self._cache[text] = self._get_font().render(text, True, self._text_color)
        return self._fit(text, size)

    def preload_text(self, texts: Iterable[str]) -> None:
        """Render all messages up front so the first frame showing them is cheap."""
        for text in texts:
            self.text(text)

    def _fit(self, key: str, size: Optional[Tuple[int, int]]) -> pygame.Surface:
        texture = self._cache[key]
        if size is None or texture.get_size() == size:
            return texture
        if (key, size) not in self._scaled:
            self._scaled[(key, size)] = pygame.transform.smoothscale(texture, size)
        return self._scaled[(key, size)]

    def _load_card(self, card: Card) -> pygame.Surface:
        path = os.path.join(self._cards_dir, f"{card.asset_id}.png")
        if not os.path.exists(path):
            logger.debug("No image for %s, drawing card face", card.asset_id)
            return render_card_face(card, DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT)

        image = pygame.image.load(path)
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            path = self._font_path if self._font_path and os.path.exists(self._font_path) else None
            if self._font_path and path is None:
                logger.warning("Font %s not found, using default font", self._font_path)
            self._font = pygame.font.Font(path, self._font_size)
        return self._font
