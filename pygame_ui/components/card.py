"""Procedurally drawn card faces for cards without an image asset."""

import pygame

from core.cards import Card
from pygame_ui.config import COLORS, DIMENSIONS


def render_card_face(card: Card, width: int, height: int) -> pygame.Surface:
    """Render the face-up side of a card."""
    if not pygame.font.get_init():
        pygame.font.init()

    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    radius = DIMENSIONS.CARD_CORNER_RADIUS

    # Card background
    rect = pygame.Rect(0, 0, width, height)
    pygame.draw.rect(surface, COLORS.CARD_WHITE, rect, border_radius=radius)
    pygame.draw.rect(surface, COLORS.CARD_BLACK, rect, width=2, border_radius=radius)

    color = COLORS.CARD_RED if card.suit.is_red else COLORS.CARD_BLACK
    suit_symbol = str(card.suit)

    # Rank and suit in the top-left corner
    font_size = max(16, int(height * 0.18))
    font = pygame.font.Font(None, font_size)

    value_text = font.render(str(card.rank), True, color)
    surface.blit(value_text, (8, 6))

    suit_text = font.render(suit_symbol, True, color)
    surface.blit(suit_text, (8, 6 + font_size - 6))

    # Large center suit
    center_font = pygame.font.Font(None, int(height * 0.45))
    center_suit = center_font.render(suit_symbol, True, color)
    surface.blit(center_suit, center_suit.get_rect(center=(width // 2, height // 2)))

    # Bottom right (inverted)
    value_text_br = pygame.transform.rotate(value_text, 180)
    surface.blit(value_text_br, (width - 8 - value_text_br.get_width(), height - 6 - font_size))

    return surface
