"""UI components for the blackjack table."""

from pygame_ui.components.card import render_card_face

__all__ = ["render_card_face"]
