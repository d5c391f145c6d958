"""Core systems for the blackjack table UI."""

from pygame_ui.core.texture_cache import TextureCache

__all__ = ["TextureCache"]
