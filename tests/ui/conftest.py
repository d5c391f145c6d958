"""Pytest fixtures for pygame UI tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pygame_ui.core.texture_cache import TextureCache


@pytest.fixture
def screen():
    """A display surface on the dummy video driver."""
    pygame.init()
    surface = pygame.display.set_mode((1200, 1000))
    pygame.event.clear()
    yield surface
    pygame.quit()


@pytest.fixture
def cards_dir(tmp_path):
    """An empty card image directory."""
    path = tmp_path / "cards"
    path.mkdir()
    return path


@pytest.fixture
def textures(screen, cards_dir):
    return TextureCache(str(cards_dir))
