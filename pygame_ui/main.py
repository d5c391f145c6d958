"""Main entry point for the PyGame Blackjack table."""

import sys

import pygame

from config import AppConfig, config
from core.game import BlackjackGame, Key, TableLayout
from core.game.messages import ALL_MESSAGES
from core.logging_utils import get_logger, setup_logging
from pygame_ui.core.texture_cache import TextureCache
from pygame_ui.presenter import PygamePresenter

logger = get_logger(__name__)


class Application:
    """Main application class managing the game loop."""

    def __init__(self, app_config: AppConfig = config):
        """Initialize the application."""
        self.config = app_config
        display = app_config.display

        pygame.init()
        pygame.display.set_caption(display.title)

        self.screen = pygame.display.set_mode((display.width, display.height))
        self.clock = pygame.time.Clock()
        self.running = True

        textures = TextureCache(display.cards_dir, font_path=display.font_path)
        textures.preload_text(ALL_MESSAGES)

        self.presenter = PygamePresenter(self.screen, textures)
        self.game = BlackjackGame(
            rules=app_config.game,
            presenter=self.presenter,
            layout=TableLayout(width=display.width, height=display.height),
        )

    def step(self) -> None:
        """Run one frame: read input, advance the round, draw."""
        keys = self.presenter.poll_pressed_keys()
        if Key.QUIT in keys:
            self.running = False
            return

        self.presenter.begin_frame()
        self.game.tick(keys)
        self.presenter.end_frame()

    def run(self) -> None:
        """Main application loop."""
        logger.info("Starting table %dx%d", self.screen.get_width(), self.screen.get_height())
        while self.running:
            self.step()
            self.clock.tick(self.config.display.fps)

        pygame.quit()


def main() -> None:
    """Entry point for the pygame UI."""
    setup_logging(config.logging.level)
    app = Application()
    app.run()
    sys.exit()


if __name__ == "__main__":
    main()
