"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _default_assets_dir() -> str:
    """Resolve the assets directory (BLACKJACK_ASSETS_DIR or ./assets)."""
    return os.getenv("BLACKJACK_ASSETS_DIR", os.path.join(os.getcwd(), "assets"))


def _default_font_path() -> str:
    """Resolve the message font (BLACKJACK_FONT or the bundled Open Sans)."""
    return os.getenv(
        "BLACKJACK_FONT",
        os.path.join(_default_assets_dir(), "fonts", "opensans", "OpenSans-Regular.ttf"),
    )


@dataclass(frozen=True)
class GameConfig:
    """Table rules for the dealer and the player."""

    target_score: int = 21
    dealer_stop_score: int = 17
    max_draw_attempts: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_MAX_DRAW_ATTEMPTS", "64"))
    )

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.target_score < 1:
            raise ValueError("target_score must be positive")
        if not 0 < self.dealer_stop_score <= self.target_score:
            raise ValueError("dealer_stop_score must be between 1 and target_score")
        if self.max_draw_attempts < 1:
            raise ValueError("max_draw_attempts must be at least 1")


@dataclass(frozen=True)
class DisplayConfig:
    """Window and asset configuration."""

    width: int = 1200
    height: int = 1000
    fps: int = 60
    title: str = "BlackJack"
    assets_dir: str = field(default_factory=_default_assets_dir)
    font_path: str = field(default_factory=_default_font_path)

    @property
    def cards_dir(self) -> str:
        """Directory holding the <rank>_of_<suit>.png card images."""
        return os.path.join(self.assets_dir, "cards")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
