"""Logging setup shared by the engine and the pygame host."""

import logging

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Call once at program start (pygame_ui/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
    # transitions logs every trigger at INFO; keep it for DEBUG runs only
    if level.upper() != "DEBUG":
        logging.getLogger("transitions").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
