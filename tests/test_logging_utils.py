"""Tests for logging setup."""

import logging

from core.logging_utils import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_quiets_state_machine_library(self):
        setup_logging("INFO")
        assert logging.getLogger("transitions").level == logging.WARNING

    def test_debug_keeps_state_machine_library(self):
        logging.getLogger("transitions").setLevel(logging.NOTSET)
        setup_logging("debug")
        assert logging.getLogger("transitions").level == logging.NOTSET

    def test_get_logger(self):
        assert get_logger("core.game.engine") is logging.getLogger("core.game.engine")
