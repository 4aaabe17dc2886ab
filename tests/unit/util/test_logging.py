"""Unit tests for logging setup."""

import logging

import pytest

from flashcastr.config import Settings
from flashcastr.util.logging import NOISY_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging so later tests keep pytest's handlers."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    touched = ["flashcastr", *NOISY_LOGGERS]
    levels = {name: logging.getLogger(name).level for name in touched}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, saved in levels.items():
        logging.getLogger(name).setLevel(saved)


class TestSetupLogging:
    def test_test_environment_is_quiet(self):
        setup_logging(Settings(environment="test"))

        assert logging.getLogger("flashcastr").level == logging.WARNING

    def test_debug_keeps_libraries_at_warning(self):
        setup_logging(Settings(debug=True))

        assert logging.getLogger("flashcastr").level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
