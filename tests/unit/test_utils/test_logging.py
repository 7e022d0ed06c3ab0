"""Tests for logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from termsession.config.settings import LoggingConfig
from termsession.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    """Leave the package logger as the test found it."""
    logger = logging.getLogger("termsession")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


class TestSetupLogging:
    def test_defaults(self) -> None:
        setup_logging()
        logger = logging.getLogger("termsession")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_level_from_config(self) -> None:
        setup_logging(LoggingConfig(level="debug"))
        assert logging.getLogger("termsession").level == logging.DEBUG

    def test_repeated_setup_replaces_handlers(self) -> None:
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("termsession").handlers) == 1

    def test_file_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "termsession.log"
        setup_logging(LoggingConfig(file=str(log_file)))
        logger = logging.getLogger("termsession")
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        for handler in logger.handlers:
            handler.flush()
        assert "Logging initialized" in log_file.read_text()
