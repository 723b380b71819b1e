"""Tests for logging configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
from rich.console import Console
from rich.logging import RichHandler

from loom_downloader.infrastructure.config.models import LoggingConfig
from loom_downloader.infrastructure.logging_setup import PACKAGE_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Remove handlers installed by a test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_only(self) -> None:
        """Test that the console shows warnings only by default."""
        logger = configure_logging(LoggingConfig(), console=Console(stderr=True))

        assert logger.name == PACKAGE_LOGGER
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert isinstance(handler, RichHandler)
        assert handler.level == logging.WARNING
        assert logger.propagate is False

    def test_verbose(self) -> None:
        """Test that verbose mode lowers the console level to DEBUG."""
        logger = configure_logging(LoggingConfig(), verbose=True)

        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_configured_level_above_warning(self) -> None:
        """Test that a stricter configured level applies to the console."""
        logger = configure_logging(LoggingConfig(level="ERROR"))

        assert logger.handlers[0].level == logging.ERROR

    def test_file_handler(self, tmp_path: Path) -> None:
        """Test that a log file receives records at the configured level."""
        log_path = tmp_path / "logs" / "loom-downloader.log"
        config = LoggingConfig(level="INFO", file_path=str(log_path))

        logger = configure_logging(config)
        logger.getChild("test").info("hello from the test")
        for handler in logger.handlers:
            handler.flush()

        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.INFO
        assert logger.level == logging.INFO
        assert "hello from the test" in log_path.read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self) -> None:
        """Test that a second call does not stack handlers."""
        configure_logging(LoggingConfig())
        logger = configure_logging(LoggingConfig(), verbose=True)

        assert len(logger.handlers) == 1
