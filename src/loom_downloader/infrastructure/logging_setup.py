"""Logging configuration for the application."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from loom_downloader.infrastructure.config.models import LoggingConfig

PACKAGE_LOGGER = "loom_downloader"


def configure_logging(
    config: LoggingConfig,
    verbose: bool = False,
    console: Console | None = None,
) -> logging.Logger:
    """
    Attach console and optional file handlers to the package logger.

    Console records go through rich so they interleave cleanly with the
    status lines printed on the same console. Calling this again replaces
    the handlers installed by the previous call.

    Args:
        config: Logging settings
        verbose: Force DEBUG level
        console: Console for the rich handler (stderr if None)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    configured_level = getattr(logging, config.level)
    # Status lines already narrate progress, so the console only shows warnings
    console_level = logging.DEBUG if verbose else max(logging.WARNING, configured_level)
    file_level = logging.DEBUG if verbose else configured_level
    logger.setLevel(min(console_level, file_level) if config.file_path else console_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(console_level)
    logger.addHandler(rich_handler)

    if config.file_path:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(config.format))
        file_handler.setLevel(file_level)
        logger.addHandler(file_handler)

    return logger
