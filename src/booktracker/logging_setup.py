"""Logging configuration for booktracker."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "booktracker"


def setup_logging(
    log_level: str = "WARNING",
    log_file: Path | str | None = None,
    rich_console: bool = True,
) -> logging.Logger:
    """
    Configure logging for booktracker.

    Console output goes to stderr so stdout keeps only the catalog table
    and statistics.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for log output (always DEBUG)
        rich_console: Use rich handler for pretty console output

    Returns:
        Package logger instance
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    file_format = logging.Formatter(
        "%(asctime)s | %(levelname)-5s | [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler: logging.Handler
    if rich_console:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    console_handler.setLevel(level)

    logger.addHandler(console_handler)
    logger.setLevel(level)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8", errors="backslashreplace")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger
