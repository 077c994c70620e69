# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Logging configuration with rich handler for parseconfig."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "PARSECONFIG_LOG_LEVEL"
LOGGER_NAME = "parseconfig"


def setup_logging(
    level: str = "INFO",
    *,
    show_time: bool = True,
    show_path: bool = False,
    rich_tracebacks: bool = True,
) -> logging.Logger:
    """Set up logging with rich handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        show_time: Whether to show timestamps
        show_path: Whether to show file paths
        rich_tracebacks: Whether to use rich tracebacks

    Returns:
        Configured logger instance
    """
    console = Console(stderr=True)

    rich_handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        enable_link_path=False,
        markup=False,
        rich_tracebacks=rich_tracebacks,
        tracebacks_show_locals=False,
    )

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    rich_handler.setLevel(numeric_level)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",  # Rich handler handles formatting
        handlers=[rich_handler],
        force=True,
    )

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(numeric_level)
    return root_logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance, defaulting to the package logger."""
    if name is None:
        name = LOGGER_NAME
    return logging.getLogger(name)


logger = get_logger()


def init_cli_logging(*, verbose: bool = False) -> logging.Logger:
    """Initialize logging for CLI usage.

    The ``PARSECONFIG_LOG_LEVEL`` environment variable wins over ``verbose``.
    """
    env_level = os.getenv(LOG_LEVEL_ENV, "").upper()
    if env_level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        level = env_level
    else:
        level = "DEBUG" if verbose else "INFO"
    return setup_logging(level=level)
