"""Logging setup utilities for configfileform.

Diagnostics always go to stderr (and optionally a file) so they never
mix with the rendered output on stdout.
"""

from __future__ import annotations

import logging
import sys

from configfileform.config.settings import LoggingConfig

# -v count -> log level
VERBOSITY_LEVELS: dict[int, str] = {
    0: "WARNING",
    1: "INFO",
    2: "DEBUG",
}


def level_for_verbosity(verbose: int) -> str:
    """Map the number of ``-v`` flags to a logging level name."""
    return VERBOSITY_LEVELS[min(max(verbose, 0), max(VERBOSITY_LEVELS))]


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure the ``configfileform`` logger.

    Sets up the package logger with the configured level and format, a
    stderr handler and an optional file handler. Calling it again
    replaces previously installed handlers.

    Args:
        config: Logging configuration. If None, uses defaults
                (WARNING level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger("configfileform")
    root_logger.setLevel(getattr(logging, config.level.upper(), logging.WARNING))
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler (optional)
    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialized at %s level", config.level)
