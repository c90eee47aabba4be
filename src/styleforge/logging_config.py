"""Logging configuration for the styleforge CLI."""

from __future__ import annotations

import logging
import sys


LOGGER_NAME = "styleforge"
VERBOSE_FORMAT = "%(message)s"
QUIET_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Route the styleforge logger to the terminal.

    Verbose runs print INFO records to stdout. Otherwise only warnings are
    kept, and they go to stderr so forged JSON on stdout stays parseable.

    Args:
        verbose: Whether to enable INFO logging to stdout
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    logger.handlers.clear()

    if verbose:
        logger.setLevel(logging.INFO)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(VERBOSE_FORMAT))
    else:
        logger.setLevel(logging.WARNING)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(QUIET_FORMAT))
    logger.addHandler(handler)
