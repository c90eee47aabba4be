"""Shared fixtures for styleforge tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_styleforge_logger() -> Iterator[None]:
    """Let caplog see styleforge records and undo CLI logging setup."""
    logger = logging.getLogger("styleforge")
    logger.propagate = True
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    yield
    logger.propagate = True
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
