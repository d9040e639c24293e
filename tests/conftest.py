"""
Shared test fixtures for the sugar test suite.

Provides failing callables for the adapter tests and keeps structlog and
cached settings from leaking between tests.
"""

from __future__ import annotations

import logging
from typing import Iterator

import pytest
import structlog

from sugar.config import get_settings
from sugar.logs import CONSOLE_HANDLER, LIBRARY_LOGGER


class Boom(Exception):
    """The exception every failing fixture raises."""


def always_fails(*args: object) -> int:
    """Raise Boom regardless of arguments."""
    raise Boom(f"failed with {len(args)} argument(s)")


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Restore structlog defaults, library logging and cached settings after each test."""
    yield
    structlog.reset_defaults()
    library = logging.getLogger(LIBRARY_LOGGER)
    for handler in [h for h in library.handlers if h.get_name() == CONSOLE_HANDLER]:
        library.removeHandler(handler)
    library.setLevel(logging.NOTSET)
    get_settings.cache_clear()


@pytest.fixture()
def calls() -> list:
    """Record of values seen by test actions."""
    return []
