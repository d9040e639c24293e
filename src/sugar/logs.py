"""
structlog configuration.

Library modules log through get_logger(), which hands structlog's
rendered events to a stdlib logger under the "sugar" namespace. That
namespace carries a NullHandler, so an application that never configures
logging sees nothing. Applications that want the library's debug events
call configure_structlog() or configure_from_settings() once at startup,
or attach their own handler to logging.getLogger("sugar").
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from sugar.config import SugarSettings, get_settings

LIBRARY_LOGGER = "sugar"
CONSOLE_HANDLER = "sugar.console"


def get_logger(name: str) -> Any:
    """structlog logger writing to the stdlib logger called name."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_structlog(log_level: str = "INFO", log_format: str = "console") -> None:
    """
    Configure structlog with the given level and renderer.

    log_format "json" renders JSON lines, anything else renders
    human-readable console output. Unknown level names fall back to INFO.
    The library's own events are printed to stdout at the same level.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # module-level loggers must keep following later reconfiguration
        cache_logger_on_first_use=False,
    )
    _route_library_events(level)


def _route_library_events(level: int) -> None:
    library = logging.getLogger(LIBRARY_LOGGER)
    for handler in [h for h in library.handlers if h.get_name() == CONSOLE_HANDLER]:
        library.removeHandler(handler)
    console = logging.StreamHandler(sys.stdout)
    console.set_name(CONSOLE_HANDLER)
    console.setFormatter(logging.Formatter("%(message)s"))
    library.addHandler(console)
    library.setLevel(level)


def configure_from_settings(settings: Optional[SugarSettings] = None) -> SugarSettings:
    """Apply SugarSettings (loaded from the environment by default) and return them."""
    settings = settings or get_settings()
    configure_structlog(settings.log_level, settings.log_format)
    return settings
