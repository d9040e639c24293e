"""
Ready-made recovery handlers for the adapters in sugar.attempt.

    safe_load = attempt.apply(load, handlers.logging_to(default={}))
    notify = attempt.accept(send, handlers.ignoring())
    parse = attempt.apply(int, handlers.raising(ConfigError, "bad port"))
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from sugar.logs import get_logger

R = TypeVar("R")


def returning(value: R) -> Callable[[Exception], R]:
    """Handler that discards the exception and returns value."""

    def handler(_: Exception) -> R:
        return value

    return handler


def ignoring() -> Callable[[Exception], None]:
    """Handler that does nothing. Meant for accept() and bi_accept()."""

    def handler(_: Exception) -> None:
        return None

    return handler


def logging_to(
    default: Optional[R] = None,
    event: str = "attempt.recovered",
    logger: Any = None,
) -> Callable[[Exception], Optional[R]]:
    """
    Handler that logs the exception at WARNING, then returns default.

    logger defaults to a structlog logger on the "sugar.handlers" stdlib
    logger, silent until the application configures logging. Any object with a
    structlog-style warning(event, **kw) method works.
    """
    log = logger if logger is not None else get_logger(__name__)

    def handler(error: Exception) -> Optional[R]:
        log.warning(event, error_type=type(error).__name__, error=str(error))
        return default

    return handler


def raising(exc_type: type[BaseException], message: Optional[str] = None) -> Callable[[Exception], Any]:
    """Handler that re-raises the exception as exc_type, chained to the original."""

    def handler(error: Exception) -> Any:
        raise exc_type(message if message is not None else str(error)) from error

    return handler
