"""
Attempt — adapt functions that may raise into functions that never leak
their exceptions.

Each adapter takes a possibly-raising function and returns a function of
the same shape:

  - without a handler, any Exception is re-raised as UncheckedError with
    the original kept as its cause;
  - with a handler, the handler receives the exception and its return
    value becomes the call's result.

    parse = attempt.apply(int)
    parse("12")         # 12
    parse("x")          # raises UncheckedError(cause=ValueError(...))

    parse_or_zero = attempt.apply(int, lambda e: 0)
    parse_or_zero("x")  # 0

Arguments are checked when wrapping, not when calling. Adapters keep no
state and add no locking, logging or retries of their own; pass a handler
from sugar.handlers to log or convert failures.

Only Exception subclasses are caught: KeyboardInterrupt and SystemExit
always pass through.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional, TypeVar

from sugar.errors import UncheckedError, require_callable
from sugar.failure import ErrorCode, FailureDescription
from sugar.result import Result

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def _adapt(fn: Callable[..., R], handler: Optional[Callable[[Exception], Any]]) -> Callable[..., R]:
    """Shared body of every adapter; arity is the caller's concern."""
    require_callable(fn, "function")
    if handler is not None:
        require_callable(handler, "handler")

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> R:
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            if handler is None:
                raise UncheckedError(e) from e
            return handler(e)

    return wrapper


# ──────────────────────── Transforms ────────────────────────


def apply(
    function: Callable[[T], R],
    handler: Optional[Callable[[Exception], R]] = None,
) -> Callable[[T], R]:
    """Wrap a one-argument function."""
    return _adapt(function, handler)


def bi_apply(
    function: Callable[[T, U], R],
    handler: Optional[Callable[[Exception], R]] = None,
) -> Callable[[T, U], R]:
    """Wrap a two-argument function."""
    return _adapt(function, handler)


# ──────────────────────── Actions ────────────────────────


def accept(
    action: Callable[[T], Any],
    handler: Optional[Callable[[Exception], Any]] = None,
) -> Callable[[T], None]:
    """
    Wrap a one-argument action.

    The wrapped action always returns None, whatever the action or the
    handler return.
    """
    adapted = _adapt(action, handler)

    @functools.wraps(action)
    def consumer(t: T) -> None:
        adapted(t)

    return consumer


def bi_accept(
    action: Callable[[T, U], Any],
    handler: Optional[Callable[[Exception], Any]] = None,
) -> Callable[[T, U], None]:
    """Wrap a two-argument action. Returns None like accept()."""
    adapted = _adapt(action, handler)

    @functools.wraps(action)
    def consumer(t: T, u: U) -> None:
        adapted(t, u)

    return consumer


# ──────────────────────── Producers ────────────────────────


def supply(
    supplier: Callable[[], R],
    handler: Optional[Callable[[Exception], R]] = None,
) -> Callable[[], R]:
    """Wrap a zero-argument producer."""
    return _adapt(supplier, handler)


# ──────────────────────── Result form ────────────────────────


def result(
    function: Callable[..., R],
    code: ErrorCode = ErrorCode.OPERATION_FAILED,
    message: Optional[str] = None,
) -> Callable[..., Result[R]]:
    """
    Wrap a function of any arity so it returns a Result instead of raising.

    Success carries the return value; a None return becomes
    Failure(NO_OUTPUT). An exception becomes Failure(code) with the
    exception attached.

        safe_int = attempt.result(int)
        safe_int("7")   # Success(7)
        safe_int("x")   # Failure(OPERATION_FAILED: "int failed: invalid literal ...")
    """
    require_callable(function, "function")
    name = getattr(function, "__name__", type(function).__name__)

    @functools.wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Result[R]:
        try:
            value = function(*args, **kwargs)
        except Exception as e:
            text = message if message is not None else f"{name} failed: {e}"
            return Result.failure_from(FailureDescription(code=code, message=text, exception=e))
        return Result.from_optional(value, f"{name} returned None", ErrorCode.NO_OUTPUT)

    return wrapper


# ──────────────────────── Decorator form ────────────────────────


def attempting(
    fn: Optional[Callable[..., R]] = None,
    /,
    *,
    handler: Optional[Callable[[Exception], Any]] = None,
) -> Any:
    """
    Decorator applying the adapter behaviour to a function of any arity.

    Used bare it re-raises failures as UncheckedError; the handler is
    keyword-only so a positional argument is always the decorated function.

        @attempting
        def load(path: str) -> bytes: ...

        @attempting(handler=handlers.returning(0))
        def parse(text: str) -> int:
            return int(text)
    """
    if handler is not None:
        require_callable(handler, "handler")

    def decorator(f: Callable[..., R]) -> Callable[..., R]:
        return _adapt(f, handler)

    if fn is None:
        return decorator
    return decorator(fn)
