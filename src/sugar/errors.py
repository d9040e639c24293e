"""
Exception taxonomy for the library.

Usage errors (InvalidArgumentError, InvalidStateError) are raised
synchronously at the call that received the bad input. UncheckedError is
what the adapters in sugar.attempt raise in place of the original
exception when no handler is given.

Every error carries an ErrorCode and can be turned into a
FailureDescription, so callers on the Result track can convert:

    try:
        Switch.input(x).then_get(1)
    except SugarError as e:
        return Result.failure_from(e.to_failure())
"""

from __future__ import annotations

from typing import Any

from sugar.failure import ErrorCode, FailureDescription


class SugarError(Exception):
    """Base class for all errors raised by this library."""

    code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def to_failure(self) -> FailureDescription:
        return FailureDescription(code=self.code, message=str(self), exception=self)


class InvalidArgumentError(SugarError, TypeError):
    """A required callable argument was None or not callable."""

    code = ErrorCode.INVALID_ARGUMENT

    def __init__(self, argument: str, value: Any = None) -> None:
        self.argument = argument
        if value is None:
            message = f"Argument '{argument}' must not be None"
        else:
            message = f"Argument '{argument}' must be callable, got {type(value).__name__}"
        super().__init__(message)


class InvalidStateError(SugarError, RuntimeError):
    """A switch consequence was declared before any condition was staged."""

    code = ErrorCode.INVALID_STATE

    def __init__(self, message: str = "A condition must be set first") -> None:
        super().__init__(message)


class UncheckedError(SugarError, RuntimeError):
    """
    Raised by a wrapped operation in place of the exception it caught.

    The original exception is kept both as `cause` and as `__cause__`,
    so tracebacks show the full chain.
    """

    code = ErrorCode.OPERATION_FAILED

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"{type(cause).__name__}: {cause}")


def require_callable(value: Any, argument: str) -> None:
    """Raise InvalidArgumentError unless value is a callable."""
    if value is None or not callable(value):
        raise InvalidArgumentError(argument, value)
