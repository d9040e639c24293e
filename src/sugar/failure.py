"""
Failure description — structured error information for the failure track.

A FailureDescription is what a Failure result carries: an ErrorCode,
a human-readable message, the exception that caused it (if any), and
the moment it was recorded.

    >>> desc = FailureDescription(ErrorCode.OPERATION_FAILED, "parse failed")
    >>> desc.code
    <ErrorCode.OPERATION_FAILED: 'OPERATION_FAILED'>
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique
from typing import Optional


@unique
class ErrorCode(Enum):
    """
    Error codes used across the library.

    The first two mirror the usage errors raised by the switch builder and
    the adapters; the rest describe failures captured as Result values.
    """

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    """A required callable argument was absent or not callable."""

    INVALID_STATE = "INVALID_STATE"
    """A switch consequence was declared before any condition."""

    OPERATION_FAILED = "OPERATION_FAILED"
    """A wrapped operation raised."""

    NO_OUTPUT = "NO_OUTPUT"
    """An evaluation switch produced no output value."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    """Unclassified failure."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """Immutable failure descriptor carrying code, message, optional exception and timestamp."""

    code: ErrorCode
    message: str
    exception: Optional[BaseException] = field(default=None, repr=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    @staticmethod
    def create(
        code: ErrorCode,
        message: str,
        exception: Optional[BaseException] = None,
    ) -> FailureDescription:
        return FailureDescription(code=code, message=message, exception=exception)

    @staticmethod
    def from_exception(
        exception: BaseException,
        code: ErrorCode = ErrorCode.OPERATION_FAILED,
    ) -> FailureDescription:
        """Describe an exception, using its own text as the message."""
        message = str(exception) or type(exception).__name__
        return FailureDescription(code=code, message=message, exception=exception)

    def full_stack_trace(self) -> str:
        """Message followed by the formatted exception chain, if there is one."""
        if self.exception is None:
            return self.message
        tb = "".join(
            traceback.format_exception(type(self.exception), self.exception, self.exception.__traceback__)
        )
        return f"{self.message}\n{tb}"
