"""
Test assertions for Result values.

    from sugar import ResultAssertions

    def test_obtain_without_match():
        result = Switch.input(3).is_(0).then_get("zero").obtain()
        ResultAssertions.assert_failure(result, ErrorCode.NO_OUTPUT)
"""

from __future__ import annotations

from typing import Any, TypeVar

from sugar.failure import ErrorCode, FailureDescription
from sugar.result import Result

T = TypeVar("T")


class ResultAssertions:
    """Assertions with readable messages for Result values."""

    @staticmethod
    def assert_success(result: Result[T], message: str = "") -> T:
        """Assert the Result is a Success and return its value."""
        context = f" — {message}" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure("
            f"{result.error().code.value}: {result.error().message!r}){context}"
        )
        return result.value()

    @staticmethod
    def assert_success_value(result: Result[T], expected_value: Any) -> None:
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_failure(
        result: Result[T],
        expected_code: ErrorCode | None = None,
        message: str = "",
    ) -> FailureDescription:
        """Assert the Result is a Failure, optionally with a given code, and return the description."""
        context = f" — {message}" if message else ""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r}){context}"
        )
        error = result.error()
        if expected_code is not None:
            assert error.code == expected_code, (
                f"Expected error code {expected_code.value} "
                f"but got {error.code.value}: {error.message!r}{context}"
            )
        return error

    @staticmethod
    def assert_failure_caused_by(result: Result[T], exc_type: type[BaseException]) -> BaseException:
        """Assert the Failure carries an exception of exc_type and return it."""
        error = ResultAssertions.assert_failure(result)
        assert isinstance(error.exception, exc_type), (
            f"Expected failure caused by {exc_type.__name__} "
            f"but got {type(error.exception).__name__ if error.exception else 'no exception'}"
        )
        return error.exception

    @staticmethod
    def assert_failure_message_contains(result: Result[T], substring: str) -> None:
        """Case-insensitive substring check on the failure message."""
        error = ResultAssertions.assert_failure(result)
        assert substring.lower() in error.message.lower(), (
            f"Expected failure message to contain {substring!r} "
            f"but message was: {error.message!r}"
        )
