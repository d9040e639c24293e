"""
sugar — small ergonomics helpers for everyday Python.

Two independent pieces:

  - Switch: a fluent multi-branch conditional expression

        size = (
            Switch.input(n)
            .is_(0).then_get("none")
            .in_(1, 2, 3).then_get("few")
            .else_get("many")
        )

  - attempt: adapters turning functions that may raise into functions
    that re-raise as UncheckedError or recover through a handler

        parse = attempt.apply(int, handlers.returning(0))
"""

import logging

from sugar import attempt, handlers
from sugar.assertions import ResultAssertions
from sugar.errors import InvalidArgumentError, InvalidStateError, SugarError, UncheckedError
from sugar.failure import ErrorCode, FailureDescription
from sugar.result import Failure, Result, Success
from sugar.switch import ConsumptionSwitch, EvaluationSwitch, Switch

__all__ = [
    "Switch",
    "ConsumptionSwitch",
    "EvaluationSwitch",
    "attempt",
    "handlers",
    "SugarError",
    "InvalidArgumentError",
    "InvalidStateError",
    "UncheckedError",
    "ErrorCode",
    "FailureDescription",
    "Result",
    "Success",
    "Failure",
    "ResultAssertions",
]

__version__ = "0.1.0"

# silent unless the application attaches a handler or calls configure_structlog()
logging.getLogger(__name__).addHandler(logging.NullHandler())
