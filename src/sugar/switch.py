"""
Switch — a fluent, multi-branch conditional expression.

A switch holds one input value and walks a chain of branches. Each branch
is a condition (is_, in_ or when) followed by a consequence (then_*).
The first branch whose condition holds fires; every declaration after
that is skipped without validation. A terminal else_* call supplies the
fallback.

Two flavors:

  - Switch.on(x)    → ConsumptionSwitch, branches run side effects
  - Switch.input(x) → EvaluationSwitch, branches produce an output value

    label = (
        Switch.input(n)
        .is_(0).then_get("zero")
        .in_(1, 2, 3).then_get("few")
        .when(lambda v: v < 0).then_apply(lambda v: f"minus {-v}")
        .else_get("many")
    )

    Switch.on(event) \\
        .is_("start").then_accept(start) \\
        .is_("stop").then_accept(stop) \\
        .else_accept(log_unknown)

A switch is mutated in place and returned from every chained call. Build
a new one per evaluation and do not share it between threads.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from sugar.errors import InvalidStateError, require_callable
from sugar.failure import ErrorCode
from sugar.logs import get_logger
from sugar.result import Result

T = TypeVar("T")
I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741
R = TypeVar("R")

log = get_logger(__name__)


def _equals(a: Any, b: Any) -> bool:
    # identity first, as `x in seq` does; None only equals None
    if a is b:
        return True
    if a is None or b is None:
        return a is b
    return bool(a == b)


class Switch(Generic[T]):
    """
    Shared state and condition declarations for both switch flavors.

    Use the static entry points on() and input(); the flavors are not
    meant to be constructed directly.
    """

    _flavor = "switch"

    def __init__(self, value: T) -> None:
        self._input = value
        self._condition: Optional[Callable[[T], bool]] = None
        self._matched = False

    # ──────────────────────── Entry points ────────────────────────

    @staticmethod
    def on(value: I) -> ConsumptionSwitch[I]:
        """Start a side-effecting switch over value."""
        return ConsumptionSwitch(value)

    @staticmethod
    def input(value: I) -> EvaluationSwitch[I, Any]:
        """Start a value-producing switch over value."""
        return EvaluationSwitch(value)

    # ──────────────────────── Introspection ────────────────────────

    @property
    def matched(self) -> bool:
        """True once a branch has fired."""
        return self._matched

    @property
    def value(self) -> T:
        """The value under test."""
        return self._input

    # ──────────────────────── Conditions ────────────────────────

    def is_(self, target: T):
        """Stage "input equals target". None matches only None."""
        return self.when(lambda v: _equals(v, target))

    def in_(self, *values: T):
        """Stage "input equals any of values", with the same None handling as is_()."""

        def contains(v: T) -> bool:
            for candidate in values:
                if _equals(v, candidate):
                    return True
            return False

        return self.when(contains)

    def when(self, condition: Callable[[T], bool]):
        """
        Stage an arbitrary predicate over the input.

        Replaces whatever condition was staged before. A no-op once a
        branch has matched.
        """
        if self._matched:
            return self
        require_callable(condition, "condition")
        self._condition = condition
        return self

    # ──────────────────────── Internals ────────────────────────

    def _require_condition(self) -> Callable[[T], bool]:
        if self._condition is None:
            raise InvalidStateError()
        return self._condition

    def _holds(self) -> bool:
        return bool(self._require_condition()(self._input))

    def _mark_matched(self, consequence: str) -> None:
        self._matched = True
        log.debug("switch.branch_matched", flavor=self._flavor, consequence=consequence)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(input={self._input!r}, matched={self._matched})"


class ConsumptionSwitch(Switch[T]):
    """Switch whose branches run actions against the input."""

    _flavor = "consumption"

    def then_accept(self, action: Callable[[T], Any]) -> ConsumptionSwitch[T]:
        """Run action(input) if the staged condition holds."""
        if self._matched:
            return self
        require_callable(action, "action")
        if self._holds():
            action(self._input)
            self._mark_matched("then_accept")
        return self

    def else_accept(self, action: Callable[[T], Any]) -> None:
        """Run action(input) if no branch has matched. Terminal."""
        if self._matched:
            return
        require_callable(action, "action")
        log.debug("switch.fallback_used", flavor=self._flavor, fallback="else_accept")
        action(self._input)


class EvaluationSwitch(Switch[I], Generic[I, O]):
    """Switch whose branches compute an output value."""

    _flavor = "evaluation"

    def __init__(self, value: I) -> None:
        super().__init__(value)
        self._output: Optional[O] = None

    def output(self, output_type: type[R]) -> EvaluationSwitch[I, R]:
        """
        Declare the output type for static checkers.

        Has no runtime effect and returns the same switch.
        """
        return self  # type: ignore[return-value]

    # ──────────────────────── Consequences ────────────────────────

    def then_get(self, value: O) -> EvaluationSwitch[I, O]:
        """Produce value if the staged condition holds. value may be None."""
        if self._matched:
            return self
        if self._holds():
            self._output = value
            self._mark_matched("then_get")
        return self

    def then_apply(self, mapper: Callable[[I], O]) -> EvaluationSwitch[I, O]:
        """Produce mapper(input) if the staged condition holds."""
        if self._matched:
            return self
        require_callable(mapper, "mapper")
        if self._holds():
            self._output = mapper(self._input)
            self._mark_matched("then_apply")
        return self

    def then_supply(self, supplier: Callable[[], O]) -> EvaluationSwitch[I, O]:
        """Produce supplier() if the staged condition holds."""
        if self._matched:
            return self
        require_callable(supplier, "supplier")
        if self._holds():
            self._output = supplier()
            self._mark_matched("then_supply")
        return self

    # ──────────────────────── Terminals ────────────────────────

    def else_get(self, value: O) -> O:
        """The matched output, or value if nothing matched."""
        if self._matched:
            return self._output  # type: ignore[return-value]
        log.debug("switch.fallback_used", flavor=self._flavor, fallback="else_get")
        return value

    def else_apply(self, mapper: Callable[[I], O]) -> O:
        """The matched output, or mapper(input) if nothing matched."""
        require_callable(mapper, "mapper")
        if self._matched:
            return self._output  # type: ignore[return-value]
        log.debug("switch.fallback_used", flavor=self._flavor, fallback="else_apply")
        return mapper(self._input)

    def else_supply(self, supplier: Callable[[], O]) -> O:
        """The matched output, or supplier() if nothing matched."""
        require_callable(supplier, "supplier")
        if self._matched:
            return self._output  # type: ignore[return-value]
        log.debug("switch.fallback_used", flavor=self._flavor, fallback="else_supply")
        return supplier()

    def obtain(self) -> Result[O]:
        """
        The output as a Result: Success(output), or Failure(NO_OUTPUT).

        A branch that produced None cannot be told apart from no branch
        matching at all. Check `matched` when the difference matters.
        """
        return Result.from_optional(self._output, "Switch produced no output", ErrorCode.NO_OUTPUT)
