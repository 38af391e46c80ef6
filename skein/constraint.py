"""Numeric constraints enforced when a value is constructed.

A constraint is a class with a ``check`` classmethod that raises
:class:`ConstraintError` when a value does not satisfy it.  Wrapping a value
in :class:`Constrained` runs the check once, so code that receives a
``Constrained`` can rely on the invariant holding.
"""

from __future__ import annotations

import enum
import functools
from abc import ABC, abstractmethod
from typing import Any, Iterable


class ConstraintErrorKind(enum.Enum):
    """The ways a value can violate a constraint."""

    NEGATIVE = "value must not be negative"
    POSITIVE = "value must not be positive"
    ZERO = "value must not be zero"
    NOT_A_NUMBER = "value is not a number"
    BELOW_MINIMUM = "value is below the minimum allowed"
    ABOVE_MAXIMUM = "value is above the maximum allowed"


class ConstraintError(ValueError):
    """Raised when a value does not satisfy a constraint."""

    def __init__(self, kind: ConstraintErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConstraintError):
            return self.kind is other.kind
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.kind)


def _sign(value: Any) -> int | None:
    """Return -1, 0 or 1 for the value's order relative to zero, or None if unordered."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    if value == 0:
        return 0
    return None


class Constraint(ABC):
    """Base class for numeric constraints."""

    # Whether the sum of two satisfying values always satisfies the constraint.
    closed_under_addition: bool = False

    @classmethod
    @abstractmethod
    def check(cls, value: Any) -> None:
        """Raise ConstraintError if ``value`` does not satisfy the constraint."""

    @classmethod
    def new(cls, value: Any) -> "Constrained":
        """Wrap ``value`` after checking it against this constraint."""
        return Constrained(value, cls)


@functools.total_ordering
class Constrained:
    """A value that is known to satisfy a constraint."""

    __slots__ = ("_value", "_constraint")

    def __init__(self, value: Any, constraint: type[Constraint]) -> None:
        constraint.check(value)
        self._value = value
        self._constraint = constraint

    @property
    def value(self) -> Any:
        """The wrapped value."""
        return self._value

    @property
    def constraint(self) -> type[Constraint]:
        """The constraint the value satisfies."""
        return self._constraint

    def __add__(self, other: object) -> "Constrained":
        if not isinstance(other, Constrained) or other._constraint is not self._constraint:
            return NotImplemented
        if not self._constraint.closed_under_addition:
            return NotImplemented
        return Constrained(self._value + other._value, self._constraint)

    def __radd__(self, other: object) -> "Constrained":
        # Lets the builtin sum() start from a plain zero.
        if isinstance(other, (int, float)) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constrained):
            return NotImplemented
        return self._constraint is other._constraint and self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Constrained) or other._constraint is not self._constraint:
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((self._constraint, self._value))

    def __repr__(self) -> str:
        return f"Constrained({self._value!r}, {self._constraint.__name__})"


class NonNegative(Constraint):
    """Zero or greater."""

    closed_under_addition = True

    @classmethod
    def check(cls, value: Any) -> None:
        sign = _sign(value)
        if sign is None:
            raise ConstraintError(ConstraintErrorKind.NOT_A_NUMBER)
        if sign < 0:
            raise ConstraintError(ConstraintErrorKind.NEGATIVE)

    @classmethod
    def zero(cls) -> Constrained:
        """The additive identity as a non-negative value."""
        return Constrained(0, cls)


class NonPositive(Constraint):
    """Zero or less."""

    closed_under_addition = True

    @classmethod
    def check(cls, value: Any) -> None:
        sign = _sign(value)
        if sign is None:
            raise ConstraintError(ConstraintErrorKind.NOT_A_NUMBER)
        if sign > 0:
            raise ConstraintError(ConstraintErrorKind.POSITIVE)

    @classmethod
    def zero(cls) -> Constrained:
        """The additive identity as a non-positive value."""
        return Constrained(0, cls)


class NonZero(Constraint):
    """Not equal to zero."""

    @classmethod
    def check(cls, value: Any) -> None:
        sign = _sign(value)
        if sign is None:
            raise ConstraintError(ConstraintErrorKind.NOT_A_NUMBER)
        if sign == 0:
            raise ConstraintError(ConstraintErrorKind.ZERO)


class StrictlyNegative(Constraint):
    """Less than zero."""

    closed_under_addition = True

    @classmethod
    def check(cls, value: Any) -> None:
        sign = _sign(value)
        if sign is None:
            raise ConstraintError(ConstraintErrorKind.NOT_A_NUMBER)
        if sign == 0:
            raise ConstraintError(ConstraintErrorKind.ZERO)
        if sign > 0:
            raise ConstraintError(ConstraintErrorKind.NEGATIVE)


class StrictlyPositive(Constraint):
    """Greater than zero."""

    closed_under_addition = True

    @classmethod
    def check(cls, value: Any) -> None:
        sign = _sign(value)
        if sign is None:
            raise ConstraintError(ConstraintErrorKind.NOT_A_NUMBER)
        if sign == 0:
            raise ConstraintError(ConstraintErrorKind.ZERO)
        if sign < 0:
            raise ConstraintError(ConstraintErrorKind.NEGATIVE)


def constrained_sum(values: Iterable[Constrained], constraint: type[Constraint]) -> Constrained:
    """Sum constrained values, starting from the constraint's zero.

    Only constraints that have a zero and are preserved under addition
    can be summed; others raise TypeError.
    """
    zero = getattr(constraint, "zero", None)
    if zero is None or not constraint.closed_under_addition:
        raise TypeError(f"{constraint.__name__} values cannot be summed")
    total = zero()
    for item in values:
        total = total + item
    return total