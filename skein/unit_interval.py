"""The closed unit interval constraint: ``0 <= x <= 1``."""

from __future__ import annotations

from typing import Any

from skein.constraint import Constrained, Constraint, ConstraintError, ConstraintErrorKind


class UnitInterval(Constraint):
    """A value between zero and one, both included."""

    @classmethod
    def check(cls, value: Any) -> None:
        below = value < 0
        above = value > 1
        if not below and not (value >= 0):
            raise ConstraintError(ConstraintErrorKind.NOT_A_NUMBER)
        if not above and not (value <= 1):
            raise ConstraintError(ConstraintErrorKind.NOT_A_NUMBER)
        if below:
            raise ConstraintError(ConstraintErrorKind.BELOW_MINIMUM)
        if above:
            raise ConstraintError(ConstraintErrorKind.ABOVE_MAXIMUM)

    @classmethod
    def zero(cls) -> Constrained:
        """The lower bound as a constrained value."""
        return Constrained(0.0, cls)

    @classmethod
    def one(cls) -> Constrained:
        """The upper bound as a constrained value."""
        return Constrained(1.0, cls)