"""Forward Euler time integration and duration helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Union

Seconds = Union[float, int, timedelta]


def as_time(duration: Seconds) -> float:
    """Convert a duration to seconds as a float."""
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


class TimeIntegrable(ABC):
    """A value that can be advanced by its time derivative over an interval."""

    @abstractmethod
    def step(self, derivative: Any, dt: Seconds) -> "TimeIntegrable":
        """Return the value advanced by ``derivative`` over ``dt``."""


def euler_step(value: Any, derivative: Any, dt: Seconds) -> Any:
    """Take a forward Euler step: ``value + derivative * dt``.

    Values implementing TimeIntegrable integrate themselves; ``dt`` is seconds
    or a timedelta.
    """
    if isinstance(value, TimeIntegrable):
        return value.step(derivative, dt)
    return value + derivative * as_time(dt)