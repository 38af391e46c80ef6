"""Step schedules: values assigned to non-overlapping half-open ranges."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

V = TypeVar("V")

# Schedules with fewer steps than this are searched linearly.
LINEAR_SEARCH_THRESHOLD = 32


def _format_range(bounds: Tuple[Any, Any]) -> str:
    start, end = bounds
    return f"{start!r}..{end!r}"


class EmptyRangeError(ValueError):
    """Raised when a step is created with ``start >= end``."""

    def __init__(self, start: Any, end: Any) -> None:
        super().__init__(f"empty range: start ({start!r}) >= end ({end!r})")
        self.start = start
        self.end = end


class OverlappingStepsError(ValueError):
    """Raised when a step overlaps one already in a schedule.

    ``existing`` is the range of the step already present and ``incoming``
    the range of the step that overlaps it, both as ``(start, end)`` pairs.
    """

    def __init__(self, existing: Tuple[Any, Any], incoming: Tuple[Any, Any]) -> None:
        super().__init__(
            f"steps overlap: {_format_range(existing)} and {_format_range(incoming)}"
        )
        self.existing = existing
        self.incoming = incoming


@dataclass(frozen=True)
class Step(Generic[V]):
    """A value paired with the non-empty half-open range ``[start, end)``."""

    start: Any
    end: Any
    value: V

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise EmptyRangeError(self.start, self.end)

    @property
    def range(self) -> Tuple[Any, Any]:
        """The ``(start, end)`` bounds of the step."""
        return (self.start, self.end)

    def contains(self, time: Any) -> bool:
        """Whether ``time`` lies in ``[start, end)``."""
        return self.start <= time < self.end

    def overlaps(self, other: "Step[Any]") -> bool:
        """Whether the two steps' ranges share any values."""
        return self.start < other.end and other.start < self.end

    def value_at(self, time: Any) -> Optional[V]:
        """The step's value if ``time`` is in range, otherwise None."""
        return self.value if self.contains(time) else None

    def cmp_to_time(self, time: Any) -> int:
        """-1 if the step ends at or before ``time``, 1 if it starts after, else 0."""
        if self.end <= time:
            return -1
        if self.start > time:
            return 1
        return 0


class StepSchedule(Generic[V]):
    """Steps with distinct, non-overlapping ranges, ordered by start."""

    def __init__(self, steps: Iterable[Step[V]] = ()) -> None:
        """Raise OverlappingStepsError if any two steps overlap.

        Steps are sorted by start first, so ``existing`` in the error always
        starts before ``incoming``.
        """
        ordered = sorted(steps, key=lambda s: s.start)
        for earlier, later in zip(ordered, ordered[1:]):
            if earlier.overlaps(later):
                raise OverlappingStepsError(earlier.range, later.range)
        self._steps: list[Step[V]] = ordered

    @property
    def steps(self) -> Tuple[Step[V], ...]:
        """The steps in order of increasing start."""
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step[V]]:
        return iter(self._steps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StepSchedule):
            return NotImplemented
        return self._steps == other._steps

    def __repr__(self) -> str:
        return f"StepSchedule({self._steps!r})"

    def try_push(self, step: Step[V]) -> None:
        """Insert a step in order; raise OverlappingStepsError if it overlaps."""
        index = bisect.bisect_left(self._steps, step.start, key=lambda s: s.start)
        if index > 0 and self._steps[index - 1].overlaps(step):
            raise OverlappingStepsError(self._steps[index - 1].range, step.range)
        if index < len(self._steps) and self._steps[index].overlaps(step):
            raise OverlappingStepsError(self._steps[index].range, step.range)
        self._steps.insert(index, step)

    def value_at(self, time: Any) -> Optional[V]:
        """The value of the step whose range contains ``time``, or None."""
        if len(self._steps) < LINEAR_SEARCH_THRESHOLD:
            for step in self._steps:
                if step.contains(time):
                    return step.value
            return None
        index = bisect.bisect_right(self._steps, time, key=lambda s: s.start) - 1
        if index >= 0 and self._steps[index].contains(time):
            return self._steps[index].value
        return None