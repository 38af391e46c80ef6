"""Boundary conditions for a stratified tank: port flows and surroundings.

Temperatures are in kelvin and volume flow rates in cubic metres per second.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from skein.constraint import Constrained, NonNegative


class PortFlow:
    """Inlet conditions for a port pair.

    The inlet and the outlet share one non-negative volume flow rate.  The
    outlet temperature comes from the layer the outflow is drawn from.
    """

    __slots__ = ("_rate", "_inlet_temperature")

    def __init__(self, rate: Union[float, Constrained], inlet_temperature: float) -> None:
        """Raise ConstraintError if ``rate`` is negative or not a number."""
        if isinstance(rate, Constrained):
            if rate.constraint is not NonNegative:
                raise TypeError("rate must be constrained to be non-negative")
            self._rate = rate
        else:
            self._rate = NonNegative.new(rate)
        self._inlet_temperature = inlet_temperature

    @classmethod
    def from_constrained(cls, rate: Constrained, inlet_temperature: float) -> "PortFlow":
        """Create a port flow from a rate already known to be non-negative."""
        if not isinstance(rate, Constrained) or rate.constraint is not NonNegative:
            raise TypeError("rate must be constrained to be non-negative")
        return cls(rate, inlet_temperature)

    @property
    def rate(self) -> float:
        """The volume flow rate shared by the inlet and outlet."""
        return self._rate.value

    @property
    def constrained_rate(self) -> Constrained:
        """The flow rate with its non-negative constraint."""
        return self._rate

    @property
    def inlet_temperature(self) -> float:
        """Temperature of the fluid entering the tank."""
        return self._inlet_temperature

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PortFlow):
            return NotImplemented
        return (
            self._rate == other._rate
            and self._inlet_temperature == other._inlet_temperature
        )

    def __hash__(self) -> int:
        return hash((self._rate, self._inlet_temperature))

    def __repr__(self) -> str:
        return f"PortFlow(rate={self.rate!r}, inlet_temperature={self._inlet_temperature!r})"


@dataclass(frozen=True)
class Environment:
    """Ambient temperatures surrounding the tank."""

    bottom: float
    side: float
    top: float