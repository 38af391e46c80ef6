"""A single fully mixed layer of a stratified tank.

All quantities are SI: volumes in m³, flow rates in m³/s, temperatures in K,
heat capacity in J/K, conductances in W/K and heat flows in W.  Derivatives
are in K/s.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class NodeTemperatures:
    """Temperatures used for conduction to and from a node.

    ``bottom`` and ``top`` are ambient at the tank boundary and the
    neighbouring layers' temperatures inside the tank.
    """

    center: float
    bottom: float
    side: float
    top: float


@dataclass(frozen=True)
class Node:
    """Volume, thermal capacity and conductances of one tank layer."""

    volume: float
    heat_capacity: float
    ua_bottom: float
    ua_side: float
    ua_top: float

    def derivative_from_fluid_flows(
        self, t_node: float, inflows: Iterable[Tuple[float, float]]
    ) -> float:
        """``dT/dt = Σ[V_dot · (T_in − T_node)] / V`` over the ``(V_dot, T_in)`` inflows.

        Each inflow is balanced by an equal outflow at the node temperature.
        """
        total = sum(rate * (t_in - t_node) for rate, t_in in inflows)
        return total / self.volume

    def derivative_from_heat_flows(self, heat_flows: Iterable[float]) -> float:
        """``dT/dt = ΣQ_dot / C`` for auxiliary heat flows."""
        return sum(heat_flows) / self.heat_capacity

    def derivative_from_conduction(self, temps: NodeTemperatures) -> float:
        """``dT/dt`` from conduction through the bottom, side and top faces."""
        q_dot = (
            self.ua_bottom * (temps.bottom - temps.center)
            + self.ua_side * (temps.side - temps.center)
            + self.ua_top * (temps.top - temps.center)
        )
        return q_dot / self.heat_capacity