"""A stratified thermal storage tank of fully mixed vertical layers.

All quantities are SI: temperatures in K, volume flow rates in m³/s, heat
flows in W. Derivatives are in K/s. Layers are listed bottom first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from skein.boundary import Environment, PortFlow
from skein.buoyancy import Layer, apply_buoyancy
from skein.mass_balance import compute_upward_flows
from skein.node import Node, NodeTemperatures


@dataclass(frozen=True)
class StratifiedTankInput:
    """The runtime state needed to evaluate the tank.

    ``temperatures`` need not be stratified; unstable layers are mixed
    before the energy balances are applied. ``aux_heat_flows`` are signed,
    positive into the tank.
    """

    temperatures: Tuple[float, ...]
    port_flows: Tuple[PortFlow, ...]
    aux_heat_flows: Tuple[float, ...]
    environment: Environment


@dataclass(frozen=True)
class StratifiedTankOutput:
    """Thermally stable layer temperatures and their time derivatives."""

    temperatures: Tuple[float, ...]
    derivatives: Tuple[float, ...]


def _matrix(name: str, rows: Sequence[Sequence[float]], node_count: int) -> Tuple[Tuple[float, ...], ...]:
    if len(rows) != node_count:
        raise ValueError(f"{name} must have one row per node ({node_count}), got {len(rows)}")
    result = tuple(tuple(float(w) for w in row) for row in rows)
    widths = {len(row) for row in result}
    if len(widths) > 1:
        raise ValueError(f"all rows of {name} must have the same length")
    return result


class StratifiedTank:
    """A fixed-geometry tank with port pairs and auxiliary heat sources.

    A port pair returns fluid to the tank at a known temperature and draws
    the same volume flow out, keeping the tank's mass constant. How each port
    pair's inlet and outlet and each heat source are split across layers is
    fixed by the weight matrices, indexed ``[node][port]`` or
    ``[node][source]``.
    """

    def __init__(
        self,
        nodes: Sequence[Node],
        aux_heat_weights: Sequence[Sequence[float]],
        port_inlet_weights: Sequence[Sequence[float]],
        port_outlet_weights: Sequence[Sequence[float]],
    ) -> None:
        self._nodes = tuple(nodes)
        if not self._nodes:
            raise ValueError("a tank needs at least one node")
        count = len(self._nodes)
        self._aux_heat_weights = _matrix("aux_heat_weights", aux_heat_weights, count)
        self._port_inlet_weights = _matrix("port_inlet_weights", port_inlet_weights, count)
        self._port_outlet_weights = _matrix("port_outlet_weights", port_outlet_weights, count)
        self._port_count = len(self._port_inlet_weights[0])
        if len(self._port_outlet_weights[0]) != self._port_count:
            raise ValueError("inlet and outlet weights must cover the same port pairs")
        self._aux_count = len(self._aux_heat_weights[0])

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """The layers, bottom first."""
        return self._nodes

    def call(self, tank_input: StratifiedTankInput) -> StratifiedTankOutput:
        """Evaluate the tank's thermal response at one instant.

        Mixes unstable layers, then applies port flows, auxiliary heat and
        conduction to the surroundings.
        """
        self._check_input(tank_input)

        temperatures = tuple(
            apply_buoyancy(
                Layer(temperature, node.volume)
                for temperature, node in zip(tank_input.temperatures, self._nodes)
            )
        )
        upward_flows = compute_upward_flows(
            [port_flow.rate for port_flow in tank_input.port_flows],
            self._port_inlet_weights,
            self._port_outlet_weights,
        )

        derivatives = tuple(
            self._deriv_from_flows(i, temperatures, upward_flows, tank_input.port_flows)
            + self._deriv_from_aux(i, tank_input.aux_heat_flows)
            + self._deriv_from_conduction(i, temperatures, tank_input.environment)
            for i in range(len(self._nodes))
        )
        return StratifiedTankOutput(temperatures, derivatives)

    def _check_input(self, tank_input: StratifiedTankInput) -> None:
        if len(tank_input.temperatures) != len(self._nodes):
            raise ValueError(
                f"expected {len(self._nodes)} temperatures, got {len(tank_input.temperatures)}"
            )
        if len(tank_input.port_flows) != self._port_count:
            raise ValueError(
                f"expected {self._port_count} port flows, got {len(tank_input.port_flows)}"
            )
        if len(tank_input.aux_heat_flows) != self._aux_count:
            raise ValueError(
                f"expected {self._aux_count} auxiliary heat flows, "
                f"got {len(tank_input.aux_heat_flows)}"
            )

    def _inflows(
        self,
        i: int,
        temps: Sequence[float],
        upward_flows: Sequence[float],
        port_flows: Sequence[PortFlow],
    ) -> Iterator[Tuple[float, float]]:
        for port_flow, weight in zip(port_flows, self._port_inlet_weights[i]):
            yield port_flow.rate * weight, port_flow.inlet_temperature
        if i > 0 and upward_flows[i - 1] > 0.0:
            yield upward_flows[i - 1], temps[i - 1]
        if i < len(self._nodes) - 1 and upward_flows[i] < 0.0:
            yield -upward_flows[i], temps[i + 1]

    def _deriv_from_flows(
        self,
        i: int,
        temps: Sequence[float],
        upward_flows: Sequence[float],
        port_flows: Sequence[PortFlow],
    ) -> float:
        return self._nodes[i].derivative_from_fluid_flows(
            temps[i], self._inflows(i, temps, upward_flows, port_flows)
        )

    def _deriv_from_aux(self, i: int, aux_heat_flows: Sequence[float]) -> float:
        return self._nodes[i].derivative_from_heat_flows(
            q_dot * weight for q_dot, weight in zip(aux_heat_flows, self._aux_heat_weights[i])
        )

    def _deriv_from_conduction(
        self, i: int, temps: Sequence[float], env: Environment
    ) -> float:
        last = len(self._nodes) - 1
        bottom: Optional[float] = env.bottom if i == 0 else temps[i - 1]
        top: Optional[float] = env.top if i == last else temps[i + 1]
        return self._nodes[i].derivative_from_conduction(
            NodeTemperatures(center=temps[i], bottom=bottom, side=env.side, top=top)
        )