"""Vertical volume balance between the layers of a stratified tank.

Flow rates are in cubic metres per second. Weights are fractions of a port
pair's flow.
"""

from __future__ import annotations

from typing import Sequence

# Largest residual at the top boundary, in m³/s, that counts as conserved.
RESIDUAL_TOLERANCE = 1e-12


class MassBalanceError(ValueError):
    """Raised when port flows do not balance across the tank."""

    def __init__(self, residual: float) -> None:
        super().__init__(
            f"Mass is not conserved; residual at top boundary = {residual}"
        )
        self.residual = residual


def _check_shape(
    name: str, weights: Sequence[Sequence[float]], port_count: int
) -> None:
    for row in weights:
        if len(row) != port_count:
            raise ValueError(
                f"each row of {name} must have one weight per port pair "
                f"({port_count}), got {len(row)}"
            )


def compute_upward_flows(
    port_flow_rates: Sequence[float],
    port_inlet_weights: Sequence[Sequence[float]],
    port_outlet_weights: Sequence[Sequence[float]],
) -> list[float]:
    """Return the upward flow across the top of each node, bottom first.

    ``port_inlet_weights[i][k]`` is the fraction of port pair ``k``'s inlet
    flow entering node ``i``, and ``port_outlet_weights[i][k]`` the fraction
    of its outlet flow drawn from node ``i``.

    Entry ``i`` is the flow from node ``i`` to node ``i + 1`` (negative means
    downward). The last entry is the residual, which must be zero; otherwise
    MassBalanceError is raised.
    """
    if len(port_inlet_weights) != len(port_outlet_weights):
        raise ValueError("inlet and outlet weights must cover the same number of nodes")
    port_count = len(port_flow_rates)
    _check_shape("port_inlet_weights", port_inlet_weights, port_count)
    _check_shape("port_outlet_weights", port_outlet_weights, port_count)

    upward_flows: list[float] = []
    flow_up = 0.0
    for inlet_row, outlet_row in zip(port_inlet_weights, port_outlet_weights):
        net_port_inflow = sum(
            rate * (w_in - w_out)
            for rate, w_in, w_out in zip(port_flow_rates, inlet_row, outlet_row)
        )
        flow_up += net_port_inflow
        upward_flows.append(flow_up)

    if upward_flows and abs(upward_flows[-1]) >= RESIDUAL_TOLERANCE:
        raise MassBalanceError(upward_flows[-1])

    return upward_flows