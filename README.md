# skein

A small toolkit for building models of physical systems from plain Python
values. It has numeric constraints, component graphs, forward-Euler
stepping and a few thermal and control components. Physical quantities are
plain floats in SI units: kelvin, m³, m³/s, W, J/K and W/K. Time
derivatives are in units per second.

## Modules

- `skein.constraint`: `Constrained` wraps a value and checks it against a
  constraint when it is built. The constraints are `NonNegative`,
  `NonPositive`, `NonZero`, `StrictlyNegative` and `StrictlyPositive`.
  Each has `Constraint.new(value)`. A value that fails raises
  `ConstraintError`, whose `kind` is a `ConstraintErrorKind`. The
  constraints that are kept under addition support `+` between values
  wrapped by the same constraint. `constrained_sum(values, constraint)`
  adds such values up, starting from `NonNegative.zero()` or
  `NonPositive.zero()`.
- `skein.unit_interval`: the `UnitInterval` constraint (`0 <= x <= 1`),
  with the endpoints `UnitInterval.zero()` and `UnitInterval.one()`.
- `skein.graph`: `ComponentGraph.connect(source, target)` takes `Source`
  and `Target` objects or `(component, port)` tuples. `call_order()`
  returns the component names in dependency order and raises `CycleError`
  when the connections form a cycle. `incoming_connections()` and
  `outgoing_connections()` yield the connections of one component, most
  recent first. `node_count()` and `edge_count()` give the size of the
  graph.
- `skein.timestep`: `euler_step(value, derivative, dt)` returns
  `value + derivative * dt`. Objects that implement `TimeIntegrable.step`
  do their own stepping instead. `as_time(duration)` converts a
  `timedelta` or a number to seconds.
- `skein.controller`: a setpoint thermostat with a deadband.
  `heating(inp)` and `cooling(inp)` take a `SetpointThermostatInput` and
  return a `SwitchState`.
- `skein.schedule`: a `Step(start, end, value)` covers the half-open range
  `[start, end)`. An empty range raises `EmptyRangeError`. `StepSchedule`
  keeps its steps sorted and rejects overlaps with `OverlappingStepsError`,
  both when it is built and in `try_push`. `value_at(time)` looks up the
  value for a time and returns None when no step covers it.
- Stratified tank parts:
  - `skein.node`: `Node` holds one layer's temperature derivatives from
    fluid flows, auxiliary heat and conduction. `NodeTemperatures` holds
    the temperatures used for conduction.
  - `skein.buoyancy`: `apply_buoyancy(layers)` mixes unstable `Layer`s
    until the temperatures rise from bottom to top.
  - `skein.mass_balance`: `compute_upward_flows(...)` returns the flows
    between layers and raises `MassBalanceError` when the ports do not
    balance.
  - `skein.boundary`: `PortFlow`, whose rate must be non-negative, and
    `Environment`.
  - `skein.stratified_tank`: `StratifiedTank.call(StratifiedTankInput)`
    returns a `StratifiedTankOutput`. It holds the stabilised layer
    temperatures and their time derivatives.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Example

```python
from skein.boundary import Environment
from skein.constraint import NonNegative
from skein.graph import ComponentGraph
from skein.node import Node
from skein.schedule import Step, StepSchedule
from skein.stratified_tank import StratifiedTank, StratifiedTankInput

rate = NonNegative.new(2.5)

graph = ComponentGraph()
graph.connect(("comp_a", "out"), ("comp_b", "in"))
graph.connect(("comp_b", "out"), ("comp_c", "in"))
print(graph.call_order())  # ['comp_a', 'comp_b', 'comp_c']

schedule = StepSchedule([Step(0, 10, "low"), Step(10, 20, "high")])
print(schedule.value_at(15))  # 'high'

# A single 1 m³ layer with a heat capacity of 4 MJ/K, no ports and one heater.
tank = StratifiedTank(
    nodes=[Node(1.0, 4.0e6, 0.0, 0.0, 0.0)],
    aux_heat_weights=[[1.0]],
    port_inlet_weights=[[]],
    port_outlet_weights=[[]],
)
out = tank.call(
    StratifiedTankInput(
        temperatures=(300.0,),
        port_flows=(),
        aux_heat_flows=(20_000.0,),
        environment=Environment(bottom=300.0, side=300.0, top=300.0),
    )
)
print(out.derivatives)  # (0.005,)
```

## What it does not do

skein does not drive a model through time. It has no simulation loop and
no model or state types. `euler_step` takes one integration step, and the
caller keeps track of time and repeats the step. The package does not
track units: every quantity is a float in the SI units listed above. There
is no command-line program.

## Running the tests

```
pytest
```