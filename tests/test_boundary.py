from __future__ import annotations

import dataclasses
import math

import pytest

from skein.boundary import Environment, PortFlow
from skein.constraint import ConstraintError, ConstraintErrorKind, NonNegative, StrictlyPositive


def test_port_flow_keeps_rate_and_temperature():
    flow = PortFlow(0.5, 300.0)
    assert flow.rate == 0.5
    assert flow.inlet_temperature == 300.0


def test_port_flow_accepts_zero_rate():
    flow = PortFlow(0.0, 298.15)
    assert flow.rate == 0.0


def test_port_flow_rejects_negative_rate():
    with pytest.raises(ConstraintError) as excinfo:
        PortFlow(-1.0, 300.0)
    assert excinfo.value.kind is ConstraintErrorKind.NEGATIVE


def test_port_flow_rejects_nan_rate():
    with pytest.raises(ConstraintError) as excinfo:
        PortFlow(math.nan, 300.0)
    assert excinfo.value.kind is ConstraintErrorKind.NOT_A_NUMBER


def test_from_constrained_matches_plain_constructor():
    rate = NonNegative.new(2.0)
    flow = PortFlow.from_constrained(rate, 310.0)
    assert flow == PortFlow(2.0, 310.0)
    assert flow.constrained_rate == rate


def test_from_constrained_rejects_other_constraints():
    with pytest.raises(TypeError):
        PortFlow.from_constrained(StrictlyPositive.new(2.0), 310.0)


def test_constructor_rejects_wrongly_constrained_rate():
    with pytest.raises(TypeError):
        PortFlow(StrictlyPositive.new(1.0), 300.0)


def test_constrained_rate_round_trips():
    flow = PortFlow(1.25, 280.0)
    assert flow.constrained_rate.value == flow.rate
    assert flow.constrained_rate.constraint is NonNegative


def test_port_flows_differ_by_temperature():
    assert (PortFlow(1.0, 300.0) == PortFlow(1.0, 301.0)) is False
    assert hash(PortFlow(1.0, 300.0)) == hash(PortFlow(1.0, 300.0))


def test_environment_fields_and_equality():
    env = Environment(bottom=290.0, side=295.0, top=300.0)
    assert (env.bottom, env.side, env.top) == (290.0, 295.0, 300.0)
    assert env == Environment(290.0, 295.0, 300.0)


def test_environment_is_frozen():
    env = Environment(290.0, 295.0, 300.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        env.top = 310.0  # type: ignore[misc]
    assert dataclasses.replace(env, top=310.0).top == 310.0