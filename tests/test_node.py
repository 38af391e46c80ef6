import pytest

from skein.node import Node, NodeTemperatures


def make_node(volume=1.0, heat_capacity=1.0, ua_bottom=0.0, ua_side=0.0, ua_top=0.0):
    return Node(volume, heat_capacity, ua_bottom, ua_side, ua_top)


def uniform(t):
    return NodeTemperatures(center=t, bottom=t, side=t, top=t)


def test_nothing_changes_at_equilibrium():
    node = make_node()
    assert node.derivative_from_fluid_flows(300.0, []) == pytest.approx(0.0)
    assert node.derivative_from_heat_flows([]) == pytest.approx(0.0)
    assert node.derivative_from_conduction(uniform(300.0)) == pytest.approx(0.0)


def test_fluid_flows_basic_heating():
    node = make_node()
    assert node.derivative_from_fluid_flows(300.0, [(0.1, 310.0)]) == pytest.approx(1.0)


def test_fluid_flows_cancellation():
    node = make_node(volume=2.0)
    equal = node.derivative_from_fluid_flows(350.0, [(0.2, 380.0), (0.2, 320.0)])
    assert equal == pytest.approx(0.0)
    weighted = node.derivative_from_fluid_flows(350.0, [(0.3, 360.0), (0.15, 330.0)])
    assert weighted == pytest.approx(0.0, abs=1e-12)


def test_fluid_flows_equal_temperatures_in_other_units():
    node = make_node()
    t_node = 25.0 + 273.15
    t_in = (77.0 - 32.0) * 5.0 / 9.0 + 273.15
    assert node.derivative_from_fluid_flows(t_node, [(10.0, t_in)]) == pytest.approx(
        0.0, abs=1e-12
    )


def test_fluid_flows_multiple_terms():
    node = make_node(volume=1.5)
    inflows = [(0.05, 315.0), (0.02, 290.0), (0.01, 305.0)]
    assert node.derivative_from_fluid_flows(300.0, inflows) == pytest.approx(0.4)


def test_fluid_flows_accepts_generator():
    node = make_node()
    inflows = ((rate, 310.0) for rate in (0.05, 0.05))
    assert node.derivative_from_fluid_flows(300.0, inflows) == pytest.approx(1.0)


def test_aux_heat_sums_and_scales():
    node = make_node(heat_capacity=600.0)
    result = node.derivative_from_heat_flows([500.0, 700.0, -100.0, 50.0, 50.0])
    assert result == pytest.approx(2.0)


def test_conduction_zero_when_equal_surroundings():
    node = make_node(ua_bottom=10.0, ua_side=10.0, ua_top=10.0)
    assert node.derivative_from_conduction(uniform(300.0)) == pytest.approx(0.0)


def test_conduction_bottom_only():
    node = make_node(heat_capacity=25.0, ua_bottom=10.0)
    temps = NodeTemperatures(center=300.0, bottom=305.0, side=300.0, top=300.0)
    assert node.derivative_from_conduction(temps) == pytest.approx(2.0)


def test_conduction_bottom_cancels_top():
    node = make_node(ua_bottom=4.0, ua_top=6.0)
    temps = NodeTemperatures(center=275.0, bottom=278.0, side=275.0, top=273.0)
    assert node.derivative_from_conduction(temps) == pytest.approx(0.0, abs=1e-12)


def test_conduction_superposition_all_faces():
    node = make_node(heat_capacity=6.0, ua_bottom=5.0, ua_side=7.0, ua_top=9.0)
    temps = NodeTemperatures(center=300.0, bottom=301.0, side=298.0, top=303.0)
    assert node.derivative_from_conduction(temps) == pytest.approx(3.0)


def test_zero_volume_raises():
    node = make_node(volume=0.0)
    with pytest.raises(ZeroDivisionError):
        node.derivative_from_fluid_flows(300.0, [(0.1, 310.0)])