import pytest

from skein.mass_balance import MassBalanceError, compute_upward_flows


def test_single_port_bottom_in_top_out():
    inlet = [[1.0], [0.0], [0.0]]
    outlet = [[0.0], [0.0], [1.0]]

    flow_up = compute_upward_flows([1.0], inlet, outlet)

    assert flow_up[0] == pytest.approx(1.0)
    assert flow_up[1] == pytest.approx(1.0)
    assert flow_up[2] == pytest.approx(0.0, abs=1e-15)


def test_inlet_and_outlet_on_same_node_produces_no_vertical_flow():
    inlet = [[0.0], [1.0], [0.0]]
    outlet = [[0.0], [1.0], [0.0]]

    flow_up = compute_upward_flows([0.8], inlet, outlet)

    assert flow_up == [pytest.approx(0.0), pytest.approx(0.0), pytest.approx(0.0)]


def test_two_ports_mixed_distribution():
    inlet = [[1.0, 0.0], [0.0, 0.6], [0.0, 0.4]]
    outlet = [[0.0, 1.0], [0.0, 0.0], [1.0, 0.0]]

    flow_up = compute_upward_flows([0.3, 0.5], inlet, outlet)

    assert flow_up[0] == pytest.approx(-0.2)
    assert flow_up[1] == pytest.approx(0.1)
    assert flow_up[2] == pytest.approx(0.0, abs=1e-12)


def test_unbalanced_weights_raise():
    inlet = [[1.0], [0.0]]
    outlet = [[0.0], [0.0]]

    with pytest.raises(MassBalanceError) as excinfo:
        compute_upward_flows([0.5], inlet, outlet)

    assert excinfo.value.residual == pytest.approx(0.5)


def test_row_length_mismatch_raises():
    with pytest.raises(ValueError):
        compute_upward_flows([1.0, 2.0], [[1.0], [0.0]], [[0.0], [1.0]])


def test_node_count_mismatch_raises():
    with pytest.raises(ValueError):
        compute_upward_flows([1.0], [[1.0], [0.0]], [[1.0]])


def test_no_nodes_gives_no_flows():
    assert compute_upward_flows([], [], []) == []