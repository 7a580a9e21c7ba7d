import pytest

from wfm_metrics.legacy import agent_work_hours, workload_occupancy, workload_required_agents


def test_agent_work_hours():
    assert agent_work_hours(0, 0) == 0.5
    assert agent_work_hours(34.88, 5.88) == pytest.approx(0.5 * (1 - 0.4076))


def test_workload_required_agents():
    # 60 calls * 300s = 5 staff hours over 0.5h per agent
    assert workload_required_agents(60, 300, 0, 0) == pytest.approx(10.0)
    assert workload_required_agents(0, 300, 0, 0) == 0.0


def test_workload_occupancy_caps_and_guards():
    assert workload_occupancy(60, 300, 20, 0, 0) == pytest.approx(50.0)
    assert workload_occupancy(60, 300, 5, 0, 0) == 100.0
    assert workload_occupancy(60, 300, 0, 0, 0) == 0.0
