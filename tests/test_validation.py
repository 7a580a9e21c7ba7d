import pytest

from wfm_metrics.aggregation import aggregate_intervals
from wfm_metrics.validation import (
    flag_intervals,
    validate_aht_matrix,
    validate_roster_matrix,
    validate_volume_matrix,
)


def test_valid_matrices_pass():
    validate_volume_matrix([[0, 3, ""] + [1] * 45])
    validate_aht_matrix([[0, 300]])
    validate_roster_matrix([["", "2"]] * 48)


def test_negative_volume_rejected():
    with pytest.raises(ValueError, match="negative"):
        validate_volume_matrix([[1, -2]])


def test_non_finite_volume_rejected():
    with pytest.raises(ValueError, match="non-finite"):
        validate_volume_matrix([[1, float("inf")]])


def test_too_many_interval_columns_rejected():
    with pytest.raises(ValueError):
        validate_volume_matrix([[0] * 49])
    with pytest.raises(ValueError):
        validate_aht_matrix([[300] * 49])


def test_negative_aht_rejected():
    with pytest.raises(ValueError):
        validate_aht_matrix([[300, -1]])


def test_roster_checks():
    with pytest.raises(ValueError):
        validate_roster_matrix([["1"]] * 49)
    with pytest.raises(ValueError):
        validate_roster_matrix([["-3"]])


def test_flag_intervals_expected_columns():
    volume = [[10, 0, 0] + [0] * 45]
    roster = [[""] for _ in range(48)]
    roster[1] = ["2"]
    out = flag_intervals(aggregate_intervals(volume, None, roster, planned_aht_seconds=300))

    assert len(out) == 48

    # interval 0: volume but nobody rostered
    assert out.loc[0, "flag_volume_without_agents"]
    assert not out.loc[0, "flag_empty"]

    # interval 1: agents with no volume
    assert out.loc[1, "flag_agents_without_volume"]

    # interval 2: nothing at all
    assert out.loc[2, "flag_empty"]
    assert out.loc[2, "time"] == "01:30"


def test_roster_negative_prefix_rejected():
    with pytest.raises(ValueError):
        validate_roster_matrix([["-2 agents"]])
