import numpy as np
import pytest

from wfm_metrics.aggregation import (
    IntervalAggregate,
    aggregate_intervals,
    aggregate_volume_aht,
    is_empty_interval,
    roster_headcount,
)


def _day(values):
    row = [0] * 48
    for i, v in values.items():
        row[i] = v
    return row


def test_volume_sums_across_days_and_aht_ignores_zero_volume_days():
    volume = [_day({10: 20}), _day({10: 0}), _day({10: 30})]
    aht = [_day({10: 300}), _day({10: 900}), _day({10: 500})]

    total, avg_aht, active = aggregate_volume_aht(volume, aht, planned_aht_seconds=600)

    assert total[10] == 50.0
    assert avg_aht[10] == pytest.approx(400.0)
    assert active[10] == 2


def test_aht_falls_back_to_planned_without_volume():
    volume = [_day({})]
    aht = [_day({5: 300})]
    _, avg_aht, active = aggregate_volume_aht(volume, aht, planned_aht_seconds=1560)
    assert avg_aht[5] == 1560.0
    assert active[5] == 0


def test_missing_and_zero_aht_cells_use_planned():
    volume = [_day({0: 10, 1: 10})]
    aht = [[0]]  # interval 1 missing entirely, interval 0 is zero
    _, avg_aht, _ = aggregate_volume_aht(volume, aht, planned_aht_seconds=420)
    assert avg_aht[0] == 420.0
    assert avg_aht[1] == 420.0


def test_days_limits_or_pads_matrix():
    volume = [_day({3: 5}), _day({3: 7})]
    total, _, _ = aggregate_volume_aht(volume, None, 300, days=1)
    assert total[3] == 5.0
    total, _, _ = aggregate_volume_aht(volume, None, 300, days=5)
    assert total[3] == 12.0


def test_blank_and_text_volume_cells_count_as_zero():
    volume = [["", None, "abc", "4"] + [0] * 44]
    total, _, _ = aggregate_volume_aht(volume, None, 300)
    assert total[:4].tolist() == [0.0, 0.0, 0.0, 4.0]


def test_roster_headcount_sums_columns():
    roster = [["2", "", "3"] for _ in range(48)]
    roster[7] = ["x", "1.9", None]
    heads = roster_headcount(roster)
    assert heads[0] == 5.0
    assert heads[7] == 1.0
    assert len(heads) == 48


def test_roster_headcount_empty():
    assert np.all(roster_headcount([]) == 0.0)
    assert np.all(roster_headcount(None) == 0.0)


def test_aggregate_intervals_and_empty_filter():
    volume = [_day({2: 10})]
    roster = [[""] for _ in range(48)]
    roster[4] = ["3"]
    aggs = aggregate_intervals(volume, None, roster, planned_aht_seconds=300)

    assert len(aggs) == 48
    assert not is_empty_interval(aggs[2])
    assert not is_empty_interval(aggs[4])
    assert is_empty_interval(aggs[0])
    assert aggs[4] == IntervalAggregate(
        interval_index=4, total_volume=0.0, avg_aht_seconds=300.0, active_days=0, raw_agents=3.0
    )


def test_roster_cells_keep_leading_integer():
    roster = [[""] * 4 for _ in range(48)]
    roster[0] = ["3 agents", "12abc", " 4.9", "x1"]
    heads = roster_headcount(roster)
    assert heads[0] == 19.0
