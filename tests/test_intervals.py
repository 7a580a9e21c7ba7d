import pytest

from wfm_metrics.intervals import INTERVALS_PER_DAY, interval_display_label, interval_grid, interval_label


def test_labels_mark_interval_end():
    assert interval_label(0) == "00:30"
    assert interval_label(1) == "01:00"
    assert interval_label(23) == "12:00"
    assert interval_label(47) == "00:00"


def test_display_labels():
    assert interval_display_label(0) == "12:30 AM"
    assert interval_display_label(25) == "01:00 PM"


def test_out_of_range_index():
    with pytest.raises(ValueError):
        interval_label(48)
    with pytest.raises(ValueError):
        interval_label(-1)


def test_grid():
    grid = interval_grid()
    assert len(grid) == INTERVALS_PER_DAY == 48
    assert grid.loc[0, "interval_start"] == "00:00"
    assert grid.loc[47, "interval_start"] == "23:30"
    assert grid.loc[47, "label"] == "00:00"
