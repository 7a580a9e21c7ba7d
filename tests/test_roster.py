import pytest

from wfm_metrics.aggregation import roster_headcount
from wfm_metrics.roster import (
    blank_roster,
    fill_shift_column,
    roster_from_shift_starts,
    shift_totals,
    total_rostered,
    uniform_roster,
)


def test_blank_roster_shape():
    grid = blank_roster()
    assert len(grid) == 48
    assert all(len(row) == 17 for row in grid)
    assert total_rostered(grid) == 0


def test_uniform_roster_totals():
    grid = uniform_roster(2, shifts=3)
    assert shift_totals(grid) == [96, 96, 96]
    assert total_rostered(grid) == 288


def test_fill_shift_column_wraps_past_midnight():
    grid = fill_shift_column(blank_roster(), column=40, agents=3, shift_length=17)

    filled = [i for i, row in enumerate(grid) if row[40] == "3"]
    assert filled == list(range(0, 9)) + list(range(40, 48))
    assert shift_totals(grid)[40] == 51


def test_fill_shift_column_replaces_previous_block():
    grid = fill_shift_column(blank_roster(), column=2, agents=5, shift_length=4)
    grid = fill_shift_column(grid, column=2, agents=1, shift_length=2)
    heads = roster_headcount(grid)
    assert heads[2] == 1.0
    assert heads[3] == 1.0
    assert heads[4] == 0.0


def test_fill_shift_column_zero_clears_and_does_not_mutate_input():
    original = fill_shift_column(blank_roster(3), column=0, agents=2, shift_length=3)
    cleared = fill_shift_column(original, column=0, agents=0)
    assert total_rostered(cleared) == 0
    assert total_rostered(original) == 6


def test_fill_shift_column_widens_grid():
    grid = fill_shift_column([], column=20, agents=1, shift_length=1)
    assert len(grid) == 48
    assert len(grid[0]) == 21
    assert grid[20][20] == "1"


def test_fill_shift_column_rejects_bad_arguments():
    with pytest.raises(ValueError):
        fill_shift_column(blank_roster(), column=-1, agents=1)
    with pytest.raises(ValueError):
        fill_shift_column(blank_roster(), column=0, agents=1, shift_length=0)


def test_roster_from_shift_starts_merges_shared_starts():
    grid = roster_from_shift_starts([(14, 4), (14, 6), (20, 1)], shift_length=2)

    assert len(grid) == 48
    assert [grid[i][14] for i in (14, 15, 16)] == ["10", "10", ""]
    assert grid[20][20] == "1"
    assert total_rostered(grid) == 22


def test_roster_from_shift_starts_wraps_start_index():
    grid = roster_from_shift_starts([(50, 3)], shift_length=1)
    assert grid[2][2] == "3"
    assert total_rostered(grid) == 3
