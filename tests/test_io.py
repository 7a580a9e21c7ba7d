import io

import pytest

from wfm_metrics.io import read_matrix_csv


def test_read_volume_grid_with_labels():
    header = "day," + ",".join(f"i{i}" for i in range(48))
    rows = ["Mon," + ",".join(["2"] * 48), "Tue," + ",".join([""] * 47 + ["5"])]
    buf = io.StringIO("\n".join([header] + rows) + "\n")

    grid = read_matrix_csv(buf, "volume", header=True, label_column=True)

    assert grid.shape == (2, 48)
    assert grid.iloc[0, 0] == 2.0
    assert grid.iloc[1, 47] == 5.0


def test_read_roster_grid():
    buf = io.StringIO("\n".join(["1,,2"] * 48) + "\n")
    grid = read_matrix_csv(buf, "roster")
    assert grid.shape == (48, 3)
    assert grid.iloc[0].fillna(0).sum() == 3.0


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        read_matrix_csv(io.StringIO("1,2,3\n"), "volume")
    with pytest.raises(ValueError):
        read_matrix_csv(io.StringIO("1,2,3\n"), "roster")


def test_roster_cells_with_trailing_text():
    buf = io.StringIO("\n".join(["3 agents,2"] * 48) + "\n")
    grid = read_matrix_csv(buf, "roster")
    assert grid.iloc[0].sum() == 5.0
