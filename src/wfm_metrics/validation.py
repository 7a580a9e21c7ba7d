from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from .aggregation import IntervalAggregate, Matrix, integer_grid, numeric_grid
from .intervals import INTERVALS_PER_DAY, interval_label


def _check_cells(grid: pd.DataFrame, name: str) -> None:
    values = grid.to_numpy(dtype=float)
    present = ~np.isnan(values)

    if np.isinf(values[present]).any():
        raise ValueError(f"{name} contains non-finite values")

    bad = present & (values < 0)
    if bad.any():
        rows, cols = np.nonzero(bad)
        cells = list(zip(rows.tolist(), cols.tolist()))[:10]
        raise ValueError(f"{name} has negative values. Example (row, column) cells: {cells}")


def validate_volume_matrix(volume_matrix: Optional[Matrix]) -> None:
    grid = numeric_grid(volume_matrix)
    if grid.shape[1] > INTERVALS_PER_DAY:
        raise ValueError(f"volume matrix rows must have at most {INTERVALS_PER_DAY} intervals, got {grid.shape[1]}")
    _check_cells(grid, "volume matrix")


def validate_aht_matrix(aht_matrix: Optional[Matrix]) -> None:
    # 0 / blank cells mean "use planned AHT", so only negatives are rejected.
    grid = numeric_grid(aht_matrix)
    if grid.shape[1] > INTERVALS_PER_DAY:
        raise ValueError(f"AHT matrix rows must have at most {INTERVALS_PER_DAY} intervals, got {grid.shape[1]}")
    _check_cells(grid, "AHT matrix")


def validate_roster_matrix(roster_matrix: Optional[Matrix]) -> None:
    grid = integer_grid(roster_matrix)
    if grid.shape[0] > INTERVALS_PER_DAY:
        raise ValueError(f"roster must have at most {INTERVALS_PER_DAY} interval rows, got {grid.shape[0]}")
    _check_cells(grid, "roster")


def flag_intervals(aggregates: Sequence[IntervalAggregate]) -> pd.DataFrame:
    """
    Per-interval data-quality flags for display next to the inputs.
    """
    df = pd.DataFrame(
        {
            "interval_index": [a.interval_index for a in aggregates],
            "time": [interval_label(a.interval_index) for a in aggregates],
            "volume": [a.total_volume for a in aggregates],
            "agents": [a.raw_agents for a in aggregates],
        }
    )
    df["flag_empty"] = (df["volume"] <= 0) & (df["agents"] <= 0)
    df["flag_volume_without_agents"] = (df["volume"] > 0) & (df["agents"] <= 0)
    df["flag_agents_without_volume"] = (df["volume"] <= 0) & (df["agents"] > 0)
    return df


__all__ = [
    "validate_volume_matrix",
    "validate_aht_matrix",
    "validate_roster_matrix",
    "flag_intervals",
]
