# src/wfm_metrics/aggregation.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .intervals import INTERVALS_PER_DAY


Matrix = Union[pd.DataFrame, np.ndarray, Sequence[Sequence[Any]]]

# Leading integer of a cell's text, as an integer field reads it.
_INT_PREFIX = r"^\s*([+-]?\d+)"


@dataclass(frozen=True)
class IntervalAggregate:
    interval_index: int
    total_volume: float
    avg_aht_seconds: float
    active_days: int
    raw_agents: float


# -----------------------------
# Helpers
# -----------------------------
def _positional_frame(matrix: Optional[Matrix]) -> pd.DataFrame:
    if matrix is None:
        df = pd.DataFrame()
    elif isinstance(matrix, pd.DataFrame):
        df = matrix.copy()
    else:
        df = pd.DataFrame(list(matrix))

    df = df.reset_index(drop=True)
    df.columns = range(df.shape[1])
    return df


def _shape(df: pd.DataFrame, n_rows: Optional[int], n_cols: Optional[int]) -> pd.DataFrame:
    rows = range(n_rows) if n_rows is not None else df.index
    cols = range(n_cols) if n_cols is not None else df.columns
    return df.reindex(index=rows, columns=cols).astype(float)


def _leading_integer(col: pd.Series) -> pd.Series:
    return pd.to_numeric(col.astype(str).str.extract(_INT_PREFIX, expand=False), errors="coerce")


def numeric_grid(matrix: Optional[Matrix], *, n_rows: Optional[int] = None, n_cols: Optional[int] = None) -> pd.DataFrame:
    """
    Coerces a (possibly ragged) grid into a positional numeric DataFrame.
    Blank / non-numeric cells become NaN; missing rows/columns are padded with NaN
    and extra ones are dropped when n_rows / n_cols are given.
    """
    df = _positional_frame(matrix)
    df = df.apply(pd.to_numeric, errors="coerce") if not df.empty else df
    return _shape(df, n_rows, n_cols)


def integer_grid(matrix: Optional[Matrix], *, n_rows: Optional[int] = None, n_cols: Optional[int] = None) -> pd.DataFrame:
    """
    numeric_grid for integer fields (roster cells): each cell keeps the leading
    integer of its text, so "12abc" -> 12, "3.9" -> 3 and "-2" -> -2. Cells with
    no leading digits become NaN.
    """
    df = _positional_frame(matrix)
    df = df.apply(_leading_integer) if not df.empty else df
    return _shape(df, n_rows, n_cols)


# -----------------------------
# Volume / AHT
# -----------------------------
def aggregate_volume_aht(
    volume_matrix: Optional[Matrix],
    aht_matrix: Optional[Matrix],
    planned_aht_seconds: float,
    days: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Collapses (day x interval) matrices into per-interval values.

    Returns (total_volume, avg_aht_seconds, active_days), each of length 48:
      - total_volume sums every configured day
      - avg_aht_seconds is the plain mean over days with volume > 0
        (planned AHT when no day has volume)
    """
    planned = max(float(planned_aht_seconds), 1.0)

    vol = numeric_grid(volume_matrix, n_cols=INTERVALS_PER_DAY)
    n_days = int(days) if days is not None else len(vol)

    vol = vol.reindex(index=range(n_days)).fillna(0.0).to_numpy()
    aht = numeric_grid(aht_matrix, n_rows=n_days, n_cols=INTERVALS_PER_DAY).fillna(0.0).to_numpy()
    aht = np.where(aht > 0, aht, planned)

    if n_days == 0:
        zeros = np.zeros(INTERVALS_PER_DAY, dtype=float)
        return zeros, np.full(INTERVALS_PER_DAY, planned), zeros.astype(int)

    mask = vol > 0
    total_volume = vol.sum(axis=0)
    active_days = mask.sum(axis=0)
    aht_sum = np.where(mask, aht, 0.0).sum(axis=0)
    avg_aht = np.where(active_days > 0, aht_sum / np.maximum(active_days, 1), planned)

    return total_volume.astype(float), avg_aht.astype(float), active_days.astype(int)


# -----------------------------
# Roster
# -----------------------------
def roster_headcount(roster_matrix: Optional[Matrix]) -> np.ndarray:
    """
    Sums each interval row of the roster grid (rows = intervals, columns = shifts).
    Cells parse like an integer field (see integer_grid); blanks and text
    without a leading integer count as 0.
    """
    grid = integer_grid(roster_matrix, n_rows=INTERVALS_PER_DAY).fillna(0.0)
    if grid.shape[1] == 0:
        return np.zeros(INTERVALS_PER_DAY, dtype=float)
    return grid.to_numpy().sum(axis=1).astype(float)


def aggregate_intervals(
    volume_matrix: Optional[Matrix],
    aht_matrix: Optional[Matrix],
    roster_matrix: Optional[Matrix],
    planned_aht_seconds: float,
    days: Optional[int] = None,
) -> List[IntervalAggregate]:
    total_volume, avg_aht, active_days = aggregate_volume_aht(
        volume_matrix, aht_matrix, planned_aht_seconds, days=days
    )
    agents = roster_headcount(roster_matrix)

    return [
        IntervalAggregate(
            interval_index=i,
            total_volume=float(total_volume[i]),
            avg_aht_seconds=float(avg_aht[i]),
            active_days=int(active_days[i]),
            raw_agents=float(agents[i]),
        )
        for i in range(INTERVALS_PER_DAY)
    ]


def is_empty_interval(agg: IntervalAggregate) -> bool:
    """Intervals with neither volume nor rostered agents are left out of the output."""
    return agg.total_volume <= 0 and agg.raw_agents <= 0


__all__ = [
    "Matrix",
    "IntervalAggregate",
    "numeric_grid",
    "integer_grid",
    "aggregate_volume_aht",
    "roster_headcount",
    "aggregate_intervals",
    "is_empty_interval",
]
