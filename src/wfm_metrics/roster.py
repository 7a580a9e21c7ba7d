# src/wfm_metrics/roster.py
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .aggregation import integer_grid
from .intervals import INTERVALS_PER_DAY

RosterGrid = List[List[str]]

DEFAULT_SHIFTS: int = 17
DEFAULT_SHIFT_LENGTH: int = 17  # intervals (8.5 hours)


def blank_roster(shifts: int = DEFAULT_SHIFTS) -> RosterGrid:
    """48 interval rows x `shifts` columns of empty cells."""
    if shifts <= 0:
        raise ValueError("shifts must be > 0")
    return [["" for _ in range(shifts)] for _ in range(INTERVALS_PER_DAY)]


def uniform_roster(count: int, shifts: int = DEFAULT_SHIFTS) -> RosterGrid:
    if count < 0:
        raise ValueError("count must be >= 0")
    if count == 0:
        return blank_roster(shifts)
    return [[str(int(count)) for _ in range(shifts)] for _ in range(INTERVALS_PER_DAY)]


def fill_shift_column(
    grid: Sequence[Sequence[str]],
    column: int,
    agents: int,
    shift_length: int = DEFAULT_SHIFT_LENGTH,
) -> RosterGrid:
    """
    Returns a copy of grid with `column` rewritten as one shift block:
    `agents` in shift_length consecutive interval rows starting at row `column`,
    wrapping past midnight. agents == 0 just clears the column.

    The grid is widened to at least column + 1 columns and padded to 48 rows.
    """
    if column < 0:
        raise ValueError("column must be >= 0")
    if agents < 0:
        raise ValueError("agents must be >= 0")
    if not (0 < shift_length <= INTERVALS_PER_DAY):
        raise ValueError(f"shift_length must be in [1, {INTERVALS_PER_DAY}]")

    width = max([column + 1] + [len(row) for row in grid])
    out: RosterGrid = []
    for i in range(INTERVALS_PER_DAY):
        row = list(grid[i]) if i < len(grid) else []
        row = [str(v) if v is not None else "" for v in row] + [""] * (width - len(row))
        row[column] = ""
        out.append(row)

    if agents > 0:
        for offset in range(shift_length):
            out[(column + offset) % INTERVALS_PER_DAY][column] = str(int(agents))

    return out


def roster_from_shift_starts(
    starts: Iterable[Tuple[int, int]],
    shift_length: int = DEFAULT_SHIFT_LENGTH,
    shifts: int = INTERVALS_PER_DAY,
) -> RosterGrid:
    """
    Builds a roster from (start_interval, agents) pairs. Each start owns the
    shift column of the same index (taken mod 48), so pairs sharing a start are
    summed into one block instead of overwriting each other.
    """
    merged: Dict[int, int] = {}
    for start, agents in starts:
        column = int(start) % INTERVALS_PER_DAY
        merged[column] = merged.get(column, 0) + int(agents)

    grid = blank_roster(shifts)
    for column in sorted(merged):
        grid = fill_shift_column(grid, column, merged[column], shift_length)
    return grid


def shift_totals(grid: Sequence[Sequence[str]]) -> List[int]:
    """Agents per shift column (column sums)."""
    g = integer_grid(grid, n_rows=INTERVALS_PER_DAY).fillna(0.0)
    return [int(v) for v in g.to_numpy().sum(axis=0).tolist()]


def total_rostered(grid: Sequence[Sequence[str]]) -> int:
    return int(sum(shift_totals(grid)))


__all__ = [
    "RosterGrid",
    "DEFAULT_SHIFTS",
    "DEFAULT_SHIFT_LENGTH",
    "blank_roster",
    "uniform_roster",
    "fill_shift_column",
    "roster_from_shift_starts",
    "shift_totals",
    "total_rostered",
]
