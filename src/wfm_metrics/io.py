from __future__ import annotations

import os
from typing import IO, Literal, TypeAlias, Union

import pandas as pd

from .aggregation import integer_grid, numeric_grid
from .intervals import INTERVALS_PER_DAY

MatrixKind: TypeAlias = Literal["volume", "aht", "roster"]


def read_matrix_csv(
    file: Union[str, os.PathLike, IO[bytes], IO[str]],
    kind: MatrixKind,
    *,
    header: bool = False,
    label_column: bool = False,
) -> pd.DataFrame:
    """
    Reads a grid CSV exported from the planning sheet.

      volume / aht: one row per day, one column per interval (48)
      roster:       one row per interval (48), one column per shift

    header=True skips a title row; label_column=True drops a leading
    day/time label column. Cells are returned as numbers (NaN for blanks);
    roster cells keep their leading integer.
    """
    df = pd.read_csv(file, header=0 if header else None, dtype=str, keep_default_na=False)
    if label_column:
        df = df.iloc[:, 1:]

    grid = integer_grid(df) if kind == "roster" else numeric_grid(df)

    if kind in ("volume", "aht"):
        if grid.shape[1] != INTERVALS_PER_DAY:
            raise ValueError(f"{kind} CSV must have {INTERVALS_PER_DAY} interval columns, got {grid.shape[1]}")
    elif kind == "roster":
        if grid.shape[0] != INTERVALS_PER_DAY:
            raise ValueError(f"roster CSV must have {INTERVALS_PER_DAY} interval rows, got {grid.shape[0]}")
    else:
        raise ValueError(f"Unsupported matrix kind: {kind}")

    return grid
