# src/wfm_metrics/intervals.py
from __future__ import annotations

import pandas as pd


INTERVAL_MINUTES: int = 30
INTERVALS_PER_DAY: int = 1440 // INTERVAL_MINUTES
INTERVAL_HOURS: float = INTERVAL_MINUTES / 60.0


def _check_index(interval_index: int) -> None:
    if not (0 <= int(interval_index) < INTERVALS_PER_DAY):
        raise ValueError(f"interval_index must be in [0, {INTERVALS_PER_DAY - 1}], got {interval_index}")


def interval_label(interval_index: int) -> str:
    """
    24h label of the interval *end*, as the planning sheet shows it:
    index 0 => "00:30", index 47 => "00:00".
    """
    _check_index(interval_index)
    total = (int(interval_index) + 1) * INTERVAL_MINUTES
    hour = (total // 60) % 24
    minute = total % 60
    return f"{hour:02d}:{minute:02d}"


def interval_display_label(interval_index: int) -> str:
    """12h form of interval_label, e.g. "12:30 AM"."""
    label = interval_label(interval_index)
    hour, minute = (int(p) for p in label.split(":"))
    suffix = "AM" if hour < 12 else "PM"
    return f"{(hour % 12 or 12):02d}:{minute:02d} {suffix}"


def interval_grid() -> pd.DataFrame:
    """
    Returns the fixed full-day grid:
      interval_index, interval_start (HH:MM), label (interval end, HH:MM)
    """
    starts = pd.date_range("2000-01-01 00:00:00", periods=INTERVALS_PER_DAY, freq=f"{INTERVAL_MINUTES}min")
    return pd.DataFrame(
        {
            "interval_index": range(INTERVALS_PER_DAY),
            "interval_start": starts.strftime("%H:%M"),
            "label": [interval_label(i) for i in range(INTERVALS_PER_DAY)],
        }
    )


__all__ = [
    "INTERVAL_MINUTES",
    "INTERVALS_PER_DAY",
    "INTERVAL_HOURS",
    "interval_label",
    "interval_display_label",
    "interval_grid",
]
