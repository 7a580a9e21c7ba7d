# src/wfm_metrics/summary.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence, Union

import pandas as pd

from .aggregation import Matrix, numeric_grid
from .config import StaffingConfig
from .intervals import INTERVALS_PER_DAY
from .pipeline import IntervalMetricRecord, compute_interval_metrics


@dataclass(frozen=True)
class RunSummary:
    intervals: int
    total_volume: float
    total_actual_agents: float
    total_required_agents: float
    service_level: float
    occupancy: float
    average_staffing: float
    intervals_short: int
    intervals_target_unreachable: int


def summarize(records: Sequence[IntervalMetricRecord]) -> RunSummary:
    """
    Rolls interval records up into headline figures:
      - service level weighted by effective volume
      - occupancy weighted by actual agents
      - average staffing over all 48 intervals of the day
    """
    total_volume = sum(r.effective_volume for r in records)
    total_actual = sum(r.actual_agents for r in records)

    sl = sum(r.service_level * r.effective_volume for r in records) / total_volume if total_volume > 0 else 0.0
    occ = sum(r.occupancy * r.actual_agents for r in records) / total_actual if total_actual > 0 else 0.0

    return RunSummary(
        intervals=len(records),
        total_volume=float(total_volume),
        total_actual_agents=float(total_actual),
        total_required_agents=float(sum(r.required_agents for r in records)),
        service_level=float(sl),
        occupancy=float(occ),
        average_staffing=float(total_actual) / INTERVALS_PER_DAY,
        intervals_short=sum(1 for r in records if r.variance < 0),
        intervals_target_unreachable=sum(1 for r in records if not r.target_met),
    )


def daily_summary(
    volume_matrix: Optional[Matrix],
    aht_matrix: Optional[Matrix],
    roster_matrix: Optional[Matrix],
    cfg: StaffingConfig,
    from_date: Union[date, str],
    days: Optional[int] = None,
) -> pd.DataFrame:
    """
    One row per day of the volume matrix. Each day is run through the pipeline
    on its own (that day's volume and AHT row against the same roster).
    """
    start = pd.Timestamp(from_date).date()
    vol = numeric_grid(volume_matrix, n_cols=INTERVALS_PER_DAY)
    aht = numeric_grid(aht_matrix, n_cols=INTERVALS_PER_DAY)
    n_days = int(days) if days is not None else len(vol)

    rows: List[Dict[str, Any]] = []
    for d in range(n_days):
        vol_row = vol.iloc[[d]] if d < len(vol) else None
        aht_row = aht.iloc[[d]] if d < len(aht) else None
        records = compute_interval_metrics(vol_row, aht_row, roster_matrix, cfg, days=1)
        s = summarize(records)
        rows.append(
            {
                "date": start + timedelta(days=d),
                "total_volume": s.total_volume,
                "service_level": s.service_level,
                "occupancy": s.occupancy,
                "average_staffing": s.average_staffing,
                "intervals_short": s.intervals_short,
            }
        )

    return pd.DataFrame(rows, columns=["date", "total_volume", "service_level", "occupancy", "average_staffing", "intervals_short"])


__all__ = [
    "RunSummary",
    "summarize",
    "daily_summary",
]
