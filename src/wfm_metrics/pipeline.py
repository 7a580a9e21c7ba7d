# src/wfm_metrics/pipeline.py
from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Literal, Optional, Sequence, TypeAlias

import pandas as pd

from .aggregation import IntervalAggregate, Matrix, aggregate_intervals, is_empty_interval
from .config import StaffingConfig
from .erlangc import asa_erlang_c, erlang_agents, occupancy, offered_load_erlangs, service_level_erlang_c
from .intervals import INTERVAL_HOURS, interval_label
from .legacy import workload_occupancy, workload_required_agents
from .shrinkage import effective_quantity

logger = logging.getLogger(__name__)

RequirementMethod: TypeAlias = Literal["erlang_c", "workload"]


# -----------------------------
# Data models
# -----------------------------
@dataclass(frozen=True)
class IntervalMetricRecord:
    interval_index: int
    label: str

    # Aggregated inputs
    raw_volume: float
    avg_aht_seconds: float
    raw_agents: float

    # Shrinkage-adjusted
    effective_volume: float
    actual_agents: float

    # Queueing
    traffic_intensity: float
    required_agents: float
    target_met: bool
    variance: float

    # Percentages (0-100)
    service_level: float
    occupancy: float
    call_trend: float
    agent_distribution_ratio: float

    asa_seconds: float
    influx: float


# -----------------------------
# Rounding (presentation boundary only)
# -----------------------------
def round_half_up(value: float, digits: int = 0) -> float:
    """Rounds .5 toward +infinity, the way the planning sheet's UI rounds."""
    scale = 10.0**digits
    return math.floor(float(value) * scale + 0.5) / scale


def record_to_display(record: IntervalMetricRecord) -> Dict[str, Any]:
    return {
        "time": record.label,
        "actual": round_half_up(record.actual_agents, 1),
        "requirement": round_half_up(record.required_agents, 1),
        "variance": round_half_up(record.variance, 1),
        "call_trend": round_half_up(record.call_trend, 1),
        "aht_minutes": round_half_up(record.avg_aht_seconds / 60.0, 1),
        "service_level": round_half_up(record.service_level, 1),
        "occupancy": round_half_up(record.occupancy, 1),
        "influx": int(round_half_up(record.influx)),
        "agent_distribution_ratio": round_half_up(record.agent_distribution_ratio, 1),
        "asa_seconds": round_half_up(record.asa_seconds, 1) if math.isfinite(record.asa_seconds) else None,
        "target_met": record.target_met,
    }


def records_to_frame(records: Sequence[IntervalMetricRecord], display: bool = True) -> pd.DataFrame:
    rows = [record_to_display(r) if display else asdict(r) for r in records]
    return pd.DataFrame(rows)


# -----------------------------
# Per-interval computation
# -----------------------------
def _safe_ratio(num: float, den: float) -> float:
    return float(num) / float(den) * 100.0 if den > 0 else 0.0


def metrics_for_interval(
    agg: IntervalAggregate,
    cfg: StaffingConfig,
    *,
    total_raw_agents: float,
    method: RequirementMethod = "erlang_c",
) -> IntervalMetricRecord:
    """
    Computes one interval's record from its aggregated inputs.
    Values keep full precision; see record_to_display for rounding.
    """
    ooo, ino, bb = cfg.shrinkage_percentages
    aht = agg.avg_aht_seconds

    effective_volume = effective_quantity(agg.total_volume, ooo, ino, bb)
    actual_agents = effective_quantity(agg.raw_agents, ooo, ino, bb)
    a = offered_load_erlangs(effective_volume, aht)

    if method == "erlang_c":
        if effective_volume > 0:
            solved = erlang_agents(cfg.sla_target_fraction, cfg.service_time_seconds, a, aht)
            required = float(solved.agents)
            target_met = solved.target_met
        else:
            required, target_met = 0.0, True
        occ = occupancy(a, actual_agents) * 100.0
    elif method == "workload":
        required = workload_required_agents(agg.total_volume, aht, ooo, bb)
        target_met = True
        occ = workload_occupancy(agg.total_volume, aht, agg.raw_agents, ooo, bb)
    else:
        raise ValueError(f"Unsupported requirement method: {method}")

    return IntervalMetricRecord(
        interval_index=agg.interval_index,
        label=interval_label(agg.interval_index),
        raw_volume=agg.total_volume,
        avg_aht_seconds=aht,
        raw_agents=agg.raw_agents,
        effective_volume=effective_volume,
        actual_agents=actual_agents,
        traffic_intensity=a,
        required_agents=required,
        target_met=target_met,
        variance=actual_agents - required,
        service_level=service_level_erlang_c(a, actual_agents, aht, cfg.service_time_seconds) * 100.0,
        occupancy=occ,
        call_trend=_safe_ratio(effective_volume, agg.total_volume),
        agent_distribution_ratio=_safe_ratio(actual_agents, total_raw_agents),
        asa_seconds=asa_erlang_c(a, actual_agents, aht),
        influx=effective_volume / INTERVAL_HOURS,
    )


# -----------------------------
# Public API
# -----------------------------
def compute_interval_metrics(
    volume_matrix: Optional[Matrix],
    aht_matrix: Optional[Matrix],
    roster_matrix: Optional[Matrix],
    cfg: StaffingConfig,
    *,
    days: Optional[int] = None,
    method: RequirementMethod = "erlang_c",
) -> List[IntervalMetricRecord]:
    """
    Full recalculation over the 48 intervals.

    Intervals with zero volume and zero rostered agents are omitted; the rest
    are returned in ascending interval order. cfg is assumed validated
    (config.validate_config).
    """
    aggregates = aggregate_intervals(
        volume_matrix, aht_matrix, roster_matrix, cfg.planned_aht_seconds, days=days
    )
    total_raw_agents = sum(agg.raw_agents for agg in aggregates)

    records = [
        metrics_for_interval(agg, cfg, total_raw_agents=total_raw_agents, method=method)
        for agg in aggregates
        if not is_empty_interval(agg)
    ]

    logger.debug(
        "Computed %d interval records (%d empty intervals omitted, method=%s)",
        len(records),
        len(aggregates) - len(records),
        method,
    )
    return records


__all__ = [
    "RequirementMethod",
    "IntervalMetricRecord",
    "round_half_up",
    "record_to_display",
    "records_to_frame",
    "metrics_for_interval",
    "compute_interval_metrics",
]
