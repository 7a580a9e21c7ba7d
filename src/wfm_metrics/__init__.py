# src/wfm_metrics/__init__.py
from __future__ import annotations

# -----------------------------
# Inputs / configuration
# -----------------------------
from .config import StaffingConfig, load_config_from_env, validate_config
from .intervals import INTERVALS_PER_DAY, INTERVAL_MINUTES, interval_label, interval_display_label
from .validation import validate_volume_matrix, validate_aht_matrix, validate_roster_matrix

# -----------------------------
# Engine
# -----------------------------
from .shrinkage import effective_quantity, shrinkage_breakdown, shrinkage_factor

from .erlangc import (
    ErlangAgentsResult,
    offered_load_erlangs,
    erlang_c_wait_probability,
    service_level_erlang_c,
    asa_erlang_c,
    occupancy,
    erlang_agents,
)

from .aggregation import IntervalAggregate, aggregate_intervals

from .pipeline import (
    IntervalMetricRecord,
    compute_interval_metrics,
    record_to_display,
    records_to_frame,
)

# -----------------------------
# Roll-ups
# -----------------------------
from .summary import RunSummary, summarize, daily_summary

__all__ = [
    # Inputs / configuration
    "StaffingConfig",
    "load_config_from_env",
    "validate_config",
    "INTERVALS_PER_DAY",
    "INTERVAL_MINUTES",
    "interval_label",
    "interval_display_label",
    "validate_volume_matrix",
    "validate_aht_matrix",
    "validate_roster_matrix",
    # Shrinkage
    "effective_quantity",
    "shrinkage_breakdown",
    "shrinkage_factor",
    # Erlang-C
    "ErlangAgentsResult",
    "offered_load_erlangs",
    "erlang_c_wait_probability",
    "service_level_erlang_c",
    "asa_erlang_c",
    "occupancy",
    "erlang_agents",
    # Aggregation / pipeline
    "IntervalAggregate",
    "aggregate_intervals",
    "IntervalMetricRecord",
    "compute_interval_metrics",
    "record_to_display",
    "records_to_frame",
    # Roll-ups
    "RunSummary",
    "summarize",
    "daily_summary",
]
