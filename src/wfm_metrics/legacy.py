"""
Linear staffing approximations from the first revision of the planning sheet.

These ignore queueing entirely: required agents is staff hours divided by the
productive hours one agent contributes to a 30-minute interval. They are kept
for comparison runs (pipeline method="workload"); Erlang-C is the default.
"""
from __future__ import annotations

from .intervals import INTERVAL_HOURS


def agent_work_hours(out_of_office_pct: float, billable_break_pct: float) -> float:
    """Productive hours per agent per interval: 0.5 * (1 - (ooo + bb)/100)."""
    return INTERVAL_HOURS * (1.0 - (float(out_of_office_pct) + float(billable_break_pct)) / 100.0)


def staff_hours(volume: float, aht_seconds: float) -> float:
    return float(volume) * float(aht_seconds) / 3600.0


def workload_required_agents(
    volume: float,
    aht_seconds: float,
    out_of_office_pct: float,
    billable_break_pct: float,
) -> float:
    work = agent_work_hours(out_of_office_pct, billable_break_pct)
    if volume <= 0 or work <= 0:
        return 0.0
    return staff_hours(volume, aht_seconds) / work


def workload_occupancy(
    volume: float,
    aht_seconds: float,
    agents: float,
    out_of_office_pct: float,
    billable_break_pct: float,
) -> float:
    """Busy time over available time, in percent, capped at 100."""
    work = agent_work_hours(out_of_office_pct, billable_break_pct)
    if agents <= 0 or work <= 0:
        return 0.0
    return min(100.0, staff_hours(volume, aht_seconds) / (float(agents) * work) * 100.0)


__all__ = [
    "agent_work_hours",
    "staff_hours",
    "workload_required_agents",
    "workload_occupancy",
]
