from __future__ import annotations

import io
import logging
from dataclasses import asdict
from datetime import date
from typing import Any, Optional, cast

import numpy as np
import pandas as pd
import streamlit as st

from wfm_metrics.aggregation import aggregate_intervals
from wfm_metrics.config import StaffingConfig, load_config_from_env, validate_config
from wfm_metrics.intervals import interval_display_label, interval_grid
from wfm_metrics.io import read_matrix_csv
from wfm_metrics.pipeline import RequirementMethod, compute_interval_metrics, records_to_frame
from wfm_metrics.roster import roster_from_shift_starts, total_rostered, uniform_roster
from wfm_metrics.shrinkage import shrinkage_breakdown
from wfm_metrics.summary import daily_summary, summarize
from wfm_metrics.validation import (
    flag_intervals,
    validate_aht_matrix,
    validate_roster_matrix,
    validate_volume_matrix,
)

logging.basicConfig(level=logging.INFO)


def _normalize_date_input(x: Any, fallback: date) -> date:
    """Streamlit date_input may hand back a date, a (start, end) tuple, or None."""
    if isinstance(x, (tuple, list)):
        return cast(date, x[0]) if len(x) >= 1 and x[0] is not None else fallback
    if isinstance(x, date):
        return x
    return fallback


def _sample_matrices(days: int, seed: int = 7) -> tuple[np.ndarray, np.ndarray]:
    """Sample day × interval volume (daytime bell) and AHT (24-28 minutes)."""
    rng = np.random.default_rng(seed)
    hours = np.arange(48) / 2.0
    shape = np.exp(-0.5 * ((hours - 13.0) / 3.5) ** 2)
    volume = rng.poisson(lam=12.0 * shape, size=(days, 48))
    aht = rng.integers(1440, 1680, size=(days, 48))
    return volume, aht


# -----------------------------
# Page config
# -----------------------------
st.set_page_config(page_title="Staffing Dashboard", layout="wide")
st.title("Staffing Dashboard")
st.caption("Per-interval requirement vs. roster using the shrinkage chain and Erlang-C.")

try:
    env_cfg = load_config_from_env()
except (RuntimeError, ValueError) as e:
    st.warning(f"Ignoring environment configuration: {e}")
    env_cfg = StaffingConfig()


# -----------------------------
# Sidebar controls
# -----------------------------
with st.sidebar:
    st.header("Date Range")
    raw_day = st.date_input("From", value=date(2025, 6, 29))
    from_date = _normalize_date_input(raw_day, fallback=date(2025, 6, 29))
    weeks = st.selectbox("Weeks", [4, 8, 12], index=0)
    days = int(weeks) * 7

    st.divider()
    st.header("Configuration")
    planned_aht = st.number_input("Planned AHT (seconds)", min_value=1, value=int(env_cfg.planned_aht_seconds), step=10)
    sla_target = st.number_input("SLA target (%)", min_value=1.0, max_value=100.0, value=float(env_cfg.sla_target), step=1.0)
    service_time = st.number_input("Service time (seconds)", min_value=1, value=int(env_cfg.service_time_seconds), step=1)
    out_of_office = st.number_input("Out-of-office shrinkage (%)", min_value=0.0, max_value=99.99, value=float(env_cfg.out_of_office_shrinkage))
    in_office = st.number_input("In-office shrinkage (%)", min_value=0.0, max_value=99.99, value=float(env_cfg.in_office_shrinkage))
    billable_break = st.number_input("Billable break (%)", min_value=0.0, max_value=99.99, value=float(env_cfg.billable_break))

    st.divider()
    st.header("Method")
    method_str = st.radio("Required agents", ["erlang_c", "workload"], index=0, help="workload = legacy linear approximation")
    method = cast(RequirementMethod, method_str)


cfg = StaffingConfig(
    planned_aht_seconds=float(planned_aht),
    sla_target=float(sla_target),
    service_time_seconds=float(service_time),
    in_office_shrinkage=float(in_office),
    out_of_office_shrinkage=float(out_of_office),
    billable_break=float(billable_break),
)

try:
    validate_config(cfg)
except ValueError as e:
    st.error(f"Invalid configuration: {e}")
    st.stop()


# -----------------------------
# Volume / AHT inputs
# -----------------------------
st.subheader("Volume and AHT")
mode = st.radio("Input mode", ["Sample data", "Upload CSV"], index=0, horizontal=True)

volume_matrix: Optional[Any] = None
aht_matrix: Optional[Any] = None

if mode == "Sample data":
    volume_matrix, aht_matrix = _sample_matrices(days)
else:
    c1, c2 = st.columns(2)
    with c1:
        vol_file = st.file_uploader("Volume CSV (days × 48, first column = day label)", type=["csv"])
    with c2:
        aht_file = st.file_uploader("AHT CSV (optional, same shape)", type=["csv"])

    if vol_file is None:
        st.info("Upload a volume CSV to continue.")
        st.stop()

    try:
        volume_matrix = read_matrix_csv(vol_file, "volume", header=True, label_column=True)
        if aht_file is not None:
            aht_matrix = read_matrix_csv(aht_file, "aht", header=True, label_column=True)
    except Exception as e:
        st.error(f"Could not read CSV: {e}")
        st.stop()


# -----------------------------
# Roster
# -----------------------------
st.subheader("Roster")
roster_mode = st.radio("Roster", ["Shift builder", "Uniform", "Upload CSV"], index=0, horizontal=True)

if roster_mode == "Uniform":
    count = st.number_input("Agents per shift cell", min_value=0, value=1, step=1)
    roster = uniform_roster(int(count))
elif roster_mode == "Upload CSV":
    roster_file = st.file_uploader("Roster CSV (48 rows × shifts, no header)", type=["csv"])
    if roster_file is None:
        st.info("Upload a roster CSV to continue.")
        st.stop()
    try:
        roster = read_matrix_csv(roster_file, "roster")
    except Exception as e:
        st.error(f"Could not read roster CSV: {e}")
        st.stop()
else:
    shift_length = st.slider("Shift length (intervals)", 1, 48, 17)
    starts = st.data_editor(
        pd.DataFrame({"start_interval": [14, 16, 18, 20], "agents": [4, 6, 6, 4]}),
        num_rows="dynamic",
        use_container_width=True,
    )
    rows = starts.dropna()
    if rows["start_interval"].duplicated().any():
        st.caption("Rows sharing a start interval are combined into one shift block.")
    try:
        roster = roster_from_shift_starts(
            zip(rows["start_interval"].astype(int), rows["agents"].astype(int)),
            shift_length=int(shift_length),
        )
    except ValueError as e:
        st.error(f"Invalid shift rows: {e}")
        st.stop()

    with st.expander("Interval reference", expanded=False):
        grid = interval_grid()
        grid["label_12h"] = [interval_display_label(i) for i in grid["interval_index"]]
        st.dataframe(grid, use_container_width=True, hide_index=True)

try:
    validate_volume_matrix(volume_matrix)
    validate_aht_matrix(aht_matrix)
    validate_roster_matrix(roster)
except ValueError as e:
    st.error(str(e))
    st.stop()

st.caption(f"Total rostered agent-intervals: {total_rostered(roster)}")


# -----------------------------
# Metrics
# -----------------------------
records = compute_interval_metrics(volume_matrix, aht_matrix, roster, cfg, days=days, method=method)
summary = summarize(records)

c1, c2, c3, c4 = st.columns(4)
c1.metric("Service level", f"{summary.service_level:.1f}%")
c2.metric("Occupancy", f"{summary.occupancy:.1f}%")
c3.metric("Effective volume", f"{summary.total_volume:,.0f}")
c4.metric("Intervals short", f"{summary.intervals_short} / {summary.intervals}")

if summary.intervals_target_unreachable:
    st.warning(f"{summary.intervals_target_unreachable} interval(s) cannot reach the SLA target.")

out = records_to_frame(records)
if not out.empty:
    out.insert(1, "time_12h", [interval_display_label(r.interval_index) for r in records])

st.subheader("Calculated Metrics")
st.dataframe(out, use_container_width=True)

if not out.empty:
    st.bar_chart(out.set_index("time")[["actual", "requirement"]])

with st.expander("Shrinkage breakdown (per 100 calls)", expanded=False):
    steps = shrinkage_breakdown(100.0, *cfg.shrinkage_percentages)
    st.table(pd.DataFrame([asdict(s) for s in steps]))

with st.expander("Interval flags", expanded=False):
    flags = flag_intervals(
        aggregate_intervals(volume_matrix, aht_matrix, roster, cfg.planned_aht_seconds, days=days)
    )
    st.dataframe(flags, use_container_width=True)

st.subheader("Daily Summary")
st.dataframe(
    daily_summary(volume_matrix, aht_matrix, roster, cfg, from_date=from_date, days=days),
    use_container_width=True,
)

buf = io.StringIO()
out.to_csv(buf, index=False)
st.download_button(
    label="Download metrics CSV",
    data=buf.getvalue(),
    file_name="interval_metrics.csv",
    mime="text/csv",
)
