import logging

import streamlit as st

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="WFM Interval Metrics (Erlang-C)", layout="wide")

st.title("WFM Interval Metrics (Erlang-C)")
st.write(
    """
This app turns forecast volume, AHT, shrinkage and a shift roster into
**per-interval staffing metrics** for a 48-interval (30-minute) day.

Included:
- Volume and AHT matrices (days × intervals), uploaded or sample data
- Roster grid (intervals × shifts) with shift-block builder
- Shrinkage chain: out-of-office → in-office → billable break
- Erlang-C required agents, service level, occupancy, ASA
- Variance, call trend, influx and agent distribution per interval
- Run summary and daily summary
"""
)

st.info("Use the left sidebar to open the Staffing Dashboard.")
