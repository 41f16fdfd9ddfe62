#!/usr/bin/env python3
"""
Data Allocation Categorizer - Streamlit App

Run with: streamlit run app.py
"""

import logging

import streamlit as st

from allocation_categorizer.core.config import get_config_or_default
from allocation_categorizer.output.charts import build_bar_chart, summary_dataframe
from allocation_categorizer.state import SessionState

config = get_config_or_default()
logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

PLACEHOLDER = (
    "Paste your data here...\n"
    "Example:\n"
    "02444XXXX 20GB\n"
    "059XXXXXX 50GB\n"
    "024961XXXX 10GB"
)

# Page config
st.set_page_config(
    page_title=config.page_title,
    page_icon="📊",
    layout="wide"
)

if "categorizer" not in st.session_state:
    st.session_state.categorizer = SessionState()

state: SessionState = st.session_state.categorizer

# ============================================================================
# HEADER
# ============================================================================

st.title(config.page_title)
st.markdown("Parse and visualize your data allocations with ease")

# ============================================================================
# INPUT
# ============================================================================

raw_input = st.text_area(
    "Data Input",
    key="raw_input_buffer",
    height=200,
    placeholder=PLACEHOLDER,
)
if raw_input != state.raw_input:
    state = state.edit(raw_input)
    st.session_state.categorizer = state

col_count, col_button = st.columns([3, 1])

with col_count:
    st.caption(f"{state.lines_detected} lines detected")

with col_button:
    if st.button("Process Data", disabled=not state.can_process, type="primary"):
        state = state.process()
        st.session_state.categorizer = state

st.markdown("---")

# ============================================================================
# RESULTS
# ============================================================================

if state.has_results:
    summary = state.summary
    col_table, col_chart = st.columns(2)

    with col_table:
        st.subheader("Summary")
        st.markdown(f"**{summary.total_entries} total entries**")
        st.dataframe(
            summary_dataframe(summary),
            use_container_width=True,
            hide_index=True,
            column_config={
                "Percentage": st.column_config.ProgressColumn(
                    "Percentage",
                    format=f"%.{config.percentage_decimals}f%%",
                    min_value=0,
                    max_value=100,
                ),
            },
        )

    with col_chart:
        st.subheader("Visualization")
        st.plotly_chart(build_bar_chart(summary, config), use_container_width=True)

elif not state.can_process:
    st.info(
        "**Ready to Process Data**\n\n"
        "Paste your data in the input field above and click \"Process Data\" "
        "to see allocation summaries and visualizations."
    )
