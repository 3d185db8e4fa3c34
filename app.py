#!/usr/bin/env python3
"""
Bitcoin Exclusivity Calculator - Streamlit App

Run with: streamlit run app.py
"""

import streamlit as st
import pandas as pd

from src.core.config import get_config
from src.core.types import PopulationMode, ValidationStatus
from src.engine import ExclusivityEngine
from src.output.formatters import format_btc, format_rarity_sentence

# Page config
st.set_page_config(
    page_title="Bitcoin Exclusivity Calculator",
    page_icon="₿",
    layout="centered"
)

config = get_config()
engine = ExclusivityEngine()

if "mode" not in st.session_state:
    st.session_state.mode = config.default_mode


def select_mode(mode: PopulationMode) -> None:
    st.session_state.mode = mode


st.header("Bitcoin Exclusivity Calculator")

# ============================================================================
# INPUT: population toggle and amount
# ============================================================================

col1, col2 = st.columns(2)

with col1:
    st.button(
        PopulationMode.CURRENT_ADDRESSES.display_name,
        type="primary" if st.session_state.mode is PopulationMode.CURRENT_ADDRESSES else "secondary",
        on_click=select_mode,
        args=(PopulationMode.CURRENT_ADDRESSES,),
        use_container_width=True,
    )

with col2:
    st.button(
        PopulationMode.GLOBAL_POPULATION.display_name,
        type="primary" if st.session_state.mode is PopulationMode.GLOBAL_POPULATION else "secondary",
        on_click=select_mode,
        args=(PopulationMode.GLOBAL_POPULATION,),
        use_container_width=True,
    )

raw_balance = st.text_input(
    "Enter your Bitcoin balance (in BTC):",
    placeholder="e.g., 1.5",
)

# Streamlit reruns the script on every change, so the report is always current
report = engine.evaluate(raw_balance, st.session_state.mode)

# ============================================================================
# RESULTS
# ============================================================================

if report.validation.status is ValidationStatus.EXCEEDS_SUPPLY:
    st.error(report.validation.message)
elif report.validation.status is ValidationStatus.EXCEEDS_LARGEST_KNOWN:
    st.warning(report.validation.message)

if report.show_holder_sentence:
    st.info(format_rarity_sentence(report.rarity))

    st.markdown(f"**Value of {format_btc(report.rarity.amount)} BTC in different scenarios:**")
    valuations = pd.DataFrame({
        "Scenario": [v.scenario.name for v in report.valuations],
        "Value": [v.formatted for v in report.valuations],
    })
    st.dataframe(valuations, use_container_width=True, hide_index=True)

st.caption(f"Note: {report.mode.note}")
