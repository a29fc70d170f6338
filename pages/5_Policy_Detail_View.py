"""
pages/5_Policy_Detail_View.py: Policy Detail View

One policy's period activity:
1) Policy-level card (product, period, activity amounts)
2) Reinsurer-level table (one row per treaty the policy is ceded to)

The policy is chosen with ?policy=<number> or the input below.
"""

from __future__ import annotations

from pathlib import Path

import streamlit as st

from components.tables import show_data_health, show_fetch_error, show_table
from models.schema import SENTINEL
from models.tables import POLICY_LEVEL, REINSURER_LEVELS
from services.api_client import FetchError
from services.datasets import PolicyDetails, load_policy_details
from utils.loaders import default_root, load_app_settings
from utils.logging import get_logger, log_error

logger = get_logger(__name__)

st.set_page_config(page_title="Policy Detail View", layout="wide")


@st.cache_data(show_spinner=False)
def load_details_cached(root_path: str, policy_number: str) -> PolicyDetails:
    settings = load_app_settings(Path(root_path))
    return load_policy_details(policy_number, settings)


def _reload():
    load_details_cached.clear()


def _card(record: dict, columns_per_row: int = 3):
    """Label / value grid for a single normalized record."""
    specs = list(POLICY_LEVEL.columns)
    for i in range(0, len(specs), columns_per_row):
        cols = st.columns(columns_per_row)
        for col, spec in zip(cols, specs[i:i + columns_per_row]):
            col.caption(spec.label)
            col.markdown(f"**{record.get(spec.key, SENTINEL)}**")


st.title("Policy Detail View")
st.caption("Policy-level and reinsurer-level activity for the period")

policy_number = st.text_input(
    "Policy number",
    value=st.query_params.get("policy", "") or "",
    placeholder="e.g. POL001",
).strip()

if not policy_number:
    st.info("Enter a policy number to view its details.")
    st.stop()

st.query_params["policy"] = policy_number
st.markdown("---")

try:
    with st.spinner("Loading policy details..."):
        details = load_details_cached(str(default_root()), policy_number)
except FetchError as err:
    log_error("policy details fetch failed", logger=logger, policy=policy_number, source=err.source)
    show_fetch_error(err, on_reload=_reload)
    st.stop()

st.subheader("Policy Level")
_card(details.policy_level)

st.markdown("---")
show_table(details.reinsurer_levels, title="Reinsurer Level", labels=REINSURER_LEVELS.labels)

show_data_health(details.issues)
