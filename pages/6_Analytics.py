"""
pages/6_Analytics.py: Analytics

Portfolio-level KPIs:
- Ceded premiums by treaty (monthly)
- Reinsurance profitability by reinsurer
- Risk concentration
- Product-line exposure
"""

from __future__ import annotations

from pathlib import Path

import streamlit as st

from components.tables import kpi_row, show_fetch_error, show_table
from services.analytics import (
    AnalyticsFrames,
    ceded_premiums_by_month,
    format_whole_currency,
    kpi_summary,
)
from services.api_client import FetchError
from services.datasets import load_analytics
from services.normalizer import format_percent
from utils.loaders import default_root, load_app_settings
from utils.logging import get_logger, log_error

logger = get_logger(__name__)

st.set_page_config(page_title="Analytics", layout="wide")


@st.cache_data(show_spinner=False)
def load_analytics_cached(root_path: str) -> AnalyticsFrames:
    return load_analytics(load_app_settings(Path(root_path)))


def _reload():
    load_analytics_cached.clear()


st.title("Analytics")
st.caption("Ceded premiums, profitability and exposure across the reinsurance program")

try:
    with st.spinner("Loading analytics..."):
        frames = load_analytics_cached(str(default_root()))
except FetchError as err:
    log_error("analytics fetch failed", logger=logger, source=err.source)
    show_fetch_error(err, on_reload=_reload)
    st.stop()

kpi_row(kpi_summary(frames))
st.markdown("---")

# -------------------------------------------------
# Ceded premiums
# -------------------------------------------------
monthly = ceded_premiums_by_month(frames.ceded_premiums)
if not monthly.empty:
    monthly = monthly.apply(lambda s: s.map(format_whole_currency)).reset_index()
show_table(monthly, title="Ceded Premiums by Treaty", labels={"month": "Month"})

# -------------------------------------------------
# Profitability / concentration
# -------------------------------------------------
left, right = st.columns(2)

with left:
    prof = frames.profitability.copy()
    for c in ("income", "expenses", "net_profit"):
        prof[c] = prof[c].map(format_whole_currency)
    show_table(
        prof,
        title="Reinsurance Profitability",
        labels={"reinsurer": "Reinsurer", "income": "Income", "expenses": "Expenses", "net_profit": "Net Profit"},
    )

with right:
    risk = frames.risk_concentration.copy()
    risk["share_pct"] = risk["share_pct"].map(format_percent)
    risk["exposure"] = risk["exposure"].map(format_whole_currency)
    show_table(
        risk,
        title="Risk Concentration",
        labels={"reinsurer": "Reinsurer", "share_pct": "Share", "exposure": "Exposure"},
    )

# -------------------------------------------------
# Product lines
# -------------------------------------------------
lines = frames.product_lines.copy()
for c in ("exposure", "premiums"):
    lines[c] = lines[c].map(format_whole_currency)
show_table(
    lines,
    title="Product Line Analysis",
    labels={"product": "Product", "exposure": "Exposure", "premiums": "Premiums", "risk_level": "Risk Level"},
)
