"""
pages/4_Reinsurer_Transactions.py: Reinsurer Transactions

Policies ceded to one reinsurer under a treaty.

Query parameters: treaty, reinsurer, reinsurerName, start, end.
Missing values are shown as N/A.
"""

from __future__ import annotations

import streamlit as st

from components.tables import kpi_row
from components.views import render_table_view
from models.schema import SENTINEL

st.set_page_config(page_title="Reinsurer Transactions", layout="wide")


def _param(name: str) -> str:
    return st.query_params.get(name, "") or SENTINEL


treaty_id = st.query_params.get("treaty", "") or ""

st.title("Reinsurer Transactions")
st.caption("Policies ceded under the treaty")

kpi_row([
    ("Treaty ID", treaty_id or SENTINEL),
    ("Reinsurer ID", _param("reinsurer")),
    ("Reinsurer Name", _param("reinsurerName")),
    ("Period", f"{_param('start')} to {_param('end')}"),
])

st.markdown("---")

render_table_view(
    "reinsurer_transactions",
    view=f"reinsurer_transactions::{treaty_id or 'all'}",
    treaty_id=treaty_id,
)
