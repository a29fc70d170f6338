"""
pages/3_Policy_Transactions.py: Policy Transactions

Treaty-level policy transactions (premium, commission, quota share, net).

Query parameters (all optional):
  treaty, reinsurer, policy   shown as header context
  start, end                  seed the effective / expiration date range
"""

from __future__ import annotations

import streamlit as st

from components.filters import seed_date_range
from components.tables import kpi_row
from components.views import render_table_view
from models.schema import SENTINEL
from models.state import TableState
from services.normalizer import format_date
from utils.loaders import load_app_settings

st.set_page_config(page_title="Policy Transactions", layout="wide")


def _param(name: str) -> str:
    return st.query_params.get(name, "") or ""


def _date_param(name: str) -> str:
    value = format_date(_param(name))
    return "" if value == SENTINEL else value


treaty_id = _param("treaty")
period_start = _date_param("start")
period_end = _date_param("end")

st.title("Policy Transactions")
st.caption("Transactions ceded under the selected treaty")

kpi_row([
    ("Treaty ID", treaty_id or SENTINEL),
    ("Reinsurer", _param("reinsurer") or SENTINEL),
    ("Period Start", period_start or SENTINEL),
    ("Period End", period_end or SENTINEL),
])

st.markdown("---")

settings = load_app_settings()
seed_date_range("policy_transactions", period_start, period_end)
render_table_view(
    "policy_transactions",
    default_state=TableState.initial(
        rows_per_page=settings.default_rows_per_page,
        date_from=period_start,
        date_to=period_end,
    ),
)
