"""
pages/2_Reinsurer_Details.py: Reinsurer Details

Reinsurance partners and their treaties: quota share and treaty period.
"""

from __future__ import annotations

import streamlit as st

from components.views import render_table_view

st.set_page_config(page_title="Reinsurer Details", layout="wide")

st.title("Reinsurer Details")
st.caption("Manage and view information about your reinsurance partners")

st.markdown("---")

render_table_view("reinsurers")
