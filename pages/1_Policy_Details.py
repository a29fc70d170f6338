"""
pages/1_Policy_Details.py: Policy Details

Policy grid sourced from the policy landing endpoint:
- Search by policy number, product name, or firm name
- Per-column filters
- Client-side pagination
"""

from __future__ import annotations

import streamlit as st

from components.views import render_table_view

# -------------------------------------------------
# Page Configuration
# -------------------------------------------------
st.set_page_config(page_title="Policy Details", layout="wide")

st.title("Policy Details")
st.caption("Search and filter policy information")

st.markdown("---")

render_table_view("policies")
