# app.py
from __future__ import annotations

import streamlit as st

from utils.loaders import default_root, load_app_settings
from utils.logging import init_logging, log_info

init_logging()

# -------------------------------------------------
# App Configuration
# -------------------------------------------------
st.set_page_config(
    page_title="RECAP",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded",
)

settings = load_app_settings()


# -------------------------------------------------
# Small UI helper
# -------------------------------------------------
def _pill(label: str, value: str):
    st.markdown(
        f"""
        <div style="
            display:inline-block;
            padding:6px 10px;
            margin:4px 6px 4px 0;
            border-radius:999px;
            border:1px solid rgba(49,51,63,0.18);
            background:rgba(49,51,63,0.04);
            font-size:13px;">
            <b>{label}:</b> {value}
        </div>
        """,
        unsafe_allow_html=True,
    )


# -------------------------------------------------
# Sidebar
# -------------------------------------------------
st.sidebar.title("RECAP")
st.sidebar.caption("Reinsurance back office")
st.sidebar.markdown("---")

st.sidebar.subheader("Environment")
st.sidebar.info(
    f"""
**Mode:** {settings.mode}  
**Version:** {settings.version}  
**Rows per page:** {settings.default_rows_per_page}  
"""
)


# -------------------------------------------------
# Landing
# -------------------------------------------------
st.title("Reinsurance Back Office")
st.caption("Policies, reinsurers and treaty transactions in one place.")

st.subheader("Views")
st.markdown(
    """
1. **Policy Details**: search policies by number, product or firm  
2. **Reinsurer Details**: partners, treaties and quota shares  
3. **Policy Transactions**: premiums and commissions ceded under a treaty  
4. **Reinsurer Transactions**: policies ceded to one reinsurer  
5. **Policy Detail View**: period activity for a single policy  
6. **Analytics**: ceded premiums, profitability and exposure  
"""
)

st.markdown("---")

with st.expander("Data sources", expanded=False):
    for kind, source in settings.sources.items():
        _pill(kind, source)
    _pill("Root", str(default_root()))

log_info("landing rendered", mode=settings.mode, version=settings.version)
