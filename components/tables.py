"""
components/tables.py

Reusable table renderers: the filterable / paginated data grid, the pager
controls, KPI rows and the blocking error panel.
"""

from __future__ import annotations

from typing import Callable, Optional

import pandas as pd
import streamlit as st

from components.filters import (
    clear_filters_button,
    column_filter_inputs,
    date_range_inputs,
    dispatch,
    get_table_state,
    rows_per_page_select,
    search_inputs,
)
from models.schema import TableSchema
from models.state import TableState
from services.api_client import FetchError
from services.filter_engine import apply_filters, check_filter_fields
from services.pager import PageSlice, page_window, paginate, total_pages
from utils.validators import summarize_issues


def _dataframe(df: pd.DataFrame, height: int | None = None):
    # st.dataframe does not accept height=None
    extra = {"height": height} if height else {}
    st.dataframe(df, width="stretch", hide_index=True, **extra)


def show_table(df: pd.DataFrame, title: str | None = None, height: int | None = None, labels: dict | None = None):
    if title:
        st.subheader(title)
    if df.empty:
        st.info("No records found.")
        return
    view = df.astype(str).rename(columns=labels) if labels else df.astype(str)
    _dataframe(view, height)


def kpi_row(items: list[tuple[str, str]]):
    """items: list of (label, value)"""
    cols = st.columns(len(items))
    for col, (label, value) in zip(cols, items):
        col.metric(label, value)


def show_fetch_error(err: FetchError, on_reload: Optional[Callable[[], None]] = None):
    """Blocking error state with a manual reload (no automatic retry)."""
    st.error(f"Error loading data: {err}")
    detail = f"status {err.status_code}" if err.status_code else err.detail
    if detail:
        st.caption(f"Source: {err.source} ({detail})")
    st.button("Reload page", type="primary", on_click=on_reload)


def pager_controls(view: str, page: PageSlice, current_page: int):
    """Previous / numbered window / Next buttons."""
    if page.total_pages <= 1:
        return

    window = page_window(current_page, page.total_pages)
    cols = st.columns(len(window) + 2)

    cols[0].button(
        "Previous",
        key=f"{view}::prev",
        disabled=current_page <= 1,
        on_click=dispatch,
        args=(view, "set_page", current_page - 1, page.total_pages),
    )
    for col, n in zip(cols[1:-1], window):
        col.button(
            str(n),
            key=f"{view}::page::{n}",
            type="primary" if n == current_page else "secondary",
            on_click=dispatch,
            args=(view, "set_page", n, page.total_pages),
        )
    cols[-1].button(
        "Next",
        key=f"{view}::next",
        disabled=current_page >= page.total_pages,
        on_click=dispatch,
        args=(view, "set_page", current_page + 1, page.total_pages),
    )


def render_data_grid(
    view: str,
    schema: TableSchema,
    records: pd.DataFrame,
    default_state: Optional[TableState] = None,
    height: int | None = None,
) -> PageSlice:
    """
    Full grid for one view: search boxes, column filters, table, pager.
    Filtering and paging are recomputed from the stored state on every rerun.
    """
    state = get_table_state(view, default_state or TableState())
    check_filter_fields(state.filters, schema)

    search_inputs(view, schema, state)
    date_range_inputs(view, schema, state)
    column_filter_inputs(view, schema, state)

    filtered = apply_filters(records, state.filters, schema.date_range)

    # stored page may be past the end of a smaller filtered set
    n_pages = total_pages(len(filtered), state.page.rows_per_page)
    if state.page.current_page > max(n_pages, 1):
        state = dispatch(view, "set_page", state.page.current_page, n_pages)

    page = paginate(filtered, state.page.current_page, state.page.rows_per_page)

    c1, c2, c3 = st.columns([3, 1, 1])
    c1.caption(page.summary())
    rows_per_page_select(view, state, container=c2)
    clear_filters_button(view, schema, state, container=c3)

    if filtered.empty:
        st.info("No records found.")
        return page

    _dataframe(page.records.astype(str).rename(columns=schema.labels), height)
    pager_controls(view, page, state.page.current_page)
    return page


def _status_badge(ok: bool) -> str:
    return "🟢 OK" if ok else "🟡 Attention"


def show_data_health(issues: list, expanded: bool = False):
    """Payload findings for the current view; informational only."""
    if not issues:
        return
    summary = summarize_issues(issues)
    with st.expander(f"Data health {_status_badge(summary['errors'] == 0)} ({summary['total']} findings)", expanded=expanded):
        for issue in issues:
            st.caption(f"[{issue.severity}] {issue.table}: {issue.message}")
