"""
components/filters.py

Streamlit filter widgets for the data grids.
Widgets stay thin: each one dispatches a named TableState event from its
on_change callback. No filtering logic lives here.
"""

from __future__ import annotations

import streamlit as st

from models.schema import TableSchema
from models.state import ROWS_PER_PAGE_OPTIONS, TableState


# -------------------------------------------------
# State plumbing
# -------------------------------------------------

def state_key(view: str) -> str:
    return f"grid::{view}"


def _widget_key(view: str, *parts: str) -> str:
    return "::".join((view,) + parts)


def get_table_state(view: str, default: TableState) -> TableState:
    """Per-view grid state; created on first visit."""
    key = state_key(view)
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def dispatch(view: str, event: str, *args) -> TableState:
    """Apply a named TableState transition and store the result."""
    key = state_key(view)
    new_state = getattr(st.session_state[key], event)(*args)
    st.session_state[key] = new_state
    return new_state


# -------------------------------------------------
# Callbacks
# -------------------------------------------------

def _on_search(view: str, field: str, widget: str):
    dispatch(view, "set_search", field, st.session_state.get(widget, ""))


def _on_column_filter(view: str, field: str, widget: str):
    dispatch(view, "set_column_filter", field, st.session_state.get(widget, ""))


def _on_date_range(view: str, from_widget: str, to_widget: str):
    dispatch(view, "set_date_range", st.session_state.get(from_widget, ""), st.session_state.get(to_widget, ""))


def _on_rows_per_page(view: str, widget: str):
    dispatch(view, "set_rows_per_page", int(st.session_state[widget]))


def _on_clear(view: str, schema: TableSchema):
    for key in schema.searchable_keys:
        st.session_state[_widget_key(view, "search", key)] = ""
    for key in schema.keys:
        st.session_state[_widget_key(view, "column", key)] = ""
    st.session_state[_widget_key(view, "date_from")] = ""
    st.session_state[_widget_key(view, "date_to")] = ""
    dispatch(view, "clear_filters")


# -------------------------------------------------
# Widgets
# -------------------------------------------------

def search_inputs(view: str, schema: TableSchema, state: TableState):
    """One search box per searchable field, laid out in a row."""
    fields = schema.searchable_keys
    if not fields:
        return
    cols = st.columns(len(fields))
    for col, field in zip(cols, fields):
        widget = _widget_key(view, "search", field)
        if widget not in st.session_state:
            st.session_state[widget] = state.filters.search.get(field, "")
        col.text_input(
            f"Search {schema.labels[field]}",
            key=widget,
            on_change=_on_search,
            args=(view, field, widget),
        )


def date_range_inputs(view: str, schema: TableSchema, state: TableState):
    if not schema.date_range:
        return
    lower, upper = schema.date_range
    from_widget = _widget_key(view, "date_from")
    to_widget = _widget_key(view, "date_to")
    if from_widget not in st.session_state:
        st.session_state[from_widget] = state.filters.date_from
    if to_widget not in st.session_state:
        st.session_state[to_widget] = state.filters.date_to

    c1, c2 = st.columns(2)
    c1.text_input(
        f"{schema.labels[lower]} on or after",
        key=from_widget,
        placeholder="YYYY-MM-DD",
        on_change=_on_date_range,
        args=(view, from_widget, to_widget),
    )
    c2.text_input(
        f"{schema.labels[upper]} on or before",
        key=to_widget,
        placeholder="YYYY-MM-DD",
        on_change=_on_date_range,
        args=(view, from_widget, to_widget),
    )


def column_filter_inputs(view: str, schema: TableSchema, state: TableState):
    """Per-column substring filters, collapsed by default."""
    active = state.filters.active_columns()
    with st.expander(f"Column filters ({len(active)} active)", expanded=bool(active)):
        cols = st.columns(3)
        for i, spec in enumerate(schema.columns):
            widget = _widget_key(view, "column", spec.key)
            if widget not in st.session_state:
                st.session_state[widget] = state.filters.columns.get(spec.key, "")
            cols[i % 3].text_input(
                spec.label,
                key=widget,
                placeholder=f"Filter {spec.label.lower()}...",
                on_change=_on_column_filter,
                args=(view, spec.key, widget),
            )


def rows_per_page_select(view: str, state: TableState, container=None):
    widget = _widget_key(view, "rows_per_page")
    if widget not in st.session_state:
        st.session_state[widget] = state.page.rows_per_page
    (container or st).selectbox(
        "Rows per page",
        options=list(ROWS_PER_PAGE_OPTIONS),
        key=widget,
        on_change=_on_rows_per_page,
        args=(view, widget),
    )


def clear_filters_button(view: str, schema: TableSchema, state: TableState, container=None):
    (container or st).button(
        "Clear filters",
        key=_widget_key(view, "clear"),
        disabled=state.filters.is_empty(),
        on_click=_on_clear,
        args=(view, schema),
    )


def seed_date_range(view: str, date_from: str, date_to: str):
    """
    Apply a date range coming from the URL. Re-applied only when the
    incoming range changes, so later edits in the inputs are kept.
    """
    marker = _widget_key(view, "seeded_range")
    seeded = (date_from, date_to)
    if st.session_state.get(marker) == seeded:
        return
    st.session_state[marker] = seeded
    if state_key(view) not in st.session_state:
        return
    st.session_state[_widget_key(view, "date_from")] = date_from
    st.session_state[_widget_key(view, "date_to")] = date_to
    dispatch(view, "set_date_range", date_from, date_to)
