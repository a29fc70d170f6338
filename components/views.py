"""
components/views.py

Shared page skeleton for the table views: load (spinner), error panel,
empty state, then the data grid. Each page only supplies its table kind
and header context.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import streamlit as st

from components.tables import render_data_grid, show_data_health, show_fetch_error
from models.state import TableState
from models.tables import get_schema
from services.api_client import FetchError
from services.datasets import TableLoad, load_table
from utils.loaders import default_root, load_app_settings
from utils.logging import get_logger, log_error

logger = get_logger(__name__)


@st.cache_data(show_spinner=False)
def load_table_cached(root_path: str, kind: str, treaty_id: str = "") -> TableLoad:
    settings = load_app_settings(Path(root_path))
    params = {"treaty_id": treaty_id} if treaty_id else {}
    return load_table(kind, settings, **params)


def _reload():
    load_table_cached.clear()


def render_table_view(
    kind: str,
    view: Optional[str] = None,
    default_state: Optional[TableState] = None,
    treaty_id: str = "",
) -> Optional[TableLoad]:
    """
    Render one table page body. Returns the loaded table, or None on fetch failure.
    """
    schema = get_schema(kind)
    view = view or kind
    root = str(default_root())

    if default_state is None:
        settings = load_app_settings(Path(root))
        default_state = TableState.initial(rows_per_page=settings.default_rows_per_page)

    try:
        with st.spinner(f"Loading {schema.title.lower()}..."):
            loaded = load_table_cached(root, kind, treaty_id)
    except FetchError as err:
        log_error("view fetch failed", logger=logger, view=view, source=err.source, status=err.status_code)
        show_fetch_error(err, on_reload=_reload)
        return None

    render_data_grid(view, schema, loaded.records, default_state=default_state)

    show_data_health(loaded.issues)
    return loaded
