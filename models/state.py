"""
models/state.py

Immutable grid state for one table view.
Every transition returns a new TableState; filter and page-size changes
always send the view back to page 1.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Mapping

from services.pager import clamp_page

ROWS_PER_PAGE_OPTIONS = (15, 25, 50, 100)
DEFAULT_ROWS_PER_PAGE = 15


@dataclass(frozen=True)
class FilterState:
    """
    search:   named free-text queries (one per searchable field)
    columns:  per-column substring filters
    date_from / date_to: bounds for the table's date-range pair, "YYYY-MM-DD" or ""
    """
    search: Mapping[str, str] = field(default_factory=dict)
    columns: Mapping[str, str] = field(default_factory=dict)
    date_from: str = ""
    date_to: str = ""

    def is_empty(self) -> bool:
        return (
            not any(self.search.values())
            and not any(self.columns.values())
            and not self.date_from
            and not self.date_to
        )

    def active_columns(self) -> Dict[str, str]:
        return {k: v for k, v in self.columns.items() if v}


@dataclass(frozen=True)
class PageState:
    current_page: int = 1
    rows_per_page: int = DEFAULT_ROWS_PER_PAGE

    def __post_init__(self):
        if self.rows_per_page not in ROWS_PER_PAGE_OPTIONS:
            raise ValueError(
                f"rows_per_page must be one of {ROWS_PER_PAGE_OPTIONS}, got {self.rows_per_page!r}"
            )
        if self.current_page < 1:
            raise ValueError(f"current_page must be >= 1, got {self.current_page!r}")


@dataclass(frozen=True)
class TableState:
    filters: FilterState = field(default_factory=FilterState)
    page: PageState = field(default_factory=PageState)

    @classmethod
    def initial(cls, rows_per_page: int = DEFAULT_ROWS_PER_PAGE, date_from: str = "", date_to: str = "") -> "TableState":
        return cls(
            filters=FilterState(date_from=date_from, date_to=date_to),
            page=PageState(rows_per_page=rows_per_page),
        )

    def _with_filters(self, filters: FilterState) -> "TableState":
        return replace(self, filters=filters, page=replace(self.page, current_page=1))

    # ---- filter events ----
    def set_search(self, key: str, text: str) -> "TableState":
        search = {**self.filters.search, key: text or ""}
        return self._with_filters(replace(self.filters, search=search))

    def set_column_filter(self, key: str, text: str) -> "TableState":
        columns = {**self.filters.columns, key: text or ""}
        return self._with_filters(replace(self.filters, columns=columns))

    def set_date_range(self, date_from: str = "", date_to: str = "") -> "TableState":
        return self._with_filters(replace(self.filters, date_from=date_from or "", date_to=date_to or ""))

    def clear_filters(self) -> "TableState":
        return self._with_filters(FilterState())

    # ---- page events ----
    def set_rows_per_page(self, rows_per_page: int) -> "TableState":
        return replace(self, page=PageState(current_page=1, rows_per_page=rows_per_page))

    def set_page(self, page: int, total_pages: int) -> "TableState":
        return replace(self, page=replace(self.page, current_page=clamp_page(page, total_pages)))
