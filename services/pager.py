"""
services/pager.py

Client-side pagination over an already-filtered table.
Pure functions: nothing here reads or writes session state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Sequence, Union

import pandas as pd

Records = Union[pd.DataFrame, Sequence[Any]]

PAGE_WINDOW = 5


@dataclass(frozen=True)
class PageSlice:
    records: Records
    total_pages: int
    start_record: int
    end_record: int
    total_records: int

    @property
    def is_empty(self) -> bool:
        return self.total_records == 0

    def summary(self) -> str:
        return f"Showing {self.start_record} to {self.end_record} of {self.total_records} entries"


def total_pages(n_records: int, rows_per_page: int) -> int:
    if n_records <= 0:
        return 0
    return math.ceil(n_records / rows_per_page)


def clamp_page(page: int, n_pages: int) -> int:
    return min(max(int(page), 1), max(n_pages, 1))


def paginate(records: Records, current_page: int, rows_per_page: int) -> PageSlice:
    """
    Slice one page out of `records`.
    A page past the end yields an empty slice; the caller decides whether to clamp.
    """
    if rows_per_page <= 0:
        raise ValueError(f"rows_per_page must be positive, got {rows_per_page!r}")
    if current_page < 1:
        raise ValueError(f"current_page must be >= 1, got {current_page!r}")

    n = len(records)
    start_idx = (current_page - 1) * rows_per_page
    end_idx = start_idx + rows_per_page

    if isinstance(records, pd.DataFrame):
        page = records.iloc[start_idx:end_idx]
    else:
        page = list(records[start_idx:end_idx])

    return PageSlice(
        records=page,
        total_pages=total_pages(n, rows_per_page),
        start_record=0 if n == 0 else start_idx + 1,
        end_record=min(current_page * rows_per_page, n),
        total_records=n,
    )


def page_window(current_page: int, n_pages: int, width: int = PAGE_WINDOW) -> List[int]:
    """
    Page numbers for a compact pager: a sliding window of `width` pages
    kept inside [1, n_pages] and centred on the current page where possible.
    """
    if n_pages <= width:
        return list(range(1, n_pages + 1))

    half = width // 2
    if current_page <= half + 1:
        first = 1
    elif current_page >= n_pages - half:
        first = n_pages - width + 1
    else:
        first = current_page - half
    return list(range(first, first + width))
