"""
services/filter_engine.py

Client-side filtering for the data grids.

A record is kept only when every constraint holds:
- each named search text is a case-insensitive substring of its field
- each non-empty column filter is a case-insensitive substring of its field
- the date-range pair (when the table has one): lower field >= date_from,
  upper field <= date_to, compared as "YYYY-MM-DD" strings

Empty texts impose no constraint. Numeric and date columns are matched on
their display string, the same as text columns.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

import pandas as pd

from models.schema import SENTINEL, TableSchema
from models.state import FilterState


def _contains(series: pd.Series, pattern: str) -> pd.Series:
    return series.astype(str).str.lower().str.contains(pattern.lower(), regex=False)


def _field_mask(df: pd.DataFrame, key: str, pattern: str) -> pd.Series:
    if key not in df.columns:
        # a field the record does not have cannot contain the pattern
        return pd.Series(False, index=df.index)
    return _contains(df[key], pattern)


def _date_bound_mask(df: pd.DataFrame, key: str, bound: str, lower: bool) -> pd.Series:
    if key not in df.columns:
        return pd.Series(False, index=df.index)
    values = df[key].astype(str)
    known = values != SENTINEL
    return known & ((values >= bound) if lower else (values <= bound))


def check_filter_fields(filters: FilterState, schema: TableSchema) -> None:
    """Raise ValueError when a filter names a field the table does not have."""
    unknown_search = [k for k in filters.search if k not in schema.searchable_keys]
    if unknown_search:
        raise ValueError(f"{schema.name}: unknown search field(s) {unknown_search}")
    unknown_columns = [k for k in filters.columns if k not in schema.keys]
    if unknown_columns:
        raise ValueError(f"{schema.name}: unknown column filter(s) {unknown_columns}")


def build_mask(
    df: pd.DataFrame,
    filters: FilterState,
    date_range: Optional[Tuple[str, str]] = None,
) -> pd.Series:
    """Boolean Series aligned to df.index: True for rows that pass every filter."""
    mask = pd.Series(True, index=df.index)

    for key, text in filters.search.items():
        if text:
            mask &= _field_mask(df, key, text)

    for key, text in filters.columns.items():
        if text:
            mask &= _field_mask(df, key, text)

    if date_range:
        lower_key, upper_key = date_range
        if filters.date_from:
            mask &= _date_bound_mask(df, lower_key, filters.date_from, lower=True)
        if filters.date_to:
            mask &= _date_bound_mask(df, upper_key, filters.date_to, lower=False)

    return mask


def apply_filters(
    df: pd.DataFrame,
    filters: FilterState,
    date_range: Optional[Tuple[str, str]] = None,
) -> pd.DataFrame:
    """Filtered copy of df, original row order kept."""
    if filters.is_empty():
        return df.copy()
    return df[build_mask(df, filters, date_range)].copy()


def record_matches(
    record: Mapping[str, Any],
    filters: FilterState,
    date_range: Optional[Tuple[str, str]] = None,
) -> bool:
    """Predicate for a single display record."""
    frame = pd.DataFrame([dict(record)])
    return bool(build_mask(frame, filters, date_range).iloc[0])
