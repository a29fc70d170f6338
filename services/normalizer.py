"""
services/normalizer.py

Turns loosely-typed API records into display records:
- raw field names resolved case-insensitively via the table schema
- currency / percent / date / integer fields parsed and formatted
- anything missing or unparseable becomes the "N/A" placeholder

A bad value only affects its own field; a bad record never aborts the batch.
"""

from __future__ import annotations

import datetime as _dt
import math
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd

from models.schema import SENTINEL, ColumnSpec, TableSchema
from utils.logging import get_logger, log_warn

logger = get_logger(__name__)

_ISO_DATE_PREFIX = re.compile(r"^\s*(\d{4}-\d{2}-\d{2})")


# =====================================================
# Value parsers / formatters
# =====================================================

def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return False


def _to_float(value: Any) -> Optional[float]:
    """Parse numbers and numeric strings ("$1,234.50", "35%"); None when not parseable."""
    if _is_missing(value) or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace("$", "").replace(",", "").replace("%", "")
        if not value:
            return None
    try:
        v = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(v):
        return None
    return v


def format_currency(value: Any, scale: float = 1.0) -> str:
    v = _to_float(value)
    if v is None:
        return SENTINEL
    v = v * scale
    sign = "-" if round(v, 2) < 0 else ""
    return f"{sign}${abs(v):,.2f}"


def format_percent(value: Any, scale: float = 1.0) -> str:
    v = _to_float(value)
    if v is None:
        return SENTINEL
    return f"{v * scale:.2f}%"


def format_integer(value: Any, scale: float = 1.0) -> Any:
    v = _to_float(value)
    if v is None:
        return SENTINEL
    v = v * scale
    return int(v) if v.is_integer() else v


def format_date(value: Any) -> str:
    """
    Any parseable timestamp -> "YYYY-MM-DD" (UTC).
    Dates outside the pandas timestamp range keep their ISO date prefix.
    """
    if _is_missing(value) or isinstance(value, (bool, int, float)):
        return SENTINEL
    if isinstance(value, str) and not value.strip():
        return SENTINEL
    if not isinstance(value, (str, _dt.date)):
        return SENTINEL

    ts = pd.to_datetime(value, errors="coerce", utc=True)
    if not pd.isna(ts):
        return ts.strftime("%Y-%m-%d")

    if isinstance(value, str):
        m = _ISO_DATE_PREFIX.match(value)
        if m:
            try:
                return _dt.date.fromisoformat(m.group(1)).isoformat()
            except ValueError:
                return SENTINEL
    return SENTINEL


def format_text(value: Any) -> str:
    if _is_missing(value):
        return SENTINEL
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return value if isinstance(value, str) else str(value)


def format_value(value: Any, col: ColumnSpec) -> Any:
    if col.kind == "currency":
        return format_currency(value, col.scale)
    if col.kind == "percent":
        return format_percent(value, col.scale)
    if col.kind == "integer":
        return format_integer(value, col.scale)
    if col.kind == "date":
        return format_date(value)
    return format_text(value)


# =====================================================
# Record helpers
# =====================================================

def lower_keys(record: Mapping) -> Dict[str, Any]:
    return {str(k).strip().lower(): v for k, v in record.items()}


def pick_source(record: Mapping[str, Any], sources: Iterable[str]) -> Any:
    """First candidate source present in the (lower-cased) record."""
    for s in sources:
        k = s.strip().lower()
        if k in record:
            return record[k]
    return None


# =====================================================
# Main
# =====================================================

def _normalize_row(record: Mapping[str, Any], schema: TableSchema) -> Dict[str, Any]:
    return {col.key: format_value(pick_source(record, col.sources), col) for col in schema.columns}


def normalize_record(raw: Any, schema: TableSchema) -> Dict[str, Any]:
    """Normalize one raw record; a non-object record comes back as all placeholders."""
    record = lower_keys(raw) if isinstance(raw, Mapping) else {}
    return _normalize_row(record, schema)


def normalize_records(raw: Iterable[Any], schema: TableSchema) -> pd.DataFrame:
    """
    Normalize a batch of raw records into a DataFrame of display records.
    Output has one row per input record (same order) and exactly the schema's columns.
    """
    items = list(raw or [])
    not_mappings = sum(1 for item in items if not isinstance(item, Mapping))
    if not_mappings:
        log_warn("non-object records normalized as placeholders", logger=logger, table=schema.name, count=not_mappings)

    rows: List[Dict[str, Any]] = [normalize_record(item, schema) for item in items]
    return pd.DataFrame.from_records(rows, columns=list(schema.keys))
