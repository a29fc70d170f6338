"""
utils/validators.py

Lightweight data-health checks for fetched payloads.
Goals:
- Spot API drift early (renamed / missing source fields)
- Flag fields that mostly come back empty or unparseable

Findings are logged and shown in diagnostics only; they never block a view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence

from models.schema import SENTINEL, ColumnSpec, TableSchema
from services.normalizer import format_value, lower_keys, pick_source


# =====================================================
# Types
# =====================================================

@dataclass(frozen=True)
class ValidationIssue:
    table: str
    severity: str  # "error" | "warning"
    message: str


# =====================================================
# Checks
# =====================================================

def require_one_of(records: Sequence[Dict[str, Any]], table: str, col: ColumnSpec) -> List[ValidationIssue]:
    """
    Require at least one candidate source field to appear somewhere in the payload.
    """
    wanted = {s.strip().lower() for s in col.sources}
    if any(wanted.intersection(r) for r in records):
        return []
    return [ValidationIssue(table=table, severity="warning",
                            message=f"Missing source for '{col.key}'. Need one of: {list(col.sources)}")]


def non_null(values: Sequence[Any], table: str, key: str, max_null_rate: float = 0.25) -> List[ValidationIssue]:
    if not values:
        return []
    null_rate = sum(1 for v in values if v is None) / len(values)
    if null_rate <= max_null_rate:
        return []
    return [ValidationIssue(table=table, severity="warning",
                            message=f"High null rate for '{key}': {null_rate:.0%} (threshold {max_null_rate:.0%})")]


def parseable(values: Sequence[Any], table: str, col: ColumnSpec, max_bad_rate: float = 0.0) -> List[ValidationIssue]:
    """Present-but-unparseable values for typed columns (they display as the placeholder)."""
    if col.kind == "text":
        return []
    present = [v for v in values if v is not None]
    if not present:
        return []
    bad = sum(1 for v in present if format_value(v, col) == SENTINEL)
    bad_rate = bad / len(present)
    if bad_rate <= max_bad_rate:
        return []
    return [ValidationIssue(table=table, severity="warning",
                            message=f"Unparseable {col.kind} values in '{col.key}': {bad} of {len(present)}")]


# =====================================================
# Payload validation
# =====================================================

def validate_payload(raw: Sequence[Any], schema: TableSchema) -> List[ValidationIssue]:
    """
    Basic schema checks for one fetched payload.
    """
    issues: List[ValidationIssue] = []
    if not raw:
        return issues

    records = [lower_keys(r) for r in raw if isinstance(r, Mapping)]
    skipped = len(raw) - len(records)
    if skipped:
        issues.append(ValidationIssue(table=schema.name, severity="warning",
                                      message=f"{skipped} record(s) are not objects"))
    if not records:
        return issues

    for col in schema.columns:
        missing = require_one_of(records, schema.name, col)
        if missing:
            issues += missing
            continue
        values = [pick_source(r, col.sources) for r in records]
        issues += non_null(values, schema.name, col.key)
        issues += parseable(values, schema.name, col)

    return issues


def summarize_issues(issues: List[ValidationIssue]) -> Dict[str, int]:
    return {
        "errors": sum(1 for i in issues if i.severity == "error"),
        "warnings": sum(1 for i in issues if i.severity == "warning"),
        "total": len(issues),
    }
