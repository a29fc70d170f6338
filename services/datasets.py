# services/datasets.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd
import requests

from models.tables import POLICY_LEVEL, REINSURER_LEVELS, get_schema
from services.analytics import AnalyticsFrames, build_analytics
from services.api_client import fetch_document, fetch_records
from services.normalizer import lower_keys, normalize_record, normalize_records, pick_source
from utils.loaders import AppSettings
from utils.logging import get_logger, log_info, log_warn
from utils.validators import ValidationIssue, summarize_issues, validate_payload

logger = get_logger(__name__)


@dataclass(frozen=True)
class TableLoad:
    """
    One fetched + normalized table, plus the payload health findings.
    """
    kind: str
    source: str
    records: pd.DataFrame
    issues: List[ValidationIssue] = field(default_factory=list)


@dataclass(frozen=True)
class PolicyDetails:
    policy_level: Dict[str, Any]
    reinsurer_levels: pd.DataFrame
    issues: List[ValidationIssue] = field(default_factory=list)


def _log_issues(kind: str, issues: List[ValidationIssue]) -> None:
    if not issues:
        return
    log_warn("payload validation findings", logger=logger, table=kind, **summarize_issues(issues))
    for issue in issues:
        logger.debug("%s [%s] %s", issue.table, issue.severity, issue.message)


def load_table(
    kind: str,
    settings: AppSettings,
    session: Optional[requests.Session] = None,
    **params: str,
) -> TableLoad:
    """
    Fetch one table's records and normalize them into display records.
    Raises FetchError when the source cannot be read.
    """
    schema = get_schema(kind)
    source = settings.source_for(kind, **params)

    raw = fetch_records(
        source,
        label=schema.title.lower(),
        root=settings.root,
        timeout=settings.request_timeout_s,
        session=session,
    )

    issues = validate_payload(raw, schema)
    _log_issues(kind, issues)

    records = normalize_records(raw, schema)
    log_info("table ready", logger=logger, table=kind, rows=len(records))
    return TableLoad(kind=kind, source=source, records=records, issues=issues)


def load_policy_details(
    policy_number: str,
    settings: AppSettings,
    session: Optional[requests.Session] = None,
) -> PolicyDetails:
    """
    Policy-level card + reinsurer-level rows for one policy.
    The document shape is {"policyLevel": {...}, "reinsurerLevels": [...]}.
    """
    source = settings.source_for("policy_details", policy_number=policy_number)
    doc = lower_keys(
        fetch_document(
            source,
            label="policy details",
            root=settings.root,
            timeout=settings.request_timeout_s,
            session=session,
        )
    )

    level_raw = pick_source(doc, ("policyLevel", "policy_level"))
    level = lower_keys(level_raw) if isinstance(level_raw, Mapping) else {}
    # Documents served per policy may omit the key they were requested by
    level.setdefault("policy_number", policy_number)

    reinsurers_raw = pick_source(doc, ("reinsurerLevels", "reinsurer_levels"))
    if not isinstance(reinsurers_raw, list):
        reinsurers_raw = []

    issues = validate_payload([level], POLICY_LEVEL) + validate_payload(reinsurers_raw, REINSURER_LEVELS)
    _log_issues("policy_details", issues)

    return PolicyDetails(
        policy_level=normalize_record(level, POLICY_LEVEL),
        reinsurer_levels=normalize_records(reinsurers_raw, REINSURER_LEVELS),
        issues=issues,
    )


def load_analytics(settings: AppSettings, session: Optional[requests.Session] = None) -> AnalyticsFrames:
    doc = fetch_document(
        settings.source_for("analytics"),
        label="analytics",
        root=settings.root,
        timeout=settings.request_timeout_s,
        session=session,
    )
    return build_analytics(doc)
