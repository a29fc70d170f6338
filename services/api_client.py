"""
services/api_client.py

Fetches raw records for a table view.

One GET per view, no query parameters, no retries. A source is either an
http(s) URL or a path to a local JSON file (sample data for views whose
endpoint is not live yet).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from utils.logging import get_logger, log_info, log_warn

logger = get_logger(__name__)

DEFAULT_TIMEOUT_S = 30.0


class FetchError(RuntimeError):
    """Raised when a source cannot be fetched or decoded."""

    def __init__(self, label: str, source: str, status_code: Optional[int] = None, detail: str = ""):
        self.label = label
        self.source = source
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Failed to fetch {label}")


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _get_json(source: str, label: str, timeout: float, session: Optional[requests.Session]) -> Any:
    http = session or requests
    try:
        response = http.get(source, timeout=timeout, headers={"Accept": "application/json"})
    except requests.RequestException as exc:
        raise FetchError(label, source, detail=str(exc)) from exc

    if not response.ok:
        raise FetchError(label, source, status_code=response.status_code, detail=response.reason or "")

    try:
        return response.json()
    except ValueError as exc:
        raise FetchError(label, source, status_code=response.status_code, detail="invalid JSON body") from exc


def _read_json(path: Path, label: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:
        raise FetchError(label, str(path), detail=str(exc)) from exc
    except ValueError as exc:
        raise FetchError(label, str(path), detail="invalid JSON file") from exc


def fetch_json(
    source: str,
    *,
    label: str = "data",
    root: Optional[Path] = None,
    timeout: float = DEFAULT_TIMEOUT_S,
    session: Optional[requests.Session] = None,
) -> Any:
    """Return the decoded JSON body of a source, or raise FetchError."""
    if _is_url(source):
        return _get_json(source, label, timeout, session)

    path = Path(source)
    if not path.is_absolute() and root is not None:
        path = root / path
    return _read_json(path, label)


def fetch_records(
    source: str,
    *,
    label: str = "records",
    root: Optional[Path] = None,
    timeout: float = DEFAULT_TIMEOUT_S,
    session: Optional[requests.Session] = None,
) -> List[Dict[str, Any]]:
    """
    Fetch a JSON array of records.
    A body that is not an array is treated as an empty result.
    """
    body = fetch_json(source, label=label, root=root, timeout=timeout, session=session)
    if not isinstance(body, list):
        log_warn("non-array body treated as empty", logger=logger, label=label, type=type(body).__name__)
        return []
    log_info("fetched records", logger=logger, label=label, rows=len(body))
    return body


def fetch_document(
    source: str,
    *,
    label: str = "document",
    root: Optional[Path] = None,
    timeout: float = DEFAULT_TIMEOUT_S,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """Fetch a single JSON object; a body that is not an object is treated as empty."""
    body = fetch_json(source, label=label, root=root, timeout=timeout, session=session)
    if not isinstance(body, dict):
        log_warn("non-object body treated as empty", logger=logger, label=label, type=type(body).__name__)
        return {}
    return body
