"""
utils/logging.py

Logging utilities for the dashboard.
- Works in tests, CLI scripts, or Streamlit (reruns do not stack handlers).
- Keeps log lines readable: timestamp, level, message, then key=value context.
"""

from __future__ import annotations

import datetime as _dt
import logging
import sys
from typing import Any, Optional


_LOGGER_NAME_ROOT = "recap"


def _ts() -> str:
    return _dt.datetime.now(_dt.timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def _suffix(kv: dict) -> str:
    if not kv:
        return ""
    return " | " + " ".join([f"{k}={v}" for k, v in kv.items()])


def init_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the "recap" logger once. Safe to call on every Streamlit rerun.
    """
    root_logger = logging.getLogger(_LOGGER_NAME_ROOT)
    root_logger.setLevel(level)

    if getattr(root_logger, "_recap_configured", False):
        return root_logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.propagate = False

    setattr(root_logger, "_recap_configured", True)
    return root_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger under the recap namespace.
    "services.api_client" becomes "recap.services.api_client".
    """
    init_logging()
    if not name:
        return logging.getLogger(_LOGGER_NAME_ROOT)
    if name.startswith(_LOGGER_NAME_ROOT):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME_ROOT}.{name}")


def _emit(level: int, tag: str, msg: str, logger: Optional[logging.Logger], kv: dict) -> str:
    line = f"[{_ts()}] {tag} {msg}{_suffix(kv)}"
    (logger or get_logger()).log(level, line)
    return line


def log_info(msg: str, logger: Optional[logging.Logger] = None, **kv: Any) -> str:
    """Log a formatted line and return it (caller can also show or store it)."""
    return _emit(logging.INFO, "INFO ", msg, logger, kv)


def log_warn(msg: str, logger: Optional[logging.Logger] = None, **kv: Any) -> str:
    return _emit(logging.WARNING, "WARN ", msg, logger, kv)


def log_error(msg: str, logger: Optional[logging.Logger] = None, **kv: Any) -> str:
    return _emit(logging.ERROR, "ERROR", msg, logger, kv)
