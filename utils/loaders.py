# utils/loaders.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

from models.state import DEFAULT_ROWS_PER_PAGE, ROWS_PER_PAGE_OPTIONS


# -----------------------------
# Paths
# -----------------------------
@dataclass(frozen=True)
class AppPaths:
    """
    Centralized paths so every module refers to the same folders.
    """
    root: Path

    @property
    def config_dir(self) -> Path:
        return self.root / "config"

    @property
    def data_dir(self) -> Path:
        return self.root / "data"

    @property
    def sample_dir(self) -> Path:
        return self.data_dir / "sample"

    def resolve(self, source: str) -> Path:
        """Resolve a local source path against the app root."""
        path = Path(source)
        return path if path.is_absolute() else self.root / path


def default_root() -> Path:
    # 1) env var RECAP_ROOT
    # 2) repo folder containing app.py
    return Path(os.getenv("RECAP_ROOT") or Path(__file__).resolve().parents[1])


# -----------------------------
# YAML loaders
# -----------------------------
def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(root: Path | None = None) -> dict:
    """
    Loads config/settings.yaml
    """
    root = root or default_root()
    return _load_yaml(AppPaths(root).config_dir / "settings.yaml")


# -----------------------------
# Typed settings
# -----------------------------
API_BASE = "https://2qiik3x7hi.execute-api.us-east-1.amazonaws.com/dev"

DEFAULT_SOURCES: Dict[str, str] = {
    "policies": f"{API_BASE}/getGridDataPolicyLanding",
    "reinsurers": "data/sample/reinsurers.json",
    "policy_transactions": "data/sample/policy_transactions.json",
    "reinsurer_transactions": "data/sample/reinsurer_transactions.json",
    "policy_details": "data/sample/policy_details.json",
    "analytics": "data/sample/analytics.json",
}


def _env_source(kind: str) -> Optional[str]:
    return os.getenv(f"RECAP_SOURCE_{kind.upper()}")


@dataclass(frozen=True)
class AppSettings:
    root: Path
    mode: str = "live"
    version: str = "recap-v1"
    request_timeout_s: float = 30.0
    default_rows_per_page: int = DEFAULT_ROWS_PER_PAGE
    sources: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_SOURCES))

    @property
    def paths(self) -> AppPaths:
        return AppPaths(self.root)

    def source_for(self, kind: str, **params: str) -> str:
        """
        Return the configured source for a data kind.
        URL templates may use {treaty_id} / {policy_number}; unused params are ignored.
        """
        if kind not in self.sources:
            raise ValueError(f"No data source configured for '{kind}'")
        template = self.sources[kind]
        if params and "{" in template:
            return template.format(**params)
        return template

    @classmethod
    def from_dict(cls, raw: Mapping, root: Path) -> "AppSettings":
        sources = dict(DEFAULT_SOURCES)
        sources.update({str(k): str(v) for k, v in (raw.get("sources") or {}).items() if v})
        for kind in list(sources):
            env_value = _env_source(kind)
            if env_value:
                sources[kind] = env_value

        rows = raw.get("default_rows_per_page", DEFAULT_ROWS_PER_PAGE)
        if rows not in ROWS_PER_PAGE_OPTIONS:
            rows = DEFAULT_ROWS_PER_PAGE

        return cls(
            root=root,
            mode=str(raw.get("mode", "live")),
            version=str(raw.get("version", "recap-v1")),
            request_timeout_s=float(raw.get("request_timeout_s", 30.0)),
            default_rows_per_page=rows,
            sources=sources,
        )


def load_app_settings(root: Path | None = None) -> AppSettings:
    """
    Settings precedence per source:
    1) env var RECAP_SOURCE_<KIND>
    2) config/settings.yaml (sources.<kind>)
    3) DEFAULT_SOURCES
    """
    root = root or default_root()
    return AppSettings.from_dict(load_settings(root), root=root)
