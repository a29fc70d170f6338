from pathlib import Path

import pytest

from utils.loaders import DEFAULT_SOURCES, AppSettings

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def repo_root() -> Path:
    return REPO_ROOT


@pytest.fixture
def sample_settings() -> AppSettings:
    """Settings pointing at the bundled sample files, ignoring env overrides."""
    return AppSettings(root=REPO_ROOT, sources=dict(DEFAULT_SOURCES))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("RECAP_ROOT", raising=False)
    for kind in DEFAULT_SOURCES:
        monkeypatch.delenv(f"RECAP_SOURCE_{kind.upper()}", raising=False)
