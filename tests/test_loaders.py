"""
Unit tests for settings loading.
"""

import pytest

from utils.loaders import DEFAULT_SOURCES, AppSettings, load_app_settings

pytestmark = pytest.mark.unit


def _write_settings(root, text):
    (root / "config").mkdir(exist_ok=True)
    (root / "config" / "settings.yaml").write_text(text, encoding="utf-8")


class TestLoadAppSettings:
    def test_defaults_without_file(self, tmp_path):
        settings = load_app_settings(tmp_path)

        assert settings.root == tmp_path
        assert settings.mode == "live"
        assert settings.default_rows_per_page == 15
        assert dict(settings.sources) == DEFAULT_SOURCES

    def test_yaml_values(self, tmp_path):
        _write_settings(
            tmp_path,
            "mode: staging\n"
            "request_timeout_s: 5\n"
            "default_rows_per_page: 50\n"
            "sources:\n"
            "  reinsurers: https://example.test/reinsurers\n",
        )
        settings = load_app_settings(tmp_path)

        assert settings.mode == "staging"
        assert settings.request_timeout_s == 5.0
        assert settings.default_rows_per_page == 50
        assert settings.sources["reinsurers"] == "https://example.test/reinsurers"
        assert settings.sources["policies"] == DEFAULT_SOURCES["policies"]

    def test_invalid_rows_per_page_falls_back(self, tmp_path):
        _write_settings(tmp_path, "default_rows_per_page: 20\n")
        assert load_app_settings(tmp_path).default_rows_per_page == 15

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        _write_settings(tmp_path, "sources:\n  policies: data/from_yaml.json\n")
        monkeypatch.setenv("RECAP_SOURCE_POLICIES", "data/from_env.json")

        assert load_app_settings(tmp_path).sources["policies"] == "data/from_env.json"

    def test_root_from_env(self, tmp_path, monkeypatch):
        _write_settings(tmp_path, "version: from-env-root\n")
        monkeypatch.setenv("RECAP_ROOT", str(tmp_path))

        assert load_app_settings().version == "from-env-root"


class TestSourceFor:
    def test_template_params(self, tmp_path):
        settings = AppSettings(
            root=tmp_path,
            sources={"reinsurer_transactions": "https://example.test/getReinsurerTransactions/{treaty_id}"},
        )
        assert (
            settings.source_for("reinsurer_transactions", treaty_id="TR001")
            == "https://example.test/getReinsurerTransactions/TR001"
        )

    def test_plain_source_ignores_params(self, tmp_path):
        settings = AppSettings(root=tmp_path)
        assert settings.source_for("reinsurer_transactions", treaty_id="TR001") == DEFAULT_SOURCES["reinsurer_transactions"]

    def test_unknown_kind(self, tmp_path):
        with pytest.raises(ValueError):
            AppSettings(root=tmp_path).source_for("claims")
