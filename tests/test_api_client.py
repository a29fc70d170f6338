"""
Unit tests for the record fetcher.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from services.api_client import FetchError, fetch_document, fetch_json, fetch_records

pytestmark = pytest.mark.unit

URL = "https://example.test/dev/getGridDataPolicyLanding"


def _response(status=200, body=None, reason="OK", bad_json=False):
    response = MagicMock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.reason = reason
    if bad_json:
        response.json.side_effect = ValueError("no JSON")
    else:
        response.json.return_value = body
    return response


class TestHttpSources:
    @patch("services.api_client.requests.get")
    def test_returns_records(self, mock_get):
        mock_get.return_value = _response(body=[{"POLICY_NUMBER": "POL001"}])

        records = fetch_records(URL, label="policies", timeout=5)

        assert records == [{"POLICY_NUMBER": "POL001"}]
        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        assert args == (URL,)
        assert kwargs["timeout"] == 5
        assert "params" not in kwargs

    @patch("services.api_client.requests.get")
    def test_non_2xx_raises(self, mock_get):
        mock_get.return_value = _response(status=500, reason="Internal Server Error")

        with pytest.raises(FetchError) as excinfo:
            fetch_records(URL, label="policies")

        assert excinfo.value.status_code == 500
        assert excinfo.value.source == URL
        assert str(excinfo.value) == "Failed to fetch policies"

    @patch("services.api_client.requests.get")
    def test_network_failure_raises(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(FetchError) as excinfo:
            fetch_records(URL, label="policies")

        assert excinfo.value.status_code is None
        assert "connection refused" in excinfo.value.detail
        assert isinstance(excinfo.value.__cause__, requests.ConnectionError)

    @patch("services.api_client.requests.get")
    def test_invalid_json_raises(self, mock_get):
        mock_get.return_value = _response(bad_json=True)

        with pytest.raises(FetchError):
            fetch_json(URL, label="policies")

    @patch("services.api_client.requests.get")
    def test_non_array_body_is_empty(self, mock_get):
        mock_get.return_value = _response(body={"message": "ok"})
        assert fetch_records(URL, label="policies") == []

    @patch("services.api_client.requests.get")
    def test_non_object_document_is_empty(self, mock_get):
        mock_get.return_value = _response(body=[1, 2])
        assert fetch_document(URL, label="analytics") == {}

    def test_uses_given_session(self):
        session = MagicMock()
        session.get.return_value = _response(body=[])

        assert fetch_records(URL, session=session) == []
        session.get.assert_called_once()


class TestLocalSources:
    def test_relative_path_resolves_against_root(self, tmp_path):
        (tmp_path / "data").mkdir()
        (tmp_path / "data" / "rows.json").write_text(json.dumps([{"A": 1}, {"A": 2}]), encoding="utf-8")

        assert fetch_records("data/rows.json", root=tmp_path) == [{"A": 1}, {"A": 2}]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FetchError) as excinfo:
            fetch_records("nope.json", label="reinsurers", root=tmp_path)
        assert str(excinfo.value) == "Failed to fetch reinsurers"

    def test_invalid_file_raises(self, tmp_path):
        (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(FetchError):
            fetch_records(str(tmp_path / "bad.json"))
