"""
Unit tests for analytics KPIs.
"""

import pytest

from services.analytics import (
    build_analytics,
    ceded_premiums_by_month,
    format_compact_currency,
    format_whole_currency,
    kpi_summary,
    profit_margin_pct,
    total_ceded_premiums,
)

pytestmark = pytest.mark.unit

DOC = {
    "cededPremiums": [
        {"MONTH": "2024-01", "TREATY": "Treaty A", "CEDED_PREMIUM": 100},
        {"MONTH": "2024-02", "TREATY": "Treaty A", "CEDED_PREMIUM": 200},
        {"MONTH": "2024-02", "TREATY": "Treaty B", "CEDED_PREMIUM": "300"},
    ],
    "profitability": [
        {"REINSURER": "Global Re", "INCOME": 1000, "EXPENSES": 600},
        {"REINSURER": "Pacific Re", "INCOME": 1000, "EXPENSES": 1200},
    ],
    "riskConcentration": [{"REINSURER": "Global Re", "SHARE_PCT": 60, "EXPOSURE": 1500000}],
}


class TestBuildAnalytics:
    def test_frames(self):
        frames = build_analytics(DOC)

        assert frames.profitability["net_profit"].tolist() == [400, -200]
        assert frames.product_lines.empty
        assert list(frames.product_lines.columns) == ["product", "exposure", "premiums", "risk_level"]

    def test_latest_month_total(self):
        frames = build_analytics(DOC)
        table = ceded_premiums_by_month(frames.ceded_premiums)

        assert table.index.tolist() == ["2024-01", "2024-02"]
        assert total_ceded_premiums(frames.ceded_premiums) == 500

    def test_empty_document(self):
        frames = build_analytics({})
        assert total_ceded_premiums(frames.ceded_premiums) == 0
        assert profit_margin_pct(frames.profitability) is None
        assert kpi_summary(frames)[-1] == ("Profit Margin", "N/A")

    def test_kpi_summary(self):
        assert kpi_summary(build_analytics(DOC)) == [
            ("Total Ceded Premiums", "$500"),
            ("Net Profit", "$200"),
            ("Total Exposure", "$1.5M"),
            ("Profit Margin", "10.0%"),
        ]

    def test_sample_kpis(self, sample_settings):
        from services.datasets import load_analytics

        assert kpi_summary(load_analytics(sample_settings)) == [
            ("Total Ceded Premiums", "$7.0M"),
            ("Net Profit", "$4.0M"),
            ("Total Exposure", "$55.0M"),
            ("Profit Margin", "17.7%"),
        ]


class TestCurrencyFormats:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (15_400_000, "$15.4M"),
            (850_000, "$850K"),
            (500, "$500"),
            (-1_500_000, "-$1.5M"),
            (None, "N/A"),
            ("abc", "N/A"),
        ],
    )
    def test_compact(self, value, expected):
        assert format_compact_currency(value) == expected

    def test_whole(self):
        assert format_whole_currency(2490000) == "$2,490,000"
        assert format_whole_currency(-1200.4) == "-$1,200"
        assert format_whole_currency(float("nan")) == "N/A"
