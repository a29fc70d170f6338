"""
services/analytics.py

Aggregate KPIs for the analytics page:
- Ceded premiums by treaty and month
- Reinsurance income / expense / net profit by reinsurer
- Risk concentration by reinsurer
- Product-line exposure

Figures are computed here; the page only lays them out.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from services.normalizer import lower_keys, pick_source


@dataclass(frozen=True)
class AnalyticsFrames:
    ceded_premiums: pd.DataFrame      # month, treaty, ceded_premium
    profitability: pd.DataFrame       # reinsurer, income, expenses, net_profit
    risk_concentration: pd.DataFrame  # reinsurer, share_pct, exposure
    product_lines: pd.DataFrame       # product, exposure, premiums, risk_level


# -------------------------------------------------
# Frame builders
# -------------------------------------------------

_FRAMES: Dict[str, Tuple[Tuple[str, ...], Dict[str, Tuple[str, ...]], Tuple[str, ...]]] = {
    # name: (document keys, column -> raw sources, numeric columns)
    "ceded_premiums": (
        ("cededPremiums", "ceded_premiums"),
        {"month": ("MONTH",), "treaty": ("TREATY", "TREATY_NAME"), "ceded_premium": ("CEDED_PREMIUM", "AMOUNT")},
        ("ceded_premium",),
    ),
    "profitability": (
        ("profitability",),
        {"reinsurer": ("REINSURER", "REINSURER_NAME"), "income": ("INCOME",), "expenses": ("EXPENSES",)},
        ("income", "expenses"),
    ),
    "risk_concentration": (
        ("riskConcentration", "risk_concentration"),
        {"reinsurer": ("REINSURER", "REINSURER_NAME"), "share_pct": ("SHARE_PCT", "VALUE"), "exposure": ("EXPOSURE", "AMOUNT")},
        ("share_pct", "exposure"),
    ),
    "product_lines": (
        ("productLines", "product_lines"),
        {"product": ("PRODUCT",), "exposure": ("EXPOSURE",), "premiums": ("PREMIUMS",), "risk_level": ("RISK_LEVEL",)},
        ("exposure", "premiums"),
    ),
}


def _frame(records: Any, columns: Mapping[str, Sequence[str]], numeric: Sequence[str]) -> pd.DataFrame:
    rows = [lower_keys(r) for r in records if isinstance(r, Mapping)] if isinstance(records, list) else []
    df = pd.DataFrame(
        [{key: pick_source(r, sources) for key, sources in columns.items()} for r in rows],
        columns=list(columns),
    )
    for c in numeric:
        df[c] = pd.to_numeric(df[c], errors="coerce")
    return df


def build_analytics(doc: Mapping[str, Any]) -> AnalyticsFrames:
    """Turn the analytics document into typed frames; missing sections become empty frames."""
    doc = lower_keys(doc)
    frames = {}
    for name, (doc_keys, columns, numeric) in _FRAMES.items():
        frames[name] = _frame(pick_source(doc, doc_keys) or [], columns, numeric)

    prof = frames["profitability"]
    prof["net_profit"] = prof["income"] - prof["expenses"]
    return AnalyticsFrames(**frames)


# -------------------------------------------------
# KPIs
# -------------------------------------------------

def ceded_premiums_by_month(df: pd.DataFrame) -> pd.DataFrame:
    """Month x treaty table of ceded premiums, months in ascending order."""
    if df.empty:
        return pd.DataFrame()
    return df.pivot_table(index="month", columns="treaty", values="ceded_premium", aggfunc="sum").sort_index()


def total_ceded_premiums(df: pd.DataFrame) -> float:
    """Ceded premiums across all treaties for the latest month."""
    table = ceded_premiums_by_month(df)
    if table.empty:
        return 0.0
    return float(table.iloc[-1].sum())


def total_net_profit(prof: pd.DataFrame) -> float:
    return float(prof["net_profit"].sum()) if not prof.empty else 0.0


def total_exposure(risk: pd.DataFrame) -> float:
    return float(risk["exposure"].sum()) if not risk.empty else 0.0


def profit_margin_pct(prof: pd.DataFrame) -> Optional[float]:
    if prof.empty:
        return None
    income = float(prof["income"].sum())
    if income == 0:
        return None
    return total_net_profit(prof) / income * 100


def format_compact_currency(value: Any) -> str:
    """$15.4M / $850K / $500"""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return "N/A"
    if math.isnan(v):
        return "N/A"
    sign = "-" if v < 0 else ""
    v = abs(v)
    if v >= 1_000_000:
        return f"{sign}${v / 1_000_000:.1f}M"
    if v >= 1_000:
        return f"{sign}${v / 1_000:.0f}K"
    return f"{sign}${v:g}"


def format_whole_currency(value: Any) -> str:
    try:
        v = float(value)
    except (TypeError, ValueError):
        return "N/A"
    if math.isnan(v):
        return "N/A"
    return f"-${abs(v):,.0f}" if v < 0 else f"${v:,.0f}"


def kpi_summary(frames: AnalyticsFrames) -> List[Tuple[str, str]]:
    """(label, value) pairs for the KPI row."""
    margin = profit_margin_pct(frames.profitability)
    return [
        ("Total Ceded Premiums", format_compact_currency(total_ceded_premiums(frames.ceded_premiums))),
        ("Net Profit", format_compact_currency(total_net_profit(frames.profitability))),
        ("Total Exposure", format_compact_currency(total_exposure(frames.risk_concentration))),
        ("Profit Margin", "N/A" if margin is None else f"{margin:.1f}%"),
    ]
