"""
models/tables.py

Field sets for every table kind shown in the dashboard.
Raw source names are matched case-insensitively by the normalizer.
"""

from __future__ import annotations

from typing import Dict, Tuple

from models.schema import ColumnSpec, TableSchema

# Sample reinsured amount shown on the policy grid (25% of account value).
REINSURED_SHARE = 0.25


def _col(key, label, *sources, kind="text", scale=1.0, searchable=False) -> ColumnSpec:
    return ColumnSpec(key=key, label=label, sources=tuple(sources), kind=kind, scale=scale, searchable=searchable)


# Period activity amounts shared by the policy-level card and the reinsurer-level table
_ACTIVITY: Tuple[ColumnSpec, ...] = (
    _col("totalPremiumsForPeriod", "Total Premiums for Period", "TOTAL_PREMIUMS", "TOTAL_PREMIUMS_FOR_PERIOD", kind="currency"),
    _col("totalPartialSurrender", "Total Partial Surrender", "PARTIAL_SURRENDER", "TOTAL_PARTIAL_SURRENDER", kind="currency"),
    _col("totalSurrender", "Total Surrender", "SURRENDER", "TOTAL_SURRENDER", kind="currency"),
    _col("annuitization", "Annuitization", "ANNUITIZATION", kind="currency"),
    _col("death", "Death", "DEATH", kind="currency"),
    _col("transfers", "Transfers", "TRANSFERS", kind="currency"),
    _col("fees", "Fees", "FEES", kind="currency"),
    _col("partialSurrenderCharge", "Partial Surrender Charge", "PARTIAL_SURRENDER_CHARGE", kind="currency"),
    _col("surrenderCharge", "Surrender Charge", "SURRENDER_CHARGE", kind="currency"),
    _col("marketValueAdjustments", "Market Value Adjustments", "MVA", "MARKET_VALUE_ADJUSTMENTS", kind="currency"),
    _col("totalInterestEarned", "Total Interest Earned", "INTEREST_EARNED", "TOTAL_INTEREST_EARNED", kind="currency"),
    _col("totalCommissionPaid", "Total Commission Paid", "COMMISSION_PAID", "TOTAL_COMMISSION_PAID", kind="currency"),
    _col("totalDeathPayments", "Total Death Payments", "DEATH_PAYMENTS", "TOTAL_DEATH_PAYMENTS", kind="currency"),
    _col("totalInterestClaims", "Total Interest Claims", "INTEREST_CLAIMS", "TOTAL_INTEREST_CLAIMS", kind="currency"),
    _col("totalDeathClaims", "Total Death Claims", "DEATH_CLAIMS", "TOTAL_DEATH_CLAIMS", kind="currency"),
    _col("other", "Other", "OTHER", kind="currency"),
    _col("startingAccumulationValue", "Starting Accumulation Value", "STARTING_AV", "STARTING_ACCUMULATION_VALUE", kind="currency"),
    _col("endingAccumulationValue", "Ending Accumulation Value", "ENDING_AV", "ENDING_ACCUMULATION_VALUE", kind="currency"),
)


POLICIES = TableSchema(
    name="policies",
    title="Policy Details",
    columns=(
        _col("policyNumber", "Policy Number", "POLICY_NUMBER", searchable=True),
        _col("productName", "Product Name", "PRODUCT_NAME", searchable=True),
        _col("firmName", "Firm Name", "RF_FIRM_NAME", "FIRM_NAME", searchable=True),
        _col("applicationSignDate", "Application Sign Date", "RRCF_DATE_ADDED", "APPLICATION_SIGN_DATE", kind="date"),
        _col("accountValue", "Account Value", "ENDING_AV", "ACCOUNT_VALUE", kind="currency"),
        _col("reinsuredAccountValue", "Reinsured Account Value", "ENDING_AV", "ACCOUNT_VALUE",
             kind="currency", scale=REINSURED_SHARE),
    ),
)

REINSURERS = TableSchema(
    name="reinsurers",
    title="Reinsurer Details",
    columns=(
        _col("reinsurerId", "Reinsurer ID", "REINSURER_ID", searchable=True),
        _col("reinsurerName", "Reinsurer Name", "REINSURER_NAME", searchable=True),
        _col("treatyId", "Treaty ID", "TREATY_ID", searchable=True),
        _col("quotaShare", "Quota Share", "QUOTA_SHARE", kind="percent"),
        _col("periodStart", "Period Start", "PERIOD_START", "START_DATE", kind="date"),
        _col("periodEnd", "Period End", "PERIOD_END", "END_DATE", kind="date"),
    ),
)

POLICY_TRANSACTIONS = TableSchema(
    name="policy_transactions",
    title="Policy Transactions",
    columns=(
        _col("policyNumber", "Policy Number", "POLICY_NUMBER", searchable=True),
        _col("transactionId", "Transaction ID", "TRANSACTION_ID"),
        _col("transactionType", "Transaction Type", "TRANSACTION_TYPE", searchable=True),
        _col("transactionDate", "Transaction Date", "TRANSACTION_DATE", kind="date"),
        _col("premium", "Premium", "PREMIUM", kind="currency"),
        _col("commission", "Commission", "COMMISSION", kind="currency"),
        _col("quotaSharePremium", "Quota Share Premium", "QUOTA_SHARE_PREMIUM", kind="currency"),
        _col("cedingCommission", "Ceding Commission", "CEDING_COMMISSION", kind="currency"),
        _col("netPremium", "Net Premium", "NET_PREMIUM", kind="currency"),
        _col("policyEffectiveDate", "Policy Effective Date", "POLICY_EFFECTIVE_DATE", kind="date"),
        _col("policyExpirationDate", "Policy Expiration Date", "POLICY_EXPIRATION_DATE", kind="date"),
        _col("insuredName", "Insured Name", "INSURED_NAME", searchable=True),
        _col("treatyId", "Treaty ID", "TREATY_ID"),
    ),
    date_range=("policyEffectiveDate", "policyExpirationDate"),
)

REINSURER_TRANSACTIONS = TableSchema(
    name="reinsurer_transactions",
    title="Reinsurer Transactions",
    columns=(
        _col("policyNumber", "Policy Number", "POLICY_NUMBER", searchable=True),
        _col("productCode", "Product Code", "PRODUCT_CODE", searchable=True),
        _col("productName", "Product Name", "PRODUCT_NAME", searchable=True),
        _col("tenor", "Tenor", "TENOR", kind="integer"),
        _col("firmName", "Firm Name", "FIRM_NAME", "RF_FIRM_NAME", searchable=True),
    ),
)

REINSURER_LEVELS = TableSchema(
    name="reinsurer_levels",
    title="Reinsurer Level",
    columns=(
        _col("reinsurerName", "Reinsurer Name", "REINSURER_NAME", searchable=True),
        _col("treatyId", "Treaty ID", "TREATY_ID", searchable=True),
        _col("quotaShare", "Quota Share", "QUOTA_SHARE", kind="percent"),
        _col("cedingPremiumAllowance", "Ceding Premium Allowance", "CEDING_PREMIUM_ALLOWANCE", kind="percent"),
        _col("cedingAccumulatedValueAllowance", "Ceding AV Allowance", "CEDING_AV_ALLOWANCE",
             "CEDING_ACCUMULATED_VALUE_ALLOWANCE", kind="percent"),
        _col("expensePremiumAllowance", "Expense Premium Allowance", "EXPENSE_PREMIUM_ALLOWANCE", kind="percent"),
        _col("expenseCommissionAllowance", "Expense Commission Allowance", "EXPENSE_COMMISSION_ALLOWANCE", kind="percent"),
        _col("premiumSource", "Premium Source", "PREMIUM_SOURCE"),
    ) + _ACTIVITY,
)

# Single-record card on the policy detail page, not a grid
POLICY_LEVEL = TableSchema(
    name="policy_level",
    title="Policy Level",
    columns=(
        _col("recordCreateDate", "Record Create Date", "RECORD_CREATE_DATE", kind="date"),
        _col("policyNumber", "Policy Number", "POLICY_NUMBER"),
        _col("issueState", "Issue State", "ISSUE_STATE"),
        _col("productName", "Product Name", "PRODUCT_NAME"),
        _col("productCode", "Product Code", "PRODUCT_CODE"),
        _col("productTenor", "Product Tenor", "PRODUCT_TENOR", "TENOR", kind="integer"),
        _col("productChannel", "Product Channel", "PRODUCT_CHANNEL"),
        _col("periodType", "Period Type", "PERIOD_TYPE"),
        _col("periodStartDate", "Period Start Date", "PERIOD_START_DATE", kind="date"),
        _col("periodEndDate", "Period End Date", "PERIOD_END_DATE", kind="date"),
    ) + _ACTIVITY,
)


TABLES: Dict[str, TableSchema] = {
    s.name: s
    for s in (POLICIES, REINSURERS, POLICY_TRANSACTIONS, REINSURER_TRANSACTIONS, REINSURER_LEVELS, POLICY_LEVEL)
}


def get_schema(kind: str) -> TableSchema:
    try:
        return TABLES[kind]
    except KeyError:
        raise ValueError(f"Unknown table kind '{kind}'. Known: {sorted(TABLES)}") from None
