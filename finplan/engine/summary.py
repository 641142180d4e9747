# engine/summary.py
from __future__ import annotations

from datetime import date
from typing import Dict, List, Sequence

from ..data_model import Asset, RecurringItem
from .months import month_index
from .rates import round_to_currency
from .simulator import MonthlyProjectionRow

UNCLASSIFIED = "unclassified"


def select_row(rows: Sequence[MonthlyProjectionRow], month: date | None = None) -> MonthlyProjectionRow | None:
    """Row for ``month`` (any day within it), falling back to the first row."""
    if not rows:
        return None
    if month is not None:
        for row in rows:
            if month_index(row.month) == month_index(month):
                return row
    return rows[0]


def total_annual_income(incomes: Sequence[RecurringItem]) -> int:
    return round_to_currency(sum(item.amount_per_month() * 12 for item in incomes))


def asset_type_breakdown(assets: Sequence[Asset]) -> Dict[str, int]:
    breakdown: Dict[str, float] = {}
    for asset in assets:
        breakdown[asset.asset_type] = breakdown.get(asset.asset_type, 0.0) + asset.value
    return {key: round_to_currency(value) for key, value in breakdown.items()}


def classification_summary(items: Sequence[RecurringItem]) -> List[dict]:
    """Group items by classification with their monthly-normalised totals."""
    groups: Dict[str, dict] = {}
    for item in items:
        key = item.classification or UNCLASSIFIED
        group = groups.setdefault(key, {"classification": key, "total_amount": 0, "item_count": 0, "items": []})
        group["total_amount"] += round_to_currency(item.amount_per_month())
        group["item_count"] += 1
        group["items"].append(item.name)
    return list(groups.values())


def summarize(
    rows: Sequence[MonthlyProjectionRow],
    assets: Sequence[Asset],
    incomes: Sequence[RecurringItem],
    expenses: Sequence[RecurringItem],
    inflation_rate: float,
    selected_month: date | None = None,
) -> dict:
    current = select_row(rows, selected_month)
    current_month = None
    if current is not None:
        current_month = {
            "month": current.month.isoformat(),
            "totalIncome": current.total_income_before_tax,
            "totalExpenses": current.total_expenses,
            # Pre-tax surplus, as shown on the dashboard headline
            "netIncome": current.total_income_before_tax - current.total_expenses,
            "tax": current.tax,
            "cashFlow": current.cash_flow,
            "investmentIncome": current.investment_income,
        }
    return {
        "currentMonth": current_month,
        "totalAssetValue": round_to_currency(sum(asset.value for asset in assets)),
        "assetBreakdown": asset_type_breakdown(assets),
        "cashFlowIssues": sum(1 for row in rows if row.cash_flow < 0),
        "totalAnnualIncome": total_annual_income(incomes),
        "classifications": classification_summary(list(expenses) + list(incomes)),
        "inflationRate": inflation_rate,
        "totalMonths": len(rows),
    }
