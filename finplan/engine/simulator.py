import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..data_model import Asset, BudgetSettings, RecurringItem
from .constants import DEFAULT_HORIZON_MONTHS, INVESTMENT_INCOME_TAXABLE_SHARE, MAX_HORIZON_MONTHS
from .months import add_months, first_of_month, month_label, months_between
from .projector import project_asset, project_recurring_item
from .rates import round_to_currency
from .tax import calculate_tax

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyProjectionRow:
    month: date
    total_income_before_tax: int
    total_income_after_tax: int
    total_expenses: int
    net_income: int
    tax: int
    cash_flow: int
    investment_income: int
    asset_sale_proceeds: int
    asset_values: Dict[str, int]
    expense_breakdown: Dict[str, dict] = field(default_factory=dict)
    income_breakdown: Dict[str, dict] = field(default_factory=dict)
    asset_breakdown: Dict[str, dict] = field(default_factory=dict)

    def to_dict(self, detailed: bool = False) -> dict:
        payload = {
            "month": self.month.isoformat(),
            "totalIncomeBeforeTax": self.total_income_before_tax,
            "totalIncomeAfterTax": self.total_income_after_tax,
            "totalExpenses": self.total_expenses,
            "netIncome": self.net_income,
            "tax": self.tax,
            "cashFlow": self.cash_flow,
            "investmentIncome": self.investment_income,
            "assetSaleProceeds": self.asset_sale_proceeds,
            "assetValues": dict(self.asset_values),
        }
        if detailed:
            payload["expenseBreakdown"] = self.expense_breakdown
            payload["incomeBreakdown"] = self.income_breakdown
            payload["assetBreakdown"] = self.asset_breakdown
        return payload


def resolve_horizon(settings: BudgetSettings, start: date) -> int:
    """Number of months to simulate, clamped to ``[1, MAX_HORIZON_MONTHS]``."""
    if settings.months is not None:
        months = settings.months
    elif settings.horizon_end_date is not None:
        # The end-date month is included
        months = months_between(start, settings.horizon_end_date) + 1
    else:
        months = DEFAULT_HORIZON_MONTHS
    return max(1, min(int(months), MAX_HORIZON_MONTHS))


def _item_entry(item: RecurringItem, amount: int) -> dict:
    return {"name": item.name, "amount": amount, "classification": item.classification}


def generate_projection(
    expenses: Sequence[RecurringItem],
    incomes: Sequence[RecurringItem],
    assets: Sequence[Asset],
    settings: BudgetSettings,
    start: Optional[date] = None,
    detailed: bool = False,
) -> List[MonthlyProjectionRow]:
    """Walk the horizon month by month and return one rounded row per month.

    Inputs are never mutated. Asset balances are threaded through the loop as an
    unrounded working copy; only the emitted rows are rounded.
    """
    start = first_of_month(start or date.today())
    n_months = resolve_horizon(settings, start)
    inflation = settings.inflation_rate
    logger.debug(
        f"[PROJECTION] {n_months} months from {month_label(start)}: "
        f"{len(expenses)} expenses, {len(incomes)} incomes, {len(assets)} assets, inflation {inflation}%"
    )

    values: Dict[str, float] = {asset.id: float(asset.value) for asset in assets}
    cash_assets = [asset for asset in assets if asset.is_cash()]
    rows: List[MonthlyProjectionRow] = []

    for m in range(n_months):
        month = add_months(start, m)
        expense_breakdown: Dict[str, dict] = {}
        income_breakdown: Dict[str, dict] = {}
        asset_breakdown: Dict[str, dict] = {}

        total_expenses = 0
        for item in expenses:
            amount = project_recurring_item(item, inflation, month, start)
            total_expenses += amount
            if detailed and amount != 0:
                expense_breakdown[item.id] = _item_entry(item, amount)

        taxed_income = 0
        untaxed_income = 0
        for item in incomes:
            amount = project_recurring_item(item, inflation, month, start)
            if item.taxable:
                taxed_income += amount
            else:
                untaxed_income += amount
            if detailed and amount != 0:
                income_breakdown[item.id] = _item_entry(item, amount)

        investment_income = 0
        taxable_investment_income = 0
        sale_proceeds = 0.0
        sold_ids = set()
        new_values: Dict[str, float] = {}
        for asset in assets:
            previous = values[asset.id]
            projection = project_asset(asset, inflation, month, previous)
            new_values[asset.id] = projection.exact_value
            if projection.is_sold:
                sold_ids.add(asset.id)
                if previous != 0:
                    logger.debug(f"[PROJECTION] {asset.name} sold in {month_label(month)}: {previous:.2f} to cash")
                    sale_proceeds += previous
            else:
                investment_income += projection.monthly_dividend
                if asset.dividend_taxable:
                    taxable_investment_income += projection.monthly_dividend
            if detailed:
                asset_breakdown[asset.id] = {
                    "name": asset.name,
                    "value": projection.value,
                    "monthly_return": projection.monthly_return,
                    "monthly_dividend": projection.monthly_dividend,
                    "is_sold": projection.is_sold,
                }

        income_before_tax = taxed_income + untaxed_income + investment_income
        taxable_base = taxed_income + taxable_investment_income * INVESTMENT_INCOME_TAXABLE_SHARE
        tax = calculate_tax(taxable_base)
        income_after_tax = income_before_tax - tax
        cash_flow = income_after_tax - total_expenses

        # First cash account still live this month
        sink = next((asset for asset in cash_assets if asset.id not in sold_ids), None)
        if sink is not None:
            new_values[sink.id] += cash_flow + sale_proceeds

        rows.append(
            MonthlyProjectionRow(
                month=month,
                total_income_before_tax=income_before_tax,
                total_income_after_tax=income_after_tax,
                total_expenses=total_expenses,
                net_income=income_after_tax,
                tax=tax,
                cash_flow=cash_flow,
                investment_income=investment_income,
                asset_sale_proceeds=round_to_currency(sale_proceeds),
                asset_values={key: round_to_currency(value) for key, value in new_values.items()},
                expense_breakdown=expense_breakdown,
                income_breakdown=income_breakdown,
                asset_breakdown=asset_breakdown,
            )
        )
        values = new_values

    return rows
