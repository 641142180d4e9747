# engine/projector.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..data_model import Asset, RecurringItem
from .months import is_after_month, is_before_month, month_index, months_between
from .rates import monthly_rate, round_to_currency


@dataclass(frozen=True)
class AssetProjection:
    asset_id: str
    name: str
    asset_type: str
    value: int
    monthly_return: int
    monthly_dividend: int
    is_sold: bool
    exact_value: float = 0.0


def is_item_active(item: RecurringItem, month: date) -> bool:
    return not (is_before_month(month, item.active_from) or is_after_month(month, item.active_to))


def is_asset_sold(asset: Asset, month: date) -> bool:
    # The sale month itself is still live; liquidation shows from the next month.
    return is_after_month(month, asset.sale_date)


def is_dividend_active(asset: Asset, month: date) -> bool:
    if asset.dividend_active_from is not None and month_index(month) < month_index(asset.dividend_active_from):
        return False
    if asset.dividend_active_to is not None and month_index(month) >= month_index(asset.dividend_active_to):
        return False
    return True


def project_recurring_item(item: RecurringItem, inflation_rate: float, month: date, start: date) -> int:
    """Monthly amount of an expense or income for ``month``, escalated from its start.

    ``start`` stands in for the item's start when it has none (the first simulated month).
    """
    if not is_item_active(item, month):
        return 0

    base = item.amount_per_month()
    elapsed = months_between(item.active_from or start, month)
    if elapsed <= 0:
        return round_to_currency(base)

    annual = inflation_rate if item.escalation == "INFLATION_LINKED" else item.escalation_rate
    return round_to_currency(base * (1 + monthly_rate(annual)) ** elapsed)


def project_asset(asset: Asset, inflation_rate: float, month: date, previous_value: float) -> AssetProjection:
    if is_asset_sold(asset, month):
        return AssetProjection(
            asset_id=asset.id,
            name=asset.name,
            asset_type=asset.asset_type,
            value=0,
            monthly_return=0,
            monthly_dividend=0,
            is_sold=True,
            exact_value=0.0,
        )

    annual = asset.annual_return
    if asset.return_kind == "INFLATION_LINKED":
        annual += inflation_rate
    growth = previous_value * monthly_rate(annual)
    new_value = previous_value + growth

    dividend = 0.0
    if asset.annual_dividend_rate > 0 and is_dividend_active(asset, month):
        # Paid on the pre-growth balance
        dividend = previous_value * (asset.annual_dividend_rate / 100.0 / 12.0)

    return AssetProjection(
        asset_id=asset.id,
        name=asset.name,
        asset_type=asset.asset_type,
        value=round_to_currency(new_value),
        monthly_return=round_to_currency(growth),
        monthly_dividend=round_to_currency(dividend),
        is_sold=False,
        exact_value=new_value,
    )
