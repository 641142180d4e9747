from .accounts import (
    ASSET_TYPES,
    RETURN_KINDS,
    Asset,
    default_asset_rows,
)
from .cashflow import (
    ESCALATION_KINDS,
    FREQUENCIES,
    RecurringItem,
    default_expense_rows,
    default_income_rows,
)
from .parsing import (
    RecordValidationError,
    parse_assets,
    parse_expenses,
    parse_incomes,
    parse_settings,
)
from .plan import BudgetSettings

__all__ = [
    "ASSET_TYPES",
    "ESCALATION_KINDS",
    "FREQUENCIES",
    "RETURN_KINDS",
    "Asset",
    "BudgetSettings",
    "RecordValidationError",
    "RecurringItem",
    "default_asset_rows",
    "default_expense_rows",
    "default_income_rows",
    "parse_assets",
    "parse_expenses",
    "parse_incomes",
    "parse_settings",
]
