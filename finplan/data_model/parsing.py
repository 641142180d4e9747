"""Validation of raw JSON records before they reach the projection engine.

Every record is checked here; the engine itself assumes well-formed input.
"""
from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any

from .accounts import ASSET_TYPES, RETURN_KINDS, Asset
from .cashflow import ESCALATION_KINDS, FREQUENCIES, RecurringItem
from .plan import BudgetSettings


class RecordValidationError(ValueError):
    """Raised when a raw record cannot be turned into an engine input."""

    def __init__(self, kind: str, index: int, field: str, message: str):
        self.kind = kind
        self.index = index
        self.field = field
        super().__init__(f"{kind}[{index}].{field}: {message}")


def _first(row: dict, *keys: str, default=None):
    for key in keys:
        if key in row and row[key] is not None and row[key] != "":
            return row[key]
    return default


def parse_date(raw: Any) -> date | None:
    """Accept ``YYYY-MM-DD``, ``YYYY-MM`` or a full ISO timestamp; blank means no date."""
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    text = str(raw).strip()
    if not text:
        return None
    if len(text) == 7:
        year, month = map(int, text.split("-"))
        return date(year, month, 1)
    return datetime.fromisoformat(text[:10]).date()


def _number(raw: Any) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError("must be a finite number")
    return value


def _bool(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() in {"true", "1", "yes", "y"}
    return bool(raw)


def _choice(raw: Any, options: list[str]) -> str:
    value = str(raw).strip().upper()
    if value not in options:
        raise ValueError(f"expected one of {', '.join(options)}")
    return value


def _classification_name(row: dict) -> str | None:
    raw = _first(row, "classification", "classificationName")
    if isinstance(raw, dict):
        raw = raw.get("name")
    return str(raw).strip() if raw else None


class _RowReader:
    def __init__(self, kind: str, index: int, row: dict):
        self.kind = kind
        self.index = index
        self.row = row

    def get(self, field: str, convert, *aliases: str, default=None):
        raw = _first(self.row, field, *aliases, default=None)
        if raw is None:
            return default
        try:
            return convert(raw)
        except (TypeError, ValueError) as exc:
            raise RecordValidationError(self.kind, self.index, field, str(exc) or "invalid value") from exc

    def fail(self, field: str, message: str) -> RecordValidationError:
        return RecordValidationError(self.kind, self.index, field, message)


def _parse_recurring(rows: list[dict] | None, flow_type: str) -> list[RecurringItem]:
    kind = "expenses" if flow_type == "expense" else "incomes"
    items: list[RecurringItem] = []
    seen: set[str] = set()
    for index, row in enumerate(rows or []):
        if not isinstance(row, dict):
            raise RecordValidationError(kind, index, "*", "record must be an object")
        name = str(row.get("name", "")).strip()
        if not name:
            continue
        reader = _RowReader(kind, index, row)
        item_id = str(row.get("id") or f"{flow_type}-{index}")
        if item_id in seen:
            raise reader.fail("id", f"duplicate {flow_type} id {item_id!r}")
        seen.add(item_id)
        amount = reader.get("amount", _number, default=None)
        if amount is None:
            raise reader.fail("amount", "is required")
        active_from = reader.get("startDate", parse_date, "activeFrom")
        active_to = reader.get("endDate", parse_date, "activeTo")
        if active_from and active_to and active_to < active_from:
            raise reader.fail("endDate", "must not be before startDate")
        items.append(
            RecurringItem(
                id=item_id,
                name=name,
                amount=amount,
                frequency=reader.get("frequency", lambda v: _choice(v, FREQUENCIES), default="MONTHLY"),
                escalation=reader.get(
                    "increaseType", lambda v: _choice(v, ESCALATION_KINDS), "escalation", default="FIXED"
                ),
                escalation_rate=reader.get("increaseRate", _number, "escalationRate", default=0.0),
                active_from=active_from,
                active_to=active_to,
                taxable=reader.get("isTaxed", _bool, "taxable", default=False) if flow_type == "income" else False,
                classification=_classification_name(row),
                flow_type=flow_type,
            )
        )
    return items


def parse_expenses(rows: list[dict] | None) -> list[RecurringItem]:
    return _parse_recurring(rows, "expense")


def parse_incomes(rows: list[dict] | None) -> list[RecurringItem]:
    return _parse_recurring(rows, "income")


def parse_assets(rows: list[dict] | None) -> list[Asset]:
    assets: list[Asset] = []
    seen: set[str] = set()
    for index, row in enumerate(rows or []):
        if not isinstance(row, dict):
            raise RecordValidationError("assets", index, "*", "record must be an object")
        name = str(row.get("name", "")).strip()
        if not name:
            continue
        reader = _RowReader("assets", index, row)
        asset_id = str(row.get("id") or f"asset-{index}")
        if asset_id in seen:
            raise reader.fail("id", f"duplicate asset id {asset_id!r}")
        seen.add(asset_id)
        dividend_rate = reader.get("annualDividend", _number, "annualDividendRate", default=0.0)
        if dividend_rate < 0:
            raise reader.fail("annualDividend", "must not be negative")
        dividend_from = reader.get("dividendStartDate", parse_date, "dividendActiveFrom")
        dividend_to = reader.get("dividendEndDate", parse_date, "dividendActiveTo")
        if dividend_from and dividend_to and dividend_to <= dividend_from:
            raise reader.fail("dividendEndDate", "must be after dividendStartDate")
        assets.append(
            Asset(
                id=asset_id,
                name=name,
                asset_type=reader.get("type", lambda v: _choice(v, ASSET_TYPES), "assetType", default="OTHER"),
                value=reader.get("value", _number, default=0.0),
                annual_return=reader.get("annualReturn", _number, default=0.0),
                return_kind=reader.get("returnType", lambda v: _choice(v, RETURN_KINDS), "returnKind", default="FIXED"),
                annual_dividend_rate=dividend_rate,
                dividend_active_from=dividend_from,
                dividend_active_to=dividend_to,
                dividend_taxable=reader.get("dividendTaxable", _bool, default=True),
                sale_date=reader.get("saleDate", parse_date),
            )
        )
    return assets


def parse_settings(payload: dict) -> BudgetSettings:
    reader = _RowReader("budget", 0, payload)
    months = reader.get("months", lambda v: int(_number(v)))
    if months is not None and months < 1:
        raise reader.fail("months", "must be at least 1")
    return BudgetSettings(
        inflation_rate=reader.get("inflationRate", _number, "inflation_rate", default=2.5),
        horizon_end_date=reader.get("projectEndDate", parse_date, "horizonEndDate"),
        months=months,
    )
