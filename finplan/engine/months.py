# engine/months.py
"""Whole-month date arithmetic (year * 12 + month), ignoring days."""
from __future__ import annotations

from datetime import date


def first_of_month(value: date) -> date:
    return value.replace(day=1)


def month_index(value: date) -> int:
    return value.year * 12 + (value.month - 1)


def add_months(value: date, months: int) -> date:
    idx = month_index(value) + months
    return date(idx // 12, idx % 12 + 1, 1)


def months_between(start: date, end: date) -> int:
    """Signed number of whole calendar months from ``start`` to ``end``."""
    return month_index(end) - month_index(start)


def month_label(value: date) -> str:
    return f"{value.year}-{value.month:02d}"


def is_before_month(value: date, boundary: date | None) -> bool:
    return boundary is not None and month_index(value) < month_index(boundary)


def is_after_month(value: date, boundary: date | None) -> bool:
    return boundary is not None and month_index(value) > month_index(boundary)
