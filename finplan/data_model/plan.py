# data_model/plan.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class BudgetSettings:
    """Owner-wide settings read on every projection request."""

    inflation_rate: float = 2.5
    horizon_end_date: date | None = None
    months: int | None = None
