from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal

ReturnKind = Literal["FIXED", "INFLATION_LINKED"]


@dataclass(frozen=True)
class Asset:
    id: str
    name: str
    asset_type: str
    value: float
    annual_return: float = 0.0
    return_kind: ReturnKind = "FIXED"
    annual_dividend_rate: float = 0.0
    dividend_active_from: date | None = None
    dividend_active_to: date | None = None
    dividend_taxable: bool = True
    sale_date: date | None = None

    def normalized_type(self) -> str:
        return self.asset_type.upper()

    def is_cash(self) -> bool:
        return self.normalized_type() == "CASH"
