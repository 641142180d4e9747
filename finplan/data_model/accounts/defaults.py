from __future__ import annotations

from typing import List


def default_asset_rows() -> List[dict[str, float | str]]:
    return [
        {"name": "Cash", "type": "CASH", "value": 0.0, "annualReturn": 0.0, "annualDividend": 0.0},
        {"name": "Savings", "type": "SAVINGS", "value": 0.0, "annualReturn": 2.5, "annualDividend": 0.0},
        {"name": "Property", "type": "PROPERTY", "value": 0.0, "annualReturn": 3.0, "annualDividend": 0.0},
        {"name": "Equity", "type": "EQUITY", "value": 0.0, "annualReturn": 6.0, "annualDividend": 2.5},
        {"name": "Bonds", "type": "BONDS", "value": 0.0, "annualReturn": 4.0, "annualDividend": 3.0},
        {"name": "Other", "type": "OTHER", "value": 0.0, "annualReturn": 0.0, "annualDividend": 0.0},
    ]
