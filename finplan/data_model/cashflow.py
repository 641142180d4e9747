from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Literal

FREQUENCIES = ["MONTHLY", "ANNUAL"]
ESCALATION_KINDS = ["FIXED", "INFLATION_LINKED"]

Frequency = Literal["MONTHLY", "ANNUAL"]
EscalationKind = Literal["FIXED", "INFLATION_LINKED"]


def default_expense_rows() -> List[dict[str, float | str]]:
    return [
        {"name": "Rent", "amount": 1200.0, "frequency": "MONTHLY", "classification": "Housing"},
        {"name": "Mortgage", "amount": 1500.0, "frequency": "MONTHLY", "classification": "Housing"},
        {"name": "Utility Bills", "amount": 200.0, "frequency": "MONTHLY", "classification": "Housing"},
        {"name": "Council Tax", "amount": 150.0, "frequency": "MONTHLY", "classification": "Housing"},
        {"name": "Broadband", "amount": 50.0, "frequency": "MONTHLY", "classification": "Living Costs"},
        {"name": "Mobile Phone", "amount": 30.0, "frequency": "MONTHLY", "classification": "Living Costs"},
        {"name": "Home Insurance", "amount": 300.0, "frequency": "ANNUAL", "classification": "Housing"},
        {"name": "Car Payments", "amount": 300.0, "frequency": "MONTHLY", "classification": "Transport"},
        {"name": "Car Insurance", "amount": 600.0, "frequency": "ANNUAL", "classification": "Transport"},
        {"name": "Car Running Costs", "amount": 150.0, "frequency": "MONTHLY", "classification": "Transport"},
        {"name": "Travel Expenses", "amount": 100.0, "frequency": "MONTHLY", "classification": "Transport"},
        {"name": "Food Shopping", "amount": 400.0, "frequency": "MONTHLY", "classification": "Living Costs"},
        {"name": "Spending Money", "amount": 300.0, "frequency": "MONTHLY", "classification": "Entertainment"},
        {"name": "Contingency", "amount": 200.0, "frequency": "MONTHLY", "classification": "Living Costs"},
        {"name": "Savings", "amount": 500.0, "frequency": "MONTHLY", "classification": "Savings & Investment"},
        {"name": "Pension Contributions", "amount": 400.0, "frequency": "MONTHLY", "classification": "Savings & Investment"},
        {"name": "School Fees", "amount": 12000.0, "frequency": "ANNUAL", "classification": "Living Costs"},
        {"name": "Holidays", "amount": 3000.0, "frequency": "ANNUAL", "classification": "Entertainment"},
    ]


def default_income_rows() -> List[dict[str, float | str | bool]]:
    return [
        {"name": "Salary", "amount": 5000.0, "frequency": "MONTHLY", "isTaxed": True, "classification": "Employment"},
        {"name": "Pension", "amount": 1500.0, "frequency": "MONTHLY", "isTaxed": True, "classification": "Employment"},
        {"name": "Benefits", "amount": 0.0, "frequency": "MONTHLY", "isTaxed": False},
    ]


@dataclass(frozen=True)
class RecurringItem:
    """An expense or income line as stored by the owner; read-only to the engine."""

    id: str
    name: str
    amount: float
    frequency: Frequency = "MONTHLY"
    escalation: EscalationKind = "FIXED"
    escalation_rate: float = 0.0
    active_from: date | None = None
    active_to: date | None = None
    taxable: bool = False
    classification: str | None = None
    flow_type: Literal["expense", "income"] = "expense"

    def amount_per_month(self) -> float:
        return self.amount / 12.0 if self.frequency == "ANNUAL" else self.amount
