from .constants import (
    ADDITIONAL_RATE,
    BASIC_RATE,
    BASIC_RATE_LIMIT,
    HIGHER_RATE,
    HIGHER_RATE_LIMIT,
    PERSONAL_ALLOWANCE,
)
from .rates import round_to_currency

BANDS = (
    (PERSONAL_ALLOWANCE, BASIC_RATE_LIMIT, BASIC_RATE),
    (BASIC_RATE_LIMIT, HIGHER_RATE_LIMIT, HIGHER_RATE),
    (HIGHER_RATE_LIMIT, None, ADDITIONAL_RATE),
)


def calculate_tax(monthly_income: float) -> int:
    """Progressive tax owed on one month of taxable income."""
    if monthly_income <= PERSONAL_ALLOWANCE:
        return 0
    tax = 0.0
    for lower, upper, rate in BANDS:
        if monthly_income <= lower:
            break
        top = monthly_income if upper is None else min(monthly_income, upper)
        tax += (top - lower) * rate
    return round_to_currency(tax)
