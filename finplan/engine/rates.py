import math


def monthly_rate(annual_rate: float) -> float:
    """Monthly compounding rate equivalent to an annual percentage (2.5 == 2.5%)."""
    return (1 + annual_rate / 100.0) ** (1 / 12) - 1


def round_to_currency(amount: float) -> int:
    """Round to whole pounds, halves away from minus infinity."""
    return int(math.floor(amount + 0.5))
