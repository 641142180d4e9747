# engine/constants.py
"""Fixed policy values used by the projection engine."""

# UK bands (2024/25), expressed per month
PERSONAL_ALLOWANCE = 12570 / 12
BASIC_RATE_LIMIT = 50270 / 12
HIGHER_RATE_LIMIT = 125140 / 12

BASIC_RATE = 0.20
HIGHER_RATE = 0.40
ADDITIONAL_RATE = 0.45

# Share of dividend income treated as taxable (approximates the dividend allowance)
INVESTMENT_INCOME_TAXABLE_SHARE = 0.8

DEFAULT_HORIZON_MONTHS = 360
MAX_HORIZON_MONTHS = 1200
