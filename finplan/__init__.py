"""Household cash-flow, tax and asset projection."""

__version__ = "0.1.0"
