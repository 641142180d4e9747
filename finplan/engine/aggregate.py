from typing import Sequence

import pandas as pd

from .months import month_label
from .simulator import MonthlyProjectionRow

REQUIRED_COLUMNS = {"MonthIndex", "Month", "CalendarYear", "MonthInYear"}
FLOW_COLUMNS = [
    "TotalIncomeBeforeTax",
    "TotalIncomeAfterTax",
    "TotalExpenses",
    "NetIncome",
    "Tax",
    "CashFlow",
    "InvestmentIncome",
    "AssetSaleProceeds",
]
ASSET_COLUMN_PREFIX = "Asset:"


def asset_column(asset_id: str) -> str:
    return f"{ASSET_COLUMN_PREFIX}{asset_id}"


def projection_to_frame(rows: Sequence[MonthlyProjectionRow]) -> pd.DataFrame:
    """One record per month: calendar columns, money flows, then one `Asset:<id>` column per asset."""
    records = []
    for m, row in enumerate(rows):
        snapshot = {
            "MonthIndex": m,
            "Month": month_label(row.month),
            "CalendarYear": row.month.year,
            "MonthInYear": row.month.month,
            "TotalIncomeBeforeTax": row.total_income_before_tax,
            "TotalIncomeAfterTax": row.total_income_after_tax,
            "TotalExpenses": row.total_expenses,
            "NetIncome": row.net_income,
            "Tax": row.tax,
            "CashFlow": row.cash_flow,
            "InvestmentIncome": row.investment_income,
            "AssetSaleProceeds": row.asset_sale_proceeds,
        }
        snapshot.update({asset_column(key): value for key, value in row.asset_values.items()})
        snapshot["TotalAssets"] = sum(row.asset_values.values())
        records.append(snapshot)
    return pd.DataFrame(records)


def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS.difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")
    return df.sort_values("MonthIndex").copy()


def aggregate_period(df: pd.DataFrame, freq: str = "M") -> pd.DataFrame:
    """Roll monthly rows up to calendar quarters or years.

    Flow columns are summed over the period; balances (asset columns) keep the
    value of the period's last month.
    """
    if df.empty:
        return df

    freq = (freq or "M").upper()
    df = _prepare(df)

    if freq == "M":
        df["PeriodValue"] = df["MonthIndex"]
        df["Period"] = df["Month"]
        return df
    if freq == "Q":
        quarter = (df["MonthInYear"] - 1) // 3 + 1
        df["PeriodValue"] = df["CalendarYear"] * 4 + quarter - 1
        df["Period"] = df["CalendarYear"].astype(str) + " Q" + quarter.astype(str)
    elif freq == "Y":
        df["PeriodValue"] = df["CalendarYear"]
        df["Period"] = df["CalendarYear"].astype(str)
    else:
        raise ValueError(f"Unsupported frequency {freq!r}; expected M, Q or Y")

    columns = {col: (col, "sum" if col in FLOW_COLUMNS else "last") for col in df.columns if col != "PeriodValue"}
    return df.groupby("PeriodValue", as_index=False).agg(Months=("MonthIndex", "count"), **columns)
