from .aggregate import aggregate_period, projection_to_frame
from .projector import AssetProjection, project_asset, project_recurring_item
from .rates import monthly_rate, round_to_currency
from .simulator import MonthlyProjectionRow, generate_projection, resolve_horizon
from .summary import summarize
from .tax import calculate_tax

__all__ = [
    "AssetProjection",
    "MonthlyProjectionRow",
    "aggregate_period",
    "calculate_tax",
    "generate_projection",
    "monthly_rate",
    "project_asset",
    "project_recurring_item",
    "projection_to_frame",
    "resolve_horizon",
    "round_to_currency",
    "summarize",
]
