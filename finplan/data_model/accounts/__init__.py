from .constants import ASSET_TYPES, RETURN_KINDS
from .defaults import default_asset_rows
from .items import Asset

__all__ = [
    "ASSET_TYPES",
    "RETURN_KINDS",
    "Asset",
    "default_asset_rows",
]
