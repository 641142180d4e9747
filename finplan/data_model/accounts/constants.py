ASSET_TYPES = ["CASH", "SAVINGS", "PROPERTY", "EQUITY", "BONDS", "OTHER"]
RETURN_KINDS = ["FIXED", "INFLATION_LINKED"]
