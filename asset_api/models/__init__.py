from asset_api.models.asset import Asset

__all__ = [
    "Asset",
]
