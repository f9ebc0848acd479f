from asset_api.schemas.asset import AssetInput, AssetOutput, AssetResponse
from asset_api.schemas.common import BaseResponse
from asset_api.schemas.pagination import MetaPagination

__all__ = [
    "AssetInput", "AssetOutput", "AssetResponse",
    "BaseResponse",
    "MetaPagination",
]
