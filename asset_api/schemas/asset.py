from datetime import datetime

from pydantic import BaseModel, Field

from asset_api.models.asset import Asset
from asset_api.schemas.common import BaseResponse

INPUT_DATE_FORMAT = "%Y-%m-%d"
DETAIL_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
LIST_DATE_FORMAT = "%Y-%m-%d"


class AssetInput(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    type: str = Field(min_length=1, max_length=255)
    value: float
    acquisition_date: str = Field(min_length=1, examples=["2023-05-01"])


class AssetOutput(BaseModel):
    id: str
    name: str
    type: str
    value: float
    acquisition_date: str
    created_at: str
    updated_at: str

    @classmethod
    def from_asset(cls, asset: Asset, fmt: str = DETAIL_DATETIME_FORMAT) -> "AssetOutput":
        return cls(
            id=asset.id,
            name=asset.name,
            type=asset.type,
            value=asset.value,
            acquisition_date=_format(asset.acquisition_date, fmt),
            created_at=_format(asset.created_at, fmt),
            updated_at=_format(asset.updated_at, fmt),
        )


class AssetResponse(BaseResponse):
    data: AssetOutput | None = None


def _format(value: datetime, fmt: str) -> str:
    return value.strftime(fmt)
