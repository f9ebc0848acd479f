import logging

from fastapi import APIRouter, Depends, Query

from asset_api.core.dependencies import get_asset_service
from asset_api.core.exceptions import BadRequestError
from asset_api.schemas.asset import AssetInput, AssetResponse
from asset_api.schemas.common import BaseResponse
from asset_api.schemas.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MetaPagination
from asset_api.services.asset_service import AssetService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assets", tags=["assets"])


def _require_id(asset_id: str) -> str:
    asset_id = asset_id.strip()
    if not asset_id:
        raise BadRequestError("invalid request")
    return asset_id


@router.post("", response_model=AssetResponse, response_model_exclude_none=True, status_code=201)
async def create(
    body: AssetInput,
    service: AssetService = Depends(get_asset_service),
):
    """Create an asset; (name, type) must not already exist among live assets."""
    return await service.create_asset(body)


@router.get("", response_model=MetaPagination, response_model_exclude_none=True)
async def list_all(
    page: int = Query(DEFAULT_PAGE),
    limit: int = Query(DEFAULT_LIMIT),
    order: str | None = Query(None),
    sort_by: str | None = Query(None),
    service: AssetService = Depends(get_asset_service),
):
    pagination = MetaPagination(page=page, limit=limit, order=order, sort_by=sort_by)
    return await service.list_assets(pagination.parse_pagination())


@router.get("/{asset_id}", response_model=AssetResponse, response_model_exclude_none=True)
async def get_one(asset_id: str, service: AssetService = Depends(get_asset_service)):
    return await service.get_asset_by_id(_require_id(asset_id))


@router.put("/{asset_id}", response_model=AssetResponse, response_model_exclude_none=True)
async def update(
    asset_id: str,
    body: AssetInput,
    service: AssetService = Depends(get_asset_service),
):
    return await service.update_asset(_require_id(asset_id), body)


@router.delete("/{asset_id}", response_model=BaseResponse, response_model_exclude_none=True)
async def delete(asset_id: str, service: AssetService = Depends(get_asset_service)):
    """Soft delete: the row stays, but it no longer shows up in reads."""
    return await service.delete_asset(_require_id(asset_id))
