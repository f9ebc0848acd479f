import logging
import re
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from asset_api.core.exceptions import (
    SUCCESS,
    BadRequestError,
    ConflictError,
    InternalServerError,
    NotFoundError,
)
from asset_api.models.asset import Asset
from asset_api.repositories.asset_repository import AssetRepository
from asset_api.schemas.asset import (
    INPUT_DATE_FORMAT,
    LIST_DATE_FORMAT,
    AssetInput,
    AssetOutput,
    AssetResponse,
)
from asset_api.schemas.common import BaseResponse
from asset_api.schemas.pagination import MetaPagination

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

INVALID_DATE_MESSAGE = "Invalid acquisition date format"


def parse_acquisition_date(value: str) -> datetime:
    """Parse a strict ``YYYY-MM-DD`` date. Raises ``ValueError`` otherwise."""
    if not _DATE_PATTERN.match(value):
        raise ValueError(f"acquisition date {value!r} is not YYYY-MM-DD")
    return datetime.strptime(value, INPUT_DATE_FORMAT)


class AssetService:
    """Business rules around asset writes and reads.

    This is the only layer that turns failures into ``AppError`` subclasses.
    Each write runs in exactly one transaction; when the mutation or the
    commit fails the transaction is rolled back and the original failure is
    reported, even if the rollback fails too.
    """

    def __init__(self, asset_repo: AssetRepository):
        self.asset_repo = asset_repo

    async def create_asset(self, data: AssetInput) -> AssetResponse:
        try:
            existing = await self.asset_repo.find_by_name_and_type(data.name, data.type)
        except Exception as e:
            logger.error("[AssetService][create_asset] error get existing asset: %s", e)
            raise InternalServerError() from e

        if existing is not None:
            raise ConflictError("Asset already exist")

        try:
            acquisition_date = parse_acquisition_date(data.acquisition_date)
        except ValueError as e:
            logger.info("[AssetService][create_asset] error parsing date: %s", e)
            raise BadRequestError(INVALID_DATE_MESSAGE) from e

        asset = Asset(
            name=data.name,
            type=data.type,
            value=data.value,
            acquisition_date=acquisition_date,
        )
        created = await self._in_transaction(
            "create_asset", lambda tx: self.asset_repo.create(asset, tx)
        )
        logger.info("Asset %s created (%s / %s)", created.id, created.name, created.type)
        return AssetResponse(message=SUCCESS, data=AssetOutput.from_asset(created))

    async def get_asset_by_id(self, asset_id: str) -> AssetResponse:
        asset = await self._get_existing("get_asset_by_id", asset_id)
        return AssetResponse(message=SUCCESS, data=AssetOutput.from_asset(asset))

    async def list_assets(self, pagination: MetaPagination) -> MetaPagination:
        try:
            assets, total = await self.asset_repo.list(pagination)
        except Exception as e:
            logger.error("[AssetService][list_assets] error get assets: %s", e)
            raise InternalServerError() from e

        pagination.set_total(total)
        pagination.data = [AssetOutput.from_asset(a, LIST_DATE_FORMAT) for a in assets]
        pagination.message = SUCCESS
        return pagination

    async def update_asset(self, asset_id: str, data: AssetInput) -> AssetResponse:
        asset = await self._get_existing("update_asset", asset_id)

        try:
            acquisition_date = parse_acquisition_date(data.acquisition_date)
        except ValueError as e:
            logger.info("[AssetService][update_asset] error parsing date: %s", e)
            raise BadRequestError(INVALID_DATE_MESSAGE) from e

        asset.name = data.name
        asset.type = data.type
        asset.value = data.value
        asset.acquisition_date = acquisition_date

        updated = await self._in_transaction(
            "update_asset", lambda tx: self.asset_repo.update(asset, tx)
        )
        return AssetResponse(message=SUCCESS, data=AssetOutput.from_asset(updated))

    async def delete_asset(self, asset_id: str) -> BaseResponse:
        asset = await self._get_existing("delete_asset", asset_id)
        await self._in_transaction(
            "delete_asset", lambda tx: self.asset_repo.soft_delete(asset, tx)
        )
        logger.info("Asset %s soft-deleted", asset_id)
        return BaseResponse(message=SUCCESS)

    async def _get_existing(self, operation: str, asset_id: str) -> Asset:
        try:
            asset = await self.asset_repo.find_by_id(asset_id)
        except Exception as e:
            logger.error("[AssetService][%s] error get existing asset: %s", operation, e)
            raise InternalServerError() from e

        if asset is None:
            raise NotFoundError("Asset not found")
        return asset

    async def _in_transaction(
        self, operation: str, mutate: Callable[[AsyncSession], Awaitable[T]]
    ) -> T:
        try:
            tx = await self.asset_repo.start_transaction()
        except Exception as e:
            logger.error("[AssetService][%s] error start transaction: %s", operation, e)
            raise InternalServerError() from e

        try:
            result = await mutate(tx)
            await self.asset_repo.commit_transaction(tx)
        except Exception as e:
            logger.error("[AssetService][%s] error in transaction: %s", operation, e)
            await self._rollback(operation, tx)
            if isinstance(e, IntegrityError):
                raise ConflictError("Asset already exist") from e
            raise InternalServerError() from e
        return result

    async def _rollback(self, operation: str, tx: AsyncSession) -> None:
        try:
            await self.asset_repo.rollback_transaction(tx)
        except Exception as e:
            logger.error("[AssetService][%s] error rollback transaction: %s", operation, e)
