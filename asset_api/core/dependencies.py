from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from asset_api.db.session import get_session_factory
from asset_api.db.store import AssetStore
from asset_api.repositories.asset_repository import AssetRepository, SqlAlchemyAssetRepository
from asset_api.services.asset_service import AssetService


def get_asset_store(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AssetStore:
    return AssetStore(session_factory)


def get_asset_repository(store: AssetStore = Depends(get_asset_store)) -> AssetRepository:
    return SqlAlchemyAssetRepository(store)


def get_asset_service(repo: AssetRepository = Depends(get_asset_repository)) -> AssetService:
    return AssetService(repo)
