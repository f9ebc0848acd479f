from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession

from asset_api.db.base import utcnow
from asset_api.db.store import AssetStore
from asset_api.models.asset import Asset
from asset_api.schemas.pagination import MetaPagination


class AssetRepository(ABC):
    """Data access for assets.

    Every read hides soft-deleted rows. Write methods take an optional
    transaction handle obtained from ``start_transaction``; without one they
    run straight against the store.
    """

    @abstractmethod
    async def start_transaction(self) -> AsyncSession: ...

    @abstractmethod
    async def commit_transaction(self, tx: AsyncSession) -> None: ...

    @abstractmethod
    async def rollback_transaction(self, tx: AsyncSession) -> None: ...

    @abstractmethod
    async def find_by_id(self, asset_id: str) -> Asset | None: ...

    @abstractmethod
    async def find_by_name_and_type(self, name: str, type_: str) -> Asset | None: ...

    @abstractmethod
    async def list(self, pagination: MetaPagination) -> tuple[list[Asset], int]: ...

    @abstractmethod
    async def create(self, asset: Asset, tx: AsyncSession | None = None) -> Asset: ...

    @abstractmethod
    async def update(self, asset: Asset, tx: AsyncSession | None = None) -> Asset: ...

    @abstractmethod
    async def soft_delete(self, asset: Asset, tx: AsyncSession | None = None) -> None: ...


class SqlAlchemyAssetRepository(AssetRepository):
    def __init__(self, store: AssetStore):
        self.store = store

    async def start_transaction(self) -> AsyncSession:
        return await self.store.begin()

    async def commit_transaction(self, tx: AsyncSession) -> None:
        await self.store.commit(tx)

    async def rollback_transaction(self, tx: AsyncSession) -> None:
        await self.store.rollback(tx)

    async def find_by_id(self, asset_id: str) -> Asset | None:
        return await self.store.find_first(
            Asset.id == asset_id,
            Asset.deleted_at.is_(None),
            order_by=(Asset.created_at.desc(),),
        )

    async def find_by_name_and_type(self, name: str, type_: str) -> Asset | None:
        return await self.store.find_first(
            Asset.name == name,
            Asset.type == type_,
            Asset.deleted_at.is_(None),
            order_by=(Asset.created_at.desc(),),
        )

    async def list(self, pagination: MetaPagination) -> tuple[list[Asset], int]:
        # sort_by/order are carried on the pagination but listing is always newest first
        total = await self.store.count(Asset.deleted_at.is_(None))
        assets = await self.store.find_all(
            Asset.deleted_at.is_(None),
            order_by=(Asset.created_at.desc(),),
            limit=pagination.limit,
            offset=pagination.offset,
        )
        return assets, total

    async def create(self, asset: Asset, tx: AsyncSession | None = None) -> Asset:
        return await self.store.insert(asset, tx)

    async def update(self, asset: Asset, tx: AsyncSession | None = None) -> Asset:
        return await self.store.save(asset, tx)

    async def soft_delete(self, asset: Asset, tx: AsyncSession | None = None) -> None:
        asset.deleted_at = utcnow()
        await self.store.save(asset, tx)
