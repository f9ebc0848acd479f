"""Thin adapter over the relational store, scoped to the ``assets`` table.

A transaction handle is a dedicated ``AsyncSession`` with an open
transaction. Operations that receive ``tx=None`` run in their own short-lived
session instead. Nothing here retries or wraps errors; SQLAlchemy exceptions
reach the caller as raised.
"""
from collections.abc import Sequence

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from asset_api.models.asset import Asset


class AssetStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def begin(self) -> AsyncSession:
        tx = self._session_factory()
        await tx.begin()
        return tx

    async def commit(self, tx: AsyncSession) -> None:
        await tx.commit()
        await tx.close()

    async def rollback(self, tx: AsyncSession) -> None:
        try:
            await tx.rollback()
        finally:
            await tx.close()

    async def find_first(
        self,
        *criteria: ColumnElement[bool],
        order_by: Sequence[ColumnElement] = (),
    ) -> Asset | None:
        async with self._session_factory() as session:
            result = await session.execute(
                select(Asset).where(*criteria).order_by(*order_by).limit(1)
            )
            return result.scalars().first()

    async def find_all(
        self,
        *criteria: ColumnElement[bool],
        order_by: Sequence[ColumnElement] = (),
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Asset]:
        query = select(Asset).where(*criteria).order_by(*order_by).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        async with self._session_factory() as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def count(self, *criteria: ColumnElement[bool]) -> int:
        async with self._session_factory() as session:
            result = await session.execute(select(func.count(Asset.id)).where(*criteria))
            return result.scalar() or 0

    async def insert(self, asset: Asset, tx: AsyncSession | None = None) -> Asset:
        if tx is not None:
            tx.add(asset)
            await tx.flush()
            return asset

        async with self._session_factory() as session:
            session.add(asset)
            await session.commit()
        return asset

    async def save(self, asset: Asset, tx: AsyncSession | None = None) -> Asset:
        """Upsert by primary key."""
        if tx is not None:
            merged = await tx.merge(asset)
            await tx.flush()
            return merged

        async with self._session_factory() as session:
            merged = await session.merge(asset)
            await session.commit()
        return merged
