from collections.abc import AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from asset_api.db.base import Base
from asset_api.db.engine import build_engine, build_session_factory
from asset_api.db.session import get_session_factory
from asset_api.db.store import AssetStore
from asset_api.main import create_app
from asset_api.repositories.asset_repository import SqlAlchemyAssetRepository

# Use SQLite for testing (no PostgreSQL needed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///./test.db"


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    # Import all models
    import asset_api.models  # noqa: F401

    engine = build_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield build_session_factory(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def repo(session_factory: async_sessionmaker[AsyncSession]) -> SqlAlchemyAssetRepository:
    return SqlAlchemyAssetRepository(AssetStore(session_factory))


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncClient]:
    app = create_app()
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def laptop(client: AsyncClient) -> dict:
    response = await client.post(
        "/api/v1/assets",
        json={
            "name": "Laptop",
            "type": "Electronics",
            "value": 1500.0,
            "acquisition_date": "2023-05-01",
        },
    )
    assert response.status_code == 201
    return response.json()["data"]
