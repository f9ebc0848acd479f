from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from asset_api.db.engine import async_session_factory


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """FastAPI dependency; tests override it to point at a throwaway database."""
    return async_session_factory
