import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from asset_api.config import settings
from asset_api.core.error_handlers import register_exception_handlers
from asset_api.core.logging_config import setup_logging
from asset_api.core.middleware import setup_middleware

logger = logging.getLogger(__name__)


async def ensure_tables() -> None:
    """Create the schema if it is missing (alembic remains the source of truth for upgrades)."""
    from asset_api.db.base import Base
    from asset_api.db.engine import engine
    import asset_api.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Starting %s v%s (%s)", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)
    await ensure_tables()
    yield

    from asset_api.db.engine import engine
    await engine.dispose()
    logger.info("Shutting down application")


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="CRUD API for back-office asset records",
        debug=settings.APP_DEBUG,
        lifespan=lifespan,
    )

    setup_middleware(app)
    register_exception_handlers(app)

    @app.get("/")
    async def root():
        return {"data": "Server is up and running"}

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    from asset_api.api.v1 import router as api_v1_router
    app.include_router(api_v1_router, prefix="/api/v1")

    return app


app = create_app()
