import logging
import time

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from asset_api.config import settings

logger = logging.getLogger(__name__)

SLOW_QUERY_THRESHOLD = 0.5  # seconds


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        return {}
    return {
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "connect_args": {"statement_cache_size": 0, "prepared_statement_cache_size": 0},
    }


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    new_engine = create_async_engine(url, echo=echo, **_engine_options(url))
    _attach_slow_query_logging(new_engine)
    return new_engine


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


# Slow query logging: any statement taking >= SLOW_QUERY_THRESHOLD
def _attach_slow_query_logging(target: AsyncEngine) -> None:
    @event.listens_for(target.sync_engine, "before_cursor_execute")
    def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        conn.info["query_start_time"] = time.monotonic()

    @event.listens_for(target.sync_engine, "after_cursor_execute")
    def _after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        start = conn.info.pop("query_start_time", None)
        if start is None:
            return
        elapsed = time.monotonic() - start
        if elapsed >= SLOW_QUERY_THRESHOLD:
            logger.warning(
                "SLOW QUERY (%.3fs): %s | params=%s",
                elapsed,
                statement[:500],
                str(parameters)[:200] if parameters else None,
            )


engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

async_session_factory = build_session_factory(engine)
