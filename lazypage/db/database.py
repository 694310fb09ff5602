import logging
from collections.abc import Mapping
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from config import settings
from lazypage.db.base import Row, SqlParams

logger = logging.getLogger(__name__)


class SQLAlchemyDataSource:
    """
    Data source backed by an SQLAlchemy async session factory.

    Mapping params are bound by name (``:name`` placeholders). Sequence params
    are passed positionally to the driver, so the statement must use the
    driver's own paramstyle (``?`` for SQLite, ``$1`` for asyncpg).
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def select(self, sql: str, params: SqlParams) -> list[Row]:
        """
        Run a read-only statement and return its rows as dicts.

        Args:
            sql (str): Statement text
            params (Sequence | Mapping): Bind values

        Returns:
            list[dict]: Result rows in the order produced by the database
        """
        async with self.session_factory() as session:
            if isinstance(params, Mapping):
                result = await session.execute(text(sql), dict(params))
            else:
                connection = await session.connection()
                result = await connection.exec_driver_sql(sql, tuple(params or ()))
            rows = [dict(row) for row in result.mappings().all()]
        logger.debug(f"Data source returned {len(rows)} rows")
        return rows


def _engine_options(url: str) -> dict:
    options = {"echo": settings.DEBUG}
    if not url.startswith("sqlite"):
        options.update(
            pool_pre_ping=True,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )
    return options


db_url = settings.DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://")

engine = create_async_engine(db_url, **_engine_options(db_url))

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides database session.

    Yields:
        AsyncSession: Database session
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


def get_data_source() -> SQLAlchemyDataSource:
    """Data source bound to the configured database."""
    return SQLAlchemyDataSource(AsyncSessionLocal)
