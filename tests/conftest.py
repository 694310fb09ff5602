"""
Pytest fixtures for LazyPage tests.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool


def make_rows(start, stop):
    """Rows shaped like the ones a data source returns."""
    return [{"id": i, "name": f"item-{i}"} for i in range(start, stop)]


@pytest.fixture
def data_source():
    """Stand-in data source; set ``data_source.select.return_value`` per test."""
    source = AsyncMock()
    source.select.return_value = []
    return source


@pytest_asyncio.fixture
async def session_factory():
    """In-memory SQLite database holding 25 rows in table ``t``."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.execute(text("CREATE TABLE t (id INTEGER PRIMARY KEY, name TEXT NOT NULL)"))
        await conn.execute(
            text("INSERT INTO t (id, name) VALUES (:id, :name)"),
            make_rows(1, 26),
        )

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()
