"""
Shared database fixtures for unit tests.

Every test gets its own in-memory SQLite database. ``StaticPool`` keeps the
single connection alive so all sessions of a test see the same tables.
"""

from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel.pool import StaticPool

from test.settings import test_settings


@pytest_asyncio.fixture
async def test_engine():
    """Create a test database engine with all application tables."""
    from expressfix.core.database import entities  # noqa: F401
    from expressfix.core.database.base import Base

    engine = create_async_engine(
        test_settings.database.url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session
