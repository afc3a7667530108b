"""
Pytest configuration and fixtures for catalogadmin tests.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from catalogadmin.api.deps import get_db
from catalogadmin.api.main import app
from catalogadmin.config.database import DatabaseManager
from catalogadmin.config.settings import Settings

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def mock_settings() -> Settings:
    """Settings pointing at an in-memory database."""
    return Settings(
        database_url=TEST_DATABASE_URL,
        api_base_url="http://test/api/v1",
    )


@pytest.fixture
async def test_db() -> AsyncGenerator[DatabaseManager, None]:
    """Fresh in-memory database with every table created."""
    manager = DatabaseManager(TEST_DATABASE_URL)
    await manager.create_tables()
    try:
        yield manager
    finally:
        await manager.close()


@pytest.fixture
async def db_session(test_db: DatabaseManager) -> AsyncGenerator[AsyncSession, None]:
    """Session on the test database; rolled back after the test."""
    async with test_db.get_session_factory()() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
async def async_client(test_db: DatabaseManager) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client wired to the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async for session in test_db.get_session():
            yield session

    app.dependency_overrides[get_db] = override_get_db

    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
