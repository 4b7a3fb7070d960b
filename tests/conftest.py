"""
Travel Diary Backend — Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── test_settings:   Settings pointing at a fresh SQLite file in tmp_path
    ├── database:        Database handle on that file with the schema created
    ├── test_app:        App created from test_settings with its lifespan entered
    └── test_client:     HTTPX AsyncClient talking to test_app in-process
"""

import os
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Keep the module-level app quiet and away from the working directory
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_travel_diary.db"

from travel_diary.config import Settings  # noqa: E402
from travel_diary.database import Database  # noqa: E402
from travel_diary.main import create_app  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_user(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = user
            result = await user_service.get_user(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings for one test: its own database file, no .env influence on the URL."""
    db_file = tmp_path / "travel_diary_test.db"
    return Settings(
        database_url=f"sqlite+aiosqlite:///{db_file}",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(test_settings) -> AsyncGenerator[Database, None]:
    """A Database handle with the schema already created; disposed afterwards."""
    db = Database(test_settings.database_url)
    await db.init_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def test_app(test_settings):
    """
    App instance with its lifespan running.

    ASGITransport does not send lifespan events, so the fixture enters the
    lifespan context itself; the schema exists before the first request.
    """
    app = create_app(test_settings)
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def test_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list_users(test_client):
            response = await test_client.get("/users")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def paris():
    return {"name": "Paris", "latitude": 48.8566, "longitude": 2.3522}


@pytest.fixture
def alice():
    return {"username": "alice", "email": "a@x.com"}
