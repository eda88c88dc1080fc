"""
crud-api Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Overview:
    ├── store: Fresh SQLite schema per test (created, then dropped)
    ├── db_session: AsyncSession against that schema, for service tests
    ├── mock_db_session: AsyncMock session for failure injection
    ├── test_client: HTTPX AsyncClient wired to the FastAPI app
    └── sample_book / sample_wine: wire-format payloads
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any crud_api imports
# Why: Settings and the engine are built once, at import time
_test_dir = tempfile.mkdtemp(prefix="crud_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from crud_api.database import (  # noqa: E402
    async_session_factory,
    create_tables,
    drop_tables,
    engine,
)


# ══════════════════════════════════════════════════════════════════════════
# Store Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def store():
    """
    Creates the books and wines tables, and drops them after the test.

    The engine is disposed at teardown so no pooled connection outlives
    the event loop it was opened on.
    """
    await create_tables()
    yield
    await drop_tables()
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(store):
    """A real AsyncSession on the test database."""
    async with async_session_factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError(...)
        with pytest.raises(StoreError):
            await book_service.list_records(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(store):
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    ASGITransport does not run the lifespan, so the `store` fixture is
    what creates the tables here.
    """
    from crud_api.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Sample Data
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_book():
    return {
        "title": "Dune",
        "author": "Frank Herbert",
        "image": "/images/books/dune.jpg",
    }


@pytest.fixture
def sample_wine():
    return {
        "name": "Barolo Cannubi",
        "year": 2015,
        "country": "Italy",
        "description": "Tar and roses, firm tannins.",
        "image": "/images/wines/barolo.jpg",
        "price": 64.5,
    }
