"""
Posts API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the test suite.
How:   The suite runs against a throwaway SQLite file (aiosqlite driver).
       Environment overrides are applied before any `app` import so the
       settings singleton and engine pick them up.

Fixtures:
    ├── mock_db_session: AsyncMock session for service/repository unit tests
    ├── sample_post_data: a valid create payload
    ├── db_tables: creates the schema before a test and drops it after
    └── test_client: HTTPX AsyncClient wired to the FastAPI app (with db_tables)
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup (before any app import)
# ══════════════════════════════════════════════════════════════════════════

_test_dir = tempfile.mkdtemp(prefix="posts_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_test_dir, 'test.db')}"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession: execute/flush/commit/rollback/close are awaitable,
    add is a plain MagicMock.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = post
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
def sample_post_data():
    return {
        "title": "Hello",
        "body": "First post body",
        "tags": ["intro", "python"],
    }


@pytest_asyncio.fixture
async def db_tables():
    """Fresh schema per test."""
    from app.database import create_tables, drop_tables

    await create_tables()
    yield
    await drop_tables()


@pytest_asyncio.fixture
async def test_client(db_tables):
    """
    HTTPX AsyncClient that talks to the app through ASGITransport.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/posts")
            assert response.status_code == 200
    """
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
