"""
Userbase Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (in-memory DB, API client, mocks).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── db_engine: In-memory SQLite engine with the schema created
    ├── db_session: AsyncSession bound to db_engine
    ├── mock_repository: AsyncMock standing in for UserRepository
    ├── sample_user_data: Field values for a valid user
    ├── test_app: FastAPI app whose DB dependency points at db_engine
    └── test_client: HTTPX AsyncClient for API endpoint testing
"""

import os

# Override settings for testing BEFORE any app imports
# Why: app.config builds its settings singleton at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db_session
from app.models.user import User  # noqa: F401  (registers the table on Base)
from app.repositories.user_repository import UserRepository


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    Provides a fresh in-memory SQLite database per test.

    StaticPool keeps a single connection, so every session in the test sees
    the same in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def mock_repository():
    """
    Provides a mock UserRepository.

    Usage:
        mock_repository.find_by_id.return_value = None
        with pytest.raises(NotFoundError): ...
    """
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def sample_user_data():
    return {
        "name": "Ann",
        "email": "ann@x.com",
        "about": "Writes the release notes.",
    }


# ══════════════════════════════════════════════════════════════════════════
# API Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_app(db_engine):
    """
    A fresh FastAPI app whose get_db_session dependency uses db_engine.

    The override mirrors app.database.get_db_session: commit on success,
    roll back on error.
    """
    from app.main import create_app

    app = create_app()
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    raise_app_exceptions=False: unhandled errors come back as the 500
    response the app sends, instead of being re-raised into the test.
    """
    transport = ASGITransport(app=test_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
