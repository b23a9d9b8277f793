"""
NSS Management Backend: Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (mocked DB session, sample
       payloads, API client over an in-memory database).

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession (service unit tests)
    ├── volunteer_payload / event_payload / activity_payload: request bodies
    ├── test_engine: in-memory SQLite engine with all tables created
    └── test_client: HTTPX AsyncClient talking to a fresh app instance
"""

import os

# Override settings BEFORE any application imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from nss_management.database import Base, get_db_session
from nss_management.main import create_app


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        result = MagicMock()
        result.scalar_one_or_none.return_value = record
        mock_db_session.execute.return_value = result
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def volunteer_payload():
    return {
        "name": "Asha Verma",
        "email": "asha@example.org",
        "phone": "9876543210",
        "college": "Government Engineering College",
    }


@pytest.fixture
def event_payload():
    return {
        "name": "Blood Donation Camp",
        "date": "2026-03-01T09:00:00Z",
        "location": "Main Auditorium",
        "description": "Annual camp with the district hospital",
    }


@pytest.fixture
def activity_payload():
    return {
        "name": "Tree Plantation",
        "date": "2026-02-14",
        "hours": 4,
        "description": "Campus green drive",
    }


# ══════════════════════════════════════════════════════════════════════════
# API Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_engine():
    """
    In-memory SQLite engine shared by every connection of one test.

    StaticPool keeps a single connection so the tables created here are
    visible to the sessions opened by the app.
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
async def test_client(test_engine) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient routed straight into a fresh FastAPI app.

    get_db_session is overridden with the same commit/rollback behaviour,
    bound to the in-memory test engine.
    """
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = override_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
