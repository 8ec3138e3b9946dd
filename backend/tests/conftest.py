"""
TourGuide Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for isolated service tests
    ├── media_store: MediaStore rooted in a fresh temp directory
    ├── sample_image_bytes: Minimal JPEG bytes for upload tests
    ├── db_engine: Throwaway SQLite database (aiosqlite) with the full schema
    ├── db_session: Real AsyncSession on that database
    └── test_client: HTTPX AsyncClient wired to the app with the database
                     and media store dependencies overridden
"""

import os
import tempfile
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any app imports so nothing points at a real
# PostgreSQL server or the working directory's uploads/.
_TEST_ROOT = tempfile.mkdtemp(prefix="tourguide_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_ROOT}/app.db"
os.environ["UPLOAD_DIR"] = os.path.join(_TEST_ROOT, "uploads")
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_DEV_DATA"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import app.models  # noqa: F401  (registers all tables)
from app.database import Base, get_db_session
from app.services.media_store import MediaStore, get_media_store


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_tour(mock_db_session):
            mock_db_session.get.return_value = None
            with pytest.raises(NotFoundError):
                await tour_service.get_tour_by_id(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def media_store(tmp_path):
    """A MediaStore writing under this test's temporary directory."""
    return MediaStore(str(tmp_path / "uploads"))


@pytest.fixture
def sample_image_bytes():
    """
    Minimal JPEG: Start of Image (FFD8) + JFIF marker + End of Image (FFD9).
    Not a real photograph, but realistic enough for upload round-trips.
    """
    return (
        b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
        b'\xff\xd9'
    )


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """A fresh SQLite database file with every table created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """A real session for service-level tests; flushed writes are queryable."""
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def test_client(db_engine, media_store):
    """
    HTTPX AsyncClient talking to the FastAPI app in-process.

    get_db_session is replaced by one that mirrors the real dependency
    (commit on success, rollback on error) against the test database, so
    each request is its own transaction just like in production.
    """
    from app.main import app

    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_media_store] = lambda: media_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
