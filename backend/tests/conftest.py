"""
Notes API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_store: AsyncMock standing in for a NoteStore
    ├── sample_note: Note ORM instance with fixed values
    ├── db_engine / db_session: throwaway SQLite database (aiosqlite)
    ├── mock_client: HTTPX client whose routes use mock_store
    └── test_client: HTTPX client backed by the SQLite database
"""

import os
import tempfile
from datetime import datetime, timezone
from typing import AsyncGenerator

# Override settings BEFORE any notes_api import, so the module-level
# settings and engine never point at a real server
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="notes_api_test_"), "unused.db"
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "https://seen.red"
os.environ["PREVENT_DUPLICATE_NOTES"] = "false"

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from notes_api.database import Base, get_db_session
from notes_api.main import create_app
from notes_api.models.note import Note
from notes_api.services.note_store import NoteStore
from notes_api.services.sql_note_store import get_note_store


@pytest.fixture
def mock_store():
    """
    A NoteStore double; every coroutine method is an AsyncMock.

    Usage:
        mock_store.get_by_id.return_value = sample_note
        mock_store.create.side_effect = StoreError()
    """
    return AsyncMock(spec=NoteStore)


@pytest.fixture
def sample_note():
    """A stored note as the store would hand it back."""
    return Note(
        id=1,
        text="a",
        date=datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
    )


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    Async engine on a fresh SQLite file with the schema created.

    Disposed after the test so no pooled connection outlives its loop.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def mock_client(mock_store):
    """
    HTTPX client for an app whose routes receive mock_store.

    Lets tests assert exactly which store calls a request made.
    """
    app = create_app()
    app.dependency_overrides[get_note_store] = lambda: mock_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def test_client(db_engine):
    """
    HTTPX client for an app talking to the SQLite test database.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
