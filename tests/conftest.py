"""Shared pytest fixtures configured to use SQLite in-memory for unit tests."""

import logging
import os

# settings are read at import time, point them at SQLite before the app loads
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from recordvault.core.models import Base, User
from recordvault.core.repositories import (
    CollectionTokenRepository,
    InMemoryCollectionTokenRepository,
    InMemoryRecordRepository,
    InMemoryTagRepository,
    RecordRepository,
    TagRepository,
)
from recordvault.core.schemas.records import RecordInput
from recordvault.database import get_db_session
from recordvault.main import app
from recordvault.security.jwt import create_access_token

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
async def test_engine():
    """Fresh SQLite in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):  # noqa: ANN001
        # let SQLAlchemy emit BEGIN itself so SAVEPOINT works
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):  # noqa: ANN001
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Database session bound to the per-test engine."""
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


async def _make_user(session: AsyncSession, username: str) -> User:
    user = User(
        email=f"{username}@example.com",
        username=username,
        password_hash="not-a-real-hash",
    )
    session.add(user)
    await session.commit()
    return user


@pytest.fixture
async def test_user(test_session):
    """Create a test user in the database."""
    return await _make_user(test_session, "alice")


@pytest.fixture
async def other_user(test_session):
    """A second user, for ownership checks."""
    return await _make_user(test_session, "bob")


@pytest.fixture
def tag_repo(test_session):
    return TagRepository(test_session)


@pytest.fixture
def record_repo(test_session, tag_repo):
    return RecordRepository(test_session, tag_repo)


@pytest.fixture
def token_repo(test_session):
    return CollectionTokenRepository(test_session)


@pytest.fixture
def memory_tag_repo():
    return InMemoryTagRepository()


@pytest.fixture
def memory_record_repo(memory_tag_repo):
    return InMemoryRecordRepository(memory_tag_repo)


@pytest.fixture
def memory_token_repo():
    return InMemoryCollectionTokenRepository()


@pytest.fixture
def make_record_input():
    """Factory for valid record payloads."""

    def _make(title="Kind of Blue", artist="Miles Davis", **overrides) -> RecordInput:
        data = {
            "title": title,
            "artist": artist,
            "release_date": date(1959, 8, 17),
            "cover_url": f"https://example.com/covers/{title.lower().replace(' ', '-')}.jpg",
        }
        data.update(overrides)
        return RecordInput(**data)

    return _make


@pytest.fixture
def test_app(test_session):
    """FastAPI app with the database dependency pointed at the test session."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers(test_user):
    """Create authentication headers with a valid JWT token."""
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture
def other_auth_headers(other_user):
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}
