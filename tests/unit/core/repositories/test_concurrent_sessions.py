"""Races between independent sessions sharing one SQLite database file."""

import asyncio

import pytest
from sqlalchemy import event, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from recordvault.core.exceptions import ConflictError
from recordvault.core.models import Base, CollectionToken, Tag, User
from recordvault.core.repositories import (
    CollectionTokenRepository,
    RecordRepository,
    TagRepository,
)
from recordvault.core.services import CollectionService


async def _create_schema(engine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
async def file_engine(tmp_path):
    """Pooled engine, one connection per session, driver-managed transactions."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'vault.db'}")
    await _create_schema(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def savepoint_engine(tmp_path):
    """Like file_engine but with SQLAlchemy-emitted BEGIN so SAVEPOINT works."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tags.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):  # noqa: ANN001
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):  # noqa: ANN001
        conn.exec_driver_sql("BEGIN")

    await _create_schema(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


def _sessions(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def test_concurrent_token_requests_issue_one_token(file_engine):
    sessions = _sessions(file_engine)
    async with sessions() as session:
        user = User(email="dana@example.com", username="dana", password_hash="h")
        session.add(user)
        await session.commit()
        user_id = user.id

    async def issue():
        async with sessions() as session:
            service = CollectionService(
                CollectionTokenRepository(session),
                RecordRepository(session, TagRepository(session)),
            )
            return await service.create_token(user_id)

    results = await asyncio.gather(issue(), issue(), return_exceptions=True)

    issued = [r for r in results if isinstance(r, CollectionToken)]
    refused = [r for r in results if isinstance(r, ConflictError)]
    assert len(issued) == 1, results
    assert len(refused) == 1, results

    async with sessions() as session:
        stmt = select(func.count()).select_from(CollectionToken).where(
            CollectionToken.user_id == user_id
        )
        assert (await session.execute(stmt)).scalar_one() == 1
        stored = await CollectionTokenRepository(session).find_by_user(user_id)
    assert stored.token == issued[0].token


async def test_tag_committed_by_another_session_is_reused(savepoint_engine, monkeypatch):
    sessions = _sessions(savepoint_engine)
    winner_ids = []

    async with sessions() as session:
        repo = TagRepository(session)
        real_find = repo.find_by_slug
        lookups = []

        async def miss_then_read(slug):
            lookups.append(slug)
            if len(lookups) > 1:
                return await real_find(slug)
            # our lookup misses, then another request commits the same slug
            async with sessions() as other:
                winner = await TagRepository(other).find_or_create("Shoegaze")
                await other.commit()
                winner_ids.append(winner.id)
            return None

        monkeypatch.setattr(repo, "find_by_slug", miss_then_read)

        tag = await repo.find_or_create("shoegaze")
        await session.commit()

    assert tag.id == winner_ids[0]
    assert tag.name == "Shoegaze"
    assert lookups == ["shoegaze", "shoegaze"]

    async with sessions() as session:
        assert (await session.execute(select(func.count()).select_from(Tag))).scalar_one() == 1
