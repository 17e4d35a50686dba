"""Tests for UserRepository."""

import pytest
from sqlalchemy import func, select

from recordvault.core.exceptions import ConflictError, NotFoundError
from recordvault.core.models import CollectionToken, Record, User
from recordvault.core.repositories import UserRepository


@pytest.fixture
def user_repo(test_session):
    return UserRepository(test_session)


async def test_create_and_get(user_repo):
    user = await user_repo.create_user(
        {"email": "carol@example.com", "username": "carol", "password_hash": "h"}
    )

    assert isinstance(user.id, int)
    assert (await user_repo.get_by_id(user.id)).username == "carol"
    assert (await user_repo.get_by_email("carol@example.com")).id == user.id
    assert await user_repo.get_by_email("nobody@example.com") is None
    assert await user_repo.get_by_id(12345) is None


async def test_is_taken(user_repo, test_user):
    assert await user_repo.is_taken(test_user.email, "someone-else")
    assert await user_repo.is_taken("fresh@example.com", test_user.username)
    assert not await user_repo.is_taken("fresh@example.com", "fresh")


async def test_duplicate_email_is_conflict(user_repo, test_user):
    with pytest.raises(ConflictError):
        await user_repo.create_user(
            {"email": test_user.email, "username": "another", "password_hash": "h"}
        )


async def _count(session, model) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar_one()


async def test_lookups(user_repo, test_user, other_user):
    assert (await user_repo.get_by_username("bob")).id == other_user.id
    assert await user_repo.get_by_username("nobody") is None
    assert [u.username for u in await user_repo.find_all()] == ["alice", "bob"]


async def test_is_taken_ignores_own_account(user_repo, test_user):
    assert not await user_repo.is_taken(
        test_user.email, test_user.username, exclude_user_id=test_user.id
    )
    assert await user_repo.is_taken(test_user.email, "x", exclude_user_id=test_user.id + 1)


async def test_update(user_repo, test_user):
    updated = await user_repo.update(test_user.id, "alice@new.example.com", "alice2")

    assert updated.id == test_user.id
    assert (await user_repo.get_by_email("alice@new.example.com")).username == "alice2"
    assert await user_repo.get_by_email("alice@example.com") is None


async def test_update_to_taken_username_is_conflict(user_repo, test_user, other_user):
    user_id, taken = test_user.id, other_user.username

    with pytest.raises(ConflictError):
        await user_repo.update(user_id, "alice@example.com", taken)

    assert (await user_repo.get_by_id(user_id)).username == "alice"


async def test_update_missing_user(user_repo):
    with pytest.raises(NotFoundError):
        await user_repo.update(999, "ghost@example.com", "ghost")


async def test_update_password_hash(user_repo, test_user):
    await user_repo.update_password_hash(test_user.id, "new-hash")

    assert (await user_repo.get_by_id(test_user.id)).password_hash == "new-hash"


async def test_delete_cascades_to_records_and_token(
    test_session, user_repo, test_user, other_user, record_repo, token_repo, make_record_input
):
    user_id, other_id = test_user.id, other_user.id
    await record_repo.create(user_id, make_record_input(tags=["Jazz"]))
    await record_repo.create(other_id, make_record_input(title="Kept"))
    await token_repo.create(user_id)

    assert await user_repo.delete(user_id) is True

    assert await user_repo.get_by_id(user_id) is None
    assert await _count(test_session, User) == 1
    assert [r.title for r in await record_repo.find_all_by_user(other_id)] == ["Kept"]
    assert await _count(test_session, Record) == 1
    assert await _count(test_session, CollectionToken) == 0
    assert await user_repo.delete(user_id) is False
