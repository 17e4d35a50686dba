"""Unit tests for UserService against the SQLite-backed repository."""

import pytest

from recordvault.core.exceptions import ConflictError, NotFoundError
from recordvault.core.repositories import UserRepository
from recordvault.core.schemas.auth import UserUpdateRequest
from recordvault.core.services import UserService


@pytest.fixture
def service(test_session):
    return UserService(UserRepository(test_session))


async def test_list_and_get(service, test_user, other_user):
    assert [u.id for u in await service.list_users()] == [test_user.id, other_user.id]
    assert (await service.get_user(other_user.id)).username == "bob"

    with pytest.raises(NotFoundError):
        await service.get_user(999)


async def test_update_own_account(service, test_user):
    user = await service.update_user(
        test_user.id, UserUpdateRequest(email="Alice@Vinyl.example", username="alice_v")
    )

    assert user.email == "alice@vinyl.example"
    assert user.username == "alice_v"


async def test_update_keeping_current_values_is_allowed(service, test_user):
    user = await service.update_user(
        test_user.id, UserUpdateRequest(email="alice@example.com", username="alice")
    )
    assert user.username == "alice"


async def test_update_clashing_with_other_account(service, test_user, other_user):
    with pytest.raises(ConflictError):
        await service.update_user(
            test_user.id, UserUpdateRequest(email="bob@example.com", username="alice")
        )


async def test_delete(service, test_user):
    user_id = test_user.id
    await service.delete_user(user_id)

    with pytest.raises(NotFoundError):
        await service.get_user(user_id)
    with pytest.raises(NotFoundError):
        await service.delete_user(user_id)
