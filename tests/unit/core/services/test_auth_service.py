"""Unit tests for AuthService."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from recordvault.core.exceptions import ConflictError, UnauthorizedError
from recordvault.core.schemas.auth import LoginRequest, RegisterRequest
from recordvault.core.services import auth_service as auth_module
from recordvault.core.services.auth_service import AuthService
from recordvault.security import decode_access_token


class FakeUserRepo:
    def __init__(self):
        self.users = {}

    async def is_taken(self, email, username):
        return any(u.email == email or u.username == username for u in self.users.values())

    async def create_user(self, user_data):
        user = SimpleNamespace(
            id=len(self.users) + 1, created_at=datetime.now(timezone.utc), **user_data
        )
        self.users[user.id] = user
        return user

    async def get_by_email(self, email):
        return next((u for u in self.users.values() if u.email == email), None)

    async def update_password_hash(self, user_id, password_hash):
        self.users[user_id].password_hash = password_hash


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    monkeypatch.setattr(auth_module, "hash_password", lambda p: f"hashed:{p}")
    monkeypatch.setattr(
        auth_module, "verify_password", lambda p, h: h in (f"hashed:{p}", f"legacy:{p}")
    )
    monkeypatch.setattr(auth_module, "needs_update", lambda h: h.startswith("legacy:"))


@pytest.fixture
def repo():
    return FakeUserRepo()


def _register(email="miles@example.com", username="miles", password="Password123!"):
    return RegisterRequest(email=email, username=username, password=password)


async def test_register_returns_token_for_new_user(repo):
    svc = AuthService(repo)

    resp = await svc.register(_register())

    assert resp.token_type == "bearer"
    assert resp.user_id == 1
    assert decode_access_token(resp.access_token) == 1
    assert resp.expires_at > resp.issued_at
    assert repo.users[1].password_hash == "hashed:Password123!"


async def test_register_duplicate_email_or_username(repo):
    svc = AuthService(repo)
    await svc.register(_register())

    with pytest.raises(ConflictError):
        await svc.register(_register(username="other"))
    with pytest.raises(ConflictError):
        await svc.register(_register(email="other@example.com"))


async def test_login(repo):
    svc = AuthService(repo)
    await svc.register(_register())

    resp = await svc.login(LoginRequest(email="MILES@example.com", password="Password123!"))
    assert resp.user_id == 1


async def test_login_wrong_password_and_unknown_email(repo):
    svc = AuthService(repo)
    await svc.register(_register())

    with pytest.raises(UnauthorizedError):
        await svc.login(LoginRequest(email="miles@example.com", password="wrong"))
    with pytest.raises(UnauthorizedError):
        await svc.login(LoginRequest(email="ghost@example.com", password="Password123!"))


async def test_login_upgrades_deprecated_hash(repo):
    svc = AuthService(repo)
    await svc.register(_register())
    repo.users[1].password_hash = "legacy:Password123!"

    resp = await svc.login(LoginRequest(email="miles@example.com", password="Password123!"))

    assert resp.user_id == 1
    assert repo.users[1].password_hash == "hashed:Password123!"


async def test_login_leaves_current_hash_alone(repo):
    svc = AuthService(repo)
    await svc.register(_register())
    calls = []

    async def record_update(user_id, password_hash):
        calls.append(user_id)

    repo.update_password_hash = record_update

    await svc.login(LoginRequest(email="miles@example.com", password="Password123!"))
    assert calls == []
