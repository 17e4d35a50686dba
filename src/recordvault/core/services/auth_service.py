"""Authentication service implementation."""

from datetime import datetime, timedelta, timezone

from ...config import get_settings
from ...security import create_access_token, hash_password, needs_update, verify_password
from ..exceptions import ConflictError, UnauthorizedError
from ..logging import get_logger
from ..models import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from .interfaces import IAuthService

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo
        self.settings = get_settings()

    async def register(self, request: RegisterRequest) -> TokenResponse:
        """Register new user and return a token for them."""
        if await self.user_repo.is_taken(request.email, request.username):
            raise ConflictError("Email or username already taken")

        user_data = {
            "email": request.email,
            "username": request.username,
            "password_hash": hash_password(request.password),
        }
        user = await self.user_repo.create_user(user_data)
        logger.info(f"Registered user {user.id}")

        return self._issue_token(user)

    async def login(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a JWT."""
        user = await self.user_repo.get_by_email(request.email)

        # same answer for unknown email and wrong password
        if user is None or not verify_password(request.password, user.password_hash):
            logger.warning("Failed login attempt")
            raise UnauthorizedError("Invalid credentials")

        if needs_update(user.password_hash):
            await self.user_repo.update_password_hash(user.id, hash_password(request.password))
            logger.info(f"Upgraded password hash for user {user.id}")

        return self._issue_token(user)

    def _issue_token(self, user: User) -> TokenResponse:
        issued_at = datetime.now(timezone.utc)
        lifetime = timedelta(minutes=self.settings.access_token_expire_minutes)
        access_token = create_access_token(user.id, lifetime, issued_at=issued_at)

        return TokenResponse(
            access_token=access_token,
            token_type="bearer",
            user_id=user.id,
            issued_at=issued_at,
            expires_at=issued_at + lifetime,
        )
