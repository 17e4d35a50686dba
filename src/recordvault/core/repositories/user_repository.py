"""User repository for database operations."""

import logging
from typing import List, Optional

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...database import transaction
from ..exceptions import ConflictError, NotFoundError, storage_errors
from ..models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_errors("user_repository.create_user", "user")
    async def create_user(self, user_data: dict) -> User:
        """Create new user.

        A concurrent registration that wins the unique index surfaces as
        ``ConflictError``.
        """
        user = User(**user_data)
        try:
            async with transaction(self.session):
                self.session.add(user)
                await self.session.flush()
        except IntegrityError as e:
            raise ConflictError("Email or username already taken") from e
        return user

    @storage_errors("user_repository.find_all", "user")
    async def find_all(self) -> List[User]:
        result = await self.session.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    @storage_errors("user_repository.get_by_id", "user")
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @storage_errors("user_repository.get_by_email", "user")
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @storage_errors("user_repository.get_by_username", "user")
    async def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @storage_errors("user_repository.is_taken", "user")
    async def is_taken(
        self, email: str, username: str, exclude_user_id: Optional[int] = None
    ) -> bool:
        """Check if email or username already belongs to someone else."""
        stmt = select(User.id).where(or_(User.email == email, User.username == username))
        if exclude_user_id is not None:
            stmt = stmt.where(User.id != exclude_user_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    @storage_errors("user_repository.update", "user")
    async def update(self, user_id: int, email: str, username: str) -> User:
        """Change a user's email and username.

        Raises ``NotFoundError`` for an unknown id and ``ConflictError`` when
        either value belongs to another account.
        """
        user = await self.get_by_id(user_id)
        if user is None:
            raise NotFoundError("user", user_id)

        try:
            async with transaction(self.session):
                user.email = email
                user.username = username
                await self.session.flush()
        except IntegrityError as e:
            raise ConflictError("Email or username already taken") from e

        logger.debug(f"Updated user {user_id}")
        return user

    @storage_errors("user_repository.update_password_hash", "user")
    async def update_password_hash(self, user_id: int, password_hash: str) -> None:
        async with transaction(self.session):
            await self.session.execute(
                update(User).where(User.id == user_id).values(password_hash=password_hash)
            )

    @storage_errors("user_repository.delete", "user")
    async def delete(self, user_id: int) -> bool:
        """Delete a user; records, their tag links and the collection token
        go with it through ``ON DELETE CASCADE``."""
        async with transaction(self.session):
            result = await self.session.execute(delete(User).where(User.id == user_id))
        logger.debug(f"Deleted user {user_id}")
        return result.rowcount > 0
