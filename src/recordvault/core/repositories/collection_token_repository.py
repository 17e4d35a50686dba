"""Collection token repository for database operations."""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...database import transaction
from ..exceptions import ConflictError, NotFoundError, storage_errors
from ..models.collection_token import CollectionToken, generate_token
from .interfaces import ICollectionTokenRepository

logger = logging.getLogger(__name__)


class CollectionTokenRepository(ICollectionTokenRepository):
    """Repository for collection token database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_errors("collection_token_repository.create", "collection_token")
    async def create(self, user_id: int) -> CollectionToken:
        """Create new collection token for user.

        The unique index on ``user_id`` rejects a second token, including one
        inserted by a concurrent request after the caller checked.
        """
        token = CollectionToken(
            token=generate_token(get_settings().collection_token_bytes),
            user_id=user_id,
        )
        try:
            async with transaction(self.session):
                self.session.add(token)
                await self.session.flush()
        except IntegrityError as e:
            logger.warning(f"Refused second collection token for user {user_id}")
            raise ConflictError(f"User {user_id} already has a collection token") from e

        logger.debug(f"Created collection token {token.id} for user {user_id}")
        return token

    @storage_errors("collection_token_repository.find_by_token", "collection_token")
    async def find_by_token(self, token: str) -> Optional[CollectionToken]:
        """Get collection token by token string. No ownership check."""
        stmt = select(CollectionToken).where(CollectionToken.token == token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_user(self, user_id: int) -> CollectionToken:
        """Get the user's token; a user who never had one and one whose token
        was revoked look the same here."""
        token = await self.find_optional_by_user(user_id)
        if token is None:
            raise NotFoundError("collection token for user", user_id)
        return token

    @storage_errors("collection_token_repository.find_by_user", "collection_token")
    async def find_optional_by_user(self, user_id: int) -> Optional[CollectionToken]:
        """Get the user's token or None."""
        stmt = select(CollectionToken).where(CollectionToken.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @storage_errors("collection_token_repository.delete", "collection_token")
    async def delete(self, token_id: int) -> bool:
        """Delete specific collection token."""
        async with transaction(self.session):
            result = await self.session.execute(
                delete(CollectionToken).where(CollectionToken.id == token_id)
            )
        return result.rowcount > 0

    @storage_errors("collection_token_repository.delete_all_by_user", "collection_token")
    async def delete_all_by_user(self, user_id: int) -> int:
        """Delete all collection tokens for user."""
        async with transaction(self.session):
            result = await self.session.execute(
                delete(CollectionToken).where(CollectionToken.user_id == user_id)
            )
        logger.debug(f"Deleted {result.rowcount} collection tokens for user {user_id}")
        return result.rowcount
