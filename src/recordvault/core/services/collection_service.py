"""Collection sharing service implementation."""

from typing import List, Optional

from ..exceptions import ConflictError, NotFoundError, UnauthorizedError
from ..logging import get_logger
from ..models import CollectionToken, Record
from ..repositories.interfaces import ICollectionTokenRepository, IRecordRepository
from .interfaces import ICollectionService

logger = get_logger("services.collection")


class CollectionService(ICollectionService):
    """Grants anonymous read access to a user's records through a token.

    Whoever holds a token may read the owner's records; the owner id is
    always taken from the stored token, never from the caller.
    """

    def __init__(
        self,
        token_repo: ICollectionTokenRepository,
        record_repo: IRecordRepository,
    ):
        self.token_repo = token_repo
        self.record_repo = record_repo

    async def create_token(self, user_id: int) -> CollectionToken:
        """Issue a token, at most one per user."""
        existing = await self.token_repo.find_optional_by_user(user_id)
        if existing is not None:
            raise ConflictError(f"User {user_id} already has a collection token")

        token = await self.token_repo.create(user_id)
        logger.info(f"Issued collection token {token.id} for user {user_id}")
        return token

    async def get_user_token(self, user_id: int) -> CollectionToken:
        return await self.token_repo.find_by_user(user_id)

    async def delete_token(self, token: str, user_id: int) -> None:
        """Revoke a token; only its owner may do so."""
        found = await self._resolve(token)
        if not found.is_owned_by(user_id):
            logger.warning(
                f"User {user_id} tried to revoke collection token {found.id} "
                f"owned by user {found.user_id}"
            )
            raise UnauthorizedError("Collection token belongs to another user")

        await self.token_repo.delete(found.id)
        logger.info(f"Revoked collection token {found.id} for user {user_id}")

    async def get_owner_id(self, token: str) -> int:
        found = await self._resolve(token)
        return found.user_id

    async def get_collection(
        self, token: str, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> List[Record]:
        found = await self._resolve(token)
        return await self.record_repo.find_all_by_user(found.user_id, owned, wanted)

    async def _resolve(self, token: str) -> CollectionToken:
        found = await self.token_repo.find_by_token(token)
        if found is None:
            # the value itself stays out of errors and logs
            raise NotFoundError("collection token")
        return found
