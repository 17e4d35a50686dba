"""User account service implementation."""

from typing import List

from ..exceptions import ConflictError, NotFoundError
from ..logging import get_logger
from ..models import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import UserUpdateRequest
from .interfaces import IUserService

logger = get_logger("services.user")


class UserService(IUserService):
    """Account operations. Every mutation takes the guard's user id, so a
    caller can only ever change or delete their own account."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def list_users(self) -> List[User]:
        return await self.user_repo.find_all()

    async def get_user(self, user_id: int) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("user", user_id)
        return user

    async def update_user(self, user_id: int, request: UserUpdateRequest) -> User:
        if await self.user_repo.is_taken(request.email, request.username, exclude_user_id=user_id):
            raise ConflictError("Email or username already taken")

        user = await self.user_repo.update(user_id, request.email, request.username)
        logger.info(f"Updated account of user {user_id}")
        return user

    async def delete_user(self, user_id: int) -> None:
        if not await self.user_repo.delete(user_id):
            raise NotFoundError("user", user_id)
        logger.info(f"Deleted account of user {user_id}")
