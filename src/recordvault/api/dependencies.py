"""Service providers for the routers.

Each request gets services wired to its own session; tests override
``get_db_session`` and everything downstream follows.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.repositories import (
    CollectionTokenRepository,
    RecordRepository,
    TagRepository,
    UserRepository,
)
from ..core.services import (
    AuthService,
    CollectionService,
    HealthService,
    RecordService,
    UserService,
)
from ..database import get_db_session


def get_record_repository(session: AsyncSession = Depends(get_db_session)) -> RecordRepository:
    return RecordRepository(session, TagRepository(session))


def get_record_service(
    record_repo: RecordRepository = Depends(get_record_repository),
) -> RecordService:
    return RecordService(record_repo)


def get_collection_service(
    session: AsyncSession = Depends(get_db_session),
    record_repo: RecordRepository = Depends(get_record_repository),
) -> CollectionService:
    return CollectionService(CollectionTokenRepository(session), record_repo)


def get_auth_service(session: AsyncSession = Depends(get_db_session)) -> AuthService:
    return AuthService(UserRepository(session))


def get_user_service(session: AsyncSession = Depends(get_db_session)) -> UserService:
    return UserService(UserRepository(session))


def get_health_service(session: AsyncSession = Depends(get_db_session)) -> HealthService:
    return HealthService(session)
