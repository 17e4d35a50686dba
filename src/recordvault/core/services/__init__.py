"""
Service layer interfaces and implementations.

Services take their stores through the constructor, so the same code runs
against the SQLAlchemy repositories and the in-memory ones.
"""

from .auth_service import AuthService
from .collection_service import CollectionService
from .health_service import HealthService
from .interfaces import (
    IAuthService,
    ICollectionService,
    IHealthService,
    IRecordService,
    IUserService,
)
from .record_service import RecordService
from .user_service import UserService

__all__ = [
    # Interfaces
    "IAuthService",
    "ICollectionService",
    "IHealthService",
    "IRecordService",
    "IUserService",
    # Implementations
    "AuthService",
    "CollectionService",
    "HealthService",
    "RecordService",
    "UserService",
]
