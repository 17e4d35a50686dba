"""
Service interfaces for RecordVault.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ..models import CollectionToken, Record, User
from ..schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserUpdateRequest
from ..schemas.common import HealthCheckResponse
from ..schemas.records import RecordInput


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register(self, request: RegisterRequest) -> TokenResponse:
        """Register new user and log them in."""
        pass

    @abstractmethod
    async def login(self, request: LoginRequest) -> TokenResponse:
        """Check credentials and issue an access token."""
        pass


class IUserService(ABC):
    """Account management for the authenticated user."""

    @abstractmethod
    async def list_users(self) -> List[User]:
        pass

    @abstractmethod
    async def get_user(self, user_id: int) -> User:
        """Get an account, NotFoundError when it is gone."""
        pass

    @abstractmethod
    async def update_user(self, user_id: int, request: UserUpdateRequest) -> User:
        """Change email and username."""
        pass

    @abstractmethod
    async def delete_user(self, user_id: int) -> None:
        """Delete the account and everything it owns."""
        pass


class IRecordService(ABC):
    """Record use cases for the authenticated owner."""

    @abstractmethod
    async def create_record(self, user_id: int, record_input: RecordInput) -> Record:
        """Add one record."""
        pass

    @abstractmethod
    async def create_records(
        self, user_id: int, record_inputs: Sequence[RecordInput]
    ) -> List[Record]:
        """Bulk import records."""
        pass

    @abstractmethod
    async def get_record(self, record_id: int, user_id: int) -> Record:
        """Get one of the user's records."""
        pass

    @abstractmethod
    async def list_records(
        self, user_id: int, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> List[Record]:
        """List the user's records."""
        pass

    @abstractmethod
    async def get_random_record(
        self, user_id: int, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> Optional[Record]:
        """Pick a random record, None when nothing matches."""
        pass

    @abstractmethod
    async def delete_record(self, record_id: int, user_id: int) -> None:
        """Delete one of the user's records."""
        pass


class ICollectionService(ABC):
    """Collection sharing through opaque tokens."""

    @abstractmethod
    async def create_token(self, user_id: int) -> CollectionToken:
        """Issue the user's sharing token."""
        pass

    @abstractmethod
    async def get_user_token(self, user_id: int) -> CollectionToken:
        """Get the user's sharing token."""
        pass

    @abstractmethod
    async def delete_token(self, token: str, user_id: int) -> None:
        """Revoke a token the user owns."""
        pass

    @abstractmethod
    async def get_owner_id(self, token: str) -> int:
        """Resolve a token to its owner's id."""
        pass

    @abstractmethod
    async def get_collection(
        self, token: str, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> List[Record]:
        """Records behind a sharing token."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass
