"""
Store contracts for RecordVault.

The SQLAlchemy repositories are the production implementations;
``memory.py`` holds in-memory ones for service tests.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..models import CollectionToken, Record, Tag
from ..schemas.records import RecordInput


class ITagRepository(ABC):
    """Tag resolution by slug."""

    @abstractmethod
    async def find_or_create(self, name: str) -> Tag:
        """Return the tag for name's slug, creating it on first use."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Tag]:
        """Get tag by slug."""
        pass


class IRecordRepository(ABC):
    """Record persistence with tag association."""

    @abstractmethod
    async def create(self, user_id: int, record_input: RecordInput) -> Record:
        """Insert one record and its tags atomically."""
        pass

    @abstractmethod
    async def create_multiple(
        self, user_id: int, record_inputs: Sequence[RecordInput]
    ) -> List[Record]:
        """Insert many records and their tags atomically, keeping input order."""
        pass

    @abstractmethod
    async def find_by_id(self, record_id: int) -> Optional[Record]:
        """Get record with tags."""
        pass

    @abstractmethod
    async def find_all_by_user(
        self, user_id: int, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> List[Record]:
        """List a user's records, optionally filtered by flags."""
        pass

    @abstractmethod
    async def get_random_by_user(
        self, user_id: int, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> Optional[Record]:
        """Pick one of the matching records at random."""
        pass

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """Delete record and its tag links."""
        pass


class ICollectionTokenRepository(ABC):
    """Collection sharing tokens."""

    @abstractmethod
    async def create(self, user_id: int) -> CollectionToken:
        """Issue a fresh token for the user; ConflictError if one exists."""
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[CollectionToken]:
        """Anonymous lookup by token value."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: int) -> CollectionToken:
        """Get the user's token, NotFoundError if there is none."""
        pass

    @abstractmethod
    async def find_optional_by_user(self, user_id: int) -> Optional[CollectionToken]:
        """Get the user's token or None."""
        pass

    @abstractmethod
    async def delete(self, token_id: int) -> bool:
        """Delete token by id."""
        pass

    @abstractmethod
    async def delete_all_by_user(self, user_id: int) -> int:
        """Delete all of a user's tokens."""
        pass
