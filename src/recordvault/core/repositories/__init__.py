"""Repository layer for data access."""

from .collection_token_repository import CollectionTokenRepository
from .filters import RecordFilter
from .interfaces import ICollectionTokenRepository, IRecordRepository, ITagRepository
from .memory import (
    InMemoryCollectionTokenRepository,
    InMemoryRecordRepository,
    InMemoryTagRepository,
)
from .record_repository import RecordRepository
from .tag_repository import TagRepository
from .user_repository import UserRepository

__all__ = [
    "ITagRepository",
    "IRecordRepository",
    "ICollectionTokenRepository",
    "TagRepository",
    "RecordRepository",
    "CollectionTokenRepository",
    "UserRepository",
    "RecordFilter",
    "InMemoryTagRepository",
    "InMemoryRecordRepository",
    "InMemoryCollectionTokenRepository",
]
