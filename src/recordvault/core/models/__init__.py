"""
Database models for RecordVault.

SQLAlchemy ORM models defining the schema of the record collection
service. All models are used through async sessions in the repository layer.

Models included:
    - User: account owning records and collection tokens
    - Record: a music record with owned/wanted flags
    - Tag: slug-unique tag shared across records (records_tags join table)
    - CollectionToken: opaque token sharing a user's collection read-only
"""

from .base import Base, BaseModel
from .collection_token import CollectionToken, generate_token
from .record import Record
from .tag import Tag, records_tags, slugify
from .user import User

__all__ = [
    "Base",
    "BaseModel",
    "User",
    "Record",
    "Tag",
    "records_tags",
    "slugify",
    "CollectionToken",
    "generate_token",
]
