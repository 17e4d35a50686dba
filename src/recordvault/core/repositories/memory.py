"""In-memory store implementations.

Same contracts as the SQLAlchemy repositories, backed by dicts. Used to test
services without a database.
"""

import itertools
import random
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from sqlalchemy.orm import attributes as orm_attributes

from ..exceptions import ConflictError, NotFoundError
from ..models import CollectionToken, Record, Tag, generate_token, slugify
from ..schemas.records import RecordInput
from .filters import RecordFilter
from .interfaces import ICollectionTokenRepository, IRecordRepository, ITagRepository


class InMemoryTagRepository(ITagRepository):
    """Tags keyed by slug."""

    def __init__(self):
        self.tags: Dict[str, Tag] = {}
        self._ids = itertools.count(1)

    async def find_or_create(self, name: str) -> Tag:
        slug = slugify(name)
        if not slug:
            raise ValueError(f"Tag name {name!r} has no usable characters")
        if slug not in self.tags:
            tag = Tag.from_name(name.strip())
            tag.id = next(self._ids)
            self.tags[slug] = tag
        return self.tags[slug]

    async def find_by_slug(self, slug: str) -> Optional[Tag]:
        return self.tags.get(slug)


class InMemoryRecordRepository(IRecordRepository):
    """Records in insertion order, tags resolved through the injected tag store."""

    def __init__(self, tag_repo: ITagRepository):
        self.tag_repo = tag_repo
        self.records: Dict[int, Record] = {}
        self._ids = itertools.count(1)

    async def _build(self, user_id: int, record_input: RecordInput) -> Record:
        tags: Dict[int, Tag] = {}
        for name in record_input.tags:
            tag = await self.tag_repo.find_or_create(name)
            tags.setdefault(tag.id, tag)

        record = Record(
            title=record_input.title,
            artist=record_input.artist,
            release_date=record_input.release_date,
            cover_url=record_input.cover_url,
            discogs_url=record_input.discogs_url,
            spotify_url=record_input.spotify_url,
            owned=record_input.owned,
            wanted=record_input.wanted,
            user_id=user_id,
        )
        orm_attributes.set_committed_value(
            record, "tags", sorted(tags.values(), key=lambda tag: tag.name)
        )
        return record

    async def create(self, user_id: int, record_input: RecordInput) -> Record:
        record = await self._build(user_id, record_input)
        record.id = next(self._ids)
        self.records[record.id] = record
        return record

    async def create_multiple(
        self, user_id: int, record_inputs: Sequence[RecordInput]
    ) -> List[Record]:
        # build everything first so a bad tag stores nothing
        built = [await self._build(user_id, item) for item in record_inputs]
        for record in built:
            record.id = next(self._ids)
            self.records[record.id] = record
        return built

    async def find_by_id(self, record_id: int) -> Optional[Record]:
        return self.records.get(record_id)

    async def find_all_by_user(
        self, user_id: int, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> List[Record]:
        record_filter = RecordFilter(user_id, owned, wanted)
        return [record for record in self.records.values() if record_filter.matches(record)]

    async def get_random_by_user(
        self, user_id: int, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> Optional[Record]:
        matching = await self.find_all_by_user(user_id, owned, wanted)
        return random.choice(matching) if matching else None

    async def delete(self, record_id: int) -> bool:
        return self.records.pop(record_id, None) is not None


class InMemoryCollectionTokenRepository(ICollectionTokenRepository):
    """Tokens keyed by id."""

    def __init__(self):
        self.tokens: Dict[int, CollectionToken] = {}
        self._ids = itertools.count(1)

    async def create(self, user_id: int) -> CollectionToken:
        if await self.find_optional_by_user(user_id) is not None:
            raise ConflictError(f"User {user_id} already has a collection token")
        token = CollectionToken(
            id=next(self._ids),
            token=generate_token(),
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
        )
        self.tokens[token.id] = token
        return token

    async def find_by_token(self, token: str) -> Optional[CollectionToken]:
        return next((t for t in self.tokens.values() if t.token == token), None)

    async def find_by_user(self, user_id: int) -> CollectionToken:
        token = await self.find_optional_by_user(user_id)
        if token is None:
            raise NotFoundError("collection token for user", user_id)
        return token

    async def find_optional_by_user(self, user_id: int) -> Optional[CollectionToken]:
        return next((t for t in self.tokens.values() if t.user_id == user_id), None)

    async def delete(self, token_id: int) -> bool:
        return self.tokens.pop(token_id, None) is not None

    async def delete_all_by_user(self, user_id: int) -> int:
        doomed = [t.id for t in self.tokens.values() if t.user_id == user_id]
        for token_id in doomed:
            del self.tokens[token_id]
        return len(doomed)
