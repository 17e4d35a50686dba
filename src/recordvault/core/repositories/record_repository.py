"""Record repository for database operations."""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from sqlalchemy import Select, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ...database import transaction
from ..exceptions import storage_errors
from ..models.record import Record
from ..models.tag import Tag, records_tags
from ..schemas.records import RecordInput
from .filters import RecordFilter
from .interfaces import IRecordRepository, ITagRepository

logger = logging.getLogger(__name__)


def _record_values(user_id: int, record_input: RecordInput) -> dict:
    """Column values for one records row."""
    return {
        "title": record_input.title,
        "artist": record_input.artist,
        "release_date": record_input.release_date,
        "cover_url": record_input.cover_url,
        "discogs_url": record_input.discogs_url,
        "spotify_url": record_input.spotify_url,
        "owned": record_input.owned,
        "wanted": record_input.wanted,
        "user_id": user_id,
    }


def _select_with_tags() -> Select:
    """Records with their tags loaded by one extra IN query for the whole result."""
    # refresh rows already in the session, tag links are written with core statements
    return select(Record).options(selectinload(Record.tags)).execution_options(
        populate_existing=True
    )


class RecordRepository(IRecordRepository):
    """Repository for record database operations.

    The tag resolver is injected so every write resolves tags on the same
    session, hence inside the same transaction, as the record rows.
    """

    def __init__(self, session: AsyncSession, tag_repo: ITagRepository):
        self.session = session
        self.tag_repo = tag_repo

    @storage_errors("record_repository.create", "record")
    async def create(self, user_id: int, record_input: RecordInput) -> Record:
        """Create one record with its tags in a single transaction."""
        async with transaction(self.session):
            record = Record(**_record_values(user_id, record_input))
            self.session.add(record)
            await self.session.flush()
            record_id = record.id

            if record_input.tags:
                await self._replace_tags(record_id, record_input.tags)

        logger.debug(f"Created record {record_id} for user {user_id}")
        records = await self._load_with_tags([record_id])
        return records[0]

    @storage_errors("record_repository.create_multiple", "record")
    async def create_multiple(
        self, user_id: int, record_inputs: Sequence[RecordInput]
    ) -> List[Record]:
        """Create many records with one multi-row insert, then link their tags.

        The whole batch commits or rolls back together. Output order is input order.
        """
        if not record_inputs:
            return []

        async with transaction(self.session):
            stmt = insert(Record).returning(Record.id, sort_by_parameter_order=True)
            result = await self.session.execute(
                stmt, [_record_values(user_id, item) for item in record_inputs]
            )
            record_ids = list(result.scalars())

            for record_id, item in zip(record_ids, record_inputs):
                if item.tags:
                    await self._replace_tags(record_id, item.tags)

        logger.debug(f"Created {len(record_ids)} records for user {user_id}")
        return await self._load_with_tags(record_ids)

    @storage_errors("record_repository.find_by_id", "record")
    async def find_by_id(self, record_id: int) -> Optional[Record]:
        """Get record by ID with tags."""
        stmt = _select_with_tags().where(Record.id == record_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @storage_errors("record_repository.find_all_by_user", "record")
    async def find_all_by_user(
        self, user_id: int, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> List[Record]:
        """List user records; owned/wanted filters are ANDed when given."""
        record_filter = RecordFilter(user_id, owned, wanted)
        stmt = record_filter.apply(_select_with_tags()).order_by(Record.id)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    @storage_errors("record_repository.get_random_by_user", "record")
    async def get_random_by_user(
        self, user_id: int, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> Optional[Record]:
        """Pick one matching record uniformly at random, None if nothing matches."""
        record_filter = RecordFilter(user_id, owned, wanted)
        stmt = record_filter.apply(_select_with_tags()).order_by(func.random()).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @storage_errors("record_repository.delete", "record")
    async def delete(self, record_id: int) -> bool:
        """Delete record and its tag links."""
        async with transaction(self.session):
            await self.session.execute(
                delete(records_tags).where(records_tags.c.record_id == record_id)
            )
            result = await self.session.execute(delete(Record).where(Record.id == record_id))

        if result.rowcount == 0:
            logger.warning(f"Record {record_id} not found for deletion")
            return False

        logger.debug(f"Deleted record {record_id}")
        return True

    async def _replace_tags(self, record_id: int, tag_names: Iterable[str]) -> None:
        """Swap the record's tag set for the resolved names (not a merge)."""
        tags: Dict[int, Tag] = {}
        for name in tag_names:
            tag = await self.tag_repo.find_or_create(name)
            # "Jazz" and "jazz" resolve to the same row, link it once
            tags.setdefault(tag.id, tag)

        await self.session.execute(
            delete(records_tags).where(records_tags.c.record_id == record_id)
        )
        if tags:
            await self.session.execute(
                insert(records_tags),
                [{"record_id": record_id, "tag_id": tag_id} for tag_id in tags],
            )

    async def _load_with_tags(self, record_ids: List[int]) -> List[Record]:
        """Fetch records with tags in one batched query, in the order of record_ids."""
        stmt = _select_with_tags().where(Record.id.in_(record_ids))
        result = await self.session.execute(stmt)
        by_id = {record.id: record for record in result.scalars()}
        return [by_id[record_id] for record_id in record_ids]
