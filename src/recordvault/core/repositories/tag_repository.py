"""Tag repository - find-or-create by slug."""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..exceptions import ConflictError, storage_errors
from ..models.tag import Tag, records_tags, slugify
from .interfaces import ITagRepository

logger = logging.getLogger(__name__)


class TagRepository(ITagRepository):
    """Repository for tag database operations.

    Never commits: tags are always resolved inside the caller's transaction.
    """

    def __init__(self, session: AsyncSession, max_attempts: Optional[int] = None):
        self.session = session
        self.max_attempts = max_attempts or get_settings().tag_conflict_retries

    @storage_errors("tag_repository.find_or_create", "tag")
    async def find_or_create(self, name: str) -> Tag:
        """Return the tag whose slug matches name, creating it on first use.

        The display name of an existing tag is never changed (first writer wins).
        A concurrent transaction inserting the same slug first shows up as an
        IntegrityError on our insert; the savepoint is rolled back and the
        winner's row is read instead.
        """
        slug = slugify(name)
        if not slug:
            raise ValueError(f"Tag name {name!r} has no usable characters")

        for attempt in range(1, self.max_attempts + 1):
            tag = await self.find_by_slug(slug)
            if tag is not None:
                return tag

            tag = Tag.from_name(name.strip())
            try:
                async with self.session.begin_nested():
                    self.session.add(tag)
                    await self.session.flush()
            except IntegrityError:
                logger.warning(
                    f"Tag slug '{slug}' inserted concurrently, re-reading (attempt {attempt})"
                )
                continue

            logger.debug(f"Created tag '{slug}' (id={tag.id})")
            return tag

        raise ConflictError(f"Could not resolve tag '{slug}' after {self.max_attempts} attempts")

    @storage_errors("tag_repository.find_by_slug", "tag")
    async def find_by_slug(self, slug: str) -> Optional[Tag]:
        """Get tag by slug."""
        stmt = select(Tag).where(Tag.slug == slug)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @storage_errors("tag_repository.find_all", "tag")
    async def find_all(self) -> List[Tag]:
        """List every tag, alphabetically."""
        stmt = select(Tag).order_by(Tag.name)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    @storage_errors("tag_repository.find_all_by_record_id", "tag")
    async def find_all_by_record_id(self, record_id: int) -> List[Tag]:
        """List tags linked to a record."""
        stmt = (
            select(Tag)
            .join(records_tags, records_tags.c.tag_id == Tag.id)
            .where(records_tags.c.record_id == record_id)
            .order_by(Tag.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())
