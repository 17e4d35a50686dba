"""Tests for TagRepository find-or-create."""

import pytest
from sqlalchemy import func, select

from recordvault.core.exceptions import ConflictError
from recordvault.core.models import Tag
from recordvault.core.repositories import TagRepository


async def _tag_count(session) -> int:
    result = await session.execute(select(func.count()).select_from(Tag))
    return result.scalar_one()


class TestFindOrCreate:
    async def test_creates_tag_on_first_use(self, test_session, tag_repo):
        tag = await tag_repo.find_or_create("Jazz")

        assert tag.id is not None
        assert tag.name == "Jazz"
        assert tag.slug == "jazz"
        assert await _tag_count(test_session) == 1

    async def test_same_slug_returns_same_identity(self, test_session, tag_repo):
        first = await tag_repo.find_or_create("Jazz")
        second = await tag_repo.find_or_create("jazz")
        third = await tag_repo.find_or_create("  JAZZ ")

        assert first.id == second.id == third.id
        assert await _tag_count(test_session) == 1

    async def test_first_writer_wins_on_display_name(self, tag_repo):
        await tag_repo.find_or_create("R&B / Soul")
        again = await tag_repo.find_or_create("rb soul")

        assert again.slug == "rb-soul"
        assert again.name == "R&B / Soul"

    async def test_empty_slug_rejected(self, test_session, tag_repo):
        with pytest.raises(ValueError):
            await tag_repo.find_or_create("&&& !!")
        assert await _tag_count(test_session) == 0

    async def test_lost_insert_race_returns_winner(self, test_session, monkeypatch):
        """Another transaction inserts the slug between our lookup and our insert."""
        winner = Tag.from_name("Shoegaze")
        test_session.add(winner)
        await test_session.commit()

        repo = TagRepository(test_session)
        real_find = repo.find_by_slug
        calls = []

        async def stale_then_real(slug):
            calls.append(slug)
            if len(calls) == 1:
                return None  # lookup ran before the other insert landed
            return await real_find(slug)

        monkeypatch.setattr(repo, "find_by_slug", stale_then_real)

        tag = await repo.find_or_create("shoegaze")

        assert tag.id == winner.id
        assert tag.name == "Shoegaze"
        assert len(calls) == 2
        assert await _tag_count(test_session) == 1

    async def test_gives_up_after_max_attempts(self, test_session, monkeypatch):
        test_session.add(Tag.from_name("Krautrock"))
        await test_session.commit()

        repo = TagRepository(test_session, max_attempts=2)

        async def always_missing(slug):
            return None

        monkeypatch.setattr(repo, "find_by_slug", always_missing)

        with pytest.raises(ConflictError):
            await repo.find_or_create("Krautrock")
        assert await _tag_count(test_session) == 1


class TestTagQueries:
    async def test_find_by_slug(self, tag_repo):
        created = await tag_repo.find_or_create("Post Rock")

        assert (await tag_repo.find_by_slug("post-rock")).id == created.id
        assert await tag_repo.find_by_slug("missing") is None

    async def test_find_all_sorted_by_name(self, tag_repo):
        for name in ("Soul", "Ambient", "Jazz"):
            await tag_repo.find_or_create(name)

        names = [tag.name for tag in await tag_repo.find_all()]
        assert names == ["Ambient", "Jazz", "Soul"]

    async def test_find_all_by_record_id(self, test_user, record_repo, tag_repo, make_record_input):
        record = await record_repo.create(test_user.id, make_record_input(tags=["Modal", "Jazz"]))
        await record_repo.create(test_user.id, make_record_input(title="Other", tags=["Funk"]))

        tags = await tag_repo.find_all_by_record_id(record.id)
        assert [tag.slug for tag in tags] == ["jazz", "modal"]
