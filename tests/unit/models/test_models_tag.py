"""
Unit tests for Tag model and the slug algorithm.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from recordvault.core.models import Tag, slugify


class TestSlugify:
    """Slug derivation."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Jazz", "jazz"),
            ("jazz", "jazz"),
            ("R&B / Soul", "rb-soul"),
            ("70's Music", "70s-music"),
            ("  Hip   Hop  ", "hip-hop"),
            ("post-punk", "post-punk"),
            ("--Lo--Fi--", "lo-fi"),
            ("Drum & Bass", "drum-bass"),
            ("Rock & Roll", "rock-roll"),
            ("Hip-Hop", "hip-hop"),
            ("   Multiple   Spaces   ", "multiple-spaces"),
            ("Tab\tSeparated\nWords", "tab-separated-words"),
        ],
    )
    def test_examples(self, name, expected):
        assert slugify(name) == expected

    def test_only_punctuation_gives_empty_slug(self):
        assert slugify("!!! ??? &&&") == ""
        assert slugify("") == ""

    def test_idempotent(self):
        once = slugify("Free Jazz / Avant-Garde")
        assert slugify(once) == once

    def test_never_starts_or_ends_with_hyphen(self):
        slug = slugify(" -- Ambient & Drone -- ")
        assert not slug.startswith("-")
        assert not slug.endswith("-")
        assert "--" not in slug


class TestTagModel:
    """Test Tag model functionality."""

    def test_from_name_derives_slug(self):
        tag = Tag.from_name("70's Music")
        assert tag.name == "70's Music"
        assert tag.slug == "70s-music"

    def test_tag_repr(self):
        tag = Tag.from_name("Jazz")
        assert repr(tag) == "<Tag(name='Jazz', slug='jazz')>"

    async def test_slug_filled_on_insert(self, test_session):
        tag = Tag(name="Bossa Nova")
        test_session.add(tag)
        await test_session.commit()

        assert tag.id is not None
        assert tag.slug == "bossa-nova"

    async def test_slug_is_unique(self, test_session):
        test_session.add(Tag.from_name("Jazz"))
        await test_session.commit()

        test_session.add(Tag(name="JAZZ", slug="jazz"))
        with pytest.raises(IntegrityError):
            await test_session.commit()
        await test_session.rollback()

        result = await test_session.execute(select(Tag).where(Tag.slug == "jazz"))
        assert len(result.scalars().all()) == 1
