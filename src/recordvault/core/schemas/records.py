"""
Record schemas.

These schemas define the API contracts for adding, bulk importing and
reading records together with their tags.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.tag import slugify


class RecordInput(BaseModel):
    """Record creation request schema."""

    title: str = Field(min_length=1, max_length=255, description="Record title")
    artist: str = Field(min_length=1, max_length=255, description="Artist name")
    release_date: date = Field(description="Release date, YYYY-MM-DD")
    cover_url: str = Field(min_length=1, max_length=2048, description="Cover image URL")
    discogs_url: Optional[str] = Field(default=None, max_length=2048, description="Discogs page")
    spotify_url: Optional[str] = Field(default=None, max_length=2048, description="Spotify link")
    owned: bool = Field(default=False, description="Already in the collection")
    wanted: bool = Field(default=False, description="On the wish list")
    tags: List[str] = Field(default_factory=list, max_length=50, description="Tag names")

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v):
        """Every tag name must produce a non-empty slug."""
        for tag in v:
            if not slugify(tag):
                raise ValueError(f"Tag {tag!r} must contain at least one letter or digit")
            if len(tag.strip()) > 100:
                raise ValueError("Tag names are limited to 100 characters")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Kind of Blue",
                "artist": "Miles Davis",
                "release_date": "1959-08-17",
                "cover_url": "https://example.com/covers/kind-of-blue.jpg",
                "discogs_url": "https://www.discogs.com/master/5460",
                "spotify_url": None,
                "owned": True,
                "wanted": False,
                "tags": ["Jazz", "Modal"],
            }
        }
    )


class TagResponse(BaseModel):
    """Tag as exposed to clients, internal id hidden."""

    name: str = Field(description="Display name")
    slug: str = Field(description="Canonical slug")

    model_config = ConfigDict(from_attributes=True)


class RecordResponse(BaseModel):
    """Record response schema."""

    id: int = Field(description="Record identifier")
    title: str = Field(description="Record title")
    artist: str = Field(description="Artist name")
    release_date: date = Field(description="Release date")
    cover_url: str = Field(description="Cover image URL")
    discogs_url: Optional[str] = Field(default=None, description="Discogs page")
    spotify_url: Optional[str] = Field(default=None, description="Spotify link")
    owned: bool = Field(description="Already in the collection")
    wanted: bool = Field(description="On the wish list")
    user_id: int = Field(description="Owner id")
    tags: List[TagResponse] = Field(default_factory=list, description="Record tags")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 42,
                "title": "Kind of Blue",
                "artist": "Miles Davis",
                "release_date": "1959-08-17",
                "cover_url": "https://example.com/covers/kind-of-blue.jpg",
                "discogs_url": "https://www.discogs.com/master/5460",
                "spotify_url": None,
                "owned": True,
                "wanted": False,
                "user_id": 7,
                "tags": [{"name": "Jazz", "slug": "jazz"}, {"name": "Modal", "slug": "modal"}],
            }
        },
    )


class RecordBulkInput(BaseModel):
    """Bulk import request, records keep their order."""

    records: List[RecordInput] = Field(max_length=1000, description="Records to import")
