# Tag models for organizing records
from sqlalchemy import Column, ForeignKey, Index, Integer, String, Table, UniqueConstraint, event
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, BaseModel


def slugify(name: str) -> str:
    """Turn a free-text tag name into its canonical slug.

    Letters and digits are kept, whitespace and hyphens separate words,
    anything else is dropped. Separator runs collapse to a single hyphen
    and the result never starts or ends with one.

        >>> slugify("R&B / Soul")
        'rb-soul'
        >>> slugify("70's Music")
        '70s-music'
    """
    chars = []
    for c in name.lower():
        if c.isalnum():
            chars.append(c)
        elif c.isspace() or c == "-":
            chars.append(" ")
    return "-".join("".join(chars).split())


# join table, no identity of its own
records_tags = Table(
    "records_tags",
    Base.metadata,
    Column(
        "record_id",
        Integer,
        ForeignKey("records.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Index("idx_records_tags_tag_id", "tag_id"),
)


class Tag(BaseModel):
    """Tag shared by records of any user, unique by slug."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (UniqueConstraint("slug", name="uq_tags_slug"),)

    def __repr__(self) -> str:
        return f"<Tag(name='{self.name}', slug='{self.slug}')>"

    @classmethod
    def from_name(cls, name: str) -> "Tag":
        """Build an unsaved tag with its slug derived from the name."""
        return cls(name=name, slug=slugify(name))


# slug is the uniqueness key, never let a tag reach the db without one
@event.listens_for(Tag, "before_insert", propagate=True)
def _fill_slug_before_insert(mapper, connection, target: Tag):
    if not target.slug:
        target.slug = slugify(target.name)
