# Record model for the user's collection
from datetime import date
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .tag import records_tags

if TYPE_CHECKING:
    from .tag import Tag
    from .user import User


class Record(BaseModel):
    """A music record tracked by exactly one user.

    ``owned`` and ``wanted`` are independent flags: a record may be both,
    either or neither. Tags live in ``records_tags`` and are only ever
    attached by the repository after a fetch.
    """

    __tablename__ = "records"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    artist: Mapped[str] = mapped_column(String(255), nullable=False)
    release_date: Mapped[date] = mapped_column(Date, nullable=False)
    cover_url: Mapped[str] = mapped_column(String(2048), nullable=False)

    discogs_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    spotify_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)

    owned: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    wanted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    owner: Mapped["User"] = relationship("User", back_populates="records", lazy="raise")

    # read-only view of the join table, writes go through records_tags directly
    tags: Mapped[List["Tag"]] = relationship(
        "Tag",
        secondary=records_tags,
        order_by="Tag.name",
        lazy="raise",
        viewonly=True,
        doc="Tags associated with this record",
    )

    __table_args__ = (
        Index("idx_records_user_id", "user_id"),
        Index("idx_records_user_owned_wanted", "user_id", "owned", "wanted"),
    )

    def __repr__(self) -> str:
        return f"<Record(title='{self.title}', artist='{self.artist}', user_id={self.user_id})>"

    def is_owned_by(self, user_id: int) -> bool:
        """Check if this record belongs to the given user."""
        return self.user_id == user_id
