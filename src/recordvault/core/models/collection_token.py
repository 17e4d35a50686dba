# Collection sharing tokens
import secrets
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .user import User


def generate_token(nbytes: int = 32) -> str:
    """Opaque, URL-safe, unguessable token value."""
    return secrets.token_urlsafe(nbytes)


class CollectionToken(BaseModel):
    """Grants anonymous read access to one user's record listing."""

    __tablename__ = "collection_tokens"

    token: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    user: Mapped["User"] = relationship("User", back_populates="collection_tokens", lazy="raise")

    # one live token per user
    __table_args__ = (UniqueConstraint("user_id", name="uq_collection_tokens_user_id"),)

    def __repr__(self) -> str:
        # never print the token itself
        return f"<CollectionToken(id={self.id}, user_id={self.user_id})>"

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id
