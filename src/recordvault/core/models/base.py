# Base model for database stuff
from datetime import date, datetime
from typing import Any, Dict

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative root, owns the shared metadata."""


class BaseModel(Base):
    """Common base for all entity models."""

    __abstract__ = True

    # integer surrogate keys everywhere, assigned by the database
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> Dict[str, Any]:
        """Convert column values to a JSON-friendly dict."""
        result = {}
        for column in self.__table__.columns:
            val = getattr(self, column.name)
            if isinstance(val, (date, datetime)):
                val = val.isoformat()
            result[column.name] = val
        return result
