"""Composable predicates for record listings."""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from sqlalchemy import ColumnElement, Select, and_, literal

from ..models.record import Record


@dataclass(frozen=True)
class RecordFilter:
    """Ownership plus optional owned/wanted equality filters, ANDed together.

    Each clause is a bound-parameter SQLAlchemy expression; values never
    end up in the statement text.
    """

    user_id: int
    owned: Optional[bool] = None
    wanted: Optional[bool] = None

    def conditions(self) -> List[Tuple[str, Any]]:
        """(column, value) pairs this filter constrains."""
        pairs: List[Tuple[str, Any]] = [("user_id", self.user_id)]
        if self.owned is not None:
            pairs.append(("owned", self.owned))
        if self.wanted is not None:
            pairs.append(("wanted", self.wanted))
        return pairs

    def clauses(self) -> List[ColumnElement[bool]]:
        # literal() so booleans bind too, a bare == True renders as a constant
        return [
            getattr(Record, column) == literal(value) for column, value in self.conditions()
        ]

    def apply(self, stmt: Select) -> Select:
        return stmt.where(and_(*self.clauses()))

    def matches(self, record: Record) -> bool:
        """Evaluate the filter in Python, for in-memory stores."""
        return all(getattr(record, column) == value for column, value in self.conditions())
