"""Predicate builder for list queries.

Filters are a closed set of predicate kinds combined with AND. ``Contains``
is the only place OR appears, across the columns of one search group.
Values are always bound parameters, never spliced into SQL text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import and_, or_, true
from sqlalchemy.sql.elements import ColumnElement

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


@dataclass(frozen=True)
class Equals:
    column: Any
    value: Any

    def clause(self) -> ColumnElement[bool]:
        return self.column == self.value


@dataclass(frozen=True)
class Range:
    """Inclusive range; either bound may be omitted."""

    column: Any
    lower: Any = None
    upper: Any = None

    def clause(self) -> ColumnElement[bool]:
        bounds = []
        if self.lower is not None:
            bounds.append(self.column >= self.lower)
        if self.upper is not None:
            bounds.append(self.column <= self.upper)
        return and_(*bounds) if bounds else true()


@dataclass(frozen=True)
class Contains:
    """Case-insensitive substring match against any of ``columns``."""

    columns: tuple[Any, ...]
    term: str

    def clause(self) -> ColumnElement[bool]:
        pattern = f"%{escape_like(self.term)}%"
        return or_(*(column.ilike(pattern, escape=LIKE_ESCAPE) for column in self.columns))


Predicate = Equals | Range | Contains


@dataclass
class FilterSet:
    predicates: list[Predicate] = field(default_factory=list)

    def equals(self, column: Any, value: Any) -> "FilterSet":
        if value is not None:
            self.predicates.append(Equals(column, value))
        return self

    def between(self, column: Any, lower: Any = None, upper: Any = None) -> "FilterSet":
        if lower is not None or upper is not None:
            self.predicates.append(Range(column, lower, upper))
        return self

    def contains(self, columns: tuple[Any, ...], term: str | None) -> "FilterSet":
        if term is not None and term.strip():
            self.predicates.append(Contains(tuple(columns), term.strip()))
        return self

    def __len__(self) -> int:
        return len(self.predicates)

    def clause(self) -> ColumnElement[bool]:
        """Conjunction of all predicates; the tautology when empty."""
        if not self.predicates:
            return true()
        return and_(*(predicate.clause() for predicate in self.predicates))
