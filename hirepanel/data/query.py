"""
Select query builder for the row client.

Queries are immutable; every builder method returns a new query, so a base
query can be shared and refined:

    select(Table.JOB_APPLICATIONS).eq("job_id", job_id).order("applied_at", ascending=False)
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Literal


def table_name(table: str | Enum) -> str:
    """Normalize a Table enum member or plain string to a table name."""
    return table.value if isinstance(table, Enum) else table


@dataclass(frozen=True)
class Filter:
    """A single column predicate."""

    column: str
    op: Literal["eq", "in"]
    value: Any

    def matches(self, row: dict[str, Any]) -> bool:
        """Evaluate the predicate against a row dictionary."""
        actual = row.get(self.column)
        if self.op == "eq":
            return actual == self.value
        return actual in self.value


@dataclass(frozen=True)
class Order:
    """Sort key for a select."""

    column: str
    ascending: bool = True


@dataclass(frozen=True)
class Relation:
    """
    A relationship expanded into each selected row.

    The related rows are looked up where ``related[foreign_key] ==
    row[local_key]`` and stored under ``row[name]`` (a list when ``many``).
    An ``inner`` relation drops rows with no related row, which is how the
    interview list hides interviews whose application, candidate or job is
    gone.
    """

    name: str
    table: str
    local_key: str
    foreign_key: str = "id"
    many: bool = False
    inner: bool = False
    columns: tuple[str, ...] = ()
    ordering: tuple[Order, ...] = ()
    relations: tuple["Relation", ...] = ()


@dataclass(frozen=True)
class SelectQuery:
    """Filtered, ordered select with optional exact count and expansions."""

    table: str
    columns: tuple[str, ...] = ()
    filters: tuple[Filter, ...] = ()
    ordering: tuple[Order, ...] = ()
    relations: tuple[Relation, ...] = ()
    count: bool = False

    def eq(self, column: str, value: Any) -> "SelectQuery":
        return replace(self, filters=self.filters + (Filter(column, "eq", value),))

    def in_(self, column: str, values: Any) -> "SelectQuery":
        return replace(self, filters=self.filters + (Filter(column, "in", tuple(values)),))

    def order(self, column: str, ascending: bool = True) -> "SelectQuery":
        return replace(self, ordering=self.ordering + (Order(column, ascending),))

    def expand(self, *relations: Relation) -> "SelectQuery":
        return replace(self, relations=self.relations + tuple(relations))

    def with_count(self) -> "SelectQuery":
        return replace(self, count=True)

    def projection(self) -> tuple[str, ...]:
        """
        Columns the backend must return.

        Empty means every column. Otherwise the id and every key needed to
        resolve an expansion are added to the requested columns.
        """
        if not self.columns:
            return ()
        needed = list(self.columns)
        for extra in ("id", *(relation.local_key for relation in self.relations)):
            if extra not in needed:
                needed.append(extra)
        return tuple(needed)


@dataclass
class SelectResult:
    """Rows returned by a select, with the exact count when requested."""

    rows: list[dict[str, Any]] = field(default_factory=list)
    count: int | None = None


def select(table: str | Enum, *columns: str) -> SelectQuery:
    """Start a select on ``table``, optionally restricted to ``columns``."""
    return SelectQuery(table=table_name(table), columns=tuple(columns))
