"""
Row-oriented client for the hosted backend.

Screens talk to the backend through three operations: filtered/sorted
select (with optional exact count and relationship expansion), single-row
insert, and single-row update by primary key. Backends implement the three
primitives; relationship expansion is resolved here so every backend joins
the same way.
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Any, Optional

from hirepanel.utils.logger import get_logger

from .query import Filter, Order, Relation, SelectQuery, SelectResult

logger = get_logger(__name__)


class BackendError(Exception):
    """Raised when the backend rejects or fails a request."""

    def __init__(self, message: str, table: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.table = table


class RowClient(ABC):
    """Abstract row client shared by every backend."""

    # -------------------------------------------------------------------------
    # Backend primitives
    # -------------------------------------------------------------------------

    @abstractmethod
    async def fetch_rows(
        self,
        table: str,
        filters: tuple[Filter, ...] = (),
        ordering: tuple[Order, ...] = (),
        columns: tuple[str, ...] = (),
    ) -> list[dict[str, Any]]:
        """Return the rows of ``table`` matching every filter, in order."""

    @abstractmethod
    async def insert(self, table: str, values: dict[str, Any]) -> dict[str, Any]:
        """Insert one row and return it as stored, including its new id."""

    @abstractmethod
    async def update(self, table: str, row_id: str, values: dict[str, Any]) -> dict[str, Any]:
        """Update the row with ``row_id`` and return it as stored."""

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def select(self, query: SelectQuery) -> SelectResult:
        """Run a select, expanding its relations."""
        rows = await self.fetch_rows(
            query.table,
            filters=query.filters,
            ordering=query.ordering,
            columns=query.projection(),
        )
        for relation in query.relations:
            rows = await self._expand(rows, relation)

        logger.debug(f"Selected {len(rows)} rows from {query.table}")
        return SelectResult(rows=rows, count=len(rows) if query.count else None)

    async def maybe_single(self, query: SelectQuery) -> Optional[dict[str, Any]]:
        """Run a select expected to match at most one row."""
        result = await self.select(query)
        if len(result.rows) > 1:
            raise BackendError(
                f"Expected at most one row from {query.table}, got {len(result.rows)}",
                table=query.table,
            )
        return result.rows[0] if result.rows else None

    async def _expand(
        self, rows: list[dict[str, Any]], relation: Relation
    ) -> list[dict[str, Any]]:
        """Attach related rows under ``relation.name``."""
        keys = {
            row[relation.local_key]
            for row in rows
            if row.get(relation.local_key) is not None
        }

        related_rows: list[dict[str, Any]] = []
        if keys:
            columns = relation.columns
            if columns and relation.foreign_key not in columns:
                columns = columns + (relation.foreign_key,)
            nested = SelectQuery(
                table=relation.table,
                columns=columns,
                ordering=relation.ordering,
                relations=relation.relations,
            ).in_(relation.foreign_key, sorted(keys, key=str))
            related_rows = (await self.select(nested)).rows

        if relation.many:
            grouped: dict[Any, list[dict[str, Any]]] = defaultdict(list)
            for related in related_rows:
                grouped[related.get(relation.foreign_key)].append(related)
        else:
            indexed = {related.get(relation.foreign_key): related for related in related_rows}

        expanded = []
        for row in rows:
            key = row.get(relation.local_key)
            if relation.many:
                value: Any = list(grouped.get(key, []))
            else:
                value = indexed.get(key)
            if relation.inner and not value:
                continue
            expanded.append({**row, relation.name: value})
        return expanded
