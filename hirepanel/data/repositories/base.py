"""
Base repository class providing typed reads over the row client.

All table-specific repositories inherit from this base class. Writes made by
the interview editor go through mutation commands instead.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from hirepanel.data.client import RowClient
from hirepanel.data.query import SelectQuery, select
from hirepanel.utils.logger import get_logger

logger = get_logger(__name__)

# Type variable for row models
T = TypeVar("T", bound=BaseModel)


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository.

    Subclasses define the table name and model class; rows returned by the
    client are validated into that model.
    """

    @property
    @abstractmethod
    def table_name(self) -> str:
        """Name of the backend table."""
        pass

    @property
    @abstractmethod
    def model_class(self) -> type[T]:
        """Pydantic model class for this repository."""
        pass

    def __init__(self, client: RowClient) -> None:
        self._client = client

    # -------------------------------------------------------------------------
    # Row Conversion
    # -------------------------------------------------------------------------

    def _to_model(self, row: Optional[dict[str, Any]]) -> Optional[T]:
        """Convert a backend row to a Pydantic model."""
        if row is None:
            return None
        return self.model_class.model_validate(row)

    def _to_models(self, rows: list[dict[str, Any]]) -> list[T]:
        """Convert a list of backend rows to Pydantic models."""
        return [self._to_model(row) for row in rows if row is not None]

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def query(self, *columns: str) -> SelectQuery:
        """Start a select on this repository's table."""
        return select(self.table_name, *columns)

    async def get_by_id(self, id_value: str) -> Optional[T]:
        """Get a row by its id, or None when it does not exist."""
        row = await self._client.maybe_single(self.query().eq("id", id_value))
        return self._to_model(row)

    async def find(self, query: SelectQuery) -> list[T]:
        """Run ``query`` and validate every row."""
        result = await self._client.select(query)
        logger.debug(f"Loaded {len(result.rows)} {self.table_name} rows")
        return self._to_models(result.rows)
