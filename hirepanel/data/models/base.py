"""
Base model classes for HirePanel data models.

Rows arrive from the backend as dictionaries; models validate them and drop
columns the screens do not use.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RowModel(BaseModel):
    """
    Base model for a backend row.

    A row with an ``id`` has been persisted; rows built locally leave it unset.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    id: Optional[str] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


class TimestampedRow(RowModel):
    """Row carrying backend-managed timestamps."""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EmbeddedModel(BaseModel):
    """
    Base model for expanded relations and view-local state.

    Use this for models that live inside another row or only in a screen.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )
