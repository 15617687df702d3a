"""
Activity log repository for HirePanel.
"""

from hirepanel.data.models.activity import ActivityLog
from hirepanel.utils.constants import Table

from .base import BaseRepository


class ActivityLogRepository(BaseRepository[ActivityLog]):
    """Repository for activity log rows."""

    @property
    def table_name(self) -> str:
        return Table.ACTIVITY_LOGS.value

    @property
    def model_class(self) -> type[ActivityLog]:
        return ActivityLog

    async def list_for_entity(self, entity_type: str, entity_id: str) -> list[ActivityLog]:
        """History of one entity, newest first."""
        query = (
            self.query()
            .eq("entity_type", entity_type)
            .eq("entity_id", entity_id)
            .order("created_at", ascending=False)
        )
        return await self.find(query)
