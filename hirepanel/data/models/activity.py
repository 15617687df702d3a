"""
Activity log models.

The activity log is an append-only history of notable actions, displayed
alongside the entity it refers to.
"""

from typing import Optional

from pydantic import BaseModel

from hirepanel.utils.constants import ActivityAction, EntityType

from .base import TimestampedRow


class ActivityLog(TimestampedRow):
    """An activity log row."""

    entity_type: str
    entity_id: str
    action: str
    description: str
    performed_by: Optional[str] = None


class ActivityLogCreate(BaseModel):
    """Schema for appending an activity log entry."""

    entity_type: EntityType
    entity_id: str
    action: ActivityAction
    description: str
    performed_by: Optional[str] = None

    def to_row(self) -> dict:
        return self.model_dump(mode="json")


def interviews_scheduled_entry(
    application_id: str,
    candidate_name: str,
    performed_by: Optional[str],
) -> ActivityLogCreate:
    """Entry appended after a candidate's interview rounds are saved."""
    return ActivityLogCreate(
        entity_type=EntityType.INTERVIEW,
        entity_id=application_id,
        action=ActivityAction.INTERVIEWS_SCHEDULED,
        description=f"Interview rounds scheduled for {candidate_name}",
        performed_by=performed_by,
    )
