"""
The person using the application.

Screens and operations receive a Viewer explicitly rather than reading a
global session. Its role only gates UI affordances; the backend enforces
nothing based on it here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from hirepanel.utils.constants import SCHEDULING_ROLES


class Viewer(BaseModel):
    """Current viewer's id and role (admin, recruiter, hiring_manager, or other)."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    role: str = ""

    @property
    def can_schedule_interviews(self) -> bool:
        return self.role in SCHEDULING_ROLES
