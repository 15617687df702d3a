"""
Interview repository for HirePanel.
"""

from hirepanel.data.models.interview import Interview
from hirepanel.data.schema import INTERVIEW_APPLICATION
from hirepanel.utils.constants import Table

from .base import BaseRepository


class InterviewRepository(BaseRepository[Interview]):
    """Repository for interview rows."""

    @property
    def table_name(self) -> str:
        return Table.INTERVIEWS.value

    @property
    def model_class(self) -> type[Interview]:
        return Interview

    async def list_with_details(self) -> list[Interview]:
        """
        Every interview with its application, candidate and job, earliest
        first. Interviews missing any of the three are left out.
        """
        query = self.query().order("scheduled_at").expand(INTERVIEW_APPLICATION)
        return await self.find(query)
