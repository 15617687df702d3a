"""
Job application repository for HirePanel.

Applications are always read with their candidate expanded.
"""

from hirepanel.data.models.application import JobApplication
from hirepanel.data.schema import APPLICATION_CANDIDATE
from hirepanel.utils.constants import Table
from hirepanel.utils.logger import get_logger

from .base import BaseRepository

logger = get_logger(__name__)


class ApplicationRepository(BaseRepository[JobApplication]):
    """Repository for job application rows."""

    @property
    def table_name(self) -> str:
        return Table.JOB_APPLICATIONS.value

    @property
    def model_class(self) -> type[JobApplication]:
        return JobApplication

    async def list_for_job(self, job_id: str) -> list[JobApplication]:
        """Applications for a job, most recent first, with candidates."""
        query = (
            self.query()
            .eq("job_id", job_id)
            .order("applied_at", ascending=False)
            .expand(APPLICATION_CANDIDATE)
        )
        applications = await self.find(query)

        # The candidate link is not inner; an orphaned application is skipped
        missing = [app.id for app in applications if app.candidate is None]
        if missing:
            logger.warning(f"Applications without a candidate row: {missing}")
        return [app for app in applications if app.candidate is not None]
