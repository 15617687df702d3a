"""
Job repository for HirePanel.
"""

from hirepanel.data.models.job import Job
from hirepanel.utils.constants import Table

from .base import BaseRepository


class JobRepository(BaseRepository[Job]):
    """Repository for job rows."""

    @property
    def table_name(self) -> str:
        return Table.JOBS.value

    @property
    def model_class(self) -> type[Job]:
        return Job
