"""
Job requisition model.

Jobs are created and published elsewhere; the screens here only read them.
"""

from typing import Optional

from pydantic import Field

from hirepanel.utils.constants import DEFAULT_INTERVIEW_ROUNDS, JobStatus

from .base import TimestampedRow


class Job(TimestampedRow):
    """A job requisition."""

    title: str
    status: JobStatus = JobStatus.DRAFT
    department: Optional[str] = None
    location: Optional[str] = None
    number_of_interview_rounds: Optional[int] = Field(default=None, ge=0)

    @property
    def is_published(self) -> bool:
        return self.status == JobStatus.PUBLISHED

    @property
    def interview_round_count(self) -> int:
        """Rounds planned per candidate; unset or zero falls back to the default."""
        return self.number_of_interview_rounds or DEFAULT_INTERVIEW_ROUNDS
