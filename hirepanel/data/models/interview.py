"""
Interview model for the interview list.

Interview rows are listed together with the application, candidate and job
they belong to.
"""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from hirepanel.utils.constants import InterviewStatus
from hirepanel.utils.dates import ensure_utc

from .base import EmbeddedModel, TimestampedRow


class CandidateRef(EmbeddedModel):
    """Candidate columns shown on an interview card."""

    full_name: str
    email: Optional[str] = None


class JobRef(EmbeddedModel):
    """Job columns shown on an interview card."""

    title: str


class InterviewApplication(EmbeddedModel):
    """The application an interview belongs to, with candidate and job."""

    id: Optional[str] = None
    job_id: Optional[str] = None
    candidate_id: Optional[str] = None
    candidate: CandidateRef
    job: JobRef


class Interview(TimestampedRow):
    """A single scheduled interview."""

    application_id: str
    title: str
    scheduled_at: datetime
    duration_minutes: int = 60
    status: InterviewStatus = InterviewStatus.SCHEDULED
    interview_type: Optional[str] = None
    meeting_link: Optional[str] = None
    location: Optional[str] = None
    application: Optional[InterviewApplication] = None

    @field_validator("scheduled_at")
    @classmethod
    def naive_scheduled_at_is_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @property
    def candidate_name(self) -> str:
        return self.application.candidate.full_name if self.application else ""

    @property
    def job_title(self) -> str:
        return self.application.job.title if self.application else ""
