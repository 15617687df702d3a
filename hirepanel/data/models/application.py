"""
Job application models and the hiring-manager candidate view-model.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hirepanel.utils.constants import CandidateStage

from .base import RowModel
from .candidate import Candidate
from .interview_round import InterviewRound


class ApplicationSummary(RowModel):
    """Application columns, without any expanded relation."""

    job_id: str
    candidate_id: str
    stage: CandidateStage = CandidateStage.APPLIED
    stage_order: Optional[int] = None
    cover_letter: Optional[str] = None
    applied_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class JobApplication(ApplicationSummary):
    """Application row with its candidate expanded."""

    candidate: Optional[Candidate] = None

    def summary(self) -> ApplicationSummary:
        """Normalized application sub-object used by the candidate roster."""
        return ApplicationSummary.model_validate(self.model_dump(exclude={"candidate"}))


class CandidateWithApplication(Candidate):
    """
    One roster entry: the candidate's own fields, the application that ties
    them to the job, and the application's interview rounds by round number.
    """

    application: ApplicationSummary
    interview_rounds: list[InterviewRound] = Field(default_factory=list)

    @classmethod
    def assemble(
        cls, application: JobApplication, rounds: list[InterviewRound]
    ) -> "CandidateWithApplication":
        return cls(
            **application.candidate.model_dump(),
            application=application.summary(),
            interview_rounds=rounds,
        )

    @property
    def has_interview_rounds(self) -> bool:
        return bool(self.interview_rounds)

