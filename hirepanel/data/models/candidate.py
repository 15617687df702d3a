"""
Candidate data model for HirePanel.

Candidate profiles are owned by the backend and read-only here.
"""

from typing import Optional

from pydantic import Field, field_validator

from hirepanel.utils.constants import CandidateStage

from .base import TimestampedRow


class Candidate(TimestampedRow):
    """A person in the hiring funnel."""

    full_name: str
    email: str
    phone: Optional[str] = None
    current_company: Optional[str] = None
    current_title: Optional[str] = None
    years_of_experience: Optional[float] = None
    skills: list[str] = Field(default_factory=list)  # ordered as entered
    resume_url: Optional[str] = None
    current_stage: CandidateStage = CandidateStage.APPLIED

    @field_validator("skills", mode="before")
    @classmethod
    def none_skills_to_empty(cls, v):
        """The backend stores a missing skill list as null."""
        return [] if v is None else v

    @property
    def headline(self) -> Optional[str]:
        """Current title and company, e.g. "Engineer at Acme"."""
        if self.current_title and self.current_company:
            return f"{self.current_title} at {self.current_company}"
        return self.current_title or self.current_company
