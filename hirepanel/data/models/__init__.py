"""
Pydantic data models for HirePanel.

This module provides the backend row models, the expanded view-models used
by the screens, and the editor variants of interview rounds and panelists.
"""

# Base models
from .base import EmbeddedModel, RowModel, TimestampedRow

# Row models
from .job import Job
from .candidate import Candidate
from .viewer import Viewer

# Interview rounds and editor variants
from .interview_round import (
    InterviewRound,
    NewPanelist,
    NewRound,
    Panelist,
    PanelistEntry,
    PanelistSlot,
    PersistedPanelist,
    PersistedRound,
    RoundEntry,
    RoundSlot,
)

# Applications
from .application import ApplicationSummary, CandidateWithApplication, JobApplication

# Interviews
from .interview import CandidateRef, Interview, InterviewApplication, JobRef

# Activity log
from .activity import ActivityLog, ActivityLogCreate, interviews_scheduled_entry

__all__ = [
    # Base
    "EmbeddedModel",
    "RowModel",
    "TimestampedRow",
    # Rows
    "Job",
    "Candidate",
    "Viewer",
    # Interview rounds
    "InterviewRound",
    "NewPanelist",
    "NewRound",
    "Panelist",
    "PanelistEntry",
    "PanelistSlot",
    "PersistedPanelist",
    "PersistedRound",
    "RoundEntry",
    "RoundSlot",
    # Applications
    "ApplicationSummary",
    "CandidateWithApplication",
    "JobApplication",
    # Interviews
    "CandidateRef",
    "Interview",
    "InterviewApplication",
    "JobRef",
    # Activity log
    "ActivityLog",
    "ActivityLogCreate",
    "interviews_scheduled_entry",
]
