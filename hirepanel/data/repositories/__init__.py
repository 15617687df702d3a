"""
Repositories for HirePanel data access.

Each repository wraps one backend table and returns validated models.
"""

# Base repository
from .base import BaseRepository

# Table repositories
from .job_repository import JobRepository
from .application_repository import ApplicationRepository
from .interview_round_repository import InterviewRoundRepository
from .interview_repository import InterviewRepository
from .activity_repository import ActivityLogRepository

__all__ = [
    "BaseRepository",
    "JobRepository",
    "ApplicationRepository",
    "InterviewRoundRepository",
    "InterviewRepository",
    "ActivityLogRepository",
]
