"""
Application-wide constants for HirePanel.

Status vocabularies mirror the values stored by the backend; colors are the
badge palette used by the desktop views.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "HirePanel"
APP_DISPLAY_NAME: Final[str] = "HirePanel Recruiting"
VERSION: Final[str] = "0.1.0"

# Rounds materialized by the interview editor when a job leaves the count unset
DEFAULT_INTERVIEW_ROUNDS: Final[int] = 3


# =============================================================================
# Backend Tables
# =============================================================================


class Table(str, Enum):
    """Logical tables exposed by the backend."""

    JOBS = "jobs"
    CANDIDATES = "candidates"
    JOB_APPLICATIONS = "job_applications"
    INTERVIEWS = "interviews"
    INTERVIEW_ROUNDS = "interview_rounds"
    INTERVIEW_ROUND_PANELISTS = "interview_round_panelists"
    OFFERS = "offers"
    ACTIVITY_LOGS = "activity_logs"


# =============================================================================
# Status Enums
# =============================================================================


class JobStatus(str, Enum):
    """Job requisition lifecycle, owned by the backend."""

    DRAFT = "draft"
    PUBLISHED = "published"
    CLOSED = "closed"


class CandidateStage(str, Enum):
    """Position of a candidate in the hiring funnel."""

    APPLIED = "applied"
    SCREENING = "screening"
    INTERVIEW = "interview"
    OFFER = "offer"
    HIRED = "hired"
    REJECTED = "rejected"


class RoundStatus(str, Enum):
    """Status of one round in a multi-round interview plan."""

    PENDING = "pending"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"


class InterviewStatus(str, Enum):
    """Status of a standalone interview."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RESCHEDULED = "rescheduled"


class OfferStatus(str, Enum):
    """Status of an offer letter."""

    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class UserRole(str, Enum):
    """Known viewer roles. Profiles may carry other values."""

    ADMIN = "admin"
    RECRUITER = "recruiter"
    HIRING_MANAGER = "hiring_manager"
    INTERVIEWER = "interviewer"


# Roles that see the "Schedule Interview" affordance
SCHEDULING_ROLES: Final[frozenset[str]] = frozenset({
    UserRole.ADMIN.value,
    UserRole.RECRUITER.value,
    UserRole.HIRING_MANAGER.value,
})


class InterviewFilter(str, Enum):
    """Client-side filter modes of the interview list."""

    UPCOMING = "upcoming"
    PAST = "past"
    ALL = "all"


class ActivityAction(str, Enum):
    """Actions appended to the activity log."""

    INTERVIEWS_SCHEDULED = "interviews_scheduled"


class EntityType(str, Enum):
    """Entity kinds referenced by activity log entries."""

    INTERVIEW = "interview"


# =============================================================================
# UI Constants
# =============================================================================

COLORS: Final[dict[str, str]] = {
    "primary": "#0f172a",
    "primary_dark": "#1e293b",
    "secondary": "#64748b",
    "success": "#22c55e",
    "warning": "#f59e0b",
    "error": "#ef4444",
    "background": "#f8fafc",
    "surface": "#ffffff",
    "border": "#e2e8f0",
    "text_primary": "#0f172a",
    "text_secondary": "#64748b",
    "text_muted": "#94a3b8",
    "link": "#2563eb",
}

# Badge colors as (background, foreground)
NEUTRAL_BADGE: Final[tuple[str, str]] = ("#f1f5f9", "#334155")

STAGE_COLORS: Final[dict[str, tuple[str, str]]] = {
    CandidateStage.APPLIED.value: ("#dbeafe", "#1d4ed8"),
    CandidateStage.SCREENING.value: ("#fef9c3", "#a16207"),
    CandidateStage.INTERVIEW.value: ("#f3e8ff", "#7e22ce"),
    CandidateStage.OFFER.value: ("#dcfce7", "#15803d"),
    CandidateStage.HIRED.value: ("#bbf7d0", "#166534"),
    CandidateStage.REJECTED.value: ("#fee2e2", "#b91c1c"),
}

ROUND_STATUS_COLORS: Final[dict[str, tuple[str, str]]] = {
    RoundStatus.COMPLETED.value: ("#dcfce7", "#15803d"),
    RoundStatus.SCHEDULED.value: ("#dbeafe", "#1d4ed8"),
}

INTERVIEW_STATUS_COLORS: Final[dict[str, tuple[str, str]]] = {
    InterviewStatus.SCHEDULED.value: ("#dbeafe", "#1d4ed8"),
    InterviewStatus.COMPLETED.value: ("#dcfce7", "#15803d"),
    InterviewStatus.CANCELLED.value: ("#fee2e2", "#b91c1c"),
    InterviewStatus.RESCHEDULED.value: ("#fef9c3", "#a16207"),
}


def badge_colors(palette: dict[str, tuple[str, str]], value: str | None) -> tuple[str, str]:
    """Look up badge colors for a status value, falling back to neutral."""
    if value is None:
        return NEUTRAL_BADGE
    return palette.get(getattr(value, "value", value), NEUTRAL_BADGE)
