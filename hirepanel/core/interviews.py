"""
Read-only interview roster.

Interviews are loaded once, earliest first, and filtered client-side into
upcoming, past or all. Changing the filter never re-queries.
"""

from datetime import datetime, timezone, tzinfo
from typing import Iterable, Optional

from hirepanel.data.client import RowClient
from hirepanel.data.models import Interview, Viewer
from hirepanel.data.repositories import InterviewRepository
from hirepanel.utils.constants import InterviewFilter
from hirepanel.utils.dates import ensure_utc
from hirepanel.utils.logger import LoggerMixin

EMPTY_STATE_MESSAGES = {
    InterviewFilter.UPCOMING: "No upcoming interviews scheduled",
    InterviewFilter.PAST: "No past interviews",
    InterviewFilter.ALL: "Start scheduling interviews with your candidates",
}


def filter_interviews(
    interviews: Iterable[Interview],
    mode: InterviewFilter | str,
    now: datetime,
) -> list[Interview]:
    """
    Select the interviews visible under ``mode``, keeping their order.

    Upcoming is strictly after ``now``; past is at or before it. Naive times
    on either side are read as UTC.
    """
    mode = InterviewFilter(mode)
    now = ensure_utc(now)
    if mode == InterviewFilter.UPCOMING:
        return [interview for interview in interviews if ensure_utc(interview.scheduled_at) > now]
    if mode == InterviewFilter.PAST:
        return [interview for interview in interviews if ensure_utc(interview.scheduled_at) <= now]
    return list(interviews)


def can_schedule_interviews(viewer: Viewer) -> bool:
    return viewer.can_schedule_interviews


def show_empty_state_schedule_button(viewer: Viewer, mode: InterviewFilter | str) -> bool:
    """The empty state offers scheduling only on the "all" filter."""
    return can_schedule_interviews(viewer) and InterviewFilter(mode) == InterviewFilter.ALL


def empty_state_message(mode: InterviewFilter | str) -> str:
    return EMPTY_STATE_MESSAGES[InterviewFilter(mode)]


def format_date_time(value: datetime, tz: Optional[tzinfo] = None) -> tuple[str, str]:
    """
    Date and time labels of an interview card, e.g. ("Oct 19, 2026", "02:30 PM").

    Shown in ``tz``, local time by default.
    """
    local = value.astimezone(tz)
    return f"{local:%b} {local.day}, {local.year}", local.strftime("%I:%M %p")


def location_display(interview: Interview) -> Optional[tuple[str, str]]:
    """
    Where the interview happens, as ("link", url) or ("location", text).

    A meeting link wins over a physical location.
    """
    if interview.meeting_link:
        return "link", interview.meeting_link
    if interview.location:
        return "location", interview.location
    return None


class InterviewBoard(LoggerMixin):
    """State behind the interview list screen."""

    def __init__(self, client: RowClient, viewer: Viewer) -> None:
        self.viewer = viewer
        self._interviews = InterviewRepository(client)
        self.interviews: list[Interview] = []
        self.filter = InterviewFilter.UPCOMING
        self.loading = True

    async def load(self) -> list[Interview]:
        """Load every interview. Failures leave the list empty."""
        self.loading = True
        try:
            self.interviews = await self._interviews.list_with_details()
        except Exception as e:
            self.logger.error(f"Error loading interviews: {e}")
            self.interviews = []
        finally:
            self.loading = False
        return self.interviews

    def set_filter(self, mode: InterviewFilter | str) -> None:
        self.filter = InterviewFilter(mode)

    def visible(self, now: Optional[datetime] = None) -> list[Interview]:
        """Interviews under the current filter, evaluated at ``now``."""
        return filter_interviews(self.interviews, self.filter, now or datetime.now(timezone.utc))

    @property
    def can_schedule(self) -> bool:
        return can_schedule_interviews(self.viewer)
