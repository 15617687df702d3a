"""
Tests for hirepanel.core.interviews: the read-only interview list.
"""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from hirepanel.core.interviews import (
    InterviewBoard,
    empty_state_message,
    filter_interviews,
    format_date_time,
    location_display,
    show_empty_state_schedule_button,
)
from hirepanel.data.models import Interview, Viewer
from hirepanel.utils.constants import InterviewFilter


def _interview(scheduled_at, **kwargs):
    return Interview(application_id="a", title="Interview", scheduled_at=scheduled_at, **kwargs)


# ── filter_interviews() ─────────────────────────────────────────────────────


class TestFilterInterviews:
    @pytest.fixture
    def interviews(self, now):
        return [
            _interview(now - timedelta(days=2), id="old"),
            _interview(now, id="exact"),
            _interview(now + timedelta(minutes=1), id="soon"),
            _interview(now + timedelta(days=3), id="later"),
        ]

    def test_upcoming_strictly_after_now(self, interviews, now):
        result = filter_interviews(interviews, InterviewFilter.UPCOMING, now)
        assert [i.id for i in result] == ["soon", "later"]

    def test_past_includes_now(self, interviews, now):
        result = filter_interviews(interviews, InterviewFilter.PAST, now)
        assert [i.id for i in result] == ["old", "exact"]

    def test_all_keeps_order(self, interviews, now):
        result = filter_interviews(interviews, "all", now)
        assert [i.id for i in result] == ["old", "exact", "soon", "later"]

    def test_times_without_offset_read_as_utc(self, now):
        interviews = [
            _interview("2026-10-19T11:00:00", id="morning"),
            _interview("2026-10-19T13:00:00", id="afternoon"),
        ]
        assert interviews[0].scheduled_at.tzinfo == timezone.utc
        assert [i.id for i in filter_interviews(interviews, "upcoming", now)] == ["afternoon"]
        assert [i.id for i in filter_interviews(interviews, "past", now)] == ["morning"]

    def test_naive_now_read_as_utc(self, interviews, now):
        result = filter_interviews(interviews, InterviewFilter.UPCOMING, now.replace(tzinfo=None))
        assert [i.id for i in result] == ["soon", "later"]

    def test_unknown_mode(self, interviews, now):
        with pytest.raises(ValueError):
            filter_interviews(interviews, "tomorrow", now)


# ── Formatting and empty state ──────────────────────────────────────────────


class TestFormatDateTime:
    def test_afternoon(self):
        value = datetime(2026, 10, 19, 14, 30, tzinfo=timezone.utc)
        assert format_date_time(value, timezone.utc) == ("Oct 19, 2026", "02:30 PM")

    def test_single_digit_day_not_padded(self):
        value = datetime(2026, 3, 5, 9, 5, tzinfo=timezone.utc)
        assert format_date_time(value, timezone.utc) == ("Mar 5, 2026", "09:05 AM")

    def test_converted_to_display_zone(self):
        value = datetime(2026, 10, 19, 23, 30, tzinfo=timezone.utc)
        plus_two = timezone(timedelta(hours=2))
        assert format_date_time(value, plus_two) == ("Oct 20, 2026", "01:30 AM")


class TestLocationDisplay:
    def test_link_wins(self, now):
        interview = _interview(now, meeting_link="https://meet.example.com/x", location="HQ")
        assert location_display(interview) == ("link", "https://meet.example.com/x")

    def test_location(self, now):
        assert location_display(_interview(now, location="Room 4")) == ("location", "Room 4")

    def test_neither(self, now):
        assert location_display(_interview(now)) is None


class TestEmptyState:
    @pytest.mark.parametrize("mode,message", [
        ("upcoming", "No upcoming interviews scheduled"),
        ("past", "No past interviews"),
        ("all", "Start scheduling interviews with your candidates"),
    ])
    def test_messages(self, mode, message):
        assert empty_state_message(mode) == message

    def test_schedule_button_only_on_all(self):
        recruiter = Viewer(role="recruiter")
        assert show_empty_state_schedule_button(recruiter, InterviewFilter.ALL)
        assert not show_empty_state_schedule_button(recruiter, InterviewFilter.UPCOMING)
        assert not show_empty_state_schedule_button(recruiter, InterviewFilter.PAST)

    def test_schedule_button_needs_role(self):
        assert not show_empty_state_schedule_button(Viewer(role="interviewer"), "all")


# ── InterviewBoard ──────────────────────────────────────────────────────────


class TestInterviewBoard:
    def test_defaults_to_upcoming(self, client, viewer):
        board = InterviewBoard(client, viewer)
        assert board.filter == InterviewFilter.UPCOMING
        assert board.loading

    def test_load_earliest_first_without_orphans(self, client, viewer):
        board = InterviewBoard(client, viewer)
        asyncio.run(board.load())
        assert [i.id for i in board.interviews] == ["int-past", "int-now", "int-late"]
        assert not board.loading

    def test_details_attached(self, client, viewer):
        board = InterviewBoard(client, viewer)
        asyncio.run(board.load())
        late = board.interviews[-1]
        assert late.candidate_name == "Ada Lovelace"
        assert late.job_title == "Backend Engineer"
        assert late.application.candidate.email == "ada@example.com"

    def test_filter_switch_does_not_requery(self, client, viewer, now):
        board = InterviewBoard(client, viewer)
        asyncio.run(board.load())
        calls = len(client.calls)

        assert [i.id for i in board.visible(now)] == ["int-late"]
        board.set_filter("past")
        assert [i.id for i in board.visible(now)] == ["int-past", "int-now"]
        board.set_filter(InterviewFilter.ALL)
        assert len(board.visible(now)) == 3
        assert len(client.calls) == calls

    def test_row_without_offset_renders(self, client, viewer, now):
        client.tables["interviews"][:] = [
            {"id": "int-naive", "application_id": "app-1", "title": "Debrief",
             "scheduled_at": "2026-10-25T10:00:00", "status": "scheduled"},
        ]
        board = InterviewBoard(client, viewer)
        asyncio.run(board.load())
        assert [i.id for i in board.visible(now)] == ["int-naive"]
        board.set_filter("past")
        assert board.visible(now) == []

    def test_failed_load_is_empty(self, client, viewer):
        client.fail("select", "interviews")
        board = InterviewBoard(client, viewer)
        assert asyncio.run(board.load()) == []
        assert not board.loading

    def test_failed_join_is_empty(self, client, viewer):
        client.fail("select", "candidates")
        board = InterviewBoard(client, viewer)
        assert asyncio.run(board.load()) == []

    def test_can_schedule(self, client):
        assert InterviewBoard(client, Viewer(role="admin")).can_schedule
        assert not InterviewBoard(client, Viewer(role="interviewer")).can_schedule
