"""
Tests for hirepanel.core.scheduling.roster: loading and saving the candidate roster.
"""

import asyncio
from datetime import datetime, timezone

import pytest

from hirepanel.core.scheduling import (
    HiringManagerRoster,
    candidate_count_label,
    schedule_button_label,
)
from hirepanel.core.scheduling.roster import SAVE_FAILURE_MESSAGE, SAVE_SUCCESS_MESSAGE
from hirepanel.data.models import PersistedRound


@pytest.fixture
def roster(client, viewer, alerts):
    return HiringManagerRoster(client, viewer, alerts.append)


@pytest.fixture
def loaded_roster(roster):
    asyncio.run(roster.load("job-1"))
    return roster


# ── Labels ──────────────────────────────────────────────────────────────────


class TestLabels:
    @pytest.mark.parametrize("count,label", [
        (0, "0 candidates applied"),
        (1, "1 candidate applied"),
        (4, "4 candidates applied"),
    ])
    def test_candidate_count_label(self, count, label):
        assert candidate_count_label(count) == label

    def test_schedule_button_label(self, make_candidate, make_round):
        assert schedule_button_label(make_candidate()) == "Schedule Interviews"
        assert schedule_button_label(make_candidate(rounds=[make_round(1)])) == "Manage Interviews"


# ── load() ──────────────────────────────────────────────────────────────────


class TestLoad:
    def test_candidates_most_recent_first(self, loaded_roster):
        assert [c.full_name for c in loaded_roster.candidates] == ["Grace Hopper", "Ada Lovelace"]
        assert loaded_roster.count_label == "2 candidates applied"
        assert not loaded_roster.loading

    def test_orphan_application_skipped(self, loaded_roster):
        assert "app-orphan" not in [c.application.id for c in loaded_roster.candidates]

    def test_job_loaded(self, loaded_roster):
        assert loaded_roster.job_found
        assert loaded_roster.job.title == "Backend Engineer"

    def test_application_attached(self, loaded_roster):
        ada = loaded_roster.candidates[1]
        assert ada.id == "cand-1"
        assert ada.application.id == "app-1"
        assert ada.application.stage == "interview"
        assert ada.skills == ["Python", "Go"]

    def test_rounds_with_panelists(self, loaded_roster):
        grace, ada = loaded_roster.candidates
        assert grace.interview_rounds == []
        assert [r.round_number for r in ada.interview_rounds] == [2]
        assert ada.interview_rounds[0].panelists[0].panelist_name == "Linus"

    def test_rounds_ordered_by_number(self, client, roster):
        client.tables["interview_rounds"].insert(0, {
            "id": "round-3", "application_id": "app-1", "round_number": 3,
            "round_name": "Final", "status": "pending",
        })
        client.tables["interview_rounds"].append({
            "id": "round-1", "application_id": "app-1", "round_number": 1,
            "round_name": "Intro", "status": "pending",
        })
        asyncio.run(roster.load("job-1"))
        assert [r.round_number for r in roster.candidates[1].interview_rounds] == [1, 2, 3]

    def test_job_not_found(self, roster):
        asyncio.run(roster.load("job-missing"))
        assert not roster.job_found
        assert roster.candidates == []
        assert not roster.loading

    def test_job_without_applications(self, roster):
        asyncio.run(roster.load("job-3"))
        assert roster.job_found
        assert roster.candidates == []
        assert roster.count_label == "0 candidates applied"

    def test_failed_application_read_empties_roster(self, client, roster):
        client.fail("select", "job_applications")
        asyncio.run(roster.load("job-1"))
        assert roster.candidates == []
        assert not roster.loading

    def test_failed_round_read_keeps_candidates(self, client, roster):
        client.fail("select", "interview_rounds")
        asyncio.run(roster.load("job-1"))
        assert len(roster.candidates) == 2
        assert all(c.interview_rounds == [] for c in roster.candidates)

    def test_failed_switch_clears_previous_job(self, client, loaded_roster):
        client.fail("select", "jobs")
        asyncio.run(loaded_roster.load("job-2"))
        assert loaded_roster.job is None
        assert not loaded_roster.job_found
        assert loaded_roster.candidates == []
        assert loaded_roster.job_id == "job-2"

    def test_failed_application_read_after_switch(self, client, loaded_roster):
        client.fail("select", "job_applications")
        asyncio.run(loaded_roster.load("job-3"))
        assert loaded_roster.job.id == "job-3"
        assert loaded_roster.candidates == []

    def test_reload_reuses_job_id(self, loaded_roster):
        asyncio.run(loaded_roster.load())
        assert loaded_roster.job_id == "job-1"
        assert len(loaded_roster.candidates) == 2


# ── Editor lifecycle ────────────────────────────────────────────────────────


class TestEditor:
    def test_open_uses_job_round_count(self, loaded_roster):
        ada = loaded_roster.candidates[1]
        editor = loaded_roster.open_editor(ada)
        assert loaded_roster.editor is editor
        assert len(editor.rounds) == 3
        assert isinstance(editor.rounds[1], PersistedRound)

    def test_close_discards(self, loaded_roster):
        loaded_roster.open_editor(loaded_roster.candidates[0])
        loaded_roster.close_editor()
        assert loaded_roster.editor is None

    def test_save_without_editor(self, loaded_roster, alerts):
        assert asyncio.run(loaded_roster.save_interview_rounds()) is False
        assert alerts == []


# ── save_interview_rounds() ─────────────────────────────────────────────────


class TestSave:
    def _edit_ada(self, roster):
        editor = roster.open_editor(roster.candidates[1])
        editor.update_round(0, "scheduled_at", datetime(2026, 11, 2, 9, 0, tzinfo=timezone.utc))
        editor.update_panelist(0, 0, "panelist_name", "Margaret")
        editor.update_panelist(0, 0, "panelist_email", "margaret@example.com")
        editor.update_round(1, "round_name", "Architecture")
        return editor

    def test_success(self, client, loaded_roster, alerts):
        self._edit_ada(loaded_roster)
        assert asyncio.run(loaded_roster.save_interview_rounds()) is True

        assert alerts == [SAVE_SUCCESS_MESSAGE]
        assert loaded_roster.editor is None
        assert not loaded_roster.submitting

        rounds = {r["round_number"]: r for r in client.rows("interview_rounds")}
        assert rounds[1]["status"] == "scheduled"
        assert rounds[1]["created_by"] == "user-1"
        assert rounds[2]["round_name"] == "Architecture"
        assert rounds[3]["status"] == "pending"

        log = client.rows("activity_logs")
        assert len(log) == 1
        assert log[0]["entity_id"] == "app-1"
        assert log[0]["performed_by"] == "user-1"

    def test_success_reloads(self, loaded_roster):
        self._edit_ada(loaded_roster)
        asyncio.run(loaded_roster.save_interview_rounds())
        ada = loaded_roster.candidates[1]
        assert [r.round_number for r in ada.interview_rounds] == [1, 2, 3]
        assert schedule_button_label(ada) == "Manage Interviews"

    def test_failure_keeps_editor_open(self, client, loaded_roster, alerts):
        editor = self._edit_ada(loaded_roster)
        client.fail("update", "interview_rounds", message="row is locked")

        assert asyncio.run(loaded_roster.save_interview_rounds()) is False
        assert alerts == ["row is locked"]
        assert loaded_roster.editor is editor
        assert not loaded_roster.submitting
        # Round 1 and its panelist were written before the failure
        assert any(r["round_number"] == 1 for r in client.rows("interview_rounds"))
        assert client.rows("activity_logs") == []

    def test_failure_without_message_uses_fallback(self, client, loaded_roster, alerts):
        self._edit_ada(loaded_roster)
        client.fail("insert", "activity_logs", message="")
        asyncio.run(loaded_roster.save_interview_rounds())
        assert alerts == [SAVE_FAILURE_MESSAGE]
