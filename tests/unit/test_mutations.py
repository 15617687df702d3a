"""
Tests for hirepanel.core.scheduling.mutations: save planning and sequenced writes.
"""

import asyncio
from datetime import datetime, timezone

import pytest

from hirepanel.core.scheduling import (
    InsertRow,
    MutationAbortedError,
    MutationExecutor,
    RowRef,
    RoundEditor,
    UpdateRow,
    plan_round_save,
)
from hirepanel.data.client import BackendError


SCHEDULED = datetime(2026, 11, 2, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def fresh_editor(make_candidate, make_job):
    """Two new rounds; round 1 scheduled with one complete panelist."""
    editor = RoundEditor.for_candidate(make_candidate(), make_job(2))
    editor.update_round(0, "scheduled_at", SCHEDULED)
    editor.update_panelist(0, 0, "panelist_name", "Linus")
    editor.update_panelist(0, 0, "panelist_email", "linus@example.com")
    return editor


def _plan(editor, viewer):
    return plan_round_save(
        editor.candidate.application.id, editor.rounds, viewer, editor.candidate.full_name
    )


# ── plan_round_save() ───────────────────────────────────────────────────────


class TestPlanRoundSave:
    def test_new_rounds_inserted_with_refs(self, fresh_editor, viewer):
        commands = _plan(fresh_editor, viewer)
        tables = [(type(c).__name__, c.table) for c in commands]
        assert tables == [
            ("InsertRow", "interview_rounds"),
            ("InsertRow", "interview_round_panelists"),
            ("InsertRow", "interview_rounds"),
            ("InsertRow", "activity_logs"),
        ]
        assert commands[0].ref == RowRef("round-0")
        assert commands[1].values["interview_round_id"] == RowRef("round-0")

    def test_round_insert_values(self, fresh_editor, viewer):
        values = _plan(fresh_editor, viewer)[0].values
        assert values == {
            "application_id": "app-1",
            "round_number": 1,
            "round_name": "Round 1",
            "scheduled_at": SCHEDULED,
            "status": "scheduled",
            "created_by": "user-1",
        }

    def test_status_pending_without_schedule(self, fresh_editor, viewer):
        assert _plan(fresh_editor, viewer)[2].values["status"] == "pending"

    def test_empty_role_written_as_null(self, fresh_editor, viewer):
        assert _plan(fresh_editor, viewer)[1].values["panelist_role"] is None

    def test_incomplete_panelists_skipped(self, fresh_editor, viewer):
        fresh_editor.add_panelist(0)
        fresh_editor.update_panelist(0, 1, "panelist_name", "No Email")
        panelist_writes = [
            c for c in _plan(fresh_editor, viewer) if c.table == "interview_round_panelists"
        ]
        assert [c.values["panelist_name"] for c in panelist_writes] == ["Linus"]

    def test_persisted_rows_updated(self, make_candidate, make_job, make_round, viewer):
        existing = make_round(
            1,
            status="completed",
            panelists=[{"id": "pan-1", "panelist_name": "L", "panelist_email": "l@x.io"}],
        )
        editor = RoundEditor.for_candidate(make_candidate(rounds=[existing]), make_job(1))
        commands = _plan(editor, viewer)

        assert isinstance(commands[0], UpdateRow)
        assert commands[0].row_id == "round-1"
        # A persisted round without a schedule is saved as pending
        assert commands[0].values == {
            "round_name": "Round 1",
            "scheduled_at": None,
            "status": "pending",
        }
        assert isinstance(commands[1], UpdateRow)
        assert commands[1].row_id == "pan-1"
        assert "interview_round_id" not in commands[1].values

    def test_new_panelist_on_persisted_round(self, make_candidate, make_job, make_round, viewer):
        editor = RoundEditor.for_candidate(make_candidate(rounds=[make_round(1)]), make_job(1))
        editor.add_panelist(0)
        editor.update_panelist(0, 0, "panelist_name", "New")
        editor.update_panelist(0, 0, "panelist_email", "new@x.io")
        insert = _plan(editor, viewer)[1]
        assert isinstance(insert, InsertRow)
        assert insert.values["interview_round_id"] == "round-1"

    def test_activity_entry_last(self, fresh_editor, viewer):
        entry = _plan(fresh_editor, viewer)[-1]
        assert entry.values == {
            "entity_type": "interview",
            "entity_id": "app-1",
            "action": "interviews_scheduled",
            "description": "Interview rounds scheduled for Ada Lovelace",
            "performed_by": "user-1",
        }


# ── MutationExecutor ────────────────────────────────────────────────────────


class TestMutationExecutor:
    def test_refs_resolved_to_inserted_ids(self, client, fresh_editor, viewer):
        asyncio.run(MutationExecutor(client).execute(_plan(fresh_editor, viewer)))
        round_ids = [r["id"] for r in client.rows("interview_rounds") if r["application_id"] == "app-1"]
        panelist = client.rows("interview_round_panelists")[-1]
        assert panelist["panelist_name"] == "Linus"
        assert panelist["interview_round_id"] in round_ids
        assert panelist["interview_round_id"] != "round-2"

    def test_commands_run_in_order(self, client, fresh_editor, viewer):
        asyncio.run(MutationExecutor(client).execute(_plan(fresh_editor, viewer)))
        assert client.calls == [
            ("insert", "interview_rounds"),
            ("insert", "interview_round_panelists"),
            ("insert", "interview_rounds"),
            ("insert", "activity_logs"),
        ]

    def test_returns_each_row(self, client, fresh_editor, viewer):
        rows = asyncio.run(MutationExecutor(client).execute(_plan(fresh_editor, viewer)))
        assert len(rows) == 4
        assert rows[-1]["action"] == "interviews_scheduled"

    def test_failure_stops_without_rollback(self, client, fresh_editor, viewer):
        client.fail("insert", "interview_rounds", message="quota exceeded", after=1)
        before = len(client.rows("interview_rounds"))

        with pytest.raises(MutationAbortedError) as exc_info:
            asyncio.run(MutationExecutor(client).execute(_plan(fresh_editor, viewer)))

        error = exc_info.value
        assert error.message == "quota exceeded"
        assert error.step == 2
        assert error.table == "interview_rounds"
        assert len(error.completed) == 2
        # Round 1 and its panelist stay written; no activity entry
        assert len(client.rows("interview_rounds")) == before + 1
        assert len(client.rows("interview_round_panelists")) == 2
        assert client.rows("activity_logs") == []

    def test_aborted_error_is_backend_error(self, client, viewer, fresh_editor):
        client.fail("insert", "interview_rounds")
        with pytest.raises(BackendError):
            asyncio.run(MutationExecutor(client).execute(_plan(fresh_editor, viewer)))

    def test_update_missing_row_aborts(self, client):
        commands = [UpdateRow("interview_rounds", "missing", {"round_name": "X"})]
        with pytest.raises(MutationAbortedError) as exc_info:
            asyncio.run(MutationExecutor(client).execute(commands))
        assert exc_info.value.step == 0
        assert exc_info.value.completed == []

    def test_empty_plan(self, client):
        assert asyncio.run(MutationExecutor(client).execute([])) == []
