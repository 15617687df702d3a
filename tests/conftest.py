"""
Shared test fixtures for the HirePanel test suite.

Sets environment variables before any hirepanel imports to prevent config
failures, then provides an in-memory row client, seeded backend fixtures and
factory fixtures for the roster models.
"""

import os

# === Set environment BEFORE any hirepanel imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("DB_NAME", "hirepanel_test")

import copy
import itertools
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pytest

from hirepanel.data.client import BackendError, RowClient
from hirepanel.data.models import (
    ApplicationSummary,
    CandidateWithApplication,
    InterviewRound,
    Job,
    Panelist,
    Viewer,
)
from hirepanel.data.query import Filter, Order
from hirepanel.utils.constants import CandidateStage, RoundStatus


NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# In-memory row client
# ---------------------------------------------------------------------------


class FakeRowClient(RowClient):
    """
    Row client over in-memory tables.

    Every primitive call is recorded in ``calls`` as ``(op, table)``. Use
    ``fail`` to make a primitive raise BackendError once it has succeeded
    ``after`` times on a table.
    """

    def __init__(self, tables: Optional[dict[str, list[dict[str, Any]]]] = None):
        self.tables: dict[str, list[dict[str, Any]]] = {
            name: [dict(row) for row in rows] for name, rows in (tables or {}).items()
        }
        self.calls: list[tuple[str, str]] = []
        self._failures: dict[tuple[str, str], tuple[int, str]] = {}
        self._succeeded: dict[tuple[str, str], int] = {}
        self._ids = itertools.count(1)

    def fail(self, op: str, table: str, message: str = "boom", after: int = 0) -> None:
        self._failures[(op, table)] = (after, message)

    def _check(self, op: str, table: str) -> None:
        self.calls.append((op, table))
        key = (op, table)
        if key in self._failures:
            after, message = self._failures[key]
            if self._succeeded.get(key, 0) >= after:
                raise BackendError(message, table=table)
        self._succeeded[key] = self._succeeded.get(key, 0) + 1

    def rows(self, table: str) -> list[dict[str, Any]]:
        return self.tables.get(table, [])

    async def fetch_rows(
        self,
        table: str,
        filters: tuple[Filter, ...] = (),
        ordering: tuple[Order, ...] = (),
        columns: tuple[str, ...] = (),
    ) -> list[dict[str, Any]]:
        self._check("select", table)
        rows = [row for row in self.rows(table) if all(f.matches(row) for f in filters)]

        for order in reversed(ordering):
            present = [row for row in rows if row.get(order.column) is not None]
            missing = [row for row in rows if row.get(order.column) is None]
            present.sort(key=lambda row: row[order.column], reverse=not order.ascending)
            rows = present + missing

        if columns:
            return [{c: copy.deepcopy(row[c]) for c in columns if c in row} for row in rows]
        return [copy.deepcopy(row) for row in rows]

    async def insert(self, table: str, values: dict[str, Any]) -> dict[str, Any]:
        self._check("insert", table)
        row = {**values, "id": f"{table}-{next(self._ids)}"}
        row.setdefault("created_at", NOW)
        row.setdefault("updated_at", NOW)
        self.tables.setdefault(table, []).append(row)
        return copy.deepcopy(row)

    async def update(self, table: str, row_id: str, values: dict[str, Any]) -> dict[str, Any]:
        self._check("update", table)
        for row in self.rows(table):
            if row.get("id") == row_id:
                row.update(values)
                row["updated_at"] = NOW
                return copy.deepcopy(row)
        raise BackendError(f"No {table} row with id {row_id}", table=table)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------


def seed_tables() -> dict[str, list[dict[str, Any]]]:
    """A small hiring backend: two jobs, three candidates, rounds and interviews."""
    return {
        "jobs": [
            {"id": "job-1", "title": "Backend Engineer", "status": "published",
             "department": "Engineering", "number_of_interview_rounds": 3},
            {"id": "job-2", "title": "Designer", "status": "draft"},
            {"id": "job-3", "title": "Data Analyst", "status": "published"},
        ],
        "candidates": [
            {"id": "cand-1", "full_name": "Ada Lovelace", "email": "ada@example.com",
             "current_title": "Engineer", "current_company": "Analytical",
             "years_of_experience": 7, "skills": ["Python", "Go"], "current_stage": "interview"},
            {"id": "cand-2", "full_name": "Grace Hopper", "email": "grace@example.com",
             "skills": None, "current_stage": "hired"},
            {"id": "cand-3", "full_name": "Alan Turing", "email": "alan@example.com",
             "current_stage": "hired"},
        ],
        "job_applications": [
            {"id": "app-1", "job_id": "job-1", "candidate_id": "cand-1", "stage": "interview",
             "applied_at": NOW - timedelta(days=10)},
            {"id": "app-2", "job_id": "job-1", "candidate_id": "cand-2", "stage": "offer",
             "applied_at": NOW - timedelta(days=2)},
            {"id": "app-3", "job_id": "job-2", "candidate_id": "cand-3", "stage": "applied",
             "applied_at": NOW - timedelta(days=5)},
            {"id": "app-orphan", "job_id": "job-1", "candidate_id": "cand-missing",
             "stage": "applied", "applied_at": NOW - timedelta(days=1)},
        ],
        "interview_rounds": [
            {"id": "round-2", "application_id": "app-1", "round_number": 2,
             "round_name": "System Design", "status": "scheduled",
             "scheduled_at": NOW + timedelta(days=3), "created_by": "user-1"},
        ],
        "interview_round_panelists": [
            {"id": "pan-1", "interview_round_id": "round-2", "panelist_name": "Linus",
             "panelist_email": "linus@example.com", "panelist_role": "Staff Engineer"},
        ],
        "interviews": [
            {"id": "int-late", "application_id": "app-1", "title": "Onsite",
             "scheduled_at": NOW + timedelta(days=7), "status": "scheduled",
             "meeting_link": "https://meet.example.com/onsite"},
            {"id": "int-now", "application_id": "app-2", "title": "Culture fit",
             "scheduled_at": NOW, "status": "scheduled", "location": "Room 4"},
            {"id": "int-past", "application_id": "app-1", "title": "Phone screen",
             "scheduled_at": NOW - timedelta(days=4), "status": "completed"},
            {"id": "int-orphan", "application_id": "app-gone", "title": "Lost",
             "scheduled_at": NOW + timedelta(days=1), "status": "scheduled"},
        ],
        "offers": [
            {"id": "offer-1", "status": "sent"},
            {"id": "offer-2", "status": "accepted"},
            {"id": "offer-3", "status": "sent"},
        ],
        "activity_logs": [],
    }


# ---------------------------------------------------------------------------
# Backend fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def viewer() -> Viewer:
    return Viewer(id="user-1", role="hiring_manager")


@pytest.fixture
def client() -> FakeRowClient:
    """Row client seeded with the sample backend."""
    return FakeRowClient(seed_tables())


@pytest.fixture
def empty_client() -> FakeRowClient:
    return FakeRowClient()


@pytest.fixture
def alerts() -> list[str]:
    """Collects messages passed to an alert callback via ``alerts.append``."""
    return []


# ---------------------------------------------------------------------------
# Factory fixtures for roster models
# ---------------------------------------------------------------------------


@pytest.fixture
def make_job():
    """Factory that returns a callable to build Job models."""

    def _factory(
        number_of_interview_rounds: Optional[int] = 3,
        title: str = "Backend Engineer",
        **kwargs,
    ) -> Job:
        defaults = {"id": "job-1", "status": "published"}
        defaults.update(kwargs)
        return Job(title=title, number_of_interview_rounds=number_of_interview_rounds, **defaults)

    return _factory


@pytest.fixture
def make_round():
    """Factory that returns a callable to build persisted InterviewRound rows."""

    def _factory(
        round_number: int = 1,
        id: Optional[str] = None,
        panelists: Optional[list[dict[str, Any]]] = None,
        **kwargs,
    ) -> InterviewRound:
        defaults = {
            "application_id": "app-1",
            "round_name": f"Round {round_number}",
            "status": RoundStatus.PENDING,
        }
        defaults.update(kwargs)
        return InterviewRound(
            id=id or f"round-{round_number}",
            round_number=round_number,
            panelists=[Panelist(**p) for p in (panelists or [])],
            **defaults,
        )

    return _factory


@pytest.fixture
def make_candidate():
    """Factory that returns a callable to build CandidateWithApplication models."""

    def _factory(
        rounds: Optional[list[InterviewRound]] = None,
        full_name: str = "Ada Lovelace",
        application_id: str = "app-1",
        **kwargs,
    ) -> CandidateWithApplication:
        defaults = {
            "id": "cand-1",
            "email": "ada@example.com",
            "current_stage": CandidateStage.INTERVIEW,
        }
        defaults.update(kwargs)
        return CandidateWithApplication(
            full_name=full_name,
            application=ApplicationSummary(
                id=application_id, job_id="job-1", candidate_id=defaults["id"]
            ),
            interview_rounds=rounds or [],
            **defaults,
        )

    return _factory
