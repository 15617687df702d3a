"""
Tests for hirepanel.utils.constants: status vocabularies and badge colors.
"""

from hirepanel.utils.constants import (
    NEUTRAL_BADGE,
    ROUND_STATUS_COLORS,
    SCHEDULING_ROLES,
    STAGE_COLORS,
    CandidateStage,
    InterviewFilter,
    RoundStatus,
    Table,
    UserRole,
    badge_colors,
)


# ── badge_colors() ──────────────────────────────────────────────────────────


class TestBadgeColors:
    def test_known_value(self):
        assert badge_colors(STAGE_COLORS, "hired") == STAGE_COLORS["hired"]

    def test_enum_member(self):
        assert badge_colors(STAGE_COLORS, CandidateStage.OFFER) == STAGE_COLORS["offer"]

    def test_unknown_value_neutral(self):
        assert badge_colors(STAGE_COLORS, "archived") == NEUTRAL_BADGE

    def test_none_neutral(self):
        assert badge_colors(STAGE_COLORS, None) == NEUTRAL_BADGE

    def test_pending_round_neutral(self):
        assert badge_colors(ROUND_STATUS_COLORS, RoundStatus.PENDING) == NEUTRAL_BADGE


# ── Enum value correctness ──────────────────────────────────────────────────


class TestCandidateStage:
    def test_all_values_present(self):
        expected = {"applied", "screening", "interview", "offer", "hired", "rejected"}
        assert {s.value for s in CandidateStage} == expected

    def test_every_stage_has_colors(self):
        assert set(STAGE_COLORS) == {s.value for s in CandidateStage}


class TestRoles:
    def test_scheduling_roles(self):
        assert SCHEDULING_ROLES == {"admin", "recruiter", "hiring_manager"}

    def test_interviewer_cannot_schedule(self):
        assert UserRole.INTERVIEWER.value not in SCHEDULING_ROLES


class TestTables:
    def test_table_names(self):
        assert Table.JOB_APPLICATIONS.value == "job_applications"
        assert Table.INTERVIEW_ROUND_PANELISTS.value == "interview_round_panelists"


class TestInterviewFilter:
    def test_values(self):
        assert [f.value for f in InterviewFilter] == ["upcoming", "past", "all"]
