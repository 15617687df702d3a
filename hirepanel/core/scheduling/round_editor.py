"""
In-memory editor for a candidate's interview rounds.

The editor always holds exactly the job's configured number of rounds.
Rounds that already exist are reused; missing round numbers are filled with
fresh pending rounds. Nothing is written until the roster saves.
"""

from datetime import datetime
from typing import Optional, Union

from hirepanel.data.models import (
    CandidateWithApplication,
    Job,
    NewPanelist,
    NewRound,
    PersistedRound,
    RoundEntry,
)
from hirepanel.utils.constants import DEFAULT_INTERVIEW_ROUNDS

ROUND_FIELDS = ("round_name", "scheduled_at")
PANELIST_FIELDS = ("panelist_name", "panelist_email", "panelist_role")


def parse_schedule(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Parse a schedule entered in the editor.

    Blank text clears the schedule. Naive values are taken as local time.

    Raises:
        ValueError: If the text is not an ISO 8601 date and time.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip()
        if not text:
            return None
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


class RoundEditor:
    """Editable round list for one candidate."""

    def __init__(self, candidate: CandidateWithApplication, rounds: list[RoundEntry]):
        self.candidate = candidate
        self.rounds = rounds

    @classmethod
    def for_candidate(
        cls, candidate: CandidateWithApplication, job: Optional[Job]
    ) -> "RoundEditor":
        """Materialize the round slots for ``candidate``."""
        count = job.interview_round_count if job else DEFAULT_INTERVIEW_ROUNDS

        existing: dict[int, PersistedRound] = {}
        for row in candidate.interview_rounds:
            if row.id and row.round_number not in existing:
                existing[row.round_number] = PersistedRound.from_row(row)

        rounds: list[RoundEntry] = [
            existing.get(number) or NewRound.blank(number)
            for number in range(1, count + 1)
        ]
        return cls(candidate, rounds)

    # -------------------------------------------------------------------------
    # Panelist slots
    # -------------------------------------------------------------------------

    def add_panelist(self, round_index: int) -> None:
        self.rounds[round_index].panelists.append(NewPanelist())

    def can_remove_panelist(self, round_index: int) -> bool:
        """A round always keeps at least one panelist slot."""
        return len(self.rounds[round_index].panelists) > 1

    def remove_panelist(self, round_index: int, panelist_index: int) -> bool:
        """Remove a panelist slot. Returns False when it is the last one."""
        if not self.can_remove_panelist(round_index):
            return False
        del self.rounds[round_index].panelists[panelist_index]
        return True

    # -------------------------------------------------------------------------
    # Field edits
    # -------------------------------------------------------------------------

    def update_round(self, round_index: int, field: str, value) -> None:
        if field not in ROUND_FIELDS:
            raise ValueError(f"Unknown round field: {field}")
        if field == "scheduled_at":
            value = parse_schedule(value)
        setattr(self.rounds[round_index], field, value)

    def update_panelist(self, round_index: int, panelist_index: int, field: str, value: str) -> None:
        if field not in PANELIST_FIELDS:
            raise ValueError(f"Unknown panelist field: {field}")
        setattr(self.rounds[round_index].panelists[panelist_index], field, value)
