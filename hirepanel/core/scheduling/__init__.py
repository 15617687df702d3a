"""
Interview round scheduling for the hiring-manager candidate roster.
"""

from .mutations import (
    InsertRow,
    MutationAbortedError,
    MutationCommand,
    MutationExecutor,
    RowRef,
    UpdateRow,
    plan_round_save,
)
from .round_editor import RoundEditor, parse_schedule
from .roster import (
    HiringManagerRoster,
    candidate_count_label,
    schedule_button_label,
)

__all__ = [
    "InsertRow",
    "MutationAbortedError",
    "MutationCommand",
    "MutationExecutor",
    "RowRef",
    "UpdateRow",
    "plan_round_save",
    "RoundEditor",
    "parse_schedule",
    "HiringManagerRoster",
    "candidate_count_label",
    "schedule_button_label",
]
