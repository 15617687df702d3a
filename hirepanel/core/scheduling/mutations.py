"""
Sequenced writes against the row client.

A save is planned as an ordered list of commands and executed one command at
a time. Execution stops at the first failure; rows written by earlier
commands stay written, there is no rollback. An insert can publish the id of
its new row under a ``RowRef`` so later commands can point at it.
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from hirepanel.data.client import BackendError, RowClient
from hirepanel.data.models import (
    PanelistEntry,
    PersistedPanelist,
    PersistedRound,
    RoundEntry,
    Viewer,
    interviews_scheduled_entry,
)
from hirepanel.utils.constants import Table
from hirepanel.utils.logger import LoggerMixin


@dataclass(frozen=True)
class RowRef:
    """Placeholder for the id of a row inserted earlier in the same plan."""

    key: str


@dataclass(frozen=True)
class InsertRow:
    table: str
    values: dict[str, Any]
    ref: Optional[RowRef] = None


@dataclass(frozen=True)
class UpdateRow:
    table: str
    row_id: Union[str, RowRef]
    values: dict[str, Any]


MutationCommand = Union[InsertRow, UpdateRow]


class MutationAbortedError(BackendError):
    """
    A command failed and the rest of the plan was not run.

    Attributes:
        step: Index of the failing command.
        command: The failing command.
        completed: Rows returned by the commands that succeeded before it.
    """

    def __init__(
        self,
        message: str,
        step: int,
        command: MutationCommand,
        completed: list[dict[str, Any]],
    ):
        super().__init__(message, table=command.table)
        self.step = step
        self.command = command
        self.completed = completed


class MutationExecutor(LoggerMixin):
    """Runs mutation commands strictly in order."""

    def __init__(self, client: RowClient) -> None:
        self._client = client

    @staticmethod
    def _resolve(value: Any, refs: dict[str, str]) -> Any:
        if isinstance(value, RowRef):
            return refs[value.key]
        return value

    async def _apply(self, command: MutationCommand, refs: dict[str, str]) -> dict[str, Any]:
        values = {key: self._resolve(value, refs) for key, value in command.values.items()}
        if isinstance(command, InsertRow):
            return await self._client.insert(command.table, values)
        return await self._client.update(command.table, self._resolve(command.row_id, refs), values)

    async def execute(self, commands: Sequence[MutationCommand]) -> list[dict[str, Any]]:
        """
        Execute ``commands`` one at a time.

        Returns:
            The row returned by each command, in order.

        Raises:
            MutationAbortedError: On the first failing command.
        """
        refs: dict[str, str] = {}
        completed: list[dict[str, Any]] = []

        for step, command in enumerate(commands):
            try:
                row = await self._apply(command, refs)
            except BackendError as e:
                self.logger.warning(
                    f"Mutation aborted at step {step + 1}/{len(commands)} "
                    f"({command.table}), {len(completed)} already applied"
                )
                raise MutationAbortedError(e.message, step, command, completed) from e

            if isinstance(command, InsertRow) and command.ref is not None:
                refs[command.ref.key] = row["id"]
            completed.append(row)

        self.logger.debug(f"Executed {len(completed)} mutations")
        return completed


def _panelist_values(panelist: PanelistEntry) -> dict[str, Any]:
    return {
        "panelist_name": panelist.panelist_name,
        "panelist_email": panelist.panelist_email,
        "panelist_role": panelist.panelist_role or None,
    }


def plan_round_save(
    application_id: str,
    rounds: Sequence[RoundEntry],
    viewer: Viewer,
    candidate_name: str,
) -> list[MutationCommand]:
    """
    Plan the writes that persist an edited round list.

    Persisted rounds are updated and new rounds inserted, each followed by
    its panelists. Panelists without both a name and an email are left out.
    A single activity log entry closes the plan.
    """
    rounds_table = Table.INTERVIEW_ROUNDS.value
    panelists_table = Table.INTERVIEW_ROUND_PANELISTS.value
    commands: list[MutationCommand] = []

    for index, round_ in enumerate(rounds):
        fields = {
            "round_name": round_.round_name,
            "scheduled_at": round_.scheduled_at,
            "status": round_.status_on_save.value,
        }

        round_id: Union[str, RowRef]
        if isinstance(round_, PersistedRound):
            round_id = round_.id
            commands.append(UpdateRow(rounds_table, round_id, fields))
        else:
            round_id = RowRef(f"round-{index}")
            commands.append(InsertRow(
                rounds_table,
                {
                    "application_id": application_id,
                    "round_number": round_.round_number,
                    **fields,
                    "created_by": viewer.id,
                },
                ref=round_id,
            ))

        for panelist in round_.complete_panelists:
            if isinstance(panelist, PersistedPanelist):
                commands.append(UpdateRow(panelists_table, panelist.id, _panelist_values(panelist)))
            else:
                commands.append(InsertRow(
                    panelists_table,
                    {"interview_round_id": round_id, **_panelist_values(panelist)},
                ))

    entry = interviews_scheduled_entry(application_id, candidate_name, viewer.id)
    commands.append(InsertRow(Table.ACTIVITY_LOGS.value, entry.to_row()))
    return commands
