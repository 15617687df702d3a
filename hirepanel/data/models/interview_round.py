"""
Interview round and panelist models.

Two families live here. ``InterviewRound`` and ``Panelist`` are backend rows.
The editor works on explicit variants instead: ``NewRound`` / ``PersistedRound``
and ``NewPanelist`` / ``PersistedPanelist``. Whether a save inserts or updates
is decided by the variant, never by checking for an id field.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import Field, field_validator

from hirepanel.utils.constants import RoundStatus

from .base import EmbeddedModel, TimestampedRow


# =============================================================================
# Backend rows
# =============================================================================


class Panelist(TimestampedRow):
    """A panelist row attached to an interview round."""

    interview_round_id: Optional[str] = None
    panelist_name: str = ""
    panelist_email: str = ""
    panelist_role: Optional[str] = None


class InterviewRound(TimestampedRow):
    """One round of a multi-round interview plan, with its panelists."""

    application_id: str
    round_number: int
    round_name: str
    status: RoundStatus = RoundStatus.PENDING
    scheduled_at: Optional[datetime] = None
    created_by: Optional[str] = None
    panelists: list[Panelist] = Field(default_factory=list)

    @field_validator("panelists", mode="before")
    @classmethod
    def none_panelists_to_empty(cls, v):
        return [] if v is None else v


# =============================================================================
# Editor variants
# =============================================================================


class PanelistSlot(EmbeddedModel):
    """Editable panelist fields shared by both variants."""

    panelist_name: str = ""
    panelist_email: str = ""
    panelist_role: str = ""

    @property
    def is_complete(self) -> bool:
        """Only panelists with both a name and an email are ever written."""
        return bool(self.panelist_name and self.panelist_email)


class NewPanelist(PanelistSlot):
    """Panelist slot that has not been saved yet."""

    kind: Literal["new"] = "new"


class PersistedPanelist(PanelistSlot):
    """Panelist slot backed by an existing row."""

    kind: Literal["persisted"] = "persisted"
    id: str

    @classmethod
    def from_row(cls, row: Panelist) -> "PersistedPanelist":
        return cls(
            id=row.id,
            panelist_name=row.panelist_name,
            panelist_email=row.panelist_email,
            panelist_role=row.panelist_role or "",
        )


PanelistEntry = Annotated[Union[NewPanelist, PersistedPanelist], Field(discriminator="kind")]


class RoundSlot(EmbeddedModel):
    """Editable round fields shared by both variants."""

    round_number: int
    round_name: str
    status: RoundStatus = RoundStatus.PENDING
    scheduled_at: Optional[datetime] = None
    panelists: list[PanelistEntry] = Field(default_factory=list)

    @property
    def status_on_save(self) -> RoundStatus:
        """
        Status written on save.

        Derived from the schedule alone: a blank schedule is always pending,
        whatever the status was before.
        """
        return RoundStatus.SCHEDULED if self.scheduled_at else RoundStatus.PENDING

    @property
    def complete_panelists(self) -> list[PanelistEntry]:
        return [panelist for panelist in self.panelists if panelist.is_complete]


class NewRound(RoundSlot):
    """Round slot with no row yet."""

    kind: Literal["new"] = "new"

    @classmethod
    def blank(cls, round_number: int) -> "NewRound":
        """Fresh pending round with a single empty panelist slot."""
        return cls(
            round_number=round_number,
            round_name=f"Round {round_number}",
            status=RoundStatus.PENDING,
            scheduled_at=None,
            panelists=[NewPanelist()],
        )


class PersistedRound(RoundSlot):
    """Round slot backed by an existing row."""

    kind: Literal["persisted"] = "persisted"
    id: str

    @classmethod
    def from_row(cls, row: InterviewRound) -> "PersistedRound":
        return cls(
            id=row.id,
            round_number=row.round_number,
            round_name=row.round_name,
            status=row.status,
            scheduled_at=row.scheduled_at,
            panelists=[PersistedPanelist.from_row(p) for p in row.panelists if p.id],
        )


RoundEntry = Annotated[Union[NewRound, PersistedRound], Field(discriminator="kind")]
