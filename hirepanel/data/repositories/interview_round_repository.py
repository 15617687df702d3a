"""
Interview round repository for HirePanel.
"""

from hirepanel.data.models.interview_round import InterviewRound
from hirepanel.data.schema import ROUND_PANELISTS
from hirepanel.utils.constants import Table

from .base import BaseRepository


class InterviewRoundRepository(BaseRepository[InterviewRound]):
    """Repository for interview round rows and their panelists."""

    @property
    def table_name(self) -> str:
        return Table.INTERVIEW_ROUNDS.value

    @property
    def model_class(self) -> type[InterviewRound]:
        return InterviewRound

    async def list_for_application(self, application_id: str) -> list[InterviewRound]:
        """Rounds of one application by round number, with panelists."""
        query = (
            self.query()
            .eq("application_id", application_id)
            .order("round_number")
            .expand(ROUND_PANELISTS)
        )
        return await self.find(query)
