"""
Hiring-manager candidate roster for one job.

Loads the job, its applications with candidates, and each application's
interview rounds with panelists, then owns the round editor and its save.
"""

import asyncio
from typing import Callable, Optional

from hirepanel.data.client import RowClient
from hirepanel.data.models import (
    CandidateWithApplication,
    InterviewRound,
    Job,
    JobApplication,
    Viewer,
)
from hirepanel.data.repositories import (
    ApplicationRepository,
    InterviewRoundRepository,
    JobRepository,
)
from hirepanel.utils.constants import ActivityAction
from hirepanel.utils.logger import LoggerMixin, audit_log

from .mutations import MutationExecutor, plan_round_save
from .round_editor import RoundEditor

SAVE_SUCCESS_MESSAGE = "Interview rounds saved successfully!"
SAVE_FAILURE_MESSAGE = "Failed to save interviews"

AlertCallback = Callable[[str], None]


def candidate_count_label(count: int) -> str:
    """E.g. "1 candidate applied", "4 candidates applied"."""
    return f"{count} candidate{'' if count == 1 else 's'} applied"


def schedule_button_label(candidate: CandidateWithApplication) -> str:
    return "Manage Interviews" if candidate.has_interview_rounds else "Schedule Interviews"


class HiringManagerRoster(LoggerMixin):
    """
    State behind the hiring-manager candidate screen.

    Args:
        client: Row client used for every read and write.
        viewer: The person using the screen; recorded as creator of new
            rounds and as performer of the activity log entry.
        alert: Shows a blocking message to the user.
    """

    def __init__(self, client: RowClient, viewer: Viewer, alert: AlertCallback) -> None:
        self._client = client
        self.viewer = viewer
        self._alert = alert

        self._jobs = JobRepository(client)
        self._applications = ApplicationRepository(client)
        self._rounds = InterviewRoundRepository(client)

        self.job_id: Optional[str] = None
        self.job: Optional[Job] = None
        self.candidates: list[CandidateWithApplication] = []
        self.loading = True

        self.editor: Optional[RoundEditor] = None
        self.submitting = False

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    async def _load_rounds(self, application: JobApplication) -> list[InterviewRound]:
        try:
            return await self._rounds.list_for_application(application.id)
        except Exception as e:
            self.logger.error(f"Error loading rounds for application {application.id}: {e}")
            return []

    async def load(self, job_id: Optional[str] = None) -> None:
        """Load the job and its candidates. Failures leave the roster empty."""
        if job_id is not None:
            self.job_id = job_id

        self.loading = True
        self.job = None
        try:
            self.job = await self._jobs.get_by_id(self.job_id)
            applications = await self._applications.list_for_job(self.job_id)
            rounds = await asyncio.gather(*(self._load_rounds(app) for app in applications))
            self.candidates = [
                CandidateWithApplication.assemble(application, application_rounds)
                for application, application_rounds in zip(applications, rounds)
            ]
            self.logger.info(f"Loaded {len(self.candidates)} candidates for job {self.job_id}")
        except Exception as e:
            self.logger.error(f"Error loading data: {e}")
            self.candidates = []
        finally:
            self.loading = False

    @property
    def job_found(self) -> bool:
        return self.job is not None

    @property
    def count_label(self) -> str:
        return candidate_count_label(len(self.candidates))

    # -------------------------------------------------------------------------
    # Round editor
    # -------------------------------------------------------------------------

    def open_editor(self, candidate: CandidateWithApplication) -> RoundEditor:
        """Start editing rounds for ``candidate`` from what is persisted."""
        self.editor = RoundEditor.for_candidate(candidate, self.job)
        return self.editor

    def close_editor(self) -> None:
        """Close the editor, discarding unsaved edits."""
        self.editor = None

    async def save_interview_rounds(self) -> bool:
        """
        Persist the open editor's rounds, panelists and an activity entry.

        On success the editor closes and the roster reloads. On failure the
        backend's message is shown and the editor stays open; rows already
        written are kept.
        """
        editor = self.editor
        if editor is None:
            return False

        candidate = editor.candidate
        self.submitting = True
        try:
            commands = plan_round_save(
                candidate.application.id,
                editor.rounds,
                self.viewer,
                candidate.full_name,
            )
            await MutationExecutor(self._client).execute(commands)
        except Exception as e:
            self.logger.error(f"Error saving interviews: {e}")
            self._alert(str(e) or SAVE_FAILURE_MESSAGE)
            return False
        finally:
            self.submitting = False

        audit_log(
            ActivityAction.INTERVIEWS_SCHEDULED.value,
            {
                "application_id": candidate.application.id,
                "rounds": len(editor.rounds),
                "performed_by": self.viewer.id,
            },
        )
        self.close_editor()
        self._alert(SAVE_SUCCESS_MESSAGE)
        await self.load()
        return True
