"""
Hiring-manager candidate view for HirePanel.

Lists the candidates who applied to one job with their interview rounds, and
opens the interview rounds dialog for scheduling.
"""

from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
)
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont

from hirepanel.core.scheduling import HiringManagerRoster, schedule_button_label
from hirepanel.data.client import RowClient
from hirepanel.data.models import CandidateWithApplication, InterviewRound, Viewer
from hirepanel.utils.constants import (
    APP_DISPLAY_NAME,
    COLORS,
    ROUND_STATUS_COLORS,
    STAGE_COLORS,
    badge_colors,
)
from hirepanel.ui.dialogs import InterviewRoundsDialog
from hirepanel.ui.views.base_view import BaseView
from hirepanel.ui.widgets import Badge, Card, InfoCard, PrimaryButton, SecondaryButton


class CandidatesView(BaseView):
    """
    Candidates who applied to a job, as seen by its hiring manager.

    Messages from the roster may be raised on a worker thread, so they are
    routed through ``alert_requested`` to the GUI thread.
    """

    alert_requested = pyqtSignal(str)

    def __init__(self, client: RowClient, viewer: Viewer, job_id: str = None, parent=None):
        super().__init__(
            title="Candidates",
            description="Select a job to see its candidates",
            parent=parent,
        )
        self.alert_requested.connect(self._show_alert)
        self.roster = HiringManagerRoster(client, viewer, self.alert_requested.emit)
        self.job_id = job_id

        self._create_toolbar()

    def _create_toolbar(self):
        self.job_input = QLineEdit(self.job_id or "")
        self.job_input.setPlaceholderText("Job ID")
        self.job_input.setMinimumWidth(240)
        self.job_input.setStyleSheet(f"""
            QLineEdit {{
                background-color: {COLORS['surface']};
                border: 1px solid {COLORS['border']};
                border-radius: 6px;
                padding: 8px;
            }}
        """)
        self.job_input.returnPressed.connect(self._open_job)
        self.header_actions.addWidget(self.job_input)

        load_btn = SecondaryButton("Load")
        load_btn.clicked.connect(self._open_job)
        self.header_actions.addWidget(load_btn)

    def _open_job(self):
        job_id = self.job_input.text().strip()
        if job_id:
            self.job_id = job_id
            self.refresh()

    def _show_alert(self, message: str):
        QMessageBox.information(self, APP_DISPLAY_NAME, message)

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def refresh(self):
        """Reload the job and its candidates in the background."""
        if not self.job_id:
            self.show_message("Enter a job ID to see its candidates.")
            return
        self.show_message("Loading...")
        self.run_async(lambda: self.roster.load(self.job_id), self._on_loaded)

    def _on_loaded(self, _result=None):
        self._render()

    def _render(self):
        self.clear_content()
        if not self.roster.job_found:
            self.set_title("Candidates")
            self.set_description("")
            self.show_message("Job not found")
            return

        self.set_title(f"Candidates for {self.roster.job.title}")
        self.set_description(self.roster.count_label)

        if not self.roster.candidates:
            empty = InfoCard(
                title="No candidates yet",
                description="Candidates will appear here once the recruiter adds them to this requisition.",
            )
            self.add_widget(empty)
            return

        for candidate in self.roster.candidates:
            self.add_widget(self._create_candidate_card(candidate))
        self.add_stretch()

    # -------------------------------------------------------------------------
    # Candidate cards
    # -------------------------------------------------------------------------

    def _create_candidate_card(self, candidate: CandidateWithApplication) -> Card:
        card = Card()

        header = QHBoxLayout()
        name = QLabel(candidate.full_name)
        name_font = QFont("Segoe UI", 14)
        name_font.setBold(True)
        name.setFont(name_font)
        name.setStyleSheet(f"color: {COLORS['text_primary']};")
        header.addWidget(name)
        header.addWidget(Badge(candidate.application.stage, badge_colors(STAGE_COLORS, candidate.application.stage)))
        header.addStretch()
        if candidate.resume_url:
            resume = QLabel(f'<a href="{candidate.resume_url}">View Resume</a>')
            resume.setOpenExternalLinks(True)
            header.addWidget(resume)
        card.layout.addLayout(header)

        details = []
        details.append(candidate.email)
        if candidate.phone:
            details.append(candidate.phone)
        if candidate.current_company:
            details.append(candidate.headline)
        if candidate.years_of_experience:
            details.append(f"{candidate.years_of_experience:g} years experience")
        details_label = QLabel("   |   ".join(details))
        details_label.setStyleSheet(f"color: {COLORS['text_secondary']}; font-size: 13px;")
        details_label.setWordWrap(True)
        card.layout.addWidget(details_label)

        if candidate.skills:
            card.layout.addWidget(self._create_skill_chips(candidate.skills))

        if candidate.has_interview_rounds:
            card.layout.addWidget(self._create_rounds_section(candidate.interview_rounds))

        actions = QHBoxLayout()
        schedule_btn = PrimaryButton(schedule_button_label(candidate))
        schedule_btn.clicked.connect(lambda _, c=candidate: self._open_rounds_dialog(c))
        actions.addWidget(schedule_btn)
        actions.addStretch()
        card.layout.addLayout(actions)
        return card

    def _create_skill_chips(self, skills: list[str]) -> QWidget:
        chips = QWidget()
        layout = QHBoxLayout(chips)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)
        for skill in skills:
            chip = QLabel(skill)
            chip.setStyleSheet(f"""
                background-color: #f1f5f9;
                color: #334155;
                padding: 3px 8px;
                border-radius: 4px;
                font-size: 11px;
            """)
            layout.addWidget(chip)
        layout.addStretch()
        return chips

    def _create_rounds_section(self, rounds: list[InterviewRound]) -> QWidget:
        section = QWidget()
        layout = QVBoxLayout(section)
        layout.setContentsMargins(0, 8, 0, 0)
        layout.setSpacing(6)

        title = QLabel("Interview Rounds")
        title.setStyleSheet(f"color: {COLORS['text_primary']}; font-weight: 500;")
        layout.addWidget(title)

        for round_ in rounds:
            row = QHBoxLayout()
            text = round_.round_name
            if round_.scheduled_at:
                text += f"  -  {round_.scheduled_at.astimezone():%b %d, %Y %I:%M %p}"
            label = QLabel(text)
            label.setStyleSheet(f"color: {COLORS['text_secondary']}; font-size: 13px;")
            row.addWidget(label)
            row.addStretch()
            row.addWidget(Badge(round_.status, badge_colors(ROUND_STATUS_COLORS, round_.status)))
            layout.addLayout(row)
        return section

    # -------------------------------------------------------------------------
    # Scheduling
    # -------------------------------------------------------------------------

    def _open_rounds_dialog(self, candidate: CandidateWithApplication):
        self.roster.open_editor(candidate)
        dialog = InterviewRoundsDialog(self.roster, parent=self)
        if dialog.exec():
            # The roster reloaded itself after saving
            self._render()
