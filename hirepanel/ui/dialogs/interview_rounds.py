"""
Interview rounds dialog.

Edits the rounds of one candidate through the roster's RoundEditor and
saves them in the background.
"""

from PyQt6.QtWidgets import (
    QDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from hirepanel.core.scheduling import HiringManagerRoster
from hirepanel.ui.widgets import IconButton, PrimaryButton, SecondaryButton, TextButton
from hirepanel.ui.workers import TaskRunner
from hirepanel.utils.constants import COLORS

SCHEDULE_PLACEHOLDER = "YYYY-MM-DD HH:MM"


class InterviewRoundsDialog(QDialog):
    """Modal editor for a candidate's interview rounds."""

    def __init__(self, roster: HiringManagerRoster, parent=None):
        """
        Initialize the dialog.

        Args:
            roster: Roster whose editor is open.
            parent: Parent widget.
        """
        super().__init__(parent)
        self.roster = roster
        self.editor = roster.editor
        self.tasks = TaskRunner(self)

        self._setup_ui()
        self._render_rounds()

    def _setup_ui(self):
        """Set up the dialog UI."""
        self.setWindowTitle(f"Interview Rounds - {self.editor.candidate.full_name}")
        self.setMinimumWidth(760)
        self.setMinimumHeight(560)
        self.setStyleSheet(f"""
            QDialog {{
                background-color: {COLORS['surface']};
            }}
            QLabel {{
                color: {COLORS['text_primary']};
                font-size: 13px;
            }}
            QLineEdit {{
                background-color: {COLORS['surface']};
                border: 1px solid #cbd5e1;
                border-radius: 6px;
                padding: 8px;
                font-size: 13px;
            }}
            QLineEdit:focus {{
                border-color: {COLORS['primary']};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setSpacing(16)
        layout.setContentsMargins(24, 24, 24, 24)

        title = QLabel(f"Interview Rounds - {self.editor.candidate.full_name}")
        title_font = QFont("Segoe UI", 16)
        title_font.setBold(True)
        title.setFont(title_font)
        layout.addWidget(title)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.rounds_widget = QWidget()
        self.rounds_layout = QVBoxLayout(self.rounds_widget)
        self.rounds_layout.setSpacing(16)
        self.rounds_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        scroll.setWidget(self.rounds_widget)
        layout.addWidget(scroll)

        footer = QHBoxLayout()
        footer.setSpacing(12)
        self.cancel_btn = SecondaryButton("Cancel")
        self.cancel_btn.clicked.connect(self.reject)
        footer.addWidget(self.cancel_btn)

        self.save_btn = PrimaryButton("Save Interview Rounds")
        self.save_btn.clicked.connect(self._save)
        footer.addWidget(self.save_btn)
        layout.addLayout(footer)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _render_rounds(self):
        """Rebuild the form from the editor state."""
        while self.rounds_layout.count():
            item = self.rounds_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        for round_index, round_ in enumerate(self.editor.rounds):
            self.rounds_layout.addWidget(self._create_round_frame(round_index, round_))

    def _create_round_frame(self, round_index: int, round_) -> QFrame:
        frame = QFrame()
        frame.setStyleSheet(f"QFrame#round {{ border: 1px solid {COLORS['border']}; border-radius: 8px; }}")
        frame.setObjectName("round")
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        fields = QGridLayout()
        fields.setHorizontalSpacing(16)
        fields.addWidget(QLabel("Round Name"), 0, 0)
        fields.addWidget(QLabel("Scheduled Date & Time"), 0, 1)

        name_input = QLineEdit(round_.round_name)
        name_input.textChanged.connect(
            lambda text, r=round_index: self.editor.update_round(r, "round_name", text)
        )
        fields.addWidget(name_input, 1, 0)

        schedule_input = QLineEdit(_schedule_text(round_.scheduled_at))
        schedule_input.setPlaceholderText(SCHEDULE_PLACEHOLDER)
        schedule_input.editingFinished.connect(
            lambda r=round_index, w=schedule_input: self._update_schedule(r, w)
        )
        fields.addWidget(schedule_input, 1, 1)
        layout.addLayout(fields)

        header = QHBoxLayout()
        header.addWidget(QLabel("Panelists"))
        header.addStretch()
        add_btn = TextButton("+ Add Panelist")
        add_btn.clicked.connect(lambda _, r=round_index: self._add_panelist(r))
        header.addWidget(add_btn)
        layout.addLayout(header)

        removable = self.editor.can_remove_panelist(round_index)
        for panelist_index, panelist in enumerate(round_.panelists):
            layout.addLayout(self._create_panelist_row(round_index, panelist_index, panelist, removable))

        return frame

    def _create_panelist_row(self, round_index: int, panelist_index: int, panelist, removable: bool) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(8)
        for field, placeholder in (
            ("panelist_name", "Panelist Name"),
            ("panelist_email", "Panelist Email"),
            ("panelist_role", "Role/Designation"),
        ):
            line = QLineEdit(getattr(panelist, field))
            line.setPlaceholderText(placeholder)
            line.textChanged.connect(
                lambda text, r=round_index, p=panelist_index, f=field: self.editor.update_panelist(r, p, f, text)
            )
            row.addWidget(line)

        if removable:
            remove_btn = IconButton("✕", color=COLORS['error'])
            remove_btn.setToolTip("Remove panelist")
            remove_btn.clicked.connect(
                lambda _, r=round_index, p=panelist_index: self._remove_panelist(r, p)
            )
            row.addWidget(remove_btn)
        return row

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def _update_schedule(self, round_index: int, line: QLineEdit):
        try:
            self.editor.update_round(round_index, "scheduled_at", line.text())
        except ValueError:
            QMessageBox.warning(
                self,
                "Invalid Date",
                f"Enter the date and time as {SCHEDULE_PLACEHOLDER}.",
            )
            line.setText(_schedule_text(self.editor.rounds[round_index].scheduled_at))

    def _add_panelist(self, round_index: int):
        self.editor.add_panelist(round_index)
        self._render_rounds()

    def _remove_panelist(self, round_index: int, panelist_index: int):
        if self.editor.remove_panelist(round_index, panelist_index):
            self._render_rounds()

    # -------------------------------------------------------------------------
    # Save
    # -------------------------------------------------------------------------

    def _set_submitting(self, submitting: bool):
        self.save_btn.setEnabled(not submitting)
        self.cancel_btn.setEnabled(not submitting)
        self.save_btn.setText("Saving..." if submitting else "Save Interview Rounds")

    def _save(self):
        self._set_submitting(True)
        self.tasks.start(self.roster.save_interview_rounds, self._on_saved, self._on_save_error)

    def _on_saved(self, saved: bool):
        self._set_submitting(False)
        if saved:
            self.accept()

    def _on_save_error(self, message: str):
        self._set_submitting(False)

    def reject(self):
        """Close without saving; unsaved edits are discarded."""
        if self.tasks.busy:
            return
        self.roster.close_editor()
        super().reject()


def _schedule_text(value) -> str:
    if value is None:
        return ""
    return value.astimezone().strftime("%Y-%m-%d %H:%M")
