"""
Interviews view for HirePanel.

Read-only list of interviews with upcoming, past and all filters.
"""

from PyQt6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QWidget,
)
from PyQt6.QtGui import QFont

from hirepanel.core.interviews import (
    InterviewBoard,
    empty_state_message,
    format_date_time,
    location_display,
    show_empty_state_schedule_button,
)
from hirepanel.data.client import RowClient
from hirepanel.data.models import Interview, Viewer
from hirepanel.utils.constants import (
    COLORS,
    INTERVIEW_STATUS_COLORS,
    InterviewFilter,
    badge_colors,
)
from hirepanel.ui.views.base_view import BaseView
from hirepanel.ui.widgets import Badge, Card, InfoCard, PrimaryButton, TabButton, TextButton

FILTER_TABS = (
    (InterviewFilter.UPCOMING, "Upcoming"),
    (InterviewFilter.PAST, "Past"),
    (InterviewFilter.ALL, "All"),
)


class InterviewsView(BaseView):
    """
    Interview list.

    The "Schedule Interview" buttons are shown to scheduling roles but do
    not open anything yet.
    """

    def __init__(self, client: RowClient, viewer: Viewer, parent=None):
        super().__init__(
            title="Interviews",
            description="Manage interview schedules and feedback",
            parent=parent,
        )
        self.board = InterviewBoard(client, viewer)
        self._create_toolbar()

    def _create_toolbar(self):
        if self.board.can_schedule:
            self.schedule_btn = PrimaryButton("+ Schedule Interview")
            self.header_actions.addWidget(self.schedule_btn)

        tabs = QWidget()
        tabs_layout = QHBoxLayout(tabs)
        tabs_layout.setContentsMargins(0, 0, 0, 0)
        tabs_layout.setSpacing(8)
        self.tab_buttons: dict[InterviewFilter, TabButton] = {}
        for mode, label in FILTER_TABS:
            button = TabButton(label)
            button.setChecked(mode == self.board.filter)
            button.clicked.connect(lambda _, m=mode: self._set_filter(m))
            self.tab_buttons[mode] = button
            tabs_layout.addWidget(button)
        tabs_layout.addStretch()
        self.main_layout.insertWidget(1, tabs)

    def _set_filter(self, mode: InterviewFilter):
        self.board.set_filter(mode)
        for tab_mode, button in self.tab_buttons.items():
            button.setChecked(tab_mode == mode)
        self._render()

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def refresh(self):
        """Reload every interview in the background."""
        self.show_message("Loading...")
        self.run_async(self.board.load, self._on_loaded)

    def _on_loaded(self, _interviews=None):
        self._render()

    def _render(self):
        self.clear_content()
        interviews = self.board.visible()

        if not interviews:
            self.add_widget(self._create_empty_state())
            return

        grid = QGridLayout()
        grid.setSpacing(16)
        for index, interview in enumerate(interviews):
            grid.addWidget(self._create_interview_card(interview), index // 2, index % 2)
        self.add_layout(grid)
        self.add_stretch()

    def _create_empty_state(self) -> InfoCard:
        card = InfoCard(
            title="No interviews found",
            description=empty_state_message(self.board.filter),
        )
        if show_empty_state_schedule_button(self.board.viewer, self.board.filter):
            card.add_content(PrimaryButton("+ Schedule Interview"))
        return card

    def _create_interview_card(self, interview: Interview) -> Card:
        card = Card()

        header = QHBoxLayout()
        title = QLabel(interview.title)
        title_font = QFont("Segoe UI", 13)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setStyleSheet(f"color: {COLORS['text_primary']};")
        header.addWidget(title)
        header.addStretch()
        header.addWidget(Badge(interview.status, badge_colors(INTERVIEW_STATUS_COLORS, interview.status)))
        card.layout.addLayout(header)

        for text, color in (
            (interview.candidate_name, COLORS['text_secondary']),
            (interview.job_title, COLORS['text_muted']),
        ):
            label = QLabel(text)
            label.setStyleSheet(f"color: {color}; font-size: 13px;")
            card.layout.addWidget(label)

        date, time = format_date_time(interview.scheduled_at)
        when = QLabel(f"{date}   {time} ({interview.duration_minutes} min)")
        when.setStyleSheet(f"color: {COLORS['text_secondary']}; font-size: 13px;")
        card.layout.addWidget(when)

        where = location_display(interview)
        if where is not None:
            kind, value = where
            if kind == "link":
                place = QLabel(f'<a href="{value}">Join Meeting</a>')
                place.setOpenExternalLinks(True)
            else:
                place = QLabel(value)
                place.setStyleSheet(f"color: {COLORS['text_secondary']}; font-size: 13px;")
            card.layout.addWidget(place)

        footer = QHBoxLayout()
        kind_label = QLabel((interview.interview_type or "").capitalize())
        kind_label.setStyleSheet(f"color: {COLORS['text_muted']}; font-size: 12px;")
        footer.addWidget(kind_label)
        footer.addStretch()
        footer.addWidget(TextButton("View Details"))
        card.layout.addLayout(footer)
        return card
