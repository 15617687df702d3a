"""
Dashboard view for HirePanel.

Provides an overview of hiring metrics plus the recent activity and pipeline
panels.
"""

from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QGridLayout,
)

from hirepanel.core.dashboard import (
    PIPELINE_OVERVIEW,
    RECENT_ACTIVITY_PLACEHOLDERS,
    DashboardModel,
    DashboardStats,
    build_stat_cards,
    pipeline_bar_fraction,
)
from hirepanel.data.client import RowClient
from hirepanel.utils.constants import COLORS
from hirepanel.ui.views.base_view import BaseView
from hirepanel.ui.widgets import InfoCard, ProgressBar, StatCard


class DashboardView(BaseView):
    """
    Main dashboard view.

    Displays:
    - Six stat cards
    - Recent activity (placeholder rows)
    - Pipeline overview (illustrative counts)
    """

    CARD_COLUMNS = 3

    def __init__(self, client: RowClient, parent=None):
        super().__init__(
            title="Overview",
            description="Your hiring metrics at a glance",
            parent=parent,
        )
        self.model = DashboardModel(client)
        self._setup_dashboard()

    def _setup_dashboard(self):
        """Set up the dashboard content."""
        # Statistics grid
        self.stats_grid = QGridLayout()
        self.stats_grid.setSpacing(16)
        self.stat_cards: dict[str, StatCard] = {}
        for index, card in enumerate(build_stat_cards(DashboardStats())):
            widget = StatCard(title=card.name, value="--", color=card.accent)
            self.stat_cards[card.name] = widget
            self.stats_grid.addWidget(widget, index // self.CARD_COLUMNS, index % self.CARD_COLUMNS)
        self.add_layout(self.stats_grid)

        panels = QHBoxLayout()
        panels.setSpacing(16)
        panels.addWidget(self._create_recent_activity(), stretch=1)
        panels.addWidget(self._create_pipeline_overview(), stretch=1)
        self.add_layout(panels)
        self.add_stretch()

    def _create_recent_activity(self) -> InfoCard:
        card = InfoCard(title="Recent Activity")
        for placeholder in RECENT_ACTIVITY_PLACEHOLDERS:
            card.add_content(self._create_activity_item(placeholder.message, placeholder.when))
        return card

    def _create_activity_item(self, message: str, when: str) -> QWidget:
        """Create a single activity row."""
        item = QWidget()
        layout = QHBoxLayout(item)
        layout.setContentsMargins(0, 6, 0, 6)
        layout.setSpacing(12)

        dot = QLabel("●")
        dot.setStyleSheet(f"color: {COLORS['text_muted']}; font-size: 8px;")
        dot.setFixedWidth(12)
        layout.addWidget(dot)

        text = QVBoxLayout()
        text.setSpacing(2)
        message_label = QLabel(message)
        message_label.setStyleSheet(f"color: {COLORS['text_secondary']}; font-size: 13px;")
        text.addWidget(message_label)
        when_label = QLabel(when)
        when_label.setStyleSheet(f"color: {COLORS['text_muted']}; font-size: 11px;")
        text.addWidget(when_label)

        layout.addLayout(text)
        layout.addStretch()
        return item

    def _create_pipeline_overview(self) -> InfoCard:
        card = InfoCard(title="Pipeline Overview")
        for item in PIPELINE_OVERVIEW:
            row = QWidget()
            row_layout = QVBoxLayout(row)
            row_layout.setContentsMargins(0, 0, 0, 0)
            row_layout.setSpacing(4)

            labels = QHBoxLayout()
            stage_label = QLabel(item.stage)
            stage_label.setStyleSheet(f"color: {COLORS['text_primary']}; font-size: 13px;")
            labels.addWidget(stage_label)
            labels.addStretch()
            count_label = QLabel(str(item.count))
            count_label.setStyleSheet(f"color: {COLORS['text_primary']}; font-weight: 600;")
            labels.addWidget(count_label)
            row_layout.addLayout(labels)

            row_layout.addWidget(ProgressBar(pipeline_bar_fraction(item), item.color))
            card.add_content(row)
        return card

    def refresh(self):
        """Reload the statistics in the background."""
        for widget in self.stat_cards.values():
            widget.set_value("--")
        self.run_async(self.model.load, self._on_stats_loaded)

    def _on_stats_loaded(self, stats: DashboardStats):
        for card in build_stat_cards(stats):
            widget = self.stat_cards[card.name]
            widget.set_value(card.value)
            widget.set_subtitle(card.caption or "")
