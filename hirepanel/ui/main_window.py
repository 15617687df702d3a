"""
Main Window for HirePanel

This module contains the main application window and entry point for the
PyQt6 graphical user interface.
"""

import sys
from typing import Optional

from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QStackedWidget,
    QFrame,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from hirepanel.data.client import RowClient
from hirepanel.data.models import Viewer
from hirepanel.utils.config import get_settings
from hirepanel.utils.constants import APP_DISPLAY_NAME, VERSION
from hirepanel.utils.logger import get_logger

from hirepanel.ui.views.dashboard_view import DashboardView
from hirepanel.ui.views.candidates_view import CandidatesView
from hirepanel.ui.views.interviews_view import InterviewsView

logger = get_logger(__name__)


class SidebarButton(QPushButton):
    """Custom styled button for the sidebar navigation."""

    def __init__(self, text: str, parent=None):
        super().__init__(text, parent)
        self.setCheckable(True)
        self.setMinimumHeight(45)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setStyleSheet(
            """
            QPushButton {
                background-color: transparent;
                border: none;
                border-radius: 8px;
                padding: 10px 15px;
                text-align: left;
                font-size: 14px;
                color: #64748b;
            }
            QPushButton:hover {
                background-color: #f1f5f9;
                color: #1e293b;
            }
            QPushButton:checked {
                background-color: #0f172a;
                color: #ffffff;
                font-weight: bold;
            }
            """
        )


class Sidebar(QFrame):
    """Navigation sidebar for the application."""

    NAV_ITEMS = [
        ("Dashboard", "dashboard"),
        ("Candidates", "candidates"),
        ("Interviews", "interviews"),
    ]

    def __init__(self, viewer: Viewer, parent=None):
        super().__init__(parent)
        self.setFixedWidth(220)
        self.setStyleSheet(
            """
            QFrame {
                background-color: #ffffff;
                border-right: 1px solid #e2e8f0;
            }
            """
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 20, 10, 20)
        layout.setSpacing(5)

        title_label = QLabel(APP_DISPLAY_NAME)
        title_label.setFont(QFont("Segoe UI", 12, QFont.Weight.Bold))
        title_label.setStyleSheet("color: #1e293b; padding: 10px;")
        title_label.setWordWrap(True)
        layout.addWidget(title_label)

        layout.addSpacing(20)

        self.nav_buttons = []
        for text, name in self.NAV_ITEMS:
            btn = SidebarButton(text)
            btn.setObjectName(name)
            self.nav_buttons.append(btn)
            layout.addWidget(btn)

        if self.nav_buttons:
            self.nav_buttons[0].setChecked(True)

        layout.addStretch()

        role_label = QLabel(viewer.role.replace("_", " ").title() if viewer.role else "Guest")
        role_label.setStyleSheet("color: #64748b; font-size: 12px; padding: 0 10px;")
        layout.addWidget(role_label)

        version_label = QLabel(f"v{VERSION}")
        version_label.setStyleSheet("color: #94a3b8; font-size: 11px; padding: 10px;")
        layout.addWidget(version_label)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, client: RowClient, viewer: Viewer, job_id: Optional[str] = None):
        super().__init__()
        self.settings = get_settings()
        self.client = client
        self.viewer = viewer
        self.job_id = job_id
        self.setup_ui()

    def setup_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(APP_DISPLAY_NAME)
        self.setMinimumSize(1100, 700)
        self.resize(
            self.settings.ui.window_width,
            self.settings.ui.window_height,
        )

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QHBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.sidebar = Sidebar(self.viewer)
        main_layout.addWidget(self.sidebar)

        content_container = QWidget()
        content_container.setStyleSheet("background-color: #f8fafc;")
        content_layout = QVBoxLayout(content_container)
        content_layout.setContentsMargins(0, 0, 0, 0)

        # Stacked widget for different views
        self.content_stack = QStackedWidget()
        content_layout.addWidget(self.content_stack)

        # Per-view refresh tracking: True means the view needs a refresh
        self._view_needs_refresh: dict[int, bool] = {}

        self.dashboard_view = DashboardView(self.client)
        self.content_stack.addWidget(self.dashboard_view)

        self.candidates_view = CandidatesView(self.client, self.viewer, job_id=self.job_id)
        self.content_stack.addWidget(self.candidates_view)

        self.interviews_view = InterviewsView(self.client, self.viewer)
        self.content_stack.addWidget(self.interviews_view)

        for i in range(self.content_stack.count()):
            self._view_needs_refresh[i] = True
        self._view_needs_refresh[0] = False  # Dashboard refreshed at startup

        main_layout.addWidget(content_container)

        for i, btn in enumerate(self.sidebar.nav_buttons):
            btn.clicked.connect(lambda checked, idx=i: self.switch_view(idx))

        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #f8fafc;
            }
            """
        )

        self.dashboard_view.refresh()
        if self.job_id:
            self.switch_view(1)

    def switch_view(self, index: int):
        """Switch to a different view."""
        self.content_stack.setCurrentIndex(index)

        for i, btn in enumerate(self.sidebar.nav_buttons):
            btn.setChecked(i == index)

        # Only refresh if the view is marked as needing it (first visit or dirty)
        if self._view_needs_refresh.get(index, False):
            current_widget = self.content_stack.widget(index)
            if hasattr(current_widget, "refresh"):
                current_widget.refresh()
            self._view_needs_refresh[index] = False


def viewer_from_settings() -> Viewer:
    """Build the viewer from the session settings."""
    session = get_settings().session
    return Viewer(id=session.viewer_id, role=session.viewer_role)


def run_application(
    viewer: Optional[Viewer] = None,
    job_id: Optional[str] = None,
    client: Optional[RowClient] = None,
) -> int:
    """
    Initialize and run the PyQt6 application.

    Returns:
        Application exit code
    """
    from hirepanel.data.mongo import get_row_client

    viewer = viewer or viewer_from_settings()
    client = client or get_row_client()
    logger.info(f"Starting GUI as {viewer.role or 'guest'}")

    app = QApplication(sys.argv)
    app.setApplicationName(APP_DISPLAY_NAME)
    app.setApplicationVersion(VERSION)
    app.setFont(QFont("Segoe UI", 10))

    window = MainWindow(client, viewer, job_id=job_id)
    window.show()

    return app.exec()
