"""
Button widgets for HirePanel.

Provides styled button components with consistent appearance.
"""

from PyQt6.QtWidgets import QPushButton
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from hirepanel.utils.constants import COLORS


class PrimaryButton(QPushButton):
    """
    Primary action button with filled background.

    Used for main actions like "Save Interview Rounds" or "Schedule Interview".
    """

    def __init__(self, text: str, parent=None):
        super().__init__(text, parent)
        self._setup_style()

    def _setup_style(self):
        """Apply primary button styling."""
        self.setFont(QFont("Segoe UI", 10))
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumHeight(36)
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: {COLORS['primary']};
                color: white;
                border: none;
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: 500;
            }}
            QPushButton:hover {{
                background-color: {COLORS['primary_dark']};
            }}
            QPushButton:disabled {{
                background-color: #94a3b8;
                color: #e2e8f0;
            }}
        """)


class SecondaryButton(QPushButton):
    """
    Secondary action button with outline style.

    Used for secondary actions like "Cancel" or "Back".
    """

    def __init__(self, text: str, parent=None):
        super().__init__(text, parent)
        self._setup_style()

    def _setup_style(self):
        """Apply secondary button styling."""
        self.setFont(QFont("Segoe UI", 10))
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumHeight(36)
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: transparent;
                color: {COLORS['text_primary']};
                border: 1px solid {COLORS['border']};
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: 500;
            }}
            QPushButton:hover {{
                background-color: {COLORS['background']};
            }}
            QPushButton:disabled {{
                color: #94a3b8;
            }}
        """)


class IconButton(QPushButton):
    """
    Icon-only button for small inline actions.

    Displays a unicode glyph without text.
    """

    def __init__(self, icon_text: str = "", color: str = None, parent=None):
        super().__init__(icon_text, parent)
        self.color = color or COLORS['text_secondary']
        self._setup_style()

    def _setup_style(self):
        """Apply icon button styling."""
        self.setFixedSize(32, 32)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFont(QFont("Segoe UI", 11))
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: transparent;
                color: {self.color};
                border: none;
                border-radius: 6px;
            }}
            QPushButton:hover {{
                background-color: #f1f5f9;
            }}
        """)


class TextButton(QPushButton):
    """
    Text-only button without background.

    Used for links and subtle actions like "+ Add Panelist".
    """

    def __init__(self, text: str, parent=None):
        super().__init__(text, parent)
        self._setup_style()

    def _setup_style(self):
        """Apply text button styling."""
        self.setFont(QFont("Segoe UI", 10))
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: transparent;
                color: {COLORS['primary']};
                border: none;
                padding: 4px 8px;
            }}
            QPushButton:hover {{
                text-decoration: underline;
            }}
        """)


class TabButton(QPushButton):
    """Checkable pill used for filter tabs."""

    def __init__(self, text: str, parent=None):
        super().__init__(text, parent)
        self.setCheckable(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumHeight(34)
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: transparent;
                color: {COLORS['text_secondary']};
                border: none;
                border-radius: 6px;
                padding: 6px 16px;
                font-size: 13px;
                font-weight: 500;
            }}
            QPushButton:hover {{
                background-color: #f1f5f9;
            }}
            QPushButton:checked {{
                background-color: {COLORS['primary']};
                color: white;
            }}
        """)
