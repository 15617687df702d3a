"""
Card widgets for HirePanel.

Provides reusable card components for displaying statistics, information
and grouped content.
"""

from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QFrame,
    QGraphicsDropShadowEffect,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QColor

from hirepanel.utils.constants import COLORS


class Card(QFrame):
    """
    Base card widget with shadow and rounded corners.

    A container for grouping related content with a clean, elevated
    appearance.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        """Set up the card UI."""
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setStyleSheet(f"""
            Card {{
                background-color: {COLORS['surface']};
                border: 1px solid {COLORS['border']};
                border-radius: 8px;
            }}
        """)

        # Add subtle shadow
        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(10)
        shadow.setXOffset(0)
        shadow.setYOffset(2)
        shadow.setColor(QColor(0, 0, 0, 25))
        self.setGraphicsEffect(shadow)

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(16, 16, 16, 16)
        self.layout.setSpacing(12)


class StatCard(Card):
    """
    Statistics card for displaying a single metric.

    Shows a label, a value, an optional caption and an accent marker.
    """

    def __init__(
        self,
        title: str,
        value: str,
        subtitle: str = "",
        color: str = None,
        parent=None,
    ):
        """
        Initialize the stat card.

        Args:
            title: Card label.
            value: Main value to display.
            subtitle: Optional caption under the value.
            color: Optional accent color.
            parent: Parent widget.
        """
        super().__init__(parent)
        self.title = title
        self.value = value
        self.subtitle = subtitle
        self.accent_color = color or COLORS['primary']

        self._setup_content()

    def _setup_content(self):
        """Set up the card content."""
        header = QHBoxLayout()

        self.title_label = QLabel(self.title)
        self.title_label.setStyleSheet(f"""
            color: {COLORS['text_secondary']};
            font-size: 12px;
            font-weight: 500;
        """)
        header.addWidget(self.title_label)
        header.addStretch()

        marker = QLabel("●")
        marker.setStyleSheet(f"color: {self.accent_color}; font-size: 14px;")
        header.addWidget(marker)
        self.layout.addLayout(header)

        self.value_label = QLabel(self.value)
        value_font = QFont("Segoe UI", 28)
        value_font.setBold(True)
        self.value_label.setFont(value_font)
        self.value_label.setStyleSheet(f"color: {COLORS['text_primary']};")
        self.layout.addWidget(self.value_label)

        self.subtitle_label = QLabel(self.subtitle)
        self.subtitle_label.setStyleSheet(f"color: {COLORS['text_muted']}; font-size: 12px;")
        self.subtitle_label.setVisible(bool(self.subtitle))
        self.layout.addWidget(self.subtitle_label)

        self.layout.addStretch()

    def set_value(self, value: str):
        """Update the displayed value."""
        self.value = value
        self.value_label.setText(value)

    def set_subtitle(self, subtitle: str):
        """Update the caption text."""
        self.subtitle = subtitle
        self.subtitle_label.setText(subtitle)
        self.subtitle_label.setVisible(bool(subtitle))


class InfoCard(Card):
    """
    Information card for displaying detailed content.

    Shows a title, description, and a content area for extra widgets.
    """

    def __init__(self, title: str, description: str = "", parent=None):
        super().__init__(parent)
        self.title = title
        self.description = description

        self._setup_content()

    def _setup_content(self):
        """Set up the card content."""
        if self.title:
            self.title_label = QLabel(self.title)
            title_font = QFont("Segoe UI", 14)
            title_font.setBold(True)
            self.title_label.setFont(title_font)
            self.title_label.setStyleSheet(f"color: {COLORS['text_primary']};")
            self.layout.addWidget(self.title_label)

        if self.description:
            self.description_label = QLabel(self.description)
            self.description_label.setWordWrap(True)
            self.description_label.setStyleSheet(f"""
                color: {COLORS['text_secondary']};
                font-size: 13px;
            """)
            self.layout.addWidget(self.description_label)

        # Content area for additional widgets
        self.content_area = QVBoxLayout()
        self.content_area.setSpacing(8)
        self.layout.addLayout(self.content_area)

    def add_content(self, widget: QWidget):
        """Add a widget to the card content area."""
        self.content_area.addWidget(widget)


class Badge(QLabel):
    """Rounded status label drawn with a (background, foreground) pair."""

    def __init__(self, text: str, colors: tuple[str, str], parent=None):
        super().__init__(text, parent)
        background, foreground = colors
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setStyleSheet(f"""
            background-color: {background};
            color: {foreground};
            border-radius: 10px;
            padding: 3px 10px;
            font-size: 12px;
            font-weight: 500;
        """)


class ProgressBar(QFrame):
    """Thin horizontal bar filled to ``fraction`` of its width."""

    def __init__(self, fraction: float, color: str, parent=None):
        super().__init__(parent)
        self.fraction = max(0.0, min(fraction, 1.0))
        self.setFixedHeight(8)
        self.setStyleSheet("background-color: #f1f5f9; border-radius: 4px;")

        self.fill = QFrame(self)
        self.fill.setStyleSheet(f"background-color: {color}; border-radius: 4px;")

    def resizeEvent(self, event):
        """Keep the fill proportional to the current width."""
        super().resizeEvent(event)
        self.fill.setGeometry(0, 0, int(self.width() * self.fraction), 8)
