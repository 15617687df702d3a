"""
Reusable UI widgets for HirePanel.

This module provides styled, reusable widget components that maintain
consistent appearance across the application.
"""

from .cards import (
    Badge,
    Card,
    InfoCard,
    ProgressBar,
    StatCard,
)

from .buttons import (
    IconButton,
    PrimaryButton,
    SecondaryButton,
    TabButton,
    TextButton,
)

__all__ = [
    # Cards
    "Badge",
    "Card",
    "InfoCard",
    "ProgressBar",
    "StatCard",
    # Buttons
    "IconButton",
    "PrimaryButton",
    "SecondaryButton",
    "TabButton",
    "TextButton",
]
