"""
Dialog windows for HirePanel.
"""

from hirepanel.ui.dialogs.interview_rounds import InterviewRoundsDialog

__all__ = [
    "InterviewRoundsDialog",
]
