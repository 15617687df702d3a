"""Main screen views for the application."""

from hirepanel.ui.views.base_view import BaseView
from hirepanel.ui.views.dashboard_view import DashboardView
from hirepanel.ui.views.candidates_view import CandidatesView
from hirepanel.ui.views.interviews_view import InterviewsView

__all__ = [
    "BaseView",
    "DashboardView",
    "CandidatesView",
    "InterviewsView",
]
