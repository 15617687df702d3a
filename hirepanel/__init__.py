"""
HirePanel - hiring dashboards, candidate rosters and interview scheduling.

Presentation layer of an applicant-tracking system backed by a hosted
row store.
"""

__app_name__ = "HirePanel"
__version__ = "0.1.0"
