"""
Screen logic for HirePanel.

Submodules:
- dashboard: Summary metrics and illustrative panels
- scheduling: Candidate roster and interview round editor
- interviews: Interview list and filters
"""
