"""
PyQt6 user interface for HirePanel.

Submodules:
- views: Dashboard, candidate roster and interview screens
- dialogs: Interview rounds editor
- widgets: Reusable UI components
- workers: Background execution of backend calls
"""
