"""
Utility modules for HirePanel.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Status vocabularies, tables and UI palette
- dates: Reading stored timestamps as aware datetimes
"""

from hirepanel.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    LOGS_DIR,
)
from hirepanel.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    DEFAULT_INTERVIEW_ROUNDS,
    CandidateStage,
    InterviewFilter,
    InterviewStatus,
    JobStatus,
    OfferStatus,
    RoundStatus,
    Table,
    UserRole,
)
from hirepanel.utils.dates import ensure_utc, parse_timestamp
from hirepanel.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
    LoggerMixin,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "LOGS_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "DEFAULT_INTERVIEW_ROUNDS",
    "CandidateStage",
    "InterviewFilter",
    "InterviewStatus",
    "JobStatus",
    "OfferStatus",
    "RoundStatus",
    "Table",
    "UserRole",
    # Dates
    "ensure_utc",
    "parse_timestamp",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "LoggerMixin",
    "log",
]
