"""
Logging for HirePanel.

Loguru writes application messages to the console and a rotating log file.
Scheduling actions recorded through ``audit_log`` go to ``audit.log`` beside
the main file instead, with credentials and contact details redacted.
"""

import sys
from typing import Any

from loguru import logger

from hirepanel.utils.config import get_settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<level>{message}</level>"
)
AUDIT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {extra[audit_type]} | {message}"

REDACTED = "***REDACTED***"
REDACTED_KEYS = ("password", "secret", "token", "api_key", "credential", "email", "phone")

logger.configure(extra={"name": "hirepanel"})


def _is_audit(record: dict) -> bool:
    return "audit_type" in record["extra"]


def setup_logging() -> None:
    """
    Replace Loguru's default handler with the HirePanel sinks.

    The testing environment logs to the console only.
    """
    settings = get_settings()
    log_settings = settings.logging
    diagnose = settings.debug and settings.environment == "development"

    logger.remove()

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_settings.level,
            colorize=True,
            diagnose=diagnose,
        )

    if settings.environment != "testing":
        log_settings.file_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_settings.file_path,
            format=log_settings.format,
            level=log_settings.level,
            filter=lambda record: not _is_audit(record),
            rotation=log_settings.rotation,
            retention=log_settings.retention,
            diagnose=diagnose,
            enqueue=True,
        )
        logger.add(
            log_settings.file_path.parent / "audit.log",
            format=AUDIT_FORMAT,
            level="INFO",
            filter=_is_audit,
            rotation="1 month",
            enqueue=True,
        )

    logger.info(f"Logging initialized ({settings.environment}, level {log_settings.level})")


def get_logger(name: str) -> Any:
    """Logger bound to ``name``, usually a module's ``__name__``."""
    return logger.bind(name=name)


def _sanitize_for_logging(data: Any) -> Any:
    if isinstance(data, dict):
        return {
            key: REDACTED
            if any(part in str(key).lower() for part in REDACTED_KEYS)
            else _sanitize_for_logging(value)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [_sanitize_for_logging(item) for item in data]
    return data


def audit_log(action: str, details: dict[str, Any], audit_type: str = "ACTION") -> None:
    """
    Record a user action that changed hiring data.

    Args:
        action: Activity action name, e.g. ``interviews_scheduled``.
        details: Ids and counts describing the change.
        audit_type: ACTION for writes, ACCESS for reads worth keeping.
    """
    logger.bind(audit_type=audit_type).info(f"{action} | {_sanitize_for_logging(details)}")


class LoggerMixin:
    """Gives a class a ``logger`` bound to its class name."""

    @property
    def logger(self) -> Any:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger


log = logger
