"""
Tests for hirepanel.utils.logger: redaction, audit entries and sink routing.
"""

import pytest
from loguru import logger

from hirepanel.utils import logger as logger_module
from hirepanel.utils.config import AppSettings, LoggingSettings
from hirepanel.utils.logger import (
    REDACTED,
    LoggerMixin,
    _sanitize_for_logging,
    audit_log,
    get_logger,
    setup_logging,
)


@pytest.fixture
def captured():
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


# ── _sanitize_for_logging() ─────────────────────────────────────────────────


class TestSanitize:
    def test_ids_and_counts_kept(self):
        details = {"application_id": "app-1", "rounds": 3}
        assert _sanitize_for_logging(details) == details

    def test_credentials_redacted(self):
        result = _sanitize_for_logging({"DB_PASSWORD": "hunter2", "access_token": "t"})
        assert result == {"DB_PASSWORD": REDACTED, "access_token": REDACTED}

    def test_contact_details_redacted_in_nested_lists(self):
        details = {"panelists": [{"panelist_name": "Linus", "panelist_email": "l@x.io"}]}
        assert _sanitize_for_logging(details) == {
            "panelists": [{"panelist_name": "Linus", "panelist_email": REDACTED}]
        }

    def test_scalars_unchanged(self):
        assert _sanitize_for_logging("plain") == "plain"


# ── audit_log() and bound loggers ───────────────────────────────────────────


class TestAuditLog:
    def test_entry_marked_and_redacted(self, captured):
        audit_log("interviews_scheduled", {"application_id": "app-1", "performed_by_email": "a@x.io"})
        message = captured[-1]
        assert message.record["extra"]["audit_type"] == "ACTION"
        assert message.startswith("interviews_scheduled | ")
        assert "app-1" in message
        assert "a@x.io" not in message

    def test_audit_type_override(self, captured):
        audit_log("roster_viewed", {"job_id": "job-1"}, audit_type="ACCESS")
        assert captured[-1].record["extra"]["audit_type"] == "ACCESS"

    def test_get_logger_binds_name(self, captured):
        get_logger("hirepanel.core.dashboard").info("loaded")
        assert captured[-1].record["extra"]["name"] == "hirepanel.core.dashboard"

    def test_mixin_uses_class_name(self, captured):
        class RosterStub(LoggerMixin):
            pass

        stub = RosterStub()
        stub.logger.warning("empty")
        assert captured[-1].record["extra"]["name"] == "RosterStub"
        assert stub.logger is stub.logger


# ── setup_logging() ─────────────────────────────────────────────────────────


class TestSetupLogging:
    @pytest.fixture
    def log_file(self, tmp_path, monkeypatch):
        path = tmp_path / "logs" / "hirepanel.log"
        settings = AppSettings(
            environment="production",
            logging=LoggingSettings(file_path=path, console_output=False),
        )
        monkeypatch.setattr(logger_module, "get_settings", lambda: settings)
        yield path
        logger.remove()

    def test_audit_entries_kept_out_of_main_file(self, log_file):
        setup_logging()
        get_logger("test").info("dashboard loaded")
        audit_log("interviews_scheduled", {"application_id": "app-1"})
        logger.complete()
        logger.remove()

        main_text = log_file.read_text()
        audit_text = (log_file.parent / "audit.log").read_text()
        assert "dashboard loaded" in main_text
        assert "interviews_scheduled" not in main_text
        assert "ACTION | interviews_scheduled" in audit_text
        assert "dashboard loaded" not in audit_text

    def test_testing_environment_writes_no_files(self, tmp_path, monkeypatch):
        path = tmp_path / "logs" / "hirepanel.log"
        settings = AppSettings(
            environment="testing",
            logging=LoggingSettings(file_path=path, console_output=False),
        )
        monkeypatch.setattr(logger_module, "get_settings", lambda: settings)
        setup_logging()
        audit_log("interviews_scheduled", {"application_id": "app-1"})
        logger.remove()
        assert not path.parent.exists()
