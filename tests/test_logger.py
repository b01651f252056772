"""
Tests for logging setup and helpers.
"""

import logging

import pytest  # type: ignore
from src.lagona_location.core import (
    HubLoggerAdapter,
    LoggerContext,
    resolve_log_file,
    setup_logger,
)


class TestLogFileResolution:
    """Test cases for resolve_log_file."""

    def test_env_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_FILE", "/tmp/env.log")
        assert resolve_log_file("logs/configured.log") == "/tmp/env.log"

    def test_configured(self, monkeypatch):
        monkeypatch.delenv("LOG_FILE", raising=False)
        assert resolve_log_file("logs/configured.log") == "logs/configured.log"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("LOG_FILE", raising=False)
        assert resolve_log_file() == "logs/lagona_location.log"


class TestSetupLogger:
    """Test cases for setup_logger."""

    def test_handlers(self, tmp_path):
        log_file = tmp_path / "nested" / "audit.log"
        logger = setup_logger("lagona_location.test_handlers", str(log_file), "warning")

        console, file_handler = logger.handlers
        assert console.level == logging.WARNING
        assert file_handler.level == logging.DEBUG
        assert not logger.propagate

        logger.debug("hub without bounds")
        file_handler.flush()
        assert "hub without bounds" in log_file.read_text(encoding="utf-8")

    def test_no_duplicate_handlers(self, tmp_path):
        log_file = str(tmp_path / "audit.log")
        setup_logger("lagona_location.test_duplicates", log_file)
        logger = setup_logger("lagona_location.test_duplicates", log_file)

        assert len(logger.handlers) == 2


class TestHubLoggerAdapter:
    """Test cases for HubLoggerAdapter."""

    def test_prefix(self, caplog):
        logger = logging.getLogger("hub_audit_test.adapter")
        log = HubLoggerAdapter(logger, "hub-1", "Cebu City Hub")

        with caplog.at_level(logging.WARNING, logger="hub_audit_test.adapter"):
            log.warning("No location data")

        assert caplog.records[0].getMessage() == "[Cebu City Hub (hub-1)] No location data"

    def test_unnamed_hub(self):
        log = HubLoggerAdapter(logging.getLogger("hub_audit_test.adapter"), "hub-9")
        msg, _ = log.process("x", {})
        assert msg == "[unnamed hub (hub-9)] x"


class TestLoggerContext:
    """Test cases for LoggerContext."""

    def test_reports_count(self, caplog):
        logger = logging.getLogger("hub_audit_test.context")

        with caplog.at_level(logging.INFO, logger="hub_audit_test.context"):
            with LoggerContext(logger, "business hub fetch") as fetch:
                fetch.count = 3

        assert caplog.records[-1].getMessage().startswith("Completed business hub fetch (3 items)")

    def test_exceptions_propagate(self):
        logger = logging.getLogger("hub_audit_test.context")

        with pytest.raises(RuntimeError):
            with LoggerContext(logger, "business hub fetch"):
                raise RuntimeError("store down")
