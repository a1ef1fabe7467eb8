"""
Tests for the structured logging setup.
"""
import io
import json
import logging

import pytest


class TestLogEntry:
    """Tests for LogEntry dataclass."""

    def test_to_json_includes_required_fields(self):
        """to_json includes timestamp, level, message."""
        from cc_license.infrastructure.logging.license_logger import LogEntry

        entry = LogEntry(timestamp="2024-01-01T12:00:00", level="INFO", message="Parsed")
        data = json.loads(entry.to_json())

        assert data == {"timestamp": "2024-01-01T12:00:00", "level": "INFO", "message": "Parsed"}

    def test_to_json_keeps_extra(self):
        from cc_license.infrastructure.logging.license_logger import LogEntry

        entry = LogEntry(timestamp="t", level="INFO", message="m", extra={"error_kind": "invalid_url"})
        assert json.loads(entry.to_json())["extra"] == {"error_kind": "invalid_url"}

    def test_to_human(self):
        from cc_license.infrastructure.logging.license_logger import LogEntry

        entry = LogEntry(timestamp="12:00:00", level="WARNING", message="Rejected", error="Invalid URL")
        assert entry.to_human() == "[12:00:00] [WARNING] Rejected ERROR: Invalid URL"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_human_output(self):
        from cc_license.infrastructure.logging.license_logger import configure_logging

        stream = io.StringIO()
        logger = configure_logging(level="INFO", stream=stream)
        logger.info("hello")

        assert "[INFO] hello" in stream.getvalue()

    def test_json_output(self):
        from cc_license.infrastructure.logging.license_logger import configure_logging

        stream = io.StringIO()
        logger = configure_logging(level="INFO", json_output=True, stream=stream)
        logger.info("hello", extra={"url": "https://x"})

        data = json.loads(stream.getvalue())
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["logger"] == "cc_license"
        assert data["extra"] == {"url": "https://x"}

    def test_level_filters_records(self):
        from cc_license.infrastructure.logging.license_logger import configure_logging

        stream = io.StringIO()
        logger = configure_logging(level="WARNING", stream=stream)
        logger.info("hidden")

        assert stream.getvalue() == ""

    def test_child_loggers_use_handler(self):
        """Module loggers under cc_license reach the configured handler."""
        from cc_license.infrastructure.logging.license_logger import configure_logging

        stream = io.StringIO()
        configure_logging(level="DEBUG", stream=stream)
        logging.getLogger("cc_license.infrastructure.adapters").debug("child record")

        assert "child record" in stream.getvalue()

    def test_reconfigure_replaces_handlers(self):
        from cc_license.infrastructure.logging.license_logger import configure_logging

        configure_logging(stream=io.StringIO())
        logger = configure_logging(stream=io.StringIO())
        assert len(logger.handlers) == 1

    def test_log_file_gets_json(self, tmp_path):
        """The file handler records everything as JSON."""
        from cc_license.infrastructure.logging.license_logger import configure_logging

        log_file = tmp_path / "logs" / "cc.log"
        logger = configure_logging(level="ERROR", log_file=log_file, stream=io.StringIO())
        logger.debug("to file only")
        for handler in logger.handlers:
            handler.flush()

        data = json.loads(log_file.read_text().strip())
        assert data["message"] == "to file only"

    def test_error_includes_exception(self):
        from cc_license.infrastructure.logging.license_logger import configure_logging

        stream = io.StringIO()
        logger = configure_logging(level="ERROR", json_output=True, stream=stream)
        try:
            raise ValueError("boom")
        except ValueError:
            logger.exception("failed")

        data = json.loads(stream.getvalue())
        assert data["error"] == "boom"
        assert data["error_type"] == "ValueError"

    def test_rejects_unknown_level(self):
        from cc_license.infrastructure.logging.license_logger import configure_logging

        with pytest.raises(ValueError):
            configure_logging(level="LOUD")
