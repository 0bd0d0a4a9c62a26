"""Unit tests for logging configuration."""

import logging

from authcore.infrastructure.config.logging import (
    CorrelationIdFilter,
    correlation_id_var,
    get_logging_config,
)


def make_record() -> logging.LogRecord:
    return logging.LogRecord("authcore.test", logging.INFO, __file__, 1, "hello", None, None)


class TestCorrelationIdFilter:
    """Test the correlation id filter."""

    def test_outside_request(self):
        record = make_record()
        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "no-request-id"

    def test_inside_request(self):
        token = correlation_id_var.set("req-123")
        try:
            record = make_record()
            CorrelationIdFilter().filter(record)
        finally:
            correlation_id_var.reset(token)

        assert record.correlation_id == "req-123"


class TestLoggingConfig:
    def test_console_format(self, settings):
        config = get_logging_config(settings)

        assert config["handlers"]["console"]["formatter"] == "detailed"
        assert "file" not in config["handlers"]

    def test_json_format(self, settings):
        config = get_logging_config(settings.model_copy(update={"log_format": "json"}))

        assert config["handlers"]["console"]["formatter"] == "json"
        assert config["formatters"]["json"]["()"] == "pythonjsonlogger.json.JsonFormatter"

    def test_file_handlers(self, settings, tmp_path):
        config = get_logging_config(
            settings.model_copy(
                update={"log_file_enabled": True, "log_file_path": str(tmp_path / "app.log")}
            )
        )

        assert config["handlers"]["file"]["filename"] == str(tmp_path / "app.log")
        assert config["handlers"]["error_file"]["filename"] == str(tmp_path / "error.log")
        assert "file" in config["loggers"]["authcore"]["handlers"]
