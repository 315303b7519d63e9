"""
Unit tests for logging setup.
"""
import structlog

from qbreports.logging_config import (
    MAX_VALUE_LENGTH,
    configure_logging,
    truncate_long_values_processor,
)


class TestTruncateProcessor:
    """Tests for truncate_long_values_processor."""

    def test_long_values_truncated(self):
        event = {"event": "Rows extracted", "header": "x" * (MAX_VALUE_LENGTH + 50)}
        result = truncate_long_values_processor(None, "info", event)
        assert len(result["header"]) == MAX_VALUE_LENGTH + 3
        assert result["header"].endswith("...")

    def test_event_and_short_values_untouched(self):
        event = {"event": "e" * (MAX_VALUE_LENGTH + 1), "rows": 12, "mime_type": "text/csv"}
        result = truncate_long_values_processor(None, "info", dict(event))
        assert result == event


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_structlog(self):
        configure_logging(level="DEBUG", json_logs=False)
        assert structlog.is_configured()
        structlog.reset_defaults()
