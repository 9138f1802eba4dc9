"""Tests for structured logging helpers."""

import json
import logging

from mealplanner.logging_config import (
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    import_id_ctx,
    request_id_ctx,
)


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="mealplanner.ingredients.parser",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestLoggingContext:
    """Tests for LoggingContext."""

    def test_sets_and_resets(self):
        """Test context variables are restored on exit."""
        assert request_id_ctx.get() is None

        with LoggingContext(request_id="req-1", import_id="csv-42"):
            assert request_id_ctx.get() == "req-1"
            assert import_id_ctx.get() == "csv-42"

        assert request_id_ctx.get() is None
        assert import_id_ctx.get() is None

    def test_nested(self):
        """Test nested contexts restore the outer value."""
        with LoggingContext(request_id="outer"):
            with LoggingContext(request_id="inner"):
                assert request_id_ctx.get() == "inner"
            assert request_id_ctx.get() == "outer"


class TestFormatters:
    """Tests for the JSON and text formatters."""

    def test_json_includes_context(self):
        """Test JSON output carries the active context."""
        with LoggingContext(import_id="csv-42"):
            output = json.loads(StructuredJsonFormatter().format(_record("Parsed 3 lines")))

        assert output["message"] == "Parsed 3 lines"
        assert output["level"] == "INFO"
        assert output["import_id"] == "csv-42"
        assert "request_id" not in output

    def test_text_includes_context(self):
        """Test text output shows a short request id."""
        with LoggingContext(request_id="0123456789abcdef"):
            output = ContextualFormatter().format(_record("Parsed 3 lines"))

        assert "[req=01234567]" in output
        assert output.endswith("| Parsed 3 lines")
