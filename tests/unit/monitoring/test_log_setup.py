"""
Unit tests for logging setup and context injection.
"""

import json
import logging

from src.monitoring.logging import (
    ROOT_LOGGER_NAME,
    JsonFormatter,
    LoggingOptions,
    TextFormatter,
    setup_logging,
    with_context,
)


def _record(msg="hello %s", args=("world",), **extra):
    record = logging.LogRecord(
        name="src.normalization.venues",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


class TestFormatters:
    """Tests for TextFormatter and JsonFormatter."""

    def test_text_plain(self):
        """Level, logger name and message are rendered."""
        line = TextFormatter().format(_record())
        assert line == "INFO src.normalization.venues hello world"

    def test_text_with_context(self):
        """Context fields are rendered in brackets."""
        line = TextFormatter().format(_record(command="groups", source="events.json"))
        assert "[command=groups source=events.json]" in line

    def test_json(self):
        """JSON lines carry level, logger, message and context."""
        data = json.loads(JsonFormatter().format(_record(command="lookup", payload={"n": 2})))
        assert data["level"] == "INFO"
        assert data["logger"] == "src.normalization.venues"
        assert data["msg"] == "hello world"
        assert data["command"] == "lookup"
        assert data["payload"] == {"n": 2}


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level(self):
        """The package logger takes the configured level."""
        logger = setup_logging(LoggingOptions(level="debug"))
        assert logger.name == ROOT_LOGGER_NAME
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        """Unrecognized level names default to INFO."""
        logger = setup_logging(LoggingOptions(level="chatty"))
        assert logger.level == logging.INFO

    def test_no_duplicate_handlers(self):
        """Repeated setup keeps a single handler."""
        setup_logging()
        logger = setup_logging(LoggingOptions(json_logs=True))
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_module_loggers_are_children(self):
        """Module loggers propagate to the package logger."""
        logger = setup_logging()
        child = logging.getLogger("src.normalization.venues")
        assert child.parent is logger


class TestWithContext:
    """Tests for with_context."""

    def test_adds_context(self, caplog):
        """Adapter context appears on emitted records."""
        adapter = with_context(logging.getLogger("src.cli"), command="canonical", source="x.json")
        with caplog.at_level(logging.INFO, logger="src.cli"):
            adapter.info("done")

        record = caplog.records[-1]
        assert record.command == "canonical"
        assert record.source == "x.json"

    def test_per_call_extra_wins(self, caplog):
        """Per-call extra overrides adapter context."""
        adapter = with_context(logging.getLogger("src.cli"), venue="WOW Hall")
        with caplog.at_level(logging.INFO, logger="src.cli"):
            adapter.info("done", extra={"venue": "The Shedd"})

        assert caplog.records[-1].venue == "The Shedd"

    def test_empty_context(self):
        """No fields gives an empty context."""
        adapter = with_context(logging.getLogger("src.cli"))
        assert adapter.extra == {}
