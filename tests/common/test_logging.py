"""Tests for logging setup."""

import io
import json
import logging
import sys

from pairedscan.common.logging import (
    setup_logging,
    get_logger,
    LogContext,
    SimpleFormatter,
    StructuredFormatter,
)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_replaces_root_handlers(self):
        stream = io.StringIO()
        setup_logging(level="DEBUG", format="simple", stream=stream)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, SimpleFormatter)

    def test_simple_format_output(self):
        stream = io.StringIO()
        setup_logging(level="INFO", format="simple", stream=stream)

        get_logger("pairedscan.test").info("hello")

        assert stream.getvalue().strip() == "INFO     | pairedscan.test | hello"

    def test_level_filters_messages(self):
        stream = io.StringIO()
        setup_logging(level="WARNING", format="simple", stream=stream)

        get_logger("pairedscan.test").info("hidden")

        assert stream.getvalue() == ""

    def test_json_format_output(self):
        stream = io.StringIO()
        setup_logging(level="INFO", format="json", stream=stream)

        get_logger("pairedscan.test").warning("structured")

        data = json.loads(stream.getvalue())
        assert data["level"] == "WARNING"
        assert data["logger"] == "pairedscan.test"
        assert data["message"] == "structured"

    def test_log_file_is_structured(self, tmp_path):
        log_file = tmp_path / "logs" / "pairedscan.log"
        setup_logging(level="INFO", format="simple", log_file=log_file, stream=io.StringIO())

        get_logger("pairedscan.test").info("to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        data = json.loads(log_file.read_text().strip())
        assert data["message"] == "to file"
        # Close the rotating handler so tmp_path can be removed
        for handler in logging.getLogger().handlers:
            handler.close()


class TestLogContext:
    """Tests for LogContext."""

    def test_fields_added_inside_context(self):
        stream = io.StringIO()
        setup_logging(level="INFO", format="json", stream=stream)
        logger = get_logger("pairedscan.test")

        with LogContext(logger, root="/data/run1"):
            logger.info("inside")
        logger.info("outside")

        inside, outside = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert inside["root"] == "/data/run1"
        assert "root" not in outside

    def test_factory_restored(self):
        factory = logging.getLogRecordFactory()
        with LogContext(get_logger("pairedscan.test"), key="value"):
            assert logging.getLogRecordFactory() is not factory
        assert logging.getLogRecordFactory() is factory


def test_structured_formatter_includes_exception():
    formatter = StructuredFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    data = json.loads(formatter.format(record))
    assert data["exception"]["type"] == "ValueError"
    assert data["exception"]["message"] == "boom"
