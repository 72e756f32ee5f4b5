"""
Tests for structured logging and log formatting.
"""

import io
import json
import logging

from service_locator.core.entities.registration_entity import RegistrationParams
from service_locator.shared.logging.log_formatter import LogFormatter, LOG_PREFIX
from service_locator.shared.logging.logger_interface import LogLevel
from service_locator.shared.logging.structured_logger import StructuredLogger, configure_logging


class TestStructuredLogger:
    """Test suite for StructuredLogger."""

    def test_records_are_json_with_context(self):
        """Test that records carry the message and merged context."""
        output = io.StringIO()
        logger = StructuredLogger("test.structured.json", LogLevel.DEBUG, output)
        logger.add_context(registry="main")

        logger.debug("Put object of type Foo", operation="put", type="Foo")

        entry = json.loads(output.getvalue().strip())
        assert entry["level"] == "DEBUG"
        assert entry["logger"] == "test.structured.json"
        assert entry["message"] == "Put object of type Foo"
        assert entry["context"] == {"registry": "main", "operation": "put", "type": "Foo"}

    def test_records_below_level_are_dropped(self):
        """Test that the level filters records."""
        output = io.StringIO()
        logger = StructuredLogger("test.structured.level", LogLevel.WARNING, output)

        logger.debug("hidden")
        logger.info("hidden")
        logger.warning("shown")

        lines = output.getvalue().strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["message"] == "shown"

    def test_exception_details_are_included(self):
        """Test that exception records carry type and message."""
        output = io.StringIO()
        logger = configure_logging("test.structured.exception", LogLevel.INFO, output)

        logger.exception("dispose failed", exc_info=RuntimeError("boom"))

        entry = json.loads(output.getvalue().strip())
        assert entry["level"] == "ERROR"
        assert entry["exception"]["type"] == "RuntimeError"
        assert entry["exception"]["message"] == "boom"

    def test_set_level(self):
        """Test that the level can be changed after construction."""
        logger = StructuredLogger("test.structured.set_level")

        logger.set_level(LogLevel.ERROR)

        assert logger.get_level() == LogLevel.ERROR

    def test_omitted_level_keeps_stdlib_level(self):
        """Test that a logger without a level does not reset the shared logger."""
        StructuredLogger("test.structured.shared", LogLevel.DEBUG)

        logger = StructuredLogger("test.structured.shared")

        assert logging.getLogger("test.structured.shared").level == logging.DEBUG
        assert logger.get_level() == LogLevel.DEBUG

    def test_get_level_follows_parent_logger(self):
        """Test that the effective level is inherited when none is set."""
        logging.getLogger("test.structured.parent").setLevel(logging.ERROR)

        logger = StructuredLogger("test.structured.parent.child")

        assert logger.get_level() == LogLevel.ERROR

    def test_unserializable_context_is_rendered(self):
        """Test that arbitrary context objects do not break logging."""
        output = io.StringIO()
        logger = StructuredLogger("test.structured.repr", LogLevel.INFO, output)

        logger.info("built", instance=object())

        entry = json.loads(output.getvalue().strip())
        assert entry["context"]["instance"].startswith("<object object")


class TestLogFormatter:
    """Test suite for LogFormatter."""

    def test_format_operation_without_params_mention(self):
        """Test the plain operation line."""
        assert LogFormatter.format_operation("Clear the Registry") == f"{LOG_PREFIX} Clear the Registry."

    def test_format_operation_with_params(self):
        """Test that params are rendered when requested."""
        params = RegistrationParams.named({"x": 5})

        line = LogFormatter.format_operation("Get object of type Foo", params, include_params=True)

        assert line == f"{LOG_PREFIX} Get object of type Foo with params: [RegistrationParams] {{'x': 5}}."

    def test_format_operation_without_params(self):
        """Test that missing params are mentioned when requested."""
        line = LogFormatter.format_operation("Get object of type Foo", None, include_params=True)

        assert line.endswith("Get object of type Foo without params.")

    def test_format_error(self):
        """Test error formatting."""
        assert LogFormatter.format_error(ValueError("bad")) == {"type": "ValueError", "message": "bad"}
