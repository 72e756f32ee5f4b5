"""
Structured logger implementation.

This module provides a structured logging implementation that
formats log messages as JSON records on top of the standard
``logging`` module.
"""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from .logger_interface import LoggerInterface, LogLevel


class StructuredLogger(LoggerInterface):
    """
    Structured logger implementation.

    Every record is a single JSON document carrying the message and
    the merged context. Records go through ``logging.getLogger(name)``,
    so host applications keep control of handlers and propagation.
    """

    def __init__(
        self,
        name: str,
        level: Optional[LogLevel] = None,
        output: Optional[TextIO] = None
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Optional log level; the stdlib logger keeps its own level when omitted
            output: Optional stream; a handler is attached only when given
        """
        self.name = name
        self._context: Dict[str, Any] = {}

        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level.value)

        if output is not None:
            handler = logging.StreamHandler(output)
            handler.setFormatter(logging.Formatter('%(message)s'))
            self._logger.addHandler(handler)

    def _log(
        self,
        level: LogLevel,
        message: str,
        exc_info: Optional[BaseException] = None,
        **kwargs: Any
    ) -> None:
        numeric_level = getattr(logging, level.value)
        if not self._logger.isEnabledFor(numeric_level):
            return

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level.value,
            "logger": self.name,
            "message": message,
            "context": {**self._context, **kwargs}
        }

        if exc_info:
            log_entry["exception"] = {
                "type": exc_info.__class__.__name__,
                "message": str(exc_info),
                "traceback": traceback.format_exception(
                    type(exc_info),
                    exc_info,
                    exc_info.__traceback__
                )
            }

        self._logger.log(numeric_level, json.dumps(log_entry, default=repr))

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, **kwargs)

    def exception(self, message: str, exc_info: Optional[BaseException] = None, **kwargs: Any) -> None:
        """Log an exception."""
        self._log(LogLevel.ERROR, message, exc_info=exc_info, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        """Set the logging level."""
        self._logger.setLevel(level.value)

    def get_level(self) -> LogLevel:
        """Get the effective logging level."""
        return LogLevel(logging.getLevelName(self._logger.getEffectiveLevel()))

    def add_context(self, **kwargs: Any) -> None:
        """Add context data to all subsequent records."""
        self._context.update(kwargs)


def configure_logging(
    name: str = "service_locator",
    level: LogLevel = LogLevel.INFO,
    output: Optional[TextIO] = None
) -> StructuredLogger:
    """
    Configure and return a StructuredLogger instance.

    Args:
        name: Logger name
        level: Logging level
        output: Optional output stream for logs

    Returns:
        StructuredLogger: Configured logger instance
    """
    return StructuredLogger(name=name, level=level, output=output)
