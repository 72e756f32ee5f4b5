"""Structured logging for registry operations."""

from .logger_interface import LoggerInterface, LogLevel
from .structured_logger import StructuredLogger, configure_logging
from .log_formatter import LogFormatter

__all__ = [
    'LoggerInterface',
    'LogLevel',
    'StructuredLogger',
    'configure_logging',
    'LogFormatter'
]
