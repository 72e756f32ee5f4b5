"""
Logger interface for the registry's observability hooks.

This module defines the interface the registry logs through, so hosts
can hand in their own logger instead of the structured default.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from enum import Enum


class LogLevel(Enum):
    """Standard log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggerInterface(ABC):
    """
    Interface for logging implementations.

    Keyword arguments passed to the log methods are structured context,
    not format arguments.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """
        Log a debug message.

        Args:
            message: The message to log
            **kwargs: Additional context data
        """
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        pass

    @abstractmethod
    def exception(self, message: str, exc_info: Optional[BaseException] = None, **kwargs: Any) -> None:
        """
        Log an exception.

        Args:
            message: The message to log
            exc_info: Optional exception to log
            **kwargs: Additional context data
        """
        pass

    @abstractmethod
    def set_level(self, level: LogLevel) -> None:
        """Set the logging level."""
        pass

    @abstractmethod
    def get_level(self) -> LogLevel:
        """Get the current logging level."""
        pass
