"""
Log formatter for registry operation messages.

This module provides the formatting used for the one-line messages
handed to a registry's ``debug_log`` sink.
"""

from typing import Any, Dict, Optional

from ...core.entities.registration_entity import RegistrationParams

LOG_PREFIX = "\x1b[34m[Registry Logger]\x1b[0m"


class LogFormatter:
    """
    Log formatter for consistent message formatting.

    All methods are static; the class only groups them.
    """

    @staticmethod
    def format_operation(
        message: str,
        params: Optional[RegistrationParams] = None,
        include_params: bool = False
    ) -> str:
        """
        Format a registry operation for the debug sink.

        Args:
            message: Sentence describing the operation, without final period
            params: Params passed to the operation
            include_params: Whether to mention params (or their absence)

        Returns:
            str: Formatted message, e.g.
            ``[Registry Logger] Get object of type Foo without params.``
        """
        if include_params:
            message = (
                f"{message} with params: {params!r}" if params is not None
                else f"{message} without params"
            )
        return f"{LOG_PREFIX} {message}."

    @staticmethod
    def format_error(error: BaseException) -> Dict[str, Any]:
        """
        Format an error for logging.

        Args:
            error: The error to format

        Returns:
            Dict[str, Any]: Formatted error
        """
        return {
            "type": error.__class__.__name__,
            "message": str(error)
        }
