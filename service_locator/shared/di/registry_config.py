"""
Registry configuration for the composition root.

This module builds a registry from the loaded settings, so hosts
create their one registry in a single call at startup.
"""

from typing import Optional

from ...core.interfaces.resolver_interface import LogSink
from ...infrastructure.config.config_manager import ConfigManager
from ..logging.logger_interface import LoggerInterface, LogLevel
from ..logging.structured_logger import configure_logging
from .container import Registry


def configure_registry(
    config_manager: Optional[ConfigManager] = None,
    debug_log: Optional[LogSink] = None,
    logger: Optional[LoggerInterface] = None
) -> Registry:
    """
    Create a registry configured from settings.

    Args:
        config_manager: Configuration source; defaults and environment only when omitted
        debug_log: Sink used when ``registry.debug_log`` is enabled; ``print`` by default
        logger: Optional logger; a StructuredLogger at the configured level by default

    Returns:
        Registry: New, empty registry
    """
    config = (config_manager or ConfigManager()).get_config()

    if logger is None:
        logger = configure_logging(
            name="service_locator.registry",
            level=LogLevel(config.get_log_level())
        )

    sink = None
    if config.get_debug_log():
        sink = debug_log or print

    return Registry(
        debug_log=sink,
        logger=logger,
        detect_cycles=config.get_detect_cycles(),
        check_instance_types=config.get_check_instance_types()
    )
