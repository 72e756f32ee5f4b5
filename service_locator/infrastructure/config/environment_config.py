"""
Environment configuration for registry settings.

This module provides typed access to the merged configuration, with
support for environment variable overrides.
"""

from typing import Dict, Any, Mapping, Optional
import os

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> Any:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    # Left as a string so the validator reports it
    return value


class EnvironmentConfig:
    """
    Environment-specific configuration.

    Wraps the merged configuration dictionary and applies environment
    variable overrides on construction.
    """

    def __init__(self, config: Dict[str, Any], environ: Optional[Mapping[str, str]] = None):
        """
        Initialize the configuration.

        Args:
            config: Merged configuration
            environ: Environment mapping, ``os.environ`` by default
        """
        self.config = config
        self._environ = os.environ if environ is None else environ
        self._apply_environment_overrides()

    def _apply_environment_overrides(self) -> None:
        """Apply environment variable overrides to configuration."""
        registry_config = self.config.setdefault("registry", {})
        log_config = self.config.setdefault("logging", {})

        if "REGISTRY_DEBUG_LOG" in self._environ:
            registry_config["debug_log"] = _parse_bool(self._environ["REGISTRY_DEBUG_LOG"])

        if "REGISTRY_DETECT_CYCLES" in self._environ:
            registry_config["detect_cycles"] = _parse_bool(self._environ["REGISTRY_DETECT_CYCLES"])

        if "REGISTRY_LOG_LEVEL" in self._environ:
            log_config["level"] = self._environ["REGISTRY_LOG_LEVEL"].strip().upper()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a top-level configuration section."""
        return self.config.get(key, default)

    def get_detect_cycles(self) -> bool:
        return self.config["registry"].get("detect_cycles", True)

    def get_check_instance_types(self) -> bool:
        return self.config["registry"].get("check_instance_types", True)

    def get_debug_log(self) -> bool:
        return self.config["registry"].get("debug_log", False)

    def get_log_level(self) -> str:
        """
        Get logging level.

        Returns:
            str: Logging level name
        """
        return self.config["logging"].get("level", "INFO")
