"""
Configuration validator for registry settings.

This module provides a validator for ensuring configuration values
meet the required format and constraints.
"""

from typing import Dict, Any, List


class ConfigValidator:
    """
    Validator for configuration values.

    Collects every problem before raising, so one run reports all of
    them.
    """

    def __init__(self):
        """Initialize the validator."""
        self.errors: List[str] = []

    def validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Raises:
            ValueError: If configuration is invalid
        """
        self.errors = []

        if "registry" in config:
            self._validate_registry_config(config["registry"])

        if "logging" in config:
            self._validate_logging_config(config["logging"])

        if self.errors:
            raise ValueError("\n".join(self.errors))

    def _validate_registry_config(self, config: Any) -> None:
        if not isinstance(config, dict):
            self.errors.append("Registry configuration must be a mapping")
            return

        for flag in ("detect_cycles", "check_instance_types", "debug_log"):
            if flag in config and not isinstance(config[flag], bool):
                self.errors.append(f"Registry setting '{flag}' must be a boolean")

    def _validate_logging_config(self, config: Any) -> None:
        if not isinstance(config, dict):
            self.errors.append("Logging configuration must be a mapping")
            return

        if "level" in config:
            level = config["level"]
            valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
            if not isinstance(level, str) or level not in valid_levels:
                self.errors.append(
                    f"Logging level must be one of: {', '.join(valid_levels)}"
                )
