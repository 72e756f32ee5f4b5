"""
Configuration manager for registry settings.

This module provides a manager for loading the registry and logging
settings from YAML files, with support for different environments.
"""

from typing import Dict, Any, Mapping, Optional
import copy
import os
import yaml
from pathlib import Path

from .config_validator import ConfigValidator
from .environment_config import EnvironmentConfig

DEFAULT_CONFIG: Dict[str, Any] = {
    "registry": {
        "detect_cycles": True,
        "check_instance_types": True,
        "debug_log": False,
    },
    "logging": {
        "level": "INFO",
    },
}


class ConfigManager:
    """
    Manager for registry configuration.

    Built-in defaults are overridden by ``base.yaml``, then by
    ``<environment>.yaml`` and finally by environment variables.
    Without a config directory only defaults and environment variables
    apply.
    """

    def __init__(
        self,
        config_dir: Optional[str] = None,
        environment: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None
    ):
        """
        Initialize the manager.

        Args:
            config_dir: Optional configuration directory path
            environment: Optional environment name
            environ: Environment mapping, ``os.environ`` by default
        """
        self._environ = os.environ if environ is None else environ
        self.config_dir = Path(config_dir) if config_dir else None
        self.environment = environment or self._environ.get("REGISTRY_ENV", "development")
        self.validator = ConfigValidator()
        self._config: Optional[EnvironmentConfig] = None

    def load_config(self) -> EnvironmentConfig:
        """
        Load configuration from files.

        Returns:
            EnvironmentConfig: Loaded configuration

        Raises:
            FileNotFoundError: If ``base.yaml`` is missing from the config directory
            ValueError: If configuration is invalid
        """
        if self._config is not None:
            return self._config

        config = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_dir is not None:
            base_config = self._load_yaml("base.yaml", required=True)
            env_config = self._load_yaml(f"{self.environment}.yaml", required=False)
            config = self._merge_configs(config, base_config)
            config = self._merge_configs(config, env_config)

        self.validator.validate_config(config)
        environment_config = EnvironmentConfig(config, environ=self._environ)
        self.validator.validate_config(environment_config.config)

        self._config = environment_config
        return self._config

    def get_config(self) -> EnvironmentConfig:
        """Get the current configuration, loading it on first use."""
        return self.load_config()

    def get_registry_config(self) -> Dict[str, Any]:
        return self.get_config().get("registry", {})

    def _load_yaml(self, filename: str, required: bool) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Args:
            filename: Configuration file name
            required: Whether a missing file is an error

        Returns:
            Dict[str, Any]: Loaded configuration, empty for a missing optional file

        Raises:
            FileNotFoundError: If a required file is not found
        """
        file_path = self.config_dir / filename
        if not file_path.exists():
            if required:
                raise FileNotFoundError(f"Configuration file not found: {file_path}")
            return {}

        with open(file_path, "r") as f:
            loaded = yaml.safe_load(f)

        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file must contain a mapping: {file_path}")
        return loaded

    def _merge_configs(
        self,
        base: Dict[str, Any],
        override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Merge two configurations.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Dict[str, Any]: Merged configuration
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result and
                isinstance(result[key], dict) and
                isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result
