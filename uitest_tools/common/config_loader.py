"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration lookup with environment variable override support.

Features:
    - Top-level defaults plus per-environment sections
    - Environment variable override (UITEST_BROWSER overrides browser)
    - Required vs. optional property lookup
    - Scenario value store for data saved during a test run

Configuration file layout:
    browser: chrome
    os: linux
    timeout: 10
    environments:
      ci:
        browser: firefox
        headless: true

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

# Prefix for environment variable overrides
ENV_PREFIX = "UITEST_"

# Name of the section holding per-environment overrides
ENVIRONMENTS_SECTION = "environments"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class MissingConfigurationError(ConfigurationError):
    """Raised when a required configuration key has no value."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"Configuration property '{key}' was not found. Set it in the "
            f"configuration file or with the {env_var_name(key)} environment variable."
        )


def env_var_name(key: str) -> str:
    """Return the environment variable that overrides ``key``."""
    return ENV_PREFIX + key.upper().replace(".", "_")


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Runtime overrides (set_property)
        2. Environment variables (UITEST_BROWSER)
        3. Active environment section of the YAML file
        4. Top-level YAML keys
        5. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get_property("browser")
        'chrome'

        >>> config.get_optional_property("driver")
        None
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """
        Singleton pattern - return existing instance if available.

        Every element and the driver factory read the same configuration,
        so it is loaded only once per process.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._overrides: Dict[str, Any] = {}
        self._values: Dict[str, str] = {}
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

        if not isinstance(self._config, dict):
            raise ConfigurationError(
                f"Configuration file {self._config_path} must contain a mapping"
            )

    @property
    def environment(self) -> str:
        """Name of the active environment section."""
        return str(
            os.environ.get(env_var_name("env"))
            or self._config.get("env")
            or "default"
        )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        Args:
            key: Dot-notation path (e.g., "logging.level")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        if key in self._overrides:
            return self._overrides[key]

        env_value = os.environ.get(env_var_name(key))
        if env_value is not None:
            return self._convert_type(env_value, default)

        sections = self._config.get(ENVIRONMENTS_SECTION) or {}
        env_section = sections.get(self.environment) or {}
        for source in (env_section, self._config):
            value = self._lookup(source, key)
            if value is not None:
                return value

        return default

    def get_property(self, key: str) -> str:
        """
        Get a required configuration property.

        Raises:
            MissingConfigurationError: If the key is absent or blank
        """
        value = self.get(key)
        if value is None or str(value).strip() == "":
            raise MissingConfigurationError(key)
        return str(value)

    def get_optional_property(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get an optional configuration property, or ``default`` when absent."""
        value = self.get(key)
        if value is None or str(value).strip() == "":
            return default
        return str(value)

    def set_property(self, key: str, value: Any) -> None:
        """Override a configuration value for the rest of the run."""
        self._overrides[key] = value
        logger.debug(f"Configuration override set: {key}={value}")

    def set_value(self, key: str, value: str) -> None:
        """Store a value captured during a scenario for later steps."""
        self._values[key] = value

    def get_value(self, key: str) -> str:
        """
        Return a value stored during the scenario.

        Raises:
            MissingConfigurationError: If nothing was stored under ``key``
        """
        if key not in self._values:
            raise MissingConfigurationError(key)
        return self._values[key]

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get entire configuration section.

        Args:
            section: Section name (e.g., "logging")

        Returns:
            Section dictionary or empty dict if not found
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """
        Reload configuration from file.

        Runtime overrides and stored scenario values are kept.
        """
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    @staticmethod
    def _lookup(source: Dict[str, Any], key: str) -> Any:
        """Resolve a flat key first, then a dot-notation path."""
        if key in source:
            return source[key]

        value: Any = source
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                return None
            if value is None:
                return None
        return value

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None
        cls._config = {}


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "MissingConfigurationError",
    "env_var_name",
]
