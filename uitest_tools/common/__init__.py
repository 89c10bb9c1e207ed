"""
================================================================================
UI Test Tools Common Utilities
================================================================================

This module provides shared configuration access and logging setup for the
UI testing framework.

Exports:
    - ConfigLoader: Singleton configuration lookup
    - get_config: Convenience function to get configuration values
    - init_logger: Function to initialize loguru logger with standard settings
    - ensure_directory: Create a directory if it is missing

Usage:
    from uitest_tools.common import get_config, init_logger

    init_logger()
    browser = get_config("browser", "chrome")

================================================================================
"""

import os
import sys
from dataclasses import dataclass, fields
from typing import Any, List, Optional

from loguru import logger

from .config_loader import ConfigLoader, ConfigurationError, MissingConfigurationError


# ============================================================
# Configuration Management
# ============================================================

def get_config(key: str, default: Any = None) -> Any:
    """
    Convenience function to get a configuration value.

    Args:
        key: Configuration key using dot notation
        default: Default value if not found

    Returns:
        Configuration value or default

    Example:
        level = get_config("logging.level", "INFO")
    """
    return ConfigLoader().get(key, default)


def set_config(key: str, value: Any) -> None:
    """
    Convenience function to set a configuration value.

    Args:
        key: Configuration key using dot notation
        value: Value to set
    """
    ConfigLoader().set_property(key, value)


# ============================================================
# Logging Setup
# ============================================================

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


@dataclass
class LoggingSettings:
    """
    Logger settings read from the ``logging`` configuration section.

    Attributes:
        level: Minimum level, upper-cased (DEBUG, INFO, ...)
        format: loguru format string
        file: Optional log file path
        rotation: loguru rotation for the file handler
        retention: loguru retention for the file handler
    """
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file: Optional[str] = None
    rotation: str = "10 MB"
    retention: str = "7 days"

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "LoggingSettings":
        """
        Build settings from the ``logging`` section.

        Each key can still be overridden individually, e.g. UITEST_LOGGING_LEVEL.
        """
        config = config or ConfigLoader()
        section = config.get_section("logging") or {}
        values = {}
        for field in fields(cls):
            value = config.get(f"logging.{field.name}", section.get(field.name))
            if value is not None:
                values[field.name] = str(value)
        settings = cls(**values)
        settings.level = settings.level.upper()
        return settings


_handler_ids: List[int] = []


def init_logger(
    level: str = None,
    format_string: str = None,
    log_file: str = None,
    force: bool = False,
) -> LoggingSettings:
    """
    Initializes the loguru logger from the ``logging`` configuration section.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Overrides config value.
        format_string: Log format string. Overrides config value.
        log_file: Optional file path to write logs to. Overrides config value.
        force: Replace handlers added by an earlier call.

    Returns:
        The settings applied

    Example:
        init_logger()  # Use configuration
        init_logger(level="DEBUG", log_file="logs/uitest.log")
    """
    settings = LoggingSettings.from_config()
    if level:
        settings.level = level.upper()
    if format_string:
        settings.format = format_string
    if log_file:
        settings.file = log_file

    if _handler_ids and not force:
        return settings

    # First call also drops loguru's default stderr handler
    if _handler_ids:
        for handler_id in _handler_ids:
            logger.remove(handler_id)
        _handler_ids.clear()
    else:
        logger.remove()

    _handler_ids.append(logger.add(
        sys.stderr,
        format=settings.format,
        level=settings.level,
        colorize=True,
    ))

    if settings.file:
        log_dir = os.path.dirname(settings.file)
        if log_dir:
            ensure_directory(log_dir)

        _handler_ids.append(logger.add(
            settings.file,
            format=settings.format,
            level=settings.level,
            rotation=settings.rotation,
            retention=settings.retention,
        ))

    logger.debug(f"Logger initialized at level {settings.level}")
    return settings


# ============================================================
# Common Utilities
# ============================================================

def ensure_directory(path: str) -> str:
    """
    Ensures a directory exists, creating it if necessary.

    Args:
        path: Directory path

    Returns:
        The path (for chaining)
    """
    os.makedirs(path, exist_ok=True)
    return path


# Export public API
__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "MissingConfigurationError",
    "get_config",
    "set_config",
    "LoggingSettings",
    "init_logger",
    "ensure_directory",
]
