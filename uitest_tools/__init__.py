"""
================================================================================
UI Test Tools
================================================================================

Shared infrastructure used by the UI testing framework.

Modules:
    - common: Configuration lookup, logging setup, timeouts and
      download directory management

Example:
    from uitest_tools.common import init_logger
    from uitest_tools.common.config_loader import ConfigLoader

    init_logger()
    browser = ConfigLoader().get_property("browser")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
]
