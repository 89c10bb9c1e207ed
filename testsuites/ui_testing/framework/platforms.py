"""
Browser and operating system names recognized by the driver factories.

Configuration values are normalized by removing all whitespace, lower-casing,
and mapping aliases ("ie" -> "internetexplorer", "osx" -> "mac").
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Optional, Tuple


CHROME = "chrome"
FIREFOX = "firefox"
INTERNET_EXPLORER = "internetexplorer"
SAFARI = "safari"

LINUX = "linux"
MAC = "mac"
WINDOWS = "windows"

SUPPORTED_OPERATING_SYSTEMS = (LINUX, MAC, WINDOWS)

BROWSER_ALIASES: Dict[str, str] = {
    "ie": INTERNET_EXPLORER,
}

OS_ALIASES: Dict[str, str] = {
    "osx": MAC,
    "macintosh": MAC,
    "win": WINDOWS,
}

# Bundled driver binaries, relative to DRIVERS_DIR
DRIVERS_DIR = Path(__file__).resolve().parents[3] / "drivers"

BUNDLED_DRIVERS: Dict[Tuple[str, str], str] = {
    (CHROME, LINUX): "linux/chromedriver",
    (CHROME, MAC): "mac/chromedriver",
    (CHROME, WINDOWS): "windows/chromedriver.exe",
    (FIREFOX, LINUX): "linux/geckodriver",
    (FIREFOX, MAC): "mac/geckodriver",
    (FIREFOX, WINDOWS): "windows/geckodriver.exe",
    (INTERNET_EXPLORER, WINDOWS): "windows/IEDriverServer.exe",
}


def _squash(value: str) -> str:
    return re.sub(r"\s+", "", value).lower()


def normalize_browser_name(value: str) -> str:
    """Normalize a configured browser name; " IE " becomes "internetexplorer"."""
    browser = _squash(value)
    return BROWSER_ALIASES.get(browser, browser)


def normalize_operating_system(value: str) -> str:
    """Normalize a configured operating system; "OSX" becomes "mac"."""
    operating_system = _squash(value)
    return OS_ALIASES.get(operating_system, operating_system)


def bundled_driver_path(browser: str, operating_system: str) -> Optional[str]:
    """Conventional location of the bundled driver, or None if there is none."""
    relative = BUNDLED_DRIVERS.get((browser, operating_system))
    if relative is None:
        return None
    return str(DRIVERS_DIR / relative)


__all__ = [
    "CHROME",
    "FIREFOX",
    "INTERNET_EXPLORER",
    "SAFARI",
    "LINUX",
    "MAC",
    "WINDOWS",
    "SUPPORTED_OPERATING_SYSTEMS",
    "DRIVERS_DIR",
    "bundled_driver_path",
    "normalize_browser_name",
    "normalize_operating_system",
]
