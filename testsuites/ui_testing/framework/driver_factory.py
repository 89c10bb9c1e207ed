"""
================================================================================
WebDriver Factory
================================================================================

Browser session lifecycle management for UI automation.

The factory reads the browser/operating system matrix from configuration,
validates the combination, builds exactly one Selenium session, and caches it
for the rest of the process. Repeated calls return the cached session without
reading configuration again.

Supported combinations:
    - linux:   chrome, firefox
    - mac:     chrome, firefox, safari
    - windows: chrome, firefox, internetexplorer

Configuration keys:
    browser   chrome | firefox | internetexplorer (ie) | safari   (required)
    os        linux | mac (osx, macintosh) | windows (win)        (required)
    driver    explicit path to the driver binary                   (optional)
    download  download directory for the session                   (optional)
    headless  run chrome/firefox headless                          (optional)

When ``saucelabsUserName`` is set the session is created on the remote grid
instead and the keys above other than ``browser`` are ignored.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Collection, Dict, Optional

from loguru import logger
from selenium import webdriver
from selenium.common.exceptions import NoSuchDriverException, WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.ie.options import Options as IeOptions
from selenium.webdriver.ie.service import Service as IeService
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.safari.service import Service as SafariService

from uitest_tools.common.config_loader import ConfigLoader
from uitest_tools.common.download_manager import get_download_directory, set_download_directory

from .exceptions import (
    DriverConstructionError,
    DriverNotExecutableError,
    DriverNotInitializedError,
    IncompatibleOsBrowserError,
    UnknownOperatingSystemError,
    UnsupportedBrowserError,
)
from .platforms import (
    CHROME,
    FIREFOX,
    INTERNET_EXPLORER,
    LINUX,
    MAC,
    SAFARI,
    SUPPORTED_OPERATING_SYSTEMS,
    WINDOWS,
    bundled_driver_path,
    normalize_browser_name,
    normalize_operating_system,
)
from .remote_grid import create_saucelabs_driver


# MIME types Firefox saves without asking
FIREFOX_SILENT_DOWNLOAD_TYPES = ",".join([
    "application/pdf",
    "application/octet-stream",
    "application/zip",
    "text/csv",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
])


@dataclass
class DriverSettings:
    """
    Normalized settings handed to a browser builder.

    Attributes:
        browser: Normalized browser name
        operating_system: Normalized operating system name
        driver_path: Explicit driver binary path, if configured
        headless: Whether to start chrome/firefox without a window
    """
    browser: str
    operating_system: str
    driver_path: Optional[str] = None
    headless: bool = False


# =============================================================================
# Builder helpers
# =============================================================================

def require_operating_system(settings: DriverSettings, allowed: Collection[str]) -> None:
    """
    Validate that the browser can run on the configured operating system.

    Raises:
        IncompatibleOsBrowserError: Recognized OS the browser does not run on
        UnknownOperatingSystemError: OS matches none of the recognized names
    """
    if settings.operating_system in allowed:
        return

    if settings.operating_system in SUPPORTED_OPERATING_SYSTEMS:
        error = IncompatibleOsBrowserError(settings.operating_system, settings.browser)
    else:
        error = UnknownOperatingSystemError(settings.operating_system)
    logger.error(str(error))
    raise error


def check_driver_executable(path: str) -> None:
    """
    Fail early when a driver binary is missing or not executable.

    Raises:
        DriverNotExecutableError: If the file is absent or lacks execute permission
    """
    if not os.path.isfile(path):
        error = DriverNotExecutableError(f"Driver not found at: {path}")
    elif not os.access(path, os.X_OK):
        error = DriverNotExecutableError(f"Driver is not executable: {path}")
    else:
        return
    logger.error(str(error))
    raise error


def resolve_driver_path(settings: DriverSettings) -> Optional[str]:
    """
    Pick the driver binary for a builder.

    An explicit path wins. Otherwise the bundled binary is used when it is
    present, and Selenium Manager locates a driver when it is not.
    """
    if settings.driver_path:
        return settings.driver_path
    bundled = bundled_driver_path(settings.browser, settings.operating_system)
    if bundled and os.path.isfile(bundled):
        return bundled
    return None


def start_driver(browser: str, constructor: Callable[[], WebDriver]) -> WebDriver:
    """
    Run a driver constructor and classify its failures.

    Raises:
        DriverNotExecutableError: The driver binary could not be found or run
        DriverConstructionError: Any other failure starting the session
    """
    try:
        driver = constructor()
    except NoSuchDriverException as e:
        logger.error(f"No {browser} driver available: {e.msg}")
        raise DriverNotExecutableError(e.msg or str(e)) from e
    except OSError as e:
        logger.error(f"{browser} driver could not be executed: {e}")
        raise DriverNotExecutableError(str(e)) from e
    except WebDriverException as e:
        logger.error(f"{browser} driver failed to start: {e.msg}")
        raise DriverConstructionError(
            f"The {browser} driver failed to start: {e.msg}"
        ) from e

    logger.info(f"Started {browser} session")
    return driver


# =============================================================================
# Browser builders
# =============================================================================

def create_chrome_driver(settings: DriverSettings) -> WebDriver:
    """Create a Chrome session on any supported operating system."""
    require_operating_system(settings, (LINUX, MAC, WINDOWS))

    options = ChromeOptions()
    if settings.headless:
        options.add_argument("--headless=new")
    options.add_experimental_option("prefs", {
        "download.default_directory": get_download_directory(),
        "download.prompt_for_download": False,
        "plugins.always_open_pdf_externally": True,
    })

    driver_path = resolve_driver_path(settings)
    if driver_path:
        check_driver_executable(driver_path)
        service = ChromeService(executable_path=driver_path)
    else:
        service = ChromeService()

    return start_driver(CHROME, lambda: webdriver.Chrome(service=service, options=options))


def create_firefox_driver(settings: DriverSettings) -> WebDriver:
    """Create a Firefox session on any supported operating system."""
    require_operating_system(settings, (LINUX, MAC, WINDOWS))

    options = FirefoxOptions()
    if settings.headless:
        options.add_argument("-headless")
    options.set_preference("browser.download.folderList", 2)
    options.set_preference("browser.download.dir", get_download_directory())
    options.set_preference("browser.download.useDownloadDir", True)
    options.set_preference("browser.helperApps.neverAsk.saveToDisk", FIREFOX_SILENT_DOWNLOAD_TYPES)
    options.set_preference("pdfjs.disabled", True)

    driver_path = resolve_driver_path(settings)
    if driver_path:
        check_driver_executable(driver_path)
        service = FirefoxService(executable_path=driver_path)
    else:
        service = FirefoxService()

    return start_driver(FIREFOX, lambda: webdriver.Firefox(service=service, options=options))


def create_internet_explorer_driver(settings: DriverSettings) -> WebDriver:
    """
    Create an Internet Explorer session. Windows only.

    Falls back to the bundled IEDriverServer when no driver path is
    configured, and disables zoom level enforcement.
    """
    require_operating_system(settings, (WINDOWS,))

    driver_path = settings.driver_path or bundled_driver_path(
        INTERNET_EXPLORER, settings.operating_system
    )
    check_driver_executable(driver_path)

    options = IeOptions()
    options.ignore_zoom_level = True
    service = IeService(executable_path=driver_path)

    return start_driver(INTERNET_EXPLORER, lambda: webdriver.Ie(service=service, options=options))


def create_safari_driver(settings: DriverSettings) -> WebDriver:
    """Create a Safari session. Mac only; safaridriver ships with the OS."""
    require_operating_system(settings, (MAC,))

    if settings.driver_path:
        check_driver_executable(settings.driver_path)
        service = SafariService(executable_path=settings.driver_path)
    else:
        service = SafariService()

    return start_driver(SAFARI, lambda: webdriver.Safari(service=service))


# =============================================================================
# Factory
# =============================================================================

def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes", "on")


class WebDriverFactory:
    """
    Creates and caches the browser session for the process.

    Usage:
        driver = WebDriverFactory.instantiate_web_driver()
        ...
        WebDriverFactory.get_web_driver()  # same session
    """

    BROWSER_BUILDERS: Dict[str, Callable[[DriverSettings], WebDriver]] = {
        CHROME: create_chrome_driver,
        FIREFOX: create_firefox_driver,
        INTERNET_EXPLORER: create_internet_explorer_driver,
        SAFARI: create_safari_driver,
    }

    _driver: Optional[WebDriver] = None

    @classmethod
    def instantiate_web_driver(cls, config: Optional[ConfigLoader] = None) -> WebDriver:
        """
        Create the browser session, or return the one already created.

        Args:
            config: Configuration lookup. Uses the ConfigLoader singleton if omitted.

        Returns:
            The process-wide WebDriver session

        Raises:
            MissingConfigurationError: browser or os is not configured
            UnsupportedBrowserError: browser is not one of the supported names
            IncompatibleOsBrowserError: browser cannot run on the configured OS
            UnknownOperatingSystemError: os is not one of the supported names
            DriverNotExecutableError: driver binary missing or not executable
            DriverConstructionError: session failed to start
        """
        if cls._driver is not None:
            return cls._driver

        config = config or ConfigLoader()

        if config.get_optional_property("saucelabsUserName") is not None:
            cls._driver = create_saucelabs_driver(config)
            return cls._driver

        download_directory = config.get_optional_property("download")
        if download_directory is not None:
            set_download_directory(download_directory)

        browser = normalize_browser_name(config.get_property("browser"))
        builder = cls.BROWSER_BUILDERS.get(browser)
        if builder is None:
            error = UnsupportedBrowserError(browser)
            logger.error(str(error))
            raise error

        settings = DriverSettings(
            browser=browser,
            operating_system=normalize_operating_system(config.get_property("os")),
            driver_path=config.get_optional_property("driver"),
            headless=_as_bool(config.get("headless", False)),
        )
        logger.debug(f"Creating WebDriver with settings: {settings}")

        cls._driver = builder(settings)
        return cls._driver

    @classmethod
    def get_web_driver(cls) -> WebDriver:
        """
        Return the cached session.

        Raises:
            DriverNotInitializedError: If instantiate_web_driver() was never called
        """
        if cls._driver is None:
            error = DriverNotInitializedError()
            logger.error(str(error))
            raise error
        return cls._driver

    @classmethod
    def has_web_driver(cls) -> bool:
        """Whether a session has been created."""
        return cls._driver is not None

    @classmethod
    def reset(cls) -> None:
        """
        Quit the cached session and forget it.

        The next instantiate_web_driver() call reads configuration again.
        Page elements created earlier keep referencing the old session.
        """
        driver, cls._driver = cls._driver, None
        if driver is None:
            return
        try:
            driver.quit()
        except WebDriverException as e:
            logger.warning(f"Failed to quit WebDriver cleanly: {e.msg}")
        logger.debug("WebDriver session closed")


__all__ = [
    "DriverSettings",
    "WebDriverFactory",
    "check_driver_executable",
    "create_chrome_driver",
    "create_firefox_driver",
    "create_internet_explorer_driver",
    "create_safari_driver",
    "require_operating_system",
    "resolve_driver_path",
    "start_driver",
]
