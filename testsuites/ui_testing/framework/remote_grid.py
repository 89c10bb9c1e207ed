"""
================================================================================
Remote Grid Driver Factory
================================================================================

Builds a Selenium Remote session on a Sauce Labs style grid.

Configuration keys:
    saucelabsUserName        Grid user name (its presence selects this path)
    saucelabsAccessKey       Grid access key (required)
    browser                  Browser to request (required)
    saucelabsPlatform        Platform name, e.g. "Windows 11" (optional)
    saucelabsBrowserVersion  Browser version, default "latest"
    saucelabsTestName        Job name shown on the grid (optional)
    saucelabsUrl             Hub URL, default US West data center

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from loguru import logger
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.ie.options import Options as IeOptions
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.safari.options import Options as SafariOptions

from uitest_tools.common.config_loader import ConfigLoader

from .exceptions import DriverConstructionError, UnsupportedBrowserError
from .platforms import CHROME, FIREFOX, INTERNET_EXPLORER, SAFARI, normalize_browser_name


SAUCELABS_URL = "https://ondemand.us-west-1.saucelabs.com/wd/hub"

REMOTE_OPTIONS: Dict[str, Callable[[], Any]] = {
    CHROME: ChromeOptions,
    FIREFOX: FirefoxOptions,
    INTERNET_EXPLORER: IeOptions,
    SAFARI: SafariOptions,
}


def build_remote_options(config: ConfigLoader) -> Any:
    """
    Build browser options carrying the grid credentials.

    Raises:
        MissingConfigurationError: If browser or access key is missing
        UnsupportedBrowserError: If the browser cannot be requested
    """
    browser = normalize_browser_name(config.get_property("browser"))
    options_factory = REMOTE_OPTIONS.get(browser)
    if options_factory is None:
        raise UnsupportedBrowserError(browser)

    options = options_factory()
    options.browser_version = config.get_optional_property("saucelabsBrowserVersion", "latest")
    platform = config.get_optional_property("saucelabsPlatform")
    if platform:
        options.platform_name = platform

    sauce_options = {
        "username": config.get_property("saucelabsUserName"),
        "accessKey": config.get_property("saucelabsAccessKey"),
    }
    test_name = config.get_optional_property("saucelabsTestName")
    if test_name:
        sauce_options["name"] = test_name
    options.set_capability("sauce:options", sauce_options)

    return options


def create_saucelabs_driver(config: ConfigLoader) -> WebDriver:
    """
    Create a remote WebDriver session on the grid.

    Raises:
        DriverConstructionError: If the grid rejects the session
    """
    options = build_remote_options(config)
    url = config.get_optional_property("saucelabsUrl", SAUCELABS_URL)
    logger.info(
        f"Requesting remote {options.capabilities.get('browserName')} session from {url}"
    )
    try:
        return webdriver.Remote(command_executor=url, options=options)
    except WebDriverException as e:
        logger.error(f"Remote grid session could not be created: {e.msg}")
        raise DriverConstructionError(
            f"Remote grid session could not be created at {url}: {e.msg}"
        ) from e


__all__ = [
    "SAUCELABS_URL",
    "build_remote_options",
    "create_saucelabs_driver",
]
