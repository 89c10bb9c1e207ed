import os
from unittest.mock import MagicMock

import pytest
from selenium.common.exceptions import NoSuchDriverException, WebDriverException

from uitest_tools.common.config_loader import MissingConfigurationError
from testsuites.ui_testing.framework import driver_factory, remote_grid
from testsuites.ui_testing.framework.driver_factory import WebDriverFactory
from testsuites.ui_testing.framework.exceptions import (
    DriverConstructionError,
    DriverNotExecutableError,
    DriverNotInitializedError,
    IncompatibleOsBrowserError,
    UnknownOperatingSystemError,
    UnsupportedBrowserError,
)


CONSTRUCTORS = {
    "chrome": "Chrome",
    "firefox": "Firefox",
    "internetexplorer": "Ie",
    "safari": "Safari",
}


@pytest.fixture
def constructors(monkeypatch):
    """Replace the Selenium driver constructors and services with mocks."""
    mocks = {}
    for name in CONSTRUCTORS.values():
        mocks[name] = MagicMock(name=name)
        monkeypatch.setattr(driver_factory.webdriver, name, mocks[name])
    for service in ("ChromeService", "FirefoxService", "IeService", "SafariService"):
        monkeypatch.setattr(driver_factory, service, MagicMock(name=service))
    return mocks


@pytest.fixture
def executable_driver(tmp_path):
    path = tmp_path / "driver-binary"
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    os.chmod(path, 0o755)
    return str(path)


def configure(config, **settings):
    for key, value in settings.items():
        config.set_property(key, value)
    return config


@pytest.mark.parametrize("browser, operating_system", [
    ("chrome", "linux"),
    ("chrome", "mac"),
    ("chrome", "windows"),
    ("firefox", "linux"),
    ("firefox", "mac"),
    ("firefox", "windows"),
    ("internetexplorer", "windows"),
    ("safari", "mac"),
])
def test_supported_pairs_create_a_session(config, constructors, executable_driver, browser, operating_system):
    configure(config, browser=browser, os=operating_system, driver=executable_driver)

    driver = WebDriverFactory.instantiate_web_driver()

    constructor = constructors[CONSTRUCTORS[browser]]
    constructor.assert_called_once()
    assert driver is constructor.return_value
    assert WebDriverFactory.get_web_driver() is driver


@pytest.mark.parametrize("browser, operating_system", [
    ("internetexplorer", "linux"),
    ("ie", "mac"),
    ("Internet Explorer", "OSX"),
    ("safari", "linux"),
    ("safari", "windows"),
])
def test_excluded_pairs_raise_incompatible(config, constructors, browser, operating_system):
    configure(config, browser=browser, os=operating_system)

    with pytest.raises(IncompatibleOsBrowserError):
        WebDriverFactory.instantiate_web_driver()

    assert not WebDriverFactory.has_web_driver()
    for constructor in constructors.values():
        constructor.assert_not_called()


@pytest.mark.parametrize("browser", ["chrome", "firefox", "ie", "safari"])
def test_unknown_operating_system(config, constructors, browser):
    configure(config, browser=browser, os="solaris")

    with pytest.raises(UnknownOperatingSystemError, match="solaris"):
        WebDriverFactory.instantiate_web_driver()


def test_unsupported_browser(config, constructors):
    configure(config, browser="opera", os="linux")

    with pytest.raises(UnsupportedBrowserError, match="opera"):
        WebDriverFactory.instantiate_web_driver()


def test_missing_browser_setting(config, constructors):
    configure(config, os="linux")

    with pytest.raises(MissingConfigurationError):
        WebDriverFactory.instantiate_web_driver()


def test_session_is_created_once(config, constructors):
    configure(config, browser="chrome", os="linux")

    first = WebDriverFactory.instantiate_web_driver()
    config.set_property("browser", "firefox")
    second = WebDriverFactory.instantiate_web_driver()

    assert first is second
    constructors["Chrome"].assert_called_once()
    constructors["Firefox"].assert_not_called()


def test_names_are_normalized(config, constructors):
    configure(config, browser=" Fire Fox ", os="WIN")

    WebDriverFactory.instantiate_web_driver()

    constructors["Firefox"].assert_called_once()


def test_internet_explorer_without_bundled_driver(config, constructors):
    configure(config, browser="ie", os="windows")

    with pytest.raises(DriverNotExecutableError, match="IEDriverServer"):
        WebDriverFactory.instantiate_web_driver()


def test_internet_explorer_ignores_zoom_level(config, constructors, executable_driver):
    configure(config, browser="ie", os="windows", driver=executable_driver)

    WebDriverFactory.instantiate_web_driver()

    options = constructors["Ie"].call_args.kwargs["options"]
    assert options.ignore_zoom_level is True
    driver_factory.IeService.assert_called_once_with(executable_path=executable_driver)


def test_explicit_driver_path_missing(config, constructors, tmp_path):
    configure(config, browser="chrome", os="linux", driver=str(tmp_path / "nowhere"))

    with pytest.raises(DriverNotExecutableError, match="chmod"):
        WebDriverFactory.instantiate_web_driver()


def test_explicit_driver_path_not_executable(config, constructors, tmp_path):
    path = tmp_path / "chromedriver"
    path.write_text("", encoding="utf-8")
    os.chmod(path, 0o644)
    configure(config, browser="chrome", os="linux", driver=str(path))

    with pytest.raises(DriverNotExecutableError):
        WebDriverFactory.instantiate_web_driver()


def test_missing_driver_binary_is_not_executable_error(config, constructors):
    configure(config, browser="chrome", os="linux")
    constructors["Chrome"].side_effect = NoSuchDriverException("Unable to obtain driver for chrome")

    with pytest.raises(DriverNotExecutableError):
        WebDriverFactory.instantiate_web_driver()


def test_other_start_failures_are_construction_errors(config, constructors):
    configure(config, browser="firefox", os="linux")
    constructors["Firefox"].side_effect = WebDriverException("session not created")

    with pytest.raises(DriverConstructionError, match="session not created"):
        WebDriverFactory.instantiate_web_driver()

    assert not WebDriverFactory.has_web_driver()


def test_chrome_options_carry_headless_and_download_directory(config, constructors, tmp_path):
    configure(config, browser="chrome", os="linux", headless="true")

    WebDriverFactory.instantiate_web_driver()

    options = constructors["Chrome"].call_args.kwargs["options"]
    assert "--headless=new" in options.arguments
    prefs = options.experimental_options["prefs"]
    assert prefs["download.default_directory"] == str((tmp_path / "downloads").resolve())


def test_firefox_download_preferences(config, constructors, tmp_path):
    configure(config, browser="firefox", os="mac")

    WebDriverFactory.instantiate_web_driver()

    options = constructors["Firefox"].call_args.kwargs["options"]
    assert options.preferences["browser.download.dir"] == str((tmp_path / "downloads").resolve())
    assert options.preferences["browser.download.folderList"] == 2


def test_get_web_driver_before_instantiation():
    with pytest.raises(DriverNotInitializedError):
        WebDriverFactory.get_web_driver()


def test_reset_quits_session(config, constructors):
    configure(config, browser="chrome", os="linux")
    driver = WebDriverFactory.instantiate_web_driver()

    WebDriverFactory.reset()

    driver.quit.assert_called_once()
    assert not WebDriverFactory.has_web_driver()


def test_remote_grid_session(config, constructors, monkeypatch):
    remote = MagicMock(name="Remote")
    monkeypatch.setattr(remote_grid.webdriver, "Remote", remote)
    configure(
        config,
        browser="chrome",
        saucelabsUserName="grid-user",
        saucelabsAccessKey="grid-key",
        saucelabsPlatform="Windows 11",
        saucelabsTestName="checkout",
    )

    driver = WebDriverFactory.instantiate_web_driver()

    assert driver is remote.return_value
    constructors["Chrome"].assert_not_called()
    kwargs = remote.call_args.kwargs
    assert kwargs["command_executor"] == remote_grid.SAUCELABS_URL
    capabilities = kwargs["options"].capabilities
    assert capabilities["browserVersion"] == "latest"
    assert capabilities["platformName"] == "Windows 11"
    assert capabilities["sauce:options"] == {
        "username": "grid-user",
        "accessKey": "grid-key",
        "name": "checkout",
    }


def test_remote_grid_requires_access_key(config, constructors, monkeypatch):
    monkeypatch.setattr(remote_grid.webdriver, "Remote", MagicMock())
    configure(config, browser="firefox", saucelabsUserName="grid-user")

    with pytest.raises(MissingConfigurationError, match="saucelabsAccessKey"):
        WebDriverFactory.instantiate_web_driver()


def test_remote_grid_rejection(config, constructors, monkeypatch):
    monkeypatch.setattr(
        remote_grid.webdriver, "Remote",
        MagicMock(side_effect=WebDriverException("unauthorized")),
    )
    configure(config, browser="chrome", saucelabsUserName="u", saucelabsAccessKey="k")

    with pytest.raises(DriverConstructionError, match="unauthorized"):
        WebDriverFactory.instantiate_web_driver()


def test_internet_explorer_on_linux_names_both_values(config, constructors):
    configure(config, browser=" IE ", os="linux")

    with pytest.raises(IncompatibleOsBrowserError) as exc_info:
        WebDriverFactory.instantiate_web_driver()

    assert exc_info.value.browser == "internetexplorer"
    assert exc_info.value.operating_system == "linux"
    assert "internetexplorer" in str(exc_info.value)
    assert "linux" in str(exc_info.value)
