"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for browser tests, providing the WebDriver
session, page objects, and failure screenshots.

Key Features:
- One browser session per test run, created by WebDriverFactory
- Page Object fixtures
- Screenshot capture on failure

================================================================================
"""

from pathlib import Path
from typing import Generator

import allure
import pytest
from loguru import logger
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver

from testsuites.ui_testing.framework.driver_factory import WebDriverFactory
from testsuites.ui_testing.pages.login_page import LoginPage
from testsuites.ui_testing.pages.search_results_page import SearchResultsPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def web_driver() -> Generator[WebDriver, None, None]:
    """
    Session-scoped WebDriver fixture.

    The browser, operating system and driver come from configuration
    (UITEST_BROWSER, UITEST_OS, UITEST_DRIVER, ...).
    """
    driver = WebDriverFactory.instantiate_web_driver()
    yield driver
    WebDriverFactory.reset()


@pytest.fixture(scope="function")
def clean_session(web_driver: WebDriver) -> Generator[WebDriver, None, None]:
    """Clear cookies after each test so tests do not share a login."""
    yield web_driver
    web_driver.delete_all_cookies()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(clean_session: WebDriver) -> LoginPage:
    """Provides LoginPage instance."""
    return LoginPage(clean_session)


@pytest.fixture
def search_results_page(clean_session: WebDriver) -> SearchResultsPage:
    """Provides SearchResultsPage instance."""
    return SearchResultsPage(clean_session)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture screenshots on test failure.

    Takes a screenshot of the live session when a UI test fails and attaches
    it to the Allure report.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed and WebDriverFactory.has_web_driver():
        try:
            allure.attach(
                WebDriverFactory.get_web_driver().get_screenshot_as_png(),
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
        except WebDriverException as e:
            # Log but don't fail if screenshot capture fails
            logger.warning(f"Failed to capture screenshot on failure: {e.msg}")


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def screenshots_dir(tmp_path: Path) -> Path:
    """
    Provides a temporary directory for screenshots.
    """
    screenshots = tmp_path / "screenshots"
    screenshots.mkdir(exist_ok=True)
    return screenshots


@pytest.fixture
def test_data():
    """
    Provides common test data for UI tests.
    """
    return {
        "valid_user": {
            "username": "test_user",
            "password": "test_password",
        },
        "invalid_user": {
            "username": "invalid_user",
            "password": "wrong_password",
        },
        "search": {
            "term": "Smith",
            "row_text": "Sally Smith",
        },
    }
