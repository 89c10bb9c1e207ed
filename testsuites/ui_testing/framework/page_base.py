"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation and URL handling
    - Lookup of declared elements by their natural-language name, so step
      definitions can say "the Search Results Table"
    - Screenshot and debugging utilities

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from selenium.webdriver.remote.webdriver import WebDriver

from uitest_tools.common.config_loader import ConfigLoader

from .driver_factory import WebDriverFactory
from .exceptions import ElementNotDeclaredError
from .page_element import PageElement
from .table import Table


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

DEFAULT_BASE_URL = "http://localhost:3000"


def element_attribute_name(name: str) -> str:
    """
    Convert a natural-language element name into an attribute name.

    "Search Results Table" -> "search_results_table"
    """
    return re.sub(r"[^0-9a-z]+", "_", name.strip().lower()).strip("_")


class BasePage:
    """
    Base class for all page objects.

    Elements are declared as attributes or properties holding PageElement
    instances. Nothing is looked up until an element is used.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"

            @property
            def username_field(self):
                return Textbox(SelectorType.ID, "username", driver=self.driver)

            def login(self, username: str, password: str):
                self.username_field.type(username)
                ...
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        driver: Optional[WebDriver] = None,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            driver: Selenium session. Defaults to the WebDriverFactory session.
            base_url: Base URL for the application. Defaults to the
                ``base_url`` configuration key.
        """
        self.driver = driver if driver is not None else WebDriverFactory.get_web_driver()
        if not base_url:
            base_url = ConfigLoader().get_optional_property("base_url", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    @property
    def name(self) -> str:
        return type(self).__name__

    def navigate(self) -> "BasePage":
        """Navigate to this page."""
        with allure.step(f"Navigate to {self.URL_PATH}"):
            self.driver.get(self.url)
            logger.debug(f"Navigated to: {self.url}")
        return self

    def navigate_to(self, path: str) -> None:
        """
        Navigate to specific path.

        Args:
            path: URL path to navigate to
        """
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path}"):
            self.driver.get(full_url)

    def is_current_page(self) -> bool:
        """Whether the browser shows this page, judged by URL path and title."""
        current_url = self.driver.current_url or ""
        if self.URL_PATH not in current_url:
            return False
        return not self.PAGE_TITLE or self.PAGE_TITLE in (self.driver.title or "")

    # =========================================================================
    # Element lookup
    # =========================================================================

    def element(self, name: str) -> PageElement:
        """
        Return the element declared under ``name``.

        Args:
            name: Natural-language or attribute name of the element

        Raises:
            ElementNotDeclaredError: If the page declares no such element
        """
        attribute = element_attribute_name(name)
        element = getattr(self, attribute, None)
        if not isinstance(element, PageElement):
            raise ElementNotDeclaredError(self.name, name)
        return element

    def get_element_as_table(self, name: str) -> Table:
        """
        Return the table declared under ``name``.

        Raises:
            ElementNotDeclaredError: If the page declares no table with that name
        """
        element = self.element(name)
        if not isinstance(element, Table):
            raise ElementNotDeclaredError(self.name, name, expected_type="Table")
        return element

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    def screenshot(
        self,
        name: str,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        png = self.driver.get_screenshot_as_png()
        filepath.write_bytes(png)

        if attach_to_allure:
            allure.attach(
                png,
                name=name,
                attachment_type=allure.attachment_type.PNG
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "BasePage",
    "element_attribute_name",
]
