"""
================================================================================
Login Page Object
================================================================================

Example page object built from typed page elements.

Elements are declared as properties, so nothing is looked up until a test
uses them, and step definitions can reach them by name:

    page.element("Username Textbox").type("demo_user")

NOTE:
  Selectors are generic examples. Real projects should prefer stable
  ``data-testid`` attributes.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure

from uitest_tools.common.config_loader import ConfigLoader

from testsuites.ui_testing.framework.elements import Button, Checkbox, Textbox
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.page_element import PageElement
from testsuites.ui_testing.framework.selector import SelectorType


class LoginPage(BasePage):
    """Login page object."""

    URL_PATH = "/login"
    PAGE_TITLE = "Login"

    @property
    def username_textbox(self) -> Textbox:
        return Textbox(SelectorType.ID, "username", driver=self.driver)

    @property
    def password_textbox(self) -> Textbox:
        return Textbox(SelectorType.ID, "password", driver=self.driver)

    @property
    def remember_me_checkbox(self) -> Checkbox:
        return Checkbox(SelectorType.NAME, "remember", driver=self.driver)

    @property
    def login_button(self) -> Button:
        return Button(SelectorType.CSS, "button[type='submit']", driver=self.driver)

    @property
    def error_message(self) -> PageElement:
        return PageElement(SelectorType.CLASS, "error-message", driver=self.driver)

    @allure.step("Open login page")
    def open(self) -> "LoginPage":
        """Navigate to the login page."""
        self.navigate()
        return self

    def verify_form_displayed(self) -> bool:
        """Verify login form elements are visible."""
        return (
            self.username_textbox.is_displayed(2)
            and self.password_textbox.is_displayed(2)
            and self.login_button.is_displayed(2)
        )

    @allure.step("Login (username={username})")
    def login(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        remember_me: bool = False,
    ) -> None:
        """
        Perform login.

        Args:
            username: Username to login. Defaults to the ``username`` config key.
            password: Password to login. Defaults to the ``password`` config key.
            remember_me: Whether to tick the remember-me box.
        """
        config = ConfigLoader()
        if username is None:
            username = config.get_property("username")
        if password is None:
            password = config.get_property("password")

        self.username_textbox.type(username)
        self.password_textbox.type(password)
        if remember_me:
            self.remember_me_checkbox.check()
        self.login_button.click()

    def verify_error_displayed(self) -> bool:
        """Verify an error message is visible after failed login."""
        return self.error_message.is_displayed(2)
