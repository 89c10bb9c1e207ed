"""
================================================================================
Page Element
================================================================================

Late-binding handle around a single element on a web page.

A PageElement stores only how to find its element. The element itself is
looked up again every time an operation runs, so page objects can declare
their elements before the page is loaded, and elements survive navigation
and DOM re-rendering at the cost of one lookup per call.

Wait policies:
    - Resolution polls every 10 ms up to the default timeout
    - click() waits for clickability, then falls back to a JavaScript click
    - is_enabled()/is_displayed() retry stale elements 5 times and return
      False rather than raising
    - does_not_exist() gives up after 250 ms

Usage:
    >>> submit = PageElement(SelectorType.ID, "submit")
    >>> submit.click()
    >>> submit.has_class("active")
    True

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from typing import Optional, Union

import allure
from loguru import logger
from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC

from uitest_tools.common.timeouts import get_default_timeout

from .driver_factory import WebDriverFactory
from .exceptions import ElementNotClickableError, ElementNotFoundError, KeySimulationError
from .selector import Selector, SelectorType
from .waits import (
    DEFAULT_POLL_INTERVAL,
    RetryConfig,
    WaitOutcome,
    WaitResult,
    retry_on_stale,
    wait_until,
)


class PageElement:
    """
    Base element class providing late binding to a Selenium WebElement.

    Subclasses such as Checkbox or Textbox only add clearer names for the
    operations defined here.

    Attributes:
        selector: How the element is located
        driver: Session the element is looked up in (not owned)
    """

    # Default wait for is_enabled()/is_displayed(), in seconds
    STATE_TIMEOUT: float = 10

    # Budget for does_not_exist(), in seconds
    ABSENCE_TIMEOUT: float = 0.25

    # Stale element retries for state queries
    STALE_RETRIES: int = 5

    # Pause around each synthesized key press, in seconds
    KEY_PRESS_DELAY: float = 1.0

    def __init__(
        self,
        selector_type: Union[SelectorType, str],
        selector_value: str,
        driver: Optional[WebDriver] = None,
        timeout: Optional[float] = None,
    ):
        """
        Declare an element without looking it up.

        Args:
            selector_type: Strategy used to find the element
            selector_value: Value for the strategy
            driver: Session to use. Defaults to the WebDriverFactory session.
            timeout: Lookup timeout in seconds. Defaults to the configured timeout.
        """
        self.selector = Selector(selector_type, selector_value)
        self.driver = driver if driver is not None else WebDriverFactory.get_web_driver()
        self._timeout = timeout

    def __repr__(self) -> str:
        return f"{self.element_type}({self.selector})"

    @property
    def element_type(self) -> str:
        """Logical element type used in diagnostics."""
        return type(self).__name__

    @property
    def selector_type(self) -> SelectorType:
        return self.selector.selector_type

    @property
    def selector_value(self) -> str:
        return self.selector.value

    @property
    def timeout(self) -> float:
        """Lookup timeout in seconds."""
        if self._timeout is not None:
            return self._timeout
        return get_default_timeout()

    # =========================================================================
    # Resolution
    # =========================================================================

    def element(self, timeout: Optional[float] = None) -> WebElement:
        """
        Find the element on the current page.

        An empty lookup counts as "not yet"; polling continues every 10 ms
        until the timeout runs out.

        Args:
            timeout: Seconds to wait. Defaults to the element timeout.

        Returns:
            The Selenium WebElement

        Raises:
            ElementNotFoundError: If nothing matches before the timeout
            UnsupportedSelectorError: If the selector type has no locator
        """
        locator = self.selector.to_locator()
        wait_time = self.timeout if timeout is None else timeout

        def first_match(driver: WebDriver):
            matches = driver.find_elements(*locator)
            return matches[0] if matches else False

        try:
            element = wait_until(
                self.driver,
                first_match,
                wait_time,
                poll_interval=DEFAULT_POLL_INTERVAL,
                ignored_exceptions=(NoSuchElementException,),
            )
        except (TimeoutException, NoSuchElementException) as e:
            raise ElementNotFoundError(
                self.element_type, self.selector_type, self.selector_value, wait_time
            ) from e

        logger.trace(f"Resolved {self!r}")
        return element

    def to_web_element(self) -> WebElement:
        """Return a freshly resolved Selenium WebElement for direct use."""
        return self.element()

    # =========================================================================
    # Actions
    # =========================================================================

    def send_keys(self, text: str) -> "PageElement":
        """
        Click into the element, clear it, and type ``text``.

        Returns:
            self (for chaining)
        """
        with allure.step(f"Type into {self!r}"):
            self.element().click()
            self.element().clear()
            self.element().send_keys(text)
        return self

    def javascript_send_keys(self, text: str) -> "PageElement":
        """
        Set the element's value with JavaScript, without firing key events.

        Returns:
            self (for chaining)
        """
        with allure.step(f"Set value of {self!r} with JavaScript"):
            self.driver.execute_script("arguments[0].value = arguments[1];", self.element(), text)
        return self

    def press_keys(self, text: str) -> "PageElement":
        """
        Press each key of ``text`` with focus on the element.

        Useful when send_keys() is ignored because a mask or hidden field
        listens for individual key events.

        Returns:
            self (for chaining)

        Raises:
            ElementNotFoundError: If the element cannot be found
            KeySimulationError: If the browser rejects the key events
        """
        with allure.step(f"Press keys on {self!r}"):
            element = self.element()
            try:
                if element.tag_name == "input":
                    element.send_keys("")
                else:
                    ActionChains(self.driver).move_to_element(element).perform()

                time.sleep(self.KEY_PRESS_DELAY)
                for char in text:
                    logger.debug(f"Pressing key {char!r}")
                    ActionChains(self.driver).key_down(char).perform()
                    time.sleep(self.KEY_PRESS_DELAY)
                    ActionChains(self.driver).key_up(char).perform()
                    time.sleep(self.KEY_PRESS_DELAY)
            except WebDriverException as e:
                raise KeySimulationError(
                    f"Could not press keys on {self!r}: {e.msg}"
                ) from e
        return self

    def click(self) -> "PageElement":
        """
        Click the element.

        Waits up to the default timeout for the element to be clickable, so
        pop-ups and AJAX updates do not fail a test. If the native click
        fails, the click is retried once with JavaScript. If the element has
        gone by then, or the scripted click fails too, the click is reported
        as not clickable.

        Returns:
            self (for chaining)

        Raises:
            ElementNotFoundError: If the element cannot be found
            ElementNotClickableError: If both click methods fail
        """
        wait_time = self.timeout
        with allure.step(f"Click {self!r}"):
            try:
                wait_until(
                    self.driver,
                    EC.element_to_be_clickable(self.element()),
                    wait_time,
                ).click()
            except WebDriverException as e:
                logger.warning(f"Native click failed on {self!r}, retrying with JavaScript: {e.msg}")
                try:
                    self.driver.execute_script("arguments[0].click();", self.element())
                except (WebDriverException, ElementNotFoundError) as e2:
                    error = ElementNotClickableError(
                        self.element_type, self.selector_type, self.selector_value, wait_time
                    )
                    logger.error(str(error))
                    raise error from e2
        return self

    def clear(self) -> "PageElement":
        """
        Clear the element: empties text boxes and un-checks check boxes.

        Returns:
            self (for chaining)
        """
        with allure.step(f"Clear {self!r}"):
            self.element().clear()
        return self

    # =========================================================================
    # State queries
    # =========================================================================

    def _wait_for_state(self, condition_factory, seconds: float) -> WaitResult:
        """Run one bounded wait, mapping its failures to a WaitResult."""
        try:
            element = wait_until(self.driver, condition_factory(self.element(seconds)), seconds)
        except StaleElementReferenceException:
            return WaitResult(WaitOutcome.STALE)
        except (TimeoutException, ElementNotFoundError):
            return WaitResult(WaitOutcome.TIMED_OUT)
        return WaitResult(WaitOutcome.SATISFIED, element)

    def is_enabled(self, seconds: Optional[float] = None) -> bool:
        """
        Whether the element becomes clickable within ``seconds``.

        Never raises: stale elements are retried 5 times, and a timeout or
        missing element returns False.
        """
        seconds = self.STATE_TIMEOUT if seconds is None else seconds
        result = retry_on_stale(
            lambda: self._wait_for_state(EC.element_to_be_clickable, seconds),
            RetryConfig(max_retries=self.STALE_RETRIES),
        )
        if not result.satisfied:
            return False
        try:
            return result.value.is_enabled()
        except StaleElementReferenceException:
            return False

    def is_displayed(self, seconds: Optional[float] = None) -> bool:
        """
        Whether the element becomes visible within ``seconds``.

        Never raises: stale elements are retried 5 times, and a timeout or
        missing element returns False.
        """
        seconds = self.STATE_TIMEOUT if seconds is None else seconds
        result = retry_on_stale(
            lambda: self._wait_for_state(EC.visibility_of, seconds),
            RetryConfig(max_retries=self.STALE_RETRIES),
        )
        if not result.satisfied:
            return False
        try:
            return result.value.is_displayed()
        except StaleElementReferenceException:
            return False

    def is_selected(self) -> bool:
        """Whether the element (check box, radio button, option) is selected."""
        return self.element().is_selected()

    def does_not_exist(self) -> bool:
        """
        Whether the element is absent (or hidden) within 250 milliseconds.

        Use this when an element is expected to be gone, without waiting for
        the full default timeout.

        Raises:
            UnsupportedSelectorError: If the selector type has no locator
        """
        locator = self.selector.to_locator()
        try:
            result = wait_until(
                self.driver,
                EC.invisibility_of_element_located(locator),
                self.ABSENCE_TIMEOUT,
            )
        except TimeoutException:
            result = False
        logger.trace(f"does_not_exist({self!r}) -> {bool(result)}")
        return bool(result)

    def get_text(self) -> str:
        """Visible text of the element."""
        return self.element().text

    def has_class(self, class_name: str) -> bool:
        """
        Whether ``class_name`` is one of the element's classes.

        Example: an active tab has class="tab active".
        """
        classes = self.element().get_attribute("class") or ""
        logger.debug(f"Classes found on {self!r}: {classes}")
        return class_name in classes.split()

    def attribute_equals(self, attribute: str, value: str) -> bool:
        """
        Whether ``attribute`` equals ``value`` or contains it as a
        space-separated token.

        Example: style="display:none".
        """
        values = self.element().get_attribute(attribute)
        logger.debug(f"Values found for attribute {attribute} on {self!r}: {values}")
        if values is None:
            return False
        return values == value or value in values.split(" ")


__all__ = [
    "PageElement",
]
