"""
================================================================================
UI Framework Exceptions
================================================================================

Every failure raised by the driver factory and the page elements derives from
FrameworkError, so a step definition can tell framework failures apart from
assertion failures in the test itself.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional


class FrameworkError(Exception):
    """Base class for UI framework failures."""
    pass


# =============================================================================
# Driver Factory
# =============================================================================

class WebDriverFactoryError(FrameworkError):
    """Raised when a browser session cannot be created."""
    pass


class UnsupportedBrowserError(WebDriverFactoryError):
    """Raised when the configured browser is not one the factory can build."""

    def __init__(self, browser: str):
        self.browser = browser
        super().__init__(
            f"Invalid browser type '{browser}' passed to WebDriverFactory. "
            f"Could not resolve the reference. Check your spelling. "
            f"Valid options are chrome, firefox, internetexplorer (ie) and safari."
        )


class IncompatibleOsBrowserError(WebDriverFactoryError):
    """Raised when the browser cannot run on the configured operating system."""

    def __init__(self, operating_system: str, browser: str):
        self.operating_system = operating_system
        self.browser = browser
        super().__init__(
            f"Invalid operating system '{operating_system}' passed to "
            f"WebDriverFactory for the {browser} driver."
        )


class UnknownOperatingSystemError(WebDriverFactoryError):
    """Raised when the configured operating system is not recognized."""

    def __init__(self, operating_system: str):
        self.operating_system = operating_system
        super().__init__(
            f"Invalid operating system '{operating_system}' passed to "
            f"WebDriverFactory. Could not resolve the reference. Check your "
            f"spelling. Valid options are linux, mac and windows."
        )


class DriverNotExecutableError(WebDriverFactoryError):
    """Raised when the driver binary is missing or lacks execute permission."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(
            "The driver does not have execute permissions or cannot be found. "
            "Make sure it is in the correct location. On linux/mac run chmod +x "
            "on the driver. If you passed in a location using the driver "
            "property, ensure the path is correct and the driver is "
            f"executable.\n{detail}"
        )


class DriverConstructionError(WebDriverFactoryError):
    """Raised when the browser session fails to start for any other reason."""
    pass


class DriverNotInitializedError(WebDriverFactoryError):
    """Raised when the session is requested before it has been created."""

    def __init__(self):
        super().__init__(
            "WebDriver has not been created. Call "
            "WebDriverFactory.instantiate_web_driver() before "
            "WebDriverFactory.get_web_driver()."
        )


# =============================================================================
# Page Elements
# =============================================================================

class UnsupportedSelectorError(FrameworkError):
    """Raised when a selector type has no locator mapping."""

    def __init__(self, selector_type: object):
        self.selector_type = selector_type
        super().__init__(
            f'Unhandled selector type "{selector_type}" passed to the page '
            f"element. Valid options are id, name, class, css, xpath, text "
            f"and partialtext."
        )


class ElementNotFoundError(FrameworkError):
    """Raised when an element cannot be located before the timeout."""

    def __init__(
        self,
        element_type: str,
        selector_type: object,
        selector_value: str,
        timeout: Optional[float] = None,
    ):
        self.element_type = element_type
        self.selector_type = selector_type
        self.selector_value = selector_value
        self.timeout = timeout
        waited = f" after waiting {timeout:g} seconds" if timeout is not None else ""
        super().__init__(
            f'{element_type} element does not exist or is not visible using '
            f'the {selector_type} value "{selector_value}"{waited}. Assure you '
            f"are on the page you think you are on, and that the element "
            f"identifier you are using is correct."
        )


class ElementNotClickableError(FrameworkError):
    """Raised when both the native click and the scripted click fail."""

    def __init__(
        self,
        element_type: str,
        selector_type: object,
        selector_value: str,
        wait_time: float,
    ):
        self.element_type = element_type
        self.selector_type = selector_type
        self.selector_value = selector_value
        self.wait_time = wait_time
        super().__init__(
            f'{element_type} element is not visible using the {selector_type} '
            f'value "{selector_value}" and cannot be clicked. Make sure the '
            f"element is visible on the page when you attempt to click it. "
            f"Clicking was attempted once with a mouse click and once with "
            f"JavaScript. The total wait time was {wait_time:g} seconds."
        )


class KeySimulationError(FrameworkError):
    """Raised when synthesized key presses cannot be delivered."""
    pass


class ElementNotDeclaredError(FrameworkError):
    """Raised when a page object declares no element with the requested name."""

    def __init__(self, page_name: str, element_name: str, expected_type: str = "PageElement"):
        self.page_name = page_name
        self.element_name = element_name
        self.expected_type = expected_type
        super().__init__(
            f"{page_name} has no {expected_type} named '{element_name}'. "
            f"Declare it on the page object as an attribute or property."
        )


__all__ = [
    "FrameworkError",
    "WebDriverFactoryError",
    "UnsupportedBrowserError",
    "IncompatibleOsBrowserError",
    "UnknownOperatingSystemError",
    "DriverNotExecutableError",
    "DriverConstructionError",
    "DriverNotInitializedError",
    "UnsupportedSelectorError",
    "ElementNotFoundError",
    "ElementNotClickableError",
    "KeySimulationError",
    "ElementNotDeclaredError",
]
