"""
================================================================================
UI Testing Framework
================================================================================

Selenium-based Page Object Model framework.

Components:
    - selector: Selector strategies and their Selenium locators
    - page_element: Late-binding element with wait and retry policies
    - elements: Typed elements (Checkbox, Textbox, Radiobutton, ...)
    - table: Table element with row search
    - page_base: Base page object
    - driver_factory: Browser session creation for the OS/browser matrix
    - remote_grid: Remote grid session creation

Author: Automation Team
License: MIT
================================================================================
"""

from .driver_factory import WebDriverFactory
from .elements import Button, Checkbox, Link, Radiobutton, Textbox
from .exceptions import (
    DriverConstructionError,
    DriverNotExecutableError,
    DriverNotInitializedError,
    ElementNotClickableError,
    ElementNotDeclaredError,
    ElementNotFoundError,
    FrameworkError,
    IncompatibleOsBrowserError,
    KeySimulationError,
    UnknownOperatingSystemError,
    UnsupportedBrowserError,
    UnsupportedSelectorError,
)
from .page_base import BasePage
from .page_element import PageElement
from .selector import Selector, SelectorType
from .table import Table

__all__ = [
    "BasePage",
    "Button",
    "Checkbox",
    "DriverConstructionError",
    "DriverNotExecutableError",
    "DriverNotInitializedError",
    "ElementNotClickableError",
    "ElementNotDeclaredError",
    "ElementNotFoundError",
    "FrameworkError",
    "IncompatibleOsBrowserError",
    "KeySimulationError",
    "Link",
    "PageElement",
    "Radiobutton",
    "Selector",
    "SelectorType",
    "Table",
    "Textbox",
    "UnknownOperatingSystemError",
    "UnsupportedBrowserError",
    "UnsupportedSelectorError",
    "WebDriverFactory",
]
