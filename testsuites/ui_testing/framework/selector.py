"""
================================================================================
Selector Model
================================================================================

Selector strategies used to locate page elements, and their translation into
Selenium locator tuples.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

from selenium.webdriver.common.by import By

from .exceptions import UnsupportedSelectorError


Locator = Tuple[str, str]


class SelectorType(Enum):
    """Strategies a page element can be located by."""

    ID = "id"
    NAME = "name"
    CLASS = "class"
    CSS = "css"
    XPATH = "xpath"
    TEXT = "text"
    PARTIALTEXT = "partialtext"

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value: Union[str, "SelectorType"]) -> "SelectorType":
        """
        Parse a selector type name, ignoring case and whitespace.

        Accepts the enum values plus the Selenium spellings
        ("class name", "css selector", "link text", "partial link text").

        Raises:
            UnsupportedSelectorError: If the name matches no selector type
        """
        if isinstance(value, cls):
            return value

        normalized = re.sub(r"[\s_-]+", "", str(value)).lower()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedSelectorError(value) from None


_ALIASES: Dict[str, str] = {
    "classname": "class",
    "cssselector": "css",
    "linktext": "text",
    "partiallinktext": "partialtext",
}

# Every SelectorType must have an entry here
_BY_MAPPING: Dict[SelectorType, str] = {
    SelectorType.ID: By.ID,
    SelectorType.NAME: By.NAME,
    SelectorType.CLASS: By.CLASS_NAME,
    SelectorType.CSS: By.CSS_SELECTOR,
    SelectorType.XPATH: By.XPATH,
    SelectorType.TEXT: By.LINK_TEXT,
    SelectorType.PARTIALTEXT: By.PARTIAL_LINK_TEXT,
}


@dataclass(frozen=True)
class Selector:
    """
    Immutable selector: a strategy plus the value to search for.

    Attributes:
        selector_type: Strategy used to find the element
        value: Id, name, CSS, XPath, or link text to search for
    """
    selector_type: SelectorType
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "selector_type", SelectorType.parse(self.selector_type))

    def to_locator(self) -> Locator:
        """
        Translate into a Selenium ``(By, value)`` tuple.

        Raises:
            UnsupportedSelectorError: If the strategy has no Selenium mapping
        """
        try:
            return _BY_MAPPING[self.selector_type], self.value
        except KeyError:
            raise UnsupportedSelectorError(self.selector_type) from None

    def __str__(self) -> str:
        return f'{self.selector_type} "{self.value}"'


def xpath_literal(text: str) -> str:
    """Quote ``text`` as an XPath string literal, even if it holds both quote kinds."""
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


def contains_text_locator(text: str) -> Locator:
    """XPath locator for any element whose own text contains ``text``."""
    return By.XPATH, f"//*[contains(text(),{xpath_literal(text)})]"


def relative_locator(locator: Locator) -> Locator:
    """Make an absolute XPath locator search below the current element."""
    by, value = locator
    if by == By.XPATH and value.startswith("/"):
        return by, "." + value
    return locator


__all__ = [
    "Locator",
    "Selector",
    "SelectorType",
    "contains_text_locator",
    "relative_locator",
    "xpath_literal",
]
