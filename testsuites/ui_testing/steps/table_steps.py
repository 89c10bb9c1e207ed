"""
================================================================================
Table Steps
================================================================================

Step implementations for working with tables. Each function receives the
arguments a Gherkin step captures, as strings, and calls the table element.

Step wording these functions implement:
    I find the <element> link in the row of the <table> containing the <key> value and click it
    I find the <table> and click the (text|xpath) <x> in the row containing the (text|xpath) <y>
    I find the (1st|2nd|...|last) row in the <table> and click the (text|xpath|value for) <x>
    I view the <n>th page of results from the <table>

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from typing import Union

from selenium.webdriver.common.by import By

from uitest_tools.common.config_loader import ConfigLoader

from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.selector import Locator, contains_text_locator
from testsuites.ui_testing.framework.table import LAST_ROW


def build_locator(locator_type: str, value: str) -> Locator:
    """
    Build the locator a step refers to.

    Args:
        locator_type: "xpath" for a raw XPath, "text" for contained text
        value: XPath expression or text

    Raises:
        ValueError: For any other locator type
    """
    kind = locator_type.strip().lower()
    if kind == "xpath":
        return By.XPATH, value
    if kind == "text":
        return contains_text_locator(value)
    raise ValueError(f"Unknown locator type '{locator_type}'. Use text or xpath.")


def parse_ordinal(ordinal: Union[str, int]) -> int:
    """
    Convert a captured ordinal into a row number.

    "1", "1st", "22nd" -> 1, 1, 22; "la", "last" -> -1.

    Raises:
        ValueError: If the ordinal is not a number or "last"
    """
    if isinstance(ordinal, int):
        return ordinal

    text = ordinal.strip().lower()
    if text in ("la", "last"):
        return LAST_ROW

    match = re.fullmatch(r"(\d+)(?:st|nd|rd|th)?", text)
    if match is None:
        raise ValueError(f"Invalid row ordinal '{ordinal}'")
    return int(match.group(1))


def click_link_in_row_containing_stored_value(
    page: BasePage,
    element_name: str,
    table_name: str,
    key: str,
) -> None:
    """
    I find the <element_name> link in the row of the <table_name> containing
    the <key> value and click it.
    """
    text = ConfigLoader().get_value(key)
    page.get_element_as_table(table_name).click_element_in_row_that_contains(text, element_name)


def click_locator_in_row_containing(
    page: BasePage,
    table_name: str,
    click_locator_type: str,
    element_to_click: str,
    match_locator_type: str,
    element_to_match: str,
) -> None:
    """
    I find the <table_name> and click the (text|xpath) <element_to_click> in
    the row containing the (text|xpath) <element_to_match>.
    """
    click_locator = build_locator(click_locator_type, element_to_click)
    match_locator = build_locator(match_locator_type, element_to_match)
    page.get_element_as_table(table_name).click_element_in_row_that_contains(
        match_locator, click_locator
    )


def click_in_ordinal_row(
    page: BasePage,
    ordinal: Union[str, int],
    table_name: str,
    click_locator_type: str,
    element_to_click: str,
) -> None:
    """
    I find the <ordinal> row in the <table_name> and click the
    (text|xpath|value for) <element_to_click>.
    """
    if click_locator_type.strip().lower() == "value for":
        click_locator = contains_text_locator(ConfigLoader().get_value(element_to_click))
    else:
        click_locator = build_locator(click_locator_type, element_to_click)

    page.get_element_as_table(table_name).click_element_in_row_that_contains(
        parse_ordinal(ordinal), click_locator
    )


def view_page_of_results(page: BasePage, page_number: Union[str, int], table_name: str) -> None:
    """I view the <page_number> page of results from the <table_name>."""
    page.get_element_as_table(table_name).store_table(parse_ordinal(page_number))


__all__ = [
    "build_locator",
    "click_in_ordinal_row",
    "click_link_in_row_containing_stored_value",
    "click_locator_in_row_containing",
    "parse_ordinal",
    "view_page_of_results",
]
