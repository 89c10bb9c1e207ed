"""
================================================================================
Table Element
================================================================================

A PageElement for HTML tables, with row search used by the table steps.

Rows can be matched by:
    - text contained anywhere in the row ("Sally Smith")
    - a locator that must match inside the row ((By.XPATH, "//img[1]"))
    - ordinal position, 1-based, where -1 means the last row

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

import allure
from loguru import logger
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from .exceptions import ElementNotFoundError
from .page_element import PageElement
from .selector import Locator, SelectorType, contains_text_locator, relative_locator


LAST_ROW = -1

RowMatch = Union[int, str, Locator]


class Table(PageElement):
    """
    Table implementation of a PageElement.

    Usage:
        >>> results = Table(SelectorType.ID, "search-results")
        >>> results.click_element_in_row_that_contains("Sally Smith", "Edit")
        >>> results.click_element_in_row_that_contains(-1, (By.XPATH, "//img"))
        >>> results.store_table(1)
    """

    BODY_ROWS = (By.XPATH, "./tbody/tr")
    ALL_ROWS = (By.TAG_NAME, "tr")
    HEADER_CELLS = (By.TAG_NAME, "th")
    DATA_CELLS = (By.TAG_NAME, "td")

    def __init__(
        self,
        selector_type: Union[SelectorType, str],
        selector_value: str,
        driver: Optional[WebDriver] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(selector_type, selector_value, driver=driver, timeout=timeout)
        self._stored_pages: Dict[int, List[List[str]]] = {}

    def get_row_elements(self) -> List[WebElement]:
        """Data rows of the table (tbody rows when there is a tbody)."""
        table = self.element()
        rows = table.find_elements(*self.BODY_ROWS)
        if not rows:
            rows = [
                row for row in table.find_elements(*self.ALL_ROWS)
                if row.find_elements(*self.DATA_CELLS)
            ]
        return rows

    def get_headers(self) -> List[str]:
        """Text of the header cells."""
        return [cell.text for cell in self.element().find_elements(*self.HEADER_CELLS)]

    def get_rows(self) -> List[List[str]]:
        """Text of every data cell, row by row."""
        return [
            [cell.text for cell in row.find_elements(*self.DATA_CELLS)]
            for row in self.get_row_elements()
        ]

    def store_table(self, page_number: int) -> List[List[str]]:
        """
        Store the rows currently shown as page ``page_number`` of the results.

        Returns:
            The stored rows
        """
        rows = self.get_rows()
        self._stored_pages[page_number] = rows
        logger.debug(f"Stored {len(rows)} rows of {self!r} as page {page_number}")
        return rows

    def get_stored_page(self, page_number: int) -> List[List[str]]:
        """
        Rows stored earlier with store_table().

        Raises:
            KeyError: If that page was never stored
        """
        if page_number not in self._stored_pages:
            raise KeyError(f"Page {page_number} of {self!r} has not been stored")
        return self._stored_pages[page_number]

    def find_row(self, row_match: RowMatch) -> WebElement:
        """
        Find the first row matching ``row_match``.

        Args:
            row_match: Ordinal (1-based, -1 for last), text, or locator

        Raises:
            ElementNotFoundError: If no row matches
        """
        rows = self.get_row_elements()

        if isinstance(row_match, int):
            if row_match == LAST_ROW and rows:
                return rows[-1]
            if 1 <= row_match <= len(rows):
                return rows[row_match - 1]
        elif isinstance(row_match, str):
            for row in rows:
                if row_match in row.text:
                    return row
        else:
            locator = relative_locator(row_match)
            for row in rows:
                if row.find_elements(*locator):
                    return row

        raise ElementNotFoundError(f"{self.element_type} row", "match", str(row_match))

    def click_element_in_row_that_contains(
        self,
        row_match: RowMatch,
        target: Union[str, Locator],
    ) -> "Table":
        """
        Click an element inside the first row matching ``row_match``.

        Args:
            row_match: Ordinal (1-based, -1 for last), text, or locator
            target: Locator of the element to click, or text it contains

        Returns:
            self (for chaining)

        Raises:
            ElementNotFoundError: If no row matches or the row lacks the target
        """
        locator = contains_text_locator(target) if isinstance(target, str) else target
        locator = relative_locator(locator)

        with allure.step(f"Click {locator[1]} in row {row_match} of {self!r}"):
            row = self.find_row(row_match)
            try:
                row.find_element(*locator).click()
            except NoSuchElementException as e:
                raise ElementNotFoundError(
                    f"{self.element_type} cell", locator[0], locator[1]
                ) from e
        return self


__all__ = [
    "LAST_ROW",
    "Table",
]
