"""
================================================================================
Search Results Page Object
================================================================================

Example page object holding a paged results table, used with the table steps:

    click_locator_in_row_containing(page, "Search Results Table",
                                    "text", "Edit", "text", "Sally Smith")

The table is created once per page object so the result pages it stores
stay available to later steps.

================================================================================
"""

from __future__ import annotations

from typing import Optional

from selenium.webdriver.remote.webdriver import WebDriver

from testsuites.ui_testing.framework.elements import Link, Textbox
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.selector import SelectorType
from testsuites.ui_testing.framework.table import Table


class SearchResultsPage(BasePage):
    """Search page with a results table and pagination links."""

    URL_PATH = "/search"
    PAGE_TITLE = "Search"

    def __init__(self, driver: Optional[WebDriver] = None, base_url: str = ""):
        super().__init__(driver, base_url)
        self.search_results_table = Table(SelectorType.ID, "search-results", driver=self.driver)

    @property
    def search_textbox(self) -> Textbox:
        return Textbox(SelectorType.NAME, "q", driver=self.driver)

    @property
    def next_page_link(self) -> Link:
        return Link(SelectorType.PARTIALTEXT, "Next", driver=self.driver)

    def search(self, text: str) -> "SearchResultsPage":
        """Type ``text`` into the search box and submit it."""
        self.search_textbox.type(text + "\n")
        return self

    def next_page(self) -> "SearchResultsPage":
        self.next_page_link.click()
        return self
