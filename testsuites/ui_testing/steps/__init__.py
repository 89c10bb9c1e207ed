"""
================================================================================
Step Implementations
================================================================================

Functions backing natural-language test steps. Each takes a page object plus
the strings a step captures.

Author: Automation Team
License: MIT
================================================================================
"""

from .table_steps import (
    build_locator,
    click_in_ordinal_row,
    click_link_in_row_containing_stored_value,
    click_locator_in_row_containing,
    parse_ordinal,
    view_page_of_results,
)

__all__ = [
    "build_locator",
    "click_in_ordinal_row",
    "click_link_in_row_containing_stored_value",
    "click_locator_in_row_containing",
    "parse_ordinal",
    "view_page_of_results",
]
