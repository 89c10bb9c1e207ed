"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element declarations (as PageElement properties)
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .search_results_page import SearchResultsPage

__all__ = [
    "LoginPage",
    "SearchResultsPage",
]
