"""
================================================================================
Test Suite Pytest Configuration
================================================================================

This module registers the markers used across the test suite and tags tests
by the directory they live in.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser tests that need a live WebDriver session"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests that run without a browser"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Tags tests by directory so `-m unit` and `-m ui` select them.
    """
    for item in items:
        if "ui_testing" in str(item.fspath):
            item.add_marker(pytest.mark.ui)

        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Selenium Page Object Test Framework",
        "=" * 60,
        "",
    ]
