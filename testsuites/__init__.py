"""
Test suites package.

Holds the Selenium page object framework (`ui_testing/framework`), page
objects and step functions, the browser tests, and the framework unit tests.
Kept importable so `run_tests.py` and page objects can import the framework
by package path.
"""
