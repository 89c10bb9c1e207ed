"""
Fixtures for framework unit tests.

Every test gets a fresh configuration singleton backed by a temporary YAML
file, no cached browser session, and no UITEST_* overrides from the calling
shell. WebDriver sessions and elements are MagicMocks.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Dict, Generator
from unittest.mock import MagicMock

import pytest
import yaml
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from uitest_tools.common.config_loader import ENV_PREFIX, ConfigLoader
from uitest_tools.common.download_manager import reset_download_directory

from testsuites.ui_testing.framework.driver_factory import WebDriverFactory


@pytest.fixture(autouse=True)
def _isolated_framework_state(monkeypatch) -> Generator[None, None, None]:
    """Reset singletons and strip UITEST_* variables around each test."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)

    ConfigLoader.reset()
    WebDriverFactory._driver = None
    reset_download_directory()
    yield
    ConfigLoader.reset()
    WebDriverFactory._driver = None
    reset_download_directory()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Dict], ConfigLoader]:
    """Write a YAML config file and load the singleton from it."""

    def _write(data: Dict) -> ConfigLoader:
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.dump(data), encoding="utf-8")
        ConfigLoader.reset()
        return ConfigLoader(config_path=config_path)

    return _write


@pytest.fixture
def config(write_config, tmp_path: Path) -> ConfigLoader:
    """Configuration with short timeouts and a temporary download directory."""
    return write_config({
        "timeout": 0.05,
        "download": str(tmp_path / "downloads"),
    })


@pytest.fixture
def fake_driver() -> MagicMock:
    return MagicMock(spec=WebDriver)


@pytest.fixture
def web_element() -> MagicMock:
    """A visible, enabled element."""
    element = MagicMock(spec=WebElement)
    element.is_displayed.return_value = True
    element.is_enabled.return_value = True
    element.tag_name = "div"
    return element


@pytest.fixture
def found(fake_driver: MagicMock, web_element: MagicMock) -> MagicMock:
    """Make every lookup on the fake driver return ``web_element``."""
    fake_driver.find_elements.return_value = [web_element]
    fake_driver.find_element.return_value = web_element
    return web_element
