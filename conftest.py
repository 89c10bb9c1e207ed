"""
Repository-level pytest configuration.

Provides the project root and safe defaults for demo environments. Values
below are placeholders; real projects should load credentials from a secret
manager in CI/CD.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from uitest_tools.common import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """
    Set demo credentials if not already provided by the user/CI.

    Browser selection (UITEST_BROWSER, UITEST_OS) is left to configuration.
    """
    defaults = {
        "UITEST_USERNAME": "demo_user",
        "UITEST_PASSWORD": "demo_password",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    init_logger()
    yield
