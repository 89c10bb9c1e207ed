"""
Active download directory shared by the browser builders.

The driver factory applies the ``download`` configuration key here before a
browser is created; the Chrome and Firefox builders read it back into their
download preferences.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from loguru import logger

from . import ensure_directory


DEFAULT_DOWNLOAD_DIRECTORY = "downloads"

_download_directory: Optional[str] = None


def set_download_directory(path: str) -> str:
    """Set the active download directory and return its absolute path."""
    global _download_directory
    _download_directory = str(Path(path).expanduser().resolve())
    logger.debug(f"Download directory set to: {_download_directory}")
    return _download_directory


def get_download_directory() -> str:
    """Return the active download directory, creating it if needed."""
    directory = _download_directory or os.path.join(os.getcwd(), DEFAULT_DOWNLOAD_DIRECTORY)
    return ensure_directory(directory)


def reset_download_directory() -> None:
    """Forget any directory set with set_download_directory."""
    global _download_directory
    _download_directory = None


__all__ = [
    "set_download_directory",
    "get_download_directory",
    "reset_download_directory",
]
