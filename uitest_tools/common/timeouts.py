"""
Default wait time used by element resolution and clickability checks.

The ``timeout`` configuration key holds the value and ``timeunit`` its unit
(``seconds`` or ``milliseconds``).
"""

from __future__ import annotations

from .config_loader import ConfigLoader, ConfigurationError


DEFAULT_TIMEOUT_SECONDS = 10.0

_UNIT_DIVISORS = {
    "s": 1.0,
    "sec": 1.0,
    "second": 1.0,
    "seconds": 1.0,
    "ms": 1000.0,
    "millisecond": 1000.0,
    "milliseconds": 1000.0,
}


def get_default_timeout() -> float:
    """Return the configured default timeout in seconds."""
    config = ConfigLoader()
    raw = config.get_optional_property("timeout")
    if raw is None:
        return DEFAULT_TIMEOUT_SECONDS

    unit = (config.get_optional_property("timeunit") or "seconds").strip().lower()
    if unit not in _UNIT_DIVISORS:
        raise ConfigurationError(
            f"Invalid timeunit '{unit}'. Use seconds or milliseconds."
        )

    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid timeout value '{raw}'") from e

    return value / _UNIT_DIVISORS[unit]


__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "get_default_timeout",
]
