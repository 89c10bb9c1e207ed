# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Bounded polling waits and the stale-element retry used by page elements.
#
# Every wait is a Selenium WebDriverWait with an explicit timeout, so no
# operation blocks indefinitely. State queries turn their wait into a
# WaitResult instead of an exception, and retry_on_stale re-runs a check a
# bounded number of times while the DOM is being re-rendered.
#
# Usage:
#   element = wait_until(driver, lambda d: d.find_element(*locator), timeout=10)
#   result = retry_on_stale(check, RetryConfig(max_retries=5))
#
# ================================================================================

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Type

from loguru import logger
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.support.ui import WebDriverWait


# Poll interval for element lookups, in seconds
DEFAULT_POLL_INTERVAL = 0.01


class WaitOutcome(Enum):
    """How a bounded wait ended."""

    SATISFIED = "satisfied"
    STALE = "stale"
    TIMED_OUT = "timed_out"


@dataclass
class WaitResult:
    """
    Result of a check run inside a bounded wait.

    Attributes:
        outcome: How the wait ended
        value: Value returned by the condition when satisfied
    """
    outcome: WaitOutcome
    value: Any = None

    @property
    def satisfied(self) -> bool:
        return self.outcome is WaitOutcome.SATISFIED


@dataclass
class RetryConfig:
    """
    Configuration for stale-element retries.

    Attributes:
        max_retries: Extra attempts after the first one
        delay_seconds: Pause between attempts
    """
    max_retries: int = 5
    delay_seconds: float = 0.0


def wait_until(
    driver: Any,
    condition: Callable[[Any], Any],
    timeout: float,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    ignored_exceptions: Optional[Iterable[Type[Exception]]] = None,
    message: str = "",
) -> Any:
    """
    Poll ``condition`` against the driver until it returns a truthy value.

    Args:
        driver: WebDriver session to pass to the condition
        condition: Callable receiving the driver
        timeout: Maximum seconds to wait
        poll_interval: Seconds between attempts
        ignored_exceptions: Exceptions treated as "not yet"
        message: Message for the TimeoutException

    Returns:
        The condition's first truthy return value

    Raises:
        TimeoutException: If the condition is not met in time
    """
    ignored = tuple(ignored_exceptions or (NoSuchElementException,))
    wait = WebDriverWait(
        driver,
        timeout,
        poll_frequency=poll_interval,
        ignored_exceptions=ignored,
    )
    return wait.until(condition, message)


def retry_on_stale(
    check: Callable[[], WaitResult],
    config: Optional[RetryConfig] = None,
) -> WaitResult:
    """
    Run ``check`` again while it reports a stale element.

    Args:
        check: Callable performing one bounded wait
        config: Retry limits

    Returns:
        The first non-stale result, or the last stale one once retries run out
    """
    if config is None:
        config = RetryConfig()

    result = check()
    for attempt in range(1, config.max_retries + 1):
        if result.outcome is not WaitOutcome.STALE:
            return result
        logger.warning(
            f"Stale element on attempt {attempt}/{config.max_retries + 1}, retrying"
        )
        if config.delay_seconds:
            time.sleep(config.delay_seconds)
        result = check()

    if result.outcome is WaitOutcome.STALE:
        logger.warning(f"Element still stale after {config.max_retries} retries")
    return result


__all__ = [
    "DEFAULT_POLL_INTERVAL",
    "RetryConfig",
    "WaitOutcome",
    "WaitResult",
    "retry_on_stale",
    "wait_until",
]
