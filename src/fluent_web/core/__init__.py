"""
Core module for fluent-web.

Contains the exception taxonomy shared by locators, conditions and waits.
"""

from fluent_web.core.exceptions import (
    FluentWebError,
    ConfigurationError,
    BrowserError,
    SelectorError,
    RetryableError,
    NotFoundError,
    StaleElementError,
    ConditionNotMet,
    WaitTimeoutError,
    is_retryable,
)

__all__ = [
    # Base
    "FluentWebError",
    "ConfigurationError",
    # Browser
    "BrowserError",
    "SelectorError",
    # Retry
    "RetryableError",
    "NotFoundError",
    "StaleElementError",
    "ConditionNotMet",
    # Wait
    "WaitTimeoutError",
    "is_retryable",
]
