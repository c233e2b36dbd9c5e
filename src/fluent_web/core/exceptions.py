"""
Custom exceptions for fluent-web.

Provides a hierarchy of exceptions separating failures that a wait may
outlive (the page has not reached the expected state yet) from failures
that no amount of waiting will fix. All exceptions inherit from
FluentWebError.

Exception Hierarchy:
    FluentWebError (base)
    ├── ConfigurationError
    ├── BrowserError
    │   └── SelectorError
    ├── RetryableError
    │   ├── NotFoundError
    │   ├── StaleElementError
    │   └── ConditionNotMet
    └── WaitTimeoutError (also a builtin TimeoutError)
"""

from typing import Any


class FluentWebError(Exception):
    """
    Base exception for all fluent-web errors.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary with additional context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(
                f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details!r})"


class RetryableError(FluentWebError):
    """
    Marker class for errors a wait loop absorbs and retries.

    Errors inheriting from this class describe a page that has not
    reached the expected state yet. They become fatal only if they
    persist past the wait deadline.
    """

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(FluentWebError):
    """
    Error in configuration loading or validation.

    Raised when:
    - Configuration file is missing or malformed
    - Setting values fail validation
    """

    pass


# =============================================================================
# Browser Errors
# =============================================================================


class BrowserError(FluentWebError):
    """
    Base error for driver/Playwright operations.

    Raised for driver failures that are not a matter of timing, e.g.
    a closed page or a crashed browser. Never retried by waits.
    """

    pass


class SelectorError(BrowserError):
    """
    Error raised when a locator expression is malformed.

    The page rejects the selector itself, so retrying until the
    deadline would only delay the same failure.
    """

    def __init__(
        self,
        message: str,
        selector: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if selector:
            details["selector"] = selector
        super().__init__(message, details)
        self.selector = selector


# =============================================================================
# Resolution Errors
# =============================================================================


class NotFoundError(RetryableError):
    """
    A locator resolved to zero elements when one was required.

    Raised when:
    - A single-element expression matches nothing
    - An indexed element is out of bounds of its collection
    - A nested search has no parent element to search from
    """

    def __init__(
        self,
        message: str,
        locator: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if locator:
            details["locator"] = locator
        super().__init__(message, details)
        self.locator = locator


class StaleElementError(RetryableError):
    """
    A resolved handle stopped corresponding to a live page node
    between the query and its use.

    Treated exactly like NotFoundError by waits.
    """

    pass


class ConditionNotMet(RetryableError):
    """
    A condition's predicate evaluated false.

    Attributes:
        expected: Description of what the condition expects
        actual: Description of what was observed, if determinable
    """

    def __init__(
        self,
        expected: str,
        actual: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if actual is not None:
            details["actual"] = actual
        super().__init__(f"expected: {expected}", details)
        self.expected = expected
        self.actual = actual


# =============================================================================
# Wait Errors
# =============================================================================


class WaitTimeoutError(FluentWebError, TimeoutError):
    """
    A condition was not met before the wait deadline.

    The only error surfaced by should/should_not for state that never
    arrived. Carries everything needed to diagnose the failure without
    re-running the test.
    """

    def __init__(
        self,
        condition: str,
        subject: str,
        elapsed_ms: float,
        last_reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = (
            f"Timed out after {elapsed_ms:.0f}ms waiting for "
            f"{subject} to match: {condition}"
        )
        if last_reason:
            message = f"{message}\nReason: {last_reason}"
        super().__init__(message, details)
        self.condition = condition
        self.subject = subject
        self.elapsed_ms = elapsed_ms
        self.last_reason = last_reason


# =============================================================================
# Utility Functions
# =============================================================================


def is_retryable(error: BaseException) -> bool:
    """
    Check if an error describes a state a wait may still outlive.

    Args:
        error: The exception to check

    Returns:
        True if the error indicates a retryable condition
    """
    return isinstance(error, RetryableError)
