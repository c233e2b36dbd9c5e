"""
Translation of Playwright errors into the fluent-web taxonomy.

Playwright raises a single Error type for everything. Waits need to know
whether a failure is a matter of timing (retry) or a structural problem
(abort), so messages are classified here, in one place.
"""

from playwright.async_api import Error as PlaywrightError

from fluent_web.core.exceptions import (
    BrowserError,
    FluentWebError,
    SelectorError,
    StaleElementError,
)

# Handle no longer backed by a live node or document.
STALE_MARKERS = (
    "not attached to the dom",
    "element is detached",
    "execution context was destroyed",
    "cannot find context with specified id",
    "frame was detached",
    "node is detached",
)

# The page rejected the selector expression itself.
SELECTOR_MARKERS = (
    "is not a valid selector",
    "unexpected token",
    "unknown engine",
    "failed to parse selector",
    "syntaxerror",
)


def translate_error(
    error: PlaywrightError,
    selector: str | None = None,
) -> FluentWebError:
    """
    Map a Playwright error to StaleElementError, SelectorError or BrowserError.

    Args:
        error: Error raised by a Playwright call
        selector: Selector involved in the call, if any

    Returns:
        The matching fluent-web exception (not raised)
    """
    message = str(error)
    lowered = message.lower()

    if any(marker in lowered for marker in SELECTOR_MARKERS):
        return SelectorError(f"Invalid selector: {message}", selector=selector)

    if any(marker in lowered for marker in STALE_MARKERS):
        details = {"selector": selector} if selector else None
        return StaleElementError(f"Stale element: {message}", details)

    details = {"selector": selector} if selector else None
    return BrowserError(f"Driver call failed: {message}", details)
