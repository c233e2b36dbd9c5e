"""
fluent-web - self-waiting browser assertions over Playwright.

Elements and collections are lazy descriptions that are resolved again on
every use, and assertions retry against freshly resolved state until they
pass or time out:

    >>> driver = await manager.new_driver()
    >>> await driver.get("https://example.com")
    >>> await driver.all(".item").find_by(have.text("B")).should(be.visible)
"""

from fluent_web.config import Settings, Configuration, load_config
from fluent_web.utils.logging import setup_logging, get_logger
from fluent_web.core.exceptions import (
    FluentWebError,
    NotFoundError,
    ConditionNotMet,
    WaitTimeoutError,
)
from fluent_web.conditions import Condition, be, have
from fluent_web.locators import By
from fluent_web.entities import Driver, Element, Collection
from fluent_web.browser import BrowserManager, create_browser

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "Configuration",
    "load_config",
    "setup_logging",
    "get_logger",
    "FluentWebError",
    "NotFoundError",
    "ConditionNotMet",
    "WaitTimeoutError",
    "Condition",
    "be",
    "have",
    "By",
    "Driver",
    "Element",
    "Collection",
    "BrowserManager",
    "create_browser",
]
