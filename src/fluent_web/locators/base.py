"""
Locator base types and selector normalisation.

A locator is an immutable description of how to find elements. It never
holds a resolved handle: every find()/find_one() call queries the page
again, so the same locator may yield different nodes over time.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol

from playwright.async_api import ElementHandle

from fluent_web.core.exceptions import SelectorError

# Playwright selector engine prefix, e.g. "css=", "xpath=", "text=", "data-testid="
ENGINE_PREFIX = re.compile(r"^[a-zA-Z][\w-]*=")

XPATH_STARTS = ("/", "(", "./", "..")


@dataclass(frozen=True)
class By:
    """
    Structured locator expression.

    Example:
        >>> driver.element(By.xpath("//button[text()='Save']"))
        >>> driver.all(By.text("Remove"))
    """

    engine: str
    value: str

    @classmethod
    def css(cls, value: str) -> "By":
        return cls("css", value)

    @classmethod
    def xpath(cls, value: str) -> "By":
        return cls("xpath", value)

    @classmethod
    def text(cls, value: str) -> "By":
        return cls("text", value)

    @classmethod
    def id(cls, value: str) -> "By":
        return cls("id", value)

    @classmethod
    def test_id(cls, value: str) -> "By":
        return cls("data-testid", value)

    def __str__(self) -> str:
        return f"{self.engine}={self.value}"


def to_selector(css_or_xpath_or_by: "str | By") -> str:
    """
    Normalise a user expression into a Playwright selector.

    Strings starting like an XPath expression are routed to the xpath
    engine, strings that already name an engine pass through, everything
    else is CSS.

    Raises:
        SelectorError: If the expression is empty
    """
    if isinstance(css_or_xpath_or_by, By):
        if not css_or_xpath_or_by.value.strip():
            raise SelectorError("Empty selector", selector=str(css_or_xpath_or_by))
        return str(css_or_xpath_or_by)

    expression = css_or_xpath_or_by.strip()
    if not expression:
        raise SelectorError("Empty selector", selector=css_or_xpath_or_by)

    if expression.startswith(XPATH_STARTS):
        return f"xpath={expression}"
    if ENGINE_PREFIX.match(expression):
        return expression
    return f"css={expression}"


class SearchContext(Protocol):
    """Anything elements can be searched from: the driver or an element."""

    async def find_elements(self, selector: str) -> list[ElementHandle]:
        ...


class Locator(ABC):
    """Base for all locator variants."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description used in logs and failure messages."""

    def __str__(self) -> str:
        return self.description


class ElementLocator(Locator):
    """Locator yielding exactly one element."""

    @abstractmethod
    async def find_one(self) -> ElementHandle:
        """
        Query the page for the element.

        Raises:
            NotFoundError: If nothing currently matches
        """


class CollectionLocator(Locator):
    """Locator yielding an ordered, possibly empty, sequence of elements."""

    @abstractmethod
    async def find(self) -> list[ElementHandle]:
        """Query the page for all currently matching elements."""
