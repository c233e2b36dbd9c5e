"""
Locators resolving a CSS/XPath expression against a search context.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from playwright.async_api import ElementHandle

from fluent_web.core.exceptions import NotFoundError
from fluent_web.locators.base import (
    By,
    CollectionLocator,
    ElementLocator,
    SearchContext,
    to_selector,
)

if TYPE_CHECKING:
    from fluent_web.entities.element import Element


def _format_expression(expression: "str | By") -> str:
    return repr(expression) if isinstance(expression, str) else f"By({expression})"


@dataclass(frozen=True)
class ByExpression(ElementLocator):
    """First element matching an expression inside a context."""

    expression: "str | By"
    context: SearchContext

    @property
    def description(self) -> str:
        return f"{self.context}.element({_format_expression(self.expression)})"

    async def find_one(self) -> ElementHandle:
        handles = await self.context.find_elements(to_selector(self.expression))
        if not handles:
            raise NotFoundError(
                f"No element found by {self.description}",
                locator=self.description,
            )
        return handles[0]


@dataclass(frozen=True)
class ByExpressions(CollectionLocator):
    """All elements matching an expression inside a context."""

    expression: "str | By"
    context: SearchContext

    @property
    def description(self) -> str:
        return f"{self.context}.all({_format_expression(self.expression)})"

    async def find(self) -> list[ElementHandle]:
        return list(await self.context.find_elements(to_selector(self.expression)))


@dataclass(frozen=True)
class ByElementsFromParent(ByExpressions):
    """
    All elements matching an expression inside a parent element.

    The parent is resolved afresh on every find(); a missing parent is a
    NotFoundError rather than an empty result.
    """

    context: "Element"
