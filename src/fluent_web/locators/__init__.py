"""
Locators module for fluent-web.

Immutable, composable descriptions of how to find elements:
- ByExpression / ByExpressions: CSS or XPath against the driver or an element
- ByElementsFromParent: nested search inside a parent element
- ByIndexedElement: a position within a collection
- ByFilteredElements: collection members satisfying a condition
"""

from fluent_web.locators.base import (
    By,
    Locator,
    ElementLocator,
    CollectionLocator,
    SearchContext,
    to_selector,
)
from fluent_web.locators.expression import (
    ByExpression,
    ByExpressions,
    ByElementsFromParent,
)
from fluent_web.locators.composite import ByIndexedElement, ByFilteredElements

__all__ = [
    "By",
    "Locator",
    "ElementLocator",
    "CollectionLocator",
    "SearchContext",
    "to_selector",
    "ByExpression",
    "ByExpressions",
    "ByElementsFromParent",
    "ByIndexedElement",
    "ByFilteredElements",
]
