"""
Entities module for fluent-web.

User-facing lazy handles:
- Driver: session root wrapping a Playwright Page
- Element: the element a locator currently yields
- Collection: the ordered elements a locator currently yields
"""

from fluent_web.entities.element import Element
from fluent_web.entities.collection import Collection
from fluent_web.entities.driver import Driver, element, all_

__all__ = [
    "Driver",
    "Element",
    "Collection",
    "element",
    "all_",
]
