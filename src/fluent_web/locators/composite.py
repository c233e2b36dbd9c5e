"""
Locators composed on top of a collection.

Both variants resolve their parent collection on every call. Nothing is
resolved when they are built.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from playwright.async_api import ElementHandle

from fluent_web.core.exceptions import NotFoundError
from fluent_web.locators.base import CollectionLocator, ElementLocator

if TYPE_CHECKING:
    from fluent_web.conditions.base import Condition
    from fluent_web.entities.collection import Collection


@dataclass(frozen=True)
class ByIndexedElement(ElementLocator):
    """Element at a position of a collection, negative indexes count from the end."""

    index: int
    collection: "Collection"

    @property
    def description(self) -> str:
        return f"{self.collection}[{self.index}]"

    async def find_one(self) -> ElementHandle:
        handles = await self.collection.get_web_elements()
        if not -len(handles) <= self.index < len(handles):
            raise NotFoundError(
                f"Cannot get element with index {self.index} "
                f"from {self.collection} of size {len(handles)}",
                locator=self.description,
            )
        return handles[self.index]


@dataclass(frozen=True)
class ByFilteredElements(CollectionLocator):
    """
    Elements of a collection currently satisfying a condition.

    Each candidate is checked through its positional element
    (collection.get(i)), so the condition resolves it again rather than
    trusting the handle from the listing. A member that fails the
    condition, or that the driver cannot inspect at all, is left out.
    """

    condition: "Condition"
    collection: "Collection"

    @property
    def description(self) -> str:
        return f"{self.collection}.filter({self.condition})"

    async def find(self) -> list[ElementHandle]:
        handles = await self.collection.get_web_elements()
        matched: list[ElementHandle] = []
        # The page session serves one call at a time.
        for index, handle in enumerate(handles):
            result = await self.condition.evaluate_member(self.collection.get(index))
            if result.passed:
                matched.append(handle)
        return matched
