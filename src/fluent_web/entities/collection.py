"""
Lazy collection handle.

Navigation methods (get, first, filter, find_by) only compose new
locators. Resolution happens when a condition, size() or an element
action needs it.
"""

from typing import TYPE_CHECKING

from playwright.async_api import ElementHandle
from playwright.async_api import Error as PlaywrightError

from fluent_web.conditions import be
from fluent_web.conditions.base import Condition, SubjectKind
from fluent_web.config.settings import Configuration
from fluent_web.core.playwright_errors import translate_error
from fluent_web.entities.element import Element
from fluent_web.locators.base import CollectionLocator
from fluent_web.locators.composite import ByFilteredElements, ByIndexedElement
from fluent_web.utils.logging import get_logger
from fluent_web.wait.engine import Wait

if TYPE_CHECKING:
    from fluent_web.entities.driver import Driver

logger = get_logger(__name__)


class Collection:
    """
    The ordered elements a locator currently yields.

    Example:
        >>> items = driver.all(".item")
        >>> await items.should(have.size(3))
        >>> await items.find_by(have.text("B")).click()
    """

    subject_kind = SubjectKind.COLLECTION

    def __init__(self, locator: CollectionLocator, driver: "Driver") -> None:
        self.locator = locator
        self.driver = driver

    @property
    def config(self) -> Configuration:
        return self.driver.config

    async def should(
        self,
        condition: Condition["Collection"],
        timeout: int | None = None,
    ) -> "Collection":
        """
        Wait until the condition holds.

        Raises:
            WaitTimeoutError: If the condition did not hold in time
        """
        return await self._wait().should_match(condition, timeout)

    async def should_not(
        self,
        condition: Condition["Collection"],
        timeout: int | None = None,
    ) -> "Collection":
        return await self.should(Condition.not_(condition), timeout)

    async def is_(self, condition: Condition["Collection"], timeout: int | None = None) -> bool:
        return await self._wait().is_match(condition, timeout)

    async def is_not(self, condition: Condition["Collection"], timeout: int | None = None) -> bool:
        return await self.is_(Condition.not_(condition), timeout)

    matching = is_
    matching_not = is_not

    def _wait(self) -> Wait["Collection"]:
        return Wait(self, self.config, on_failure=self.driver.save_failure_artifacts)

    def get(self, index: int) -> Element:
        return Element(ByIndexedElement(index, self), self.driver)

    def first(self) -> Element:
        return self.get(0)

    def filter(self, condition: Condition[Element]) -> "Collection":
        """Members currently satisfying the element condition."""
        return Collection(ByFilteredElements(condition, self), self.driver)

    filter_by = filter

    def find_by(self, condition: Condition[Element]) -> Element:
        """First member currently satisfying the element condition."""
        return self.filter(condition).get(0)

    async def index_of_element_by(self, condition: Condition[Element]) -> int | None:
        """
        Position of the first member satisfying the condition.

        Waits until some member satisfying it is visible, then scans the
        members in order. A member whose evaluation fails for any
        reason counts as a non-match.

        Returns:
            The index, or None if every match disappeared between the
            visibility wait and the scan

        Raises:
            WaitTimeoutError: If no visible member satisfies the condition
        """
        await self.find_by(condition).should(be.visible)
        count = len(await self.get_web_elements())
        for index in range(count):
            result = await condition.evaluate_member(self.get(index))
            if result.passed:
                return index
        logger.debug(f"No element matched {condition.name} in {self} during scan")
        return None

    async def get_web_elements(self) -> list[ElementHandle]:
        """Resolve the locator once, without waiting."""
        return await self.locator.find()

    async def size(self) -> int:
        """Number of members right now; 0 for no matches."""
        return len(await self.get_web_elements())

    async def texts(self) -> list[str]:
        """Visible texts of the members right now."""
        handles = await self.get_web_elements()
        try:
            return [await handle.inner_text() for handle in handles]
        except PlaywrightError as e:
            raise translate_error(e, str(self)) from e

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Collection) and other.locator == self.locator

    def __hash__(self) -> int:
        return hash(self.locator)

    def __str__(self) -> str:
        return str(self.locator)

    def __repr__(self) -> str:
        return f"Collection({self.locator})"
