"""
Lazy single-element handle.

An Element holds a locator, never a resolved node. Every assertion and
action resolves it again, which is what lets waits survive re-renders.
"""

from typing import TYPE_CHECKING, Awaitable, Callable, TypeVar

from playwright.async_api import ElementHandle
from playwright.async_api import Error as PlaywrightError

from fluent_web.conditions import be
from fluent_web.conditions.base import Condition, SubjectKind
from fluent_web.config.settings import Configuration
from fluent_web.core.exceptions import NotFoundError
from fluent_web.core.playwright_errors import translate_error
from fluent_web.locators.base import By, ElementLocator
from fluent_web.locators.expression import ByElementsFromParent, ByExpression
from fluent_web.utils.logging import get_logger
from fluent_web.wait.engine import Wait

if TYPE_CHECKING:
    from fluent_web.entities.collection import Collection
    from fluent_web.entities.driver import Driver

logger = get_logger(__name__)

T = TypeVar("T")


class Element:
    """
    The element a locator currently yields.

    Building an Element never touches the page; it is valid even when
    the target does not exist yet.

    Example:
        >>> button = driver.element("#submit")
        >>> await button.should(be.enabled)
        >>> await button.click()
    """

    subject_kind = SubjectKind.ELEMENT

    def __init__(self, locator: ElementLocator, driver: "Driver") -> None:
        self.locator = locator
        self.driver = driver

    @property
    def config(self) -> Configuration:
        return self.driver.config

    async def should(
        self,
        condition: Condition["Element"],
        timeout: int | None = None,
    ) -> "Element":
        """
        Wait until the condition holds.

        Args:
            condition: Element condition, e.g. be.visible or have.text("Saved")
            timeout: Wait budget in milliseconds; defaults to config.timeout_ms

        Returns:
            This element, for chaining

        Raises:
            WaitTimeoutError: If the condition did not hold in time
        """
        return await self._wait().should_match(condition, timeout)

    async def should_not(
        self,
        condition: Condition["Element"],
        timeout: int | None = None,
    ) -> "Element":
        return await self.should(Condition.not_(condition), timeout)

    async def is_(self, condition: Condition["Element"], timeout: int | None = None) -> bool:
        """Wait for the condition; False on timeout instead of raising."""
        return await self._wait().is_match(condition, timeout)

    async def is_not(self, condition: Condition["Element"], timeout: int | None = None) -> bool:
        return await self.is_(Condition.not_(condition), timeout)

    matching = is_
    matching_not = is_not

    def _wait(self) -> Wait["Element"]:
        return Wait(self, self.config, on_failure=self.driver.save_failure_artifacts)

    def element(self, css_or_xpath_or_by: "str | By") -> "Element":
        """First descendant matching the expression."""
        return Element(ByExpression(css_or_xpath_or_by, self), self.driver)

    def all(self, css_or_xpath_or_by: "str | By") -> "Collection":
        """All descendants matching the expression."""
        from fluent_web.entities.collection import Collection

        return Collection(ByElementsFromParent(css_or_xpath_or_by, self), self.driver)

    async def get_web_element(self) -> ElementHandle:
        """
        Resolve the locator once, without waiting.

        Raises:
            NotFoundError: If the element is not in the page right now
        """
        return await self.locator.find_one()

    async def find_elements(self, selector: str) -> list[ElementHandle]:
        """Search inside this element, resolving it first."""
        handle = await self.get_web_element()
        return await self.driver.find_elements(selector, root=handle)

    async def _perform(
        self,
        action: str,
        operation: Callable[[ElementHandle], Awaitable[T]],
        condition: Condition["Element"] = be.visible,
    ) -> T:
        # Actions are not retried: wait for the element, then act once.
        await self.should(condition)
        handle = await self.get_web_element()
        logger.debug(f"{action}: {self}")
        try:
            return await operation(handle)
        except PlaywrightError as e:
            raise translate_error(e, str(self)) from e

    async def click(self) -> "Element":
        await self._perform("click", lambda h: h.click())
        return self

    async def double_click(self) -> "Element":
        await self._perform("double click", lambda h: h.dblclick())
        return self

    async def context_click(self) -> "Element":
        await self._perform("context click", lambda h: h.click(button="right"))
        return self

    async def hover(self) -> "Element":
        await self._perform("hover", lambda h: h.hover())
        return self

    async def set_value(self, value: str) -> "Element":
        """Replace the current value of an input."""
        await self._perform("set value", lambda h: h.fill(value))
        return self

    async def send_keys(self, keys: str) -> "Element":
        """Type after the current value, key by key."""
        await self._perform("send keys", lambda h: h.type(keys))
        return self

    async def press_key(self, key: str) -> "Element":
        await self._perform(f"press {key}", lambda h: h.press(key))
        return self

    async def press_enter(self) -> "Element":
        return await self.press_key("Enter")

    async def press_tab(self) -> "Element":
        return await self.press_key("Tab")

    async def press_escape(self) -> "Element":
        return await self.press_key("Escape")

    async def scroll_into_view(self) -> "Element":
        await self._perform(
            "scroll into view",
            lambda h: h.scroll_into_view_if_needed(),
            condition=be.present,
        )
        return self

    async def text(self) -> str:
        return await self._perform("get text", lambda h: h.inner_text())

    async def attribute(self, name: str) -> str | None:
        return await self._perform(
            f"get attribute {name}", lambda h: h.get_attribute(name), condition=be.present)

    async def value(self) -> str:
        return await self._perform("get value", lambda h: h.input_value(), condition=be.present)

    async def is_displayed(self) -> bool:
        """Visibility right now; an absent element is not displayed."""
        try:
            handle = await self.get_web_element()
            return await handle.is_visible()
        except NotFoundError:
            return False
        except PlaywrightError as e:
            raise translate_error(e, str(self)) from e

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Element) and other.locator == self.locator

    def __hash__(self) -> int:
        return hash(self.locator)

    def __str__(self) -> str:
        return str(self.locator)

    def __repr__(self) -> str:
        return f"Element({self.locator})"
