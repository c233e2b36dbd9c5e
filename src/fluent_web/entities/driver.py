"""
Browser session root.

Wraps a Playwright Page. Provides the element search capability every
locator bottoms out in, entry points for building Elements and
Collections, and session-level assertions.
"""

from datetime import datetime
from pathlib import Path
from typing import Any

from playwright.async_api import ElementHandle, Page
from playwright.async_api import Error as PlaywrightError

from fluent_web.conditions.base import Condition, SubjectKind
from fluent_web.config.settings import Configuration
from fluent_web.core.playwright_errors import translate_error
from fluent_web.entities.collection import Collection
from fluent_web.entities.element import Element
from fluent_web.locators.base import By
from fluent_web.locators.expression import ByExpression, ByExpressions
from fluent_web.utils.logging import get_logger
from fluent_web.wait.engine import Wait

logger = get_logger(__name__)


class Driver:
    """
    Session root for lazy elements and driver-level assertions.

    Example:
        >>> driver = Driver(page, Configuration(timeout_ms=6000))
        >>> await driver.get("https://example.com")
        >>> await driver.element("h1").should(have.text("Example"))
    """

    subject_kind = SubjectKind.DRIVER

    def __init__(self, page: Page, config: Configuration | None = None) -> None:
        self.page = page
        self.config = config or Configuration()

    def with_config(self, **overrides: Any) -> "Driver":
        """Driver over the same page with an overridden configuration copy."""
        return Driver(self.page, self.config.with_overrides(**overrides))

    def element(self, css_or_xpath_or_by: "str | By") -> Element:
        return Element(ByExpression(css_or_xpath_or_by, self), self)

    def all(self, css_or_xpath_or_by: "str | By") -> Collection:
        return Collection(ByExpressions(css_or_xpath_or_by, self), self)

    async def find_elements(
        self,
        selector: str,
        root: ElementHandle | None = None,
    ) -> list[ElementHandle]:
        """
        Query the page, or the subtree of `root`, for matching elements.

        Raises:
            SelectorError: If the page rejects the selector
            StaleElementError: If `root` is no longer attached
        """
        try:
            if root is None:
                return await self.page.query_selector_all(selector)
            return await root.query_selector_all(selector)
        except PlaywrightError as e:
            raise translate_error(e, selector) from e

    async def should(self, condition: Condition["Driver"], timeout: int | None = None) -> "Driver":
        return await self._wait().should_match(condition, timeout)

    async def should_not(self, condition: Condition["Driver"], timeout: int | None = None) -> "Driver":
        return await self.should(Condition.not_(condition), timeout)

    async def is_(self, condition: Condition["Driver"], timeout: int | None = None) -> bool:
        return await self._wait().is_match(condition, timeout)

    async def is_not(self, condition: Condition["Driver"], timeout: int | None = None) -> bool:
        return await self.is_(Condition.not_(condition), timeout)

    matching = is_
    matching_not = is_not

    def _wait(self) -> Wait["Driver"]:
        return Wait(self, self.config, on_failure=self.save_failure_artifacts)

    async def get(self, url: str) -> "Driver":
        """Navigate, applying the configured window size first."""
        if self.config.window_width and self.config.window_height:
            await self.resize_window(self.config.window_width, self.config.window_height)
        logger.debug(f"Navigating to: {url}")
        try:
            await self.page.goto(url)
        except PlaywrightError as e:
            raise translate_error(e) from e
        return self

    async def url(self) -> str:
        return self.page.url

    async def title(self) -> str:
        return await self.page.title()

    async def page_source(self) -> str:
        return await self.page.content()

    async def refresh(self) -> None:
        await self.page.reload()

    async def resize_window(self, width: int, height: int) -> None:
        await self.page.set_viewport_size({"width": width, "height": height})

    async def execute_script(self, script: str, *args: Any) -> Any:
        """
        Evaluate JavaScript in the page.

        A single argument is passed as is, several arguments as a list.
        """
        try:
            if not args:
                return await self.page.evaluate(script)
            return await self.page.evaluate(script, args[0] if len(args) == 1 else list(args))
        except PlaywrightError as e:
            raise translate_error(e) from e

    async def tabs(self) -> list[Page]:
        return list(self.page.context.pages)

    async def screenshot(self) -> bytes:
        return await self.page.screenshot(full_page=self.config.full_page_screenshot)

    async def save_screenshot(self, path: Path | str) -> Path:
        path = Path(path)
        data = await self.screenshot()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    async def save_page_source(self, path: Path | str) -> Path:
        path = Path(path)
        source = await self.page_source()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path

    async def save_failure_artifacts(self) -> dict[str, str]:
        """Save a screenshot and the page source into config.artifacts_dir."""
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
        try:
            screenshot = await self.save_screenshot(self.config.artifacts_dir / f"{stamp}.png")
            source = await self.save_page_source(self.config.artifacts_dir / f"{stamp}.html")
        except PlaywrightError as e:
            raise translate_error(e) from e
        logger.info(f"Saved failure artifacts: {screenshot}, {source}")
        return {"screenshot": str(screenshot), "page_source": str(source)}

    async def clear_cache_and_cookies(self) -> None:
        """
        Clear local/session storage of the current origin and all cookies.

        Storage is not reachable on every page (about:blank, data: URLs);
        that is logged and cookies are still cleared.
        """
        for storage in ("localStorage", "sessionStorage"):
            try:
                await self.page.evaluate(f"() => window.{storage}.clear()")
            except PlaywrightError as e:
                logger.debug(f"Could not clear {storage}: {e}")
        await self.page.context.clear_cookies()

    async def close(self) -> None:
        """Close the current page only."""
        await self.page.close()

    async def quit(self) -> None:
        """Close the whole browser, or the context when it has no browser."""
        browser = self.page.context.browser
        if browser is not None:
            await browser.close()
        else:
            await self.page.context.close()

    def __str__(self) -> str:
        return "browser"


def element(driver: Driver, css_or_xpath_or_by: "str | By") -> Element:
    return driver.element(css_or_xpath_or_by)


def all_(driver: Driver, css_or_xpath_or_by: "str | By") -> Collection:
    return driver.all(css_or_xpath_or_by)
