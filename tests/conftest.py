"""
Shared pytest fixtures for fluent-web tests.

Provides an in-memory stand-in for the Playwright Page / ElementHandle
subset the library talks to, so waits, locators and conditions can be
exercised without launching a browser.
"""

import re
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from playwright.async_api import Error as PlaywrightError

from fluent_web.config import Configuration, reset_settings
from fluent_web.entities import Driver
from fluent_web.utils.logging import reset_logging

SIMPLE_SELECTOR = re.compile(
    r"^(?P<tag>[a-z][a-z0-9]*)?(?:#(?P<id>[\w-]+))?(?P<classes>(?:\.[\w-]+)*)$"
)


def _matches(element: "FakeElement", selector: str) -> bool:
    if selector.startswith("css="):
        selector = selector[len("css="):]
    elif selector.startswith("xpath=//"):
        selector = selector[len("xpath=//"):]

    match = SIMPLE_SELECTOR.match(selector)
    if match is None or not selector:
        raise PlaywrightError(
            f"SyntaxError: '{selector}' is not a valid selector")

    if match["tag"] and match["tag"] != element.tag:
        return False
    if match["id"] and match["id"] != element.id:
        return False
    wanted = [c for c in match["classes"].split(".") if c]
    return all(c in element.classes for c in wanted)


class FakeElement:
    """ElementHandle double with mutable state tests can change mid-wait."""

    def __init__(
        self,
        tag: str = "div",
        text: str = "",
        classes: tuple[str, ...] = (),
        id: str | None = None,
        attributes: dict[str, str] | None = None,
        visible: bool = True,
        enabled: bool = True,
        value: str = "",
        children: list["FakeElement"] | None = None,
    ) -> None:
        self.tag = tag
        self.text = text
        self.classes = list(classes)
        self.id = id
        self.attributes = dict(attributes or {})
        self.visible = visible
        self.enabled = enabled
        self.value = value
        self.children = list(children or [])
        self.attached = True
        self.actions: list[str] = []

    def _ensure_attached(self) -> None:
        if not self.attached:
            raise PlaywrightError("Element is not attached to the DOM")

    def descendants(self) -> list["FakeElement"]:
        result = []
        for child in self.children:
            result.append(child)
            result.extend(child.descendants())
        return result

    async def query_selector_all(self, selector: str) -> list["FakeElement"]:
        self._ensure_attached()
        return [e for e in self.descendants() if _matches(e, selector)]

    async def is_visible(self) -> bool:
        self._ensure_attached()
        return self.visible

    async def is_enabled(self) -> bool:
        self._ensure_attached()
        return self.enabled

    async def inner_text(self) -> str:
        self._ensure_attached()
        return self.text

    async def get_attribute(self, name: str) -> str | None:
        self._ensure_attached()
        if name == "class":
            return " ".join(self.classes) if self.classes else None
        if name == "id":
            return self.id
        return self.attributes.get(name)

    async def input_value(self) -> str:
        self._ensure_attached()
        return self.value

    async def click(self, button: str = "left") -> None:
        self._ensure_attached()
        self.actions.append("click" if button == "left" else f"click:{button}")

    async def dblclick(self) -> None:
        self._ensure_attached()
        self.actions.append("dblclick")

    async def hover(self) -> None:
        self._ensure_attached()
        self.actions.append("hover")

    async def fill(self, value: str) -> None:
        self._ensure_attached()
        self.value = value

    async def type(self, keys: str) -> None:
        self._ensure_attached()
        self.value += keys

    async def press(self, key: str) -> None:
        self._ensure_attached()
        self.actions.append(f"press:{key}")

    async def scroll_into_view_if_needed(self) -> None:
        self._ensure_attached()
        self.actions.append("scroll")


class SvgElement(FakeElement):
    """Non-HTML node: Playwright cannot read its text or input value."""

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("tag", "svg")
        super().__init__(**kwargs)

    async def inner_text(self) -> str:
        self._ensure_attached()
        raise PlaywrightError("Node is not an HTMLElement")

    async def input_value(self) -> str:
        self._ensure_attached()
        raise PlaywrightError("Node is not an <input>, <textarea> or <select> element")


class FakeBrowser:
    def __init__(self) -> None:
        self.closed = False

    async def close(self) -> None:
        self.closed = True


class FakeContext:
    def __init__(self, browser: FakeBrowser | None = None) -> None:
        self.pages: list["FakePage"] = []
        self.browser = browser
        self.cookies_cleared = False
        self.closed = False

    async def clear_cookies(self) -> None:
        self.cookies_cleared = True

    async def close(self) -> None:
        self.closed = True


class FakePage:
    """Page double holding a flat or nested tree of FakeElements."""

    def __init__(self, elements: list[FakeElement] | None = None) -> None:
        self.root = FakeElement(tag="body", children=elements)
        self.url = "about:blank"
        self.page_title = ""
        self.html = "<html></html>"
        self.viewport: dict | None = None
        self.queries = 0
        self.scripts: list[tuple] = []
        self.reloads = 0
        self.closed = False
        self.script_error: str | None = None
        self.context = FakeContext()
        self.context.pages.append(self)

    def add(self, *elements: FakeElement) -> None:
        self.root.children.extend(elements)

    def remove(self, element: FakeElement) -> None:
        self.root.children.remove(element)
        element.attached = False

    async def query_selector_all(self, selector: str) -> list[FakeElement]:
        self.queries += 1
        return await self.root.query_selector_all(selector)

    async def goto(self, url: str) -> None:
        self.url = url

    async def title(self) -> str:
        return self.page_title

    async def content(self) -> str:
        return self.html

    async def reload(self) -> None:
        self.reloads += 1

    async def set_viewport_size(self, size: dict) -> None:
        self.viewport = size

    async def evaluate(self, script: str, arg=None):
        if self.script_error:
            raise PlaywrightError(self.script_error)
        self.scripts.append((script, arg))
        return arg

    async def screenshot(self, full_page: bool = False) -> bytes:
        return b"full-png" if full_page else b"png"

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset cached settings and logging handlers around each test."""
    reset_settings()
    reset_logging()
    yield
    reset_settings()
    reset_logging()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fast_config() -> Configuration:
    """Short budgets keep timing tests fast."""
    return Configuration(timeout_ms=500, poll_interval_ms=20)


@pytest.fixture
def page() -> FakePage:
    """Page with three items, one text input and a hidden spinner."""
    return FakePage([
        FakeElement(tag="li", text="A", classes=("item",), attributes={"data-id": "40"}),
        FakeElement(tag="li", text="B", classes=("item",), attributes={"data-id": "41"}),
        FakeElement(tag="li", text="C", classes=("item",), attributes={"data-id": "42"}),
        FakeElement(tag="input", id="name", value="initial"),
        FakeElement(id="spinner", visible=False),
    ])


@pytest.fixture
def driver(page: FakePage, fast_config: Configuration) -> Driver:
    return Driver(page, fast_config)
