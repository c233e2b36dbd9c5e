"""
Conditions over a collection of elements.

Failures report the size seen on the last resolution, and the member
texts when they can be read.
"""

import operator
from typing import TYPE_CHECKING, Callable

from playwright.async_api import ElementHandle
from playwright.async_api import Error as PlaywrightError

from fluent_web.conditions.base import CollectionCondition, ConditionResult

if TYPE_CHECKING:
    from fluent_web.entities.collection import Collection


async def _texts_of(handles: list[ElementHandle]) -> list[str]:
    return [await handle.inner_text() for handle in handles]


async def _texts_for_report(handles: list[ElementHandle]) -> list[str] | None:
    """Texts for a failure message, or None when some member has no readable text."""
    try:
        return await _texts_of(handles)
    except PlaywrightError:
        return None


class Size(CollectionCondition):
    """Compares the number of resolved elements with an expected count."""

    def __init__(
        self,
        expected: int,
        compare: Callable[[int, int], bool] = operator.eq,
        label: str = "size",
        name: str | None = None,
    ) -> None:
        super().__init__(name or f"{label} {expected}")
        self.expected = expected
        self.compare = compare

    async def check(self, collection: "Collection") -> ConditionResult:
        handles = await collection.get_web_elements()
        actual = len(handles)
        if self.compare(actual, self.expected):
            return ConditionResult.success(self.name, f"size {actual}")
        texts = await _texts_for_report(handles)
        if texts is None:
            return ConditionResult.failure(self.name, f"size {actual}")
        return ConditionResult.failure(self.name, f"size {actual}, texts {texts!r}")


class Texts(CollectionCondition):
    """
    Element texts match the expected values position by position.

    Substring match by default, equality when `exact` is set.
    """

    def __init__(self, expected: tuple[str, ...], exact: bool = False) -> None:
        label = "exact texts" if exact else "texts"
        super().__init__(f"{label} {list(expected)!r}")
        self.expected = expected
        self.exact = exact

    async def check(self, collection: "Collection") -> ConditionResult:
        actual = await _texts_of(await collection.get_web_elements())
        passed = len(actual) == len(self.expected) and all(
            (want == got) if self.exact else (want in got)
            for want, got in zip(self.expected, actual)
        )
        return ConditionResult.of(passed, self.name, repr(actual))


def size(expected: int) -> CollectionCondition:
    return Size(expected)


def size_at_least(expected: int) -> CollectionCondition:
    return Size(expected, operator.ge, "size at least")


def size_greater_than(expected: int) -> CollectionCondition:
    return Size(expected, operator.gt, "size greater than")


def size_less_than(expected: int) -> CollectionCondition:
    return Size(expected, operator.lt, "size less than")


def texts(*expected: str) -> CollectionCondition:
    return Texts(expected)


def exact_texts(*expected: str) -> CollectionCondition:
    return Texts(expected, exact=True)


empty = Size(0, name="empty")
