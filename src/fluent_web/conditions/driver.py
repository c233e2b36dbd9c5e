"""
Conditions over the browser session.
"""

from typing import TYPE_CHECKING

from fluent_web.conditions.base import ConditionResult, DriverCondition

if TYPE_CHECKING:
    from fluent_web.entities.driver import Driver


class Url(DriverCondition):
    def __init__(self, expected: str, partial: bool = False) -> None:
        super().__init__(f"url containing {expected!r}" if partial else f"url {expected!r}")
        self.expected = expected
        self.partial = partial

    async def check(self, driver: "Driver") -> ConditionResult:
        actual = await driver.url()
        passed = self.expected in actual if self.partial else actual == self.expected
        return ConditionResult.of(passed, self.name, repr(actual))


class Title(DriverCondition):
    def __init__(self, expected: str, partial: bool = False) -> None:
        super().__init__(f"title containing {expected!r}" if partial else f"title {expected!r}")
        self.expected = expected
        self.partial = partial

    async def check(self, driver: "Driver") -> ConditionResult:
        actual = await driver.title()
        passed = self.expected in actual if self.partial else actual == self.expected
        return ConditionResult.of(passed, self.name, repr(actual))


class TabsNumber(DriverCondition):
    def __init__(self, expected: int) -> None:
        super().__init__(f"tabs number {expected}")
        self.expected = expected

    async def check(self, driver: "Driver") -> ConditionResult:
        actual = len(await driver.tabs())
        return ConditionResult.of(actual == self.expected, self.name, str(actual))


def url(expected: str) -> DriverCondition:
    return Url(expected)


def url_containing(part: str) -> DriverCondition:
    return Url(part, partial=True)


def title(expected: str) -> DriverCondition:
    return Title(expected)


def title_containing(part: str) -> DriverCondition:
    return Title(part, partial=True)


def tabs_number(expected: int) -> DriverCondition:
    return TabsNumber(expected)
