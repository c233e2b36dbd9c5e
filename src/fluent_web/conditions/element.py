"""
Conditions over a single element.

Every check resolves the element afresh through its locator.
"""

from typing import TYPE_CHECKING

from fluent_web.conditions.base import ConditionResult, ElementCondition
from fluent_web.core.exceptions import NotFoundError

if TYPE_CHECKING:
    from fluent_web.entities.element import Element


class Visible(ElementCondition):
    def __init__(self) -> None:
        super().__init__("visible")

    async def check(self, element: "Element") -> ConditionResult:
        handle = await element.get_web_element()
        visible = await handle.is_visible()
        return ConditionResult.of(visible, "visible", "visible" if visible else "hidden")


class Hidden(ElementCondition):
    """Not displayed, or not in the page at all."""

    def __init__(self) -> None:
        super().__init__("hidden")

    async def check(self, element: "Element") -> ConditionResult:
        try:
            handle = await element.get_web_element()
        except NotFoundError:
            return ConditionResult.success("hidden", "absent")
        visible = await handle.is_visible()
        return ConditionResult.of(not visible, "hidden", "visible" if visible else "hidden")


class Present(ElementCondition):
    def __init__(self) -> None:
        super().__init__("present")

    async def check(self, element: "Element") -> ConditionResult:
        await element.get_web_element()
        return ConditionResult.success("present", "present")


class Absent(ElementCondition):
    def __init__(self) -> None:
        super().__init__("absent")

    async def check(self, element: "Element") -> ConditionResult:
        try:
            await element.get_web_element()
        except NotFoundError:
            return ConditionResult.success("absent", "absent")
        return ConditionResult.failure("absent", "present")


class Enabled(ElementCondition):
    def __init__(self) -> None:
        super().__init__("enabled")

    async def check(self, element: "Element") -> ConditionResult:
        handle = await element.get_web_element()
        enabled = await handle.is_enabled()
        return ConditionResult.of(enabled, "enabled", "enabled" if enabled else "disabled")


class Disabled(ElementCondition):
    def __init__(self) -> None:
        super().__init__("disabled")

    async def check(self, element: "Element") -> ConditionResult:
        handle = await element.get_web_element()
        enabled = await handle.is_enabled()
        return ConditionResult.of(not enabled, "disabled", "enabled" if enabled else "disabled")


class Text(ElementCondition):
    """Visible text contains the expected substring."""

    def __init__(self, expected: str) -> None:
        super().__init__(f"has text {expected!r}")
        self.expected = expected

    async def check(self, element: "Element") -> ConditionResult:
        handle = await element.get_web_element()
        actual = await handle.inner_text()
        return ConditionResult.of(self.expected in actual, self.name, repr(actual))


class ExactText(ElementCondition):
    def __init__(self, expected: str) -> None:
        super().__init__(f"has exact text {expected!r}")
        self.expected = expected

    async def check(self, element: "Element") -> ConditionResult:
        handle = await element.get_web_element()
        actual = await handle.inner_text()
        return ConditionResult.of(actual == self.expected, self.name, repr(actual))


class Attribute(ElementCondition):
    """
    Attribute is present, or equals `value` when one is given.
    """

    def __init__(self, name: str, value: str | None = None) -> None:
        label = f"has attribute {name!r}"
        if value is not None:
            label = f"{label} with value {value!r}"
        super().__init__(label)
        self.attribute_name = name
        self.value = value

    async def check(self, element: "Element") -> ConditionResult:
        handle = await element.get_web_element()
        actual = await handle.get_attribute(self.attribute_name)
        if self.value is None:
            passed = actual is not None
        else:
            passed = actual == self.value
        return ConditionResult.of(passed, self.name, repr(actual))


class Value(ElementCondition):
    """Form control value equals the expected string."""

    def __init__(self, expected: str) -> None:
        super().__init__(f"has value {expected!r}")
        self.expected = expected

    async def check(self, element: "Element") -> ConditionResult:
        handle = await element.get_web_element()
        actual = await handle.input_value()
        return ConditionResult.of(actual == self.expected, self.name, repr(actual))


class CssClass(ElementCondition):
    def __init__(self, name: str) -> None:
        super().__init__(f"has css class {name!r}")
        self.class_name = name

    async def check(self, element: "Element") -> ConditionResult:
        handle = await element.get_web_element()
        actual = await handle.get_attribute("class") or ""
        return ConditionResult.of(self.class_name in actual.split(), self.name, repr(actual))


visible = Visible()
hidden = Hidden()
present = Present()
absent = Absent()
enabled = Enabled()
disabled = Disabled()


def text(expected: str) -> ElementCondition:
    return Text(expected)


def exact_text(expected: str) -> ElementCondition:
    return ExactText(expected)


def attribute(name: str, value: str | None = None) -> ElementCondition:
    return Attribute(name, value)


def value(expected: str) -> ElementCondition:
    return Value(expected)


def css_class(name: str) -> ElementCondition:
    return CssClass(name)
