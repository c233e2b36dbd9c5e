"""
Condition base types.

A condition is a named, stateless predicate over a subject's current
state. Evaluation produces a ConditionResult value instead of raising for
"not yet" states, so callers that count failures as non-matches (filters,
index scans, negation) do so explicitly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from playwright.async_api import Error as PlaywrightError

from fluent_web.core.playwright_errors import translate_error
from fluent_web.core.exceptions import ConditionNotMet, FluentWebError, is_retryable

S = TypeVar("S")


class SubjectKind(str, Enum):
    """The closed set of things a condition can be evaluated against."""

    ELEMENT = "element"
    COLLECTION = "collection"
    DRIVER = "driver"


@dataclass(frozen=True)
class ConditionResult:
    """
    Outcome of a single condition evaluation.

    Falsy when the condition does not hold. `reason` is set when the
    subject could not be inspected at all (e.g. not found, stale).
    """

    passed: bool
    expected: str
    actual: str | None = None
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.passed

    @classmethod
    def success(cls, expected: str, actual: str | None = None) -> "ConditionResult":
        return cls(True, expected, actual)

    @classmethod
    def failure(
        cls,
        expected: str,
        actual: str | None = None,
        reason: str | None = None,
    ) -> "ConditionResult":
        return cls(False, expected, actual, reason)

    @classmethod
    def of(cls, passed: bool, expected: str, actual: str | None = None) -> "ConditionResult":
        return cls(passed, expected, actual)

    def describe(self) -> str:
        """One-line expected/actual summary for failure messages."""
        parts = [f"expected: {self.expected}"]
        if self.actual is not None:
            parts.append(f"actual: {self.actual}")
        if self.reason:
            parts.append(f"reason: {self.reason}")
        return "; ".join(parts)


class Condition(ABC, Generic[S]):
    """
    Named predicate over an Element, Collection or Driver.

    Subclasses implement check(). evaluate() turns retryable failures
    (not found, stale handle, predicate false) into a failed result and
    lets structural errors, such as a malformed selector, propagate.
    evaluate_member() is the variant for collection scans, where a member
    that cannot be inspected is simply not a match.

    Conditions compose with `~c` (negation), `c1 & c2` and `c1 | c2`.
    """

    subject_kind: ClassVar[SubjectKind]

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    async def check(self, subject: S) -> ConditionResult:
        """Inspect the subject's current state."""

    async def evaluate(self, subject: S) -> ConditionResult:
        """
        Evaluate against freshly resolved subject state.

        Raises:
            TypeError: If the subject kind does not match the condition
            BrowserError: For failures no wait can outlive
        """
        kind = getattr(subject, "subject_kind", None)
        if kind is not self.subject_kind:
            raise TypeError(
                f"Condition '{self.name}' applies to {self.subject_kind.value} "
                f"subjects, got {type(subject).__name__}"
            )
        try:
            return await self.check(subject)
        except PlaywrightError as e:
            error = translate_error(e)
            if is_retryable(error):
                return ConditionResult.failure(self.name, reason=error.message)
            raise error from e
        except FluentWebError as e:
            if is_retryable(e):
                return ConditionResult.failure(self.name, reason=e.message)
            raise

    async def evaluate_member(self, subject: S) -> ConditionResult:
        """
        Evaluate one member of a collection scan.

        Any driver failure while inspecting the member, structural or not,
        is a failed result: the member is simply not a match. A subject
        kind mismatch still raises TypeError.
        """
        try:
            return await self.evaluate(subject)
        except FluentWebError as e:
            return ConditionResult.failure(self.name, reason=e.message)

    async def matches(self, subject: S) -> None:
        """
        Assert the condition holds right now.

        Raises:
            ConditionNotMet: If it does not
        """
        result = await self.evaluate(subject)
        if not result:
            details: dict[str, Any] = {}
            if result.reason:
                details["reason"] = result.reason
            raise ConditionNotMet(result.expected, result.actual, details)

    @staticmethod
    def not_(condition: "Condition[S]") -> "Condition[S]":
        return ~condition

    @staticmethod
    def and_(*conditions: "Condition[S]") -> "Condition[S]":
        return AllOf(*conditions)

    @staticmethod
    def or_(*conditions: "Condition[S]") -> "Condition[S]":
        return AnyOf(*conditions)

    def __invert__(self) -> "Condition[S]":
        return Not(self)

    def __and__(self, other: "Condition[S]") -> "Condition[S]":
        return AllOf(self, other)

    def __or__(self, other: "Condition[S]") -> "Condition[S]":
        return AnyOf(self, other)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class Not(Condition[S]):
    """Passes exactly when the wrapped condition fails."""

    def __init__(self, condition: Condition[S], name: str | None = None) -> None:
        super().__init__(name or f"not {condition.name}")
        self.condition = condition
        self.subject_kind = condition.subject_kind

    async def check(self, subject: S) -> ConditionResult:
        inner = await self.condition.evaluate(subject)
        return ConditionResult.of(not inner.passed, self.name, inner.actual)

    def __invert__(self) -> Condition[S]:
        return self.condition


class _Composite(Condition[S]):
    joiner: ClassVar[str]

    def __init__(self, *conditions: Condition[S]) -> None:
        if not conditions:
            raise ValueError("At least one condition is required")
        kinds = {c.subject_kind for c in conditions}
        if len(kinds) > 1:
            raise TypeError(
                f"Cannot combine conditions over different subjects: "
                f"{sorted(k.value for k in kinds)}"
            )
        super().__init__(f" {self.joiner} ".join(c.name for c in conditions))
        self.conditions = conditions
        self.subject_kind = conditions[0].subject_kind


class AllOf(_Composite[S]):
    """Passes when every condition passes; reports the first failure."""

    joiner = "and"

    async def check(self, subject: S) -> ConditionResult:
        for condition in self.conditions:
            result = await condition.evaluate(subject)
            if not result:
                return ConditionResult.failure(
                    self.name, result.actual, result.reason or f"{condition.name} failed")
        return ConditionResult.success(self.name)


class AnyOf(_Composite[S]):
    """Passes when at least one condition passes."""

    joiner = "or"

    async def check(self, subject: S) -> ConditionResult:
        failures = []
        for condition in self.conditions:
            result = await condition.evaluate(subject)
            if result:
                return ConditionResult.success(self.name, result.actual)
            failures.append(result.describe())
        return ConditionResult.failure(self.name, reason=" | ".join(failures))


class ElementCondition(Condition["Element"]):
    """Condition over a single element."""

    subject_kind = SubjectKind.ELEMENT


class CollectionCondition(Condition["Collection"]):
    """Condition over a collection of elements."""

    subject_kind = SubjectKind.COLLECTION


class DriverCondition(Condition["Driver"]):
    """Condition over the browser session itself."""

    subject_kind = SubjectKind.DRIVER
