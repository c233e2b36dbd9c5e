"""
Conditions module for fluent-web.

Named, composable predicates evaluated against freshly resolved state:
- ElementCondition: visible, hidden, text, attribute, ...
- CollectionCondition: size, texts, ...
- DriverCondition: url, title, tabs number
- `be` and `have` namespaces for readable assertions
"""

from fluent_web.conditions.base import (
    Condition,
    ConditionResult,
    SubjectKind,
    ElementCondition,
    CollectionCondition,
    DriverCondition,
    Not,
    AllOf,
    AnyOf,
)
from fluent_web.conditions import be, have

__all__ = [
    "Condition",
    "ConditionResult",
    "SubjectKind",
    "ElementCondition",
    "CollectionCondition",
    "DriverCondition",
    "Not",
    "AllOf",
    "AnyOf",
    "be",
    "have",
]
