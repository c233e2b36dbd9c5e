"""
Value conditions, read as `element.should(have.text("Saved"))`.

`have.no` mirrors every factory with its negation:
`collection.should(have.no.size(0))`.
"""

from fluent_web.conditions.base import Condition
from fluent_web.conditions.collection import (
    exact_texts,
    size,
    size_at_least,
    size_greater_than,
    size_less_than,
    texts,
)
from fluent_web.conditions.driver import (
    tabs_number,
    title,
    title_containing,
    url,
    url_containing,
)
from fluent_web.conditions.element import (
    attribute,
    css_class,
    exact_text,
    text,
    value,
)


class _No:
    """Negated mirror of the `have` factories."""

    def __getattr__(self, name: str):
        if name == "no" or name not in __all__:
            raise AttributeError(f"have.no has no condition named {name!r}")
        factory = globals()[name]

        def negated(*args, **kwargs) -> Condition:
            return Condition.not_(factory(*args, **kwargs))

        return negated


no = _No()

__all__ = [
    "text",
    "exact_text",
    "attribute",
    "value",
    "css_class",
    "size",
    "size_at_least",
    "size_greater_than",
    "size_less_than",
    "texts",
    "exact_texts",
    "url",
    "url_containing",
    "title",
    "title_containing",
    "tabs_number",
    "no",
]
