"""
State conditions, read as `element.should(be.visible)`.
"""

from fluent_web.conditions import collection as _collection
from fluent_web.conditions import element as _element

visible = _element.visible
hidden = _element.hidden
present = _element.present
absent = _element.absent
enabled = _element.enabled
disabled = _element.disabled
empty = _collection.empty

__all__ = [
    "visible",
    "hidden",
    "present",
    "absent",
    "enabled",
    "disabled",
    "empty",
]
