"""
Wait module for fluent-web.

The retry loop underlying every should/is assertion.
"""

from fluent_web.wait.engine import Wait, WaitOutcome

__all__ = [
    "Wait",
    "WaitOutcome",
]
