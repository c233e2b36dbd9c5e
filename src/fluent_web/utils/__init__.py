"""
Utilities module for fluent-web.

Provides logging setup and helpers.
"""

from fluent_web.utils.logging import (
    setup_logging,
    get_logger,
    get_logger_with_context,
    reset_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "get_logger_with_context",
    "reset_logging",
]
