"""
Browser module for fluent-web.

Provides Playwright browser lifecycle management and Driver creation.
"""

from fluent_web.browser.manager import BrowserManager, create_browser

__all__ = [
    "BrowserManager",
    "create_browser",
]
