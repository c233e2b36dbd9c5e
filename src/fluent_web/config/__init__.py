"""
Configuration module for fluent-web.

Provides Pydantic-based settings management with YAML file support
and environment variable overrides.
"""

from fluent_web.config.settings import (
    Settings,
    Configuration,
    BrowserSettings,
    LoggingSettings,
)
from fluent_web.config.loader import load_config, get_settings, reset_settings

__all__ = [
    "Settings",
    "Configuration",
    "BrowserSettings",
    "LoggingSettings",
    "load_config",
    "get_settings",
    "reset_settings",
]
