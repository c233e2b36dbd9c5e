"""
Pydantic settings models for fluent-web.

Configuration is an immutable snapshot. Overrides never mutate an
existing instance; they produce a validated copy.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class Configuration(BaseModel):
    """
    Wait and driver defaults consumed by Driver and Wait.

    Created once per Driver and inherited by every Wait it starts.
    """

    timeout_ms: int = Field(
        default=4000,
        ge=0,
        le=600000,
        description="Default wait budget for should/is calls in milliseconds",
    )
    poll_interval_ms: int = Field(
        default=100,
        ge=1,
        le=60000,
        description="Delay between condition re-evaluations in milliseconds",
    )
    window_width: int | None = Field(
        default=None,
        ge=320,
        le=7680,
        description="Viewport width applied before navigation. None keeps the current size.",
    )
    window_height: int | None = Field(
        default=None,
        ge=240,
        le=4320,
        description="Viewport height applied before navigation. None keeps the current size.",
    )
    full_page_screenshot: bool = Field(
        default=False,
        description="Capture the full scrollable page instead of the viewport",
    )
    save_artifacts_on_failure: bool = Field(
        default=False,
        description="Save a screenshot and the page source when a should call times out",
    )
    artifacts_dir: Path = Field(
        default=Path("build/artifacts"),
        description="Directory for failure screenshots and page sources",
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("artifacts_dir", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        return Path(v) if isinstance(v, str) else v

    @model_validator(mode="after")
    def check_window_size(self) -> "Configuration":
        """Width and height are only meaningful together."""
        if (self.window_width is None) != (self.window_height is None):
            raise ValueError(
                "window_width and window_height must be set together")
        return self

    @property
    def poll_interval_seconds(self) -> float:
        return self.poll_interval_ms / 1000

    def with_overrides(self, **changes: Any) -> "Configuration":
        """
        Return a validated copy with the given fields replaced.

        Args:
            **changes: Field values to override

        Returns:
            New Configuration; this instance is left untouched
        """
        data = self.model_dump()
        data.update(changes)
        return Configuration(**data)


class BrowserSettings(BaseModel):
    """Playwright browser configuration."""

    headless: bool = Field(
        default=True,
        description="Run browser in headless mode",
    )
    browser_type: Literal["chromium", "firefox", "webkit"] = Field(
        default="chromium",
        description="Browser engine to use",
    )
    action_timeout_ms: int = Field(
        default=30000,
        ge=1000,
        le=120000,
        description="Playwright default timeout for single element actions",
    )
    navigation_timeout_ms: int = Field(
        default=60000,
        ge=1000,
        le=180000,
        description="Timeout for page navigation in milliseconds",
    )
    viewport_width: int = Field(
        default=1280,
        ge=320,
        le=3840,
        description="Initial browser viewport width in pixels",
    )
    viewport_height: int = Field(
        default=720,
        ge=240,
        le=2160,
        description="Initial browser viewport height in pixels",
    )
    user_agent: str | None = Field(
        default=None,
        description="Custom user agent string. None uses browser default.",
    )
    ignore_https_errors: bool = Field(
        default=False,
        description="Whether to ignore HTTPS certificate errors",
    )


class LoggingSettings(BaseModel):
    """Opt-in handlers for the fluent_web logger, applied by setup_logging()."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum logging level",
    )
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        description="Log message format string",
    )
    date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date format for log timestamps",
    )
    file_path: Path | None = Field(
        default=None,
        description="Append wait diagnostics to this file. None means no file handler.",
    )
    log_to_console: bool = Field(
        default=True,
        description="Write wait diagnostics to stderr",
    )

    @field_validator("file_path", mode="before")
    @classmethod
    def convert_file_path(cls, v: str | Path | None) -> Path | None:
        """Convert string paths to Path objects."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class Settings(BaseModel):
    """
    Root configuration model containing all settings.

    Settings are loaded from YAML with environment variable overrides.
    """

    browser: BrowserSettings = Field(
        default_factory=BrowserSettings,
        description="Browser/Playwright settings",
    )
    driver: Configuration = Field(
        default_factory=Configuration,
        description="Wait and driver defaults",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    model_config = {
        "extra": "forbid",
        "validate_default": True,
    }
