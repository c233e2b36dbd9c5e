"""
Tests for configuration module.

Tests settings validation, copy-on-override and YAML/environment loading.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from fluent_web.config import (
    BrowserSettings,
    Configuration,
    Settings,
    get_settings,
    load_config,
)
from fluent_web.core.exceptions import ConfigurationError


class TestConfiguration:
    """Tests for the wait/driver Configuration snapshot."""

    def test_defaults(self):
        config = Configuration()

        assert config.timeout_ms == 4000
        assert config.poll_interval_ms == 100
        assert config.window_width is None
        assert config.full_page_screenshot is False
        assert config.poll_interval_seconds == 0.1

    def test_is_frozen(self):
        """Configuration is never mutated after construction."""
        config = Configuration()

        with pytest.raises(ValidationError):
            config.timeout_ms = 10

    def test_with_overrides_copies(self):
        """Overrides return a new validated instance."""
        config = Configuration()

        changed = config.with_overrides(timeout_ms=6000, artifacts_dir="out")

        assert changed.timeout_ms == 6000
        assert changed.artifacts_dir == Path("out")
        assert config.timeout_ms == 4000

    def test_with_overrides_validates(self):
        with pytest.raises(ValidationError):
            Configuration().with_overrides(poll_interval_ms=0)

    def test_window_size_must_be_complete(self):
        with pytest.raises(ValidationError):
            Configuration(window_width=1024)

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            Configuration(timeout=5)


class TestSettings:
    """Tests for the root Settings model."""

    def test_default_settings_valid(self):
        settings = Settings()

        assert settings.browser.headless is True
        assert settings.browser.browser_type == "chromium"
        assert settings.driver.timeout_ms == 4000
        assert settings.logging.level == "INFO"

    def test_browser_settings_validation(self):
        browser = BrowserSettings(viewport_width=1920, browser_type="firefox")
        assert browser.viewport_width == 1920

        with pytest.raises(ValueError):
            BrowserSettings(browser_type="opera")

    def test_settings_nested_override(self):
        settings = Settings(
            browser={"headless": False},
            driver={"timeout_ms": 8000},
        )

        assert settings.browser.headless is False
        assert settings.driver.timeout_ms == 8000
        assert settings.driver.poll_interval_ms == 100


class TestConfigLoader:
    """Tests for configuration loading."""

    def test_load_config_defaults(self):
        settings = load_config(config_path=None)

        assert isinstance(settings, Settings)
        assert settings.driver.timeout_ms == 4000

    def test_load_config_from_yaml(self, temp_dir: Path):
        config_path = temp_dir / "config.yaml"
        config_data = {
            "browser": {"headless": False},
            "driver": {"timeout_ms": 5000, "window_width": 1800, "window_height": 1100},
        }

        with open(config_path, "w") as f:
            yaml.dump(config_data, f)

        settings = load_config(config_path)

        assert settings.browser.headless is False
        assert settings.driver.timeout_ms == 5000
        assert settings.driver.window_height == 1100

    def test_load_config_env_override(self, temp_dir: Path, monkeypatch):
        """Environment variables should override file settings."""
        config_path = temp_dir / "config.yaml"
        config_path.write_text("driver:\n  timeout_ms: 5000\n")
        monkeypatch.setenv("FLUENT_WEB__DRIVER__TIMEOUT_MS", "7000")
        monkeypatch.setenv("FLUENT_WEB__BROWSER__HEADLESS", "false")

        settings = load_config(config_path)

        assert settings.driver.timeout_ms == 7000
        assert settings.browser.headless is False

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(ConfigurationError):
            load_config(temp_dir / "missing.yaml")

    def test_invalid_yaml(self, temp_dir: Path):
        config_path = temp_dir / "invalid.yaml"
        config_path.write_text("{ invalid yaml content")

        with pytest.raises(ConfigurationError):
            load_config(config_path)

    def test_non_mapping_yaml(self, temp_dir: Path):
        config_path = temp_dir / "list.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            load_config(config_path)

    def test_invalid_values(self, monkeypatch):
        monkeypatch.setenv("FLUENT_WEB__DRIVER__POLL_INTERVAL_MS", "0")

        with pytest.raises(ConfigurationError):
            load_config()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
        assert get_settings(reload=True) is not None
