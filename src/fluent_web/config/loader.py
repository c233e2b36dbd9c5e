"""
Configuration loader with YAML file support and environment variable overrides.

Supports loading from:
1. Default values (defined in settings.py)
2. YAML configuration file
3. Environment variables (highest priority)

Environment variables use the pattern: FLUENT_WEB__{SECTION}__{KEY}
Example: FLUENT_WEB__DRIVER__TIMEOUT_MS=8000
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fluent_web.config.settings import Settings
from fluent_web.core.exceptions import ConfigurationError
from fluent_web.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENV_PREFIX = "FLUENT_WEB"

# Module-level settings cache
_settings_instance: Settings | None = None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries, with override taking precedence.

    Args:
        base: Base dictionary to merge into
        override: Dictionary with values to override

    Returns:
        Merged dictionary with override values taking precedence
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _parse_env_value(value: str) -> Any:
    """
    Parse environment variable string into appropriate Python type.

    Integers are tried before booleans so that "0" and "1" stay numeric
    for fields such as timeout_ms.
    """
    if value.lower() in ("none", "null", ""):
        return None

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False

    return value


def _load_env_overrides(prefix: str = DEFAULT_ENV_PREFIX) -> dict[str, Any]:
    """
    Load configuration overrides from environment variables.

    Environment variables should follow the pattern:
    {PREFIX}__{SECTION}__{KEY}

    For example:
    - FLUENT_WEB__DRIVER__POLL_INTERVAL_MS=50
    - FLUENT_WEB__BROWSER__HEADLESS=false

    Args:
        prefix: Environment variable prefix to look for

    Returns:
        Dictionary of configuration overrides
    """
    overrides: dict[str, Any] = {}
    prefix_with_sep = f"{prefix}__"

    for key, value in os.environ.items():
        if not key.startswith(prefix_with_sep):
            continue

        key_path = key[len(prefix_with_sep):].lower().split("__")

        if len(key_path) < 2:
            continue

        current = overrides
        for part in key_path[:-1]:
            current = current.setdefault(part, {})

        current[key_path[-1]] = _parse_env_value(value)

    return overrides


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load configuration from a YAML file.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML,
            or does not contain a mapping
    """
    if not path.exists():
        raise ConfigurationError(
            "Configuration file not found", details={"path": str(path)})

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file: {e}",
            details={"path": str(path)},
        ) from e

    if content is None:
        return {}

    if not isinstance(content, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got: {type(content).__name__}",
            details={"path": str(path)},
        )

    return content


def load_config(
    config_path: Path | str | None = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> Settings:
    """
    Load configuration from YAML file with environment variable overrides.

    Priority (highest to lowest):
    1. Environment variables
    2. YAML configuration file
    3. Default values

    Args:
        config_path: Path to YAML configuration file. If None, uses defaults only.
        env_prefix: Prefix for environment variables

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If the file cannot be read or values are invalid
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        yaml_config = _load_yaml_file(Path(config_path))
        config_data = _deep_merge(config_data, yaml_config)
        logger.debug(f"Loaded configuration from {config_path}")

    env_overrides = _load_env_overrides(env_prefix)
    config_data = _deep_merge(config_data, env_overrides)

    try:
        return Settings(**config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def get_settings(
    config_path: Path | str | None = None,
    reload: bool = False,
) -> Settings:
    """
    Get the global Settings instance, loading it if necessary.

    Args:
        config_path: Path to YAML configuration file (only used on first load or reload)
        reload: If True, force reload configuration from file

    Returns:
        Global Settings instance
    """
    global _settings_instance

    if _settings_instance is None or reload:
        _settings_instance = load_config(config_path)

    return _settings_instance


def reset_settings() -> None:
    """Reset the cached settings instance."""
    global _settings_instance
    _settings_instance = None
