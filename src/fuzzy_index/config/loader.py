"""Configuration loading from TOML files and environment variables."""

import os
import tomllib
from pathlib import Path

from pydantic import ValidationError

from fuzzy_index.config.defaults import (
    DEFAULT_CONFIG_TOML,
    ENV_CONFIG_PATH,
    ENV_LOG_LEVEL,
    ENV_OUTPUT_FORMAT,
    ENV_THRESHOLD,
    get_config_path,
)
from fuzzy_index.config.schema import FuzzyIndexConfig, OutputFormat
from fuzzy_index.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError

# Global config instance (singleton)
_config: FuzzyIndexConfig | None = None


def load_config(
    config_path: Path | None = None,
    *,
    create_if_missing: bool = False,
) -> FuzzyIndexConfig:
    """Load configuration from a TOML file and environment variables.

    Args:
        config_path: Path to config file. If None, uses FUZZY_INDEX_CONFIG
            or the default location.
        create_if_missing: Write the default config if the file doesn't
            exist. Otherwise a missing default file means built-in defaults,
            and a missing file that was asked for is an error.

    Returns:
        Loaded and validated configuration.

    Raises:
        ConfigNotFoundError: If an explicitly chosen file does not exist.
        ConfigError: If the file cannot be read or parsed.
        ConfigValidationError: If configuration values are invalid.
    """
    explicit = config_path is not None or bool(os.environ.get(ENV_CONFIG_PATH))
    path = config_path or get_config_path()

    if not path.exists():
        if create_if_missing:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(DEFAULT_CONFIG_TOML)
        elif explicit:
            raise ConfigNotFoundError(f"Config file not found: {path}")
        else:
            return _apply_env_overrides(FuzzyIndexConfig())

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigNotFoundError(f"Config file not found: {path}") from e
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    try:
        config = FuzzyIndexConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}") from e

    return _apply_env_overrides(config)


def _apply_env_overrides(config: FuzzyIndexConfig) -> FuzzyIndexConfig:
    """Apply environment variable overrides to configuration."""
    threshold = os.environ.get(ENV_THRESHOLD)
    if threshold:
        try:
            search = config.search.model_copy(update={"threshold": float(threshold)})
        except ValueError as e:
            raise ConfigValidationError(
                f"{ENV_THRESHOLD} must be a number, got {threshold!r}"
            ) from e
        config = config.model_copy(update={"search": search})

    output_format = os.environ.get(ENV_OUTPUT_FORMAT)
    if output_format:
        try:
            config.output.default_format = OutputFormat(output_format.lower())
        except ValueError as e:
            raise ConfigValidationError(
                f"{ENV_OUTPUT_FORMAT} must be one of "
                f"{', '.join(f.value for f in OutputFormat)}, got {output_format!r}"
            ) from e

    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        config.logging.level = log_level.upper()

    return config


def get_config() -> FuzzyIndexConfig:
    """Get the current configuration (singleton).

    Loads config on first access, caches for subsequent calls.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(config_path: Path | None = None) -> FuzzyIndexConfig:
    """Reload configuration from disk."""
    global _config
    _config = load_config(config_path)
    return _config


def reset_config() -> None:
    """Reset the configuration singleton (mainly for testing)."""
    global _config
    _config = None
