"""Configuration loading from TOML files and environment variables."""

import os
from pathlib import Path

from pydantic import ValidationError

from eles.config.defaults import (
    ENV_CAPTURE_FILE,
    ENV_LOG_LEVEL,
    ENV_NO_COLOR,
    get_config_path,
)
from eles.config.schema import ElesConfig, LoggingConfig
from eles.exceptions import ConfigError, ConfigValidationError

# Global config instance (singleton)
_config: ElesConfig | None = None


def load_config(config_path: Path | None = None) -> ElesConfig:
    """Load configuration from TOML file and environment variables.

    A missing file is not an error; defaults are used and nothing is
    written to disk.

    Args:
        config_path: Path to config file. If None, uses default.

    Returns:
        Loaded and validated configuration.

    Raises:
        ConfigError: If configuration cannot be loaded.
        ConfigValidationError: If configuration is invalid.
    """
    # Use Python 3.11+ tomllib or fallback
    try:
        import tomllib
    except ImportError:
        try:
            import tomli as tomllib
        except ImportError as err:
            raise ConfigError(
                "tomllib not available. Install 'tomli' for Python < 3.11"
            ) from err

    path = config_path or get_config_path()

    if not path.exists():
        return _apply_env_overrides(ElesConfig())

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        config = ElesConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {path}: {e}") from e

    return _apply_env_overrides(config)


def _apply_env_overrides(config: ElesConfig) -> ElesConfig:
    """Apply environment variable overrides to config."""
    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        try:
            config.logging = LoggingConfig(
                level=log_level,
                file=config.logging.file,
                json_format=config.logging.json_format,
            )
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid {ENV_LOG_LEVEL} value: {log_level!r}"
            ) from e

    capture_file = os.environ.get(ENV_CAPTURE_FILE)
    if capture_file:
        config.output.capture_file = Path(capture_file)

    # https://no-color.org: any non-empty value disables color
    if os.environ.get(ENV_NO_COLOR):
        config.output.color = False

    return config


def get_config() -> ElesConfig:
    """Get the current configuration (singleton).

    Loads config on first access, caches for subsequent calls.

    Returns:
        Current configuration.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the configuration singleton (mainly for testing)."""
    global _config
    _config = None
