"""Pydantic models for eles configuration."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from eles.config.defaults import DEFAULT_CAPTURE_FILE

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OutputConfig(BaseModel):
    """Output configuration."""

    color: bool = True
    capture_file: Path = DEFAULT_CAPTURE_FILE


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: Path | None = None  # Default: no file logging
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return level


class ElesConfig(BaseModel):
    """Root configuration for eles."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
