"""Environment configuration and validation.

Settings are loaded from environment variables (optionally via a local `.env` file) and only
affect the command line entry point; the parser functions take explicit arguments.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


def check_interval_designator(value: str) -> str:
    """Validate that a designator can split a repetition spec.

    It must be non-empty and must not contain the `R` marker, otherwise the split would land inside
    the marker itself.
    """

    if not value:
        raise ValueError("interval designator must not be empty")
    if "R" in value:
        raise ValueError("interval designator must not contain 'R'")
    return value


class Settings(BaseSettings):
    """Settings for the `bpmn-time` command."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    interval_designator: str = Field(default="/", alias="INTERVAL_DESIGNATOR")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("interval_designator")
    @classmethod
    def validate_interval_designator(cls, value: str) -> str:
        return check_interval_designator(value)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
