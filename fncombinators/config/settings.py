"""Configuration management using Pydantic Settings.

Settings are loaded from environment variables prefixed with ``FNCOMBINATORS_``
(nested groups use ``__`` as delimiter) and from an optional ``.env`` file.

The configuration is organized into logical groups:
- LoggingConfig: Whether the library emits log records, and at which level
- FlowConfig: Optional guards for the flow-control combinators
"""

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console output."""

    enabled: bool = False
    console_level: str = "INFO"

    @field_validator("console_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        return value.upper()


class FlowConfig(BaseModel):
    """Flow-control configuration.

    ``until_max_iterations`` caps the number of transform applications made by
    ``until``. ``None`` (the default) leaves the loop unbounded.
    """

    until_max_iterations: int | None = None

    @field_validator("until_max_iterations")
    @classmethod
    def positive_cap(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError("until_max_iterations must be a positive integer")
        return value


class Settings(BaseSettings):
    """Library settings with environment variable support.

    Examples:
        FNCOMBINATORS_LOGGING__ENABLED=true
        FNCOMBINATORS_LOGGING__CONSOLE_LEVEL=debug
        FNCOMBINATORS_FLOW__UNTIL_MAX_ITERATIONS=10000
    """

    model_config = SettingsConfigDict(
        env_prefix="FNCOMBINATORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    flow: FlowConfig = FlowConfig()


# Singleton instance for library use
settings = Settings()
