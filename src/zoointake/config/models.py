"""Configuration models for zoo intake."""

import logging

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Structlog-based logging configuration."""

    level: str = "INFO"
    json_logs: bool = False  # JSON lines instead of human-readable console output
    include_caller: bool = False  # Include file:line info (useful for debugging)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate the log level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level '{v}'.")
        return level


class ZooConfig(BaseModel):
    """Configuration settings for the zoo intake run."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
