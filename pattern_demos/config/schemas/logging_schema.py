"""Logging configuration schema."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    CONSOLE = "console"
    BOTH = "both"


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/pattern_demos.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Rotate after this many megabytes")
    backup_count: int = Field(5, ge=0, description="Number of rotated files to keep")


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(
        LogDestination.CONSOLE, description="Where log records are written"
    )
    file: LogFileConfig = Field(default_factory=LogFileConfig)
    format: Optional[str] = Field(
        None, description="Optional stdlib format string wrapped around the rendered event"
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("destination", mode="before")
    @classmethod
    def normalize_destination(cls, v):
        """Accept destinations in any case."""
        if isinstance(v, str):
            return v.lower()
        return v
