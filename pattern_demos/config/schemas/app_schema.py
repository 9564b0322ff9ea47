"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .logging_schema import LoggingConfig


class DisplayConfig(BaseModel):
    """Console narration settings."""

    separator_width: int = Field(48, ge=8, le=200, description="Width of rule lines")
    separator_char: str = Field("-", min_length=1, max_length=1, description="Rule character")
    section_width: int = Field(32, ge=8, le=200, description="Width of the rule above an example section")
    divider: str = Field(
        "--------------+-+-+------------------", min_length=1, description="Line printed between principles"
    )


class ProxyConfig(BaseModel):
    """Settings for the bank account proxy demo."""

    withdrawal_limit: int = Field(1000, description="Largest single withdrawal allowed")

    @field_validator("withdrawal_limit")
    @classmethod
    def validate_withdrawal_limit(cls, v: int) -> int:
        """Validate withdrawal limit."""
        if v <= 0:
            raise ValueError("Withdrawal limit must be positive")
        return v


class SingletonConfig(BaseModel):
    """Settings for the singleton database demo."""

    connection_string: str = Field(
        "mongodb://localhost:27017/mydb", min_length=1, description="Database connection string"
    )


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    display: DisplayConfig = Field(default_factory=lambda: DisplayConfig())
    proxy: ProxyConfig = Field(default_factory=lambda: ProxyConfig())
    singleton: SingletonConfig = Field(default_factory=lambda: SingletonConfig())
    output_format: str = Field("table", description="Default CLI output format")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """
        Validate output format.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If the format is not supported
        """
        valid_formats = ["json", "yaml", "table", "list"]
        if v not in valid_formats:
            raise ValueError(f"Output format must be one of {valid_formats}")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a plain dictionary."""
        return cls.model_validate(data)
