"""Configuration loading for orderflow.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Payment configuration
    payment_vendor_approves: bool = Field(
        default=True,
        description="Answer the stubbed payment vendor gives for every charge",
    )
    payment_preserve_discarded_result: bool = Field(
        default=False,
        description="Return a default (failed) PaymentResult regardless of the vendor answer",
    )

    # Shipping configuration
    shipping_carrier: str = Field(
        default="fake-carrier",
        description="Carrier name reported by the shipping adapter",
    )

    # Audit configuration
    audit_backend: Literal["stdout", "log", "jsonl"] = Field(
        default="stdout",
        description="Audit backend type",
    )
    audit_output_path: str = Field(
        default="./audit/orders.jsonl",
        description="Output file for the jsonl audit backend",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose audit output",
    )

    @field_validator("shipping_carrier")
    @classmethod
    def validate_shipping_carrier(cls, v: str) -> str:
        """Ensure carrier name is not blank."""
        if not v.strip():
            raise ValueError("shipping_carrier must be a non-empty string")
        return v

    @field_validator("audit_output_path")
    @classmethod
    def validate_audit_output_path(cls, v: str) -> str:
        """Ensure audit output path is not blank."""
        if not v.strip():
            raise ValueError("audit_output_path must be a non-empty string")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
