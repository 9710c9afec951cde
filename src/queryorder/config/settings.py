"""
Application settings and configuration management.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from queryorder import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="queryorder")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Ordering
    order_query_param: str = Field(default="orderBy")

    # Error responses
    error_type_base: str = Field(default="https://queryorder.dev/errors")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("order_query_param")
    @classmethod
    def validate_order_query_param(cls, v: str) -> str:
        """Ensure the query parameter name is usable."""
        v = v.strip()
        if not v:
            raise ValueError("order_query_param must not be empty")
        return v

    model_config = {
        "env_prefix": "QUERYORDER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()

