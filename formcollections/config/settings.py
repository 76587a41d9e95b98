"""
Application Settings
===================

Process-wide defaults for collection rendering using Pydantic Settings.
Values can be supplied through ``FORMCOLLECTIONS_*`` environment variables
or a ``.env`` file.
"""

import re
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TAG_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


class Settings(BaseSettings):
    """Form collection settings with environment variable support."""

    # Application Configuration
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    # Rendering Configuration
    collection_wrapper_tag: Optional[str] = Field(
        default=None, description="Tag wrapping a whole rendered collection"
    )
    item_wrapper_tag: Optional[str] = Field(
        default=None, description="Tag wrapping each rendered collection item"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("collection_wrapper_tag", "item_wrapper_tag")
    @classmethod
    def validate_wrapper_tag(cls, v: Optional[str]) -> Optional[str]:
        """Validate wrapper tag names, treating blank values as no wrapper."""
        if v is None:
            return None
        v = v.strip()
        if not v:
            return None
        if not TAG_NAME_PATTERN.match(v):
            raise ValueError(f"Invalid wrapper tag name: {v!r}")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="FORMCOLLECTIONS_",
        frozen=True,
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
