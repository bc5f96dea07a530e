"""
Base configuration settings.

Shared env-file handling for every settings module plus the
application-wide fields (service identity and environment).

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


def settings_config(env_prefix: str = "") -> SettingsConfigDict:
    """
    Build the model_config used by every settings class.

    Args:
        env_prefix: Environment variable prefix (e.g. "BLOB_STORAGE_")

    Returns:
        SettingsConfigDict: .env-aware, case-insensitive, extra keys ignored
    """
    return SettingsConfigDict(
        env_prefix=env_prefix,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class BaseSettings(PydanticBaseSettings):
    """Application-wide settings shared by the API and the retrieval engine."""

    model_config = settings_config()

    service_name: str = Field(
        default="smartdocs-chunk-retrieval",
        description="Service name reported in logs",
    )
    environment: str = Field(
        default="development",
        description="Deployment environment (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
