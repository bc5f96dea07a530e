"""
Blob storage configuration.

Selects the Blob Access Layer implementation for chunk artifacts and an
optional secondary store used as the alternate source.

Dependencies: pydantic_settings
System role: Chunk artifact storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from smartdocs.configs.base import settings_config


class BlobStorageSettings(BaseSettings):
    """Settings for the chunk artifact blob stores."""

    model_config = settings_config("BLOB_STORAGE_")

    backend: str = Field(
        default="s3",
        description="Primary store: 's3', 'local' or 'memory'",
    )
    bucket: str = Field(
        default="smartdocsaicontainer",
        description="Bucket holding chunk artifacts",
    )
    region: str = Field(
        default="ap-southeast-2",
        description="AWS region for the bucket",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Optional S3-compatible endpoint override",
    )
    container_name: str = Field(
        default="smartdocsaicontainer",
        description="Container segment used to extract blob paths from content URLs",
    )
    local_root: str = Field(
        default="var/blobs",
        description="Root directory for the 'local' backend",
    )
    secondary_backend: str | None = Field(
        default=None,
        description="Alternate-source store: 'local', 'memory', 's3' or unset",
    )
    secondary_local_root: str = Field(
        default="var/fallback_blobs",
        description="Root directory when the secondary backend is 'local'",
    )
    secondary_bucket: str | None = Field(
        default=None,
        description="Bucket when the secondary backend is 's3'",
    )
    connect_timeout: float = Field(default=5.0, description="S3 connect timeout in seconds")
    read_timeout: float = Field(default=30.0, description="S3 read timeout in seconds")
    max_attempts: int = Field(
        default=3,
        ge=1,
        description="Attempts per S3 call for throttling/connection failures",
    )
