"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from smartdocs.configs.base import BaseSettings
from smartdocs.configs.blob_storage import BlobStorageSettings
from smartdocs.configs.chunk_retrieval import ChunkRetrievalSettings
from smartdocs.configs.observability import ObservabilitySettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    blob_storage: BlobStorageSettings = Field(default_factory=BlobStorageSettings)
    chunk_retrieval: ChunkRetrievalSettings = Field(default_factory=ChunkRetrievalSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from smartdocs.configs import get_settings
        settings = get_settings()
    """
    return Settings()
