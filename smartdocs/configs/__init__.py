"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from smartdocs.configs.blob_storage import BlobStorageSettings
from smartdocs.configs.chunk_retrieval import ChunkRetrievalSettings
from smartdocs.configs.observability import ObservabilitySettings
from smartdocs.configs.settings import Settings, get_settings

__all__ = [
    "BlobStorageSettings",
    "ChunkRetrievalSettings",
    "ObservabilitySettings",
    "Settings",
    "get_settings",
]
