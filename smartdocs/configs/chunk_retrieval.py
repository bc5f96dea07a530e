"""
Chunk retrieval configuration.

Naming-convention, selection and timeout settings for the retrieval engine.

Dependencies: pydantic, pydantic_settings
System role: Retrieval engine configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from smartdocs.configs.base import settings_config


class ChunkRetrievalSettings(BaseSettings):
    """Settings for chunk artifact resolution and selection."""

    model_config = settings_config("CHUNK_RETRIEVAL_")

    chunks_prefix: str = Field(
        default="short_chunks/",
        description="Directory prefix of chunk artifacts",
    )
    legacy_disambiguators: list[int] = Field(
        default=[1, 2, 3],
        description="n values tried for legacy '_chunks (n).json' artifacts",
    )
    default_strategy: str = Field(
        default="balanced",
        description="Selection strategy when the caller gives none",
    )
    default_max_chunks: int = Field(default=10, description="Chunk budget for /chunks")
    content_max_chunks: int = Field(default=20, description="Chunk budget for /content")
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Deadline for one retrieval, storage calls included",
    )
    parallel_probe: bool = Field(
        default=False,
        description="Probe candidate paths concurrently (priority order still wins)",
    )
    alternate_source_enabled: bool = Field(
        default=True,
        description="Allow the single alternate-source attempt after a failure",
    )
