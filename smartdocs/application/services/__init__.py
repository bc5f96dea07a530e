"""Service orchestrators."""

from .chunk_content_service import ChunkContentService

__all__ = ["ChunkContentService"]
