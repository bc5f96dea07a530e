"""
Core business logic module.

Contains the chunk retrieval engine and the exception hierarchy.
All business rules and domain-specific logic reside here.
"""

from smartdocs.core.exceptions import (
    AccessError,
    ArtifactNotFoundError,
    BlobNotFoundError,
    ChunkRetrievalError,
    EmptyContentError,
    InvalidStrategyError,
    ParseError,
    SmartDocsException,
)

__all__ = [
    "AccessError",
    "ArtifactNotFoundError",
    "BlobNotFoundError",
    "ChunkRetrievalError",
    "EmptyContentError",
    "InvalidStrategyError",
    "ParseError",
    "SmartDocsException",
]
