"""HTTP request/response schemas."""

from .common import ErrorResponse, SuccessResponse
from .document_content import ChunksResponse, ChunkView, ContentResponse, ProcessingInfo

__all__ = [
    "ChunkView",
    "ChunksResponse",
    "ContentResponse",
    "ErrorResponse",
    "ProcessingInfo",
    "SuccessResponse",
]
