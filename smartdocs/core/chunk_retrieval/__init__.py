"""
Chunk retrieval pipeline.

Resolves a document's chunk artifact in blob storage, parses it, selects a
representative subset of chunks and combines them into display text.

Dependencies: pydantic, smartdocs.boundary.storage
System role: Core retrieval domain
"""

from .chunk_selector import ChunkSelector
from .content_cleaner import ContentCleaner
from .content_combiner import ContentCombiner
from .orchestrator import ChunkRetrievalOrchestrator
from .path_resolver import NAMING_CONVENTIONS, BlobPathResolver, extract_blob_path
from .payload_parser import ChunkPayloadParser

__all__ = [
    "BlobPathResolver",
    "ChunkPayloadParser",
    "ChunkRetrievalOrchestrator",
    "ChunkSelector",
    "ContentCleaner",
    "ContentCombiner",
    "NAMING_CONVENTIONS",
    "extract_blob_path",
]
