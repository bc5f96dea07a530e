"""
Shared test fixtures and configuration for entire test suite.

Provides: chunk and artifact builders, in-memory blob store
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import json
from typing import Any

import pytest

from smartdocs.boundary.storage import InMemoryBlobStore
from smartdocs.core.chunk_retrieval.models import ChunkRecord

WORKSPACE_ID = "ws1"
DOCUMENT_ID = "doc1"
INGESTION_SOURCE_ID = "src1"


def _raw_chunk(i: int) -> dict[str, Any]:
    return {
        "chunk_index": i,
        "content": f"Paragraph {i} of the quarterly report.",
        "title": "Quarterly Report",
        "source": "upload",
        "file_type": "pdf",
        "created_at": "2024-05-01T10:00:00Z",
        "metadata": {
            "original_size": 5000,
            "chunk_size": 36,
            "original_filename": "report.pdf",
        },
    }


@pytest.fixture
def canonical_path() -> str:
    """Provide canonical artifact path for the default identifiers."""
    return f"short_chunks/{WORKSPACE_ID}_{DOCUMENT_ID}_{INGESTION_SOURCE_ID}_chunks.json"


@pytest.fixture
def chunk_factory():
    """Provide builder for lists of ChunkRecord with positional indices."""

    def _make(count: int, prefix: str = "Chunk") -> list[ChunkRecord]:
        return [ChunkRecord(index=i, content=f"{prefix} {i} text") for i in range(count)]

    return _make


@pytest.fixture
def artifact_factory():
    """Provide builder for serialized chunk artifacts in either shape."""

    def _make(count: int, shape: str = "object", **overrides: Any) -> bytes:
        chunks = [_raw_chunk(i) for i in range(count)]
        if shape == "array":
            return json.dumps(chunks).encode("utf-8")
        document = {
            "chunks": chunks,
            "chunks_count": count,
            "chunk_type": "short",
            "processed_at": "2024-05-01T10:05:00Z",
            "workspace_id": WORKSPACE_ID,
            "document_id": DOCUMENT_ID,
            "ingestion_source_id": INGESTION_SOURCE_ID,
        }
        document.update(overrides)
        return json.dumps(document).encode("utf-8")

    return _make


@pytest.fixture
def memory_store() -> InMemoryBlobStore:
    """Provide empty in-memory blob store."""
    return InMemoryBlobStore()
