"""
Chunk domain models for artifact retrieval.

Represents a parsed chunk artifact and the individual chunks it holds.

Dependencies: pydantic
System role: Canonical in-memory chunk container produced by the parser
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ArtifactShape(str, Enum):
    """Top-level JSON shape a chunk artifact was stored in."""

    OBJECT = "object"
    ARRAY = "array"


class ChunkRecord(BaseModel):
    """One retrievable unit of document text."""

    index: int = Field(ge=0, description="Zero-based position in the source artifact")
    content: str = Field(default="", description="Raw (uncleaned) chunk text")
    title: str | None = Field(default=None, description="Chunk or document title")
    source: str | None = Field(default=None, description="Upstream source label")
    file_type: str | None = Field(default=None, description="Source file type")
    created_at: datetime | None = Field(default=None, description="Chunk creation time")
    original_size: int | None = Field(default=None, description="Source size reported by chunker")
    chunk_size: int | None = Field(default=None, description="Chunk size reported by chunker")
    source_index: int | None = Field(
        default=None,
        description="Upstream chunk_index value as written by the chunker",
    )
    original_filename: str | None = Field(default=None, description="Source document filename")

    model_config = ConfigDict(frozen=True)


class ChunkContainer(BaseModel):
    """Parsed chunk artifact with provenance metadata."""

    document_id: str = Field(default="", description="Document identifier")
    workspace_id: str = Field(default="", description="Workspace (tenant) identifier")
    ingestion_source_id: str = Field(default="", description="Upstream pipeline tag")
    chunk_type: str | None = Field(default=None, description="Chunker provenance tag")
    processed_at: datetime | None = Field(default=None, description="Chunker run time")
    declared_chunk_count: int | None = Field(
        default=None,
        description="chunks_count as written by the chunker (may disagree with len(chunks))",
    )
    shape: ArtifactShape = Field(description="JSON shape the artifact was stored in")
    chunks: list[ChunkRecord] = Field(min_length=1, description="Chunks in index order")

    model_config = ConfigDict(frozen=True)

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    @property
    def file_type(self) -> str:
        """File type of the first chunk, the way the dashboard labels documents."""
        return self.chunks[0].file_type or "unknown"
