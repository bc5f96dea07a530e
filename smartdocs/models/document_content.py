"""
Document content API schemas.

Response bodies for the chunk and content endpoints, built from a
RetrievalSuccess.

Dependencies: pydantic, smartdocs.core.chunk_retrieval.models
System role: Document content API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field

from smartdocs.core.chunk_retrieval.models import (
    ChunkRecord,
    ContentStats,
    RetrievalSuccess,
    SelectionStrategy,
)


class ChunkView(BaseModel):
    """One selected chunk as returned to clients."""

    index: int
    title: str | None = None
    source: str | None = None
    file_type: str | None = None
    content: str
    chunk_size: int | None = None

    @classmethod
    def from_record(cls, chunk: ChunkRecord, cleaned: str) -> "ChunkView":
        """Build a view whose content is the cleaned text, not the stored text."""
        return cls(
            index=chunk.index,
            title=chunk.title,
            source=chunk.source,
            file_type=chunk.file_type,
            content=cleaned,
            chunk_size=chunk.chunk_size,
        )


class ProcessingInfo(BaseModel):
    """How the returned text was selected and from where."""

    strategy: SelectionStrategy
    requested_strategy: str
    max_chunks: int
    total_available: int
    selected_count: int
    selected_indices: list[int]
    stats: ContentStats
    store: str
    used_alternate_source: bool = False
    source: str = "chunk_content"


class ChunksResponse(BaseModel):
    """GET /documents/{document_id}/chunks response body."""

    document_id: str
    workspace_id: str
    ingestion_source_id: str
    blob_path: str
    file_type: str
    chunk_type: str | None = None
    processed_at: datetime | None = None
    total_chunks: int
    chunks: list[ChunkView]
    combined_content: str = Field(description="Selected chunks with section headers")
    original_content: str = Field(description="Clean text of every chunk in the artifact")
    file_name: str | None = None
    processing_info: ProcessingInfo

    @classmethod
    def from_outcome(cls, outcome: RetrievalSuccess) -> "ChunksResponse":
        container = outcome.container
        return cls(
            document_id=container.document_id,
            workspace_id=container.workspace_id,
            ingestion_source_id=container.ingestion_source_id,
            blob_path=outcome.blob_path,
            file_type=container.file_type,
            chunk_type=container.chunk_type,
            processed_at=container.processed_at,
            total_chunks=container.total_chunks,
            chunks=[
                ChunkView.from_record(chunk, cleaned)
                for chunk, cleaned in zip(outcome.chunks, outcome.content.texts, strict=True)
            ],
            combined_content=outcome.content.text,
            original_content=outcome.original_text,
            file_name=container.original_filename,
            processing_info=_processing_info(outcome),
        )


class ContentResponse(BaseModel):
    """GET /documents/{document_id}/content response body."""

    document_id: str
    document_guid: str | None = None
    file_name: str | None = None
    content: str = Field(description="Clean text of every chunk in the artifact")
    content_type: str = "text/plain"
    content_length: int
    blob_path: str
    is_enhanced: bool = True
    processing_info: ProcessingInfo

    @classmethod
    def from_outcome(
        cls,
        outcome: RetrievalSuccess,
        document_guid: str | None = None,
    ) -> "ContentResponse":
        return cls(
            document_id=outcome.container.document_id,
            document_guid=document_guid,
            file_name=outcome.container.original_filename,
            content=outcome.original_text,
            content_length=len(outcome.original_text),
            blob_path=outcome.blob_path,
            processing_info=_processing_info(outcome),
        )


def _processing_info(outcome: RetrievalSuccess) -> ProcessingInfo:
    selection = outcome.selection
    return ProcessingInfo(
        strategy=selection.strategy,
        requested_strategy=selection.requested_strategy,
        max_chunks=selection.max_chunks,
        total_available=selection.total_available,
        selected_count=selection.selected_count,
        selected_indices=selection.selected_indices,
        stats=outcome.content.stats,
        store=outcome.store,
        used_alternate_source=outcome.used_alternate_source,
    )
