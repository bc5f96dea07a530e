"""
Chunk payload parser.

Normalizes raw artifact bytes into a ChunkContainer. Two JSON shapes are
accepted, discriminated once up front:

- object shape: {"chunks": [...], "chunks_count": ..., "chunk_type": ...,
  "processed_at": ..., "workspace_id": ..., "document_id": ...,
  "ingestion_source_id": ...}
- array shape: a bare list of chunk objects (older chunker output)

Dependencies: pydantic, json (stdlib)
System role: Second stage of the retrieval pipeline (bytes -> container)
"""

import json
import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from smartdocs.core.exceptions import EmptyContentError, ParseError

from .models import ArtifactShape, ChunkContainer, ChunkRecord

logger = logging.getLogger(__name__)


def _lenient_datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


class RawChunkMetadata(BaseModel):
    """metadata block written by the chunker for each chunk."""

    model_config = ConfigDict(extra="ignore")

    original_size: int | None = None
    chunk_size: int | None = None
    original_filename: str | None = None


class RawChunk(BaseModel):
    """Chunk object in the chunker's vocabulary."""

    model_config = ConfigDict(extra="ignore")

    chunk_index: int | None = None
    content: str = ""
    title: str | None = None
    source: str | None = None
    file_type: str | None = None
    created_at: datetime | None = None
    metadata: RawChunkMetadata = Field(default_factory=RawChunkMetadata)

    @field_validator("content", mode="before")
    @classmethod
    def coerce_content(cls, v: Any) -> str:
        """Missing or non-text content becomes an empty string."""
        return v if isinstance(v, str) else ""

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, v: Any) -> datetime | None:
        return _lenient_datetime(v)

    @field_validator("title", "source", "file_type", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str | None:
        return _optional_str(v)

    @field_validator("metadata", mode="before")
    @classmethod
    def default_metadata(cls, v: Any) -> Any:
        return v if isinstance(v, dict) else {}


class ObjectShapePayload(BaseModel):
    """Current artifact layout: chunks plus sibling provenance fields."""

    model_config = ConfigDict(extra="ignore")

    chunks: list[RawChunk]
    chunks_count: int | None = None
    chunk_type: str | None = None
    processed_at: datetime | None = None
    workspace_id: str = ""
    document_id: str = ""
    ingestion_source_id: str = ""

    @field_validator("processed_at", mode="before")
    @classmethod
    def parse_processed_at(cls, v: Any) -> datetime | None:
        return _lenient_datetime(v)

    @field_validator("workspace_id", "document_id", "ingestion_source_id", mode="before")
    @classmethod
    def coerce_identifier(cls, v: Any) -> str:
        return "" if v is None else str(v)


class ChunkPayloadParser:
    """Parse chunk artifacts into ChunkContainer instances."""

    def parse(self, data: bytes | str, path: str | None = None) -> ChunkContainer:
        """
        Parse raw artifact bytes.

        Args:
            data: Artifact bytes (UTF-8 JSON) or an already-decoded string
            path: Blob path the bytes came from, for error context

        Returns:
            ChunkContainer: Canonical container with at least one chunk

        Raises:
            ParseError: Invalid UTF-8/JSON or neither known shape
            EmptyContentError: Valid shape holding zero chunks
        """
        document = self._decode(data, path)
        shape = self.detect_shape(document, path)

        try:
            if shape is ArtifactShape.OBJECT:
                payload = ObjectShapePayload.model_validate(document)
                raw_chunks = payload.chunks
            else:
                payload = None
                raw_chunks = [RawChunk.model_validate(item) for item in document]
        except ValidationError as e:
            raise ParseError(
                f"Chunk artifact does not match the {shape.value} shape",
                path,
                {"errors": e.error_count(), "shape": shape.value},
            ) from e

        if not raw_chunks:
            raise EmptyContentError(path, {"shape": shape.value})

        records = [self._to_record(position, raw) for position, raw in enumerate(raw_chunks)]

        if payload is None:
            return ChunkContainer(shape=shape, chunks=records)

        if payload.chunks_count is not None and payload.chunks_count != len(records):
            logger.warning(
                f"{__name__}:parse - chunks_count={payload.chunks_count} "
                f"disagrees with {len(records)} parsed chunks",
                extra={"path": path},
            )

        return ChunkContainer(
            document_id=payload.document_id,
            workspace_id=payload.workspace_id,
            ingestion_source_id=payload.ingestion_source_id,
            chunk_type=payload.chunk_type,
            processed_at=payload.processed_at,
            declared_chunk_count=payload.chunks_count,
            shape=shape,
            chunks=records,
        )

    @staticmethod
    def detect_shape(document: Any, path: str | None = None) -> ArtifactShape:
        """
        Discriminate the artifact's top-level shape.

        Raises:
            ParseError: If the document is neither a list nor an object with a chunks list
        """
        if isinstance(document, list):
            return ArtifactShape.ARRAY
        if isinstance(document, dict) and isinstance(document.get("chunks"), list):
            return ArtifactShape.OBJECT
        raise ParseError(
            "Chunk artifact is neither a chunk array nor an object with a 'chunks' array",
            path,
            {"top_level_type": type(document).__name__},
        )

    @staticmethod
    def _decode(data: bytes | str, path: str | None) -> Any:
        try:
            text = data.decode("utf-8-sig") if isinstance(data, (bytes, bytearray)) else data
            return json.loads(text)
        except UnicodeDecodeError as e:
            raise ParseError("Chunk artifact is not valid UTF-8", path) from e
        except json.JSONDecodeError as e:
            raise ParseError(
                f"Chunk artifact is not valid JSON: {e.msg}",
                path,
                {"line": e.lineno, "column": e.colno},
            ) from e

    @staticmethod
    def _to_record(position: int, raw: RawChunk) -> ChunkRecord:
        return ChunkRecord(
            index=position,
            content=raw.content,
            title=raw.title,
            source=raw.source,
            file_type=raw.file_type,
            created_at=raw.created_at,
            original_size=raw.metadata.original_size,
            chunk_size=raw.metadata.chunk_size,
            source_index=raw.chunk_index,
            original_filename=raw.metadata.original_filename,
        )
