"""
Retrieval request/outcome models.

Covers candidate storage paths, probe attempts, the orchestrator's state
machine and the typed success/failure outcome returned to callers.

Dependencies: pydantic
System role: Contract between the retrieval orchestrator and its callers
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .chunk import ArtifactShape, ChunkRecord
from .selection import CombinedContent, SelectionStrategy


class CandidatePath(BaseModel):
    """One guess at an artifact's storage location."""

    path: str
    convention: str = Field(description="Naming convention that produced the path")

    model_config = ConfigDict(frozen=True)


class AttemptOutcome(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"


class CandidateAttempt(BaseModel):
    """Result of probing one candidate path."""

    path: str
    convention: str
    outcome: AttemptOutcome
    store: str = Field(default="primary", description="Which blob store was probed")


class RetrievalState(str, Enum):
    """States of a single retrieval request."""

    RESOLVING_PATH = "resolving_path"
    FETCHING = "fetching"
    PARSING = "parsing"
    SELECTING = "selecting"
    COMBINING = "combining"
    DONE = "done"
    FAILED = "failed"


class FailureReason(str, Enum):
    """Terminal failure reasons surfaced to the request layer."""

    NOT_FOUND = "not_found"
    ACCESS_ERROR = "access_error"
    PARSE_ERROR = "parse_error"
    EMPTY_CONTENT = "empty_content"
    TIMEOUT = "timeout"

    @property
    def needs_reprocessing(self) -> bool:
        """True when re-running ingestion is the likely fix."""
        return self in (FailureReason.NOT_FOUND, FailureReason.EMPTY_CONTENT)


class RetrievalRequest(BaseModel):
    """Identifiers and selection parameters for one retrieval."""

    workspace_id: str
    document_id: str
    ingestion_source_id: str
    document_guid: str | None = None
    content_url: str | None = None
    strategy: str = SelectionStrategy.BALANCED.value
    max_chunks: int = 10


class ContainerSummary(BaseModel):
    """Provenance metadata of the parsed artifact."""

    document_id: str
    workspace_id: str
    ingestion_source_id: str
    chunk_type: str | None = None
    processed_at: datetime | None = None
    shape: ArtifactShape
    total_chunks: int
    file_type: str = "unknown"
    original_filename: str | None = None


class SelectionSummary(BaseModel):
    strategy: SelectionStrategy
    requested_strategy: str
    max_chunks: int
    total_available: int
    selected_count: int
    selected_indices: list[int]


class RetrievalSuccess(BaseModel):
    """Successful retrieval: combined content plus provenance."""

    status: Literal["done"] = "done"
    state: RetrievalState = RetrievalState.DONE
    blob_path: str
    store: str = Field(description="Blob store the artifact was read from")
    used_alternate_source: bool = False
    content: CombinedContent
    chunks: list[ChunkRecord] = Field(default_factory=list, description="Selected chunks in order")
    original_text: str = Field(description="Flat rendering of every chunk in the artifact")
    selection: SelectionSummary
    container: ContainerSummary
    attempts: list[CandidateAttempt] = Field(default_factory=list)


class RetrievalFailure(BaseModel):
    """Terminal failure with aggregated diagnostic context."""

    status: Literal["failed"] = "failed"
    state: RetrievalState = RetrievalState.FAILED
    failed_in: RetrievalState = Field(description="State the request was in when it failed")
    reason: FailureReason
    message: str
    attempted_paths: list[str] = Field(default_factory=list)
    attempts: list[CandidateAttempt] = Field(default_factory=list)
    used_alternate_source: bool = False
    details: dict[str, Any] = Field(default_factory=dict)

    @property
    def needs_reprocessing(self) -> bool:
        return self.reason.needs_reprocessing


RetrievalOutcome = Annotated[
    Union[RetrievalSuccess, RetrievalFailure],
    Field(discriminator="status"),
]
