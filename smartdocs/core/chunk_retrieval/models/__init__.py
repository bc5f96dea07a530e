"""Chunk retrieval domain models."""

from .chunk import ArtifactShape, ChunkContainer, ChunkRecord
from .retrieval import (
    AttemptOutcome,
    CandidateAttempt,
    CandidatePath,
    ContainerSummary,
    FailureReason,
    RetrievalFailure,
    RetrievalOutcome,
    RetrievalRequest,
    RetrievalState,
    RetrievalSuccess,
    SelectionSummary,
)
from .selection import CombinedContent, ContentStats, SelectionResult, SelectionStrategy

__all__ = [
    "ArtifactShape",
    "AttemptOutcome",
    "CandidateAttempt",
    "CandidatePath",
    "ChunkContainer",
    "ChunkRecord",
    "CombinedContent",
    "ContainerSummary",
    "ContentStats",
    "FailureReason",
    "RetrievalFailure",
    "RetrievalOutcome",
    "RetrievalRequest",
    "RetrievalState",
    "RetrievalSuccess",
    "SelectionResult",
    "SelectionStrategy",
    "SelectionSummary",
]
