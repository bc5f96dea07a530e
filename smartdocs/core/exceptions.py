"""
Exception hierarchy for SmartDocs chunk retrieval.

Provides layered exception structure for storage, parsing and selection errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the retrieval engine
"""

from typing import Any


class SmartDocsException(Exception):
    """Base exception for all SmartDocs application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ChunkRetrievalError(SmartDocsException):
    """Base exception for chunk artifact retrieval errors."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize chunk retrieval error.

        Args:
            message: Error message
            path: Blob path involved in the failure
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        self.path = path
        super().__init__(message, details)


class BlobNotFoundError(ChunkRetrievalError):
    """Raised by a blob store when a single path does not exist."""

    def __init__(self, path: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Blob not found: {path}", path, details)


class AccessError(ChunkRetrievalError):
    """Raised when storage is reachable but denies access or fails transiently."""


class ArtifactNotFoundError(ChunkRetrievalError):
    """Raised when no candidate path resolves to an existing artifact."""

    def __init__(
        self,
        attempted_paths: list[str],
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize artifact not found error.

        Args:
            attempted_paths: Every candidate path probed, in priority order
            details: Additional context
        """
        details = details or {}
        details["attempted_paths"] = list(attempted_paths)
        self.attempted_paths = list(attempted_paths)
        super().__init__(
            f"No chunks found for document. Tried {len(attempted_paths)} path(s)",
            None,
            details,
        )


class ParseError(ChunkRetrievalError):
    """Raised when a payload is not valid JSON or matches no known shape."""


class EmptyContentError(ChunkRetrievalError):
    """Raised when a payload parses but holds zero chunks."""

    def __init__(self, path: str | None = None, details: dict[str, Any] | None = None) -> None:
        super().__init__("Chunk artifact contains no chunks", path, details)


class InvalidStrategyError(SmartDocsException):
    """Raised when a selection strategy name is not recognised."""

    def __init__(self, strategy: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["strategy"] = strategy
        self.strategy = strategy
        super().__init__(f"Unknown selection strategy: {strategy!r}", details)
