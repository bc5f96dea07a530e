"""
Shared API envelope models.

Every documents endpoint answers with one of these two envelopes so clients
can branch on `success` before reading the payload.

Dependencies: pydantic
System role: Response envelopes for the HTTP surface
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

PayloadT = TypeVar("PayloadT")


class SuccessResponse(BaseModel, Generic[PayloadT]):
    """Envelope for a successful call."""

    success: bool = True
    message: str | None = None
    data: PayloadT


class ErrorResponse(BaseModel):
    """Envelope for a failed retrieval or request."""

    success: bool = False
    error: str = Field(description="Human-readable failure message")
    reason: str | None = Field(default=None, description="Failure reason code, e.g. not_found")
    suggestion: str | None = Field(default=None, description="What the caller can do next")
    details: dict[str, Any] | None = Field(default=None, description="Diagnostic context")
