"""
RetrievalFailure to HTTP response mapping.

Dependencies: fastapi, smartdocs.models
System role: Error translation for document content endpoints
"""

from fastapi.responses import JSONResponse

from smartdocs.core.chunk_retrieval.models import FailureReason, RetrievalFailure
from smartdocs.models import ErrorResponse

REPROCESS_SUGGESTION = "Document may need to be reprocessed to generate chunks"

# reason -> (status code, client-facing message)
FAILURE_STATUS: dict[FailureReason, tuple[int, str]] = {
    FailureReason.NOT_FOUND: (404, "No processed chunks found for document"),
    FailureReason.EMPTY_CONTENT: (404, "Processed chunk artifact contains no chunks"),
    FailureReason.ACCESS_ERROR: (503, "Document storage unavailable"),
    FailureReason.PARSE_ERROR: (500, "Failed to process document chunks"),
    FailureReason.TIMEOUT: (504, "Timed out retrieving document chunks"),
}


def failure_response(document_id: str, failure: RetrievalFailure) -> JSONResponse:
    """
    Build the error response for a failed retrieval.

    Args:
        document_id: Requested document
        failure: Terminal retrieval failure

    Returns:
        JSONResponse: ErrorResponse body with mapped status code
    """
    status_code, message = FAILURE_STATUS[failure.reason]
    body = ErrorResponse(
        error=message,
        reason=failure.reason.value,
        suggestion=REPROCESS_SUGGESTION if failure.needs_reprocessing else None,
        details={
            "document_id": document_id,
            "failed_in": failure.failed_in.value,
            "cause": failure.message,
            "attempted_paths": failure.attempted_paths,
            "used_alternate_source": failure.used_alternate_source,
        },
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
