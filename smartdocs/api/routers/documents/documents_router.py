"""
Document content API endpoints.

Routes:
- GET /documents/{document_id}/chunks - Selected chunks plus combined text
- GET /documents/{document_id}/content - Clean document text, content URL first

Dependencies: smartdocs.application.services, smartdocs.models
System role: Document content HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from smartdocs.api.deps import get_chunk_content_service
from smartdocs.application.services import ChunkContentService
from smartdocs.core.chunk_retrieval.models import RetrievalFailure
from smartdocs.models import ChunksResponse, ContentResponse, ErrorResponse, SuccessResponse
from smartdocs.observability.log_utils import log_exception_with_context

from .failure_mapping import failure_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])

_ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "No usable chunk artifact"},
    500: {"model": ErrorResponse, "description": "Chunk artifact could not be parsed"},
    503: {"model": ErrorResponse, "description": "Blob storage unavailable"},
    504: {"model": ErrorResponse, "description": "Retrieval timed out"},
}


@router.get(
    "/{document_id}/chunks",
    response_model=SuccessResponse[ChunksResponse],
    responses=_ERROR_RESPONSES,
)
async def get_document_chunks(
    document_id: str,
    workspace_id: str = Query(..., min_length=1),
    ingestion_source_id: str = Query(..., min_length=1),
    document_guid: str | None = Query(default=None),
    strategy: str | None = Query(default=None, description="first | summary | balanced | all"),
    max_chunks: int | None = Query(default=None, le=1000),
    service: ChunkContentService = Depends(get_chunk_content_service),
) -> SuccessResponse[ChunksResponse] | JSONResponse:
    """
    Return a representative selection of a document's chunks.

    Args:
        document_id: Document identifier
        workspace_id: Workspace owning the document
        ingestion_source_id: Ingestion source that produced the chunks
        document_guid: Optional alternate document key
        strategy: Selection strategy (unknown names fall back to balanced)
        max_chunks: Chunk budget
        service: Injected ChunkContentService

    Returns:
        SuccessResponse[ChunksResponse]: Selected chunks and combined text

    Raises:
        HTTPException(500): Unexpected error outside the retrieval pipeline
    """
    try:
        outcome = await service.get_chunks(
            workspace_id=workspace_id,
            document_id=document_id,
            ingestion_source_id=ingestion_source_id,
            document_guid=document_guid,
            strategy=strategy,
            max_chunks=max_chunks,
        )
    except Exception as e:
        log_exception_with_context(logger, "Chunk retrieval crashed", e, document_id=document_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve document chunks")

    if isinstance(outcome, RetrievalFailure):
        return failure_response(document_id, outcome)

    return SuccessResponse[ChunksResponse](
        message="Document chunks retrieved successfully",
        data=ChunksResponse.from_outcome(outcome),
    )


@router.get(
    "/{document_id}/content",
    response_model=SuccessResponse[ContentResponse],
    responses=_ERROR_RESPONSES,
)
async def get_document_content(
    document_id: str,
    workspace_id: str = Query(..., min_length=1),
    ingestion_source_id: str = Query(..., min_length=1),
    content_url: str | None = Query(default=None, description="Stored chunk artifact URL"),
    document_guid: str | None = Query(default=None),
    strategy: str | None = Query(default=None),
    max_chunks: int | None = Query(default=None, le=1000),
    service: ChunkContentService = Depends(get_chunk_content_service),
) -> SuccessResponse[ContentResponse] | JSONResponse:
    """
    Return clean document text assembled from its processed chunks.

    Raises:
        HTTPException(500): Unexpected error outside the retrieval pipeline
    """
    try:
        outcome = await service.get_content(
            workspace_id=workspace_id,
            document_id=document_id,
            ingestion_source_id=ingestion_source_id,
            content_url=content_url,
            document_guid=document_guid,
            strategy=strategy,
            max_chunks=max_chunks,
        )
    except Exception as e:
        log_exception_with_context(logger, "Content retrieval crashed", e, document_id=document_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve document content")

    if isinstance(outcome, RetrievalFailure):
        return failure_response(document_id, outcome)

    return SuccessResponse[ContentResponse](
        message="Document content retrieved successfully from chunks",
        data=ContentResponse.from_outcome(outcome, document_guid=document_guid),
    )
