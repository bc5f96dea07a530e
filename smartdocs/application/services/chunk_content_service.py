"""
Chunk content service orchestrator.

Turns HTTP-level query parameters into retrieval requests, applying the
configured defaults, and hands them to the retrieval orchestrator.

Dependencies: smartdocs.core.chunk_retrieval, smartdocs.configs
System role: Document chunk content orchestration
"""

import logging

from smartdocs.configs.chunk_retrieval import ChunkRetrievalSettings
from smartdocs.core.chunk_retrieval import ChunkRetrievalOrchestrator
from smartdocs.core.chunk_retrieval.models import RetrievalOutcome, RetrievalRequest

logger = logging.getLogger(__name__)


class ChunkContentService:
    """
    Chunk content service orchestrator.

    The /chunks view returns the selected chunks with combined text; the
    /content view starts from the document's stored content URL and uses a
    larger chunk budget.
    """

    def __init__(
        self,
        orchestrator: ChunkRetrievalOrchestrator,
        settings: ChunkRetrievalSettings | None = None,
    ) -> None:
        """
        Initialize chunk content service.

        Args:
            orchestrator: Retrieval orchestrator bound to the blob stores
            settings: Retrieval defaults (loaded from environment if None)
        """
        self.orchestrator = orchestrator
        self.settings = settings or ChunkRetrievalSettings()

    async def get_chunks(
        self,
        workspace_id: str,
        document_id: str,
        ingestion_source_id: str,
        document_guid: str | None = None,
        strategy: str | None = None,
        max_chunks: int | None = None,
    ) -> RetrievalOutcome:
        """
        Retrieve a representative selection of a document's chunks.

        Args:
            workspace_id: Workspace owning the document
            document_id: Document identifier
            ingestion_source_id: Ingestion source that produced the artifact
            document_guid: Optional alternate document key
            strategy: Selection strategy name (configured default if None)
            max_chunks: Chunk budget (configured default if None)

        Returns:
            RetrievalOutcome: Typed success or failure
        """
        request = RetrievalRequest(
            workspace_id=workspace_id,
            document_id=document_id,
            ingestion_source_id=ingestion_source_id,
            document_guid=document_guid,
            strategy=strategy or self.settings.default_strategy,
            max_chunks=self.settings.default_max_chunks if max_chunks is None else max_chunks,
        )
        return await self.orchestrator.retrieve_content(request)

    async def get_content(
        self,
        workspace_id: str,
        document_id: str,
        ingestion_source_id: str,
        content_url: str | None = None,
        document_guid: str | None = None,
        strategy: str | None = None,
        max_chunks: int | None = None,
    ) -> RetrievalOutcome:
        """
        Retrieve document content, trying the stored content URL first.

        Without a content URL this is the identifier-based lookup with the
        content endpoint's chunk budget.

        Returns:
            RetrievalOutcome: Typed success or failure
        """
        request = RetrievalRequest(
            workspace_id=workspace_id,
            document_id=document_id,
            ingestion_source_id=ingestion_source_id,
            document_guid=document_guid,
            content_url=content_url,
            strategy=strategy or self.settings.default_strategy,
            max_chunks=self.settings.content_max_chunks if max_chunks is None else max_chunks,
        )

        if content_url:
            return await self.orchestrator.retrieve_content_url(request)

        logger.info(
            f"{__name__}:get_content - No content URL for {document_id}, "
            "using identifier-based lookup"
        )
        return await self.orchestrator.retrieve_content(request)
