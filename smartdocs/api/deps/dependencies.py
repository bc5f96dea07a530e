"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: smartdocs.configs, smartdocs.application, smartdocs.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Request

from smartdocs.application.services import ChunkContentService
from smartdocs.boundary.storage import (
    BlobAccessLayer,
    get_blob_store,
    get_secondary_blob_store,
)
from smartdocs.configs import Settings, get_settings
from smartdocs.core.chunk_retrieval import (
    BlobPathResolver,
    ChunkRetrievalOrchestrator,
)


def build_orchestrator(
    settings: Settings,
    primary_store: BlobAccessLayer,
    secondary_store: BlobAccessLayer | None = None,
) -> ChunkRetrievalOrchestrator:
    """
    Wire a retrieval orchestrator from settings.

    Args:
        settings: Application settings
        primary_store: Blob store holding chunk artifacts
        secondary_store: Optional alternate-source store

    Returns:
        ChunkRetrievalOrchestrator: Configured orchestrator
    """
    retrieval = settings.chunk_retrieval
    resolver = BlobPathResolver(
        chunks_prefix=retrieval.chunks_prefix,
        disambiguators=retrieval.legacy_disambiguators,
        container_name=settings.blob_storage.container_name,
        parallel_probe=retrieval.parallel_probe,
    )
    return ChunkRetrievalOrchestrator(
        primary_store=primary_store,
        resolver=resolver,
        secondary_store=secondary_store,
        timeout_seconds=retrieval.request_timeout_seconds,
        alternate_source_enabled=retrieval.alternate_source_enabled,
        content_max_chunks=retrieval.content_max_chunks,
    )


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._blob_store = None
        self._secondary_blob_store = None
        self._secondary_loaded = False
        self._orchestrator = None
        self._chunk_content_service = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def blob_store(self) -> BlobAccessLayer:
        """Get cached primary blob store."""
        if self._blob_store is None:
            self._blob_store = get_blob_store(self.settings)
        return self._blob_store

    @property
    def secondary_blob_store(self) -> BlobAccessLayer | None:
        """Get cached alternate-source blob store (None unless configured)."""
        if not self._secondary_loaded:
            self._secondary_blob_store = get_secondary_blob_store(self.settings)
            self._secondary_loaded = True
        return self._secondary_blob_store

    @property
    def orchestrator(self) -> ChunkRetrievalOrchestrator:
        """Get cached retrieval orchestrator."""
        if self._orchestrator is None:
            self._orchestrator = build_orchestrator(
                self.settings,
                self.blob_store,
                self.secondary_blob_store,
            )
        return self._orchestrator

    @property
    def chunk_content_service(self) -> ChunkContentService:
        """Get cached chunk content service."""
        if self._chunk_content_service is None:
            self._chunk_content_service = ChunkContentService(
                orchestrator=self.orchestrator,
                settings=self.settings.chunk_retrieval,
            )
        return self._chunk_content_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._blob_store = None
        self._secondary_blob_store = None
        self._secondary_loaded = False
        self._orchestrator = None
        self._chunk_content_service = None


def get_service_cache(request: Request) -> ServiceCache:
    """Get the service cache owned by the running application."""
    return request.app.state.service_cache


def get_chunk_content_service(
    cache: ServiceCache = Depends(get_service_cache),
) -> ChunkContentService:
    """
    Get chunk content service instance.

    Args:
        cache: Service cache (injected via Depends)

    Returns:
        ChunkContentService: Service bound to the configured blob stores
    """
    return cache.chunk_content_service
