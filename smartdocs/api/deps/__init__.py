"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    build_orchestrator,
    get_chunk_content_service,
    get_service_cache,
)

__all__ = [
    "ServiceCache",
    "build_orchestrator",
    "get_chunk_content_service",
    "get_service_cache",
]
