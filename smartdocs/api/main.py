"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, smartdocs.api.routers, uvicorn, python-dotenv
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartdocs import __version__
from smartdocs.api import api_router
from smartdocs.api.deps.dependencies import ServiceCache
from smartdocs.configs import Settings, get_settings
from smartdocs.observability.logger import configure_logging
from smartdocs.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")

    # Startup
    logger.info("Pre-warming service cache...")
    cache: ServiceCache = app.state.service_cache
    _ = cache.chunk_content_service
    logger.info(
        f"Service cache pre-warmed (primary={cache.blob_store.name}, "
        f"secondary={getattr(cache.secondary_blob_store, 'name', None)})"
    )

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app(settings: Settings | None = None, warm_cache: bool = True) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Application settings (loaded from environment if None)
        warm_cache: Build blob stores and services at startup

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()
    configure_logging(settings.observability.log_level)

    app = FastAPI(
        title="SmartDocs Chunk Retrieval API",
        description="Resolves, selects and combines processed document chunks",
        version=__version__,
        lifespan=lifespan if warm_cache else None,
    )
    app.state.service_cache = ServiceCache(settings)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (last added runs first)
    if settings.observability.log_requests:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CorrelationMiddleware,
        header_name=settings.observability.correlation_header,
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "smartdocs.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
