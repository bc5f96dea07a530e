"""
Blob store factory for selecting between S3 (prod), local directory and in-memory stores.

Depends on BLOB_STORAGE_BACKEND / BLOB_STORAGE_SECONDARY_BACKEND settings.
Provides consistent interface regardless of underlying implementation.

Dependencies: smartdocs.boundary.storage, smartdocs.configs
System role: Blob store instantiation and selection
"""

import logging

from smartdocs.boundary.storage.blob_access import BlobAccessLayer
from smartdocs.boundary.storage.local_blob_store import LocalDirectoryBlobStore
from smartdocs.boundary.storage.memory_blob_store import InMemoryBlobStore
from smartdocs.boundary.storage.s3_blob_store import S3BlobStore
from smartdocs.configs import Settings, get_settings

logger = logging.getLogger(__name__)


def _build_store(
    store_type: str,
    settings: Settings,
    local_root: str,
    bucket: str,
) -> BlobAccessLayer:
    blob = settings.blob_storage
    store_type = store_type.lower()

    if store_type == "s3":
        logger.info(f"{__name__}:_build_store - Creating S3 blob store bucket={bucket}")
        return S3BlobStore(
            bucket=bucket,
            region=blob.region,
            endpoint_url=blob.endpoint_url,
            connect_timeout=blob.connect_timeout,
            read_timeout=blob.read_timeout,
            max_attempts=blob.max_attempts,
        )

    elif store_type == "local":
        logger.info(f"{__name__}:_build_store - Creating local blob store root={local_root}")
        return LocalDirectoryBlobStore(root=local_root)

    elif store_type == "memory":
        logger.info(f"{__name__}:_build_store - Creating in-memory blob store")
        return InMemoryBlobStore()

    else:
        raise ValueError(
            f"Invalid blob store backend: {store_type}. "
            f"Must be 's3', 'local' or 'memory'."
        )


def get_blob_store(settings: Settings | None = None) -> BlobAccessLayer:
    """
    Factory function to get the primary blob store.

    Returns:
        BlobAccessLayer: Configured store instance

    Raises:
        ValueError: If BLOB_STORAGE_BACKEND is invalid
    """
    settings = settings or get_settings()
    blob = settings.blob_storage
    return _build_store(blob.backend, settings, blob.local_root, blob.bucket)


def get_secondary_blob_store(settings: Settings | None = None) -> BlobAccessLayer | None:
    """
    Factory function to get the alternate-source blob store.

    Returns None unless BLOB_STORAGE_SECONDARY_BACKEND is set; the alternate
    source is never chosen implicitly.

    Raises:
        ValueError: If BLOB_STORAGE_SECONDARY_BACKEND is invalid
    """
    settings = settings or get_settings()
    blob = settings.blob_storage
    if not blob.secondary_backend:
        return None
    return _build_store(
        blob.secondary_backend,
        settings,
        blob.secondary_local_root,
        blob.secondary_bucket or blob.bucket,
    )
