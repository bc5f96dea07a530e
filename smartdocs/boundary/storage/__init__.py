"""Blob Access Layer implementations for chunk artifacts."""

from .blob_access import BlobAccessLayer
from .blob_store_factory import get_blob_store, get_secondary_blob_store
from .local_blob_store import LocalDirectoryBlobStore
from .memory_blob_store import InMemoryBlobStore
from .s3_blob_store import S3BlobStore

__all__ = [
    "BlobAccessLayer",
    "InMemoryBlobStore",
    "LocalDirectoryBlobStore",
    "S3BlobStore",
    "get_blob_store",
    "get_secondary_blob_store",
]
