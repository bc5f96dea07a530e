"""
Blob access layer protocol.

Read-only contract the retrieval engine consumes. Implementations must
tell "path does not exist" apart from "access denied / transient error".

Dependencies: typing (stdlib)
System role: Boundary interface between the retrieval engine and object storage
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class BlobAccessLayer(Protocol):
    """Protocol for read-only blob storage access."""

    name: str

    async def exists(self, path: str) -> bool:
        """
        Check whether a blob exists.

        Args:
            path: Blob path relative to the container/bucket root

        Returns:
            bool: True if the blob exists

        Raises:
            AccessError: If storage denies the check or fails transiently
        """
        ...

    async def read(self, path: str) -> bytes:
        """
        Read a blob's bytes.

        Args:
            path: Blob path relative to the container/bucket root

        Returns:
            bytes: Blob content

        Raises:
            BlobNotFoundError: If the blob does not exist
            AccessError: If storage denies the read or fails transiently
        """
        ...
