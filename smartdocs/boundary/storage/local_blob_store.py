"""
Local directory blob store.

Serves chunk artifacts from a directory laid out like the bucket
(e.g. <root>/short_chunks/<ws>_<doc>_<src>_chunks.json). Selected explicitly
through configuration, typically as the secondary store in development.

Dependencies: pathlib (stdlib)
System role: Directory-backed Blob Access Layer implementation
"""

import asyncio
import logging
from pathlib import Path

from smartdocs.core.exceptions import AccessError, BlobNotFoundError

logger = logging.getLogger(__name__)


class LocalDirectoryBlobStore:
    """Blob Access Layer over a local directory."""

    name = "local"

    def __init__(self, root: str | Path) -> None:
        """
        Initialize local store.

        Args:
            root: Directory treated as the container root
        """
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, path: str) -> Path:
        candidate = (self._root / path.lstrip("/")).resolve()
        if not candidate.is_relative_to(self._root):
            raise AccessError("Path escapes the store root", path, {"root": str(self._root)})
        return candidate

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._resolve(path).is_file)

    async def read(self, path: str) -> bytes:
        """
        Read a file below the store root.

        Raises:
            BlobNotFoundError: If the file does not exist
            AccessError: If the path escapes the root or the file cannot be read
        """
        target = self._resolve(path)
        try:
            return await asyncio.to_thread(target.read_bytes)
        except (FileNotFoundError, IsADirectoryError) as e:
            raise BlobNotFoundError(path, {"root": str(self._root)}) from e
        except OSError as e:
            logger.error(f"{__name__}:read - Failed to read {target}: {e}")
            raise AccessError(
                f"Local read failed: {type(e).__name__}",
                path,
                {"root": str(self._root)},
            ) from e
