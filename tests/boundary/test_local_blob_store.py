"""
Test suite for LocalDirectoryBlobStore.

System role: Verification of the directory-backed Blob Access Layer
"""

import pytest

from smartdocs.boundary.storage import LocalDirectoryBlobStore
from smartdocs.core.exceptions import AccessError, BlobNotFoundError


@pytest.fixture
def store(tmp_path) -> LocalDirectoryBlobStore:
    """Provide store rooted at a temp dir holding one artifact."""
    (tmp_path / "short_chunks").mkdir()
    (tmp_path / "short_chunks" / "a_chunks.json").write_bytes(b"[]")
    return LocalDirectoryBlobStore(tmp_path)


class TestLocalDirectoryBlobStore:
    """Test suite for exists/read."""

    @pytest.mark.asyncio
    async def test_exists(self, store) -> None:
        assert await store.exists("short_chunks/a_chunks.json") is True
        assert await store.exists("short_chunks/missing.json") is False

    @pytest.mark.asyncio
    async def test_directory_does_not_exist_as_blob(self, store) -> None:
        assert await store.exists("short_chunks") is False

    @pytest.mark.asyncio
    async def test_read(self, store) -> None:
        assert await store.read("/short_chunks/a_chunks.json") == b"[]"

    @pytest.mark.asyncio
    async def test_read_missing_raises_blob_not_found(self, store) -> None:
        with pytest.raises(BlobNotFoundError):
            await store.read("short_chunks/missing.json")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["../outside.json", "short_chunks/../../etc/passwd"])
    async def test_path_escaping_root_is_denied(self, store, path: str) -> None:
        """Test traversal outside the root is an access error, not a miss."""
        with pytest.raises(AccessError):
            await store.exists(path)
        with pytest.raises(AccessError):
            await store.read(path)
