"""
In-memory blob store.

Dict-backed Blob Access Layer used for tests and the "memory" backend.
Paths listed in ``denied`` raise AccessError to simulate permission
failures.

Dependencies: None
System role: Test double / ephemeral Blob Access Layer implementation
"""

from collections.abc import Iterable, Mapping

from smartdocs.core.exceptions import AccessError, BlobNotFoundError


class InMemoryBlobStore:
    """Blob Access Layer over a dict of path -> bytes."""

    name = "memory"

    def __init__(
        self,
        objects: Mapping[str, bytes | str] | None = None,
        denied: Iterable[str] | None = None,
    ) -> None:
        self._objects: dict[str, bytes] = {}
        self._denied = set(denied or ())
        for path, data in (objects or {}).items():
            self.put(path, data)

    def put(self, path: str, data: bytes | str) -> None:
        self._objects[path] = data.encode("utf-8") if isinstance(data, str) else bytes(data)

    def deny(self, path: str) -> None:
        self._denied.add(path)

    def _check_access(self, path: str) -> None:
        if path in self._denied:
            raise AccessError("Access denied", path, {"store": self.name})

    async def exists(self, path: str) -> bool:
        self._check_access(path)
        return path in self._objects

    async def read(self, path: str) -> bytes:
        self._check_access(path)
        try:
            return self._objects[path]
        except KeyError as e:
            raise BlobNotFoundError(path, {"store": self.name}) from e
