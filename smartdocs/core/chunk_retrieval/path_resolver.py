"""
Blob path resolver.

Builds the ordered list of candidate artifact paths for a document and
probes a Blob Access Layer for the first one that exists.

Historical artifacts are never renamed in place, so every naming
convention the chunker ever used stays in NAMING_CONVENTIONS. New
conventions are appended there; call sites do not change.

Dependencies: urllib (stdlib), smartdocs.boundary.storage
System role: First stage of the retrieval pipeline (identifiers -> path)
"""

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from urllib.parse import unquote, urlparse

from smartdocs.boundary.storage.blob_access import BlobAccessLayer
from smartdocs.core.exceptions import AccessError, ArtifactNotFoundError

from .models import AttemptOutcome, CandidateAttempt, CandidatePath, RetrievalRequest

logger = logging.getLogger(__name__)

DEFAULT_CHUNKS_PREFIX = "short_chunks/"
DEFAULT_DISAMBIGUATORS = (1, 2, 3)
CONTENT_URL_CONVENTION = "content_url"


@dataclass(frozen=True)
class ArtifactKey:
    """Identifier triple an artifact name is built from."""

    workspace_id: str
    document_id: str
    ingestion_source_id: str
    prefix: str = DEFAULT_CHUNKS_PREFIX
    disambiguators: tuple[int, ...] = DEFAULT_DISAMBIGUATORS

    @property
    def stem(self) -> str:
        return f"{self.workspace_id}_{self.document_id}_{self.ingestion_source_id}"


@dataclass(frozen=True)
class NamingConvention:
    """Named generator from an ArtifactKey to candidate paths."""

    name: str
    build: Callable[[ArtifactKey], list[str]]


def canonical(key: ArtifactKey) -> list[str]:
    return [f"{key.prefix}{key.stem}_chunks.json"]


def legacy_disambiguated(key: ArtifactKey) -> list[str]:
    return [f"{key.prefix}{key.stem}_chunks ({n}).json" for n in key.disambiguators]


def legacy_unsuffixed(key: ArtifactKey) -> list[str]:
    return [f"{key.prefix}{key.stem}.json"]


def directory_less(key: ArtifactKey) -> list[str]:
    return [f"{key.stem}_chunks.json"]


def directory_less_disambiguated(key: ArtifactKey) -> list[str]:
    return [f"{key.stem}_chunks ({n}).json" for n in key.disambiguators]


# Priority order: most likely correct first.
NAMING_CONVENTIONS: tuple[NamingConvention, ...] = (
    NamingConvention("canonical", canonical),
    NamingConvention("legacy_disambiguated", legacy_disambiguated),
    NamingConvention("legacy_unsuffixed", legacy_unsuffixed),
    NamingConvention("directory_less", directory_less),
    NamingConvention("directory_less_disambiguated", directory_less_disambiguated),
)


def extract_blob_path(content_url: str, container_name: str) -> str | None:
    """
    Derive a blob path from a stored content URL.

    Args:
        content_url: Absolute blob URL or bare blob path
        container_name: Container/bucket segment preceding the blob path

    Returns:
        str | None: Blob path, or None if nothing usable could be extracted
    """
    content_url = content_url.strip()
    if not content_url:
        return None

    parsed = urlparse(content_url)
    if not parsed.scheme and not parsed.netloc:
        path = unquote(parsed.path).lstrip("/")
        return path or None

    segments = [unquote(s) for s in parsed.path.split("/") if s]
    if container_name in segments:
        segments = segments[segments.index(container_name) + 1 :]

    path = "/".join(segments)
    return path or None


class BlobPathResolver:
    """Generate candidate paths and find the first that exists."""

    def __init__(
        self,
        conventions: Sequence[NamingConvention] = NAMING_CONVENTIONS,
        chunks_prefix: str = DEFAULT_CHUNKS_PREFIX,
        disambiguators: Sequence[int] = DEFAULT_DISAMBIGUATORS,
        container_name: str = "smartdocsaicontainer",
        parallel_probe: bool = False,
    ) -> None:
        """
        Initialize resolver.

        Args:
            conventions: Naming conventions in priority order
            chunks_prefix: Directory prefix of chunk artifacts
            disambiguators: n values for legacy '(n)' artifact names
            container_name: Container segment used when parsing content URLs
            parallel_probe: Probe candidates concurrently (priority order still wins)
        """
        self._conventions = tuple(conventions)
        self._chunks_prefix = chunks_prefix
        self._disambiguators = tuple(disambiguators)
        self._container_name = container_name
        self._parallel_probe = parallel_probe

    def candidate_paths(
        self,
        workspace_id: str,
        document_id: str,
        ingestion_source_id: str,
        document_guid: str | None = None,
        content_url: str | None = None,
    ) -> list[CandidatePath]:
        """
        Build the ordered candidate list.

        The content-URL path comes first when given. Each convention is then
        applied to the document id and, when distinct, to the document guid.
        Duplicate paths keep their first (highest-priority) position.
        """
        candidates: list[CandidatePath] = []
        seen: set[str] = set()

        def add(path: str, convention: str) -> None:
            if path and path not in seen:
                seen.add(path)
                candidates.append(CandidatePath(path=path, convention=convention))

        if content_url:
            url_path = extract_blob_path(content_url, self._container_name)
            if url_path:
                add(url_path, CONTENT_URL_CONVENTION)
            else:
                logger.warning(
                    f"{__name__}:candidate_paths - No blob path in content URL {content_url!r}"
                )

        document_keys = [document_id]
        if document_guid and document_guid != document_id:
            document_keys.append(document_guid)

        keys = [
            ArtifactKey(
                workspace_id=workspace_id,
                document_id=doc_key,
                ingestion_source_id=ingestion_source_id,
                prefix=self._chunks_prefix,
                disambiguators=self._disambiguators,
            )
            for doc_key in document_keys
            if doc_key
        ]

        for convention in self._conventions:
            for key in keys:
                for path in convention.build(key):
                    add(path, convention.name)

        return candidates

    def candidates_for(self, request: RetrievalRequest) -> list[CandidatePath]:
        return self.candidate_paths(
            workspace_id=request.workspace_id,
            document_id=request.document_id,
            ingestion_source_id=request.ingestion_source_id,
            document_guid=request.document_guid,
            content_url=request.content_url,
        )

    async def resolve_path(
        self,
        store: BlobAccessLayer,
        workspace_id: str,
        document_id: str,
        ingestion_source_id: str,
        document_guid: str | None = None,
        content_url: str | None = None,
    ) -> str:
        """Resolve document identifiers straight to an existing blob path."""
        candidates = self.candidate_paths(
            workspace_id, document_id, ingestion_source_id, document_guid, content_url
        )
        resolved = await self.resolve(candidates, store)
        return resolved.path

    async def resolve(
        self,
        candidates: Sequence[CandidatePath],
        store: BlobAccessLayer,
        attempts: list[CandidateAttempt] | None = None,
        store_label: str = "primary",
    ) -> CandidatePath:
        """
        Return the highest-priority candidate that exists in the store.

        Args:
            candidates: Candidate paths in priority order
            store: Blob Access Layer to probe
            attempts: Optional list that receives one entry per probe
            store_label: Label recorded on each attempt

        Returns:
            CandidatePath: First existing candidate

        Raises:
            ArtifactNotFoundError: No candidate exists (carries every attempted path)
            AccessError: Storage denied a probe; remaining candidates are not tried
        """
        attempts = attempts if attempts is not None else []

        if self._parallel_probe and len(candidates) > 1:
            probes = await asyncio.gather(
                *(store.exists(c.path) for c in candidates),
                return_exceptions=True,
            )
        else:
            probes = None

        for position, candidate in enumerate(candidates):
            if probes is None:
                try:
                    found = await store.exists(candidate.path)
                except AccessError:
                    attempts.append(
                        self._attempt(candidate, AttemptOutcome.ACCESS_DENIED, store_label)
                    )
                    raise
            else:
                found = probes[position]
                if isinstance(found, BaseException):
                    if isinstance(found, AccessError):
                        attempts.append(
                            self._attempt(candidate, AttemptOutcome.ACCESS_DENIED, store_label)
                        )
                    raise found

            if found:
                attempts.append(self._attempt(candidate, AttemptOutcome.FOUND, store_label))
                logger.info(
                    f"{__name__}:resolve - Resolved {candidate.path} "
                    f"(convention={candidate.convention}, store={store_label})"
                )
                return candidate

            attempts.append(self._attempt(candidate, AttemptOutcome.NOT_FOUND, store_label))
            logger.debug(f"{__name__}:resolve - Not found: {candidate.path}")

        raise ArtifactNotFoundError(
            [c.path for c in candidates],
            {"store": store_label},
        )

    @staticmethod
    def _attempt(
        candidate: CandidatePath,
        outcome: AttemptOutcome,
        store_label: str,
    ) -> CandidateAttempt:
        return CandidateAttempt(
            path=candidate.path,
            convention=candidate.convention,
            outcome=outcome,
            store=store_label,
        )
