"""
Chunk retrieval orchestrator.

Runs one retrieval request through
ResolvingPath -> Fetching -> Parsing -> Selecting -> Combining -> Done,
with Failed(reason) reachable from every state. Component exceptions are
converted into a typed RetrievalFailure here; nothing below this class
leaks an exception to the request layer except cancellation.

One alternate-source attempt is allowed per request:
- after NotFound, the configured secondary store is probed with the full
  candidate list;
- after a Parse/EmptyContent failure, the secondary store is used when
  configured, otherwise the primary store's lower-priority candidates.
AccessError is never retried. An AccessError from the alternate source is
reported as access_error, with the primary failure kept in details.

Dependencies: asyncio (stdlib), smartdocs.core.chunk_retrieval components
System role: Retrieval pipeline orchestration (coordinates only)
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from smartdocs.boundary.storage.blob_access import BlobAccessLayer
from smartdocs.core.exceptions import (
    AccessError,
    ArtifactNotFoundError,
    BlobNotFoundError,
    ChunkRetrievalError,
    EmptyContentError,
    ParseError,
)
from smartdocs.observability.log_utils import log_with_context

from .chunk_selector import ChunkSelector
from .content_combiner import ContentCombiner
from .models import (
    CandidateAttempt,
    CandidatePath,
    ChunkContainer,
    ContainerSummary,
    FailureReason,
    RetrievalFailure,
    RetrievalOutcome,
    RetrievalRequest,
    RetrievalState,
    RetrievalSuccess,
    SelectionSummary,
)
from .path_resolver import BlobPathResolver
from .payload_parser import ChunkPayloadParser

logger = logging.getLogger(__name__)

PRIMARY = "primary"
SECONDARY = "secondary"

_FAILURE_REASONS: tuple[tuple[type[ChunkRetrievalError], FailureReason], ...] = (
    (ArtifactNotFoundError, FailureReason.NOT_FOUND),
    (BlobNotFoundError, FailureReason.NOT_FOUND),
    (AccessError, FailureReason.ACCESS_ERROR),
    (EmptyContentError, FailureReason.EMPTY_CONTENT),
    (ParseError, FailureReason.PARSE_ERROR),
)


def failure_reason_for(error: ChunkRetrievalError) -> FailureReason:
    for error_type, reason in _FAILURE_REASONS:
        if isinstance(error, error_type):
            return reason
    return FailureReason.ACCESS_ERROR


def _describe(error: ChunkRetrievalError) -> dict[str, str]:
    return {"type": type(error).__name__, "message": error.message}


@dataclass
class _RetrievalRun:
    """Mutable bookkeeping for one request."""

    request: RetrievalRequest
    state: RetrievalState = RetrievalState.RESOLVING_PATH
    attempts: list[CandidateAttempt] = field(default_factory=list)
    used_alternate_source: bool = False
    resolved: CandidatePath | None = None

    def transition(self, state: RetrievalState) -> None:
        log_with_context(
            logger,
            logging.DEBUG,
            f"Retrieval {self.state.value} -> {state.value}",
            document_id=self.request.document_id,
        )
        self.state = state


@dataclass(frozen=True)
class _LoadedArtifact:
    candidate: CandidatePath
    store: str
    container: ChunkContainer


class ChunkRetrievalOrchestrator:
    """Compose resolver, blob access, parser, selector and combiner per request."""

    def __init__(
        self,
        primary_store: BlobAccessLayer,
        resolver: BlobPathResolver | None = None,
        parser: ChunkPayloadParser | None = None,
        selector: ChunkSelector | None = None,
        combiner: ContentCombiner | None = None,
        secondary_store: BlobAccessLayer | None = None,
        timeout_seconds: float | None = 30.0,
        alternate_source_enabled: bool = True,
        content_max_chunks: int = 20,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            primary_store: Blob Access Layer holding chunk artifacts
            resolver: Candidate path generator/prober (defaults if None)
            parser: Payload parser (defaults if None)
            selector: Chunk selector (defaults if None)
            combiner: Content combiner (defaults if None)
            secondary_store: Explicitly configured alternate source, if any
            timeout_seconds: Deadline for one retrieval (None disables)
            alternate_source_enabled: Allow the single alternate-source attempt
            content_max_chunks: Chunk budget for content-URL retrieval when the
                request leaves max_chunks unset
        """
        self._primary_store = primary_store
        self._secondary_store = secondary_store
        self._resolver = resolver or BlobPathResolver()
        self._parser = parser or ChunkPayloadParser()
        self._selector = selector or ChunkSelector()
        self._combiner = combiner or ContentCombiner()
        self._timeout_seconds = timeout_seconds
        self._alternate_source_enabled = alternate_source_enabled
        self._content_max_chunks = content_max_chunks

    @property
    def resolver(self) -> BlobPathResolver:
        return self._resolver

    async def retrieve_content(self, request: RetrievalRequest) -> RetrievalOutcome:
        """
        Retrieve, select and combine a document's chunks.

        Args:
            request: Document identifiers plus strategy and chunk budget

        Returns:
            RetrievalOutcome: RetrievalSuccess or RetrievalFailure
        """
        return await self._run(request)

    async def retrieve_content_url(self, request: RetrievalRequest) -> RetrievalOutcome:
        """
        Retrieve using the stored content URL first, identifiers second.

        Raises:
            ValueError: If the request carries no content_url
        """
        if not request.content_url:
            raise ValueError("content_url is required for content-URL retrieval")
        if "max_chunks" not in request.model_fields_set:
            request = request.model_copy(update={"max_chunks": self._content_max_chunks})
        return await self._run(request)

    async def _run(self, request: RetrievalRequest) -> RetrievalOutcome:
        run = _RetrievalRun(request=request)
        candidates = self._resolver.candidates_for(request)

        log_with_context(
            logger,
            logging.INFO,
            "Retrieving document chunks",
            document_id=request.document_id,
            workspace_id=request.workspace_id,
            ingestion_source_id=request.ingestion_source_id,
            strategy=request.strategy,
            max_chunks=request.max_chunks,
            candidates=len(candidates),
        )

        try:
            async with asyncio.timeout(self._timeout_seconds):
                outcome = await self._execute(run, candidates)
        except TimeoutError:
            outcome = RetrievalFailure(
                failed_in=run.state,
                reason=FailureReason.TIMEOUT,
                message=f"Retrieval exceeded {self._timeout_seconds}s",
                attempted_paths=self._attempted_paths(run),
                attempts=run.attempts,
                used_alternate_source=run.used_alternate_source,
                details={"timeout_seconds": self._timeout_seconds},
            )

        if isinstance(outcome, RetrievalFailure):
            log_with_context(
                logger,
                logging.WARNING,
                "Chunk retrieval failed",
                document_id=request.document_id,
                reason=outcome.reason.value,
                failed_in=outcome.failed_in.value,
                attempted=len(outcome.attempted_paths),
            )
        else:
            log_with_context(
                logger,
                logging.INFO,
                "Chunk retrieval completed",
                document_id=request.document_id,
                blob_path=outcome.blob_path,
                store=outcome.store,
                selected=outcome.selection.selected_count,
                total=outcome.selection.total_available,
            )
        return outcome

    async def _execute(
        self,
        run: _RetrievalRun,
        candidates: list[CandidatePath],
    ) -> RetrievalOutcome:
        try:
            artifact = await self._load(run, candidates, self._primary_store, PRIMARY)
        except AccessError as e:
            return self._failure(run, e)
        except (ArtifactNotFoundError, BlobNotFoundError, ParseError, EmptyContentError) as e:
            failed_in = run.state
            alternate = self._alternate_source(run, candidates, e)
            if alternate is None:
                return self._failure(run, e)

            alt_candidates, alt_store, alt_label = alternate
            run.used_alternate_source = True
            logger.info(
                f"{__name__}:_execute - {type(e).__name__} on primary; "
                f"trying alternate source ({alt_label}, {len(alt_candidates)} candidates)"
            )
            try:
                artifact = await self._load(run, alt_candidates, alt_store, alt_label)
            except AccessError as alt_error:
                # Denied storage outranks the primary miss; never report it as not found
                return self._failure(run, alt_error, primary_error=e)
            except ChunkRetrievalError as alt_error:
                return self._failure(run, e, alternate_error=alt_error, failed_in=failed_in)

        return self._finish(run, artifact)

    def _alternate_source(
        self,
        run: _RetrievalRun,
        candidates: list[CandidatePath],
        error: ChunkRetrievalError,
    ) -> tuple[list[CandidatePath], BlobAccessLayer, str] | None:
        if not self._alternate_source_enabled or run.used_alternate_source:
            return None

        if self._secondary_store is not None:
            return candidates, self._secondary_store, SECONDARY

        if isinstance(error, (ParseError, EmptyContentError)) and run.resolved is not None:
            remaining = candidates[candidates.index(run.resolved) + 1 :]
            if remaining:
                return remaining, self._primary_store, PRIMARY

        return None

    async def _load(
        self,
        run: _RetrievalRun,
        candidates: Sequence[CandidatePath],
        store: BlobAccessLayer,
        store_label: str,
    ) -> _LoadedArtifact:
        run.transition(RetrievalState.RESOLVING_PATH)
        resolved = await self._resolver.resolve(candidates, store, run.attempts, store_label)
        run.resolved = resolved

        run.transition(RetrievalState.FETCHING)
        data = await store.read(resolved.path)

        run.transition(RetrievalState.PARSING)
        container = self._parser.parse(data, resolved.path)
        return _LoadedArtifact(candidate=resolved, store=store_label, container=container)

    def _finish(self, run: _RetrievalRun, artifact: _LoadedArtifact) -> RetrievalSuccess:
        request = run.request
        container = artifact.container

        run.transition(RetrievalState.SELECTING)
        selection = self._selector.select(container.chunks, request.strategy, request.max_chunks)

        run.transition(RetrievalState.COMBINING)
        content = self._combiner.combine(selection)
        original_text = self._combiner.flatten(container.chunks)

        run.transition(RetrievalState.DONE)
        return RetrievalSuccess(
            blob_path=artifact.candidate.path,
            store=artifact.store,
            used_alternate_source=run.used_alternate_source,
            content=content,
            chunks=selection.selected,
            original_text=original_text,
            selection=SelectionSummary(
                strategy=selection.strategy,
                requested_strategy=selection.requested_strategy,
                max_chunks=request.max_chunks,
                total_available=selection.total_available,
                selected_count=selection.selected_count,
                selected_indices=selection.indices,
            ),
            container=ContainerSummary(
                document_id=container.document_id or request.document_id,
                workspace_id=container.workspace_id or request.workspace_id,
                ingestion_source_id=container.ingestion_source_id or request.ingestion_source_id,
                chunk_type=container.chunk_type,
                processed_at=container.processed_at,
                shape=container.shape,
                total_chunks=container.total_chunks,
                file_type=container.file_type,
                original_filename=container.chunks[0].original_filename,
            ),
            attempts=run.attempts,
        )

    def _failure(
        self,
        run: _RetrievalRun,
        error: ChunkRetrievalError,
        alternate_error: ChunkRetrievalError | None = None,
        failed_in: RetrievalState | None = None,
        primary_error: ChunkRetrievalError | None = None,
    ) -> RetrievalFailure:
        details = dict(error.details)
        if alternate_error is not None:
            details["alternate_source_error"] = _describe(alternate_error)
        if primary_error is not None:
            details["primary_source_error"] = _describe(primary_error)

        return RetrievalFailure(
            failed_in=failed_in or run.state,
            reason=failure_reason_for(error),
            message=error.message,
            attempted_paths=self._attempted_paths(run),
            attempts=run.attempts,
            used_alternate_source=run.used_alternate_source,
            details=details,
        )

    @staticmethod
    def _attempted_paths(run: _RetrievalRun) -> list[str]:
        return list(dict.fromkeys(a.path for a in run.attempts))
