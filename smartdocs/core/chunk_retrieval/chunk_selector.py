"""
Chunk selector.

Applies one of the named selection strategies to a container's chunks and
returns a bounded subset in original index order. Pure and deterministic.

Dependencies: smartdocs.core.chunk_retrieval.models
System role: Budget-aware sampling stage of the retrieval pipeline
"""

import logging
from collections.abc import Sequence

from smartdocs.core.exceptions import InvalidStrategyError

from .models import ChunkRecord, SelectionResult, SelectionStrategy

logger = logging.getLogger(__name__)

FIRST_STRATEGY_CAP = 3


def first_positions(total: int, max_chunks: int) -> list[int]:
    """Preview mode: the first few chunks, capped at three."""
    return list(range(min(max_chunks, FIRST_STRATEGY_CAP, total)))


def summary_positions(total: int) -> list[int]:
    """First, middle and last chunk; everything when there are three or fewer."""
    if total <= 3:
        return list(range(total))
    return sorted({0, total // 2, total - 1})


def balanced_positions(total: int, max_chunks: int) -> list[int]:
    """
    Evenly spaced sample of max_chunks positions.

    Samples every ``total // max_chunks`` positions starting at 0; the final
    sample is pinned to the last chunk so the selection spans the whole
    document.
    """
    if total <= max_chunks:
        return list(range(total))

    step = total // max_chunks
    positions = [min(i * step, total - 1) for i in range(max_chunks)]
    if max_chunks > 1:
        positions[-1] = total - 1
    return sorted(set(positions))


def all_positions(total: int, max_chunks: int) -> list[int]:
    """Truncation, not sampling."""
    return list(range(min(max_chunks, total)))


class ChunkSelector:
    """Select a bounded, ordered subset of chunks."""

    def __init__(self, fallback: SelectionStrategy = SelectionStrategy.BALANCED) -> None:
        """
        Initialize selector.

        Args:
            fallback: Strategy used when a caller passes an unknown name
        """
        self._fallback = fallback

    def resolve_strategy(self, strategy: str | SelectionStrategy) -> SelectionStrategy:
        """Map a caller-supplied name to a strategy, falling back instead of failing."""
        try:
            return SelectionStrategy.parse(strategy)
        except InvalidStrategyError as e:
            logger.warning(
                f"{__name__}:resolve_strategy - {e.message}; "
                f"falling back to '{self._fallback.value}'"
            )
            return self._fallback

    def select(
        self,
        chunks: Sequence[ChunkRecord],
        strategy: str | SelectionStrategy,
        max_chunks: int,
    ) -> SelectionResult:
        """
        Apply a selection strategy.

        Args:
            chunks: Chunks in index order
            strategy: Strategy name; unknown names fall back to balanced
            max_chunks: Chunk budget (values <= 0 select nothing)

        Returns:
            SelectionResult: Subsequence of chunks in ascending index order
        """
        effective = self.resolve_strategy(strategy)
        requested = strategy.value if isinstance(strategy, SelectionStrategy) else str(strategy)
        total = len(chunks)

        if max_chunks <= 0 or total == 0:
            positions: list[int] = []
        elif effective is SelectionStrategy.FIRST:
            positions = first_positions(total, max_chunks)
        elif effective is SelectionStrategy.SUMMARY:
            positions = summary_positions(total)
        elif effective is SelectionStrategy.ALL:
            positions = all_positions(total, max_chunks)
        else:
            positions = balanced_positions(total, max_chunks)

        selected = [chunks[p] for p in positions]

        logger.debug(
            f"{__name__}:select - strategy={effective.value} "
            f"selected={len(selected)}/{total} max_chunks={max_chunks}"
        )

        return SelectionResult(
            selected=selected,
            strategy=effective,
            requested_strategy=requested,
            total_available=total,
            selected_count=len(selected),
        )
