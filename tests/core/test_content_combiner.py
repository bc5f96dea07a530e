"""
Test suite for ContentCombiner and content statistics.

System role: Verification of sectioned/flat output and stats over the selection
"""

import pytest

from smartdocs.core.chunk_retrieval.chunk_selector import ChunkSelector
from smartdocs.core.chunk_retrieval.content_combiner import (
    SECTION_SEPARATOR,
    ContentCombiner,
    compute_stats,
    estimate_tokens,
)
from smartdocs.core.chunk_retrieval.models import (
    ChunkRecord,
    SelectionResult,
    SelectionStrategy,
)


def _selection(contents: list[str], total: int | None = None) -> SelectionResult:
    chunks = [ChunkRecord(index=i, content=c) for i, c in enumerate(contents)]
    return SelectionResult(
        selected=chunks,
        strategy=SelectionStrategy.ALL,
        requested_strategy="all",
        total_available=total if total is not None else len(chunks),
        selected_count=len(chunks),
    )


@pytest.fixture
def combiner() -> ContentCombiner:
    """Provide combiner with the default cleaner."""
    return ContentCombiner()


class TestCombine:
    """Test suite for ContentCombiner.combine."""

    def test_sectioned_text_has_headers_and_separators(self, combiner) -> None:
        """Test each cleaned chunk gets a 1-indexed [Section i/n] header."""
        # Arrange
        selection = _selection(["Alpha  text", "Beta‚úÖ"])

        # Act
        combined = combiner.combine(selection)

        # Assert
        assert combined.text == (
            "[Section 1/2]\nAlpha text" + SECTION_SEPARATOR + "[Section 2/2]\nBeta"
        )

    def test_flat_text_has_blank_line_between_chunks(self, combiner) -> None:
        combined = combiner.combine(_selection(["One", "Two", "Three"]))

        assert combined.flat_text == "One\n\nTwo\n\nThree"

    def test_keeps_cleaned_text_per_chunk(self, combiner) -> None:
        combined = combiner.combine(_selection(["Alpha  text", "Beta‚úÖ"]))

        assert combined.texts == ["Alpha text", "Beta"]

    def test_empty_selection(self, combiner) -> None:
        combined = combiner.combine(_selection([]))

        assert combined.text == ""
        assert combined.flat_text == ""
        assert combined.stats.total_characters == 0
        assert combined.stats.estimated_tokens == 0
        assert combined.stats.average_chunk_size == 0

    def test_stats_cover_only_the_selected_chunks(self, combiner, chunk_factory) -> None:
        """Test stats are computed over the selection, not the whole container."""
        # Arrange
        chunks = chunk_factory(22)
        selection = ChunkSelector().select(chunks, "balanced", 10)

        # Act
        combined = combiner.combine(selection)

        # Assert
        expected = sum(len(c.content) for c in selection.selected)
        assert combined.stats.total_characters == expected
        assert expected < sum(len(c.content) for c in chunks)

    def test_flatten_renders_every_chunk(self, combiner, chunk_factory) -> None:
        chunks = chunk_factory(3)

        assert combiner.flatten(chunks) == "Chunk 0 text\n\nChunk 1 text\n\nChunk 2 text"


class TestComputeStats:
    """Test suite for compute_stats."""

    def test_counts(self) -> None:
        # Act
        stats = compute_stats(["one two three", "four five"])

        # Assert
        assert stats.total_characters == 22
        assert stats.total_words == 5
        assert stats.estimated_tokens == 7
        assert stats.average_chunk_size == 11
        assert stats.min_chunk_size == 9
        assert stats.max_chunk_size == 13

    def test_average_rounds_half_up(self) -> None:
        """Test 5 characters over 2 chunks averages to 3, not banker's 2."""
        assert compute_stats(["ab", "cde"]).average_chunk_size == 3

    def test_empty_input_is_all_zero(self) -> None:
        stats = compute_stats([])

        assert stats.model_dump() == {
            "total_characters": 0,
            "total_words": 0,
            "estimated_tokens": 0,
            "average_chunk_size": 0,
            "min_chunk_size": 0,
            "max_chunk_size": 0,
        }


class TestEstimateTokens:
    """Test suite for the words * 1.3 heuristic."""

    @pytest.mark.parametrize(
        ("words", "tokens"),
        [(0, 0), (1, 2), (3, 4), (10, 13), (100, 130), (7, 10)],
    )
    def test_ceil_of_words_times_1_3(self, words: int, tokens: int) -> None:
        assert estimate_tokens(words) == tokens
