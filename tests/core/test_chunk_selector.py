"""
Test suite for ChunkSelector and the position functions.

System role: Verification of strategy semantics and selection invariants
"""

import logging

import pytest

from smartdocs.core.chunk_retrieval.chunk_selector import (
    ChunkSelector,
    balanced_positions,
    summary_positions,
)
from smartdocs.core.chunk_retrieval.models import SelectionStrategy
from smartdocs.core.exceptions import InvalidStrategyError


@pytest.fixture
def selector() -> ChunkSelector:
    """Provide selector with default balanced fallback."""
    return ChunkSelector()


class TestBalanced:
    """Test suite for the balanced strategy."""

    def test_twenty_two_chunks_budget_ten(self, selector, chunk_factory) -> None:
        """Test sample spans first..last with exactly max_chunks entries."""
        # Arrange
        chunks = chunk_factory(22)

        # Act
        result = selector.select(chunks, "balanced", 10)

        # Assert
        assert result.selected_count == 10
        assert result.indices == [0, 2, 4, 6, 8, 10, 12, 14, 16, 21]
        assert result.indices[0] == 0
        assert result.indices[-1] == 21

    def test_small_n_returns_everything(self, selector, chunk_factory) -> None:
        chunks = chunk_factory(4)

        result = selector.select(chunks, "balanced", 10)

        assert result.selected == chunks

    def test_budget_of_one_returns_first_chunk(self, selector, chunk_factory) -> None:
        assert selector.select(chunk_factory(5), "balanced", 1).indices == [0]

    @pytest.mark.parametrize("total", [1, 2, 7, 10, 11, 19, 22, 23, 100])
    @pytest.mark.parametrize("budget", [1, 2, 3, 5, 10])
    def test_cap_and_order(self, total: int, budget: int) -> None:
        """Test balanced never exceeds the budget and stays strictly increasing."""
        positions = balanced_positions(total, budget)

        assert len(positions) <= budget
        assert all(a < b for a, b in zip(positions, positions[1:]))
        assert all(0 <= p < total for p in positions)


class TestSummary:
    """Test suite for the summary strategy."""

    def test_two_chunks_returns_both(self, selector, chunk_factory) -> None:
        result = selector.select(chunk_factory(2), "summary", 10)

        assert result.indices == [0, 1]

    def test_first_middle_last(self, selector, chunk_factory) -> None:
        assert selector.select(chunk_factory(9), "summary", 10).indices == [0, 4, 8]

    def test_ignores_budget(self, selector, chunk_factory) -> None:
        """Test summary returns three chunks even when the budget is smaller."""
        assert selector.select(chunk_factory(9), "summary", 1).indices == [0, 4, 8]

    @pytest.mark.parametrize("total", [1, 2, 3, 4, 5])
    def test_no_duplicates(self, total: int) -> None:
        positions = summary_positions(total)

        assert len(positions) == len(set(positions))


class TestFirstAndAll:
    """Test suite for the first and all strategies."""

    def test_first_is_capped_at_three(self, selector, chunk_factory) -> None:
        assert selector.select(chunk_factory(10), "first", 10).indices == [0, 1, 2]

    def test_first_respects_smaller_budget(self, selector, chunk_factory) -> None:
        assert selector.select(chunk_factory(10), "first", 2).indices == [0, 1]

    def test_all_truncates(self, selector, chunk_factory) -> None:
        assert selector.select(chunk_factory(10), "all", 4).indices == [0, 1, 2, 3]

    def test_all_with_large_budget_returns_everything(self, selector, chunk_factory) -> None:
        chunks = chunk_factory(6)

        assert selector.select(chunks, "all", 50).selected == chunks


class TestSelectEdgeCases:
    """Test suite for budget, empty input and strategy resolution."""

    @pytest.mark.parametrize("strategy", ["first", "summary", "balanced", "all"])
    @pytest.mark.parametrize("budget", [0, -3])
    def test_non_positive_budget_selects_nothing(
        self, selector, chunk_factory, strategy: str, budget: int
    ) -> None:
        result = selector.select(chunk_factory(5), strategy, budget)

        assert result.selected == []
        assert result.selected_count == 0
        assert result.total_available == 5

    def test_empty_input_selects_nothing(self, selector) -> None:
        result = selector.select([], "balanced", 10)

        assert result.selected == []
        assert result.total_available == 0

    def test_unknown_strategy_falls_back_to_balanced(
        self, selector, chunk_factory, caplog
    ) -> None:
        """Test unknown names do not fail and the fallback is logged."""
        # Act
        with caplog.at_level(logging.WARNING):
            result = selector.select(chunk_factory(22), "smart", 10)

        # Assert
        assert result.strategy is SelectionStrategy.BALANCED
        assert result.requested_strategy == "smart"
        assert result.indices[-1] == 21
        assert "smart" in caplog.text

    def test_strategy_names_are_case_insensitive(self, selector, chunk_factory) -> None:
        result = selector.select(chunk_factory(10), "  FIRST ", 10)

        assert result.strategy is SelectionStrategy.FIRST

    def test_deterministic(self, selector, chunk_factory) -> None:
        chunks = chunk_factory(37)

        assert selector.select(chunks, "balanced", 7) == selector.select(chunks, "balanced", 7)


class TestSelectionStrategyParse:
    """Test suite for SelectionStrategy.parse."""

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(InvalidStrategyError) as exc_info:
            SelectionStrategy.parse("random")

        assert exc_info.value.strategy == "random"

    def test_enum_passes_through(self) -> None:
        assert SelectionStrategy.parse(SelectionStrategy.ALL) is SelectionStrategy.ALL
