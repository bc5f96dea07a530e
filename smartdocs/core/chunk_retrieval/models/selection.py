"""
Selection and combination result models.

Dependencies: pydantic
System role: Output types of the chunk selector and content combiner
"""

from enum import Enum

from pydantic import BaseModel, Field

from smartdocs.core.exceptions import InvalidStrategyError

from .chunk import ChunkRecord


class SelectionStrategy(str, Enum):
    """Named policies for picking a bounded subset of chunks."""

    FIRST = "first"
    SUMMARY = "summary"
    BALANCED = "balanced"
    ALL = "all"

    @classmethod
    def parse(cls, name: "str | SelectionStrategy") -> "SelectionStrategy":
        """
        Resolve a caller-supplied strategy name.

        Args:
            name: Strategy name (case and surrounding whitespace ignored)

        Returns:
            SelectionStrategy: Matching strategy

        Raises:
            InvalidStrategyError: If the name is not a known strategy
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError as e:
            raise InvalidStrategyError(str(name)) from e


class SelectionResult(BaseModel):
    """Ordered subset of a container's chunks."""

    selected: list[ChunkRecord] = Field(default_factory=list)
    strategy: SelectionStrategy = Field(description="Strategy actually applied")
    requested_strategy: str = Field(description="Strategy name the caller asked for")
    total_available: int = Field(ge=0)
    selected_count: int = Field(ge=0)

    @property
    def indices(self) -> list[int]:
        return [chunk.index for chunk in self.selected]


class ContentStats(BaseModel):
    """Aggregate statistics over the selected chunks."""

    total_characters: int = 0
    total_words: int = 0
    estimated_tokens: int = Field(
        default=0,
        description="words * 1.3, rounded up; a heuristic, not a tokenizer count",
    )
    average_chunk_size: int = 0
    min_chunk_size: int = 0
    max_chunk_size: int = 0


class CombinedContent(BaseModel):
    """Selected chunks joined into a single annotated text blob."""

    text: str = Field(description="Cleaned chunks with [Section i/n] headers")
    flat_text: str = Field(description="Cleaned chunks separated by blank lines")
    texts: list[str] = Field(
        default_factory=list,
        description="Cleaned text of each selected chunk, in order",
    )
    stats: ContentStats
