"""
Content combiner.

Joins selected chunks into the multi-section form used for AI context
assembly and the flat form used for document text delivery, and computes
statistics over the selected set.

Dependencies: smartdocs.core.chunk_retrieval.content_cleaner
System role: Final stage of the retrieval pipeline
"""

from collections.abc import Sequence

from .content_cleaner import ContentCleaner
from .models import ChunkRecord, CombinedContent, ContentStats, SelectionResult

SECTION_SEPARATOR = "\n\n---\n\n"
FLAT_SEPARATOR = "\n\n"

# words * 1.3 in integer form; an approximation of LLM tokens, not a tokenizer
TOKENS_PER_WORD_NUMERATOR = 13
TOKENS_PER_WORD_DENOMINATOR = 10


def estimate_tokens(word_count: int) -> int:
    """Return ceil(word_count * 1.3) without floating point drift."""
    return -(-word_count * TOKENS_PER_WORD_NUMERATOR // TOKENS_PER_WORD_DENOMINATOR)


def compute_stats(texts: Sequence[str]) -> ContentStats:
    """Statistics over already-cleaned chunk texts."""
    if not texts:
        return ContentStats()

    lengths = [len(t) for t in texts]
    total_characters = sum(lengths)
    total_words = sum(len(t.split()) for t in texts)

    return ContentStats(
        total_characters=total_characters,
        total_words=total_words,
        estimated_tokens=estimate_tokens(total_words),
        # round half up
        average_chunk_size=(2 * total_characters + len(texts)) // (2 * len(texts)),
        min_chunk_size=min(lengths),
        max_chunk_size=max(lengths),
    )


class ContentCombiner:
    """Combine selected chunks into annotated text plus statistics."""

    def __init__(self, cleaner: ContentCleaner | None = None) -> None:
        self._cleaner = cleaner or ContentCleaner()

    def combine(self, selection: SelectionResult) -> CombinedContent:
        """
        Combine a selection.

        Args:
            selection: Selector output

        Returns:
            CombinedContent: Sectioned text, flat text and stats over the selection
        """
        texts = [self._cleaner.clean(chunk.content) for chunk in selection.selected]
        total = len(texts)

        sections = [f"[Section {i}/{total}]\n{text}" for i, text in enumerate(texts, start=1)]

        return CombinedContent(
            text=SECTION_SEPARATOR.join(sections),
            flat_text=FLAT_SEPARATOR.join(texts),
            texts=texts,
            stats=compute_stats(texts),
        )

    def flatten(self, chunks: Sequence[ChunkRecord]) -> str:
        """Cleaned chunk contents separated by a blank line, no headers."""
        return FLAT_SEPARATOR.join(self._cleaner.clean(chunk.content) for chunk in chunks)
