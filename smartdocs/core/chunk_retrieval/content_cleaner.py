"""
Chunk content cleaner.

Removes encoding artifacts left by the upstream chunker and normalizes
whitespace while keeping paragraph breaks.

Dependencies: re (stdlib)
System role: Leaf text normalizer used by the content combiner
"""

import re

# Mac-Roman renderings of emoji the chunker emits, followed by the emoji themselves.
ARTIFACT_GLYPHS: tuple[str, ...] = (
    "üöÄ",  # rocket
    "üìñ",  # open book
    "üìã",  # clipboard
    "üéØ",  # direct hit
    "üí∞",  # money bag
    "üí≥",  # credit card
    "‚úÖ",  # check mark
    "\uf8ff",  # lead byte 0xF0 decoded as the Apple logo
    "🚀",
    "📖",
    "📋",
    "🎯",
    "💰",
    "💳",
    "✅",
)

_ARTIFACT_PATTERN = re.compile(
    "|".join(re.escape(glyph) for glyph in sorted(ARTIFACT_GLYPHS, key=len, reverse=True))
)
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_WHITESPACE_RUN = re.compile(r"\s+")


def strip_artifacts(text: str) -> str:
    """
    Remove artifact glyphs until none remain.

    Removing one sequence can splice its neighbours into a new one, so the
    substitution repeats until the text stops changing.
    """
    previous = None
    while previous != text:
        previous = text
        text = _ARTIFACT_PATTERN.sub("", text)
    return text


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace to single spaces, keeping one blank line between paragraphs."""
    paragraphs = (
        _WHITESPACE_RUN.sub(" ", paragraph).strip()
        for paragraph in _PARAGRAPH_BREAK.split(text)
    )
    return "\n\n".join(p for p in paragraphs if p)


def clean(text: str | None) -> str:
    """
    Clean raw chunk text.

    Idempotent: clean(clean(x)) == clean(x).

    Args:
        text: Raw chunk content (None or non-string values clean to "")

    Returns:
        str: Text without artifact glyphs, with normalized whitespace
    """
    if not text or not isinstance(text, str):
        return ""
    return normalize_whitespace(strip_artifacts(text))


class ContentCleaner:
    """Injectable wrapper around clean() for the retrieval pipeline."""

    def clean(self, text: str | None) -> str:
        return clean(text)
