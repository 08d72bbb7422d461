#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Chunk finding: partition text into highlighted and unhighlighted chunks.

The pipeline has three stages:

1. ``default_find_chunks`` (or a custom ``find_chunks`` callable) collects
   raw match spans for every search term.
2. ``combine_chunks`` sorts the spans and merges overlapping or touching
   ones into maximal highlighted intervals.
3. ``fill_in_chunks`` inserts unhighlighted filler chunks for the gaps so
   the result covers the whole text.

``find_chunks`` runs the full pipeline and is the main entry point.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from highlightwords.exceptions import InvalidChunkError
from highlightwords.options import HighlightOptions
from highlightwords.sanitizers import identity
from highlightwords.terms import compile_term, resolve_search_terms
from highlightwords.types import Chunk, MatchSpan, Sanitizer, SearchWord, SpanLike

logger = logging.getLogger(__name__)


def default_find_chunks(
    *,
    search_words: Sequence[SearchWord],
    text_to_highlight: str,
    sanitize: Sanitizer = identity,
    case_sensitive: bool = False,
    auto_escape: bool = False,
) -> list[Chunk]:
    """Find the match spans of every search term with regular expressions.

    Spans are returned in term order and, within a term, left to right.
    Empty matches are skipped; the scan still advances past them.

    Parameters
    ----------
    search_words : sequence
        Strings and compiled patterns; empty entries are ignored
    text_to_highlight : str
        Text to search
    sanitize : callable, default identity
        Transform applied to the text and to string terms before matching
    case_sensitive : bool, default False
        Whether matching is case sensitive
    auto_escape : bool, default False
        Whether string terms are matched literally

    Returns
    -------
    list[Chunk]
        Unmerged spans, all with ``highlight=True``

    Raises
    ------
    InvalidSearchTermError
        If a term cannot be compiled

    """
    terms = resolve_search_terms(search_words)
    if not terms:
        return []

    # Compile everything up front so a bad term fails before any scanning
    patterns = [
        compile_term(term, case_sensitive=case_sensitive, auto_escape=auto_escape, sanitize=sanitize)
        for term in terms
    ]

    text = sanitize(text_to_highlight)
    if len(text) != len(text_to_highlight):
        logger.warning(
            "Sanitize changed text length from %d to %d; chunk offsets may not line up with the original text",
            len(text_to_highlight),
            len(text),
        )

    chunks: list[Chunk] = []
    for pattern in patterns:
        found = 0
        for match in pattern.finditer(text):
            start, end = match.span()
            if end > start:
                chunks.append(Chunk(start=start, end=end, highlight=True))
                found += 1
        logger.debug("Pattern %r matched %d time(s)", pattern.pattern, found)
    return chunks


def combine_chunks(chunks: Iterable[Chunk | MatchSpan]) -> list[Chunk]:
    """Sort spans by start and merge overlapping or adjacent ones.

    The sort is stable, so spans sharing a start keep their input order.

    Examples
    --------
        >>> combine_chunks([MatchSpan(0, 3), MatchSpan(1, 3), MatchSpan(5, 6)])
        [Chunk(start=0, end=3, highlight=True), Chunk(start=5, end=6, highlight=True)]

    """
    merged: list[Chunk] = []
    for span in sorted(chunks, key=lambda item: item.start):
        if merged and span.start <= merged[-1].end:
            previous = merged[-1]
            if span.end > previous.end:
                merged[-1] = Chunk(start=previous.start, end=span.end, highlight=True)
        else:
            merged.append(Chunk(start=span.start, end=span.end, highlight=True))
    return merged


def fill_in_chunks(chunks_to_highlight: Sequence[Chunk | MatchSpan], total_length: int) -> list[Chunk]:
    """Insert unhighlighted chunks for every gap between highlighted ones.

    Parameters
    ----------
    chunks_to_highlight : sequence
        Sorted, non-overlapping highlighted intervals
    total_length : int
        Length of the text being partitioned

    Returns
    -------
    list[Chunk]
        Contiguous chunks covering ``[0, total_length)``; empty when the
        text is empty

    """
    all_chunks: list[Chunk] = []

    def append(start: int, end: int, highlight: bool) -> None:
        if end > start:
            all_chunks.append(Chunk(start=start, end=end, highlight=highlight))

    if not chunks_to_highlight:
        append(0, total_length, False)
        return all_chunks

    last_index = 0
    for chunk in chunks_to_highlight:
        append(last_index, chunk.start, False)
        append(chunk.start, chunk.end, True)
        last_index = chunk.end
    append(last_index, total_length, False)
    return all_chunks


def _coerce_span(span: SpanLike, total_length: int) -> Chunk | None:
    """Convert a span returned by a custom finder into a clamped chunk."""
    if isinstance(span, (Chunk, MatchSpan)):
        start, end = span.start, span.end
    else:
        try:
            start, end = span
        except (TypeError, ValueError) as e:
            raise InvalidChunkError(span, original_error=e) from e

    if isinstance(start, bool) or isinstance(end, bool) or not isinstance(start, int) or not isinstance(end, int):
        raise InvalidChunkError(span, message=f"Span bounds must be integers, got {span!r}")
    if end < start:
        raise InvalidChunkError(span, message=f"Span end precedes start: {span!r}")

    start = min(max(start, 0), total_length)
    end = min(max(end, 0), total_length)
    if end <= start:
        return None
    return Chunk(start=start, end=end, highlight=True)


def find_chunks(
    search_words: Sequence[SearchWord],
    text_to_highlight: str,
    options: HighlightOptions | None = None,
    **kwargs: Any,
) -> list[Chunk]:
    """Partition ``text_to_highlight`` into highlighted and unhighlighted chunks.

    Parameters
    ----------
    search_words : sequence
        Plain strings and compiled patterns to look for. Empty entries are
        ignored.
    text_to_highlight : str
        Text to partition
    options : HighlightOptions, optional
        Matching options. Defaults to ``HighlightOptions()``.
    **kwargs : Any
        Individual option overrides applied on top of ``options``
        (``case_sensitive``, ``auto_escape``, ``sanitize``, ``find_chunks``).

    Returns
    -------
    list[Chunk]
        Ordered chunks covering the text exactly once; adjacent chunks
        never share the same ``highlight`` value

    Raises
    ------
    InvalidSearchTermError
        If a search term is not a valid pattern or has an unsupported type
    InvalidChunkError
        If a custom ``find_chunks`` returns a malformed span
    ValidationError
        If an override does not name a known option

    Examples
    --------
        >>> find_chunks(["the", "he"], "the cat")
        [Chunk(start=0, end=3, highlight=True), Chunk(start=3, end=7, highlight=False)]

    """
    if options is None:
        options = HighlightOptions()
    if kwargs:
        options = options.create_updated(**kwargs)

    text_to_highlight = text_to_highlight or ""
    sanitize = options.resolved_sanitizer()
    finder = options.find_chunks or default_find_chunks

    raw_spans = finder(
        search_words=list(search_words or []),
        text_to_highlight=text_to_highlight,
        sanitize=sanitize,
        case_sensitive=options.case_sensitive,
        auto_escape=options.auto_escape,
    )

    total_length = len(text_to_highlight)
    spans = [chunk for span in raw_spans or [] if (chunk := _coerce_span(span, total_length)) is not None]
    logger.debug("Found %d raw span(s) in text of length %d", len(spans), total_length)

    return fill_in_chunks(combine_chunks(spans), total_length)


__all__ = ["default_find_chunks", "combine_chunks", "fill_in_chunks", "find_chunks"]
