#  Copyright (c) 2025 Tom Villani, Ph.D.
"""highlightwords - find and highlight search terms in text.

highlightwords partitions a string into an ordered list of chunks, each
tagged as highlighted (covered by at least one match) or not. Matches from
several search terms are merged, so overlapping or touching matches become
a single highlighted chunk and the chunks always cover the text exactly once.

Key Features
------------
- Plain string and compiled pattern search terms
- Case-insensitive matching by default
- Automatic escaping of regex metacharacters in plain string terms
- Length-preserving sanitizers (accent folding, whitespace normalization)
- Pluggable matcher replacing the default regex search
- HTML, marker and ``rich`` renderers built on the chunk list

Quick Start
-----------
    >>> from highlightwords import find_chunks
    >>> find_chunks(["the", "he"], "the cat")
    [Chunk(start=0, end=3, highlight=True), Chunk(start=3, end=7, highlight=False)]

    >>> from highlightwords import render_html
    >>> render_html(["cat"], "the cat")
    '<span><span>the </span><mark>cat</mark></span>'

"""

from __future__ import annotations

import logging

from highlightwords.chunks import combine_chunks, default_find_chunks, fill_in_chunks, find_chunks
from highlightwords.exceptions import (
    ConfigurationError,
    HighlightWordsError,
    InputDecodeError,
    InvalidChunkError,
    InvalidSearchTermError,
    ValidationError,
)
from highlightwords.options import HighlightOptions, HtmlRenderOptions
from highlightwords.renderers import render_html, render_markers
from highlightwords.sanitizers import fold_accents, fold_case, get_sanitizer, normalize_whitespace
from highlightwords.terms import escape_regexp
from highlightwords.types import Chunk, ChunkFinder, LiteralTerm, MatchSpan, PatternTerm

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Chunk finding
    "find_chunks",
    "default_find_chunks",
    "combine_chunks",
    "fill_in_chunks",
    "escape_regexp",
    # Types
    "Chunk",
    "MatchSpan",
    "LiteralTerm",
    "PatternTerm",
    "ChunkFinder",
    # Options
    "HighlightOptions",
    "HtmlRenderOptions",
    # Sanitizers
    "fold_accents",
    "fold_case",
    "normalize_whitespace",
    "get_sanitizer",
    # Rendering
    "render_html",
    "render_markers",
    # Exceptions
    "HighlightWordsError",
    "ValidationError",
    "InvalidSearchTermError",
    "InvalidChunkError",
    "ConfigurationError",
    "InputDecodeError",
]
