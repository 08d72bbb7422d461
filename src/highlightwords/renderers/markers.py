#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Plain-text rendering with inline match markers."""

from __future__ import annotations

from typing import Sequence

from highlightwords.constants import DEFAULT_CLOSE_MARKER, DEFAULT_OPEN_MARKER
from highlightwords.options import HighlightOptions
from highlightwords.renderers.base import BaseHighlightRenderer
from highlightwords.types import Chunk, SearchWord


class MarkerRenderer(BaseHighlightRenderer):
    """Wrap highlighted chunks in open/close markers, ``<<like this>>`` by default."""

    def __init__(
        self,
        options: HighlightOptions | None = None,
        *,
        open_marker: str = DEFAULT_OPEN_MARKER,
        close_marker: str = DEFAULT_CLOSE_MARKER,
    ):
        """Initialize the renderer with matching options and marker strings."""
        super().__init__(options)
        self.open_marker = open_marker
        self.close_marker = close_marker

    def render_chunks(self, chunks: Sequence[Chunk], text: str) -> str:
        """Render chunks of ``text`` with markers around highlighted chunks."""
        result: list[str] = []
        for chunk in chunks:
            chunk_text = chunk.text_of(text)
            if chunk.highlight:
                result.append(f"{self.open_marker}{chunk_text}{self.close_marker}")
            else:
                result.append(chunk_text)
        return "".join(result)


def render_markers(
    search_words: Sequence[SearchWord],
    text: str,
    *,
    options: HighlightOptions | None = None,
    open_marker: str = DEFAULT_OPEN_MARKER,
    close_marker: str = DEFAULT_CLOSE_MARKER,
) -> str:
    """Highlight ``search_words`` in ``text`` using inline markers.

    Examples
    --------
        >>> render_markers(["fox"], "The quick brown fox")
        'The quick brown <<fox>>'

    """
    renderer = MarkerRenderer(options, open_marker=open_marker, close_marker=close_marker)
    return renderer.render(search_words, text)


__all__ = ["MarkerRenderer", "render_markers"]
