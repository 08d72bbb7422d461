#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Terminal rendering of highlighted text with ``rich``."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from highlightwords.constants import DEFAULT_ACTIVE_INDEX, DEFAULT_RICH_ACTIVE_STYLE, DEFAULT_RICH_HIGHLIGHT_STYLE
from highlightwords.options import HighlightOptions
from highlightwords.renderers.base import BaseHighlightRenderer, build_segments
from highlightwords.types import Chunk


class RichHighlightRenderer(BaseHighlightRenderer):
    """Render chunks as a ``rich.text.Text`` with styled matches.

    Parameters
    ----------
    options : HighlightOptions or None, default None
        Matching options
    highlight_style : str, default "bold yellow"
        Rich style applied to highlighted chunks
    active_index : int, default -1
        Ordinal of the highlighted chunk rendered with ``active_style``
    active_style : str, default "bold black on yellow"
        Rich style for the active chunk

    """

    def __init__(
        self,
        options: HighlightOptions | None = None,
        *,
        highlight_style: str = DEFAULT_RICH_HIGHLIGHT_STYLE,
        active_index: int = DEFAULT_ACTIVE_INDEX,
        active_style: str = DEFAULT_RICH_ACTIVE_STYLE,
    ):
        """Initialize the renderer with matching options and styles."""
        super().__init__(options)
        self.highlight_style = highlight_style
        self.active_index = active_index
        self.active_style = active_style

    def render_chunks(self, chunks: Sequence[Chunk], text: str) -> Text:
        """Render chunks of ``text`` to a styled ``Text``."""
        rendered = Text()
        for segment in build_segments(chunks, text, active_index=self.active_index):
            if not segment.highlight:
                rendered.append(segment.text)
            elif segment.active:
                rendered.append(segment.text, style=self.active_style)
            else:
                rendered.append(segment.text, style=self.highlight_style)
        return rendered


__all__ = ["RichHighlightRenderer"]
