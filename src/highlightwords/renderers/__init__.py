#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning chunk lists into output representations.

Available renderers:
- HtmlHighlightRenderer: HTML fragment with ``<mark>`` elements
- MarkerRenderer: plain text with ``<<marker>>`` delimiters
- RichHighlightRenderer: ``rich.text.Text`` for terminal output

Examples
--------
    >>> from highlightwords.renderers import render_html
    >>> render_html(["cat"], "the cat")
    '<span><span>the </span><mark>cat</mark></span>'

"""

from highlightwords.renderers.base import (
    BaseHighlightRenderer,
    Segment,
    TextPart,
    build_segments,
    resolve_class_name,
    split_links,
)
from highlightwords.renderers.html import HtmlHighlightRenderer, format_style, render_html
from highlightwords.renderers.markers import MarkerRenderer, render_markers
from highlightwords.renderers.rich_text import RichHighlightRenderer

__all__ = [
    "BaseHighlightRenderer",
    "Segment",
    "TextPart",
    "build_segments",
    "resolve_class_name",
    "split_links",
    "HtmlHighlightRenderer",
    "format_style",
    "render_html",
    "MarkerRenderer",
    "render_markers",
    "RichHighlightRenderer",
]
