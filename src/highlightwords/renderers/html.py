#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML rendering of highlighted text.

Highlighted chunks are wrapped in ``<mark>`` (or the configured tag),
unhighlighted chunks in ``<span>``, and the whole result in an outer
``<span>``. All text is HTML-escaped.
"""

from __future__ import annotations

from html import escape
from typing import Mapping, Sequence

from highlightwords.options import HighlightOptions, HtmlRenderOptions
from highlightwords.renderers.base import BaseHighlightRenderer, Segment, build_segments, split_links
from highlightwords.types import Chunk, SearchWord


def format_style(style: Mapping[str, str] | None) -> str:
    """Serialize a mapping of CSS declarations into an inline style string."""
    if not style:
        return ""
    return "; ".join(f"{name}: {value}" for name, value in style.items())


def _attributes(**attrs: str) -> str:
    return "".join(f' {name}="{escape(value, quote=True)}"' for name, value in attrs.items() if value)


class HtmlHighlightRenderer(BaseHighlightRenderer):
    """Render chunks as an HTML fragment.

    Parameters
    ----------
    options : HighlightOptions or None, default None
        Matching options
    render_options : HtmlRenderOptions or None, default None
        Tag, class name, style and link settings

    Examples
    --------
        >>> HtmlHighlightRenderer().render(["cat"], "the cat")
        '<span><span>the </span><mark>cat</mark></span>'

    """

    def __init__(self, options: HighlightOptions | None = None, render_options: HtmlRenderOptions | None = None):
        """Initialize the renderer with matching and HTML options."""
        super().__init__(options)
        self.render_options = render_options or HtmlRenderOptions()

    def render_chunks(self, chunks: Sequence[Chunk], text: str) -> str:
        """Render chunks of ``text`` to an HTML string."""
        opts = self.render_options
        segments = build_segments(
            chunks,
            text,
            highlight_class_name=opts.highlight_class_name,
            case_sensitive=self.options.case_sensitive,
            active_index=opts.active_index,
        )
        body = "".join(self._render_segment(segment) for segment in segments)
        return f"<span{_attributes(**{'class': opts.class_name})}>{body}</span>"

    def _render_segment(self, segment: Segment) -> str:
        opts = self.render_options
        content = self._render_text(segment.text)

        if not segment.highlight:
            attrs = _attributes(**{"class": opts.unhighlight_class_name, "style": format_style(opts.unhighlight_style)})
            return f"<span{attrs}>{content}</span>"

        class_names = [name for name in (segment.class_name, opts.active_class_name if segment.active else "") if name]
        style = dict(opts.highlight_style or {})
        if segment.active and opts.active_style:
            style.update(opts.active_style)
        attrs = _attributes(**{"class": " ".join(class_names), "style": format_style(style)})
        return f"<{opts.highlight_tag}{attrs}>{content}</{opts.highlight_tag}>"

    def _render_text(self, text: str) -> str:
        if not self.render_options.link_urls:
            return escape(text)
        pieces = []
        for part in split_links(text):
            if part.link is None:
                pieces.append(escape(part.text))
            else:
                href = escape(part.link, quote=True)
                pieces.append(f'<a href="{href}" target="_blank">{escape(part.text)}</a>')
        return "".join(pieces)


def render_html(
    search_words: Sequence[SearchWord],
    text: str,
    *,
    options: HighlightOptions | None = None,
    render_options: HtmlRenderOptions | None = None,
) -> str:
    """Highlight ``search_words`` in ``text`` and return an HTML fragment.

    Parameters
    ----------
    search_words : sequence
        Strings and compiled patterns to highlight
    text : str
        Text to render
    options : HighlightOptions, optional
        Matching options
    render_options : HtmlRenderOptions, optional
        HTML presentation options

    Returns
    -------
    str
        Escaped HTML fragment

    """
    return HtmlHighlightRenderer(options, render_options).render(search_words, text)


__all__ = ["HtmlHighlightRenderer", "render_html", "format_style"]
