#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes and helpers for chunk renderers.

Renderers turn the chunk list produced by ``find_chunks`` into an output
representation. The helpers here prepare chunks for rendering: resolving
class names, tracking the active highlight and splitting out URLs.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Sequence

from highlightwords.chunks import find_chunks
from highlightwords.constants import DEFAULT_ACTIVE_INDEX, URL_PATTERN
from highlightwords.options import HighlightOptions
from highlightwords.types import Chunk, SearchWord


@dataclass(frozen=True)
class TextPart:
    """Piece of chunk text; ``link`` is set when the piece is a URL."""

    text: str
    link: str | None = None


@dataclass(frozen=True)
class Segment:
    """A chunk prepared for rendering.

    Attributes
    ----------
    text : str
        Text covered by the chunk
    highlight : bool
        Whether the chunk is a match
    highlight_index : int
        Ordinal among highlighted chunks, or -1 for unhighlighted chunks
    class_name : str
        Class name resolved for highlighted chunks
    active : bool
        Whether this is the active highlighted chunk

    """

    text: str
    highlight: bool
    highlight_index: int = -1
    class_name: str = ""
    active: bool = False


def split_links(text: str) -> list[TextPart]:
    """Split ``text`` into plain pieces and http/https/ftp URL pieces, in order.

    Examples
    --------
        >>> split_links("see https://example.com now")
        [TextPart(text='see ', link=None), TextPart(text='https://example.com', link='https://example.com'),
         TextPart(text=' now', link=None)]

    """
    parts: list[TextPart] = []
    cursor = 0
    for match in URL_PATTERN.finditer(text):
        if match.start() > cursor:
            parts.append(TextPart(text[cursor : match.start()]))
        parts.append(TextPart(match.group(0), link=match.group(0)))
        cursor = match.end()
    if cursor < len(text) or not parts:
        parts.append(TextPart(text[cursor:]))
    return parts


class _LowercaseKeyCache:
    """Remember the case-folded copy of the most recently used class-name mapping.

    The cached copy is rebuilt when a different mapping is passed or when
    the same mapping was changed in place since the last call.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._source: Mapping[str, str] | None = None
        self._snapshot: tuple[tuple[str, str], ...] = ()
        self._folded: dict[str, str] = {}

    def get(self, mapping: Mapping[str, str]) -> dict[str, str]:
        snapshot = tuple(mapping.items())
        with self._lock:
            if mapping is not self._source or snapshot != self._snapshot:
                self._folded = {key.lower(): value for key, value in snapshot}
                self._source = mapping
                self._snapshot = snapshot
            return self._folded


_lowercase_keys = _LowercaseKeyCache()


def resolve_class_name(text: str, highlight_class_name: str | Mapping[str, str], case_sensitive: bool) -> str:
    """Return the class name for a highlighted chunk with text ``text``."""
    if isinstance(highlight_class_name, str):
        return highlight_class_name
    if case_sensitive:
        return highlight_class_name.get(text, "")
    return _lowercase_keys.get(highlight_class_name).get(text.lower(), "")


def build_segments(
    chunks: Sequence[Chunk],
    text: str,
    *,
    highlight_class_name: str | Mapping[str, str] = "",
    case_sensitive: bool = False,
    active_index: int = DEFAULT_ACTIVE_INDEX,
) -> Iterator[Segment]:
    """Yield a ``Segment`` for each chunk.

    Parameters
    ----------
    chunks : sequence of Chunk
        Chunks returned by ``find_chunks``
    text : str
        The text the chunks index into
    highlight_class_name : str or mapping, default ""
        Class for highlighted chunks, or a mapping from matched text to class
    case_sensitive : bool, default False
        Whether mapping lookups compare text case-sensitively
    active_index : int, default -1
        Ordinal of the highlighted chunk to flag as active

    """
    highlight_index = -1
    for chunk in chunks:
        chunk_text = chunk.text_of(text)
        if not chunk.highlight:
            yield Segment(text=chunk_text, highlight=False)
            continue
        highlight_index += 1
        yield Segment(
            text=chunk_text,
            highlight=True,
            highlight_index=highlight_index,
            class_name=resolve_class_name(chunk_text, highlight_class_name, case_sensitive),
            active=highlight_index == active_index,
        )


class BaseHighlightRenderer(ABC):
    """Abstract base class for renderers of highlighted text.

    Subclasses implement ``render_chunks``; ``render`` runs chunk finding
    with the renderer's matching options first.

    Parameters
    ----------
    options : HighlightOptions or None, default None
        Matching options used by ``render``

    """

    def __init__(self, options: HighlightOptions | None = None):
        """Initialize the renderer with optional matching options."""
        self.options = options or HighlightOptions()

    def render(self, search_words: Sequence[SearchWord], text: str) -> Any:
        """Find chunks for ``search_words`` in ``text`` and render them."""
        chunks = find_chunks(search_words, text, self.options)
        return self.render_chunks(chunks, text)

    @abstractmethod
    def render_chunks(self, chunks: Sequence[Chunk], text: str) -> Any:
        """Render already computed chunks of ``text``."""


__all__ = [
    "TextPart",
    "Segment",
    "split_links",
    "resolve_class_name",
    "build_segments",
    "BaseHighlightRenderer",
]
