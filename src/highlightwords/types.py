#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared data structures for chunk finding."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence, Tuple, Union

Sanitizer = Callable[[str], str]


@dataclass(frozen=True)
class Chunk:
    """Half-open ``[start, end)`` slice of the text tagged as matched or not."""

    start: int
    end: int
    highlight: bool = False

    @property
    def length(self) -> int:
        """Return the number of characters covered by the chunk."""
        return self.end - self.start

    def text_of(self, text: str) -> str:
        """Return the slice of ``text`` covered by this chunk."""
        return text[self.start : self.end]

    def to_dict(self) -> dict[str, object]:
        """Return a plain dictionary suitable for JSON serialization."""
        return {"start": self.start, "end": self.end, "highlight": self.highlight}


@dataclass(frozen=True)
class MatchSpan:
    """Raw ``[start, end)`` interval produced by one search term."""

    start: int
    end: int


@dataclass(frozen=True)
class LiteralTerm:
    """Search term given as a plain string."""

    text: str


@dataclass(frozen=True)
class PatternTerm:
    """Search term given as a compiled regular expression."""

    pattern: re.Pattern[str]


SearchTerm = Union[LiteralTerm, PatternTerm]
SearchWord = Union[str, "re.Pattern[str]", None]
SpanLike = Union[MatchSpan, Chunk, Tuple[int, int]]


class ChunkFinder(Protocol):
    """Callable replacing the default per-term matching step."""

    def __call__(
        self,
        *,
        search_words: Sequence[SearchWord],
        text_to_highlight: str,
        sanitize: Sanitizer,
        case_sensitive: bool,
        auto_escape: bool,
    ) -> Sequence[SpanLike]:
        """Return the match spans found in ``text_to_highlight``."""
        ...
