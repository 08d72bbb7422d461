#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for chunk finding and rendering.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy instead of mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, Sequence

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from highlightwords.constants import (
    DEFAULT_ACTIVE_INDEX,
    DEFAULT_AUTO_ESCAPE,
    DEFAULT_CASE_SENSITIVE,
    DEFAULT_HIGHLIGHT_TAG,
)
from highlightwords.exceptions import ValidationError
from highlightwords.sanitizers import resolve_sanitizer
from highlightwords.types import ChunkFinder, Sanitizer


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        Raises
        ------
        ValidationError
            If a keyword does not name a field of this options class

        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ValidationError(
                f"Unknown option(s) for {type(self).__name__}: {', '.join(unknown)}",
                parameter_name=unknown[0],
                parameter_value=kwargs[unknown[0]],
            )
        return replace(self, **kwargs)


@dataclass(frozen=True)
class HighlightOptions(CloneFrozenMixin):
    """Options controlling how search terms are matched against the text.

    Parameters
    ----------
    case_sensitive : bool, default False
        Match case exactly. When false, matching uses ``re.IGNORECASE``.
    auto_escape : bool, default False
        Escape regular expression metacharacters in plain string terms so
        they match literally.
    sanitize : callable, str or sequence, optional
        Transform applied to the text and to each plain string term before
        matching. Accepts a callable, the name of a built-in sanitizer, or a
        sequence of either (applied in order). Offsets are only guaranteed
        to line up with the original text when the transform preserves length.
    find_chunks : ChunkFinder, optional
        Replacement for the default matching step. Receives the search
        words, text, sanitize function and flags as keyword arguments and
        returns match spans.

    """

    case_sensitive: bool = field(
        default=DEFAULT_CASE_SENSITIVE,
        metadata={"help": "Match search terms case-sensitively", "importance": "core"},
    )
    auto_escape: bool = field(
        default=DEFAULT_AUTO_ESCAPE,
        metadata={"help": "Escape regex metacharacters in plain string search terms", "importance": "core"},
    )
    sanitize: Sanitizer | str | Sequence[str | Sanitizer] | None = field(
        default=None,
        metadata={
            "help": "Length-preserving transform applied to text and terms before matching",
            "importance": "advanced",
        },
    )
    find_chunks: ChunkFinder | None = field(
        default=None,
        metadata={"help": "Custom matcher replacing the default regex search", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option types at construction time.

        Raises
        ------
        ValidationError
            If ``find_chunks`` is not callable or ``sanitize`` cannot be resolved.

        """
        if self.find_chunks is not None and not callable(self.find_chunks):
            raise ValidationError(
                "find_chunks must be callable",
                parameter_name="find_chunks",
                parameter_value=self.find_chunks,
            )
        if self.sanitize is not None and not callable(self.sanitize):
            if not isinstance(self.sanitize, (str, list, tuple)):
                raise ValidationError(
                    f"sanitize must be a callable, a sanitizer name or a sequence, got {type(self.sanitize).__name__}",
                    parameter_name="sanitize",
                    parameter_value=self.sanitize,
                )
            if isinstance(self.sanitize, list):
                object.__setattr__(self, "sanitize", tuple(self.sanitize))
            # Fail on unknown sanitizer names now rather than at match time
            resolve_sanitizer(self.sanitize)

    def resolved_sanitizer(self) -> Sanitizer:
        """Return the sanitize setting as a single callable."""
        return resolve_sanitizer(self.sanitize)


@dataclass(frozen=True)
class HtmlRenderOptions(CloneFrozenMixin):
    """Options for rendering chunks as HTML.

    Parameters
    ----------
    highlight_tag : str, default "mark"
        Element wrapping highlighted chunks.
    highlight_class_name : str or mapping, default ""
        Class applied to highlighted chunks. A mapping selects the class by
        matched text (looked up case-insensitively unless matching is case
        sensitive).
    highlight_style : mapping, optional
        Inline CSS declarations for highlighted chunks.
    active_index : int, default -1
        Ordinal of the highlighted chunk to mark active (-1 for none).
    active_class_name : str, default ""
        Extra class for the active chunk.
    active_style : mapping, optional
        Inline CSS merged over ``highlight_style`` for the active chunk.
    unhighlight_class_name : str, default ""
        Class applied to unhighlighted chunks.
    unhighlight_style : mapping, optional
        Inline CSS for unhighlighted chunks.
    class_name : str, default ""
        Class of the outer ``span``.
    link_urls : bool, default True
        Wrap URLs found inside chunks in anchor elements.

    """

    highlight_tag: str = field(
        default=DEFAULT_HIGHLIGHT_TAG,
        metadata={"help": "HTML element wrapping highlighted chunks", "importance": "core"},
    )
    highlight_class_name: str | Mapping[str, str] = field(
        default="",
        metadata={"help": "Class name (or text-to-class mapping) for highlighted chunks", "importance": "core"},
    )
    highlight_style: Mapping[str, str] | None = field(
        default=None,
        metadata={"help": "Inline CSS for highlighted chunks", "importance": "advanced"},
    )
    active_index: int = field(
        default=DEFAULT_ACTIVE_INDEX,
        metadata={"help": "Index of the highlighted chunk to mark active (-1 for none)", "type": int},
    )
    active_class_name: str = field(
        default="",
        metadata={"help": "Class name added to the active highlighted chunk", "importance": "core"},
    )
    active_style: Mapping[str, str] | None = field(
        default=None,
        metadata={"help": "Inline CSS merged over highlight_style for the active chunk", "importance": "advanced"},
    )
    unhighlight_class_name: str = field(
        default="",
        metadata={"help": "Class name for unhighlighted chunks", "importance": "core"},
    )
    unhighlight_style: Mapping[str, str] | None = field(
        default=None,
        metadata={"help": "Inline CSS for unhighlighted chunks", "importance": "advanced"},
    )
    class_name: str = field(
        default="",
        metadata={"help": "Class name of the wrapping span", "importance": "core"},
    )
    link_urls: bool = field(
        default=True,
        metadata={"help": "Wrap http/https/ftp URLs inside chunks in anchor elements", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the highlight tag name."""
        if not self.highlight_tag or not self.highlight_tag.replace("-", "").isalnum():
            raise ValidationError(
                f"highlight_tag must be a plain element name, got {self.highlight_tag!r}",
                parameter_name="highlight_tag",
                parameter_value=self.highlight_tag,
            )


__all__ = ["CloneFrozenMixin", "HighlightOptions", "HtmlRenderOptions"]
