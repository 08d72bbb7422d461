#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Search term resolution and compilation.

Search words arrive as plain strings or compiled patterns. They are resolved
once into ``LiteralTerm`` / ``PatternTerm`` values and then compiled into
patterns that honour the case sensitivity and auto-escape settings.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from highlightwords.exceptions import InvalidSearchTermError
from highlightwords.sanitizers import identity
from highlightwords.types import LiteralTerm, PatternTerm, Sanitizer, SearchTerm, SearchWord

logger = logging.getLogger(__name__)


def escape_regexp(text: str) -> str:
    r"""Escape regular expression metacharacters in ``text``.

    Examples
    --------
        >>> escape_regexp("a.b")
        'a\\.b'

    """
    return re.escape(text)


def resolve_search_term(word: SearchWord) -> SearchTerm | None:
    """Resolve one search word, returning None for empty words.

    Raises
    ------
    InvalidSearchTermError
        If the word is neither a string nor a compiled ``str`` pattern

    """
    if isinstance(word, re.Pattern):
        if not isinstance(word.pattern, str):
            raise InvalidSearchTermError(word, message=f"Search pattern {word!r} must be compiled from a str")
        return PatternTerm(word) if word.pattern else None
    if isinstance(word, str):
        return LiteralTerm(word) if word else None
    if not word:
        return None
    raise InvalidSearchTermError(
        word, message=f"Search term {word!r} must be a str or compiled pattern, got {type(word).__name__}"
    )


def resolve_search_terms(search_words: Iterable[SearchWord]) -> list[SearchTerm]:
    """Resolve search words into terms, dropping empty ones and keeping order."""
    terms = []
    for word in search_words:
        term = resolve_search_term(word)
        if term is not None:
            terms.append(term)
    return terms


def compile_term(
    term: SearchTerm,
    *,
    case_sensitive: bool = False,
    auto_escape: bool = False,
    sanitize: Sanitizer = identity,
) -> re.Pattern[str]:
    """Compile a resolved term into a pattern.

    Literal terms are sanitized, escaped when ``auto_escape`` is set, and
    compiled. Pattern terms keep their source and flags except for
    ``re.IGNORECASE``, which always follows ``case_sensitive``.

    Parameters
    ----------
    term : LiteralTerm or PatternTerm
        Resolved search term
    case_sensitive : bool, default False
        Whether the compiled pattern matches case exactly
    auto_escape : bool, default False
        Escape metacharacters of literal terms
    sanitize : callable, default identity
        Transform applied to literal terms before compilation

    Returns
    -------
    re.Pattern
        Compiled pattern ready for scanning

    Raises
    ------
    InvalidSearchTermError
        If the regular expression engine rejects the term

    """
    if isinstance(term, PatternTerm):
        source = term.pattern.pattern
        flags = term.pattern.flags & ~re.IGNORECASE
        original: object = term.pattern
    else:
        source = sanitize(term.text)
        if auto_escape:
            source = escape_regexp(source)
        flags = 0
        original = term.text

    if not case_sensitive:
        flags |= re.IGNORECASE

    try:
        return re.compile(source, flags)
    except re.error as e:
        raise InvalidSearchTermError(original, original_error=e) from e


__all__ = ["escape_regexp", "resolve_search_term", "resolve_search_terms", "compile_term"]
