#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Built-in sanitize functions applied before matching.

Every sanitizer here maps each character of its input to exactly one
character, so offsets found in the sanitized copy index the original text.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Callable, Iterable

from highlightwords.exceptions import ValidationError
from highlightwords.types import Sanitizer

logger = logging.getLogger(__name__)


def identity(text: str) -> str:
    """Return ``text`` unchanged."""
    return text


def _fold_char(char: str) -> str:
    decomposed = unicodedata.normalize("NFD", char)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base if len(base) == 1 else char


def fold_accents(text: str) -> str:
    """Strip diacritics from characters that decompose to a single base character.

    Parameters
    ----------
    text : str
        Text to fold

    Returns
    -------
    str
        Text of the same length with accented letters replaced by their base letter

    Examples
    --------
        >>> fold_accents("Crème brûlée")
        'Creme brulee'

    """
    if text.isascii():
        return text
    return "".join(_fold_char(char) for char in text)


def normalize_whitespace(text: str) -> str:
    """Replace every whitespace character (tabs, newlines, NBSP) with a plain space."""
    return "".join(" " if char.isspace() else char for char in text)


def fold_case(text: str) -> str:
    """Lowercase each character whose lowercase form is a single character."""
    return "".join(lowered if len(lowered := char.lower()) == 1 else char for char in text)


_SANITIZERS: dict[str, Sanitizer] = {
    "identity": identity,
    "fold_accents": fold_accents,
    "normalize_whitespace": normalize_whitespace,
    "fold_case": fold_case,
}


def available_sanitizers() -> list[str]:
    """Return the names of the built-in sanitizers."""
    return sorted(_SANITIZERS)


def get_sanitizer(name: str) -> Sanitizer:
    """Look up a built-in sanitizer by name.

    Dashes and underscores are interchangeable, so ``fold-accents`` works
    on the command line.

    Raises
    ------
    ValidationError
        If no sanitizer with that name exists

    """
    key = name.strip().lower().replace("-", "_")
    try:
        return _SANITIZERS[key]
    except KeyError as e:
        raise ValidationError(
            f"Unknown sanitizer '{name}'. Available: {', '.join(available_sanitizers())}",
            parameter_name="sanitize",
            parameter_value=name,
        ) from e


def compose_sanitizers(*sanitizers: Sanitizer) -> Sanitizer:
    """Chain sanitizers left to right into a single callable."""
    if not sanitizers:
        return identity
    if len(sanitizers) == 1:
        return sanitizers[0]

    def composed(text: str) -> str:
        for sanitizer in sanitizers:
            text = sanitizer(text)
        return text

    return composed


def resolve_sanitizer(value: Sanitizer | str | Iterable[str | Sanitizer] | None) -> Sanitizer:
    """Turn a callable, a name, or a sequence of either into one sanitizer."""
    if value is None:
        return identity
    if isinstance(value, str):
        return get_sanitizer(value)
    if callable(value):
        return value

    resolved: list[Callable[[str], str]] = []
    for item in value:
        resolved.append(get_sanitizer(item) if isinstance(item, str) else item)
        if not callable(resolved[-1]):
            raise ValidationError(
                f"Sanitizer must be a callable or a name, got {type(item).__name__}",
                parameter_name="sanitize",
                parameter_value=item,
            )
    logger.debug("Composed %d sanitizers", len(resolved))
    return compose_sanitizers(*resolved)


__all__ = [
    "identity",
    "fold_accents",
    "normalize_whitespace",
    "fold_case",
    "available_sanitizers",
    "get_sanitizer",
    "compose_sanitizers",
    "resolve_sanitizer",
]
