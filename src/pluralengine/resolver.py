"""Language resolution from composite strings.

Finds the first registered language mentioned in a language tag, an
Accept-Language header, a delimited list, or a file path:

    "en-US,fr;q=0.9"            -> tries "en-US", "fr", "q=0", "9"
    "locales/pt-BR.all.json"    -> tries "pt-BR", "all", "json"
    "de_AT"                     -> tries "de_AT" (lookup falls back to "de")

Scanning rules:
    - ",", ";" and "." end a candidate
    - "/" and "\\" discard everything before them (directory segments)
    - Without any delimiter the whole string is the only candidate
    - The remainder after the last delimiter is the final candidate

Python 3.11+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pluralengine.diagnostics import ErrorTemplate, LanguageParseError
from pluralengine.registry import get_shared_registry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pluralengine.language import Language
    from pluralengine.registry import LanguageRegistry

__all__ = [
    "iter_candidates",
    "must_parse_language",
    "parse_language",
]

logger = logging.getLogger(__name__)

_TERMINATORS = frozenset(",;.")
_SEPARATORS = frozenset("/\\")


def iter_candidates(text: str) -> Iterator[str]:
    """Yield candidate language identifiers from text, left to right.

    Candidates are raw substrings; trimming and "_" normalization happen
    at lookup time.

    Args:
        text: Tag, Accept-Language header, delimited list or file path

    Yields:
        Candidate substrings in scan order

    Example:
        >>> list(iter_candidates("en-US,fr;q=0.9"))
        ['en-US', 'fr', 'q=0', '9']
        >>> list(iter_candidates("/srv/i18n/de.json"))
        ['de', 'json']
        >>> list(iter_candidates("locales/de"))
        ['de']
        >>> list(iter_candidates(" pt-BR "))
        [' pt-BR ']
    """
    start = 0
    delimited = False
    for end, char in enumerate(text):
        if char in _TERMINATORS:
            delimited = True
            yield text[start:end]
            start = end + 1
        elif char in _SEPARATORS:
            delimited = True
            start = end + 1
    if not delimited or start < len(text):
        yield text[start:]


def parse_language(text: str, registry: LanguageRegistry | None = None) -> Language | None:
    """Return the first supported language found in text.

    Args:
        text: Tag, Accept-Language header, delimited list or file path
        registry: Registry to query (default: shared built-in registry)

    Returns:
        First candidate that resolves, or None if none does

    Example:
        >>> parse_language("en-US,fr;q=0.9").id
        'en'
        >>> parse_language("xx;yy") is None
        True
    """
    if registry is None:
        registry = get_shared_registry()
    for candidate in iter_candidates(text):
        language = registry.lookup(candidate)
        if language is not None:
            logger.debug("Parsed language %s from %r", language.id, text)
            return language
    return None


def must_parse_language(text: str, registry: LanguageRegistry | None = None) -> Language:
    """Strict parse_language() for contexts where a missing language is fatal.

    Intended for fixed configuration (startup settings, bundled file
    names) where the only sensible reaction to failure is to stop.

    Args:
        text: Tag, Accept-Language header, delimited list or file path
        registry: Registry to query (default: shared built-in registry)

    Returns:
        First candidate that resolves

    Raises:
        LanguageParseError: If no candidate resolves
    """
    language = parse_language(text, registry)
    if language is None:
        raise LanguageParseError(ErrorTemplate.language_parse_failed(text), input_value=text)
    return language
