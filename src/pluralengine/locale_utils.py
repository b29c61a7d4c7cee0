"""Language tag utilities.

Centralizes identifier normalization and the truncation fallback chain
used by the registry, plus the Babel bridge for CLDR display names and
plural data.

Identifiers inside pluralengine use BCP-47 dashes ("pt-PT"); Babel uses
POSIX underscores ("pt_PT"). Conversion happens only at the Babel
boundary.

Python 3.11+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from pluralengine.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from collections.abc import Iterator

    from babel import Locale

__all__ = [
    "fallback_chain",
    "get_babel_locale",
    "get_display_name",
    "get_system_locale",
    "normalize_language_id",
    "to_posix_locale",
]


def normalize_language_id(identifier: str) -> str:
    """Normalize an identifier for registry lookup.

    Trims surrounding whitespace and converts POSIX underscores to BCP-47
    dashes. Case is preserved: registry matching is case-sensitive.

    Args:
        identifier: Raw identifier (e.g., " pt_PT ")

    Returns:
        Normalized identifier (e.g., "pt-PT")

    Example:
        >>> normalize_language_id(" en_US ")
        'en-US'
        >>> normalize_language_id("zh-Hant-TW")
        'zh-Hant-TW'
    """
    return identifier.strip().replace("_", "-")


def fallback_chain(identifier: str) -> Iterator[str]:
    """Yield an identifier and its ancestors, longest first.

    Each step drops everything from the last dash onward.

    Args:
        identifier: Normalized identifier

    Yields:
        Candidate identifiers to try in order

    Example:
        >>> list(fallback_chain("pt-BR-x"))
        ['pt-BR-x', 'pt-BR', 'pt']
    """
    candidate = identifier
    while True:
        yield candidate
        end = candidate.rfind("-")
        if end < 0:
            return
        candidate = candidate[:end]


def to_posix_locale(identifier: str) -> str:
    """Convert a BCP-47 tag to the POSIX form Babel expects.

    Example:
        >>> to_posix_locale("pt-PT")
        'pt_PT'
    """
    return normalize_language_id(identifier).replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(identifier: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the identifier once and caches the result. Thread-safe via
    lru_cache internal locking.

    Args:
        identifier: Language tag (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If the locale is not recognized
        ValueError: If the identifier format is invalid

    Example:
        >>> get_babel_locale("pt-PT").territory
        'PT'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(to_posix_locale(identifier))


def get_display_name(identifier: str) -> str | None:
    """English display name of a language tag, or None if CLDR lacks it.

    Example:
        >>> get_display_name("lt")
        'Lithuanian'
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        return get_babel_locale(identifier).get_display_name("en")
    except (UnknownLocaleError, ValueError):
        return None


def get_system_locale() -> str | None:
    """Detect the process locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    The "C" and "POSIX" pseudo-locales and encoding suffixes are dropped.

    Returns:
        Normalized identifier (e.g., "de-DE"), or None if none is set.

    Example:
        >>> import os
        >>> os.environ["LANG"] = "de_DE.UTF-8"
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale and system_locale not in ("C", "POSIX"):
        return normalize_language_id(system_locale.split(".")[0].split("@")[0])

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            # Strip encoding (".UTF-8") and modifier ("@euro") suffixes
            return normalize_language_id(value.split(".")[0].split("@")[0])

    return None
