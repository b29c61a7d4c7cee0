"""Language registry: identifier to Language mapping with tag fallback.

Registries are explicit objects passed by reference, so independent
configurations (e.g. per test, per tenant) can coexist in one process.

Architecture:
    - LanguageRegistry: Mapping of identifier -> Language, last write wins
    - lookup(): exact match, then truncation fallback ("pt-BR-x" -> "pt-BR" -> "pt")
    - classify(): lookup + operand extraction + rule evaluation
    - create_default_registry(): fresh mutable registry with built-in languages
    - get_shared_registry(): process-wide frozen registry with built-in languages

Thread Safety:
    register() holds the write side of an RWLock, lookup() and classify()
    the read side. Language values are immutable, so rule evaluation runs
    outside the lock.

Python 3.11+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from pluralengine.diagnostics import ErrorTemplate, LanguageNotFoundError
from pluralengine.language import Language
from pluralengine.locale_utils import fallback_chain, normalize_language_id
from pluralengine.rules import CATEGORIES, NAMES, RULES
from pluralengine.rwlock import RWLock

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pluralengine.enums import PluralCategory
    from pluralengine.operands import NumericInput

__all__ = [
    "LanguageRegistry",
    "builtin_languages",
    "create_default_registry",
    "get_shared_registry",
]

logger = logging.getLogger(__name__)


class LanguageRegistry:
    """Process-local collection of available languages.

    Supports dict-like introspection:
        - list_languages(): Sorted registered identifiers
        - __iter__: Iterate over identifiers
        - __len__: Count registered languages
        - __contains__: Exact (normalized) identifier membership

    Example:
        >>> registry = create_default_registry()
        >>> registry.lookup("pt-BR-nonstandard").id
        'pt'
        >>> registry.classify("ar", 103)
        <PluralCategory.FEW: 'few'>
        >>> registry.lookup("xx-yy-zz") is None
        True
    """

    __slots__ = ("_frozen", "_languages", "_lock")

    def __init__(self, languages: Iterable[Language] = ()) -> None:
        """Initialize registry, registering languages in order.

        Args:
            languages: Initial definitions; later duplicates win
        """
        self._languages: dict[str, Language] = {}
        self._lock = RWLock()
        self._frozen = False
        for language in languages:
            self.register(language)

    def register(self, language: Language) -> None:
        """Add or replace a language under its identifier.

        No uniqueness error: registering an existing identifier replaces
        the previous definition for all subsequent lookups.

        Args:
            language: Definition to register

        Raises:
            TypeError: If the registry is frozen or language is not a Language
        """
        if not isinstance(language, Language):
            msg = f"Expected Language, got {type(language).__name__}"
            raise TypeError(msg)
        if self._frozen:
            msg = (
                "Cannot modify frozen LanguageRegistry. "
                "Use create_default_registry() or copy() for a mutable registry."
            )
            raise TypeError(msg)

        with self._lock.write():
            replaced = language.id in self._languages
            self._languages[language.id] = language

        logger.debug(
            "%s language: %s (%s)",
            "Replaced" if replaced else "Registered",
            language.id,
            ", ".join(sorted(language.categories)),
        )

    def lookup(self, identifier: str) -> Language | None:
        """Find the language registered for identifier or its nearest ancestor.

        The identifier is trimmed and underscores become dashes; matching is
        otherwise exact and case-sensitive. On a miss the identifier is cut
        at its last dash and retried until no dash is left.

        Args:
            identifier: Language tag (e.g., "pt_BR", "zh-Hant-TW")

        Returns:
            Matching Language, or None if no ancestor is registered

        Raises:
            TypeError: If identifier is not a string
        """
        if not isinstance(identifier, str):
            msg = f"Language identifier must be str, got {type(identifier).__name__}"
            raise TypeError(msg)

        normalized = normalize_language_id(identifier)
        if not normalized:
            return None

        with self._lock.read():
            for candidate in fallback_chain(normalized):
                found = self._languages.get(candidate)
                if found is not None:
                    if candidate != normalized:
                        logger.debug("Language %r resolved via fallback %r", identifier, candidate)
                    return found
        return None

    def classify(self, identifier: str, number: NumericInput) -> PluralCategory:
        """Plural category of number in the language resolved from identifier.

        Args:
            identifier: Language tag
            number: int, float, Decimal or decimal-formatted string

        Returns:
            Category from the language's declared set

        Raises:
            LanguageNotFoundError: If no registered language matches
            InvalidNumberError: If number cannot be parsed
        """
        language = self.lookup(identifier)
        if language is None:
            raise LanguageNotFoundError(
                ErrorTemplate.language_not_found(identifier), identifier=identifier
            )
        return language.plural_category(number)

    def freeze(self) -> None:
        """Reject all further registrations. Irreversible."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """True if register() is disabled."""
        return self._frozen

    def copy(self) -> LanguageRegistry:
        """Return an unfrozen registry with the same definitions."""
        with self._lock.read():
            languages = list(self._languages.values())
        return LanguageRegistry(languages)

    def list_languages(self) -> list[str]:
        """Sorted identifiers of all registered languages."""
        with self._lock.read():
            return sorted(self._languages)

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str):
            return False
        with self._lock.read():
            return normalize_language_id(identifier) in self._languages

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_languages())

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._languages)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        return f"LanguageRegistry({len(self)} languages, {state})"


def builtin_languages() -> tuple[Language, ...]:
    """Language definitions for the built-in CLDR rule table.

    Returns:
        One Language per entry of pluralengine.rules.RULES
    """
    return tuple(
        Language(language_id, CATEGORIES[language_id], rule, NAMES[language_id])
        for language_id, rule in RULES.items()
    )


def create_default_registry() -> LanguageRegistry:
    """Create a new mutable registry with all built-in languages.

    Each call returns an independent instance; registering into it does
    not affect other registries.

    Example:
        >>> registry = create_default_registry()
        >>> "en" in registry
        True

    See Also:
        get_shared_registry: Frozen process-wide registry.
    """
    return LanguageRegistry(builtin_languages())


@functools.cache
def get_shared_registry() -> LanguageRegistry:
    """Get the process-wide frozen registry of built-in languages.

    Used when callers pass no registry. The registry is frozen:
    register() raises TypeError. For custom languages use
    create_default_registry() or get_shared_registry().copy().

    Returns:
        Frozen LanguageRegistry with built-in languages
    """
    registry = create_default_registry()
    registry.freeze()
    return registry
