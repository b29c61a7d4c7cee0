"""Entry points for collaborators choosing a plural variant.

A translation store typically resolves the user's language once, then
classifies each quantity it renders:

    >>> language = resolve_language("pt-BR")
    >>> classify(language, "1.5")
    <PluralCategory.ONE: 'one'>

Functions taking an optional registry default to the shared, frozen
built-in registry. Registration always needs an explicit registry.

Python 3.11+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pluralengine.diagnostics import ErrorTemplate, LanguageNotFoundError
from pluralengine.locale_utils import get_system_locale
from pluralengine.registry import get_shared_registry

if TYPE_CHECKING:
    from pluralengine.enums import PluralCategory
    from pluralengine.language import Language
    from pluralengine.operands import NumericInput
    from pluralengine.registry import LanguageRegistry

__all__ = [
    "classify",
    "get_system_language",
    "register_language",
    "resolve_language",
    "select_plural_category",
]


def resolve_language(
    identifier: str, registry: LanguageRegistry | None = None
) -> Language | None:
    """Resolve a language tag, falling back to its ancestors.

    Args:
        identifier: Language tag (e.g., "pt-BR", "en_US")
        registry: Registry to query (default: shared built-in registry)

    Returns:
        Matching Language, or None if nothing matches
    """
    if registry is None:
        registry = get_shared_registry()
    return registry.lookup(identifier)


def classify(language: Language, number: NumericInput) -> PluralCategory:
    """Plural category of number in language.

    Args:
        language: Resolved language definition
        number: int, float, Decimal or decimal-formatted string

    Returns:
        Category from the language's declared set

    Raises:
        InvalidNumberError: If number cannot be parsed
    """
    return language.plural_category(number)


def register_language(language: Language, registry: LanguageRegistry) -> None:
    """Add or replace language in registry (last write wins).

    Args:
        language: Definition to register
        registry: Mutable registry to modify

    Raises:
        TypeError: If registry is frozen
    """
    registry.register(language)


def select_plural_category(
    number: NumericInput, identifier: str, registry: LanguageRegistry | None = None
) -> PluralCategory:
    """Resolve identifier and classify number in one call.

    Unlike resolve_language(), an unknown identifier is an error here:
    there is no category to return.

    Args:
        number: int, float, Decimal or decimal-formatted string
        identifier: Language tag
        registry: Registry to query (default: shared built-in registry)

    Returns:
        Category from the resolved language's declared set

    Raises:
        LanguageNotFoundError: If no registered language matches
        InvalidNumberError: If number cannot be parsed

    Examples:
        >>> select_plural_category(0, "lv")
        <PluralCategory.ZERO: 'zero'>
        >>> select_plural_category("5", "ru-RU")
        <PluralCategory.MANY: 'many'>
        >>> select_plural_category(42, "ja")
        <PluralCategory.OTHER: 'other'>
    """
    language = resolve_language(identifier, registry)
    if language is None:
        raise LanguageNotFoundError(
            ErrorTemplate.language_not_found(identifier), identifier=identifier
        )
    return classify(language, number)


def get_system_language(registry: LanguageRegistry | None = None) -> Language | None:
    """Resolve the process locale (LC_ALL, LC_MESSAGES, LANG) to a language.

    Args:
        registry: Registry to query (default: shared built-in registry)

    Returns:
        Language for the system locale, or None if unset or unsupported
    """
    system_locale = get_system_locale()
    if system_locale is None:
        return None
    return resolve_language(system_locale, registry)
