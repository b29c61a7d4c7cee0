"""Language Resolution Example - Tags, Headers, File Names and Custom Languages.

Scenarios covered:
1. Tag fallback (pt-BR-x -> pt)
2. Accept-Language headers and translation file paths
3. Custom languages in a private registry
4. Languages outside the built-in table, built from Babel CLDR data

Python 3.11+.
"""

from __future__ import annotations

import logging

from pluralengine import (
    Language,
    LanguageParseError,
    PluralCategory,
    category_set,
    create_default_registry,
    must_parse_language,
    parse_language,
    register_language,
    resolve_language,
    select_plural_category,
)


def example_1_fallback() -> None:
    """Example 1: Identifiers are truncated at the last dash until one matches."""
    print("=" * 60)
    print("Example 1: Tag Fallback")
    print("=" * 60)

    for tag in ("pt-PT", "pt-BR-nonstandard", "zh_Hant_TW", "EN"):
        language = resolve_language(tag)
        print(f"{tag:<20} -> {language.id if language else None}")
    # Output:
    # pt-PT                -> pt-PT
    # pt-BR-nonstandard    -> pt
    # zh_Hant_TW           -> zh
    # EN                   -> None  (matching is case-sensitive)


def example_2_composite_strings() -> None:
    """Example 2: First supported language in headers and paths."""
    print("\n" + "=" * 60)
    print("Example 2: Headers and File Names")
    print("=" * 60)

    for text in ("xx-XX,fr;q=0.9,en;q=0.8", "/srv/app/locales/lt.json", "C:\\i18n\\ru_RU.ftl"):
        language = parse_language(text)
        print(f"{text:<28} -> {language.id if language else None}")

    try:
        must_parse_language("locales/xx.json")
    except LanguageParseError as e:
        print(f"\n[STRICT] {e}")


def example_3_custom_registry() -> None:
    """Example 3: Register a language in a private registry."""
    print("\n" + "=" * 60)
    print("Example 3: Custom Registry")
    print("=" * 60)

    def rule_klingon(ops):  # type: ignore[no-untyped-def]
        return PluralCategory.ONE if ops.i == 1 and ops.v == 0 else PluralCategory.OTHER

    registry = create_default_registry()
    register_language(Language("tlh", category_set("one"), rule_klingon, "Klingon"), registry)

    print(select_plural_category(1, "tlh-Latn", registry))
    # Output: one
    print(resolve_language("tlh"))
    # Output: None (the shared registry is unchanged)


def example_4_cldr_languages() -> None:
    """Example 4: Any locale Babel knows, via Language.from_cldr()."""
    print("\n" + "=" * 60)
    print("Example 4: CLDR Languages")
    print("=" * 60)

    registry = create_default_registry()
    for identifier in ("cy", "he", "sl"):
        registry.register(Language.from_cldr(identifier))

    for n in range(7):
        print(n, select_plural_category(n, "cy", registry))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    example_1_fallback()
    example_2_composite_strings()
    example_3_custom_registry()
    example_4_cldr_languages()

    print("\n" + "=" * 60)
    print("[SUCCESS] All language resolution examples complete!")
    print("=" * 60)
