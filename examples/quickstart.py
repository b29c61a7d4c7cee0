"""Quickstart example for pluralengine.

Picks the plural variant of a message for a user's language:
1. Resolve a language tag once
2. Classify each quantity into a CLDR plural category
3. Use the category as the key of the message variants

Note: Numbers with trailing zeros ("1.0") are a different plural form than
integers in many languages. Pass strings or Decimals when the displayed
precision matters; floats lose trailing zeros.

Python 3.11+.
"""

from __future__ import annotations

from decimal import Decimal

from pluralengine import (
    InvalidNumberError,
    LanguageNotFoundError,
    PluralCategory,
    classify,
    resolve_language,
    select_plural_category,
)

FILES = {
    "en": {
        PluralCategory.ONE: "{n} file",
        PluralCategory.OTHER: "{n} files",
    },
    "pl": {
        PluralCategory.ONE: "{n} plik",
        PluralCategory.FEW: "{n} pliki",
        PluralCategory.MANY: "{n} plików",
        PluralCategory.OTHER: "{n} pliku",
    },
}


def example_1_resolve_and_classify() -> None:
    """Example 1: Resolve once, classify many quantities."""
    print("=" * 50)
    print("Example 1: Resolve and Classify")
    print("=" * 50)

    polish = resolve_language("pl-PL")
    assert polish is not None
    print(f"Resolved 'pl-PL' to {polish.id} ({polish.name})")

    for n in (1, 2, 5, 22, "1.5"):
        category = classify(polish, n)
        print(f"{n!s:>5} -> {category:<5} {FILES['pl'][category].format(n=n)}")
    # Output:
    #     1 -> one   1 plik
    #     2 -> few   2 pliki
    #     5 -> many  5 plików
    #    22 -> few   22 pliki
    #   1.5 -> other 1.5 pliku


def example_2_displayed_precision() -> None:
    """Example 2: Trailing zeros change the category."""
    print("\n" + "=" * 50)
    print("Example 2: Displayed Precision")
    print("=" * 50)

    for n in (1, "1", "1.0", Decimal("1.00"), 1.0):
        category = select_plural_category(n, "en")
        print(f"{n!r:>16} -> {category}")
    # Output:
    #                1 -> one
    #              '1' -> one
    #            '1.0' -> other
    #  Decimal('1.00') -> other
    #              1.0 -> one


def example_3_errors() -> None:
    """Example 3: Failures are exceptions, never silent defaults."""
    print("\n" + "=" * 50)
    print("Example 3: Error Handling")
    print("=" * 50)

    try:
        select_plural_category("12.3.4", "en")
    except InvalidNumberError as e:
        print(e)

    try:
        select_plural_category(1, "tlh")
    except LanguageNotFoundError as e:
        print(e)

    print(resolve_language("tlh"))
    # Output: None


if __name__ == "__main__":
    example_1_resolve_and_classify()
    example_2_displayed_precision()
    example_3_errors()

    print("\n" + "=" * 50)
    print("[SUCCESS] All quickstart examples complete!")
    print("=" * 50)
