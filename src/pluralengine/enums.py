"""Plural category enumeration and category-set helpers.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so ``PluralCategory.ONE == "one"``
and categories can be used directly as dictionary keys for message variants.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from enum import StrEnum

__all__ = [
    "CATEGORY_ORDER",
    "PluralCategory",
    "category_set",
]


class PluralCategory(StrEnum):
    """CLDR plural category.

    The set is closed: CLDR defines exactly these six keywords. Every
    language distinguishes ``OTHER``; most use only a subset of the rest.

    StrEnum provides automatic string conversion: str(PluralCategory.FEW) == "few"
    """

    ZERO = "zero"
    """Zero quantity forms (Arabic 0, Latvian 10, 11-19, ...)"""

    ONE = "one"
    """Singular forms; not necessarily the number 1 (French 0 and 1.5)"""

    TWO = "two"
    """Dual forms (Arabic, Hebrew, Slovenian, ...)"""

    FEW = "few"
    """Paucal forms (Slavic 2-4, Arabic 3-10, ...)"""

    MANY = "many"
    """Forms for large or fractional quantities"""

    OTHER = "other"
    """General plural form; every language uses it"""


CATEGORY_ORDER: tuple[PluralCategory, ...] = (
    PluralCategory.ZERO,
    PluralCategory.ONE,
    PluralCategory.TWO,
    PluralCategory.FEW,
    PluralCategory.MANY,
    PluralCategory.OTHER,
)
"""Canonical CLDR ordering, used when listing a language's categories."""


def category_set(*categories: PluralCategory | str) -> frozenset[PluralCategory]:
    """Build a declared category set for a language.

    ``OTHER`` is always included because it is the legal fallback for
    every language.

    Args:
        *categories: Enum members or CLDR keyword strings ("one", "few", ...)

    Returns:
        Frozen set of PluralCategory members, always containing OTHER

    Raises:
        ValueError: If a keyword is not a CLDR plural category

    Example:
        >>> sorted(category_set("one"))
        [<PluralCategory.ONE: 'one'>, <PluralCategory.OTHER: 'other'>]
        >>> category_set() == frozenset({PluralCategory.OTHER})
        True
    """
    members = {PluralCategory(category) for category in categories}
    members.add(PluralCategory.OTHER)
    return frozenset(members)
