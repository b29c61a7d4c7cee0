"""Built-in CLDR plural rules.

One small pure function per rule shape, plus a table keyed by language
identifier. Each function maps a PluralOperands to exactly one
PluralCategory and never fails; OTHER is the catch-all.

Rules are ported from CLDR 47 and evaluated branch by branch in CLDR
order, first match wins. Compact notation is not supported, so the CLDR
exponent operand is always 0 and ``e = 0`` conditions are dropped.

CLDR relations on ``n`` (e.g. ``n % 10 = 1``) only hold for integral
values: a value with a non-zero fraction digit never equals an integer
and never falls inside an integer range. They are therefore evaluated on
``i`` once ``is_integral`` holds. All arithmetic is integer arithmetic.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TypeAlias

from pluralengine.enums import PluralCategory, category_set
from pluralengine.operands import PluralOperands

__all__ = [
    "CATEGORIES",
    "NAMES",
    "RULES",
    "PluralRuleFunc",
]

PluralRuleFunc: TypeAlias = Callable[[PluralOperands], PluralCategory]

ZERO = PluralCategory.ZERO
ONE = PluralCategory.ONE
TWO = PluralCategory.TWO
FEW = PluralCategory.FEW
MANY = PluralCategory.MANY
OTHER = PluralCategory.OTHER


def _n_mod(ops: PluralOperands, modulus: int) -> int | None:
    """``n % modulus`` for integral n, None when n has a fraction."""
    return ops.i % modulus if ops.is_integral else None


def _is_million_multiple(ops: PluralOperands) -> bool:
    # many: e = 0 and i != 0 and i % 1000000 = 0 and v = 0
    return ops.i != 0 and ops.i % 1_000_000 == 0 and ops.v == 0


# ============================================================================
# RULE FUNCTIONS
# ============================================================================


def rule_other(ops: PluralOperands) -> PluralCategory:
    """No plural distinction (Chinese, Japanese, Korean)."""
    return OTHER


def rule_one_integer(ops: PluralOperands) -> PluralCategory:
    """one: i = 1 and v = 0 (English, German, Dutch, Swedish)."""
    if ops.i == 1 and ops.v == 0:
        return ONE
    return OTHER


def rule_one_integer_many(ops: PluralOperands) -> PluralCategory:
    """one: i = 1 and v = 0; many: i % 1000000 = 0 (Italian, Catalan, European Portuguese)."""
    if ops.i == 1 and ops.v == 0:
        return ONE
    if _is_million_multiple(ops):
        return MANY
    return OTHER


def rule_one_exact_many(ops: PluralOperands) -> PluralCategory:
    """one: n = 1; many: i % 1000000 = 0 (Spanish)."""
    if ops.is_integral and ops.i == 1:
        return ONE
    if _is_million_multiple(ops):
        return MANY
    return OTHER


def rule_zero_one_many(ops: PluralOperands) -> PluralCategory:
    """one: i = 0,1; many: i % 1000000 = 0 (French, Portuguese)."""
    if ops.i in (0, 1):
        return ONE
    if _is_million_multiple(ops):
        return MANY
    return OTHER


def rule_danish(ops: PluralOperands) -> PluralCategory:
    """one: n = 1 or t != 0 and i = 0,1."""
    if (ops.is_integral and ops.i == 1) or (ops.t != 0 and ops.i in (0, 1)):
        return ONE
    return OTHER


def rule_czech(ops: PluralOperands) -> PluralCategory:
    """Czech and Slovak."""
    if ops.i == 1 and ops.v == 0:
        return ONE
    if 2 <= ops.i <= 4 and ops.v == 0:
        return FEW
    if ops.v != 0:
        return MANY
    return OTHER


def rule_lithuanian(ops: PluralOperands) -> PluralCategory:
    """Lithuanian: any non-zero fraction digit selects many."""
    if ops.f != 0:
        return MANY
    mod10 = _n_mod(ops, 10)
    mod100 = _n_mod(ops, 100)
    teen = mod100 is not None and 11 <= mod100 <= 19
    if mod10 == 1 and not teen:
        return ONE
    if mod10 is not None and 2 <= mod10 <= 9 and not teen:
        return FEW
    return OTHER


def rule_latvian(ops: PluralOperands) -> PluralCategory:
    """Latvian: zero covers 0, multiples of ten and the teens."""
    mod10 = _n_mod(ops, 10)
    mod100 = _n_mod(ops, 100)
    f_mod10 = ops.f % 10
    f_mod100 = ops.f % 100

    if (
        mod10 == 0
        or (mod100 is not None and 11 <= mod100 <= 19)
        or (ops.v == 2 and 11 <= f_mod100 <= 19)
    ):
        return ZERO
    if (
        (mod10 == 1 and mod100 != 11)
        or (ops.v == 2 and f_mod10 == 1 and f_mod100 != 11)
        or (ops.v != 2 and f_mod10 == 1)
    ):
        return ONE
    return OTHER


def rule_romanian(ops: PluralOperands) -> PluralCategory:
    """Romanian: few covers fractions, 0 and x01-x19."""
    if ops.i == 1 and ops.v == 0:
        return ONE
    mod100 = _n_mod(ops, 100)
    if (
        ops.v != 0
        or (ops.is_integral and ops.i == 0)
        or (ops.i != 1 and mod100 is not None and 1 <= mod100 <= 19)
    ):
        return FEW
    return OTHER


def rule_east_slavic(ops: PluralOperands) -> PluralCategory:
    """Russian and Ukrainian. Only integers (v = 0) get one/few/many."""
    if ops.v != 0:
        return OTHER
    mod10 = ops.i % 10
    mod100 = ops.i % 100
    if mod10 == 1 and mod100 != 11:
        return ONE
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return FEW
    if mod10 == 0 or 5 <= mod10 <= 9 or 11 <= mod100 <= 14:
        return MANY
    return OTHER


def rule_polish(ops: PluralOperands) -> PluralCategory:
    if ops.i == 1 and ops.v == 0:
        return ONE
    if ops.v != 0:
        return OTHER
    mod10 = ops.i % 10
    mod100 = ops.i % 100
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return FEW
    if (ops.i != 1 and mod10 in (0, 1)) or 5 <= mod10 <= 9 or 12 <= mod100 <= 14:
        return MANY
    return OTHER


def rule_arabic(ops: PluralOperands) -> PluralCategory:
    """Arabic: six categories, all guarded by w = 0.

    The ranges overlap in i, so the branches must stay in this order:
    few (3-10 mod 100) is decided before many (11-99 mod 100).
    """
    if ops.w == 0:
        match ops.i:
            case 0:
                return ZERO
            case 1:
                return ONE
            case 2:
                return TWO
        mod100 = ops.i % 100
        if 3 <= mod100 <= 10:
            return FEW
        if mod100 >= 11:
            return MANY
    return OTHER


# ============================================================================
# LANGUAGE TABLE
# ============================================================================

# id: (English name, rule, categories other than OTHER)
_TABLE: dict[str, tuple[str, PluralRuleFunc, tuple[PluralCategory, ...]]] = {
    "ar": ("Arabic", rule_arabic, (ZERO, ONE, TWO, FEW, MANY)),
    "ca": ("Catalan", rule_one_integer_many, (ONE, MANY)),
    "cs": ("Czech", rule_czech, (ONE, FEW, MANY)),
    "da": ("Danish", rule_danish, (ONE,)),
    "de": ("German", rule_one_integer, (ONE,)),
    "en": ("English", rule_one_integer, (ONE,)),
    "es": ("Spanish", rule_one_exact_many, (ONE, MANY)),
    "fr": ("French", rule_zero_one_many, (ONE, MANY)),
    "it": ("Italian", rule_one_integer_many, (ONE, MANY)),
    "ja": ("Japanese", rule_other, ()),
    "ko": ("Korean", rule_other, ()),
    "lt": ("Lithuanian", rule_lithuanian, (ONE, FEW, MANY)),
    "lv": ("Latvian", rule_latvian, (ZERO, ONE)),
    "nl": ("Dutch", rule_one_integer, (ONE,)),
    "pl": ("Polish", rule_polish, (ONE, FEW, MANY)),
    "pt": ("Portuguese", rule_zero_one_many, (ONE, MANY)),
    "pt-PT": ("European Portuguese", rule_one_integer_many, (ONE, MANY)),
    "ro": ("Romanian", rule_romanian, (ONE, FEW)),
    "ru": ("Russian", rule_east_slavic, (ONE, FEW, MANY)),
    "sk": ("Slovak", rule_czech, (ONE, FEW, MANY)),
    "sv": ("Swedish", rule_one_integer, (ONE,)),
    "uk": ("Ukrainian", rule_east_slavic, (ONE, FEW, MANY)),
    # Simplified and traditional Chinese pluralize the same way.
    "zh": ("Chinese", rule_other, ()),
}

RULES: Mapping[str, PluralRuleFunc] = MappingProxyType(
    {language_id: rule for language_id, (_, rule, _) in _TABLE.items()}
)
"""Rule function per built-in language identifier."""

CATEGORIES: Mapping[str, frozenset[PluralCategory]] = MappingProxyType(
    {language_id: category_set(*cats) for language_id, (_, _, cats) in _TABLE.items()}
)
"""Declared category set per built-in language identifier (always includes OTHER)."""

NAMES: Mapping[str, str] = MappingProxyType(
    {language_id: name for language_id, (name, _, _) in _TABLE.items()}
)
"""English display name per built-in language identifier."""
