"""Cross-check the built-in rule table against Babel's CLDR plural data.

Babel compiles the same CLDR plural rules from its bundled data. Any
divergence means a built-in rule function was ported incorrectly, or the
installed Babel ships a different CLDR release.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pluralengine.enums import category_set
from pluralengine.locale_utils import get_babel_locale
from pluralengine.operands import extract_operands
from pluralengine.rules import CATEGORIES, RULES

LANGUAGE_IDS = sorted(RULES)

INTEGER_SAMPLES = [*range(0, 221), 1000000, 2000000, 1000001, 10**7]

DECIMAL_SAMPLES = [
    "0.0", "0.1", "0.5", "0.01", "0.11", "0.21",
    "1.0", "1.5", "1.00", "2.0", "2.5", "3.00",
    "10.0", "11.5", "21.0", "101.10", "1000000.0",
]


def babel_category(language_id: str, number: int | str) -> str:
    """Category Babel computes for the displayed decimal form of number."""
    return str(get_babel_locale(language_id).plural_form(Decimal(str(number))))


def builtin_category(language_id: str, number: int | str) -> str:
    return str(RULES[language_id](extract_operands(number)))


class TestDeclaredCategoriesMatchCLDR:
    """Declared category sets equal the CLDR tags for each language."""

    @pytest.mark.parametrize("language_id", LANGUAGE_IDS)
    def test_categories(self, language_id: str) -> None:
        tags = get_babel_locale(language_id).plural_form.tags
        assert CATEGORIES[language_id] == category_set(*tags)


class TestSamplesMatchCLDR:
    """Fixed samples around every modulo boundary."""

    @pytest.mark.parametrize("language_id", LANGUAGE_IDS)
    def test_integers(self, language_id: str) -> None:
        mismatches = [
            (number, builtin_category(language_id, number), babel_category(language_id, number))
            for number in INTEGER_SAMPLES
            if builtin_category(language_id, number) != babel_category(language_id, number)
        ]
        assert mismatches == []

    @pytest.mark.parametrize("language_id", LANGUAGE_IDS)
    def test_decimals(self, language_id: str) -> None:
        mismatches = [
            (text, builtin_category(language_id, text), babel_category(language_id, text))
            for text in DECIMAL_SAMPLES
            if builtin_category(language_id, text) != babel_category(language_id, text)
        ]
        assert mismatches == []


class TestPropertiesMatchCLDR:
    """Random quantities, including trailing-zero variants."""

    @given(
        language_id=st.sampled_from(LANGUAGE_IDS),
        integer=st.integers(min_value=0, max_value=10**9),
        fraction=st.text(alphabet="0123456789", max_size=3),
    )
    def test_random_decimal_strings(self, language_id: str, integer: int, fraction: str) -> None:
        text = f"{integer}.{fraction}" if fraction else str(integer)
        assert builtin_category(language_id, text) == babel_category(language_id, text)
