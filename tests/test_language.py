"""Tests for language.py - Language definitions and CLDR-backed construction."""

from __future__ import annotations

from decimal import Decimal

import pytest

from pluralengine.diagnostics import (
    DiagnosticCode,
    InvalidNumberError,
    LanguageNotFoundError,
    PluralRuleError,
)
from pluralengine.enums import PluralCategory, category_set
from pluralengine.language import Language
from pluralengine.operands import PluralOperands
from pluralengine.rules import rule_one_integer, rule_other


def _always_few(_: PluralOperands) -> PluralCategory:
    return PluralCategory.FEW


class TestConstruction:
    """Validation in __post_init__."""

    def test_other_added_to_categories(self) -> None:
        language = Language("en", category_set("one"), rule_one_integer, "English")
        assert PluralCategory.OTHER in language.categories

    def test_plain_strings_normalized(self) -> None:
        language = Language("en", frozenset({"one"}), rule_one_integer)  # type: ignore[arg-type]
        assert language.categories == {PluralCategory.ONE, PluralCategory.OTHER}

    @pytest.mark.parametrize("bad_id", ["", " ", " en", "en ", "en US"])
    def test_invalid_id_rejected(self, bad_id: str) -> None:
        with pytest.raises(ValueError, match="Language id"):
            Language(bad_id, category_set(), rule_other, "Name")

    def test_invalid_category_rejected(self) -> None:
        with pytest.raises(ValueError):
            Language("en", frozenset({"plenty"}), rule_other, "Name")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        language = Language("en", category_set("one"), rule_one_integer, "English")
        with pytest.raises(AttributeError):
            language.id = "de"  # type: ignore[misc]

    def test_str_is_id(self) -> None:
        assert str(Language("pt-PT", category_set("one"), rule_one_integer, "Name")) == "pt-PT"


class TestDisplayName:
    """Name defaults to the CLDR English display name."""

    def test_name_from_cldr(self) -> None:
        assert Language("lt", category_set(), rule_other).name == "Lithuanian"

    def test_explicit_name_kept(self) -> None:
        assert Language("en", category_set(), rule_other, "Anglais").name == "Anglais"

    def test_unknown_tag_falls_back_to_id(self) -> None:
        assert Language("xx", category_set(), rule_other).name == "xx"


class TestEquality:
    """Rules are not compared; id, categories and name are."""

    def test_equal_despite_distinct_rule_objects(self) -> None:
        a = Language("en", category_set("one"), rule_one_integer, "English")
        b = Language("en", category_set("one"), lambda ops: PluralCategory.OTHER, "English")
        assert a == b
        assert hash(a) == hash(b)

    def test_rule_hidden_from_repr(self) -> None:
        language = Language("en", category_set("one"), rule_one_integer, "English")
        assert "rule" not in repr(language)


class TestPluralCategory:
    """plural_category() and select()."""

    def test_classifies_each_input_tag(self) -> None:
        language = Language("en", category_set("one"), rule_one_integer, "English")
        assert language.plural_category(1) == PluralCategory.ONE
        assert language.plural_category("1") == PluralCategory.ONE
        assert language.plural_category(Decimal("1")) == PluralCategory.ONE
        assert language.plural_category(1.0) == PluralCategory.ONE
        assert language.plural_category("1.0") == PluralCategory.OTHER

    def test_malformed_number_propagates(self) -> None:
        language = Language("en", category_set("one"), rule_one_integer, "English")
        with pytest.raises(InvalidNumberError):
            language.plural_category("12.3.4")

    def test_undeclared_category_raises(self) -> None:
        broken = Language("xx", category_set("one"), _always_few, "Broken")
        with pytest.raises(PluralRuleError) as exc_info:
            broken.plural_category(1)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.RULE_UNDECLARED_CATEGORY
        assert "'few'" in str(exc_info.value)

    def test_rule_may_return_keyword_string(self) -> None:
        """A custom rule returning "few" still yields the enum member."""
        language = Language(
            "xx", category_set("few"), lambda ops: "few", "Strings"  # type: ignore[arg-type,return-value]
        )
        assert language.plural_category(3) is PluralCategory.FEW


class TestFromCLDR:
    """Language.from_cldr() builds definitions from Babel's CLDR data."""

    def test_welsh(self) -> None:
        welsh = Language.from_cldr("cy")
        assert welsh.categories == set(PluralCategory)
        assert welsh.plural_category(0) == PluralCategory.ZERO
        assert welsh.plural_category(2) == PluralCategory.TWO
        assert welsh.plural_category(3) == PluralCategory.FEW
        assert welsh.plural_category(6) == PluralCategory.MANY
        assert welsh.name == "Welsh"

    def test_posix_identifier_normalized(self) -> None:
        language = Language.from_cldr("pt_BR")
        assert language.id == "pt-BR"
        assert language.plural_category(0) == PluralCategory.ONE

    def test_trailing_zeros_reach_cldr_rule(self) -> None:
        english = Language.from_cldr("en")
        assert english.plural_category("1") == PluralCategory.ONE
        assert english.plural_category("1.0") == PluralCategory.OTHER

    @pytest.mark.parametrize("identifier", ["xx", "zz-ZZ"])
    def test_unknown_locale(self, identifier: str) -> None:
        with pytest.raises(LanguageNotFoundError) as exc_info:
            Language.from_cldr(identifier)
        assert exc_info.value.identifier == identifier
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LANGUAGE_UNKNOWN_TO_CLDR
