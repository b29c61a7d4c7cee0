"""Tests for registry.py - LanguageRegistry and the shared registry."""

from __future__ import annotations

import logging

import pytest

from pluralengine.diagnostics import DiagnosticCode, InvalidNumberError, LanguageNotFoundError
from pluralengine.enums import PluralCategory, category_set
from pluralengine.language import Language
from pluralengine.registry import (
    LanguageRegistry,
    builtin_languages,
    create_default_registry,
    get_shared_registry,
)
from pluralengine.rules import RULES, rule_one_integer, rule_other


def _custom(identifier: str, name: str = "Custom") -> Language:
    return Language(identifier, category_set(), rule_other, name)


class TestBuiltins:
    """Contents of the default registry."""

    def test_every_table_entry_registered(self, registry: LanguageRegistry) -> None:
        assert registry.list_languages() == sorted(RULES)
        assert len(registry) == len(RULES)

    def test_builtin_names(self) -> None:
        names = {language.id: language.name for language in builtin_languages()}
        assert names["en"] == "English"
        assert names["pt-PT"] == "European Portuguese"

    def test_default_registries_are_independent(self) -> None:
        first = create_default_registry()
        second = create_default_registry()
        first.register(_custom("tlh"))
        assert "tlh" in first
        assert "tlh" not in second


class TestLookup:
    """Exact match, normalization and truncation fallback."""

    def test_exact(self, registry: LanguageRegistry) -> None:
        language = registry.lookup("pt-PT")
        assert language is not None
        assert language.id == "pt-PT"

    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("pt-BR-nonstandard", "pt"),
            ("pt-BR", "pt"),
            ("pt-PT-x-private", "pt-PT"),
            ("en-US", "en"),
            ("zh-Hant-TW", "zh"),
            ("en_US", "en"),
            ("pt_PT", "pt-PT"),
            ("  de-AT  ", "de"),
        ],
    )
    def test_fallback(self, registry: LanguageRegistry, identifier: str, expected: str) -> None:
        language = registry.lookup(identifier)
        assert language is not None
        assert language.id == expected

    def test_more_specific_registration_wins(self, registry: LanguageRegistry) -> None:
        brazilian = Language("pt-BR", category_set("one"), rule_one_integer, "Brazilian")
        registry.register(brazilian)
        assert registry.lookup("pt-BR-nonstandard") is brazilian
        assert registry.lookup("pt").id == "pt"  # type: ignore[union-attr]

    @pytest.mark.parametrize("identifier", ["", "   ", "xx", "xx-yy-zz", "-", "EN", "En-us"])
    def test_miss_returns_none(self, registry: LanguageRegistry, identifier: str) -> None:
        """Unknown and differently-cased identifiers do not resolve."""
        assert registry.lookup(identifier) is None

    @pytest.mark.parametrize("identifier", [None, 1, b"en", ["en"]])
    def test_non_string_rejected(self, registry: LanguageRegistry, identifier: object) -> None:
        with pytest.raises(TypeError, match="must be str"):
            registry.lookup(identifier)  # type: ignore[arg-type]


class TestClassify:
    """classify() combines lookup with the language rule."""

    def test_classify(self, registry: LanguageRegistry) -> None:
        assert registry.classify("ar", 103) == PluralCategory.FEW
        assert registry.classify("ru-RU", "21") == PluralCategory.ONE

    def test_unknown_language(self, registry: LanguageRegistry) -> None:
        with pytest.raises(LanguageNotFoundError) as exc_info:
            registry.classify("xx", 1)
        assert exc_info.value.identifier == "xx"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LANGUAGE_NOT_FOUND

    def test_not_found_is_lookup_error(self, registry: LanguageRegistry) -> None:
        with pytest.raises(LookupError):
            registry.classify("xx", 1)

    def test_bad_number(self, registry: LanguageRegistry) -> None:
        with pytest.raises(InvalidNumberError):
            registry.classify("en", "one")


class TestRegister:
    """Registration semantics: last write wins."""

    def test_replaces_existing(self, registry: LanguageRegistry) -> None:
        replacement = Language("en", category_set(), rule_other, "Flat English")
        registry.register(replacement)
        assert registry.lookup("en") is replacement
        assert registry.classify("en", 1) == PluralCategory.OTHER
        assert len(registry) == len(RULES)

    def test_non_language_rejected(self, registry: LanguageRegistry) -> None:
        with pytest.raises(TypeError, match="Expected Language"):
            registry.register("en")  # type: ignore[arg-type]

    def test_initial_languages_in_order(self) -> None:
        first = _custom("qq", "First")
        second = _custom("qq", "Second")
        registry = LanguageRegistry([first, second])
        assert registry.lookup("qq") is second

    def test_logs_registration(
        self, registry: LanguageRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="pluralengine.registry"):
            registry.register(_custom("tlh"))
            registry.register(_custom("tlh"))
        messages = [record.getMessage() for record in caplog.records]
        assert "Registered language: tlh (other)" in messages
        assert "Replaced language: tlh (other)" in messages

    def test_logs_fallback(
        self, registry: LanguageRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="pluralengine.registry"):
            registry.lookup("de-CH")
        assert any("via fallback 'de'" in record.getMessage() for record in caplog.records)


class TestFreeze:
    """Frozen registries and the shared registry."""

    def test_frozen_rejects_register(self, registry: LanguageRegistry) -> None:
        registry.freeze()
        assert registry.frozen
        with pytest.raises(TypeError, match="frozen"):
            registry.register(_custom("tlh"))

    def test_frozen_still_resolves(self, registry: LanguageRegistry) -> None:
        registry.freeze()
        assert registry.classify("fr", 0) == PluralCategory.ONE

    def test_shared_registry_is_singleton_and_frozen(self) -> None:
        shared = get_shared_registry()
        assert shared is get_shared_registry()
        assert shared.frozen
        with pytest.raises(TypeError):
            shared.register(_custom("tlh"))

    def test_copy_is_mutable_and_independent(self) -> None:
        copy = get_shared_registry().copy()
        assert not copy.frozen
        copy.register(_custom("tlh"))
        assert "tlh" in copy
        assert "tlh" not in get_shared_registry()


class TestIntrospection:
    """Dict-like protocol."""

    def test_contains_normalizes(self, registry: LanguageRegistry) -> None:
        assert "pt_PT" in registry
        assert " en " in registry

    def test_contains_has_no_fallback(self, registry: LanguageRegistry) -> None:
        assert "en-US" not in registry
        assert registry.lookup("en-US") is not None

    def test_contains_non_string(self, registry: LanguageRegistry) -> None:
        assert 1 not in registry

    def test_iter_sorted(self, registry: LanguageRegistry) -> None:
        assert list(registry) == sorted(RULES)

    def test_repr(self, registry: LanguageRegistry) -> None:
        assert repr(registry) == f"LanguageRegistry({len(RULES)} languages, mutable)"
        registry.freeze()
        assert repr(registry).endswith("frozen)")

    def test_empty_registry(self) -> None:
        empty = LanguageRegistry()
        assert len(empty) == 0
        assert empty.lookup("en") is None
