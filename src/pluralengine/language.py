"""Language definitions.

A Language couples an RFC 5646 identifier with its declared plural
categories and a rule function. Definitions are immutable values: they
are built once (built-in table, explicit construction, or Babel CLDR
data) and shared freely between registries and threads.

Python 3.11+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from pluralengine.diagnostics import ErrorTemplate, LanguageNotFoundError, PluralRuleError
from pluralengine.enums import PluralCategory, category_set
from pluralengine.locale_utils import get_babel_locale, get_display_name
from pluralengine.operands import PluralOperands, extract_operands

if TYPE_CHECKING:
    from pluralengine.operands import NumericInput
    from pluralengine.rules import PluralRuleFunc

__all__ = ["Language"]


@dataclass(frozen=True, slots=True)
class Language:
    """Written human language implementing CLDR pluralization.

    Languages are identified by tags defined by RFC 5646, typically a
    two-letter ISO 639-1 code optionally followed by a dash and an
    ISO 3166-1 region (``"en"``, ``"pt-PT"``).

    Attributes:
        id: Language identifier
        categories: Declared plural categories; OTHER is always included
        rule: Pure function selecting a category from operands
        name: English display name (looked up from CLDR when empty)

    Example:
        >>> from pluralengine.rules import rule_one_integer
        >>> english = Language("en", category_set("one"), rule_one_integer)
        >>> english.plural_category("1")
        <PluralCategory.ONE: 'one'>
        >>> english.plural_category("1.0")
        <PluralCategory.OTHER: 'other'>
        >>> english.name
        'English'
    """

    id: str
    categories: frozenset[PluralCategory]
    rule: PluralRuleFunc = field(repr=False, compare=False)
    name: str = ""

    def __post_init__(self) -> None:
        """Validate the identifier and normalize the category set.

        Raises:
            ValueError: If id is empty or contains whitespace, or if
                categories holds a value that is not a CLDR keyword.
        """
        if not self.id or self.id.strip() != self.id or " " in self.id:
            msg = f"Language id must be a non-empty tag without whitespace, got {self.id!r}"
            raise ValueError(msg)
        # frozen dataclass: object.__setattr__ is the documented escape hatch
        object.__setattr__(self, "categories", category_set(*self.categories))
        if not self.name:
            object.__setattr__(self, "name", get_display_name(self.id) or self.id)

    def __str__(self) -> str:
        return self.id

    def plural_category(self, number: NumericInput) -> PluralCategory:
        """Return the plural category for number in this language.

        Args:
            number: int, float, Decimal or decimal-formatted string

        Returns:
            A member of this language's declared categories

        Raises:
            InvalidNumberError: If number cannot be parsed into operands
            PluralRuleError: If the rule returns an undeclared category
        """
        return self.select(extract_operands(number))

    def select(self, operands: PluralOperands) -> PluralCategory:
        """Evaluate the rule on precomputed operands.

        Args:
            operands: Operands of the quantity

        Returns:
            A member of this language's declared categories

        Raises:
            PluralRuleError: If the rule returns an undeclared category
        """
        category = self.rule(operands)
        if category not in self.categories:
            raise PluralRuleError(
                ErrorTemplate.rule_undeclared_category(
                    self.id, str(category), frozenset(str(c) for c in self.categories)
                )
            )
        return PluralCategory(category)

    @classmethod
    def from_cldr(cls, identifier: str) -> Language:
        """Build a definition from Babel's CLDR plural data.

        Covers every locale Babel ships, not only the built-in table. The
        compiled CLDR rule is evaluated on the exact ``n`` operand, whose
        Decimal exponent still carries the displayed fraction digits.

        Args:
            identifier: Language tag (BCP-47 or POSIX separators)

        Returns:
            Language with CLDR categories and rule

        Raises:
            LanguageNotFoundError: If Babel has no data for identifier

        Example:
            >>> welsh = Language.from_cldr("cy")
            >>> welsh.plural_category(3)
            <PluralCategory.FEW: 'few'>
        """
        try:
            locale = get_babel_locale(identifier)
        except (UnknownLocaleError, ValueError) as e:
            raise LanguageNotFoundError(
                ErrorTemplate.language_unknown_to_cldr(identifier, str(e)),
                identifier=identifier,
            ) from e

        plural_form = locale.plural_form

        def cldr_rule(operands: PluralOperands) -> PluralCategory:
            return PluralCategory(plural_form(operands.n))

        return cls(
            id=identifier.strip().replace("_", "-"),
            categories=category_set(*plural_form.tags),
            rule=cldr_rule,
            name=locale.get_display_name("en") or "",
        )
