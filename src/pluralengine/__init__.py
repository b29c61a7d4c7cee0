"""pluralengine - CLDR plural category selection and language tag resolution.

Classifies a quantity into its CLDR plural category (zero, one, two, few,
many, other) for a language, and resolves free-form language identifiers
(RFC 5646 tags, Accept-Language headers, file names) to registered
language definitions.

Public API:
    resolve_language - Tag to Language, with ancestor fallback
    classify - Plural category of a number in a Language
    register_language - Add or replace a Language in a registry
    select_plural_category - resolve_language + classify in one call
    parse_language - First supported language in a composite string
    must_parse_language - Strict parse_language for fixed configuration
    extract_operands - CLDR operands (n, i, v, w, f, t) of a number
    Language - Immutable language definition
    LanguageRegistry - Thread-safe identifier -> Language mapping
    PluralCategory - zero/one/two/few/many/other (StrEnum)

Exceptions:
    PluralError - Base exception class
    InvalidNumberError - Number cannot be parsed into operands
    LanguageNotFoundError - No registered language matches
    LanguageParseError - Strict language parsing failed
    PluralRuleError - Rule returned an undeclared category

Submodules:
    pluralengine.rules - Built-in CLDR rule table
    pluralengine.operands - Operand extraction and decimal normalization
    pluralengine.locale_utils - Tag normalization and Babel bridge
"""

from .diagnostics import (
    InvalidNumberError,
    LanguageNotFoundError,
    LanguageParseError,
    PluralError,
    PluralRuleError,
)
from .enums import PluralCategory, category_set
from .language import Language
from .operands import NumericInput, PluralOperands, extract_operands
from .registry import LanguageRegistry, create_default_registry, get_shared_registry
from .resolver import must_parse_language, parse_language
from .selection import (
    classify,
    get_system_language,
    register_language,
    resolve_language,
    select_plural_category,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("pluralengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidNumberError",
    "Language",
    "LanguageNotFoundError",
    "LanguageParseError",
    "LanguageRegistry",
    "NumericInput",
    "PluralCategory",
    "PluralError",
    "PluralOperands",
    "PluralRuleError",
    "__version__",
    "category_set",
    "classify",
    "create_default_registry",
    "extract_operands",
    "get_shared_registry",
    "get_system_language",
    "must_parse_language",
    "parse_language",
    "register_language",
    "resolve_language",
    "select_plural_category",
]
