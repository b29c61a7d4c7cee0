"""Diagnostic system for pluralengine errors.

Provides structured error diagnostics with codes, hints, and help URLs.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidNumberError,
    LanguageNotFoundError,
    LanguageParseError,
    PluralError,
    PluralRuleError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InvalidNumberError",
    "LanguageNotFoundError",
    "LanguageParseError",
    "PluralError",
    "PluralRuleError",
]
