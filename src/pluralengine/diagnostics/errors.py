"""pluralengine exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic for rich error information.
Failures are always raised to the caller; nothing here falls back to a
default category or language.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InvalidNumberError",
    "LanguageNotFoundError",
    "LanguageParseError",
    "PluralError",
    "PluralRuleError",
]


class PluralError(Exception):
    """Base exception for all pluralengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PluralError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidNumberError(PluralError, ValueError):
    """Numeric input cannot be turned into plural operands.

    Raised for malformed strings ("12.3.4", "", "abc"), unsupported types,
    NaN/infinity and oversized input.

    Attributes:
        input_value: repr of the rejected input
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize InvalidNumberError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: repr of the rejected input
        """
        super().__init__(message)
        self.input_value = input_value


class LanguageNotFoundError(PluralError, LookupError):
    """No registered language matches an identifier or any of its prefixes.

    Lookup-style calls return None instead of raising; this is raised by
    calls that must produce a category.

    Attributes:
        identifier: The identifier as supplied by the caller
    """

    def __init__(self, message: str | Diagnostic, *, identifier: str = "") -> None:
        """Initialize LanguageNotFoundError.

        Args:
            message: Error message string OR Diagnostic object
            identifier: The identifier as supplied by the caller
        """
        super().__init__(message)
        self.identifier = identifier


class LanguageParseError(PluralError):
    """Strict tag resolution failed.

    Used where a missing language is unrecoverable, e.g. a language fixed
    in startup configuration.

    Attributes:
        input_value: The composite string that was scanned
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize LanguageParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The composite string that was scanned
        """
        super().__init__(message)
        self.input_value = input_value


class PluralRuleError(PluralError):
    """A rule function returned a category outside its declared set."""
