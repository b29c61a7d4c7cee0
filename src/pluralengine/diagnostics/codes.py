"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
pluralengine exception.

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Numeric input errors (operand extraction)
        2000-2999: Language resolution errors (registry, tag parsing)
        3000-3999: Rule evaluation errors (custom language definitions)
    """

    # Numeric input errors (1000-1999)
    NUMBER_MALFORMED = 1001
    NUMBER_UNSUPPORTED_TYPE = 1002
    NUMBER_NOT_FINITE = 1003
    NUMBER_TOO_LONG = 1004

    # Language resolution errors (2000-2999)
    LANGUAGE_NOT_FOUND = 2001
    LANGUAGE_PARSE_FAILED = 2002
    LANGUAGE_UNKNOWN_TO_CLDR = 2003

    # Rule evaluation errors (3000-3999)
    RULE_UNDECLARED_CATEGORY = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler does.

        Example output:
            error[NUMBER_MALFORMED]: Invalid number '12.3.4'
              = help: Use digits with at most one decimal point
              = note: see https://unicode.org/reports/tr35/tr35-numbers.html#Operands

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        if self.help_url:
            lines.append(f"  = note: see {self.help_url}")
        return "\n".join(lines)
