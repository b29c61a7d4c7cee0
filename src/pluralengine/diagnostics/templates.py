"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from pluralengine.constants import CLDR_PLURAL_RULES_URL

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    _OPERANDS_URL = "https://unicode.org/reports/tr35/tr35-numbers.html#Operands"
    _BCP47_URL = "https://www.rfc-editor.org/rfc/rfc5646"

    @staticmethod
    def number_malformed(value: str) -> Diagnostic:
        """Numeric string does not match the decimal grammar.

        Args:
            value: The rejected input

        Returns:
            Diagnostic for NUMBER_MALFORMED
        """
        msg = f"Invalid number {value!r}"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_MALFORMED,
            message=msg,
            hint="Use ASCII digits, an optional sign, at most one decimal point "
            "and an optional exponent",
            help_url=ErrorTemplate._OPERANDS_URL,
        )

    @staticmethod
    def number_unsupported_type(value: object) -> Diagnostic:
        """Input is not an int, float, Decimal or str.

        Args:
            value: The rejected input

        Returns:
            Diagnostic for NUMBER_UNSUPPORTED_TYPE
        """
        msg = f"Unsupported numeric type {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_UNSUPPORTED_TYPE,
            message=msg,
            hint="Pass an int, float, decimal.Decimal or decimal string",
        )

    @staticmethod
    def number_not_finite(value: object) -> Diagnostic:
        """NaN or infinity has no plural operands.

        Args:
            value: The rejected input

        Returns:
            Diagnostic for NUMBER_NOT_FINITE
        """
        msg = f"Number {value!r} is not finite"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_NOT_FINITE,
            message=msg,
            help_url=ErrorTemplate._OPERANDS_URL,
        )

    @staticmethod
    def number_too_long(length: int, limit: int) -> Diagnostic:
        """Input or its positional expansion exceeds the digit limit.

        Args:
            length: Observed length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for NUMBER_TOO_LONG
        """
        msg = f"Number has {length} characters, limit is {limit}"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_TOO_LONG,
            message=msg,
            hint="Plural selection only needs the displayed digits of the quantity",
        )

    @staticmethod
    def language_not_found(identifier: str) -> Diagnostic:
        """No registered language matches the identifier or its ancestors.

        Args:
            identifier: The identifier as supplied by the caller

        Returns:
            Diagnostic for LANGUAGE_NOT_FOUND
        """
        msg = f"Language {identifier!r} is not registered"
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_NOT_FOUND,
            message=msg,
            hint="Register a Language for it or one of its parent tags",
            help_url=ErrorTemplate._BCP47_URL,
        )

    @staticmethod
    def language_parse_failed(text: str) -> Diagnostic:
        """Strict tag resolution found no registered language.

        Args:
            text: The composite string that was scanned

        Returns:
            Diagnostic for LANGUAGE_PARSE_FAILED
        """
        msg = f"Unable to parse language from {text!r}"
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_PARSE_FAILED,
            message=msg,
            hint="Check the configured language tag against the registry",
            help_url=ErrorTemplate._BCP47_URL,
        )

    @staticmethod
    def language_unknown_to_cldr(identifier: str, reason: str) -> Diagnostic:
        """Babel has no CLDR data for the identifier.

        Args:
            identifier: Requested language identifier
            reason: Message of the underlying Babel error

        Returns:
            Diagnostic for LANGUAGE_UNKNOWN_TO_CLDR
        """
        msg = f"No CLDR plural rules for {identifier!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_UNKNOWN_TO_CLDR,
            message=msg,
            help_url=CLDR_PLURAL_RULES_URL,
        )

    @staticmethod
    def rule_undeclared_category(
        identifier: str, category: str, declared: frozenset[str]
    ) -> Diagnostic:
        """Rule function returned a category the language does not declare.

        Args:
            identifier: Language identifier
            category: The offending category
            declared: The language's declared categories

        Returns:
            Diagnostic for RULE_UNDECLARED_CATEGORY
        """
        allowed = ", ".join(sorted(declared))
        msg = (
            f"Plural rule for {identifier!r} returned {category!r}, "
            f"declared categories are: {allowed}"
        )
        return Diagnostic(
            code=DiagnosticCode.RULE_UNDECLARED_CATEGORY,
            message=msg,
            hint="Add the category to the Language definition or fix the rule",
            help_url=CLDR_PLURAL_RULES_URL,
        )
