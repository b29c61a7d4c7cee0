"""CLDR plural operand extraction.

Converts a numeric input of unknown concrete representation into the six
CLDR operands that plural rules are defined over:

    n  absolute value of the source number
    i  integer digits of n
    v  number of visible fraction digits, with trailing zeros
    w  number of visible fraction digits, without trailing zeros
    f  visible fraction digits, with trailing zeros, as an integer
    t  visible fraction digits, without trailing zeros, as an integer

Operands describe the *displayed* decimal form, so "2.50" and "2.5" differ
(v=2 vs v=1) even though they are the same quantity. Strings and Decimals
carry their displayed precision; floats cannot, and are read through their
shortest round-trip representation with fractional trailing zeros dropped
(2.0 behaves like 2). Pass a string or Decimal when trailing zeros matter.

Every input tag has its own normalization path into a positional decimal
string (to_decimal_string); operands are then read off that string with
integer arithmetic only.

Reference: https://unicode.org/reports/tr35/tr35-numbers.html#Operands

Python 3.11+.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias

from pluralengine.constants import MAX_EXPANDED_DIGITS, MAX_NUMBER_LENGTH
from pluralengine.diagnostics import ErrorTemplate, InvalidNumberError

__all__ = [
    "NumericInput",
    "PluralOperands",
    "extract_operands",
    "split_decimal",
    "to_decimal_string",
]

NumericInput: TypeAlias = int | float | Decimal | str
"""Values accepted by extract_operands(). bool is rejected despite being an int."""

# Optional sign, digits with at most one decimal point, optional exponent.
# ASCII digits only: str.isdigit() and \d also accept other Unicode digits.
_DECIMAL_STRING = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

# Positional form produced by to_decimal_string(): no exponent.
_POSITIONAL_STRING = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


@dataclass(frozen=True, slots=True)
class PluralOperands:
    """Immutable CLDR operand set for one quantity.

    Attributes:
        n: Absolute value, exact. Keeps the displayed exponent, so the
            operands of "2.50" have n == Decimal("2.50").
        i: Integer digits of n
        v: Visible fraction digit count, with trailing zeros
        w: Visible fraction digit count, without trailing zeros
        f: Visible fraction digits, with trailing zeros
        t: Visible fraction digits, without trailing zeros

    Example:
        >>> extract_operands("2.50")
        PluralOperands(n=Decimal('2.50'), i=2, v=2, w=1, f=50, t=5)
    """

    n: Decimal
    i: int
    v: int
    w: int
    f: int
    t: int

    def __post_init__(self) -> None:
        """Validate operand invariants.

        Raises:
            ValueError: If an operand is negative, w exceeds v, or f/t have
                more digits than v/w allow.
        """
        if self.n < 0 or min(self.i, self.v, self.w, self.f, self.t) < 0:
            msg = f"Plural operands must be non-negative: {self!r}"
            raise ValueError(msg)
        if self.w > self.v:
            msg = f"w ({self.w}) must not exceed v ({self.v})"
            raise ValueError(msg)
        if self.f >= 10**self.v or self.t >= 10**self.w:
            msg = f"Fraction digits exceed their visible digit counts: {self!r}"
            raise ValueError(msg)

    @property
    def is_integral(self) -> bool:
        """True when n has no non-zero fraction digit, i.e. n == i."""
        return self.w == 0


def to_decimal_string(number: NumericInput) -> str:
    """Normalize numeric input to a positional decimal string.

    Exponential notation is expanded; the sign is kept. Strings and
    Decimals keep their displayed trailing zeros, floats do not.

    Args:
        number: int, float, Decimal or decimal-formatted string

    Returns:
        Positional decimal string, e.g. "-15.0" or "0.00001"

    Raises:
        InvalidNumberError: For malformed strings, unsupported types,
            NaN/infinity and input beyond the configured size limits

    Example:
        >>> to_decimal_string("1.50e1")
        '15.0'
        >>> to_decimal_string(2.0)
        '2'
        >>> to_decimal_string(Decimal("1.5E+3"))
        '1500'
    """
    match number:
        case bool():
            raise InvalidNumberError(
                ErrorTemplate.number_unsupported_type(number), input_value=repr(number)
            )
        case int():
            return _int_to_decimal_string(number)
        case float():
            return _float_to_decimal_string(number)
        case Decimal():
            return _expand(number, repr(number))
        case str():
            return _string_to_decimal_string(number)
        case _:
            raise InvalidNumberError(
                ErrorTemplate.number_unsupported_type(number), input_value=repr(number)
            )


def split_decimal(text: str) -> tuple[str, str]:
    """Split a positional decimal string into integer and fraction digits.

    The sign is discarded. Either part may be empty (".5", "12.").

    Args:
        text: Positional decimal string without exponent

    Returns:
        Tuple of (integer_digits, fraction_digits)

    Raises:
        InvalidNumberError: If text is not a positional decimal string

    Example:
        >>> split_decimal("-12.500")
        ('12', '500')
        >>> split_decimal("7")
        ('7', '')
    """
    if _POSITIONAL_STRING.fullmatch(text) is None:
        raise InvalidNumberError(ErrorTemplate.number_malformed(text), input_value=repr(text))
    integer_digits, _, fraction_digits = text.lstrip("-").partition(".")
    return integer_digits, fraction_digits


def extract_operands(number: NumericInput) -> PluralOperands:
    """Derive the CLDR plural operands of a number.

    Args:
        number: int, float, Decimal or decimal-formatted string

    Returns:
        PluralOperands for the displayed decimal form of number

    Raises:
        InvalidNumberError: If number cannot be parsed

    Examples:
        >>> extract_operands(1) == extract_operands("1")
        True
        >>> ops = extract_operands("-1.230")
        >>> (ops.i, ops.v, ops.w, ops.f, ops.t)
        (1, 3, 2, 230, 23)
        >>> extract_operands("1e3").v
        0
    """
    positional = to_decimal_string(number)
    integer_digits, fraction_digits = split_decimal(positional)
    significant_fraction = fraction_digits.rstrip("0")

    return PluralOperands(
        # Decimal() construction is exact; abs() would round to context precision
        n=Decimal(positional.lstrip("-")),
        i=int(integer_digits or "0"),
        v=len(fraction_digits),
        w=len(significant_fraction),
        f=int(fraction_digits or "0"),
        t=int(significant_fraction or "0"),
    )


def _int_to_decimal_string(value: int) -> str:
    # bit_length check first: str() itself refuses ints over 4300 digits
    if value.bit_length() > 4 * MAX_EXPANDED_DIGITS:
        raise InvalidNumberError(
            ErrorTemplate.number_too_long(value.bit_length(), 4 * MAX_EXPANDED_DIGITS),
            input_value="<int>",
        )
    text = str(value)
    digits = len(text.lstrip("-"))
    if digits > MAX_EXPANDED_DIGITS:
        raise InvalidNumberError(
            ErrorTemplate.number_too_long(digits, MAX_EXPANDED_DIGITS), input_value=text[:32]
        )
    return text


def _float_to_decimal_string(value: float) -> str:
    """Shortest round-trip positional form of a float, no fractional trailing zeros."""
    if not math.isfinite(value):
        raise InvalidNumberError(ErrorTemplate.number_not_finite(value), input_value=repr(value))
    positional = _expand(Decimal(repr(value)), repr(value))
    if "." in positional:
        positional = positional.rstrip("0").rstrip(".")
    return positional


def _string_to_decimal_string(text: str) -> str:
    if len(text) > MAX_NUMBER_LENGTH:
        raise InvalidNumberError(
            ErrorTemplate.number_too_long(len(text), MAX_NUMBER_LENGTH),
            input_value=repr(text[:32]),
        )
    # Decimal() alone would also accept "NaN", "Infinity", "1_000" and padding
    if _DECIMAL_STRING.fullmatch(text) is None:
        raise InvalidNumberError(ErrorTemplate.number_malformed(text), input_value=repr(text))
    return _expand(Decimal(text), repr(text))


def _expand(value: Decimal, source: str) -> str:
    """Positional form of a finite Decimal, keeping its exponent's precision."""
    if not value.is_finite():
        raise InvalidNumberError(ErrorTemplate.number_not_finite(value), input_value=source)

    digits = value.as_tuple().digits
    exponent = int(value.as_tuple().exponent)
    if exponent >= 0:
        width = len(digits) + exponent
    else:
        width = max(len(digits), -exponent) + 1
    if width > MAX_EXPANDED_DIGITS:
        raise InvalidNumberError(
            ErrorTemplate.number_too_long(width, MAX_EXPANDED_DIGITS), input_value=source
        )
    return format(value, "f")
