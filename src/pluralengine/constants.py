"""Shared constants for pluralengine.

Single source of truth for input limits and cache sizes used by the
operand extractor, the locale utilities and the registry.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints on numeric input
- Cache limits: Memory bounds for Babel locale caching
- CLDR data: Version the built-in rule table was ported from

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_NUMBER_LENGTH",
    "MAX_EXPANDED_DIGITS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # CLDR data
    "CLDR_VERSION",
    "CLDR_PLURAL_RULES_URL",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Longest numeric string accepted by the operand extractor.
# Longer input is rejected before any Decimal construction happens.
MAX_NUMBER_LENGTH: int = 1000

# Upper bound on digits produced by expanding exponential notation.
# "1e999999999" is a short string with an enormous positional form.
MAX_EXPANDED_DIGITS: int = 1000

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Parsed Babel Locale objects kept by get_babel_locale().
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# CLDR DATA
# ============================================================================

CLDR_VERSION: str = "47"
CLDR_PLURAL_RULES_URL: str = (
    "https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html"
)
