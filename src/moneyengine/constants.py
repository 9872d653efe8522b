"""Shared constants for MoneyEngine.

This module provides centralized configuration constants used across
arithmetic, template and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Arithmetic: Decimal context and rounding defaults
- Locale defaults: Fallback locale and currency
- Template syntax: Placeholder tokens and lookup keys
- Cache limits: Memory bounds for memoisation tables

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Arithmetic
    "DECIMAL_CONTEXT_PRECISION",
    "DEFAULT_ROUND_PRECISION",
    "PERCENTAGE_SCALE",
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_CURRENCY",
    "ISO_CURRENCY_CODE_LENGTH",
    # Template syntax
    "TEMPLATE_OPTIONS_DELIMITER",
    "WILDCARD_LOCALE_KEYS",
    "GROUP_SIZE",
    "DIRECTIVE_GROUP_SEPARATOR",
    "DIRECTIVE_DECIMAL_SEPARATOR",
    "DIRECTIVE_FRACTION_DIGITS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "DEFAULT_PATTERN_CACHE_SIZE",
    "DEFAULT_SYMBOL_CACHE_SIZE",
    "DEFAULT_FORMATTER_CACHE_SIZE",
]

# ============================================================================
# ARITHMETIC
# ============================================================================

# Significant digits carried by the private decimal context used for all
# money arithmetic. 34 matches IEEE 754 decimal128 and is far beyond any
# currency-scale value.
DECIMAL_CONTEXT_PRECISION: int = 34

# Decimal places used by Money.round() when no precision is supplied.
DEFAULT_ROUND_PRECISION: int = 2

# Discount rates above 1 are percentages on this scale.
PERCENTAGE_SCALE: int = 100

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Ultimate fallback when no locale is supplied and none can be detected.
DEFAULT_LOCALE: str = "en-US"

# Ultimate fallback when a locale maps to no CLDR tender currency.
DEFAULT_CURRENCY: str = "USD"

# ISO 4217 currency codes are exactly 3 ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

# Separates a directive token's type from its arguments: {fraction|,|2}
TEMPLATE_OPTIONS_DELIMITER: str = "|"

# Locale-map keys consulted after culture, country and language.
WILDCARD_LOCALE_KEYS: tuple[str, ...] = ("*", "default")

# Digits per thousands group.
GROUP_SIZE: int = 3

# Directive defaults: {integer} groups with ".", {fraction} is ",|2".
DIRECTIVE_GROUP_SEPARATOR: str = "."
DIRECTIVE_DECIMAL_SEPARATOR: str = ","
DIRECTIVE_FRACTION_DIGITS: int = 2

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale objects.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Parsed templates, keyed by template text.
DEFAULT_PATTERN_CACHE_SIZE: int = 256

# Resolved currency symbols, keyed by (currency, locale).
DEFAULT_SYMBOL_CACHE_SIZE: int = 512

# Native formatters, keyed by (locale, currency, precision, grouping).
DEFAULT_FORMATTER_CACHE_SIZE: int = 256
