"""MoneyEngine - exact, locale-aware money arithmetic and formatting.

Money values are immutable and backed by Decimal. Formatting is driven by
a small template language with a Babel (CLDR) fallback for locales that
have no template.

Public API:
    Money - Immutable monetary amount
    money - Create an unbound Money
    create_money - Factory producing Money bound to options and a formatter
    MoneyFormatter - Locale-aware formatter with injected options and caches
    FormatOptions - Formatting options (locale, currency, templates, ...)
    FormatPart / FormatComponents - Structured formatter output
    parse_template - Parse a template string into a TemplatePattern
    parse_money - Parse a formatted amount back into Money

Exceptions:
    MoneyError - Base exception class
    InvalidValueError - Unparsable amount or currency code
    InvalidLocaleError - Malformed locale tag
    InvalidTemplateError - Malformed template
    DivisionByZeroError - Divisor is zero
    InvalidRangeError - Discount rate or precision out of range
    MoneyParseError - Formatted amount could not be parsed

Submodules:
    moneyengine.core - Decimal arithmetic adapter
    moneyengine.template - Template parser and renderer
    moneyengine.runtime - Formatter, locale resolution, caches
    moneyengine.parsing - Formatted string -> Money
    moneyengine.diagnostics - Error types and diagnostic codes
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    DivisionByZeroError,
    InvalidLocaleError,
    InvalidRangeError,
    InvalidTemplateError,
    InvalidValueError,
    MoneyError,
    MoneyParseError,
)
from .enums import ComparisonResult, PartType, RoundStrategy, SymbolPosition
from .money import Money, MoneyInput, create_money, money
from .parsing import parse_money
from .parts import FormatComponents, FormatPart
from .runtime import CacheConfig, FormatOptions, FormatterCache, MoneyFormatter
from .template import TemplatePattern, parse_template

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("moneyengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CacheConfig",
    "ComparisonResult",
    "DivisionByZeroError",
    "FormatComponents",
    "FormatOptions",
    "FormatPart",
    "FormatterCache",
    "InvalidLocaleError",
    "InvalidRangeError",
    "InvalidTemplateError",
    "InvalidValueError",
    "Money",
    "MoneyError",
    "MoneyFormatter",
    "MoneyInput",
    "MoneyParseError",
    "PartType",
    "RoundStrategy",
    "SymbolPosition",
    "TemplatePattern",
    "__version__",
    "create_money",
    "money",
    "parse_money",
    "parse_template",
]
