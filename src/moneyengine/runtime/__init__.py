"""Runtime formatting: options, locale resolution, caches, native and template paths.

Python 3.13+.
"""

from .cache import FormatterCache, MemoTable
from .cache_config import CacheConfig
from .formatter import MoneyFormatter, default_formatter
from .locale_context import LocaleContext, NativeCurrencyFormatter
from .options import FormatOptions
from .resolution import (
    FlagOption,
    LocaleProvider,
    currency_digits,
    get_default_currency,
    get_territory_currency,
    normalize_currency,
    normalize_locale_tag,
    resolve_flag,
    resolve_for_locale,
)

__all__ = [
    "CacheConfig",
    "FlagOption",
    "FormatOptions",
    "FormatterCache",
    "LocaleContext",
    "LocaleProvider",
    "MemoTable",
    "MoneyFormatter",
    "NativeCurrencyFormatter",
    "currency_digits",
    "default_formatter",
    "get_default_currency",
    "get_territory_currency",
    "normalize_currency",
    "normalize_locale_tag",
    "resolve_flag",
    "resolve_for_locale",
]
