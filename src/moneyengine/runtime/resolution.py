"""Locale resolution: fallback chain, default locale and default currency.

Every locale-keyed option (templates, symbol overrides, zero-trim maps)
is resolved through the same chain:

    culture ("tr-TR") -> country ("TR") -> language ("tr") -> "*" -> "default"

Python 3.13+. Uses Babel for CLDR currency data.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping

from moneyengine.constants import DEFAULT_CURRENCY, ISO_CURRENCY_CODE_LENGTH, MAX_LOCALE_CACHE_SIZE
from moneyengine.diagnostics import ErrorTemplate, InvalidValueError
from moneyengine.locale_utils import (
    LocaleParts,
    get_system_locale,
    likely_territory,
    to_language_tag,
)

__all__ = [
    "FlagOption",
    "LocaleProvider",
    "currency_digits",
    "get_default_currency",
    "get_territory_currency",
    "normalize_currency",
    "normalize_locale_tag",
    "resolve_flag",
    "resolve_for_locale",
]

type LocaleProvider = Callable[[], str]
"""Zero-argument callable returning the default locale tag."""

type FlagOption = bool | Mapping[str, bool] | None
"""Boolean option given globally or per locale key."""


def resolve_for_locale[T](mapping: Mapping[str, T] | None, parts: LocaleParts) -> T | None:
    """Look up a locale-keyed value through the fallback chain.

    Args:
        mapping: Locale key -> value, or None
        parts: Parsed locale

    Returns:
        Value for the most specific key present, or None

    Example:
        >>> from moneyengine.locale_utils import parse_locale
        >>> templates = {"TR": "T2", "*": "T3"}
        >>> resolve_for_locale(templates, parse_locale("tr-TR"))
        'T2'
    """
    if not mapping:
        return None
    for key in parts.lookup_keys:
        if key in mapping:
            return mapping[key]
    return None


def resolve_flag(flag: FlagOption, parts: LocaleParts) -> bool:
    """Resolve a boolean option that may be given per locale key."""
    if flag is None or isinstance(flag, bool):
        return bool(flag)
    return bool(resolve_for_locale(flag, parts))


def normalize_locale_tag(locale: str | None, default_locale: LocaleProvider | None = None) -> str:
    """Return the requested locale, or the provider's locale when none is given.

    Args:
        locale: Requested locale, or None/"" for the default
        default_locale: Provider consulted only when locale is missing
            (default: get_system_locale)

    Returns:
        Locale as a BCP-47 style tag
    """
    if locale:
        return to_language_tag(locale.strip())
    provider = default_locale if default_locale is not None else get_system_locale
    return to_language_tag(provider())


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_territory_currency(territory: str) -> str | None:
    """First active legal-tender currency of a territory ("TR" -> "TRY").

    Thread-safe. Result cached per territory code.
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.core import get_global  # noqa: PLC0415

    # Data format: list of (code, start_date, end_date, tender)
    # end_date=None means still active; tender=True means legal tender
    currencies_info = get_global("territory_currencies").get(territory.upper(), [])
    active = [c[0] for c in currencies_info if c[2] is None and c[3]]
    return active[0] if active else None


def get_default_currency(parts: LocaleParts) -> str:
    """Default currency for a locale.

    The locale's own country is used, else the language's likely territory
    ("fr" -> "FR"); locales with neither map to USD.

    Examples:
        >>> from moneyengine.locale_utils import parse_locale
        >>> get_default_currency(parse_locale("tr-TR"))
        'TRY'
        >>> get_default_currency(parse_locale("de"))
        'EUR'
    """
    territory = parts.country or likely_territory(parts.language)
    if territory:
        currency = get_territory_currency(territory)
        if currency:
            return currency
    return DEFAULT_CURRENCY


def normalize_currency(currency: str | None, parts: LocaleParts) -> str:
    """Upper-case an explicit currency code, or default it from the locale.

    Raises:
        InvalidValueError: If an explicit code is not three ASCII letters
    """
    if currency is None or currency == "":
        return get_default_currency(parts)
    if not isinstance(currency, str):
        raise InvalidValueError(ErrorTemplate.invalid_currency_code(currency), value=currency)
    code = currency.strip().upper()
    if len(code) != ISO_CURRENCY_CODE_LENGTH or not (code.isascii() and code.isalpha()):
        raise InvalidValueError(ErrorTemplate.invalid_currency_code(currency), value=currency)
    return code


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def currency_digits(currency: str) -> int:
    """CLDR default fraction digits of a currency (USD 2, JPY 0, BHD 3)."""
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.numbers import get_currency_precision  # noqa: PLC0415

    return get_currency_precision(currency)
