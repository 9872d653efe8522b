"""Money parsing: formatted amount string -> Money.

- parse_money() returns tuple[Money | None, tuple[MoneyParseError, ...]]
- Parse errors returned in tuple, never raised for bad input
- Money.parse() is the raising convenience wrapper

With a template, the template's separators drive parsing. Without one,
the locale's CLDR decimal and group symbols are used through Babel's
parse_decimal.

Thread-safe. Uses Babel for CLDR-compliant parsing.

Python 3.13+.
"""

import re
from decimal import Decimal, InvalidOperation

from babel import UnknownLocaleError
from babel import numbers as babel_numbers

from moneyengine.diagnostics import (
    ErrorTemplate,
    InvalidLocaleError,
    InvalidTemplateError,
    MoneyParseError,
)
from moneyengine.locale_utils import get_babel_locale, parse_locale
from moneyengine.money import Money
from moneyengine.runtime.resolution import LocaleProvider, normalize_locale_tag
from moneyengine.template import TemplatePattern, parse_template

__all__ = ["parse_money"]

_MINUS_SIGNS = ("-", "\u2212")
_SPACE_SEPARATORS = " \u00a0\u202f"


def _failure(
    text: str, locale_code: str, reason: str
) -> tuple[None, tuple[MoneyParseError, ...]]:
    diagnostic = ErrorTemplate.parse_amount_failed(text, locale_code, reason)
    return (None, (MoneyParseError(diagnostic, input_value=text, locale_code=locale_code),))


def _numeric_run(text: str, group: str, decimal: str) -> re.Match[str] | None:
    separators = group + decimal
    if group.isspace():
        separators += _SPACE_SEPARATORS
    return re.search(rf"\d(?:[\d{re.escape(separators)}]*\d)?", text)


def _is_negative(text: str, run: re.Match[str]) -> bool:
    head = text[: run.start()]
    return any(sign in head for sign in _MINUS_SIGNS) or "(" in head


def _parse_with_pattern(text: str, pattern: TemplatePattern) -> Decimal | None:
    if pattern.custom_symbol:
        text = text.replace(pattern.custom_symbol, " " * len(pattern.custom_symbol))
    run = _numeric_run(text, pattern.thousands_separator, pattern.decimal_separator)
    if run is None:
        return None

    number = run.group(0)
    if pattern.decimal_separator in number:
        integer, _, fraction = number.rpartition(pattern.decimal_separator)
    else:
        integer, fraction = number, ""
    digits = "".join(char for char in integer if char.isdigit())
    if fraction:
        digits += "." + "".join(char for char in fraction if char.isdigit())

    value = Decimal(digits)
    return value.copy_negate() if _is_negative(text, run) else value


def parse_money(
    text: str,
    locale: str | None = None,
    *,
    template: str | None = None,
    default_locale: LocaleProvider | None = None,
) -> tuple[Money | None, tuple[MoneyParseError, ...]]:
    """Parse a formatted amount into Money.

    Args:
        text: Formatted amount ("$1,234.56", "1.234,56 €", "₺ 1.234,56")
        locale: Locale the text was formatted in (default: provider's locale)
        template: Template the text was formatted with, if any
        default_locale: Provider consulted when locale is None

    Returns:
        Tuple of (result, errors):
        - result: Parsed Money, or None if parsing failed
        - errors: Tuple of MoneyParseError (empty tuple on success)

    Examples:
        >>> result, errors = parse_money("$1,234.56", "en-US")
        >>> result
        Money('1234.56')
        >>> errors
        ()

        >>> result, errors = parse_money("1.234,56 €", "de-DE")
        >>> result
        Money('1234.56')

        >>> result, errors = parse_money("₺ 1.234,56", "tr-TR", template="{Symbol} 1.234,56")
        >>> result
        Money('1234.56')

        >>> result, errors = parse_money("invalid", "en-US")
        >>> result is None, len(errors)
        (True, 1)
    """
    if not isinstance(text, str) or not text.strip():
        return _failure(str(text), str(locale), "Empty input")

    try:
        locale_code = normalize_locale_tag(locale, default_locale)
        locale_parts = parse_locale(locale_code)
    except InvalidLocaleError:
        diagnostic = ErrorTemplate.parse_locale_unknown(str(locale))
        return (None, (MoneyParseError(diagnostic, input_value=text, locale_code=str(locale)),))

    if template is not None:
        try:
            pattern = parse_template(template)
        except InvalidTemplateError as e:
            return _failure(text, locale_code, str(e))
        value = _parse_with_pattern(text, pattern)
        if value is None:
            return _failure(text, locale_code, "No digits found")
        return (Money(value), ())

    try:
        babel_locale = get_babel_locale(locale_parts.babel_identifier)
    except (UnknownLocaleError, ValueError):
        diagnostic = ErrorTemplate.parse_locale_unknown(locale_code)
        return (None, (MoneyParseError(diagnostic, input_value=text, locale_code=locale_code),))

    group = babel_numbers.get_group_symbol(babel_locale)
    decimal = babel_numbers.get_decimal_symbol(babel_locale)
    run = _numeric_run(text, group, decimal)
    if run is None:
        return _failure(text, locale_code, "No digits found")

    number = run.group(0)
    if group.isspace():
        number = re.sub(f"[{_SPACE_SEPARATORS}]", group, number)
    try:
        value = babel_numbers.parse_decimal(number, locale=babel_locale)
    except (babel_numbers.NumberFormatError, InvalidOperation, ValueError) as e:
        return _failure(text, locale_code, str(e))

    if _is_negative(text, run):
        value = value.copy_negate()
    return (Money(value), ())
