"""Locale context and native (Babel) currency formatting.

Used by the formatter when no template matches a locale: amounts are laid
out with the locale's CLDR standard currency pattern, then split back into
typed parts so zero trimming and symbol overrides work the same way as on
the template path.

Architecture:
    - LocaleContext: Immutable locale container, falls back to en_US for
      locales Babel does not know
    - NativeCurrencyFormatter: Immutable formatter for one
      (locale, currency, precision, grouping) combination; memoised by
      FormatterCache
    - No dependency on Python's locale module (avoids global state)

Python 3.13+. Uses Babel for i18n.
"""

import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from moneyengine.enums import PartType
from moneyengine.locale_utils import get_babel_locale
from moneyengine.parts import FormatPart
from moneyengine.template.renderer import literal_parts

__all__ = ["LocaleContext", "NativeCurrencyFormatter"]

logger = logging.getLogger(__name__)

_FALLBACK_LOCALE = "en_US"

# Number portion of a CLDR pattern: "#,##0.00", "#,##,##0.00"
_PATTERN_NUMBER = re.compile(r"[#0-9,.@]+")

_MINUS_SIGNS = ("-", "\u2212")


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for native currency formatting.

    Use LocaleContext.create() to construct instances.

    Examples:
        >>> ctx = LocaleContext.create("tr_TR")
        >>> ctx.decimal_symbol
        ','
        >>> LocaleContext.create("xx_UNKNOWN").is_fallback
        True
    """

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for unknown locales.

        For unknown or invalid locales, logs a warning and falls back to
        en_US while preserving the original locale_code for debugging.

        Args:
            locale_code: Locale identifier (BCP-47 or POSIX)

        Returns:
            LocaleContext instance
        """
        try:
            return cls(locale_code=locale_code, _babel_locale=get_babel_locale(locale_code))
        except UnknownLocaleError as e:
            logger.warning("Unknown locale '%s': %s. Falling back to en_US", locale_code, e)
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to en_US", locale_code, e
            )
        return cls(
            locale_code=locale_code,
            _babel_locale=get_babel_locale(_FALLBACK_LOCALE),
            is_fallback=True,
        )

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale object (validated during construction)."""
        return self._babel_locale

    @property
    def decimal_symbol(self) -> str:
        """Locale decimal separator."""
        return babel_numbers.get_decimal_symbol(self.babel_locale)

    @property
    def group_symbol(self) -> str:
        """Locale thousands separator."""
        return babel_numbers.get_group_symbol(self.babel_locale)

    @property
    def minus_sign(self) -> str:
        """Locale minus sign."""
        return babel_numbers.get_minus_sign_symbol(self.babel_locale)

    def currency_symbol(self, currency: str) -> str:
        """Locale symbol for an ISO 4217 code ("USD" -> "$" in en_US).

        Babel returns the code itself for currencies it has no symbol for.
        """
        return babel_numbers.get_currency_symbol(currency, locale=self.babel_locale)

    def currency_pattern(self, precision: int, *, use_grouping: bool = True) -> str:
        """Locale standard currency pattern with a fixed fraction length.

        Example:
            >>> LocaleContext.create("en_US").currency_pattern(0, use_grouping=False)
            '¤0'
        """
        standard = self.babel_locale.currency_formats.get("standard")
        raw_pattern = standard.pattern if standard is not None else "¤#,##0.00"
        fraction = "." + "0" * precision if precision > 0 else ""

        def replace(match: re.Match[str]) -> str:
            integer = match.group(0).split(".")[0]
            return (integer if use_grouping else "0") + fraction

        return ";".join(
            _PATTERN_NUMBER.sub(replace, subpattern, count=1)
            for subpattern in raw_pattern.split(";")
        )


@dataclass(frozen=True, slots=True)
class NativeCurrencyFormatter:
    """Babel currency formatter for one locale, currency, precision and grouping.

    Attributes:
        context: Locale context
        currency: ISO 4217 code
        precision: Exact number of fraction digits rendered
        use_grouping: Whether thousands are grouped
        pattern: CLDR pattern derived from the above
    """

    context: LocaleContext
    currency: str
    precision: int
    use_grouping: bool = True
    pattern: str = field(init=False)

    def __post_init__(self) -> None:
        pattern = self.context.currency_pattern(self.precision, use_grouping=self.use_grouping)
        # Frozen dataclass: derived field set once at construction
        object.__setattr__(self, "pattern", pattern)
        logger.debug(
            "Native formatter for %s/%s: pattern %r",
            self.context.locale_code,
            self.currency,
            pattern,
        )

    @classmethod
    def create(
        cls,
        locale_code: str,
        currency: str,
        precision: int,
        *,
        use_grouping: bool = True,
    ) -> "NativeCurrencyFormatter":
        """Create a formatter, falling back to en_US for unknown locales."""
        return cls(LocaleContext.create(locale_code), currency, precision, use_grouping)

    @property
    def symbol(self) -> str:
        """Currency symbol Babel renders for this locale."""
        return self.context.currency_symbol(self.currency)

    def format(self, value: Decimal) -> str:
        """Format an amount already rounded to ``precision`` places.

        Examples:
            >>> NativeCurrencyFormatter.create("en_US", "USD", 2).format(Decimal("1000.5"))
            '$1,000.50'
            >>> NativeCurrencyFormatter.create("en_US", "USD", 0).format(Decimal("1000"))
            '$1,000'
        """
        return str(
            babel_numbers.format_currency(
                value,
                self.currency,
                format=self.pattern,
                locale=self.context.babel_locale,
                currency_digits=False,
            )
        )

    def format_to_parts(
        self, value: Decimal, symbol: str | None = None
    ) -> tuple[FormatPart, ...]:
        """Format an amount and split the result into typed parts.

        Args:
            value: Amount already rounded to ``precision`` places
            symbol: Replacement text for the currency part (symbol override)

        Returns:
            Parts in render order
        """
        return self._tokenize(self.format(value), symbol)

    def _tokenize(  # noqa: PLR0912 - one branch per part type
        self, text: str, symbol: str | None
    ) -> tuple[FormatPart, ...]:
        ctx = self.context
        currency_symbol = self.symbol
        decimal_symbol = ctx.decimal_symbol
        group_symbol = ctx.group_symbol
        minus_signs = (ctx.minus_sign, *_MINUS_SIGNS)

        parts: list[FormatPart] = []
        literal: list[str] = []
        seen_digit = False
        seen_decimal = False

        def flush() -> None:
            if literal:
                parts.extend(literal_parts("".join(literal)))
                literal.clear()

        def digit_at(index: int) -> bool:
            return 0 <= index < len(text) and text[index].isdigit()

        i = 0
        while i < len(text):
            char = text[i]
            if currency_symbol and text.startswith(currency_symbol, i):
                flush()
                parts.append(FormatPart(PartType.CURRENCY, symbol or currency_symbol))
                i += len(currency_symbol)
                continue
            if char.isdigit():
                flush()
                part_type = PartType.FRACTION if seen_decimal else PartType.INTEGER
                parts.append(FormatPart(part_type, char))
                seen_digit = True
                i += 1
                continue
            sign = next((m for m in minus_signs if m and text.startswith(m, i)), None)
            if sign is not None and not seen_digit:
                flush()
                parts.append(FormatPart(PartType.MINUS_SIGN, sign))
                i += len(sign)
                continue
            if (
                not seen_decimal
                and seen_digit
                and text.startswith(decimal_symbol, i)
                and digit_at(i + len(decimal_symbol))
            ):
                flush()
                parts.append(FormatPart(PartType.DECIMAL, decimal_symbol))
                seen_decimal = True
                i += len(decimal_symbol)
                continue
            if (
                not seen_decimal
                and digit_at(i - 1)
                and text.startswith(group_symbol, i)
                and digit_at(i + len(group_symbol))
            ):
                flush()
                parts.append(FormatPart(PartType.GROUP, group_symbol))
                i += len(group_symbol)
                continue
            literal.append(char)
            i += 1

        flush()
        return tuple(parts)
