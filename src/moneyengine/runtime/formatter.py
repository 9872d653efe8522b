"""Formatter orchestration.

MoneyFormatter composes locale resolution, the template parser/renderer
and the native Babel formatter into one contract:

    1. Merge per-call options over the formatter's bound options
    2. Resolve locale (injected default provider) and currency
    3. Look up a template through the locale fallback chain
    4. Template found: parse (memoised), round, render
       No template: round, format natively with Babel (memoised formatter)
    5. Apply zero trimming to the parts

Both paths produce FormatPart tuples; format() joins them, so the string
and the parts always agree.

Thread Safety:
    MoneyFormatter holds no mutable state besides its FormatterCache, which
    is thread-safe. One formatter may be shared across threads.

Python 3.13+.
"""

import functools
import logging
from decimal import Decimal

from moneyengine.core import NumericInput, round_decimal, to_decimal
from moneyengine.enums import RoundStrategy
from moneyengine.locale_utils import LocaleParts, get_system_locale, parse_locale
from moneyengine.parts import (
    FormatComponents,
    FormatPart,
    components_from_parts,
    join_parts,
    trim_double_zeros,
    trim_padding_zeros,
)
from moneyengine.template import TemplatePattern, format_parts_with_template, parse_template

from .cache import FormatterCache
from .locale_context import LocaleContext, NativeCurrencyFormatter
from .options import FormatOptions
from .resolution import (
    LocaleProvider,
    currency_digits,
    normalize_currency,
    normalize_locale_tag,
    resolve_flag,
    resolve_for_locale,
)

__all__ = ["MoneyFormatter", "default_formatter"]

logger = logging.getLogger(__name__)


class MoneyFormatter:
    """Locale-aware money formatter with injected configuration and caches.

    Args:
        options: Options applied to every call; per-call options win
        cache: Memoisation tables (default: a fresh FormatterCache)
        default_locale: Provider used when no locale is given
            (default: get_system_locale)

    Examples:
        >>> formatter = MoneyFormatter(default_locale=lambda: "en-US")
        >>> formatter.format(1000.5)
        '$1,000.50'
        >>> formatter.format(5000.5, FormatOptions(templates={"*": "{Symbol} 5.000.00,50"}))
        '$ 5.000,50'
    """

    __slots__ = ("_cache", "_default_locale", "_options")

    def __init__(
        self,
        options: FormatOptions | None = None,
        *,
        cache: FormatterCache | None = None,
        default_locale: LocaleProvider | None = None,
    ) -> None:
        self._options = options if options is not None else FormatOptions()
        self._cache = cache if cache is not None else FormatterCache()
        self._default_locale = default_locale if default_locale is not None else get_system_locale

    @property
    def options(self) -> FormatOptions:
        """Options bound to this formatter."""
        return self._options

    @property
    def cache(self) -> FormatterCache:
        """Memoisation tables used by this formatter."""
        return self._cache

    def with_options(self, options: FormatOptions) -> "MoneyFormatter":
        """New formatter with options merged over the bound ones, sharing the cache."""
        return MoneyFormatter(
            self._options.merge(options),
            cache=self._cache,
            default_locale=self._default_locale,
        )

    # ------------------------------------------------------------------
    # Public formatting API
    # ------------------------------------------------------------------

    def format(self, value: NumericInput, options: FormatOptions | None = None) -> str:
        """Format an amount as a string.

        Args:
            value: Amount (int, float, Decimal or decimal string)
            options: Per-call options merged over the bound options

        Returns:
            Rendered amount

        Raises:
            InvalidValueError: Unparsable amount or invalid currency code
            InvalidLocaleError: Malformed locale tag
            InvalidTemplateError: Malformed template
            InvalidRangeError: Negative precision
        """
        return join_parts(self.format_to_parts(value, options))

    def format_to_parts(
        self, value: NumericInput, options: FormatOptions | None = None
    ) -> tuple[FormatPart, ...]:
        """Format an amount as typed parts.

        Example:
            >>> parts = MoneyFormatter(default_locale=lambda: "en-US").format_to_parts(-1.5)
            >>> [(p.type.value, p.value) for p in parts][:3]
            [('minusSign', '-'), ('currency', '$'), ('integer', '1')]
        """
        amount = to_decimal(value)
        opts = self._options.merge(options)
        locale = normalize_locale_tag(opts.locale, self._default_locale)
        locale_parts = parse_locale(locale)
        currency = normalize_currency(opts.currency, locale_parts)
        strategy = RoundStrategy(opts.rounding_strategy or RoundStrategy.NEAREST)
        use_grouping = not opts.prevent_grouping
        override = resolve_for_locale(opts.overridden_symbols, locale_parts)

        template = resolve_for_locale(opts.templates, locale_parts)
        if template is not None:
            parts = self._format_template(
                amount,
                template,
                locale_parts,
                currency,
                opts.precision,
                strategy,
                override=override,
                use_grouping=use_grouping,
            )
        else:
            parts = self._format_native(
                amount,
                locale_parts,
                currency,
                opts.precision,
                strategy,
                override=override,
                use_grouping=use_grouping,
            )

        if resolve_flag(opts.trim_double_zeros, locale_parts):
            parts = trim_double_zeros(parts)
        if resolve_flag(opts.trim_padding_zeros, locale_parts):
            parts = trim_padding_zeros(parts)
        return parts

    def format_to_components(
        self, value: NumericInput, options: FormatOptions | None = None
    ) -> FormatComponents:
        """Format an amount and return its components (symbol, delimiters, text)."""
        return components_from_parts(self.format_to_parts(value, options))

    def parse_template(self, template: str) -> TemplatePattern:
        """Parse a template, memoised by template text."""
        return self._cache.patterns.get_or_compute(template, lambda: parse_template(template))

    def currency_symbol(self, currency: str, locale: str | None = None) -> str:
        """Babel symbol for a currency in a locale, memoised per (currency, locale)."""
        locale_parts = parse_locale(normalize_locale_tag(locale, self._default_locale))
        return self._symbol(currency.upper(), locale_parts)

    def clear_cache(self) -> None:
        """Clear every memoisation table."""
        self._cache.clear()

    def cache_stats(self) -> dict[str, dict[str, int | float | bool]]:
        """Statistics per memoisation table."""
        return self._cache.get_stats()

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def _symbol(self, currency: str, locale_parts: LocaleParts) -> str:
        locale_id = locale_parts.babel_identifier
        return self._cache.symbols.get_or_compute(
            (currency, locale_id),
            lambda: LocaleContext.create(locale_id).currency_symbol(currency),
        )

    def _format_template(
        self,
        amount: Decimal,
        template: str,
        locale_parts: LocaleParts,
        currency: str,
        precision: int | None,
        strategy: RoundStrategy,
        *,
        override: str | None,
        use_grouping: bool,
    ) -> tuple[FormatPart, ...]:
        pattern = self.parse_template(template)
        if precision is None:
            precision = pattern.number_pattern.decimal_digits

        rounded = _round_for_display(amount, precision, strategy)
        if pattern.custom_symbol or override:
            symbol = pattern.custom_symbol or override or ""
        else:
            symbol = self._symbol(currency, locale_parts)
        logger.debug(
            "Template %r for %s/%s at %d places",
            template,
            locale_parts.culture,
            currency,
            precision,
        )
        return format_parts_with_template(
            rounded, pattern, symbol, precision, use_grouping=use_grouping
        )

    def _format_native(
        self,
        amount: Decimal,
        locale_parts: LocaleParts,
        currency: str,
        precision: int | None,
        strategy: RoundStrategy,
        *,
        override: str | None,
        use_grouping: bool,
    ) -> tuple[FormatPart, ...]:
        if precision is None:
            precision = currency_digits(currency)
        rounded = _round_for_display(amount, precision, strategy)

        locale_id = locale_parts.babel_identifier
        native = self._cache.formatters.get_or_compute(
            (locale_id, currency, precision, use_grouping),
            lambda: NativeCurrencyFormatter.create(
                locale_id, currency, precision, use_grouping=use_grouping
            ),
        )
        return native.format_to_parts(rounded, override)


def _round_for_display(amount: Decimal, precision: int, strategy: RoundStrategy) -> Decimal:
    """Round for rendering; a result that rounds to zero loses its sign."""
    rounded = round_decimal(amount, precision, strategy)
    if rounded.is_zero():
        return rounded.copy_abs()
    return rounded


@functools.cache
def default_formatter() -> MoneyFormatter:
    """Shared formatter used by Money instances without a bound formatter.

    Uses the system locale provider and its own FormatterCache. Bind an
    explicit formatter through create_money() for deterministic output.
    """
    return MoneyFormatter()
