"""Money value type.

Money wraps one finite Decimal. Instances are immutable: every arithmetic
operation returns a new Money and attribute assignment raises. Equality,
ordering and hashing use the decimal value only.

    >>> Money(0.1).add(0.2).value
    Decimal('0.3')
    >>> Money(100).discount(10) == Money(100).discount(0.1) == 90
    True
    >>> Money("100.455").round().to_string()
    '100.46'

A Money may carry bound FormatOptions and a bound MoneyFormatter (see
create_money); arithmetic results keep the binding.

Python 3.13+.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from decimal import Decimal
from typing import TYPE_CHECKING, Self, cast

from moneyengine.constants import DEFAULT_ROUND_PRECISION
from moneyengine.core import (
    NumericInput,
    add,
    calculate_discount,
    compare,
    divide,
    multiply,
    round_decimal,
    subtract,
    to_decimal,
    to_plain_string,
)
from moneyengine.enums import ComparisonResult, RoundStrategy
from moneyengine.runtime import FormatOptions, MoneyFormatter, default_formatter

if TYPE_CHECKING:
    from moneyengine.parts import FormatComponents, FormatPart

__all__ = ["Money", "MoneyInput", "create_money", "money"]

type MoneyInput = Money | NumericInput
"""Anything an arithmetic method accepts: another Money or a raw scalar."""


class Money:
    """Immutable monetary amount backed by Decimal.

    Args:
        value: int, finite float, Decimal, decimal string or another Money
        options: Format options bound to this amount
        formatter: Formatter bound to this amount (default: shared formatter)

    Raises:
        InvalidValueError: If value is unparsable, non-finite or a bool
    """

    __slots__ = ("_formatter", "_options", "_value")

    _value: Decimal
    _options: FormatOptions | None
    _formatter: MoneyFormatter | None

    def __init__(
        self,
        value: MoneyInput = 0,
        *,
        options: FormatOptions | None = None,
        formatter: MoneyFormatter | None = None,
    ) -> None:
        if isinstance(value, Money):
            decimal_value = value._value
            options = options if options is not None else value._options
            formatter = formatter if formatter is not None else value._formatter
        else:
            decimal_value = to_decimal(value)
        object.__setattr__(self, "_value", decimal_value)
        object.__setattr__(self, "_options", options)
        object.__setattr__(self, "_formatter", formatter)

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"Money is immutable; cannot set {name!r}"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"Money is immutable; cannot delete {name!r}"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[type[Self], tuple[Decimal]]:
        return (type(self), (self._value,))

    def _derive(self, value: Decimal) -> Self:
        return type(self)(value, options=self._options, formatter=self._formatter)

    @staticmethod
    def _coerce(other: MoneyInput) -> Decimal:
        if isinstance(other, Money):
            return other._value
        return to_decimal(other)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def value(self) -> Decimal:
        """Exact decimal value."""
        return self._value

    @property
    def amount(self) -> float:
        """Value as float, for display and interop only."""
        return float(self._value)

    @property
    def options(self) -> FormatOptions | None:
        """Format options bound to this amount."""
        return self._options

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: MoneyInput) -> Self:
        """Return self + other."""
        return self._derive(add(self._value, self._coerce(other)))

    def subtract(self, other: MoneyInput) -> Self:
        """Return self - other."""
        return self._derive(subtract(self._value, self._coerce(other)))

    def multiply(self, factor: MoneyInput) -> Self:
        """Return self * factor."""
        return self._derive(multiply(self._value, self._coerce(factor)))

    def divide(self, divisor: MoneyInput) -> Self:
        """Return self / divisor.

        Raises:
            DivisionByZeroError: If the divisor's decimal value is zero
        """
        return self._derive(divide(self._value, self._coerce(divisor)))

    def round(
        self,
        precision: int | None = None,
        strategy: RoundStrategy | str | None = None,
    ) -> Self:
        """Round to a number of decimal places.

        Args:
            precision: Decimal places (default: 2); 0 rounds to an integer
            strategy: NEAREST (default, round half up), UP or DOWN

        Raises:
            InvalidRangeError: If precision is negative

        Examples:
            >>> Money("100.455").round(2, RoundStrategy.NEAREST).value
            Decimal('100.46')
            >>> Money("100.451").round(2, "up").value
            Decimal('100.46')
        """
        places = DEFAULT_ROUND_PRECISION if precision is None else precision
        mode = RoundStrategy.NEAREST if strategy is None else RoundStrategy(strategy)
        return self._derive(round_decimal(self._value, places, mode))

    def discount(self, rate: MoneyInput) -> Self:
        """Reduce by a rate given as a fraction (0.1) or a percentage (10).

        Raises:
            InvalidRangeError: If the rate is outside [0, 100]
        """
        raw_rate = rate._value if isinstance(rate, Money) else rate
        return self._derive(calculate_discount(self._value, raw_rate))

    def abs(self) -> Self:
        """Absolute value."""
        return self._derive(self._value.copy_abs())

    def negate(self) -> Self:
        """Value with the sign flipped."""
        return self._derive(self._value.copy_negate())

    # ------------------------------------------------------------------
    # Comparison and classification
    # ------------------------------------------------------------------

    def equal(self, other: MoneyInput) -> bool:
        """Whether both amounts have the same decimal value."""
        return self._value == self._coerce(other)

    def compare(self, other: MoneyInput) -> ComparisonResult:
        """Three-way comparison: LESS_THAN, EQUAL or GREATER_THAN."""
        return compare(self._value, self._coerce(other))

    def is_zero(self) -> bool:
        """Whether the value is zero."""
        return self._value.is_zero()

    def is_positive(self) -> bool:
        """Whether the value is greater than zero."""
        return self._value > 0

    def is_negative(self) -> bool:
        """Whether the value is less than zero."""
        return self._value < 0

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_number(self) -> float:
        """Value as float."""
        return float(self._value)

    def to_string(self) -> str:
        """Plain decimal string without exponent or trailing fractional zeros."""
        return to_plain_string(self._value)

    def to_json(self) -> str:
        """JSON representation (same as to_string)."""
        return self.to_string()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def _resolve_formatting(
        self, options: FormatOptions | None
    ) -> tuple[MoneyFormatter, FormatOptions | None]:
        formatter = self._formatter if self._formatter is not None else default_formatter()
        if self._options is None:
            return formatter, options
        return formatter, self._options.merge(options)

    def format(self, options: FormatOptions | None = None) -> str:
        """Render as a locale-aware string.

        Example:
            >>> from moneyengine import MoneyFormatter
            >>> fmt = MoneyFormatter(default_locale=lambda: "en-US")
            >>> Money(100, formatter=fmt).format(FormatOptions(trim_double_zeros=True))
            '$100'
        """
        formatter, merged = self._resolve_formatting(options)
        return formatter.format(self._value, merged)

    def format_to_parts(self, options: FormatOptions | None = None) -> tuple[FormatPart, ...]:
        """Render as typed parts whose text concatenates to format()."""
        formatter, merged = self._resolve_formatting(options)
        return formatter.format_to_parts(self._value, merged)

    def format_to_components(self, options: FormatOptions | None = None) -> FormatComponents:
        """Render and return symbol, delimiters and the symbol-less text."""
        formatter, merged = self._resolve_formatting(options)
        return formatter.format_to_components(self._value, merged)

    @classmethod
    def parse(
        cls,
        text: str,
        locale: str | None = None,
        *,
        template: str | None = None,
    ) -> Money:
        """Parse a formatted amount ("$1,000.50", "1.234,56 €").

        Args:
            text: Formatted amount
            locale: Locale of the text (default: system locale)
            template: Template the text was rendered with

        Raises:
            MoneyParseError: If the text cannot be parsed
        """
        # Lazy import: parsing depends on this module
        from moneyengine.parsing import parse_money  # noqa: PLC0415

        result, errors = parse_money(text, locale, template=template)
        if errors:
            raise errors[0]
        return cast("Money", result)

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Money({str(self._value)!r})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return not self._value.is_zero()

    def __float__(self) -> float:
        return float(self._value)

    @staticmethod
    def _operand(other: object) -> Decimal | None:
        match other:
            case Money():
                return other._value
            case bool():
                return None
            case float() if not math.isfinite(other):
                return None
            case Decimal() if not other.is_finite():
                return None
            case int() | float() | Decimal():
                return to_decimal(other)
            case _:
                return None

    def __eq__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._value == operand

    def __lt__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._value < operand

    def __le__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._value <= operand

    def __gt__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._value > operand

    def __ge__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._value >= operand

    def __add__(self, other: object) -> Self:
        operand = self._arithmetic_operand(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    __radd__ = __add__

    def __sub__(self, other: object) -> Self:
        operand = self._arithmetic_operand(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: object) -> Self:
        operand = self._arithmetic_operand(other)
        if operand is None:
            return NotImplemented
        return self._derive(subtract(operand, self._value))

    def __mul__(self, other: object) -> Self:
        operand = self._arithmetic_operand(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Self:
        operand = self._arithmetic_operand(other)
        if operand is None:
            return NotImplemented
        return self.divide(operand)

    def __neg__(self) -> Self:
        return self.negate()

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        return self.abs()

    @staticmethod
    def _arithmetic_operand(other: object) -> Decimal | None:
        match other:
            case Money():
                return other._value
            case bool():
                return None
            case int() | float() | Decimal():
                return to_decimal(other)
            case _:
                return None


def money(value: MoneyInput = 0) -> Money:
    """Create an unbound Money.

    Example:
        >>> money("19.99").multiply(3).to_string()
        '59.97'
    """
    return Money(value)


def create_money(
    options: FormatOptions | None = None,
    *,
    formatter: MoneyFormatter | None = None,
) -> Callable[[MoneyInput], Money]:
    """Return a factory producing Money bound to options and a formatter.

    Configuration travels with the instances; nothing global is modified.

    Example:
        >>> from moneyengine import MoneyFormatter
        >>> euro = create_money(
        ...     FormatOptions(locale="de-DE", currency="EUR"),
        ...     formatter=MoneyFormatter(),
        ... )
        >>> euro(1234.5).format_to_components().formatted
        '1.234,50'
    """

    def factory(value: MoneyInput) -> Money:
        return Money(value, options=options, formatter=formatter)

    return factory
