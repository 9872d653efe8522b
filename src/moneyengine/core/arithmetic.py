"""Decimal arithmetic adapter for money values.

Every monetary operation goes through this module. Values are Decimal,
functions are pure and never mutate their inputs. All arithmetic runs in a
private decimal context so an application that changes the thread's ambient
context (precision, traps) cannot change money results.

Rounding strategies map onto decimal rounding modes:
    NEAREST -> ROUND_HALF_UP   (100.455 -> 100.46)
    UP      -> ROUND_UP        (away from zero)
    DOWN    -> ROUND_DOWN      (toward zero)

Python 3.13+. Zero external dependencies.
"""

import math
import re
from decimal import (
    ROUND_DOWN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    Decimal,
    InvalidOperation,
)

from moneyengine.constants import DECIMAL_CONTEXT_PRECISION, PERCENTAGE_SCALE
from moneyengine.diagnostics import (
    DivisionByZeroError,
    ErrorTemplate,
    InvalidRangeError,
    InvalidValueError,
)
from moneyengine.enums import ComparisonResult, RoundStrategy

__all__ = [
    "NumericInput",
    "add",
    "calculate_discount",
    "compare",
    "divide",
    "multiply",
    "normalize_rate",
    "round_decimal",
    "subtract",
    "to_decimal",
    "to_plain_string",
]

type NumericInput = Decimal | int | float | str
"""Raw scalar accepted wherever an amount is expected."""

_CONTEXT = Context(prec=DECIMAL_CONTEXT_PRECISION)

_ROUNDING_MODES: dict[RoundStrategy, str] = {
    RoundStrategy.NEAREST: ROUND_HALF_UP,
    RoundStrategy.UP: ROUND_UP,
    RoundStrategy.DOWN: ROUND_DOWN,
}

_ONE = Decimal(1)
_PERCENT = Decimal(PERCENTAGE_SCALE)

# ASCII digits only; no underscores. Special values fall through to the finite check.
_DECIMAL_LITERAL = re.compile(
    r"[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|s?nan\d*)",
    re.ASCII | re.IGNORECASE,
)


def to_decimal(value: NumericInput) -> Decimal:
    """Convert a raw scalar to a finite Decimal.

    Floats go through their shortest repr, so 0.1 becomes Decimal("0.1")
    rather than the binary approximation 0.1000000000000000055511151231257827.

    Args:
        value: Decimal, int, float or ASCII decimal-literal string
            (no digit-group underscores, no non-ASCII digits)

    Returns:
        Finite Decimal equal to the input

    Raises:
        InvalidValueError: For booleans, unsupported types, unparsable
            strings, NaN and infinities
    """
    match value:
        case bool():
            raise InvalidValueError(ErrorTemplate.unsupported_amount_type(value), value=value)
        case Decimal():
            result = value
        case int():
            result = Decimal(value)
        case float():
            if not math.isfinite(value):
                raise InvalidValueError(ErrorTemplate.non_finite_amount(value), value=value)
            result = Decimal(repr(value))
        case str():
            literal = value.strip()
            if _DECIMAL_LITERAL.fullmatch(literal) is None:
                diagnostic = ErrorTemplate.invalid_amount(value, "Not a decimal literal")
                raise InvalidValueError(diagnostic, value=value)
            try:
                result = Decimal(literal)
            except InvalidOperation as e:
                diagnostic = ErrorTemplate.invalid_amount(value, "Not a decimal literal")
                raise InvalidValueError(diagnostic, value=value) from e
        case _:
            raise InvalidValueError(ErrorTemplate.unsupported_amount_type(value), value=value)

    if not result.is_finite():
        raise InvalidValueError(ErrorTemplate.non_finite_amount(value), value=value)
    return result


def add(a: Decimal, b: Decimal) -> Decimal:
    """Return a + b."""
    return _CONTEXT.add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    """Return a - b."""
    return _CONTEXT.subtract(a, b)


def multiply(a: Decimal, b: Decimal) -> Decimal:
    """Return a * b."""
    return _CONTEXT.multiply(a, b)


def divide(a: Decimal, b: Decimal) -> Decimal:
    """Return a / b.

    Raises:
        DivisionByZeroError: If b is zero (checked on the Decimal itself)
    """
    if b.is_zero():
        raise DivisionByZeroError(ErrorTemplate.division_by_zero(a), dividend=a)
    return _CONTEXT.divide(a, b)


def compare(a: Decimal, b: Decimal) -> ComparisonResult:
    """Three-way comparison of two decimals."""
    if a < b:
        return ComparisonResult.LESS_THAN
    if a > b:
        return ComparisonResult.GREATER_THAN
    return ComparisonResult.EQUAL


def round_decimal(
    value: Decimal,
    precision: int,
    strategy: RoundStrategy = RoundStrategy.NEAREST,
) -> Decimal:
    """Round value to a number of decimal places.

    The result always carries exactly ``precision`` fractional digits
    (Decimal("100.5") rounded to 2 places is Decimal("100.50")), so rounding
    an already-rounded value at the same precision is a no-op.

    Args:
        value: Value to round
        precision: Decimal places (>= 0)
        strategy: Rounding strategy (default: NEAREST, round half up)

    Returns:
        Rounded Decimal

    Raises:
        InvalidRangeError: If precision is negative or the value has too
            many integer digits to be held at that precision

    Examples:
        >>> round_decimal(Decimal("100.455"), 2)
        Decimal('100.46')
        >>> round_decimal(Decimal("100.451"), 2, RoundStrategy.UP)
        Decimal('100.46')
        >>> round_decimal(Decimal("-100.459"), 2, RoundStrategy.DOWN)
        Decimal('-100.45')
    """
    if precision < 0:
        raise InvalidRangeError(ErrorTemplate.precision_out_of_range(precision), value=precision)
    exponent = _ONE.scaleb(-precision)
    try:
        return value.quantize(exponent, rounding=_ROUNDING_MODES[strategy], context=_CONTEXT)
    except InvalidOperation as e:
        raise InvalidRangeError(
            ErrorTemplate.precision_out_of_range(precision), value=precision
        ) from e


def normalize_rate(rate: NumericInput) -> Decimal:
    """Interpret a discount rate as a fraction in [0, 1].

    Rates above 1 are percentages: 10 -> 0.1. A rate of exactly 1 is the
    fraction 1 (a 100% discount).

    Raises:
        InvalidRangeError: If the raw rate is outside [0, 100]
        InvalidValueError: If the rate is not a number
    """
    raw = to_decimal(rate)
    if raw < 0 or raw > _PERCENT:
        raise InvalidRangeError(ErrorTemplate.discount_out_of_range(rate), value=rate)
    if raw > _ONE:
        return _CONTEXT.divide(raw, _PERCENT)
    return raw


def calculate_discount(amount: Decimal, rate: NumericInput) -> Decimal:
    """Return amount reduced by rate (fraction or percentage)."""
    return subtract(amount, multiply(amount, normalize_rate(rate)))


def to_plain_string(value: Decimal) -> str:
    """Render a decimal without exponent and without trailing fractional zeros.

    Examples:
        >>> to_plain_string(Decimal("100.00"))
        '100'
        >>> to_plain_string(Decimal("0.30"))
        '0.3'
        >>> to_plain_string(Decimal("1E+3"))
        '1000'
    """
    if value.is_zero():
        return "0"
    return format(value.normalize(_CONTEXT), "f")
