"""Enumerations for MoneyEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class RoundStrategy(StrEnum):
    """Rounding strategy applied when a value is scaled to a precision.

    StrEnum provides automatic string conversion: str(RoundStrategy.UP) == "up"
    """

    NEAREST = "nearest"
    """Round half up: 100.455 -> 100.46, 100.454 -> 100.45"""

    UP = "up"
    """Round away from zero: 100.451 -> 100.46, -100.451 -> -100.46"""

    DOWN = "down"
    """Truncate toward zero: 100.459 -> 100.45"""


class ComparisonResult(IntEnum):
    """Three-way comparison outcome.

    IntEnum so results compare and sort like plain -1/0/1 integers.
    """

    LESS_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1


class SymbolPosition(StrEnum):
    """Placement of the currency symbol relative to the number."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


class PartType(StrEnum):
    """Type of a rendered amount fragment.

    Values mirror the part types of ECMA-402 Intl.NumberFormat.formatToParts
    so part lists serialize to the familiar shape.
    """

    CURRENCY = "currency"
    INTEGER = "integer"
    GROUP = "group"
    DECIMAL = "decimal"
    FRACTION = "fraction"
    LITERAL = "literal"
    """Whitespace between symbol and number."""

    CUSTOM = "custom"
    """Verbatim template text that is neither whitespace nor number."""

    MINUS_SIGN = "minusSign"


__all__ = [
    "ComparisonResult",
    "PartType",
    "RoundStrategy",
    "SymbolPosition",
]
