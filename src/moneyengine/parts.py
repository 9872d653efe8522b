"""Structured output of the formatter.

A rendered amount is a tuple of FormatPart values; the flat string is the
concatenation of their text. Post-processing (zero trimming) and the
component view operate on the parts, so the string and the parts always
agree.

    "$1,000.50" -> currency "$", integer "1", group ",", integer "0" x3,
                   decimal ".", fraction "5", fraction "0"

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from moneyengine.enums import PartType

__all__ = [
    "FormatComponents",
    "FormatPart",
    "components_from_parts",
    "join_parts",
    "trim_double_zeros",
    "trim_padding_zeros",
]


@dataclass(frozen=True, slots=True)
class FormatPart:
    """One typed fragment of a rendered amount.

    Attributes:
        type: Fragment type
        value: Literal text of the fragment
    """

    type: PartType
    value: str


@dataclass(frozen=True, slots=True)
class FormatComponents:
    """Rendered amount broken into its reusable pieces.

    Attributes:
        currency: Currency symbol as rendered ("" when none)
        group_delimiter: Thousands separator used ("" when ungrouped)
        decimal_delimiter: Decimal separator used ("" when no fraction)
        integer: Integer digits with their group separators ("1,234")
        fraction: Decimal separator and fraction digits (".50"; "" when none)
        formatted: Every non-currency part joined, literals included
        formatted_with_symbol: Full rendered amount
    """

    currency: str
    group_delimiter: str
    decimal_delimiter: str
    integer: str
    fraction: str
    formatted: str
    formatted_with_symbol: str


def join_parts(parts: Iterable[FormatPart]) -> str:
    """Concatenate part text."""
    return "".join(part.value for part in parts)


def _fraction_digits(parts: tuple[FormatPart, ...]) -> list[str]:
    return [part.value for part in parts if part.type is PartType.FRACTION]


def trim_double_zeros(parts: tuple[FormatPart, ...]) -> tuple[FormatPart, ...]:
    """Drop the decimal separator and fraction when every fraction digit is zero.

    Example: "$100.00" -> "$100". Amounts with any non-zero fraction digit
    are returned unchanged.
    """
    digits = _fraction_digits(parts)
    if not digits or any(digit != "0" for digit in digits):
        return parts
    return tuple(
        part for part in parts if part.type not in (PartType.DECIMAL, PartType.FRACTION)
    )


def trim_padding_zeros(parts: tuple[FormatPart, ...]) -> tuple[FormatPart, ...]:
    """Drop a single trailing padding zero from a fraction that is not all zeros.

    Example: "$100.50" -> "$100.5". "$100.00" is left to trim_double_zeros.
    """
    digits = _fraction_digits(parts)
    if not digits or digits[-1] != "0" or all(digit == "0" for digit in digits):
        return parts
    last = max(i for i, part in enumerate(parts) if part.type is PartType.FRACTION)
    return parts[:last] + parts[last + 1 :]


def components_from_parts(parts: tuple[FormatPart, ...]) -> FormatComponents:
    """Build the component view of a rendered amount."""
    first: dict[PartType, str] = {}
    for part in parts:
        first.setdefault(part.type, part.value)

    number = [part for part in parts if part.type is not PartType.CURRENCY]
    return FormatComponents(
        currency=first.get(PartType.CURRENCY, ""),
        group_delimiter=first.get(PartType.GROUP, ""),
        decimal_delimiter=first.get(PartType.DECIMAL, ""),
        integer=join_parts(p for p in parts if p.type in (PartType.INTEGER, PartType.GROUP)),
        fraction=join_parts(p for p in parts if p.type in (PartType.DECIMAL, PartType.FRACTION)),
        formatted=join_parts(number),
        formatted_with_symbol=join_parts(parts),
    )
