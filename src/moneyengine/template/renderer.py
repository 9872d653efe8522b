"""Template renderer: (value, TemplatePattern, symbol) -> parts or string.

The renderer does not round. Callers round upstream with the arithmetic
adapter; here the fraction is only padded with zeros or truncated to the
target digit count.

    >>> from decimal import Decimal
    >>> from moneyengine.template.parser import parse_template
    >>> format_with_template(Decimal("5000.5"), parse_template("{Symbol} 5.000.00,50"), "$")
    '$ 5.000,50'

Python 3.13+. Zero external dependencies.
"""

import re
from decimal import Decimal

from moneyengine.constants import GROUP_SIZE
from moneyengine.enums import PartType
from moneyengine.parts import FormatPart, join_parts

from .pattern import SegmentKind, TemplatePattern

__all__ = [
    "format_parts_with_template",
    "format_with_template",
    "group_digits",
    "literal_parts",
]

_LITERAL_RUNS = re.compile(r"\s+|\S+")


def group_digits(integer: str, size: int = GROUP_SIZE) -> list[str]:
    """Split an integer digit string into groups, right to left.

    Example:
        >>> group_digits("1234567")
        ['1', '234', '567']
    """
    head = len(integer) % size or size
    return [integer[:head]] + [integer[i : i + size] for i in range(head, len(integer), size)]


def literal_parts(text: str) -> list[FormatPart]:
    """Split verbatim template text into whitespace and custom runs."""
    return [
        FormatPart(PartType.LITERAL if run.isspace() else PartType.CUSTOM, run)
        for run in _LITERAL_RUNS.findall(text)
    ]


def _number_parts(
    value: Decimal,
    pattern: TemplatePattern,
    digits: int,
    use_grouping: bool,
) -> tuple[list[FormatPart], list[FormatPart]]:
    integer, _, fraction = format(value.copy_abs(), "f").partition(".")
    fraction = fraction[:digits].ljust(digits, "0")

    integer_parts: list[FormatPart] = []
    if value < 0:
        integer_parts.append(FormatPart(PartType.MINUS_SIGN, "-"))

    separator = pattern.thousands_separator if use_grouping else ""
    groups = group_digits(integer) if separator else [integer]
    for index, group in enumerate(groups):
        if index:
            integer_parts.append(FormatPart(PartType.GROUP, separator))
        integer_parts.extend(FormatPart(PartType.INTEGER, digit) for digit in group)

    fraction_parts: list[FormatPart] = []
    if fraction:
        fraction_parts.append(FormatPart(PartType.DECIMAL, pattern.decimal_separator))
        fraction_parts.extend(FormatPart(PartType.FRACTION, digit) for digit in fraction)
    return integer_parts, fraction_parts


def format_parts_with_template(
    value: Decimal,
    pattern: TemplatePattern,
    symbol: str,
    precision: int | None = None,
    *,
    use_grouping: bool = True,
) -> tuple[FormatPart, ...]:
    """Render a value through a template into typed parts.

    Args:
        value: Amount, already rounded to the target precision
        pattern: Parsed template
        symbol: Resolved currency symbol; the template's custom symbol wins
        precision: Fraction digits; defaults to the template's digit count
        use_grouping: False disables thousands grouping

    Returns:
        Parts in render order, one per digit, separator, sign and symbol
    """
    digits = precision if precision is not None else pattern.number_pattern.decimal_digits
    integer_parts, fraction_parts = _number_parts(value, pattern, digits, use_grouping)
    rendered_symbol = pattern.custom_symbol or symbol
    attach_fraction = not pattern.has_fraction

    parts: list[FormatPart] = []
    for segment in pattern.segments:
        match segment.kind:
            case SegmentKind.LITERAL:
                parts.extend(literal_parts(segment.text))
            case SegmentKind.SYMBOL:
                if rendered_symbol:
                    parts.append(FormatPart(PartType.CURRENCY, rendered_symbol))
            case SegmentKind.INTEGER:
                parts.extend(integer_parts)
                if attach_fraction:
                    parts.extend(fraction_parts)
            case SegmentKind.FRACTION:
                parts.extend(fraction_parts)
    return tuple(parts)


def format_with_template(
    value: Decimal,
    pattern: TemplatePattern,
    symbol: str,
    precision: int | None = None,
    *,
    use_grouping: bool = True,
) -> str:
    """Render a value through a template into a string.

    See format_parts_with_template() for arguments.
    """
    return join_parts(
        format_parts_with_template(value, pattern, symbol, precision, use_grouping=use_grouping)
    )
