"""Template pattern data model.

A TemplatePattern is the parsed, reusable form of a template string. It is
immutable and hashable so it can be memoised by template text and shared
across threads.

Segments describe the template layout left to right:

    "{Symbol} 5.000,50"              -> SYMBOL, LITERAL(" "), INTEGER, FRACTION
    "{integer|.}{fraction|,|2} {currency}" -> INTEGER, FRACTION, LITERAL(" "), SYMBOL

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from moneyengine.enums import SymbolPosition

__all__ = [
    "NumberPattern",
    "SegmentKind",
    "TemplatePattern",
    "TemplateSegment",
]


class SegmentKind(StrEnum):
    """Kind of a template layout segment."""

    LITERAL = "literal"
    SYMBOL = "symbol"
    INTEGER = "integer"
    FRACTION = "fraction"


@dataclass(frozen=True, slots=True)
class TemplateSegment:
    """One layout element of a template.

    Attributes:
        kind: Segment kind
        text: Verbatim text for LITERAL segments, empty otherwise
    """

    kind: SegmentKind
    text: str = ""


@dataclass(frozen=True, slots=True)
class NumberPattern:
    """Summary of the numeric example in a template.

    Attributes:
        integer_digits: Digits left of the decimal separator in the example
        decimal_digits: Fraction digits to render
        has_grouping: Whether the example actually contains the thousands
            separator in its integer portion
    """

    integer_digits: int
    decimal_digits: int
    has_grouping: bool


@dataclass(frozen=True, slots=True)
class TemplatePattern:
    """Parsed template.

    Attributes:
        symbol_position: Symbol before or after the number
        symbol_placeholder: Symbol token as written ("{Symbol}", "{currency}"),
            empty if the template has none
        custom_symbol: Literal symbol hard-coded in the template
            ("{Symbol:TL}"); overrides every resolved symbol
        thousands_separator: Grouping character, "" for no grouping
        decimal_separator: Fraction separator, never equal to the
            thousands separator
        structure: Original template text
        number_pattern: Digit counts of the numeric example
        segments: Layout for reconstruction
    """

    symbol_position: SymbolPosition
    symbol_placeholder: str
    custom_symbol: str | None
    thousands_separator: str
    decimal_separator: str
    structure: str
    number_pattern: NumberPattern
    segments: tuple[TemplateSegment, ...] = field(default=())

    @property
    def has_symbol(self) -> bool:
        """Whether the template has a place for the currency symbol."""
        return any(segment.kind is SegmentKind.SYMBOL for segment in self.segments)

    @property
    def has_fraction(self) -> bool:
        """Whether the template has a place for fraction digits."""
        return any(segment.kind is SegmentKind.FRACTION for segment in self.segments)
