"""Tests for the template renderer.

The renderer lays out an already-rounded value through a parsed template;
it pads or truncates the fraction but never rounds.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from moneyengine import FormatPart, PartType
from moneyengine.template import format_parts_with_template, format_with_template, parse_template
from moneyengine.template.renderer import group_digits, literal_parts


class TestGroupDigits:
    """group_digits splits right to left."""

    @pytest.mark.parametrize(
        ("integer", "expected"),
        [
            ("0", ["0"]),
            ("123", ["123"]),
            ("1234", ["1", "234"]),
            ("1234567", ["1", "234", "567"]),
            ("123456", ["123", "456"]),
        ],
    )
    def test_groups(self, integer: str, expected: list[str]) -> None:
        """Groups of three, shortest group first."""
        assert group_digits(integer) == expected


class TestLiteralParts:
    """literal_parts splits verbatim text."""

    def test_whitespace_and_text_runs(self) -> None:
        """Whitespace runs are literals, other runs custom text."""
        assert literal_parts("Fiyat: ") == [
            FormatPart(PartType.CUSTOM, "Fiyat:"),
            FormatPart(PartType.LITERAL, " "),
        ]

    def test_empty(self) -> None:
        """Empty text yields no parts."""
        assert literal_parts("") == []


class TestExampleTemplates:
    """Rendering example-form templates."""

    def test_dot_grouping_comma_decimal(self) -> None:
        """'{Symbol} 5.000.00,50' renders 5000.5 as '$ 5.000,50'."""
        pattern = parse_template("{Symbol} 5.000.00,50")
        assert format_with_template(Decimal("5000.5"), pattern, "$") == "$ 5.000,50"

    def test_suffix_symbol(self) -> None:
        """Symbol after the number with space grouping."""
        pattern = parse_template("1 000,00 {Symbol}")
        assert format_with_template(Decimal("1234567.5"), pattern, "\u20ac") == (
            "1 234 567,50 \u20ac"
        )

    def test_custom_symbol_wins(self) -> None:
        """A template's hard-coded symbol replaces the resolved one."""
        pattern = parse_template("{Symbol:TL} 100")
        assert format_with_template(Decimal(1234), pattern, "\u20ba") == "TL 1234"

    def test_negative_sign_before_digits(self) -> None:
        """The minus sign leads the integer digits."""
        pattern = parse_template("{Symbol} 1,000.00")
        assert format_with_template(Decimal("-1234.5"), pattern, "$") == "$ -1,234.50"

    def test_small_values(self) -> None:
        """Values below one keep a leading zero."""
        pattern = parse_template("{Symbol}1,000.00")
        assert format_with_template(Decimal("0.05"), pattern, "$") == "$0.05"

    def test_fraction_is_padded_not_rounded(self) -> None:
        """Extra digits are truncated; missing digits are zero-padded."""
        pattern = parse_template("{Symbol}1,000.00")
        assert format_with_template(Decimal("1.999"), pattern, "$") == "$1.99"
        assert format_with_template(Decimal(1), pattern, "$") == "$1.00"

    def test_explicit_precision(self) -> None:
        """An explicit precision overrides the template's digit count."""
        pattern = parse_template("{Symbol}1,000.00")
        assert format_with_template(Decimal("1234.5"), pattern, "$", 0) == "$1,234"
        assert format_with_template(Decimal("1234.5"), pattern, "$", 3) == "$1,234.500"

    def test_grouping_disabled(self) -> None:
        """use_grouping=False drops the thousands separator."""
        pattern = parse_template("{Symbol}1,000.00")
        rendered = format_with_template(
            Decimal("1234567.5"), pattern, "$", use_grouping=False
        )
        assert rendered == "$1234567.50"

    def test_template_without_symbol(self) -> None:
        """No symbol token means no symbol in the output."""
        pattern = parse_template("1.000,00")
        assert format_with_template(Decimal("1234.5"), pattern, "$") == "1.234,50"


class TestDirectiveTemplates:
    """Rendering directive-form templates."""

    def test_compact_suffix(self) -> None:
        """'{integer|,}{fraction|.|2}{currency}' renders '1,234.50$'."""
        pattern = parse_template("{integer|,}{fraction|.|2}{currency}")
        assert format_with_template(Decimal("1234.5"), pattern, "$") == "1,234.50$"

    def test_literal_text(self) -> None:
        """Verbatim text surrounds the rendered tokens."""
        pattern = parse_template("Fiyat: {integer|.}{fraction|,|2} {currency}")
        assert format_with_template(Decimal("1234.5"), pattern, "\u20ba") == (
            "Fiyat: 1.234,50 \u20ba"
        )

    def test_integer_only(self) -> None:
        """Without a fraction token no decimal separator is rendered."""
        pattern = parse_template("{integer|.} {currency}")
        assert format_with_template(Decimal(1234), pattern, "TL") == "1.234 TL"

    def test_parts(self) -> None:
        """Parts are typed, one per digit."""
        pattern = parse_template("{currency} {integer|,}{fraction|.|2}")
        parts = format_parts_with_template(Decimal("-1234.5"), pattern, "$")
        assert [(p.type, p.value) for p in parts] == [
            (PartType.CURRENCY, "$"),
            (PartType.LITERAL, " "),
            (PartType.MINUS_SIGN, "-"),
            (PartType.INTEGER, "1"),
            (PartType.GROUP, ","),
            (PartType.INTEGER, "2"),
            (PartType.INTEGER, "3"),
            (PartType.INTEGER, "4"),
            (PartType.DECIMAL, "."),
            (PartType.FRACTION, "5"),
            (PartType.FRACTION, "0"),
        ]

    def test_empty_symbol_is_omitted(self) -> None:
        """An empty resolved symbol produces no currency part."""
        pattern = parse_template("{integer|,}{fraction|.|2}{currency}")
        parts = format_parts_with_template(Decimal(1), pattern, "")
        assert all(part.type is not PartType.CURRENCY for part in parts)
