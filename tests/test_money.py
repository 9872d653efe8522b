"""Tests for the Money value type.

Covers construction, immutability, arithmetic and rounding semantics,
discounts, comparison, Python protocol integration, conversions, bound
formatting configuration and parsing.
"""

from __future__ import annotations

import copy
import pickle
from decimal import Decimal

import pytest

from moneyengine import (
    ComparisonResult,
    DivisionByZeroError,
    FormatOptions,
    FormatterCache,
    InvalidRangeError,
    InvalidValueError,
    Money,
    MoneyFormatter,
    MoneyParseError,
    RoundStrategy,
    create_money,
    money,
)
from moneyengine.core import to_decimal
from tests.helpers import en_us

# ============================================================================
# Construction
# ============================================================================


class TestConstruction:
    """Money construction from raw scalars."""

    def test_default_is_zero(self) -> None:
        """Money() is zero."""
        assert Money().value == Decimal(0)
        assert money().is_zero()

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (5, Decimal(5)),
            (0.1, Decimal("0.1")),
            ("19.99", Decimal("19.99")),
            (Decimal("1.005"), Decimal("1.005")),
        ],
    )
    def test_scalars(self, value: int | float | str | Decimal, expected: Decimal) -> None:
        """Ints, floats, strings and Decimals are accepted exactly."""
        assert Money(value).value == expected

    def test_copy_constructor(self) -> None:
        """Money(Money) copies value and bindings."""
        options = FormatOptions(locale="de-DE")
        original = Money(5, options=options)
        copied = Money(original)
        assert copied == original
        assert copied.options is options

    @pytest.mark.parametrize("value", ["abc", float("nan"), float("inf"), True, None])
    def test_invalid_input_raises(self, value: object) -> None:
        """Unparsable, non-finite and boolean inputs raise InvalidValueError."""
        with pytest.raises(InvalidValueError):
            Money(value)  # type: ignore[arg-type]


class TestImmutability:
    """Money instances cannot be modified."""

    def test_setattr_raises(self) -> None:
        """Assigning any attribute raises AttributeError."""
        amount = Money(1)
        with pytest.raises(AttributeError, match="immutable"):
            amount._value = Decimal(2)  # type: ignore[misc]
        with pytest.raises(AttributeError):
            amount.extra = 1  # type: ignore[attr-defined]
        assert amount.value == Decimal(1)

    def test_delattr_raises(self) -> None:
        """Deleting attributes raises AttributeError."""
        amount = Money(1)
        with pytest.raises(AttributeError):
            del amount._value  # type: ignore[misc]

    def test_operations_return_new_instances(self) -> None:
        """Arithmetic never mutates the receiver."""
        amount = Money(10)
        amount.add(5)
        amount.multiply(2)
        amount.round(0)
        assert amount.value == Decimal(10)

    def test_pickle_and_copy(self) -> None:
        """Money survives pickling and copying."""
        amount = Money("12.34")
        assert pickle.loads(pickle.dumps(amount)) == amount
        assert copy.copy(amount) == amount
        assert copy.deepcopy(amount) == amount


# ============================================================================
# Arithmetic
# ============================================================================


class TestArithmetic:
    """Arithmetic methods."""

    def test_classic_float_case_is_exact(self) -> None:
        """0.1 + 0.2 is exactly 0.3."""
        assert Money(0.1).add(0.2).value == Decimal("0.3")
        assert Money(0.1).add(Money(0.2)) == Money("0.3")

    def test_subtract(self) -> None:
        """Subtraction accepts Money and scalars."""
        assert Money(10).subtract(Money("0.01")).value == Decimal("9.99")
        assert Money(10).subtract("2.5").value == Decimal("7.5")

    def test_multiply(self) -> None:
        """Multiplication by scalars and Money."""
        assert Money("19.99").multiply(3).value == Decimal("59.97")
        assert Money(2).multiply(Money("1.5")).value == Decimal("3.0")

    def test_divide(self) -> None:
        """Division keeps full precision."""
        assert Money(1).divide(4).value == Decimal("0.25")
        assert Money(10).divide(3).round(2).value == Decimal("3.33")

    @pytest.mark.parametrize("divisor", [0, 0.0, "0.00", Decimal("-0")])
    def test_divide_by_zero(self, divisor: int | float | str | Decimal) -> None:
        """A divisor whose decimal value is zero raises DivisionByZeroError."""
        with pytest.raises(DivisionByZeroError):
            Money(10).divide(divisor)

    def test_divide_by_zero_money(self) -> None:
        """A zero Money divisor raises too."""
        with pytest.raises(ZeroDivisionError):
            Money(10).divide(Money(0))

    def test_abs_and_negate(self) -> None:
        """abs() and negate() flip signs exactly."""
        assert Money("-2.50").abs().value == Decimal("2.50")
        assert Money("2.50").negate().value == Decimal("-2.50")
        assert Money("-2.50").negate().value == Decimal("2.50")

    def test_money_operands_unwrapped_before_conversion(self) -> None:
        """Money operands are unwrapped; the scalar converter never sees them."""
        assert Money(2).add(Money("0.5")).value == Decimal("2.5")
        with pytest.raises(InvalidValueError):
            to_decimal(Money(1))  # type: ignore[arg-type]

    def test_invalid_operand_raises(self) -> None:
        """Unparsable operands raise InvalidValueError."""
        with pytest.raises(InvalidValueError):
            Money(1).add("one")


class TestRound:
    """Money.round defaults and strategies."""

    def test_default_is_two_places_nearest(self) -> None:
        """No arguments rounds half up to two places."""
        assert Money("100.455").round().value == Decimal("100.46")
        assert Money("100.454").round().value == Decimal("100.45")

    def test_precision_zero_is_honoured(self) -> None:
        """round(0) rounds to an integer instead of using the default."""
        assert Money("2.5").round(0).value == Decimal(3)
        assert Money("-2.5").round(0).value == Decimal(-3)

    def test_strategy_accepts_strings(self) -> None:
        """Strategy names are accepted as strings."""
        assert Money("100.451").round(2, "up").value == Decimal("100.46")
        assert Money("100.459").round(2, "down").value == Decimal("100.45")

    def test_strategy_enum(self) -> None:
        """RoundStrategy members select the rounding mode."""
        assert Money("-100.451").round(2, RoundStrategy.UP).value == Decimal("-100.46")
        assert Money("-100.459").round(2, RoundStrategy.DOWN).value == Decimal("-100.45")

    def test_unknown_strategy_rejected(self) -> None:
        """Unknown strategy names raise ValueError."""
        with pytest.raises(ValueError, match="sideways"):
            Money(1).round(2, "sideways")

    def test_negative_precision_rejected(self) -> None:
        """Negative precision raises InvalidRangeError."""
        with pytest.raises(InvalidRangeError):
            Money(1).round(-1)


class TestDiscount:
    """Money.discount with fractional and percentage rates."""

    @pytest.mark.parametrize(
        ("rate", "expected"),
        [
            (10, Decimal(90)),
            (0.1, Decimal(90)),
            (0.5, Decimal(50)),
            (50, Decimal(50)),
            (1, Decimal(0)),
            (100, Decimal(0)),
            (0, Decimal(100)),
            (Decimal("1.5"), Decimal("98.5")),
        ],
    )
    def test_rates(self, rate: int | float | Decimal, expected: Decimal) -> None:
        """Rates above 1 are percentages, rates up to 1 are fractions."""
        assert Money(100).discount(rate).value == expected

    def test_money_rate(self) -> None:
        """A Money rate is read by its decimal value."""
        assert Money(100).discount(Money(10)).value == Decimal(90)

    @pytest.mark.parametrize("rate", [-1, 101, "150"])
    def test_out_of_range(self, rate: int | str) -> None:
        """Rates outside [0, 100] raise InvalidRangeError."""
        with pytest.raises(InvalidRangeError):
            Money(100).discount(rate)


# ============================================================================
# Comparison and classification
# ============================================================================


class TestComparison:
    """equal, compare and the sign predicates."""

    def test_equal_ignores_scale(self) -> None:
        """1.0 and 1 are equal amounts."""
        assert Money("1.0").equal(1)
        assert Money("1.0").equal(Money(1))
        assert not Money("1.01").equal(1)

    def test_compare(self) -> None:
        """compare returns a ComparisonResult."""
        assert Money(1).compare(2) is ComparisonResult.LESS_THAN
        assert Money(2).compare(Money("2.00")) is ComparisonResult.EQUAL
        assert Money(3).compare(2) is ComparisonResult.GREATER_THAN

    @pytest.mark.parametrize(
        ("value", "zero", "positive", "negative"),
        [
            ("0", True, False, False),
            ("-0.00", True, False, False),
            ("0.01", False, True, False),
            ("-0.01", False, False, True),
        ],
    )
    def test_sign_predicates(
        self, value: str, zero: bool, positive: bool, negative: bool
    ) -> None:
        """is_zero, is_positive and is_negative partition every amount."""
        amount = Money(value)
        assert amount.is_zero() is zero
        assert amount.is_positive() is positive
        assert amount.is_negative() is negative


# ============================================================================
# Python protocols
# ============================================================================


class TestProtocols:
    """Operators, hashing, truthiness and string conversion."""

    def test_equality_operator(self) -> None:
        """== compares decimal values with Money, int and Decimal."""
        assert Money("1.00") == Money(1)
        assert Money(1) == 1
        assert Money("0.5") == Decimal("0.50")
        assert Money(1) != Money(2)

    def test_equality_with_float(self) -> None:
        """Finite floats compare by the value Money(float) would hold."""
        assert Money("0.5") == 0.5
        assert Money(1) == 1.0
        assert Money("0.1") == 0.1
        assert Money(1) != 1.5

    def test_equality_rejects_non_finite_bool_and_str(self) -> None:
        """NaN, booleans and strings never compare equal to Money."""
        assert Money(1) != float("nan")
        assert Money(1) != Decimal("NaN")
        assert Money(1) != True  # noqa: E712
        assert Money(1) != "1"

    def test_hash_consistent_with_equality(self) -> None:
        """Equal amounts hash alike and deduplicate in sets."""
        assert hash(Money("1.0")) == hash(Money(1))
        assert len({Money("1.0"), Money(1), Money("1.00")}) == 1

    def test_ordering(self) -> None:
        """Ordering operators compare decimal values."""
        assert Money(1) < Money(2) <= Money("2.00")
        assert Money(3) > 2
        assert Money(3) >= Decimal(3)
        assert sorted([Money(3), Money(1), Money(2)]) == [Money(1), Money(2), Money(3)]

    def test_ordering_with_float(self) -> None:
        """Finite floats order like their decimal value."""
        assert Money(1) < 1.5
        assert Money(2) >= 2.0
        assert 0.25 < Money("0.3")

    @pytest.mark.parametrize("other", [float("inf"), float("nan"), "2"])
    def test_ordering_with_non_numbers_raises(self, other: object) -> None:
        """Ordering against infinities, NaN and strings is a TypeError."""
        with pytest.raises(TypeError):
            _ = Money(1) < other  # type: ignore[operator]

    def test_arithmetic_operators(self) -> None:
        """+, -, * and / mirror the named methods."""
        assert Money(1) + 2 == Money(3)
        assert 2 + Money(1) == Money(3)
        assert Money(5) - Money(2) == 3
        assert 5 - Money(2) == Money(3)
        assert Money(2) * 1.5 == Money(3)
        assert 3 * Money(2) == Money(6)
        assert Money(1) / 4 == Money("0.25")
        assert Money(0.1) + 0.2 == Money("0.3")

    def test_operator_with_string_raises(self) -> None:
        """Strings are not operator operands."""
        with pytest.raises(TypeError):
            _ = Money(1) + "2"  # type: ignore[operator]

    def test_division_operator_by_zero(self) -> None:
        """Money / 0 raises DivisionByZeroError."""
        with pytest.raises(DivisionByZeroError):
            _ = Money(1) / 0

    def test_unary_operators(self) -> None:
        """-, + and abs()."""
        amount = Money("-2.5")
        assert -amount == Money("2.5")
        assert +amount is amount
        assert abs(amount) == Money("2.5")

    def test_truthiness(self) -> None:
        """Zero is falsy, everything else truthy."""
        assert not Money(0)
        assert not Money("0.00")
        assert Money("0.01")

    def test_str_and_repr(self) -> None:
        """str() is the plain string, repr() shows the exact Decimal."""
        assert str(Money("1.50")) == "1.5"
        assert repr(Money("1234.56")) == "Money('1234.56')"

    def test_float_conversion(self) -> None:
        """float(), amount and to_number agree."""
        amount = Money("1.5")
        assert float(amount) == 1.5
        assert amount.amount == 1.5
        assert amount.to_number() == 1.5


class TestConversion:
    """to_string and to_json."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("100.00", "100"), ("0.30", "0.3"), ("1E+3", "1000"), (-5, "-5")],
    )
    def test_to_string(self, value: str | int, expected: str) -> None:
        """Plain decimal string without exponent or trailing zeros."""
        assert Money(value).to_string() == expected

    def test_to_json_matches_to_string(self) -> None:
        """JSON representation is the plain string."""
        amount = Money("12.50")
        assert amount.to_json() == amount.to_string() == "12.5"


# ============================================================================
# Bound formatting
# ============================================================================


class TestBoundFormatting:
    """create_money factories and Money.format."""

    def test_format_with_explicit_formatter(self) -> None:
        """A bound formatter is used for rendering."""
        formatter = MoneyFormatter(default_locale=en_us)
        assert Money("1000.5", formatter=formatter).format() == "$1,000.50"

    def test_factory_binds_options_and_formatter(self) -> None:
        """create_money binds options that survive arithmetic."""
        formatter = MoneyFormatter(cache=FormatterCache(), default_locale=en_us)
        euro = create_money(FormatOptions(currency="EUR"), formatter=formatter)

        total = euro(100).add(euro("0.5")).multiply(2)
        assert total.options == FormatOptions(currency="EUR")
        assert total.format() == "\u20ac201.00"

    def test_per_call_options_override_bound_options(self) -> None:
        """Options passed to format() win over the bound ones."""
        formatter = MoneyFormatter(default_locale=en_us)
        dollars = create_money(FormatOptions(precision=2), formatter=formatter)
        assert dollars(1000.5).format(FormatOptions(precision=0)) == "$1,001"

    def test_format_to_parts_concatenates_to_format(self) -> None:
        """Parts join to the formatted string."""
        amount = Money("-1234.5", formatter=MoneyFormatter(default_locale=en_us))
        parts = amount.format_to_parts()
        assert "".join(part.value for part in parts) == amount.format() == "-$1,234.50"

    def test_format_to_components(self) -> None:
        """Components expose symbol, delimiters and symbol-less text."""
        amount = Money(1234.5, formatter=MoneyFormatter(default_locale=en_us))
        components = amount.format_to_components()
        assert components.currency == "$"
        assert components.group_delimiter == ","
        assert components.decimal_delimiter == "."
        assert components.integer == "1,234"
        assert components.fraction == ".50"
        assert components.formatted == "1,234.50"
        assert components.formatted_with_symbol == "$1,234.50"

    def test_factories_are_independent(self) -> None:
        """Two factories never share configuration."""
        formatter = MoneyFormatter(default_locale=en_us)
        usd = create_money(FormatOptions(currency="USD"), formatter=formatter)
        eur = create_money(FormatOptions(currency="EUR"), formatter=formatter)
        assert usd(1).format() == "$1.00"
        assert eur(1).format() == "\u20ac1.00"


class TestParse:
    """Money.parse raising wrapper."""

    def test_parse(self) -> None:
        """Formatted amounts parse back to Money."""
        assert Money.parse("$1,234.56", "en-US") == Money("1234.56")

    def test_parse_failure_raises(self) -> None:
        """Unparsable text raises MoneyParseError."""
        with pytest.raises(MoneyParseError) as exc_info:
            Money.parse("no digits here", "en-US")
        assert exc_info.value.input_value == "no digits here"
