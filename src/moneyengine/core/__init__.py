"""Core utilities shared across money, template and runtime layers.

This package provides the decimal arithmetic adapter that every other
layer depends on. Isolating it here keeps the dependency graph clean:

    core <- template <- runtime <- money

Python 3.13+.
"""

from .arithmetic import (
    NumericInput,
    add,
    calculate_discount,
    compare,
    divide,
    multiply,
    normalize_rate,
    round_decimal,
    subtract,
    to_decimal,
    to_plain_string,
)

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
