"""Hypothesis strategies for MoneyEngine property-based testing.

Modules:
    money: Amounts, discount rates, precisions and locale-formatted inputs

Usage:
    from tests.strategies import money_amounts, discount_rates
"""

from .money import (
    FORMATTING_LOCALES,
    discount_rates,
    money_amounts,
    precisions,
    round_strategies,
    template_inputs,
)

__all__ = [
    "FORMATTING_LOCALES",
    "discount_rates",
    "money_amounts",
    "precisions",
    "round_strategies",
    "template_inputs",
]
