"""Parse formatted money strings back into Money.

Functions return (result, errors) tuples; bad input is reported as data.

Python 3.13+. Uses Babel for CLDR data.
"""

from .money import parse_money

__all__ = ["parse_money"]
