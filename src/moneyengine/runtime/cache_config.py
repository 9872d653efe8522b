"""Cache configuration for MoneyFormatter.

Provides a single frozen dataclass that bounds every memoisation table a
formatter owns.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from moneyengine.constants import (
    DEFAULT_FORMATTER_CACHE_SIZE,
    DEFAULT_PATTERN_CACHE_SIZE,
    DEFAULT_SYMBOL_CACHE_SIZE,
)

__all__ = ["CacheConfig"]


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Immutable configuration for formatter memoisation.

    All fields have sensible defaults; ``CacheConfig()`` with no arguments
    produces a usable configuration.

    Attributes:
        pattern_size: Maximum parsed templates, keyed by template text
            (default: 256).
        symbol_size: Maximum resolved currency symbols, keyed by
            (currency, locale) (default: 512).
        formatter_size: Maximum native formatters, keyed by
            (locale, currency, precision, grouping) (default: 256).
        enabled: False turns every table into a pass-through (default: True).

    Example:
        >>> from moneyengine import FormatterCache, MoneyFormatter
        >>> config = CacheConfig(pattern_size=32, formatter_size=16)
        >>> formatter = MoneyFormatter(cache=FormatterCache(config))
        >>> formatter.cache_stats()["patterns"]["maxsize"]
        32
    """

    pattern_size: int = DEFAULT_PATTERN_CACHE_SIZE
    symbol_size: int = DEFAULT_SYMBOL_CACHE_SIZE
    formatter_size: int = DEFAULT_FORMATTER_CACHE_SIZE
    enabled: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If any table size is not positive.
        """
        if self.pattern_size <= 0:
            msg = "pattern_size must be positive"
            raise ValueError(msg)
        if self.symbol_size <= 0:
            msg = "symbol_size must be positive"
            raise ValueError(msg)
        if self.formatter_size <= 0:
            msg = "formatter_size must be positive"
            raise ValueError(msg)
