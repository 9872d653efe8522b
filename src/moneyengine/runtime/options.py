"""Formatting options.

FormatOptions is explicit configuration passed per call, bound to a
MoneyFormatter, or bound to a Money factory; there is no process-wide
configuration store. Every field defaults to None ("unset") so option
layers merge cleanly:

    >>> base = FormatOptions(locale="tr-TR", precision=2)
    >>> base.merge(FormatOptions(precision=0))
    FormatOptions(locale='tr-TR', precision=0)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from moneyengine.enums import RoundStrategy

__all__ = ["FormatOptions"]


@dataclass(frozen=True, slots=True, repr=False)
class FormatOptions:
    """Immutable formatting options.

    Locale-keyed maps are consulted through the fallback chain
    culture -> country -> language -> "*" -> "default".

    Attributes:
        locale: Locale tag ("tr-TR", "de_DE", "fr", "TR"); None uses the
            formatter's default locale provider
        currency: ISO 4217 code; None derives it from the locale
        templates: Locale key -> template string
        overridden_symbols: Locale key -> literal symbol
        precision: Fraction digits; overrides template and currency digits
        rounding_strategy: Rounding applied before rendering (default NEAREST)
        trim_double_zeros: Drop an all-zero fraction ("$100.00" -> "$100");
            bool or locale key -> bool
        trim_padding_zeros: Drop one trailing zero ("$100.50" -> "$100.5");
            bool or locale key -> bool
        prevent_grouping: Disable thousands grouping
    """

    locale: str | None = None
    currency: str | None = None
    templates: Mapping[str, str] | None = None
    overridden_symbols: Mapping[str, str] | None = None
    precision: int | None = None
    rounding_strategy: RoundStrategy | None = None
    trim_double_zeros: bool | Mapping[str, bool] | None = None
    trim_padding_zeros: bool | Mapping[str, bool] | None = None
    prevent_grouping: bool | None = None

    def merge(self, other: FormatOptions | None) -> FormatOptions:
        """Shallow merge: fields set (not None) in other win."""
        if other is None:
            return self
        changes = {
            f.name: value
            for f in fields(other)
            if (value := getattr(other, f.name)) is not None
        }
        return replace(self, **changes) if changes else self

    def __repr__(self) -> str:
        set_fields = ", ".join(
            f"{f.name}={value!r}"
            for f in fields(self)
            if (value := getattr(self, f.name)) is not None
        )
        return f"FormatOptions({set_fields})"

