"""Shared test helpers."""

from .providers import en_us, fixed_locale

__all__ = ["en_us", "fixed_locale"]
