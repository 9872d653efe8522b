"""Deterministic locale providers for formatter tests."""

from collections.abc import Callable


def en_us() -> str:
    """Locale provider pinned to en-US."""
    return "en-US"


def fixed_locale(tag: str) -> Callable[[], str]:
    """Locale provider that always returns tag."""

    def provider() -> str:
        return tag

    return provider
