"""Locale utilities: parsing, BCP-47/POSIX conversion and detection.

Centralizes locale handling used throughout the codebase. Every locale
entering the formatter is parsed once into LocaleParts; the parts drive both
the template/symbol fallback chain and the Babel locale used for native
formatting.

Accepted inputs:
    - BCP-47 tags: "tr-TR", "zh-Hant-TW"
    - POSIX ids: "tr_TR", "de_DE.UTF-8" (encoding suffix stripped)
    - Bare languages: "tr", "de"
    - Bare country codes (two uppercase letters): "TR", "AZ"

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from moneyengine.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE, WILDCARD_LOCALE_KEYS
from moneyengine.diagnostics import ErrorTemplate, InvalidLocaleError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleParts",
    "get_babel_locale",
    "get_system_locale",
    "likely_language",
    "likely_territory",
    "normalize_locale",
    "parse_locale",
    "to_language_tag",
]

_LOCALE_PATTERN = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})"
    r"(?:[-_](?P<script>[A-Za-z]{4}))?"
    r"(?:[-_](?P<region>[A-Za-z]{2}|\d{3}))?$"
)

_PSEUDO_LOCALES = frozenset({"C", "POSIX", ""})


@dataclass(frozen=True, slots=True)
class LocaleParts:
    """Locale split into fallback granularities.

    Attributes:
        language: Lowercase language subtag ("tr")
        country: Uppercase region subtag ("TR"), empty if the locale has none
        culture: Full canonical tag ("tr-TR"); for bare codes, the code itself
        script: Title-case script subtag ("Hant"), empty if absent
    """

    language: str
    country: str
    culture: str
    script: str = ""

    @property
    def lookup_keys(self) -> tuple[str, ...]:
        """Keys for locale-keyed maps, most specific first.

        Order: culture -> country -> language -> "*" -> "default".
        The POSIX spelling of the culture is tried right after the BCP-47
        spelling so maps keyed by "tr_TR" also match.
        """
        candidates = (
            self.culture,
            self.culture.replace("-", "_"),
            self.country,
            self.language,
            *WILDCARD_LOCALE_KEYS,
        )
        return tuple(dict.fromkeys(key for key in candidates if key))

    @property
    def babel_identifier(self) -> str:
        """POSIX identifier for Babel ("tr_TR", "zh_Hant_TW", "tr")."""
        return "_".join(part for part in (self.language, self.script, self.country) if part)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def to_language_tag(locale_code: str) -> str:
    """Convert POSIX locale id to BCP-47, dropping any encoding suffix.

    Example:
        >>> to_language_tag("de_DE.UTF-8")
        'de-DE'
    """
    return locale_code.split(".")[0].split("@")[0].replace("_", "-")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def parse_locale(locale_code: str) -> LocaleParts:
    """Parse a locale identifier into language, country and culture.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: BCP-47 tag, POSIX id, bare language or bare country code

    Returns:
        LocaleParts for the identifier

    Raises:
        InvalidLocaleError: If the identifier is not a well-formed tag

    Examples:
        >>> parse_locale("tr-TR")
        LocaleParts(language='tr', country='TR', culture='tr-TR', script='')
        >>> parse_locale("TR").language  # country code -> likely language
        'tr'
        >>> parse_locale("fr").country
        ''
    """
    if not isinstance(locale_code, str):
        raise InvalidLocaleError(
            ErrorTemplate.invalid_locale(locale_code), locale_code=locale_code
        )

    match = _LOCALE_PATTERN.match(to_language_tag(locale_code.strip()))
    if match is None:
        raise InvalidLocaleError(
            ErrorTemplate.invalid_locale(locale_code), locale_code=locale_code
        )

    raw_language = match["language"]
    script = (match["script"] or "").title()
    region = (match["region"] or "").upper()

    if not script and not region and len(raw_language) == 2 and raw_language.isupper():
        # Bare country code such as "TR": borrow the territory's likely language
        country = raw_language
        language = likely_language(country) or country.lower()
        return LocaleParts(language=language, country=country, culture=country)

    language = raw_language.lower()
    culture = "-".join(part for part in (language, script, region) if part)
    return LocaleParts(language=language, country=region, culture=culture, script=script)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _likely_subtags(key: str) -> tuple[str, ...]:
    """Look up CLDR likely subtags ("und_TR" -> ("tr", "Latn", "TR"))."""
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.core import get_global  # noqa: PLC0415

    value = get_global("likely_subtags").get(key)
    if not value:
        return ()
    return tuple(value.split("_"))


def likely_language(territory: str) -> str | None:
    """Most likely language spoken in a territory ("TR" -> "tr")."""
    subtags = _likely_subtags(f"und_{territory.upper()}")
    return subtags[0] if subtags and subtags[0] != "und" else None


def likely_territory(language: str) -> str | None:
    """Most likely territory for a language ("fr" -> "FR")."""
    subtags = _likely_subtags(language.lower())
    if len(subtags) < 2:
        return None
    region = subtags[-1]
    if (len(region) == 2 and region.isalpha()) or (len(region) == 3 and region.isdigit()):
        return region
    return None


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MONETARY environment variable (for currency formatting)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales. This is the default
    locale provider of MoneyFormatter; inject a different callable for
    deterministic behaviour.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en-US" as fallback.

    Returns:
        Detected locale as a BCP-47 tag (e.g. "de-DE")

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in _PSEUDO_LOCALES:
            tag = to_language_tag(system_locale)
            if _LOCALE_PATTERN.match(tag):
                return tag
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MONETARY", "LANG"):
        value = os.environ.get(var)
        if value:
            tag = to_language_tag(value)
            if tag not in _PSEUDO_LOCALES and _LOCALE_PATTERN.match(tag):
                return tag

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MONETARY, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE
