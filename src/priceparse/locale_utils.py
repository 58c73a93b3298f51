"""Locale hint handling for currency disambiguation.

Centralizes how caller-supplied locale hints are normalized and mapped to a
native currency. Hints only ever influence currency resolution; numeric
parsing is locale-independent.

Accepted hint forms:
- BCP-47 tags ("fr-FR", "zh-Hans-CN")
- POSIX identifiers, with or without encoding suffix ("en_CA", "de_CH.UTF-8")
- Bare ISO 3166-1 alpha-2 region codes in upper case ("CA", "JP")
- babel.Locale instances

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging

from babel import Locale
from babel.core import parse_locale

from priceparse.constants import MAX_LOCALE_CACHE_SIZE
from priceparse.iso import CurrencyCode, TerritoryCode, get_territory_currency

__all__ = [
    "LocaleHint",
    "clear_locale_cache",
    "get_locale_currency",
    "get_locale_territory",
    "locale_label",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

type LocaleHint = str | Locale | None
"""Caller-supplied region/language identifier, or None for no hint."""

_REGION_CODE_LENGTH = 2


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 or POSIX locale code to Babel's POSIX form.

    Strips surrounding whitespace, the encoding suffix (".UTF-8") and the
    modifier ("@euro"), then replaces hyphens with underscores.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("en")
        'en'
    """
    code = locale_code.strip().split(".")[0].split("@")[0]
    return code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _territory_from_code(normalized: str) -> TerritoryCode | None:
    """Internal cached territory extraction for a normalized locale string."""
    if not normalized:
        return None
    if len(normalized) == _REGION_CODE_LENGTH and normalized.isalpha() and normalized.isupper():
        return normalized
    try:
        # (language, territory, script, variant[, modifier])
        return parse_locale(normalized)[1]
    except ValueError as e:
        logger.debug("Ignoring malformed locale hint '%s': %s", normalized, e)
        return None


def get_locale_territory(locale_hint: LocaleHint) -> TerritoryCode | None:
    """Extract the ISO 3166-1 region of a locale hint.

    Language-only hints ("fr") carry no region and yield None.

    Example:
        >>> get_locale_territory("fr-FR")
        'FR'
        >>> get_locale_territory("CA")
        'CA'
        >>> get_locale_territory("fr") is None
        True
    """
    if locale_hint is None:
        return None
    if isinstance(locale_hint, Locale):
        return locale_hint.territory
    if not isinstance(locale_hint, str):
        logger.debug("Ignoring locale hint of type %s", type(locale_hint).__name__)  # type: ignore[unreachable]
        return None
    return _territory_from_code(normalize_locale(locale_hint))


def get_locale_currency(locale_hint: LocaleHint) -> CurrencyCode | None:
    """Resolve the native currency of a locale hint.

    Returns None when the hint is absent, carries no region, or names a
    region without an active legal tender currency ("xx_YY").

    Example:
        >>> get_locale_currency("en_CA")
        'CAD'
        >>> get_locale_currency(Locale("fr", "FR"))
        'EUR'
    """
    territory = get_locale_territory(locale_hint)
    if territory is None:
        return None
    currency = get_territory_currency(territory)
    if currency is None:
        logger.debug("No native currency for territory '%s'", territory)
    return currency


def locale_label(locale_hint: LocaleHint) -> str:
    """Render a locale hint for diagnostics ("" when absent)."""
    if locale_hint is None:
        return ""
    return str(locale_hint)


def clear_locale_cache() -> None:
    """Clear the locale hint cache.

    Thread-safe.
    """
    _territory_from_code.cache_clear()
