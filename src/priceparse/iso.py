"""ISO 3166/4217 lookups via Babel CLDR data.

Provides the validation set used to confirm that a 3-letter token is a real
currency (not an arbitrary acronym such as "TTC" or "VAT") and the default
currency of a territory. Results are cached; all returned values are
immutable and thread-safe.

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TypeIs

from babel.numbers import get_territory_currencies, list_currencies

from priceparse.constants import ISO_CURRENCY_CODE_LENGTH, MAX_LOCALE_CACHE_SIZE

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "TerritoryCode",
    "CurrencyCode",
    # Lookup functions
    "get_currency_codes",
    "get_territory_currency",
    # Type guards
    "is_valid_currency_code",
    # Cache management
    "clear_iso_cache",
]


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

type TerritoryCode = str
"""ISO 3166-1 alpha-2 territory code (e.g., 'US', 'FR', 'CA')."""

type CurrencyCode = str
"""ISO 4217 currency code (e.g., 'USD', 'EUR', 'CHF')."""


# ============================================================================
# CACHED LOOKUP FUNCTIONS
# ============================================================================


@lru_cache(maxsize=1)
def get_currency_codes() -> frozenset[CurrencyCode]:
    """Return every ISO 4217 code known to CLDR, historical codes included.

    Thread-safe. Computed once per process.
    """
    return frozenset(
        code for code in list_currencies()
        if len(code) == ISO_CURRENCY_CODE_LENGTH and code.isalpha() and code.isupper()
    )


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_territory_currency_impl(territory_upper: str) -> CurrencyCode | None:
    """Internal cached implementation for get_territory_currency.

    Args:
        territory_upper: Pre-uppercased ISO 3166-1 alpha-2 code.

    Returns:
        ISO 4217 currency code or None if unknown.
    """
    # Babel filters to currently active legal tender by default.
    currencies = get_territory_currencies(territory_upper)
    if not currencies:
        return None
    return currencies[0]


def get_territory_currency(territory: str) -> CurrencyCode | None:
    """Get the native currency of a territory.

    Args:
        territory: ISO 3166-1 alpha-2 code. Case-insensitive.

    Returns:
        First active legal tender ISO 4217 code, or None if unknown.

    Example:
        >>> get_territory_currency("ca")
        'CAD'
        >>> get_territory_currency("YY") is None
        True

    Thread-safe. Result cached per normalized territory code.
    """
    return _get_territory_currency_impl(territory.upper())


# ============================================================================
# TYPE GUARDS (PEP 742)
# ============================================================================


def is_valid_currency_code(value: str) -> TypeIs[CurrencyCode]:
    """Check if string is a recognized ISO 4217 currency code.

    Matching is exact: "usd" is not a currency code.

    Args:
        value: String to check.

    Returns:
        True if value is a known ISO 4217 currency code.
    """
    if not isinstance(value, str) or len(value) != ISO_CURRENCY_CODE_LENGTH:
        return False
    return value in get_currency_codes()


# ============================================================================
# CACHE MANAGEMENT
# ============================================================================


def clear_iso_cache() -> None:
    """Clear all ISO lookup caches.

    Thread-safe.
    """
    get_currency_codes.cache_clear()
    _get_territory_currency_impl.cache_clear()
