"""Shared constants for priceparse.

Centralized, read-only tables consulted by the sanitizer and the currency
detector. Everything here is built once at import time and wrapped in an
immutable container; no code path mutates these after startup.

Constants are grouped by domain:
- HTML entities: Fixed decode table for scraped markup
- Currency tables: Symbol candidates and global tie-break priority
- Cache limits: Memory bounds for memoized Babel lookups
- Input limits: Upper bound on accepted text length

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # HTML entities
    "HTML_ENTITIES",
    # Currency tables
    "CURRENCY_SYMBOLS",
    "GLOBAL_CURRENCY_PRIORITY",
    "ISO_CURRENCY_CODE_LENGTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Input limits
    "MAX_INPUT_LENGTH",
]

# ============================================================================
# HTML ENTITIES
# ============================================================================

HTML_ENTITIES: MappingProxyType[str, str] = MappingProxyType({
    # Markup
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&quot;": '"',
    "&apos;": "'",
    # ISO-8859-1
    "&nbsp;": " ",
    "&iexcl;": "¡",
    "&copy;": "©",
    "&reg;": "®",
    "&trade;": "™",
    "&times;": "×",
    "&divide;": "÷",
    # Currencies
    "&cent;": "¢",
    "&pound;": "£",
    "&yen;": "¥",
    "&euro;": "€",
    "&dollar;": "$",
    "&franc;": "₣",
    "&lira;": "₤",
    "&baht;": "฿",
    "&riel;": "៛",
    "&tugrik;": "₮",
    "&tenge;": "₸",
    "&won;": "₩",
    "&kip;": "₭",
    "&rupee;": "₹",
    "&peso;": "₱",
})

# ============================================================================
# CURRENCY TABLES
# ============================================================================

# ISO 4217 currency codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# Symbol -> ordered ISO 4217 candidates sharing that symbol.
# Declaration order is the scan order used by the currency detector.
CURRENCY_SYMBOLS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "$": ("USD", "EUR", "CAD", "AUD", "NZD", "SGD", "HKD", "MXN"),
    "€": ("EUR",),  # Euro sign
    "£": ("GBP",),  # Pound sign
    "¥": ("JPY", "CNY"),  # Yen/Yuan sign
    "₹": ("INR",),  # Indian Rupee
    "₩": ("KRW",),  # Korean Won
    "₽": ("RUB",),  # Russian Ruble
    "₺": ("TRY",),  # Turkish Lira
    "₫": ("VND",),  # Vietnamese Dong
    "₪": ("ILS",),  # Israeli New Shekel
    "₱": ("PHP",),  # Philippine Peso
    "₴": ("UAH",),  # Ukrainian Hryvnia
    "₸": ("KZT",),  # Kazakhstani Tenge
    "₮": ("MNT",),  # Mongolian Tugrik
    "₦": ("NGN",),  # Nigerian Naira
    "₵": ("GHS",),  # Ghanaian Cedi
    "₲": ("PYG",),  # Paraguayan Guarani
    "₾": ("GEL",),  # Georgian Lari
    "₼": ("AZN",),  # Azerbaijani Manat
    "฿": ("THB",),  # Thai Baht
    "៛": ("KHR",),  # Cambodian Riel
})

# Tie-break when the locale hint does not disambiguate a shared symbol.
GLOBAL_CURRENCY_PRIORITY: tuple[str, ...] = (
    "USD",
    "EUR",
    "GBP",
    "JPY",
    "CNY",
    "CAD",
    "AUD",
    "CHF",
    "INR",
)

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached locale and territory lookups.
# 128 covers typical multi-region collectors (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum accepted input length in characters (1 MiB).
# Prevents DoS via unbounded scraped payloads; real price fragments are tiny.
MAX_INPUT_LENGTH: int = 1024 * 1024
