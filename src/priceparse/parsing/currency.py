"""Currency detection with locale-aware disambiguation.

API: detect_currency() returns an ISO 4217 code or None. Never raises.

Three signals are reconciled under a fixed precedence (first match wins):

1. Explicit ISO token: the first whole-word run of 3 uppercase letters,
   if CLDR knows it as a currency. Overrides symbol and locale entirely.
2. Currency symbol: the first symbol of CURRENCY_SYMBOLS present in the
   text, resolved among its candidates by
   a. the locale hint's native currency, when it is a candidate,
   b. else GLOBAL_CURRENCY_PRIORITY order,
   c. else the symbol's first candidate.
3. Locale hint: its native currency, or None without a usable hint.

Only the first 3-letter token is examined. When text names two different
ISO codes the first in scan order wins; a leading non-currency acronym
("TTC 12 €") falls through to symbol detection.

Thread-safe. Symbol tables are immutable; Babel lookups are memoized.

Python 3.13+.
"""

import re

from priceparse.constants import (
    CURRENCY_SYMBOLS,
    GLOBAL_CURRENCY_PRIORITY,
    ISO_CURRENCY_CODE_LENGTH,
)
from priceparse.iso import CurrencyCode, is_valid_currency_code
from priceparse.locale_utils import LocaleHint, get_locale_currency

__all__ = ["detect_currency", "resolve_symbol"]

_ISO_TOKEN_PATTERN = re.compile(rf"\b[A-Z]{{{ISO_CURRENCY_CODE_LENGTH}}}\b")


def _find_iso_code(text: str) -> CurrencyCode | None:
    match = _ISO_TOKEN_PATTERN.search(text)
    if match is None:
        return None
    token = match.group()
    return token if is_valid_currency_code(token) else None


def resolve_symbol(symbol: str, locale_currency: CurrencyCode | None) -> CurrencyCode | None:
    """Resolve a currency symbol to one of its candidate codes.

    Args:
        symbol: Key of CURRENCY_SYMBOLS (e.g., "$", "¥")
        locale_currency: Native currency of the locale hint, if any

    Returns:
        ISO 4217 code, or None if the symbol is not in the table

    Examples:
        >>> resolve_symbol("$", "CAD")
        'CAD'
        >>> resolve_symbol("$", "CHF")
        'USD'
        >>> resolve_symbol("¥", "CNY")
        'CNY'
        >>> resolve_symbol("₩", None)
        'KRW'
    """
    candidates = CURRENCY_SYMBOLS.get(symbol)
    if not candidates:
        return None

    if locale_currency is not None and locale_currency in candidates:
        return locale_currency

    for preferred in GLOBAL_CURRENCY_PRIORITY:
        if preferred in candidates:
            return preferred

    return candidates[0]


def detect_currency(text: str, locale_hint: LocaleHint = None) -> CurrencyCode | None:
    """Detect the ISO 4217 currency of a sanitized price string.

    Args:
        text: Sanitized text (see priceparse.parsing.text.sanitize)
        locale_hint: Optional locale used to disambiguate shared symbols
            and as a last-resort default

    Returns:
        ISO 4217 code, or None when no ISO token, no known symbol and no
        usable locale hint exist

    Examples:
        >>> detect_currency("100 USD", "fr_FR")
        'USD'
        >>> detect_currency("$1,234.56", "en_CA")
        'CAD'
        >>> detect_currency("1 000", "fr_FR")
        'EUR'
        >>> detect_currency("1000") is None
        True
    """
    iso_code = _find_iso_code(text)
    if iso_code is not None:
        return iso_code

    for symbol in CURRENCY_SYMBOLS:
        if symbol in text:
            return resolve_symbol(symbol, get_locale_currency(locale_hint))

    return get_locale_currency(locale_hint)
