"""Amount and currency extraction from noisy scraped text.

- Functions NEVER raise exceptions on malformed input
- Lower-level functions return (result, errors) tuples
- parse_amount() is the single-call surface returning AmountResult | None

Pipeline:
    raw text -> sanitize -> {normalize_numeric, detect_currency} -> AmountResult

Public API:
    Extraction Functions:
        parse_amount - Returns AmountResult | None
        extract_amount - Returns tuple[AmountResult | None, tuple[AmountParseError, ...]]

    Pipeline Stages:
        sanitize - HTML fragment to plain text
        normalize_numeric - Text to canonical literal (rightmost separator wins)
        parse_number - Returns tuple[float | None, tuple[AmountParseError, ...]]
        detect_currency - ISO token > symbol > locale hint precedence

    Type Guards:
        is_valid_amount - TypeIs guard for AmountResult (not None, finite)
        is_valid_number - TypeIs guard for finite float

Example:
    >>> from priceparse.parsing import parse_amount
    >>> parse_amount("  <span>16,85&nbsp;€</span>  ", "fr_FR")
    AmountResult(amount=16.85, currency_code='EUR')

Python 3.13+. Uses Babel CLDR data for currency validation and locale regions.
"""

from .amount import AmountResult, extract_amount, parse_amount
from .currency import detect_currency, resolve_symbol
from .guards import is_valid_amount, is_valid_number
from .numbers import normalize_numeric, parse_number
from .text import sanitize

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Result type
    "AmountResult",
    # Extraction functions
    "extract_amount",
    "parse_amount",
    # Pipeline stages
    "sanitize",
    "normalize_numeric",
    "parse_number",
    "detect_currency",
    "resolve_symbol",
    # Type guards
    "is_valid_amount",
    "is_valid_number",
]
