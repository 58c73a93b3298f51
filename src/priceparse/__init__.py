"""priceparse - Monetary amount and currency extraction from scraped text.

Reads a single amount and, when determinable, its ISO 4217 currency from
noisy, possibly HTML-formatted fragments ("  <span>16,85&nbsp;€</span>  ",
"$1,234.56", "100 USD") regardless of the source site's locale, symbol
placement or separator style. Malformed input never raises.

Public API:
    parse_amount - Extract amount + currency, or None
    extract_amount - Same, returning (result, errors) tuple
    AmountResult - Immutable amount + optional currency code
    sanitize - HTML fragment to plain text
    normalize_numeric - Text to canonical numeric literal
    parse_number - Text to float, returning (result, errors) tuple
    detect_currency - ISO token > symbol > locale hint resolution
    is_valid_amount - TypeIs guard for extraction results

Exceptions:
    AmountError - Base exception class
    AmountParseError - Extraction failure (returned, not raised)

Submodules:
    priceparse.parsing - Extraction pipeline stages
    priceparse.diagnostics - Error codes, templates and formatting
    priceparse.iso - ISO 4217 validation and territory currencies (Babel CLDR)
    priceparse.locale_utils - Locale hint normalization
    priceparse.constants - Immutable entity and currency tables
"""

from .diagnostics import AmountError, AmountParseError
from .parsing import (
    AmountResult,
    detect_currency,
    extract_amount,
    is_valid_amount,
    normalize_numeric,
    parse_amount,
    parse_number,
    sanitize,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("priceparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AmountError",
    "AmountParseError",
    "AmountResult",
    "__version__",
    "detect_currency",
    "extract_amount",
    "is_valid_amount",
    "normalize_numeric",
    "parse_amount",
    "parse_number",
    "sanitize",
]
