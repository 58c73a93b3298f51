"""Single-amount extraction from scraped HTML or plain text.

API:
- extract_amount() returns tuple[AmountResult | None, tuple[AmountParseError, ...]]
- parse_amount() returns AmountResult | None

Functions NEVER raise exceptions on malformed input. A currency alone is
never a result: without a parsable number the call fails even when a
symbol or ISO code was found.

Thread-safe. Each call is independent; no state survives between calls.

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from priceparse.constants import MAX_INPUT_LENGTH
from priceparse.diagnostics import AmountParseError
from priceparse.diagnostics.templates import ErrorTemplate
from priceparse.iso import CurrencyCode
from priceparse.locale_utils import LocaleHint, locale_label
from priceparse.parsing.currency import detect_currency
from priceparse.parsing.numbers import parse_number
from priceparse.parsing.text import sanitize

__all__ = ["AmountResult", "extract_amount", "parse_amount"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AmountResult:
    """Monetary amount with an optional ISO 4217 currency.

    Immutable, thread-safe, hashable. The amount is a float for lightweight
    display and heuristics, not for accounting arithmetic.

    Attributes:
        amount: Parsed value, always present
        currency_code: ISO 4217 code, or None if no currency signal existed
    """

    amount: float
    currency_code: CurrencyCode | None = None

    @property
    def has_currency(self) -> bool:
        """True if a currency was detected."""
        return self.currency_code is not None


def extract_amount(
    text: str | None,
    locale_hint: LocaleHint = None,
) -> tuple[AmountResult | None, tuple[AmountParseError, ...]]:
    """Extract one amount and its currency from HTML or plain text.

    Pipeline: sanitize (whitespace collapsed) → currency detection and
    numeric parsing, independently → combined result.

    Args:
        text: HTML or plain text containing a price, possibly None
        locale_hint: Optional locale used only for currency resolution

    Returns:
        Tuple of (result, errors):
        - result: AmountResult, or None if no number could be extracted
        - errors: Tuple of AmountParseError (empty tuple on success)

    Examples:
        >>> result, errors = extract_amount("<span>16,85&nbsp;&euro;</span>", "fr_FR")
        >>> result
        AmountResult(amount=16.85, currency_code='EUR')
        >>> errors
        ()

        >>> result, errors = extract_amount("   ", "fr_FR")
        >>> result is None
        True
        >>> errors[0].diagnostic.code.name
        'EMPTY_INPUT'
    """
    label = locale_label(locale_hint)

    # Runtime defense for untyped callers
    if text is not None and not isinstance(text, str):
        error = AmountParseError(  # type: ignore[unreachable]
            ErrorTemplate.invalid_input_type(type(text).__name__),
            locale_code=label,
            parse_type="text",
        )
        return (None, (error,))

    if text is not None and len(text) > MAX_INPUT_LENGTH:
        error = AmountParseError(
            ErrorTemplate.input_too_large(len(text), MAX_INPUT_LENGTH),
            input_length=len(text),
            locale_code=label,
            parse_type="text",
        )
        return (None, (error,))

    sanitized = sanitize(text, collapse_whitespace=True)
    if not sanitized:
        error = AmountParseError(
            ErrorTemplate.empty_input(),
            input_length=len(text or ""),
            locale_code=label,
            parse_type="text",
        )
        return (None, (error,))

    currency_code = detect_currency(sanitized, locale_hint)
    amount, errors = parse_number(sanitized, label)
    if amount is None:
        return (None, errors)

    return (AmountResult(amount=amount, currency_code=currency_code), ())


def parse_amount(text: str | None, locale_hint: LocaleHint = None) -> AmountResult | None:
    """Parse a monetary amount from HTML or text.

    Args:
        text: HTML or plain text containing a price
        locale_hint: Locale hint used as fallback for currency detection

    Returns:
        AmountResult, or None if parsing fails

    Examples:
        >>> parse_amount("$1,234.56", "en_CA")
        AmountResult(amount=1234.56, currency_code='CAD')
        >>> parse_amount("1'234.56 CHF", "fr_FR")
        AmountResult(amount=1234.56, currency_code='CHF')
        >>> parse_amount("€", "fr_FR") is None
        True
    """
    result, errors = extract_amount(text, locale_hint)
    for error in errors:
        # Codes and lengths only: scraped text may carry session tokens.
        code = error.diagnostic.code.name if error.diagnostic else "UNKNOWN"
        logger.debug(
            "Cannot parse amount (%s, %d chars, locale '%s')",
            code,
            error.input_length,
            error.locale_code,
        )
    return result
