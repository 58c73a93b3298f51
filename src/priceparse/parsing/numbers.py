"""Locale-independent numeric normalization.

- normalize_numeric() reduces text to a canonical literal or returns None
- parse_number() returns tuple[float | None, tuple[AmountParseError, ...]]
- Functions NEVER raise exceptions - errors are returned in tuple

The decimal separator is the rightmost comma or dot. This single rule
handles mixed real-world punctuation ("1'234.56", "1 000,50", "1,234,56")
that locale-pattern parsers reject, so no locale is consulted here.

Thread-safe. Pure functions over module-level compiled patterns.

Python 3.13+.
"""

import math
import re

from priceparse.diagnostics import AmountParseError
from priceparse.diagnostics.templates import ErrorTemplate

__all__ = ["normalize_numeric", "parse_number"]

# Digits, the two decimal candidates, apostrophe grouping, and signs.
_NON_NUMERIC = re.compile(r"[^0-9.,'+\-]")
_NON_INTEGER = re.compile(r"[^0-9+\-]")
_NON_DIGIT = re.compile(r"[^0-9]")
_DIGIT = re.compile(r"[0-9]")

_RIGHT_SINGLE_QUOTE = "\u2019"


def normalize_numeric(text: str) -> str | None:
    """Reduce sanitized text to a canonical numeric literal.

    Everything outside ``0-9 . , ' + -`` is discarded, including currency
    symbols, letters and spaces. The rightmost ``,`` or ``.`` becomes the
    decimal point; every other comma, dot and apostrophe is a grouping
    separator and is dropped. Empty integer or fractional parts default
    to "0".

    Sign characters are kept verbatim in the integer part, so malformed
    input such as "--12,50" yields a literal float() will reject.

    Args:
        text: Sanitized text (see priceparse.parsing.text.sanitize)

    Returns:
        Canonical literal such as "1234.56", or None if no digit remains

    Examples:
        >>> normalize_numeric("1'234.56 CHF")
        '1234.56'
        >>> normalize_numeric("1,234,56 €")
        '1234.56'
        >>> normalize_numeric(".99")
        '0.99'
        >>> normalize_numeric("12.")
        '12.0'
        >>> normalize_numeric("1 000")
        '1000.0'
        >>> normalize_numeric("€") is None
        True
    """
    numeric = _NON_NUMERIC.sub("", text.replace(_RIGHT_SINGLE_QUOTE, "'"))
    if not _DIGIT.search(numeric):
        return None

    decimal_index = max(numeric.rfind(","), numeric.rfind("."))
    if decimal_index < 0:
        integer_part = _NON_INTEGER.sub("", numeric)
        fractional_part = ""
    else:
        integer_part = _NON_INTEGER.sub("", numeric[:decimal_index])
        fractional_part = _NON_DIGIT.sub("", numeric[decimal_index + 1:])

    return f"{integer_part or '0'}.{fractional_part or '0'}"


def parse_number(
    text: str,
    locale_code: str = "",
) -> tuple[float | None, tuple[AmountParseError, ...]]:
    """Parse sanitized text to a float using the rightmost-separator rule.

    Args:
        text: Sanitized text
        locale_code: Locale label recorded on errors only; it never
            changes how the number is read

    Returns:
        Tuple of (result, errors):
        - result: Finite float, or None if parsing failed
        - errors: Tuple of AmountParseError (empty tuple on success)

    Examples:
        >>> result, errors = parse_number("$1,234.56")
        >>> result
        1234.56
        >>> errors
        ()

        >>> result, errors = parse_number("--12,50 €")
        >>> result is None
        True
        >>> errors[0].diagnostic.code.name
        'UNPARSABLE_NUMERIC_LITERAL'

    Thread Safety:
        Thread-safe. No shared mutable state.
    """
    literal = normalize_numeric(text)
    if literal is None:
        diagnostic = ErrorTemplate.no_numeric_content(len(text))
        error = AmountParseError(
            diagnostic, input_length=len(text), locale_code=locale_code, parse_type="number"
        )
        return (None, (error,))

    try:
        value = float(literal)
    except ValueError:
        diagnostic = ErrorTemplate.unparsable_numeric_literal(
            len(text), "sign characters out of place"
        )
        error = AmountParseError(
            diagnostic, input_length=len(text), locale_code=locale_code, parse_type="number"
        )
        return (None, (error,))

    if not math.isfinite(value):
        diagnostic = ErrorTemplate.unparsable_numeric_literal(len(text), "value out of range")
        error = AmountParseError(
            diagnostic, input_length=len(text), locale_code=locale_code, parse_type="number"
        )
        return (None, (error,))

    return (value, ())
