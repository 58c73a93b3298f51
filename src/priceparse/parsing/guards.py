"""Type guard functions for extraction result type narrowing.

Provides TypeIs-based type guards for mypy to narrow result types safely.
All guards accept None and return False.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from priceparse.parsing import extract_amount, is_valid_amount
    >>> result, errors = extract_amount("$1,234.56", "en_US")
    >>> if is_valid_amount(result):
    ...     # mypy knows result is AmountResult
    ...     cents = round(result.amount * 100)
"""

import math
from typing import TypeIs

from priceparse.parsing.amount import AmountResult

__all__ = ["is_valid_amount", "is_valid_number"]


def is_valid_number(value: float | None) -> TypeIs[float]:
    """Type guard: Check if parsed number is valid (not None/NaN/Infinity).

    Args:
        value: Float from parse_number() result tuple (may be None on error)

    Returns:
        True if value is a finite float, False otherwise
    """
    return value is not None and math.isfinite(value)


def is_valid_amount(value: AmountResult | None) -> TypeIs[AmountResult]:
    """Type guard: Check if extracted amount is present with a finite value.

    Safe to call directly on extract_amount() result without checking errors first.

    Args:
        value: AmountResult from extract_amount() or parse_amount() (may be None)

    Returns:
        True if value is an AmountResult with a finite amount, False otherwise
    """
    return value is not None and math.isfinite(value.amount)
