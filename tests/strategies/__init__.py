"""Hypothesis strategies for priceparse property-based testing.

Usage:
    from tests.strategies import formatted_amounts, symbol_amount_inputs
"""

from .amount import (
    COMMON_ISO_CODES,
    LOCALE_CURRENCY_PAIRS,
    UNAMBIGUOUS_SYMBOLS,
    amount_values,
    formatted_amounts,
    html_fragments,
    symbol_amount_inputs,
)

__all__ = [
    "COMMON_ISO_CODES",
    "LOCALE_CURRENCY_PAIRS",
    "UNAMBIGUOUS_SYMBOLS",
    "amount_values",
    "formatted_amounts",
    "html_fragments",
    "symbol_amount_inputs",
]
