"""Exception hierarchy with structured diagnostics.

Extraction functions return these errors in tuples instead of raising them.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["AmountError", "AmountParseError"]


class AmountError(Exception):
    """Base exception for all priceparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize AmountError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class AmountParseError(AmountError):
    """Amount extraction failed.

    Returned (not raised) by parse_number() and extract_amount().

    Attributes:
        input_length: Length of the text that failed to parse
        locale_code: The locale hint supplied by the caller, as a string
        parse_type: Stage that failed ('text', 'number')

    Example:
        >>> result, errors = extract_amount("--12,50 €", "fr_FR")
        >>> errors[0].diagnostic.code
        <DiagnosticCode.UNPARSABLE_NUMERIC_LITERAL: 4103>
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_length: int = 0,
        locale_code: str = "",
        parse_type: str = "",
    ) -> None:
        """Initialize AmountParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_length: Length of the text that failed to parse
            locale_code: The locale hint used for the call
            parse_type: Stage that failed ('text', 'number')
        """
        super().__init__(message)
        self.input_length = input_length
        self.locale_code = locale_code
        self.parse_type = parse_type
