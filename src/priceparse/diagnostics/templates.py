"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Templates receive only derived facts about the input (its length), never
    the scraped text itself.
    """

    @staticmethod
    def empty_input() -> Diagnostic:
        """Input was None, empty, or vanished during sanitization.

        Returns:
            Diagnostic for EMPTY_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_INPUT,
            message="Input is empty or contains only markup and whitespace",
            hint="Check that the scraped element is not an empty placeholder",
        )

    @staticmethod
    def no_numeric_content(input_length: int) -> Diagnostic:
        """Sanitized text holds no digit.

        Args:
            input_length: Length of the sanitized text

        Returns:
            Diagnostic for NO_NUMERIC_CONTENT
        """
        msg = f"No digits found in {input_length} characters of input"
        return Diagnostic(
            code=DiagnosticCode.NO_NUMERIC_CONTENT,
            message=msg,
            hint="Check that the selected element actually contains the price",
        )

    @staticmethod
    def unparsable_numeric_literal(input_length: int, reason: str) -> Diagnostic:
        """Canonical literal could not be turned into a finite float.

        Args:
            input_length: Length of the sanitized text
            reason: The reason conversion failed

        Returns:
            Diagnostic for UNPARSABLE_NUMERIC_LITERAL
        """
        msg = f"Malformed numeric literal in {input_length} characters of input: {reason}"
        return Diagnostic(
            code=DiagnosticCode.UNPARSABLE_NUMERIC_LITERAL,
            message=msg,
            hint="Repeated or misplaced sign characters cannot form a number",
        )

    @staticmethod
    def invalid_input_type(type_name: str) -> Diagnostic:
        """Caller passed something other than str or None.

        Args:
            type_name: Name of the received type

        Returns:
            Diagnostic for INVALID_INPUT_TYPE
        """
        msg = f"Expected string input, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INPUT_TYPE,
            message=msg,
            hint="Pass the element's text or HTML as a string",
        )

    @staticmethod
    def input_too_large(input_length: int, max_length: int) -> Diagnostic:
        """Input exceeds the accepted length.

        Args:
            input_length: Length of the raw input
            max_length: Configured maximum length

        Returns:
            Diagnostic for INPUT_TOO_LARGE
        """
        msg = f"Input of {input_length} characters exceeds the {max_length} character limit"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LARGE,
            message=msg,
            hint="Pass only the element that holds the price, not the whole page",
        )
