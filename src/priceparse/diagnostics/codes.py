"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for amount extraction.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4100-4199: Amount extraction errors
    """

    # Amount extraction errors (4100-4199)
    EMPTY_INPUT = 4101
    NO_NUMERIC_CONTENT = 4102
    UNPARSABLE_NUMERIC_LITERAL = 4103
    INVALID_INPUT_TYPE = 4104
    INPUT_TOO_LARGE = 4105


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Messages never embed the scraped input itself; scraped pages can carry
    session tokens, so only derived facts (lengths, codes) appear here.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[NO_NUMERIC_CONTENT]: No digits found in 12 characters of input
              = help: Check that the selected element actually contains the price

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
