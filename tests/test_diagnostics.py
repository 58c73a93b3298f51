"""Tests for the diagnostics package.

Tested components:
- DiagnosticCode enum
- Diagnostic dataclass and format_error()
- ErrorTemplate factory methods
- DiagnosticFormatter output formats
- AmountError / AmountParseError attributes

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from priceparse.diagnostics import (
    AmountError,
    AmountParseError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
)


class TestDiagnosticCode:
    """DiagnosticCode values."""

    def test_values_unique(self) -> None:
        """Every code has a distinct value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_extraction_range(self) -> None:
        """Extraction codes live in 4100-4199."""
        for code in DiagnosticCode:
            assert 4100 <= code.value <= 4199

    def test_known_values(self) -> None:
        """Published code numbers are stable."""
        assert DiagnosticCode.EMPTY_INPUT.value == 4101
        assert DiagnosticCode.NO_NUMERIC_CONTENT.value == 4102
        assert DiagnosticCode.UNPARSABLE_NUMERIC_LITERAL.value == 4103
        assert DiagnosticCode.INVALID_INPUT_TYPE.value == 4104
        assert DiagnosticCode.INPUT_TOO_LARGE.value == 4105


class TestDiagnostic:
    """Diagnostic dataclass."""

    def test_immutable(self) -> None:
        """Diagnostic is frozen."""
        diagnostic = ErrorTemplate.empty_input()
        with pytest.raises(AttributeError):
            diagnostic.message = "changed"  # type: ignore[misc]

    def test_defaults(self) -> None:
        """hint defaults to None, severity to error."""
        diagnostic = Diagnostic(code=DiagnosticCode.EMPTY_INPUT, message="empty")
        assert diagnostic.hint is None
        assert diagnostic.severity == "error"

    def test_str_is_message(self) -> None:
        """str() returns the message only."""
        diagnostic = ErrorTemplate.no_numeric_content(3)
        assert str(diagnostic) == diagnostic.message

    def test_format_error_rust_style(self) -> None:
        """format_error() renders severity, code and help line."""
        diagnostic = ErrorTemplate.no_numeric_content(12)
        assert diagnostic.format_error() == (
            "error[NO_NUMERIC_CONTENT]: No digits found in 12 characters of input\n"
            "  = help: Check that the selected element actually contains the price"
        )

    def test_format_error_without_hint(self) -> None:
        """No help line without a hint."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.EMPTY_INPUT, message="empty", severity="warning"
        )
        assert diagnostic.format_error() == "warning[EMPTY_INPUT]: empty"


class TestErrorTemplate:
    """ErrorTemplate factories."""

    def test_empty_input(self) -> None:
        """EMPTY_INPUT template."""
        diagnostic = ErrorTemplate.empty_input()
        assert diagnostic.code == DiagnosticCode.EMPTY_INPUT
        assert diagnostic.hint

    def test_no_numeric_content(self) -> None:
        """NO_NUMERIC_CONTENT template carries the length."""
        diagnostic = ErrorTemplate.no_numeric_content(7)
        assert diagnostic.code == DiagnosticCode.NO_NUMERIC_CONTENT
        assert "7 characters" in diagnostic.message

    def test_unparsable_numeric_literal(self) -> None:
        """UNPARSABLE_NUMERIC_LITERAL template carries length and reason."""
        diagnostic = ErrorTemplate.unparsable_numeric_literal(9, "value out of range")
        assert diagnostic.code == DiagnosticCode.UNPARSABLE_NUMERIC_LITERAL
        assert "9 characters" in diagnostic.message
        assert diagnostic.message.endswith("value out of range")

    def test_invalid_input_type(self) -> None:
        """INVALID_INPUT_TYPE template names the type."""
        diagnostic = ErrorTemplate.invalid_input_type("bytes")
        assert diagnostic.code == DiagnosticCode.INVALID_INPUT_TYPE
        assert "bytes" in diagnostic.message

    def test_input_too_large(self) -> None:
        """INPUT_TOO_LARGE template carries both lengths."""
        diagnostic = ErrorTemplate.input_too_large(2_000_000, 1_048_576)
        assert diagnostic.code == DiagnosticCode.INPUT_TOO_LARGE
        assert "2000000" in diagnostic.message
        assert "1048576" in diagnostic.message

    @given(st.integers(min_value=0, max_value=10_000_000))
    def test_messages_mention_length_only(self, length: int) -> None:
        """Templates format any length."""
        assert str(length) in ErrorTemplate.no_numeric_content(length).message


class TestDiagnosticFormatter:
    """DiagnosticFormatter output formats."""

    def test_default_is_rust(self) -> None:
        """Default output matches format_error()."""
        diagnostic = ErrorTemplate.empty_input()
        assert DiagnosticFormatter().format(diagnostic) == diagnostic.format_error()

    def test_simple(self) -> None:
        """SIMPLE renders a single line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        result = formatter.format(ErrorTemplate.empty_input())
        assert result == "EMPTY_INPUT: Input is empty or contains only markup and whitespace"

    def test_json(self) -> None:
        """JSON renders a parseable object."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.no_numeric_content(4)))
        assert data["code"] == "NO_NUMERIC_CONTENT"
        assert data["code_value"] == 4102
        assert data["severity"] == "error"
        assert "hint" in data

    def test_json_without_hint(self) -> None:
        """JSON omits an absent hint."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        diagnostic = Diagnostic(code=DiagnosticCode.EMPTY_INPUT, message="empty")
        assert "hint" not in json.loads(formatter.format(diagnostic))

    def test_format_all(self) -> None:
        """format_all() joins with blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        result = formatter.format_all(
            [ErrorTemplate.empty_input(), ErrorTemplate.invalid_input_type("int")]
        )
        assert result.count("\n\n") == 1
        assert result.startswith("EMPTY_INPUT")

    def test_output_format_values(self) -> None:
        """OutputFormat accepts its string values."""
        assert OutputFormat("json") is OutputFormat.JSON


class TestAmountErrors:
    """AmountError hierarchy."""

    def test_string_message(self) -> None:
        """Plain messages carry no diagnostic."""
        error = AmountError("boom")
        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_diagnostic_message(self) -> None:
        """Diagnostic messages render Rust-style."""
        diagnostic = ErrorTemplate.empty_input()
        error = AmountError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_parse_error_attributes(self) -> None:
        """AmountParseError keeps context fields."""
        error = AmountParseError(
            ErrorTemplate.no_numeric_content(5),
            input_length=5,
            locale_code="fr_FR",
            parse_type="number",
        )
        assert isinstance(error, AmountError)
        assert error.input_length == 5
        assert error.locale_code == "fr_FR"
        assert error.parse_type == "number"

    def test_parse_error_defaults(self) -> None:
        """Context fields default to empty values."""
        error = AmountParseError("failed")
        assert error.input_length == 0
        assert error.locale_code == ""
        assert error.parse_type == ""

    def test_raisable(self) -> None:
        """Errors can be raised by callers that prefer exceptions."""
        with pytest.raises(AmountError, match="EMPTY_INPUT"):
            raise AmountParseError(ErrorTemplate.empty_input())
