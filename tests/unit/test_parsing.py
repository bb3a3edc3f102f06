"""Unit tests for the input line grammar."""

from __future__ import annotations

import logging

import pytest

from fieldwire import (
    BlobValue,
    DecimalValue,
    DuplicateFieldNumber,
    FieldNumberTooLarge,
    FieldwireError,
    FixedPointNumber,
    LongValue,
    MalformedDecimal,
    MalformedText,
    MalformedHex,
    MalformedLine,
    NumberParseFailure,
    NumericOverflow,
    ShortValue,
    TextValue,
    UnknownType,
    parse_decimal,
    parse_field,
    parse_value,
    read_message,
    serialize,
)


class TestParseDecimal:
    """Test decimal literal parsing."""

    def test_fraction(self) -> None:
        """Test fractional digits are appended and counted."""
        assert parse_decimal("12.345") == FixedPointNumber(digits="12345", precision=3)

    def test_integer(self) -> None:
        """Test a literal without a point has precision 0."""
        assert parse_decimal("42") == FixedPointNumber(digits="42", precision=0)

    def test_leading_zeros_kept(self) -> None:
        """Test digits are carried through without normalization."""
        assert parse_decimal("007.50") == FixedPointNumber(digits="00750", precision=2)

    def test_empty_parts(self) -> None:
        """Test a point may start or end the literal."""
        assert parse_decimal("12.") == FixedPointNumber(digits="12", precision=0)
        assert parse_decimal(".5") == FixedPointNumber(digits="5", precision=1)

    def test_two_points(self) -> None:
        """Test more than one point is rejected."""
        with pytest.raises(MalformedDecimal, match="more than one decimal point"):
            parse_decimal("1.2.3")

    @pytest.mark.parametrize("text", ["-1.5", "1,5", "1.5e3", "abc", "1 5", "+1.5"])
    def test_non_digit(self, text: str) -> None:
        """Test any non-digit character is rejected."""
        with pytest.raises(MalformedDecimal, match="not a digit string"):
            parse_decimal(text)

    @pytest.mark.parametrize("text", ["", "."])
    def test_no_digits(self, text: str) -> None:
        """Test a literal without digits is rejected."""
        with pytest.raises(MalformedDecimal, match="no digits"):
            parse_decimal(text)


class TestParseValue:
    """Test value parsing by type tag."""

    def test_short(self) -> None:
        """Test N values."""
        assert parse_value("N", "42") == ShortValue(value=42)
        assert parse_value("N", "65535") == ShortValue(value=65535)
        assert parse_value("N", "+7") == ShortValue(value=7)

    def test_short_overflow(self) -> None:
        """Test N values above 16 bits."""
        with pytest.raises(NumericOverflow, match="out of range"):
            parse_value("N", "65536")

    def test_long(self) -> None:
        """Test U values."""
        assert parse_value("U", "1000000") == LongValue(value=1000000)
        assert parse_value("U", "4294967295") == LongValue(value=4294967295)

    def test_long_overflow(self) -> None:
        """Test U values above 32 bits."""
        with pytest.raises(NumericOverflow):
            parse_value("U", "4294967296")

    @pytest.mark.parametrize("text", ["-1", "12a", "1.0", "0x10", "1_000", "4 2", ""])
    def test_not_numeric(self, text: str) -> None:
        """Test non-numeric integer payloads."""
        with pytest.raises(NumericOverflow, match="Invalid unsigned integer"):
            parse_value("N", text)

    def test_text(self) -> None:
        """Test S values are taken verbatim."""
        assert parse_value("S", "hello world") == TextValue(value="hello world")
        assert parse_value("S", "żółw") == TextValue(value="żółw")

    @pytest.mark.parametrize("text", ["caf\udce9", "\ud800", "ok \udcff end"])
    def test_text_not_utf8(self, text: str) -> None:
        """Test S values with lone surrogates are rejected at parse time."""
        with pytest.raises(MalformedText, match="not valid UTF-8"):
            parse_value("S", text)

    def test_hex(self) -> None:
        """Test H values decode case-insensitively."""
        assert parse_value("H", "deadbeef") == BlobValue(value=b"\xde\xad\xbe\xef")
        assert parse_value("H", "DeAdBeEf") == BlobValue(value=b"\xde\xad\xbe\xef")

    @pytest.mark.parametrize("text", ["abc", "zz", "de ad", "0xdead", "ąę"])
    def test_malformed_hex(self, text: str) -> None:
        """Test odd length, separators and non-hex characters."""
        with pytest.raises(MalformedHex):
            parse_value("H", text)

    def test_decimal(self) -> None:
        """Test D values delegate to parse_decimal."""
        assert parse_value("D", "12.345") == DecimalValue(
            value=FixedPointNumber(digits="12345", precision=3)
        )

    @pytest.mark.parametrize("tag", ["X", "n", "NN", "", "1"])
    def test_unknown_type(self, tag: str) -> None:
        """Test tags outside N/U/S/H/D."""
        with pytest.raises(UnknownType):
            parse_value(tag, "1")


class TestParseField:
    """Test whole-line parsing."""

    def test_simple_line(self) -> None:
        """Test number, tag and value are split."""
        field = parse_field("0 N 42")
        assert field.number == 0
        assert field.value == ShortValue(value=42)

    def test_whitespace_runs(self) -> None:
        """Test runs of whitespace separate tokens and collapse in the payload."""
        field = parse_field("  2\tS   hello    big \t world ")
        assert field.number == 2
        assert field.value == TextValue(value="hello big world")

    def test_large_number_parses(self) -> None:
        """Test the range check is left to message insertion."""
        assert parse_field("32 N 1").number == 32

    @pytest.mark.parametrize("line", ["", "0", "0 N", "   0    N   "])
    def test_too_few_tokens(self, line: str) -> None:
        """Test lines with fewer than 3 tokens."""
        with pytest.raises(MalformedLine):
            parse_field(line)

    @pytest.mark.parametrize("line", ["-1 N 1", "a N 1", "1.0 N 1", "0x1 N 1"])
    def test_bad_number(self, line: str) -> None:
        """Test field numbers that are not non-negative integers."""
        with pytest.raises(NumberParseFailure):
            parse_field(line)

    def test_value_errors_propagate(self) -> None:
        """Test value errors surface unchanged."""
        with pytest.raises(UnknownType):
            parse_field("0 X 1")
        with pytest.raises(NumericOverflow):
            parse_field("0 N 70000")
        with pytest.raises(MalformedHex):
            parse_field("0 H abc")
        with pytest.raises(MalformedDecimal):
            parse_field("0 D 1.2.3")


class TestReadMessage:
    """Test the line-reading loop."""

    def test_stops_at_blank_line(self) -> None:
        """Test lines after the blank terminator are ignored."""
        message = read_message(["0 N 42", "", "1 U 5"])
        assert message.numbers() == [0]

    def test_stops_at_single_character(self) -> None:
        """Test a one-character line also terminates input."""
        message = read_message(["0 N 42", "q", "1 U 5"])
        assert message.numbers() == [0]

    def test_end_of_input(self) -> None:
        """Test input may end without a terminator."""
        message = read_message(["0 N 42\n", "1 U 5\n"])
        assert message.numbers() == [0, 1]

    def test_errors_reported_and_skipped(self) -> None:
        """Test rejected lines reach the callback and reading continues."""
        errors: list[tuple[str, FieldwireError]] = []
        lines = ["5 N 1", "5 U 2", "32 N 1", "bad line here", "6 S ok", ""]

        message = read_message(lines, on_error=lambda line, err: errors.append((line, err)))

        assert message.numbers() == [5, 6]
        assert message[5] == ShortValue(value=1)
        assert [line for line, _ in errors] == ["5 U 2", "32 N 1", "bad line here"]
        assert isinstance(errors[0][1], DuplicateFieldNumber)
        assert isinstance(errors[1][1], FieldNumberTooLarge)
        assert isinstance(errors[2][1], NumberParseFailure)

    def test_undecodable_text_skipped(self) -> None:
        """Test a surrogate-escaped text line is skipped and its neighbours kept."""
        errors: list[tuple[str, FieldwireError]] = []

        message = read_message(
            ["0 S caf\udce9", "1 N 5", ""],
            on_error=lambda line, err: errors.append((line, err)),
        )

        assert message.numbers() == [1]
        assert serialize(message) == b"\x02\x00\x00\x00\x05\x00"
        assert len(errors) == 1
        assert isinstance(errors[0][1], MalformedText)

    def test_errors_logged_without_callback(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test rejected lines are logged as warnings by default."""
        with caplog.at_level(logging.WARNING, logger="fieldwire.parsing"):
            message = read_message(["0 N 1", "0 N 2", ""])

        assert len(message) == 1
        assert "Skipping line '0 N 2'" in caplog.text
