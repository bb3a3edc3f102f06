"""Text grammar for fieldwire input.

Each input line describes one field:

    <field-number> <type-tag> <value-text...>

The value text is every token after the tag, re-joined with single spaces,
so text payloads may contain internal whitespace (runs collapse to one space).
"""

from __future__ import annotations

import binascii
import logging
import re
from typing import Callable, Iterable, Optional

from .exceptions import (
    FieldwireError,
    MalformedDecimal,
    MalformedHex,
    MalformedLine,
    MalformedText,
    NumberParseFailure,
    NumericOverflow,
    UnknownType,
)
from .models.field import Field
from .models.fields import UINT16_MAX, UINT32_MAX
from .models.message import Message
from .models.values import (
    BlobValue,
    DecimalValue,
    FixedPointNumber,
    LongValue,
    ShortValue,
    TextValue,
    TypedValue,
)

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[str, FieldwireError], None]

_UNSIGNED = re.compile(r"\+?[0-9]+")
_DIGITS = re.compile(r"[0-9]*")


def parse_decimal(text: str) -> FixedPointNumber:
    """Parse a decimal literal such as ``12.345`` into a FixedPointNumber.

    Args:
        text: Digits with at most one decimal point

    Returns:
        FixedPointNumber with the fractional digits appended to the integer digits

    Raises:
        MalformedDecimal: If there is more than one point, a non-digit character,
            or no digits at all

    Example:
        >>> parse_decimal("12.345")
        FixedPointNumber(digits='12345', precision=3)
    """
    parts = text.split(".")
    if not all(_DIGITS.fullmatch(part) for part in parts):
        raise MalformedDecimal(f"Decimal {text!r} is not a digit string")
    if len(parts) > 2:
        raise MalformedDecimal(f"Decimal {text!r} has more than one decimal point")

    digits = "".join(parts)
    if not digits:
        raise MalformedDecimal(f"Decimal {text!r} has no digits")

    precision = len(parts[1]) if len(parts) == 2 else 0
    return FixedPointNumber(digits=digits, precision=precision)


def _parse_unsigned(text: str, max_value: int) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise NumericOverflow(f"Invalid unsigned integer {text!r}")
    value = int(text)
    if value > max_value:
        raise NumericOverflow(f"Value {value} out of range (max {max_value})")
    return value


def parse_value(tag: str, text: str) -> TypedValue:
    """Parse value text according to a one-character type tag.

    Args:
        tag: One of ``N``, ``U``, ``S``, ``H``, ``D``
        text: Value text

    Returns:
        The typed value

    Raises:
        UnknownType: If the tag is not recognised
        NumericOverflow: If an N/U value is not numeric or does not fit
        MalformedText: If an S value cannot be encoded as UTF-8
        MalformedHex: If an H value is not an even-length hex string
        MalformedDecimal: If a D value is not a decimal literal
    """
    if tag == "N":
        return ShortValue(value=_parse_unsigned(text, UINT16_MAX))
    if tag == "U":
        return LongValue(value=_parse_unsigned(text, UINT32_MAX))
    if tag == "S":
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as err:
            # Lone surrogates, e.g. from surrogateescape-decoded stdin
            raise MalformedText(f"Text {text!r} is not valid UTF-8: {err.reason}") from err
        return TextValue(value=text)
    if tag == "H":
        try:
            return BlobValue(value=binascii.unhexlify(text))
        except ValueError as err:
            # binascii.Error is a ValueError; non-ASCII input raises ValueError
            raise MalformedHex(f"Invalid hex string {text!r}: {err}") from err
    if tag == "D":
        return DecimalValue(value=parse_decimal(text))

    raise UnknownType(f"Unknown type tag {tag!r} (expected one of N, U, S, H, D)")


def parse_field(line: str) -> Field:
    """Parse one input line into a Field.

    Args:
        line: Text of the form ``<number> <tag> <value...>``

    Returns:
        The parsed field

    Raises:
        MalformedLine: If the line has fewer than 3 tokens
        NumberParseFailure: If the field number is not a non-negative integer
        ParseError: Any error raised by parse_value
    """
    tokens = line.split()
    if len(tokens) < 3:
        raise MalformedLine(f"Wrong field format: {line!r} (expected <number> <type> <value>)")

    if not _UNSIGNED.fullmatch(tokens[0]):
        raise NumberParseFailure(f"Invalid field number {tokens[0]!r}")
    number = int(tokens[0])

    value = parse_value(tokens[1], " ".join(tokens[2:]))
    return Field(number=number, value=value)


def read_message(lines: Iterable[str], on_error: Optional[ErrorCallback] = None) -> Message:
    """Build a message from input lines until a blank line.

    Reading stops at the first line that is empty or a single character after
    stripping, or at the end of ``lines``. A line that fails to parse or insert
    is skipped; the rest of the input is still read.

    Args:
        lines: Input lines (e.g. ``sys.stdin``)
        on_error: Called with (line, error) for each rejected line. If None,
            rejected lines are logged as warnings.

    Returns:
        Message holding every successfully inserted field

    Example:
        >>> message = read_message(["0 N 42", "1 U 1000000", ""])
        >>> message.numbers()
        [0, 1]
    """
    message = Message()
    for raw in lines:
        line = raw.strip()
        if len(line) <= 1:
            break
        try:
            message.insert(parse_field(line))
        except FieldwireError as err:
            if on_error is not None:
                on_error(line, err)
            else:
                logger.warning("Skipping line %r: %s", line, err)
    return message
