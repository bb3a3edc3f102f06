"""Exception hierarchy for fieldwire.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from FieldwireError for easy catching of any fieldwire-specific error.
"""

from __future__ import annotations


class FieldwireError(Exception):
    """Base exception for all fieldwire errors."""

    pass


class ParseError(FieldwireError):
    """Raised when an input line or value text cannot be parsed."""

    pass


class MalformedLine(ParseError):
    """Raised when a line has fewer than 3 whitespace-separated tokens."""

    pass


class NumberParseFailure(ParseError):
    """Raised when the field-number token is not a non-negative integer."""

    pass


class UnknownType(ParseError):
    """Raised when the type tag is not one of N, U, S, H, D."""

    pass


class NumericOverflow(ParseError):
    """Raised when an N/U payload is not numeric or does not fit its width.

    Examples:
        - "70000" for a 16-bit (N) value
        - "-1" or "12a" for any integer value
    """

    pass


class MalformedHex(ParseError):
    """Raised when an H payload has odd length or non-hex characters."""

    pass


class MalformedDecimal(ParseError):
    """Raised when a D payload has more than one point or non-digit segments."""

    pass


class MalformedText(ParseError):
    """Raised when an S payload cannot be encoded as UTF-8.

    Examples:
        - Lone surrogates left by undecodable input bytes ("caf\\udce9")
    """

    pass


class MessageError(FieldwireError):
    """Raised when inserting a field would break a message invariant.

    Attributes:
        number: The offending field number
    """

    def __init__(self, number: int, message: str) -> None:
        super().__init__(message)
        self.number = number


class FieldNumberTooLarge(MessageError):
    """Raised when a field number does not fit the presence bitmap (>= 32)."""

    def __init__(self, number: int) -> None:
        super().__init__(number, f"Field number {number} is too large (must be < 32)")


class DuplicateFieldNumber(MessageError):
    """Raised when a field number is already present in the message."""

    def __init__(self, number: int) -> None:
        super().__init__(number, f"Duplicate field number {number}")


class EncodeError(FieldwireError):
    """Raised when encoding a value or message fails."""

    pass


class PayloadTooLarge(EncodeError):
    """Raised when a payload does not fit its fixed-width length field.

    Examples:
        - Text or blob of 1000 bytes or more (3-digit length prefix)
        - Decimal precision above 255 (1-byte precision field)
    """

    pass


class DecodeError(FieldwireError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Bitmap bit set for a field the schema does not know
        - Non-digit length prefix or invalid UTF-8 text
        - Trailing bytes after the last field
    """

    pass


class SchemaError(FieldwireError):
    """Raised when a wire schema description is invalid.

    Examples:
        - Entry without a ``number:tag`` pair
        - Field number outside the bitmap
        - Unknown type tag or repeated field number
    """

    pass


class TransportError(FieldwireError):
    """Raised when a sink is used in an invalid state (e.g. write before open).

    Operating system errors (connection refused, permission denied, disk full)
    are not wrapped and propagate as ``OSError``.
    """

    pass
