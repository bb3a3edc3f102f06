"""Binary encoder for fieldwire messages.

Wire format of a message:

    [bitmap: 4 bytes, little-endian]  bit n set <=> field n present
    [value bytes of each present field, ascending field number]

Value encodings:

    N  2 bytes little-endian
    U  4 bytes little-endian
    S  3 ASCII digits (UTF-8 byte length, zero-padded) + UTF-8 bytes
    H  3 ASCII digits (byte count, zero-padded) + bytes
    D  1 ASCII digit (digit count mod 10) + 1 byte precision + ASCII digits

No separators or framing are written between fields.
"""

from __future__ import annotations

import logging
import struct

from ..exceptions import EncodeError, PayloadTooLarge
from ..models.message import Message
from ..models.values import (
    BlobValue,
    DecimalValue,
    FixedPointNumber,
    LongValue,
    ShortValue,
    TextValue,
    TypedValue,
)

logger = logging.getLogger(__name__)

# Text/blob length prefix: fixed number of ASCII digits
LENGTH_PREFIX_DIGITS = 3
MAX_PAYLOAD_LENGTH = 10**LENGTH_PREFIX_DIGITS - 1

BITMAP = struct.Struct("<I")
SHORT = struct.Struct("<H")
LONG = struct.Struct("<I")


def encode_value(value: TypedValue) -> bytes:
    """Encode a single typed value.

    Args:
        value: Value to encode

    Returns:
        The value's wire bytes

    Raises:
        PayloadTooLarge: If a text/blob payload is 1000 bytes or longer, or a
            decimal precision does not fit in one byte
        EncodeError: If ``value`` is not a known value type

    Example:
        >>> encode_value(ShortValue(value=42))
        b'*\\x00'
    """
    if isinstance(value, ShortValue):
        return SHORT.pack(value.value)

    if isinstance(value, LongValue):
        return LONG.pack(value.value)

    if isinstance(value, TextValue):
        return _length_prefixed(value.value.encode("utf-8"), "text")

    if isinstance(value, BlobValue):
        return _length_prefixed(value.value, "blob")

    if isinstance(value, DecimalValue):
        return _encode_decimal(value.value)

    raise EncodeError(f"Unsupported value type {type(value).__name__}")


def _length_prefixed(payload: bytes, kind: str) -> bytes:
    if len(payload) > MAX_PAYLOAD_LENGTH:
        raise PayloadTooLarge(
            f"{kind} payload of {len(payload)} bytes exceeds the "
            f"{LENGTH_PREFIX_DIGITS}-digit length prefix (max {MAX_PAYLOAD_LENGTH})"
        )
    prefix = f"{len(payload):0{LENGTH_PREFIX_DIGITS}d}".encode("ascii")
    return prefix + payload


def _encode_decimal(number: FixedPointNumber) -> bytes:
    count = len(number.digits)
    if count >= 10:
        # Only the last decimal digit of the count is written
        logger.warning(
            "Decimal %s has %d digits; its length digit %d is ambiguous",
            number,
            count,
            count % 10,
        )
    if number.precision > 0xFF:
        raise PayloadTooLarge(
            f"Decimal precision {number.precision} does not fit in one byte"
        )

    result = bytearray()
    result.extend(str(count % 10).encode("ascii"))
    result.append(number.precision)
    result.extend(number.digits.encode("ascii"))
    return bytes(result)


def build_bitmap(message: Message) -> int:
    """Build the 32-bit presence bitmap of a message.

    Bit ``n`` (bit 0 least significant) is set for every present field ``n``.

    Example:
        >>> from fieldwire.parsing import read_message
        >>> build_bitmap(read_message(["0 N 1", "2 N 1"]))
        5
    """
    bitmap = 0
    for number in message:
        bitmap |= 1 << number
    return bitmap


def serialize(message: Message) -> bytes:
    """Serialize a message to its wire bytes.

    Args:
        message: Message to serialize

    Returns:
        4-byte little-endian bitmap followed by the encoded values in
        ascending field-number order

    Raises:
        PayloadTooLarge: If any value cannot be encoded
    """
    result = bytearray(BITMAP.pack(build_bitmap(message)))
    for value in message.values():
        result.extend(encode_value(value))

    logger.debug("Serialized %d fields into %d bytes", len(message), len(result))
    return bytes(result)
