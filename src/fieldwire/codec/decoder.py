"""Binary decoder for fieldwire messages.

This module provides decode(), the inverse of serialize(). Since the wire
carries no type information, the caller supplies a WireSchema naming the
type of every field number that may appear.
"""

from __future__ import annotations

import logging

from ..exceptions import DecodeError
from ..models.field import Field
from ..models.message import BITMAP_WIDTH, Message
from ..models.values import (
    BlobValue,
    DecimalValue,
    FixedPointNumber,
    LongValue,
    ShortValue,
    TextValue,
    TypedValue,
)
from .encoder import LENGTH_PREFIX_DIGITS
from .reader import ByteReader
from .schema import WireSchema

logger = logging.getLogger(__name__)


def decode(data: bytes, schema: WireSchema) -> Message:
    """Decode wire bytes back into a Message.

    Args:
        data: Bytes produced by serialize()
        schema: Type tag of each field number

    Returns:
        The decoded message

    Raises:
        DecodeError: If data is truncated, corrupted, has trailing bytes, or
            sets a bitmap bit the schema does not declare

    Example:
        >>> data = bytes.fromhex("030000002a0040420f00")
        >>> message = decode(data, WireSchema.parse("0:N,1:U"))
        >>> message[1].value
        1000000
    """
    reader = ByteReader(data)

    try:
        bitmap = reader.read_uint_le(4)
    except IndexError as e:
        raise DecodeError(f"Truncated data while decoding bitmap: {e}") from e

    present = [number for number in range(BITMAP_WIDTH) if bitmap & (1 << number)]
    unknown = [number for number in present if number not in schema]
    if unknown:
        raise DecodeError(f"Bitmap sets fields {unknown} not declared in schema {schema}")

    message = Message()
    for number in present:
        try:
            value = decode_value(reader, schema.tag_for(number))
        except IndexError as e:
            raise DecodeError(f"Truncated data while decoding field {number}: {e}") from e
        except DecodeError as e:
            raise DecodeError(f"Error decoding field {number}: {e}") from e
        message.insert(Field(number=number, value=value))

    if reader.bytes_remaining():
        raise DecodeError(f"{reader.bytes_remaining()} trailing bytes after last field")

    logger.debug("Decoded %d fields from %d bytes", len(message), len(data))
    return message


def decode_value(reader: ByteReader, tag: str) -> TypedValue:
    """Decode a single value of the given type tag.

    Args:
        reader: ByteReader positioned at the value
        tag: Type tag of the value

    Returns:
        Decoded value

    Raises:
        DecodeError: If data is invalid
        IndexError: If data is truncated
    """
    if tag == "N":
        return ShortValue(value=reader.read_uint_le(2))

    if tag == "U":
        return LongValue(value=reader.read_uint_le(4))

    if tag == "S":
        raw = reader.read_bytes(_read_length_prefix(reader))
        try:
            return TextValue(value=raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise DecodeError(f"invalid UTF-8 encoding: {e}") from e

    if tag == "H":
        return BlobValue(value=reader.read_bytes(_read_length_prefix(reader)))

    if tag == "D":
        return DecimalValue(value=_decode_decimal(reader))

    raise DecodeError(f"unsupported type tag {tag!r}")


def _read_length_prefix(reader: ByteReader) -> int:
    prefix = reader.read_bytes(LENGTH_PREFIX_DIGITS)
    if not prefix.isdigit():
        raise DecodeError(f"invalid length prefix {prefix!r}")
    return int(prefix)


def _decode_decimal(reader: ByteReader) -> FixedPointNumber:
    length_digit = reader.read_bytes(1)
    if not length_digit.isdigit():
        raise DecodeError(f"invalid decimal length digit {length_digit!r}")

    count = int(length_digit)
    if count == 0:
        # Written for 10, 20, ... digits; the real count is not recoverable
        raise DecodeError("ambiguous decimal length digit 0")

    precision = reader.read_byte()
    digits = reader.read_bytes(count)
    if not digits.isdigit():
        raise DecodeError(f"invalid decimal digits {digits!r}")
    if precision > count:
        raise DecodeError(f"decimal precision {precision} exceeds digit count {count}")

    return FixedPointNumber(digits=digits.decode("ascii"), precision=precision)
