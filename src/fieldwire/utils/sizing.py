"""Message size calculation utilities.

This module provides functions to calculate the encoded size of values and
messages without actually encoding them.
"""

from __future__ import annotations

from ..codec.encoder import LENGTH_PREFIX_DIGITS
from ..exceptions import EncodeError
from ..models.message import Message
from ..models.values import (
    BlobValue,
    DecimalValue,
    LongValue,
    ShortValue,
    TextValue,
    TypedValue,
)

# Size of the presence bitmap in bytes
BITMAP_SIZE = 4


def value_size(value: TypedValue) -> int:
    """Calculate the encoded size of a single value in bytes.

    Size limits are not checked here: a 1000-byte text reports 1003 even
    though encoding it fails.

    Args:
        value: Value to measure

    Returns:
        Size in bytes

    Example:
        >>> value_size(TextValue(value="hello"))
        8
    """
    if isinstance(value, ShortValue):
        return 2
    if isinstance(value, LongValue):
        return 4
    if isinstance(value, TextValue):
        return LENGTH_PREFIX_DIGITS + len(value.value.encode("utf-8"))
    if isinstance(value, BlobValue):
        return LENGTH_PREFIX_DIGITS + len(value.value)
    if isinstance(value, DecimalValue):
        return 2 + len(value.value.digits)
    raise EncodeError(f"Unsupported value type {type(value).__name__}")


def encoded_size(message_or_value: Message | TypedValue) -> int:
    """Calculate the encoded size of a message or value in bytes.

    For a message this is the bitmap plus the size of every field.

    Args:
        message_or_value: Message or single value to measure

    Returns:
        Size in bytes

    Example:
        >>> from fieldwire.parsing import read_message
        >>> encoded_size(read_message(["0 N 42", "1 U 1000000"]))
        10
    """
    if isinstance(message_or_value, Message):
        return BITMAP_SIZE + sum(field_sizes(message_or_value).values())
    return value_size(message_or_value)


def field_sizes(message: Message) -> dict[int, int]:
    """Get the encoded size in bytes of each field in a message.

    Args:
        message: Message to analyze

    Returns:
        Dictionary mapping field numbers to their size in bytes, in wire order

    Example:
        >>> from fieldwire.parsing import read_message
        >>> field_sizes(read_message(["0 N 42", "2 S hello"]))
        {0: 2, 2: 8}
    """
    return {number: value_size(value) for number, value in message.items()}
