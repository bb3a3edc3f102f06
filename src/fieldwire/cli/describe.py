"""Message description CLI command."""

from __future__ import annotations

from pathlib import Path

from ..codec.decoder import decode
from ..codec.encoder import build_bitmap
from ..codec.schema import WireSchema
from ..models.message import Message
from ..models.values import BlobValue, TypedValue
from ..utils.sizing import BITMAP_SIZE, encoded_size, field_sizes


def describe_file(file_path: Path, schema: WireSchema) -> None:
    """Decode a stored message and print a field-by-field breakdown.

    Args:
        file_path: File holding one serialized message
        schema: Type tag of each field number

    Raises:
        OSError: If the file cannot be read
        DecodeError: If the contents do not match the schema
    """
    message = decode(file_path.read_bytes(), schema)
    print(f"{'=' * 19} {file_path.name} {'=' * 19}")
    describe_message(message)


def format_value(value: TypedValue) -> str:
    """Render a value the way it would be typed on an input line."""
    if isinstance(value, BlobValue):
        return value.value.hex()
    return str(value.value)


def describe_message(message: Message) -> None:
    """Print a breakdown of a message: bitmap, then one line per field.

    Args:
        message: Message to describe
    """
    bitmap = build_bitmap(message)
    sizes = field_sizes(message)

    print(f"{len(message)} field{'s' if len(message) != 1 else ''}, "
          f"{encoded_size(message)} bytes")
    print(f"        bitmap{'.' * 32}{BITMAP_SIZE} bytes 0x{bitmap:08x}")

    for number, value in message.items():
        field_desc = f"{number}. {value.tag}"
        size = f"{sizes[number]} bytes"
        dots = "." * max(1, 38 - len(field_desc) - len(size))
        print(f"        {field_desc}{dots}{size} {format_value(value)}")

    print()
